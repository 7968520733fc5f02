"""Run the command line interface with `python -m revspec`."""

from revspec.cli import main

raise SystemExit(main())
