"""Entry point for running revspec from a source checkout."""

from revspec.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
