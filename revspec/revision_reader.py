"""The read capability the resolver consumes."""

from typing import Protocol

from revspec.absolute import Absolute
from revspec.revision import Revision


class RevisionReader(Protocol):
    """Read access to a store of revisioned values.

    Implementations talk to the backing store; any exception they raise is
    reported by the resolver as a read failure.
    """

    def get_exact(self, name: str, selector: Absolute) -> Revision:
        """Return the revision `selector` pins, or the default for NoSelector."""
        ...

    def get_history(self, name: str) -> list[Revision]:
        """Return every known revision of `name`, in no particular order."""
        ...
