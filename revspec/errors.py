"""Exception types raised while parsing and resolving version specifications."""


class RevspecError(Exception):
    """Base class for every error this package raises on purpose."""


# Grammar errors


class VersionSpecError(RevspecError, ValueError):
    """A version specification does not match the grammar."""


class EmptySpecError(VersionSpecError):
    def __init__(self) -> None:
        super().__init__("empty specification")


class EmptyNameError(VersionSpecError):
    def __init__(self) -> None:
        super().__init__("empty name")


class AmbiguousTildeError(VersionSpecError):
    def __init__(self) -> None:
        super().__init__("ambiguous tilde: use ~N for version shift")


class MultipleAbsoluteSpecifiersError(VersionSpecError):
    def __init__(self) -> None:
        super().__init__("multiple absolute version specifiers")


class UnexpectedCharactersError(VersionSpecError):
    """Text left over after the last recognised specifier."""

    def __init__(self, text: str) -> None:
        super().__init__(f"unexpected characters: {text!r}")
        self.text = text


class ShiftOverflowError(VersionSpecError):
    def __init__(self, digits: str) -> None:
        super().__init__(f"version shift too large: ~{digits}")
        self.digits = digits


class InvalidSpecifierValueError(VersionSpecError):
    """An absolute specifier value was rejected by its store."""

    def __init__(self, value: str, reason: Exception) -> None:
        super().__init__(f"invalid specifier value {value!r}: {reason}")
        self.value = value


class InvalidSpecifierError(VersionSpecError):
    """A prefix character is not followed by a valid value."""

    message = "invalid specifier"

    def __init__(self) -> None:
        super().__init__(self.message)


class InvalidVersionNumberError(InvalidSpecifierError):
    message = "# must be followed by a version number"


class InvalidVersionIdError(InvalidSpecifierError):
    message = "# must be followed by a version ID"


class InvalidLabelError(InvalidSpecifierError):
    message = ": must be followed by a label"


# Diff argument errors


class DiffArgsError(RevspecError, ValueError):
    """Positional arguments of a diff command cannot be interpreted."""


class DiffUsageError(DiffArgsError):
    """Wrong number of diff arguments; the message is the usage line."""


class InvalidDiffArgumentError(DiffArgsError):
    """One side of the diff failed to parse."""

    def __init__(self, which: str, cause: VersionSpecError) -> None:
        super().__init__(f"{which}: {cause}")
        self.which = which


# Resolution errors


class ResolutionError(RevspecError, LookupError):
    """A specification does not match any stored revision."""


class RevisionNotFoundError(ResolutionError):
    def __init__(self, name: str) -> None:
        super().__init__(f"not found: {name}")
        self.name = name


class VersionKeyNotFoundError(ResolutionError):
    def __init__(self, key: int | str) -> None:
        super().__init__(f"version {key} not found")
        self.key = key


class LabelNotFoundError(ResolutionError):
    def __init__(self, label: str) -> None:
        super().__init__(f"staging label {label} not found")
        self.label = label


class ShiftOutOfRangeError(ResolutionError):
    def __init__(self, shift: int) -> None:
        super().__init__(f"version shift out of range: ~{shift}")
        self.shift = shift


# Collaborator errors


class ReadFailedError(RevspecError):
    """A call through the injected reader failed; the cause is chained."""


class StoreError(RevspecError):
    """The local YAML revision store cannot answer a request."""
