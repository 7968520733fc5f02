"""The parsed form of a version specification."""

from dataclasses import dataclass, field

from revspec.absolute import Absolute, NoSelector, format_selector


@dataclass(frozen=True)
class Spec:
    """A name, an optional absolute selector and a cumulative shift."""

    name: str
    absolute: Absolute = field(default_factory=NoSelector)
    shift: int = 0  # revisions to go back from the resolved base

    @property
    def has_shift(self) -> bool:
        """Return True if a relative shift is requested."""
        return self.shift > 0


def default_spec(name: str) -> Spec:
    """Return the spec for the store's default revision of `name`."""
    return Spec(name=name)


def format_spec(spec: Spec) -> str:
    """Serialize a spec to canonical text that parses back to the same spec."""
    text = spec.name + format_selector(spec.absolute)
    if spec.has_shift:
        text += f"~{spec.shift}"
    return text
