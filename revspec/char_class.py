"""Character predicates shared by every stage of version-spec parsing."""


def is_digit(c: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return "0" <= c <= "9"


def is_letter(c: str) -> bool:
    """Return True for an ASCII letter."""
    return "a" <= c <= "z" or "A" <= c <= "Z"


def is_id_char(c: str) -> bool:
    """Return True for a character allowed inside a version ID."""
    return is_letter(c) or is_digit(c) or c == "-"


def is_label_char(c: str) -> bool:
    """Return True for a character allowed inside a staging label."""
    return is_letter(c) or is_digit(c) or c in "-_"
