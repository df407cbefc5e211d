"""
exercises/pairs.py

Split a string into consecutive pairs of characters. When the string has an
odd number of characters, the missing second character of the final pair is
replaced with a filler (an underscore by default).
"""

DEFAULT_FILLER = "_"


def validate_filler(filler: str) -> str:
    """Return *filler* unchanged, or raise if it is not a single character."""
    if not isinstance(filler, str):
        raise TypeError(f"Filler must be a str, got {type(filler).__name__!r}")
    if len(filler) != 1:
        raise ValueError(f"filler must be a single character, got {filler!r}")
    return filler


def split_into_pairs(s: str, filler: str = DEFAULT_FILLER) -> list[str]:
    """
    Split *s* into two-character chunks, left to right.

    Args:
        s: The string to split.
        filler: Single character appended when len(s) is odd.

    Returns:
        A list of two-character strings. Empty input gives an empty list.

    Raises:
        TypeError: If *s* or *filler* is not a string.
        ValueError: If *filler* is not exactly one character.

    Examples:
        >>> split_into_pairs("1234")
        ['12', '34']
        >>> split_into_pairs("123")
        ['12', '3_']
    """
    if not isinstance(s, str):
        raise TypeError(f"Expected str, got {type(s).__name__!r}")
    validate_filler(filler)

    if len(s) % 2:
        s += filler
    return [s[i:i + 2] for i in range(0, len(s), 2)]
