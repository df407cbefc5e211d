"""
exercises/palindrome.py

Palindrome checker. A string is a palindrome when its letters and digits read
the same forwards and backwards, ignoring case. Everything else (spaces,
punctuation, symbols such as ½ or ²) is skipped.
"""


def _is_letter_or_digit(ch: str) -> bool:
    # Letters (L*) and decimal digits (Nd) only
    return ch.isalpha() or ch.isdecimal()


def _fold(ch: str) -> str:
    # Some lower-case forms expand (İ -> i + U+0307); keep the base letter
    return ch.lower()[:1]


def is_palindrome(s: str) -> bool:
    """
    Check if a string is a palindrome using two cursors moving inward.

    Examples:
        >>> is_palindrome("A man, a plan, a canal: Panama")
        True
        >>> is_palindrome("hello")
        False
        >>> is_palindrome("")
        True
    """
    if not isinstance(s, str):
        raise TypeError(f"Expected str, got {type(s).__name__!r}")

    i = 0
    j = len(s) - 1
    while i < j:
        a = s[i]
        b = s[j]
        if not _is_letter_or_digit(a):
            i += 1
            continue
        if not _is_letter_or_digit(b):
            j -= 1
            continue
        if _fold(a) != _fold(b):
            return False
        i += 1
        j -= 1

    return True
