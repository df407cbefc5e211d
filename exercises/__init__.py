from .palindrome import is_palindrome
from .pairs import split_into_pairs, validate_filler, DEFAULT_FILLER

__all__ = ["is_palindrome", "split_into_pairs", "validate_filler", "DEFAULT_FILLER"]
