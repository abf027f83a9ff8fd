"""Palindrome check."""


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same forwards and backwards, character for character."""
    return text == text[::-1]