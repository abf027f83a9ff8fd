"""Small classes and functions with well-defined behaviour, for practising unit testing, TDD and mocking."""

__version__ = "0.1.0"

__all__ = [
    "complex_number",
    "coverage_map",
    "fixed_string",
    "fizzbuzz",
    "growable_string",
    "int_set",
    "palindrome",
    "session",
    "stack",
    "videostore",
]