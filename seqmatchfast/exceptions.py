"""Exceptions raised by SeqMatchFast."""


class ConfigurationError(ValueError):
    """A matcher cannot be built from the given pattern and parameters.

    Raised when a pattern symbol lies outside the alphabet, when a pattern
    is longer than the Shift-Or word, or when a width parameter is out of
    range. "Pattern not found" is never an error: searches return the text
    length instead.
    """
