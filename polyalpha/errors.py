"""
Key validation errors.

Both kinds are raised before any character of the text is processed.
They subclass ValueError so existing ``except ValueError`` callers keep
working.
"""


class VigenereKeyError(ValueError):
    """Base class for unusable Vigenère keys."""


class EmptyKeyError(VigenereKeyError):
    """The key is None or an empty string."""

    def __init__(self, message: str = "Key must not be empty."):
        super().__init__(message)


class KeyHasNoLettersError(VigenereKeyError):
    """The key contains no A-Z letter once normalized."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key must contain at least one letter (got {key!r}).")
