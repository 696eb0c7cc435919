"""Hex color parsing exceptions.

Both subclasses are also ``ValueError`` so pydantic field validators turn
them into ordinary validation errors while loading the config.
"""

from .base import Launchi3Error


class ParseHexError(Launchi3Error, ValueError):
    """A hex string could not be parsed."""
    pass


class InvalidHexLengthError(ParseHexError):
    """Hex string has the wrong number of characters."""

    def __init__(self, value: str, expected: int):
        """
        Args:
            value: The rejected string
            expected: Maximum (byte) or exact (color) length accepted
        """
        super().__init__(
            user_message=f"invalid length {len(value)}, must be {expected} characters",
            technical_message=f"Hex value {value!r} has length {len(value)}, expected {expected}",
        )
        self.value = value
        self.length = len(value)
        self.expected = expected


class InvalidHexCharacterError(ParseHexError):
    """Hex string contains a non-hex character."""

    def __init__(self, value: str, character: str, index: int):
        """
        Args:
            value: The rejected string
            character: The offending character
            index: Zero-based position of the character within the string
        """
        super().__init__(
            user_message=f"invalid character {character!r} at position {index}",
            technical_message=f"Hex value {value!r} has invalid character {character!r} at index {index}",
        )
        self.value = value
        self.character = character
        self.index = index
