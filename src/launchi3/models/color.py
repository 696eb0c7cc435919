"""Color model for LED control and hex color parsing."""

from pydantic import BaseModel, ConfigDict, Field

from launchi3.exceptions import InvalidHexCharacterError, InvalidHexLengthError

HEX_DIGITS = "0123456789abcdefABCDEF"


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Uses standard 8-bit RGB (0-255) as the application's color representation.
    Device-specific conversions (6-bit for the MK2, 7-bit for the MK3 family)
    are handled by device adapters.

    The model is frozen so colors can be shared between buffers and used as
    dictionary values in the frozen config.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a six-digit hex string such as ``"FF34A8"``."""
        return parse_color(value)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_7bit(self) -> tuple[int, int, int]:
        """Convert to 7-bit RGB for MK3 SysEx messages.

        Example:
            >>> Color(r=255, g=128, b=0).to_7bit()
            (127, 64, 0)
        """
        return (self.r >> 1, self.g >> 1, self.b >> 1)

    def to_6bit(self) -> tuple[int, int, int]:
        """Convert to 6-bit RGB for MK2 SysEx messages.

        Example:
            >>> Color(r=255, g=128, b=0).to_6bit()
            (63, 32, 0)
        """
        return (self.r >> 2, self.g >> 2, self.b >> 2)

    def to_hex(self) -> str:
        """Convert to the config file's hex format (e.g., 'FF0000')."""
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"


def parse_hex(value: str) -> int:
    """
    Parse a single byte written as one or two hex digits.

    Args:
        value: Hex digits, upper or lower case

    Returns:
        Byte value (0-255)

    Raises:
        InvalidHexLengthError: If value is empty or longer than 2 characters
        InvalidHexCharacterError: If a character is not a hex digit
    """
    if not 1 <= len(value) <= 2:
        raise InvalidHexLengthError(value, expected=2)

    result = 0
    for index, character in enumerate(value):
        if character not in HEX_DIGITS:
            raise InvalidHexCharacterError(value, character, index)
        result = result * 16 + int(character, 16)

    return result


def parse_color(value: str) -> Color:
    """
    Parse a six-digit hex color such as ``"FF34A8"``.

    Character errors report the index within the full six-character string.

    Raises:
        InvalidHexLengthError: If value is not exactly 6 characters
        InvalidHexCharacterError: If a character is not a hex digit
    """
    if len(value) != 6:
        raise InvalidHexLengthError(value, expected=6)

    channels = []
    for offset in (0, 2, 4):
        try:
            channels.append(parse_hex(value[offset:offset + 2]))
        except InvalidHexCharacterError as e:
            raise InvalidHexCharacterError(value, e.character, e.index + offset) from None

    r, g, b = channels
    return Color(r=r, g=g, b=b)
