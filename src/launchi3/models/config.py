"""Application configuration model."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from launchi3.utils.persistence import PydanticPersistence

from .color import Color, parse_color
from .enums import MountSide, WorkspaceOrder

DEFAULT_CONFIG_PATH = Path.home() / ".launchi3" / "config.json"


def _default_class_colors() -> dict[str, Color]:
    """Colors for a few common application classes."""
    return {
        "Firefox": Color(r=0xFF, g=0x6A, b=0x11),
        "Emacs": Color(r=0xC1, g=0x33, b=0xFF),
        "Thunderbird": Color(r=0x1D, g=0x2D, b=0xB1),
        "Spotify": Color(r=0x28, g=0xFF, b=0x73),
        "discord": Color(r=0x51, g=0x71, b=0xFF),
        "Xfce4-terminal": Color(r=0x16, g=0x17, b=0x20),
    }


def _to_color(value: Any) -> Color:
    """Accept a hex string (from the file) or an already-built Color."""
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return parse_color(value)
    raise ValueError("color must be a six-digit hex string")


class AppConfig(BaseModel):
    """Application configuration, loaded once at startup."""

    model_config = ConfigDict(frozen=True)

    mount_side: MountSide = Field(
        default=MountSide.BOTTOM,
        description="Edge the Launchpad is mounted against (bottom, top, left, right)",
    )
    default_color: Color = Field(
        default_factory=lambda: Color(r=0x80, g=0x80, b=0x80),
        description="Color for windows whose class has no entry in 'colors'",
    )
    colors: dict[str, Color] = Field(
        default_factory=_default_class_colors,
        description="Window class to color (exact, case-sensitive match)",
    )
    title_colors: dict[str, Color] = Field(
        default_factory=dict,
        description="Window title to color (reserved, not used for rendering yet)",
    )
    poll_interval_ms: int = Field(
        default=5, ge=1, le=1000, description="Sleep between control-loop iterations (ms)"
    )
    workspace_order: WorkspaceOrder = Field(
        default=WorkspaceOrder.MANAGER,
        description="Column order: 'manager' (as reported by i3) or 'name' (sorted)",
    )

    @field_validator("default_color", mode="before")
    @classmethod
    def parse_default_color(cls, v: Any) -> Color:
        """Parse the default color from hex."""
        return _to_color(v)

    @field_validator("colors", "title_colors", mode="before")
    @classmethod
    def parse_color_table(cls, v: Any) -> Any:
        """Parse every value of a color table from hex."""
        if not isinstance(v, dict):
            return v
        return {key: _to_color(value) for key, value in v.items()}

    @field_serializer("default_color")
    def serialize_color(self, color: Color) -> str:
        """Serialize Color to hex."""
        return color.to_hex()

    @field_serializer("colors", "title_colors")
    def serialize_color_table(self, table: dict[str, Color]) -> dict[str, str]:
        """Serialize color tables to hex."""
        return {key: color.to_hex() for key, color in table.items()}

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.launchi3/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation (bad hex included)
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
