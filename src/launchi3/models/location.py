"""Addressable points on the Launchpad surface."""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import ButtonSide

GRID_SIZE = 8


class Pad(BaseModel):
    """One of the 64 grid pads. ``y = 0`` is the top row."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=0, lt=GRID_SIZE, description="Column (0-7, left to right)")
    y: int = Field(ge=0, lt=GRID_SIZE, description="Row (0-7, top to bottom)")

    @property
    def coords(self) -> tuple[int, int]:
        """Get (x, y) position as tuple."""
        return (self.x, self.y)


class Button(BaseModel):
    """One of the 16 side buttons (top strip or right strip)."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, lt=GRID_SIZE, description="Position along the strip (0-7)")
    side: ButtonSide = Field(description="Which strip the button belongs to")


Location = Union[Pad, Button]
