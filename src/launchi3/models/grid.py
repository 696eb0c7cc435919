"""In-memory image of everything the Launchpad should display."""

from pydantic import BaseModel, Field

from .color import Color
from .enums import ButtonSide
from .location import GRID_SIZE, Button, Location, Pad

TOTAL_CELLS = GRID_SIZE * GRID_SIZE + 2 * GRID_SIZE


def _create_default_grid() -> list[list[Color]]:
    """Create an all-black 8x8 grid, indexed grid[y][x]."""
    return [[Color.off() for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


def _create_default_strip() -> list[Color]:
    """Create an all-black 8-button strip."""
    return [Color.off() for _ in range(GRID_SIZE)]


class GridBuffer(BaseModel):
    """
    Colors for the 8x8 grid plus the top and right button strips.

    Two buffers compare equal when all 80 cells hold the same color, which
    is what the control loop uses to skip redundant hardware writes.
    """

    grid: list[list[Color]] = Field(
        default_factory=_create_default_grid, description="8x8 pad colors, indexed [y][x]"
    )
    top_buttons: list[Color] = Field(
        default_factory=_create_default_strip, description="Top strip colors"
    )
    right_buttons: list[Color] = Field(
        default_factory=_create_default_strip, description="Right strip colors"
    )

    def set(self, location: Location, color: Color) -> None:
        """Set the color of exactly one cell."""
        if isinstance(location, Pad):
            self.grid[location.y][location.x] = color
        elif location.side == ButtonSide.TOP:
            self.top_buttons[location.index] = color
        else:
            self.right_buttons[location.index] = color

    def get(self, location: Location) -> Color:
        """Get the color of one cell."""
        if isinstance(location, Pad):
            return self.grid[location.y][location.x]
        if location.side == ButtonSide.TOP:
            return self.top_buttons[location.index]
        return self.right_buttons[location.index]

    def to_write_list(self) -> list[tuple[Location, Color]]:
        """
        Build the full 80-entry refresh for the hardware.

        Order: grid row-major (y outer, x inner), then the top strip,
        then the right strip.
        """
        writes: list[tuple[Location, Color]] = []

        for y in range(GRID_SIZE):
            for x in range(GRID_SIZE):
                writes.append((Pad(x=x, y=y), self.grid[y][x]))

        for i in range(GRID_SIZE):
            writes.append((Button(index=i, side=ButtonSide.TOP), self.top_buttons[i]))

        for i in range(GRID_SIZE):
            writes.append((Button(index=i, side=ButtonSide.RIGHT), self.right_buttons[i]))

        return writes
