"""
Coordinate rotation for the four mounting sides.

Logical coordinates are (workspace slot, window slot). Mounting the
Launchpad against another edge is the same as rotating the 8x8 grid, so
rendering applies ``rotate`` and input decoding applies ``unrotate``::

    BOTTOM  (x, y) -> (x, y)
    TOP     (x, y) -> (7 - x, 7 - y)
    LEFT    (x, y) -> (y, 7 - x)
    RIGHT   (x, y) -> (7 - y, x)

LEFT and RIGHT are quarter turns in opposite directions, so each undoes the
other; TOP undoes itself.
"""

from launchi3.models import GRID_SIZE, MountSide

_LAST = GRID_SIZE - 1

Coords = tuple[int, int]


def _left(x: int, y: int) -> Coords:
    return (y, _LAST - x)


def _right(x: int, y: int) -> Coords:
    return (_LAST - y, x)


def _half_turn(x: int, y: int) -> Coords:
    return (_LAST - x, _LAST - y)


def rotate(coords: Coords, side: MountSide) -> Coords:
    """Map logical coordinates to physical grid coordinates."""
    x, y = coords
    if side == MountSide.TOP:
        return _half_turn(x, y)
    if side == MountSide.LEFT:
        return _left(x, y)
    if side == MountSide.RIGHT:
        return _right(x, y)
    return (x, y)


def unrotate(coords: Coords, side: MountSide) -> Coords:
    """Map physical grid coordinates back to logical coordinates."""
    x, y = coords
    if side == MountSide.TOP:
        return _half_turn(x, y)
    if side == MountSide.LEFT:
        return _right(x, y)
    if side == MountSide.RIGHT:
        return _left(x, y)
    return (x, y)
