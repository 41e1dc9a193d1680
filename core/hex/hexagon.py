"""
Map Reference: One cell of the star map grid.
Purpose: Hexagon geometry, logical coordinate and hover/selection flags.
Dependencies: dataclasses, typing.
Ext Hooks: Per-cell payload (system name, owner).
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Coord:
    row: int
    column: int  # 1-based, skip-adjusted


class Hexagon:
    """A pointy-top hexagon centered on ``position`` inside a ``size`` box.

    Geometry and coordinate never change after construction; only the
    ``active`` and ``selected`` flags are mutated by the input handler.
    """

    def __init__(self, x, y, width, height, row, column):
        self._position = Point(x, y)
        self._size = Size(width, height)
        self._coord = Coord(row, column)
        self.active = False
        self.selected = False

    @property
    def position(self) -> Point:
        return self._position

    @property
    def size(self) -> Size:
        return self._size

    @property
    def coord(self) -> Coord:
        return self._coord

    def corners(self) -> List[Tuple[float, float]]:
        """Polygon corners in world space, clockwise from the top."""
        x, y = self._position.x, self._position.y
        hw = self._size.width / 2
        hh = self._size.height / 2
        qh = self._size.height / 4
        return [
            (x, y - hh),
            (x + hw, y - qh),
            (x + hw, y + qh),
            (x, y + hh),
            (x - hw, y + qh),
            (x - hw, y - qh),
        ]

    def is_in(self, x: float, y: float) -> bool:
        """Point-in-polygon test; points on an edge count as inside."""
        corners = self.corners()
        for i in range(len(corners)):
            ax, ay = corners[i]
            bx, by = corners[(i + 1) % len(corners)]
            # Clockwise on a y-down screen: the interior is on the right
            # of every edge, so the cross product must not go negative.
            cross = (bx - ax) * (y - ay) - (by - ay) * (x - ax)
            if cross < 0:
                return False
        return True

    def __repr__(self):
        return (f"Hexagon(row={self._coord.row}, column={self._coord.column}, "
                f"x={self._position.x}, y={self._position.y})")
