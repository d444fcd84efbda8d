import math
from collections.abc import Hashable
from dataclasses import dataclass

NodeId = Hashable


# Core geometry types used by graphs and consumers
@dataclass(frozen=True)
class Point:
    x: float  # canvas pixels for the editor, (row, col) for the grid
    y: float

    def dist(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True, order=True)
class Cell:
    row: int
    col: int

    def __str__(self) -> str:
        # canonical "row,col" form
        return f"{self.row},{self.col}"

    @classmethod
    def parse(cls, s: str) -> "Cell":
        r, c = s.split(",")
        return cls(int(r), int(c))

    def as_point(self) -> Point:
        return Point(float(self.row), float(self.col))


@dataclass(frozen=True)
class NodeRecord:
    position: Point
    neighbors: tuple[NodeId, ...] = ()
    weight: float = 0.0  # only the weighted heuristic reads it
