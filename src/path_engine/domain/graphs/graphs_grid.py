from collections.abc import Iterable, Iterator

import numpy as np

from path_engine.app.protocols import SearchGraph
from path_engine.domain.entities.geography import Cell, Point
from path_engine.domain.errors import UnknownNodeError

# up, down, left, right
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class GridGraph(SearchGraph):
    """
    Implicit 4-connected grid of ``rows`` x ``cols`` cells.
    Every move costs 1; the heuristic is Manhattan distance.
    Blocked cells are not part of the graph.
    """

    def __init__(self, rows: int, cols: int, blocked: Iterable[Cell] = ()):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        self.rows, self.cols = rows, cols
        self._blocked = np.zeros((rows, cols), dtype=bool)
        for c in blocked:
            if not self.in_bounds(c):
                raise ValueError(f"blocked cell {c} is outside the {rows}x{cols} grid")
            self._blocked[c.row, c.col] = True
        self._blocked.flags.writeable = False

    @classmethod
    def from_mask(cls, mask) -> "GridGraph":
        """Build from a 2D boolean array where True marks a blocked cell."""
        m = np.asarray(mask, dtype=bool)
        if m.ndim != 2:
            raise ValueError(f"mask must be 2D, got shape {m.shape}")
        rows, cols = m.shape
        return cls(rows, cols, (Cell(int(r), int(c)) for r, c in np.argwhere(m)))

    @property
    def blocked_mask(self) -> np.ndarray:
        return self._blocked

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    def is_blocked(self, cell: Cell) -> bool:
        return bool(self._blocked[cell.row, cell.col])

    def _require(self, node) -> Cell:
        if node not in self:
            raise UnknownNodeError(node)
        return node

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Cell) and self.in_bounds(node) and not self.is_blocked(node)

    def __len__(self) -> int:
        return int(self._blocked.size - self._blocked.sum())

    def __iter__(self) -> Iterator[Cell]:
        # open cells, row-major
        for r, c in np.argwhere(~self._blocked):
            yield Cell(int(r), int(c))

    # ------------- SearchGraph -----------------

    def neighbors(self, node):
        c = self._require(node)
        out = []
        for dr, dc in DIRECTIONS:
            n = Cell(c.row + dr, c.col + dc)
            if n in self:
                out.append(n)
        return tuple(out)

    def position(self, node) -> Point:
        return self._require(node).as_point()

    def distance(self, a, b):
        self._require(a)
        self._require(b)
        return 1.0

    def heuristic(self, node, goal):
        a, b = self._require(node), self._require(goal)
        return float(abs(a.row - b.row) + abs(a.col - b.col))

    def weight(self, node):
        self._require(node)
        return 0.0

    def __eq__(self, other):
        if not isinstance(other, GridGraph):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and bool(
            np.array_equal(self._blocked, other._blocked)
        )

    __hash__ = None
