# path_engine/app/controllers/grid_board.py
import math
from collections import deque
from collections.abc import Iterable
from typing import Literal

from path_engine.app.protocols import PathFinder
from path_engine.domain.entities.geography import Cell
from path_engine.domain.entities.search import SearchResult
from path_engine.domain.graphs.graphs_grid import GridGraph
from path_engine.search.astar import AStar

Direction = Literal["up", "down", "left", "right"]

_STEPS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


class GridBoard:
    """
    Grid game state behind click-to-move: the player walks the A* route to the
    clicked cell, one cell every ``move_delay_ms``.
    """

    def __init__(
        self,
        rows: int = 20,
        cols: int = 26,
        *,
        blocked: Iterable[Cell] = (),
        finder: PathFinder | None = None,
        move_delay_ms: float = 600.0,
        cell_size: float = 1.0,
    ):
        self.rows, self.cols = rows, cols
        self.blocked = frozenset(blocked)
        # validates board size and blocked cells up front
        self.graph = GridGraph(rows, cols, self.blocked)
        self.finder = finder or AStar()
        self.move_delay_ms = move_delay_ms
        self.cell_size = cell_size
        self.player = Cell(rows - 1, cols // 2)
        self.route: deque[Cell] = deque()
        self.on_path: set[Cell] = set()
        self.last_result: SearchResult | None = None
        self._move_timer = 0.0

    @classmethod
    def for_canvas(cls, width: float = 800, height: float = 600, rows: int = 20, **kw):
        """Size the grid to a canvas: ``rows`` fixed, columns follow the aspect ratio."""
        cols = math.floor(rows * (width / height))
        return cls(rows, cols, cell_size=width / cols, **kw)

    def cell_at(self, x: float, y: float) -> Cell:
        return Cell(math.floor(y / self.cell_size), math.floor(x / self.cell_size))

    def snapshot(self) -> GridGraph:
        return self.graph

    # ------------- path following -----------------

    def click(self, target: Cell) -> SearchResult:
        result = self.finder.find_shortest_path(self.snapshot(), self.player, target)
        # first cell is where the player already stands
        self.route = deque(result.path[1:])
        self.on_path = set(result.path)
        self._move_timer = 0.0
        self.last_result = result
        return result

    def step(self, dt_ms: float) -> Cell | None:
        self._move_timer += dt_ms
        if self.route and self._move_timer >= self.move_delay_ms:
            self.on_path.discard(self.player)
            self.player = self.route.popleft()
            self._move_timer = 0.0
            return self.player
        return None

    def move_in_direction(self, direction: Direction) -> Cell:
        dr, dc = _STEPS[direction]
        nxt = Cell(self.player.row + dr, self.player.col + dc)
        if nxt in self.graph:
            self.player = nxt
            self.route.clear()
            self.on_path.clear()
        return self.player

    @property
    def walking(self) -> bool:
        return bool(self.route)
