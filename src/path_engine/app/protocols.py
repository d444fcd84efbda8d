from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from path_engine.domain.entities.geography import NodeId, Point
from path_engine.domain.entities.search import SearchResult


# ------------- Graphs --------------------
@runtime_checkable
class SearchGraph(Protocol):
    """
    Read-only snapshot the search engine walks.
    Responsibilities:
      • Enumerate adjacent node ids.
      • Report node positions and per-edge costs.
      • Estimate remaining cost to a goal (admissible for the default heuristic).
    Looking up an id that is not in the snapshot must raise UnknownNodeError.
    """

    def __contains__(self, node: object) -> bool: ...
    def neighbors(self, node: NodeId) -> Sequence[NodeId]: ...
    def position(self, node: NodeId) -> Point: ...
    def distance(self, a: NodeId, b: NodeId) -> float: ...
    def heuristic(self, node: NodeId, goal: NodeId) -> float: ...
    def weight(self, node: NodeId) -> float: ...


@runtime_checkable
class Heuristic(Protocol):
    """Remaining-cost estimate used as the frontier priority offset."""

    def __call__(self, graph: SearchGraph, node: NodeId, goal: NodeId) -> float: ...


# ------------- Search --------------------
@runtime_checkable
class PathFinder(Protocol):
    def find_shortest_path(self, graph: SearchGraph, start: NodeId, goal: NodeId) -> SearchResult:
        """Run to completion; an empty path means the goal is unreachable."""
