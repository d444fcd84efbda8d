# search/astar.py

import math
import time
from collections.abc import Sequence
from typing import Literal

from path_engine.app.protocols import Heuristic, PathFinder, SearchGraph
from path_engine.domain.entities.geography import NodeId
from path_engine.domain.entities.search import SearchResult
from path_engine.domain.errors import UnknownNodeError
from path_engine.search.heuristics import make_heuristic
from path_engine.search.hooks import NoopHooks, SearchHooks
from path_engine.search.priority_queue import PriorityQueue

Frontier = Literal["lazy", "skip_if_queued"]
FRONTIER_POLICIES: tuple[str, ...] = ("lazy", "skip_if_queued")


def _reconstruct(came_from: dict[NodeId, NodeId], current: NodeId) -> tuple[NodeId, ...]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return tuple(path)


def path_cost(graph: SearchGraph, path: Sequence[NodeId]) -> float:
    """Sum of edge costs along ``path``; raises ValueError on a non-adjacent pair."""
    total = 0.0
    for u, v in zip(path, path[1:]):
        if v not in graph.neighbors(u):
            raise ValueError(f"{v!r} is not a neighbor of {u!r}")
        total += graph.distance(u, v)
    return total


class AStar(PathFinder):
    """
    Best-first shortest-path search over any SearchGraph.

    The engine only holds configuration; every call builds its own frontier and
    score maps, so one instance can be reused across snapshots.

    Frontier policies:
      • "lazy": an improved node is always re-enqueued; stale copies are skipped when
        popped because the node is already finalized.
      • "skip_if_queued": an improved node is enqueued only if it is not already in the
        frontier, keeping its old priority otherwise. Cheaper per step, but the stale
        priority can make the returned path suboptimal.
    """

    def __init__(
        self,
        heuristic: str | Heuristic = "default",
        *,
        frontier: Frontier = "lazy",
        hooks: SearchHooks | None = None,
    ):
        if isinstance(heuristic, str):
            self.heuristic_name, self._h = heuristic, make_heuristic(heuristic)
        elif isinstance(heuristic, Heuristic):
            self.heuristic_name, self._h = getattr(heuristic, "__name__", "custom"), heuristic
        else:
            raise TypeError(f"heuristic must be a name or a callable, got {heuristic!r}")
        if frontier not in FRONTIER_POLICIES:
            raise ValueError(f"Unknown frontier policy {frontier!r}")
        self.frontier = frontier
        self._hooks = hooks or NoopHooks()

    def find_shortest_path(self, graph: SearchGraph, start: NodeId, goal: NodeId) -> SearchResult:
        for end in (start, goal):
            if end not in graph:
                self._hooks.error(reason="unknown_endpoint", node=end)
                raise UnknownNodeError(end)

        t0 = time.perf_counter()
        self._hooks.search_start(
            start=start, goal=goal, heuristic=self.heuristic_name, frontier=self.frontier
        )
        try:
            path, visited, g_score = self._search(graph, start, goal)
        except UnknownNodeError as exc:
            self._hooks.error(reason="unknown_node", node=exc.node)
            raise

        cost = g_score[goal] if path else math.inf
        self._hooks.search_end(
            start=start,
            goal=goal,
            path=path,
            cost=cost,
            expanded=len(visited),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return SearchResult(path=path, visited=tuple(visited), cost=cost)

    def _search(self, graph: SearchGraph, start: NodeId, goal: NodeId):
        h = self._h
        lazy = self.frontier == "lazy"

        open_set: PriorityQueue = PriorityQueue()
        open_set.enqueue(start, h(graph, start, goal))
        g_score: dict[NodeId, float] = {start: 0.0}
        came_from: dict[NodeId, NodeId] = {}
        closed: set[NodeId] = set()
        visited: list[NodeId] = []

        while open_set:
            current = open_set.dequeue()
            if current in closed:
                continue  # stale duplicate
            closed.add(current)
            visited.append(current)
            g_cur = g_score[current]
            self._hooks.expand(current, g=g_cur, seq=len(visited), qsize=len(open_set))

            if current == goal:
                return _reconstruct(came_from, current), visited, g_score

            for nb in graph.neighbors(current):
                tentative = g_cur + graph.distance(current, nb)
                if nb not in g_score or tentative < g_score[nb]:
                    came_from[nb] = current
                    g_score[nb] = tentative
                    # reopening only happens under an inconsistent heuristic
                    closed.discard(nb)
                    if lazy or not open_set.contains(nb):
                        open_set.enqueue(nb, tentative + h(graph, nb, goal))

        return (), visited, g_score


def find_shortest_path(
    graph: SearchGraph,
    start: NodeId,
    goal: NodeId,
    heuristic: str | Heuristic = "default",
    *,
    frontier: Frontier = "lazy",
    hooks: SearchHooks | None = None,
) -> SearchResult:
    return AStar(heuristic, frontier=frontier, hooks=hooks).find_shortest_path(graph, start, goal)
