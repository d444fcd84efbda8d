"""Named heuristic modes for the A* engine.

``default`` defers to the graph's own estimate (Euclidean for explicit graphs, Manhattan
for grids) and keeps A*'s optimality guarantee. ``weighted`` scales that estimate by
``1 + weight(node)``; it overestimates whenever a node carries weight, so paths found with
it are not guaranteed shortest. ``zero`` turns the search into Dijkstra.
"""

from path_engine.app.protocols import Heuristic, SearchGraph
from path_engine.domain.entities.geography import NodeId

_heuristic_registry: dict[str, Heuristic] = {}


def register_heuristic(name: str):
    def deco(fn: Heuristic):
        _heuristic_registry[name] = fn
        return fn

    return deco


def make_heuristic(name: str) -> Heuristic:
    try:
        return _heuristic_registry[name]
    except KeyError:
        raise ValueError(f"Unknown heuristic {name!r}") from None


def heuristic_names() -> list[str]:
    return sorted(_heuristic_registry)


@register_heuristic("default")
def default_heuristic(graph: SearchGraph, node: NodeId, goal: NodeId) -> float:
    return graph.heuristic(node, goal)


@register_heuristic("weighted")
def weighted_heuristic(graph: SearchGraph, node: NodeId, goal: NodeId) -> float:
    # not admissible for weight > 0
    return graph.heuristic(node, goal) * (1.0 + graph.weight(node))


@register_heuristic("zero")
def zero_heuristic(graph: SearchGraph, node: NodeId, goal: NodeId) -> float:
    return 0.0
