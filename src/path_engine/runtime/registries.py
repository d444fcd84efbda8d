# runtime/registries.py
from collections.abc import Callable

from path_engine.app.protocols import PathFinder, SearchGraph
from path_engine.config.models import (
    ExplicitGraphModel,
    GraphUnion,
    GridGraphModel,
    ScenarioModel,
    SearchModel,
)
from path_engine.domain.entities.geography import Cell, NodeId, Point
from path_engine.domain.graphs.graphs_explicit import ExplicitGraph
from path_engine.domain.graphs.graphs_grid import GridGraph
from path_engine.search.astar import AStar
from path_engine.search.hooks import SearchHooks

GraphFactory = Callable[[GraphUnion], SearchGraph]
EndpointFactory = Callable[[GraphUnion, object], NodeId]

_graph_registry: dict[str, GraphFactory] = {}
_endpoint_registry: dict[str, EndpointFactory] = {}


# ------------------- Graph registries ---------------------------


def register_graph(kind: str):
    def deco(fn: GraphFactory):
        _graph_registry[kind] = fn
        return fn

    return deco


def register_endpoint(kind: str):
    def deco(fn: EndpointFactory):
        _endpoint_registry[kind] = fn
        return fn

    return deco


def make_graph(cfg: GraphUnion) -> SearchGraph:
    try:
        return _graph_registry[cfg.kind](cfg)
    except KeyError:
        raise ValueError(f"Unknown graph kind {cfg.kind!r}") from None


def make_endpoints(cfg: ScenarioModel) -> tuple[NodeId, NodeId]:
    to_node = _endpoint_registry[cfg.graph.kind]
    return to_node(cfg.graph, cfg.start), to_node(cfg.graph, cfg.goal)


@register_graph("explicit")
def _make_explicit(cfg: ExplicitGraphModel):
    # node ids are indices into cfg.nodes
    return ExplicitGraph.from_edges(
        {i: Point(n.x, n.y) for i, n in enumerate(cfg.nodes)},
        cfg.edges,
        weights={i: n.weight for i, n in enumerate(cfg.nodes)},
        directed=cfg.directed,
    )


@register_endpoint("explicit")
def _explicit_endpoint(cfg: ExplicitGraphModel, v):
    return v


@register_graph("grid")
def _make_grid(cfg: GridGraphModel):
    return GridGraph(cfg.rows, cfg.cols, [Cell(r, c) for r, c in cfg.blocked])


@register_endpoint("grid")
def _grid_endpoint(cfg: GridGraphModel, v):
    r, c = v
    return Cell(r, c)


# --------------------- Path finders ---------------------


def make_path_finder(cfg: SearchModel, *, hooks: SearchHooks | None = None) -> PathFinder:
    return AStar(cfg.heuristic, frontier=cfg.frontier, hooks=hooks)
