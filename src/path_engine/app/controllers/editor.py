# path_engine/app/controllers/editor.py
from dataclasses import dataclass

from path_engine.app.protocols import PathFinder
from path_engine.domain.entities.geography import Point
from path_engine.domain.entities.search import SearchResult
from path_engine.domain.graphs.graphs_explicit import ExplicitGraph
from path_engine.search.astar import AStar


@dataclass(eq=False)
class EditorNode:
    x: float
    y: float
    radius: float = 20.0
    is_start: bool = False
    is_end: bool = False
    on_path: bool = False
    weight: float | None = None  # label shown on the node; None until both ends are set

    @property
    def key(self) -> Point:
        return Point(self.x, self.y)

    def contains(self, x: float, y: float) -> bool:
        return self.key.dist(Point(x, y)) <= self.radius


@dataclass(eq=False)
class EditorEdge:
    start: EditorNode
    end: EditorNode
    on_path: bool = False

    def joins(self, a: EditorNode, b: EditorNode) -> bool:
        return (self.start is a and self.end is b) or (self.start is b and self.end is a)

    @property
    def length(self) -> float:
        return self.start.key.dist(self.end.key)


class GraphEditor:
    """
    Node/edge editor state behind the canvas pathfinder demo.

    Every topology change (node moved, edge added, endpoint picked) rebuilds the
    ExplicitGraph snapshot before searching; the snapshot is never patched in place.
    Nodes are identified in the snapshot by their position, so two nodes dropped on the
    same spot collapse into one graph node.
    """

    def __init__(self, finder: PathFinder | None = None, *, node_radius: float = 20.0):
        self.finder = finder or AStar()
        self.node_radius = node_radius
        self.nodes: list[EditorNode] = []
        self.edges: list[EditorEdge] = []
        self.start_node: EditorNode | None = None
        self.end_node: EditorNode | None = None
        self.last_result: SearchResult | None = None

    # ------------- topology -----------------

    def node_at(self, x: float, y: float) -> EditorNode | None:
        return next((n for n in self.nodes if n.contains(x, y)), None)

    def add_node(self, x: float, y: float) -> EditorNode:
        hit = self.node_at(x, y)
        if hit is not None:
            return hit
        node = EditorNode(x, y, radius=self.node_radius)
        self.nodes.append(node)
        return node

    def find_edge(self, a: EditorNode, b: EditorNode) -> EditorEdge | None:
        return next((e for e in self.edges if e.joins(a, b)), None)

    def add_edge(self, a: EditorNode, b: EditorNode) -> EditorEdge | None:
        if a is b:
            return None
        edge = self.find_edge(a, b)
        if edge is None:
            edge = EditorEdge(a, b)
            self.edges.append(edge)
            self.find_and_highlight_path()
        return edge

    def move_node(self, node: EditorNode, x: float, y: float) -> SearchResult | None:
        node.x, node.y = x, y
        self.recalculate_weights()
        return self.find_and_highlight_path()

    def neighbors_of(self, node: EditorNode) -> list[EditorNode]:
        out = []
        for e in self.edges:
            if e.start is node:
                out.append(e.end)
            elif e.end is node:
                out.append(e.start)
        return out

    # ------------- endpoints -----------------

    def set_start(self, node: EditorNode) -> SearchResult | None:
        for n in self.nodes:
            n.is_start = False
        node.is_start, node.is_end = True, False
        if self.end_node is node:
            self.end_node = None
        self.start_node = node
        self.recalculate_weights()
        self.reset_path()
        return self.find_and_highlight_path()

    def set_end(self, node: EditorNode) -> SearchResult | None:
        for n in self.nodes:
            n.is_end = False
        node.is_end, node.is_start = True, False
        if self.start_node is node:
            self.start_node = None
        self.end_node = node
        self.recalculate_weights()
        return self.find_and_highlight_path()

    def recalculate_weights(self) -> None:
        s, t = self.start_node, self.end_node
        if s is None or t is None:
            for n in self.nodes:
                n.weight = None
            return
        for n in self.nodes:
            if n is s:
                n.weight = 0.0
            elif n is t:
                n.weight = n.key.dist(s.key)
            else:
                n.weight = n.key.dist(s.key) + n.key.dist(t.key)

    # ------------- search -----------------

    def snapshot(self) -> ExplicitGraph:
        positions = {n.key: n.key for n in self.nodes}
        weights = {n.key: n.weight or 0.0 for n in self.nodes}
        edges = [(e.start.key, e.end.key) for e in self.edges if e.start.key != e.end.key]
        return ExplicitGraph.from_edges(positions, edges, weights=weights)

    def reset_path(self) -> None:
        for n in self.nodes:
            n.on_path = False
        for e in self.edges:
            e.on_path = False

    def find_and_highlight_path(self) -> SearchResult | None:
        if self.start_node is None or self.end_node is None:
            self.last_result = None
            return None

        graph = self.snapshot()
        result = self.finder.find_shortest_path(graph, self.start_node.key, self.end_node.key)
        self.reset_path()
        self.highlight(result)
        self.last_result = result
        return result

    def highlight(self, result: SearchResult) -> None:
        by_key: dict[Point, EditorNode] = {}
        for n in self.nodes:
            by_key.setdefault(n.key, n)

        if len(result.path) == 1:
            by_key[result.path[0]].on_path = True
        for u, v in result.pairs():
            a, b = by_key[u], by_key[v]
            a.on_path = b.on_path = True
            edge = self.find_edge(a, b)
            if edge is not None:
                edge.on_path = True

    def path_nodes(self) -> list[EditorNode]:
        return [n for n in self.nodes if n.on_path]

    def path_edges(self) -> list[EditorEdge]:
        return [e for e in self.edges if e.on_path]
