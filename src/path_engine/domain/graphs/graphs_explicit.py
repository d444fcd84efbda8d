from collections.abc import Iterable, Mapping
from types import MappingProxyType

from path_engine.app.protocols import SearchGraph
from path_engine.domain.entities.geography import NodeId, NodeRecord, Point
from path_engine.domain.errors import DanglingNeighborError, UnknownNodeError


class ExplicitGraph(SearchGraph):
    """
    Immutable snapshot of an arbitrary node/edge graph.
    Edge cost and heuristic are both the Euclidean distance between node positions.
    """

    def __init__(self, records: Mapping[NodeId, NodeRecord], *, validate: bool = True):
        self._nodes = MappingProxyType(dict(records))
        if validate:
            for nid, rec in self._nodes.items():
                if rec.weight < 0:
                    raise ValueError(f"node {nid!r} has negative weight {rec.weight}")
                for nb in rec.neighbors:
                    if nb not in self._nodes:
                        raise DanglingNeighborError(nid, nb)

    @classmethod
    def from_records(cls, records: Mapping[NodeId, NodeRecord], *, validate: bool = True):
        return cls(records, validate=validate)

    @classmethod
    def from_edges(
        cls,
        positions: Mapping[NodeId, Point],
        edges: Iterable[tuple[NodeId, NodeId]],
        *,
        weights: Mapping[NodeId, float] | None = None,
        directed: bool = False,
    ) -> "ExplicitGraph":
        """Build a snapshot from node positions and an edge list (insertion order kept)."""
        adj: dict[NodeId, list[NodeId]] = {nid: [] for nid in positions}
        for u, v in edges:
            for a, b in ((u, v),) if directed else ((u, v), (v, u)):
                if a not in adj:
                    raise UnknownNodeError(a)
                if b not in adj[a]:
                    adj[a].append(b)
        weights = weights or {}
        return cls(
            {
                nid: NodeRecord(
                    position=p, neighbors=tuple(adj[nid]), weight=float(weights.get(nid) or 0.0)
                )
                for nid, p in positions.items()
            }
        )

    # ------------- lookups -----------------

    def record(self, node: NodeId) -> NodeRecord:
        try:
            return self._nodes[node]
        except KeyError:
            raise UnknownNodeError(node) from None

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)

    def nodes(self) -> Mapping[NodeId, NodeRecord]:
        return self._nodes

    # ------------- SearchGraph -----------------

    def neighbors(self, node):
        return self.record(node).neighbors

    def position(self, node):
        return self.record(node).position

    def distance(self, a, b):
        return self.position(a).dist(self.position(b))

    def heuristic(self, node, goal):
        return self.distance(node, goal)

    def weight(self, node):
        return self.record(node).weight

    def __eq__(self, other):
        if not isinstance(other, ExplicitGraph):
            return NotImplemented
        return dict(self._nodes) == dict(other._nodes)

    __hash__ = None
