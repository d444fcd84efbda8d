import math
from dataclasses import dataclass

from path_engine.domain.entities.geography import NodeId


@dataclass(frozen=True)
class SearchResult:
    path: tuple[NodeId, ...]  # empty => goal unreachable
    visited: tuple[NodeId, ...]  # expansion order, diagnostics only
    cost: float = math.inf

    @property
    def found(self) -> bool:
        return len(self.path) > 0

    def pairs(self):
        """Yield consecutive (u, v) pairs along the path."""
        return zip(self.path, self.path[1:])
