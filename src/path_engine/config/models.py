from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    heuristic: Literal["default", "weighted", "zero"] = "default"
    frontier: Literal["lazy", "skip_if_queued"] = "lazy"


# ----------------- GRAPHS ---------------------


class NodeSpecModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    x: float
    y: float
    weight: float = 0.0

    @field_validator("x", "y", "weight")
    @classmethod
    def _finite(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v):
            raise ValueError(f"{info.field_name} must be finite")
        return v

    @field_validator("weight")
    @classmethod
    def _nonneg(cls, v: float) -> float:
        if v < 0:
            raise ValueError("weight must be >= 0")
        return v


class ExplicitGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["explicit"] = "explicit"
    nodes: list[NodeSpecModel] = Field(default_factory=list)
    edges: list[tuple[int, int]] = Field(default_factory=list)  # indices into nodes
    directed: bool = False

    @model_validator(mode="after")
    def _check_edges(self):
        n = len(self.nodes)
        for u, v in self.edges:
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError(f"edge ({u}, {v}) references a node outside 0..{n - 1}")
        return self


class GridGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["grid"] = "grid"
    rows: int = Field(20, ge=1)
    cols: int = Field(26, ge=1)
    blocked: list[tuple[int, int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_blocked(self):
        for r, c in self.blocked:
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise ValueError(f"blocked cell ({r}, {c}) is outside {self.rows}x{self.cols}")
        return self


GraphUnion = Annotated[ExplicitGraphModel | GridGraphModel, Field(discriminator="kind")]


# ----------------- SCENARIO ---------------------


class ScenarioModel(BaseModel):
    """
    One search scenario: a graph, its endpoints and how to search it.
    Endpoints are node indices for explicit graphs and (row, col) pairs for grids.
    """

    model_config = ConfigDict(extra="forbid")
    name: str = "scenario"
    run_id: str = "local"
    log: LogModel = Field(default_factory=LogModel)
    search: SearchModel = Field(default_factory=SearchModel)
    graph: GraphUnion
    start: int | tuple[int, int]
    goal: int | tuple[int, int]

    @model_validator(mode="after")
    def _check_endpoints(self):
        for label in ("start", "goal"):
            v = getattr(self, label)
            if isinstance(self.graph, ExplicitGraphModel):
                if not isinstance(v, int) or not (0 <= v < len(self.graph.nodes)):
                    raise ValueError(f"{label} must be a node index, got {v!r}")
            elif not isinstance(v, tuple):
                raise ValueError(f"{label} must be a (row, col) pair on a grid, got {v!r}")
            elif not (0 <= v[0] < self.graph.rows and 0 <= v[1] < self.graph.cols):
                raise ValueError(f"{label} {v} is outside {self.graph.rows}x{self.graph.cols}")
        return self
