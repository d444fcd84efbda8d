# app/events.py
from dataclasses import dataclass


# Base type for analytics events emitted after a search completes
@dataclass
class SearchEvent:
    run_id: str
    seq: int  # search sequence within the run
    name: str  # stable event name
    start: str
    goal: str
    expanded: int


@dataclass
class PathFound(SearchEvent):
    path: list[str]
    cost: float


@dataclass
class PathNotFound(SearchEvent):
    reason: str = "exhausted"


def node_label(node) -> str:
    return str(node)
