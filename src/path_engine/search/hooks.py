# search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def search_start(self, *, start, goal, heuristic, frontier): ...
    def expand(self, node, *, g, seq, qsize): ...
    def search_end(self, *, start, goal, path, cost, expanded, wall_ms): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
