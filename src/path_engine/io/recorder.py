# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol, TypeVar

from path_engine.app.events import SearchEvent

log = logging.getLogger("path_engine.recorder")

E = TypeVar("E", bound=SearchEvent)


class Sink(Protocol):
    def write(self, ev: SearchEvent) -> None: ...


class JsonlSink:
    """One JSON object per line, in field order of the event dataclass."""

    def __init__(self, fp=sys.stdout, *, flush: bool = False):
        self.fp = fp
        self.flush = flush

    def write(self, ev: SearchEvent) -> None:
        self.fp.write(json.dumps(asdict(ev), default=str) + "\n")
        if self.flush:
            self.fp.flush()


class MemorySink:
    def __init__(self):
        self.events: list[SearchEvent] = []

    def write(self, ev: SearchEvent) -> None:
        self.events.append(ev)

    def of_type(self, kind: type[E]) -> list[E]:
        return [e for e in self.events if isinstance(e, kind)]

    @property
    def last(self) -> SearchEvent | None:
        return self.events[-1] if self.events else None


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)
        self.failures = 0

    def emit(self, ev: SearchEvent) -> None:
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                self.failures += 1
                log.exception("sink %s failed to write %s", type(s).__name__, ev.name)
