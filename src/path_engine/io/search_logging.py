# io/search_logging.py
import json
import logging
import math
import sys

from path_engine.app.events import PathFound, PathNotFound, node_label
from path_engine.io.recorder import Recorder
from path_engine.search.hooks import NoopHooks


def _default_json_logger(name="path_engine", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for search lifecycle plus PathFound/PathNotFound business events.
    Per-expansion lines are DEBUG only and sampled every ``sample_every`` expansions.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._searches = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, "search": self._searches}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------------------------------------------------

    def search_start(self, *, start, goal, heuristic, frontier):
        self._searches += 1
        self._emit(
            "INFO",
            "search_start",
            start=node_label(start),
            goal=node_label(goal),
            heuristic=heuristic,
            frontier=frontier,
        )

    def expand(self, node, *, g, seq, qsize):
        if self.debug and (seq % self.sample_every) == 0:
            self._emit("DEBUG", "expand", node=node_label(node), g=g, seq=seq, qsize=qsize)

    def search_end(self, *, start, goal, path, cost, expanded, wall_ms):
        found = len(path) > 0
        self._emit(
            "INFO",
            "search_end",
            found=found,
            path_len=len(path),
            cost=cost if math.isfinite(cost) else None,
            expanded=expanded,
            wall_ms=round(wall_ms, 3),
        )
        common = dict(
            run_id=self.run_id,
            seq=self._searches,
            start=node_label(start),
            goal=node_label(goal),
            expanded=expanded,
        )
        if found:
            labels = [node_label(n) for n in path]
            self.biz(PathFound(name="PathFound", path=labels, cost=cost, **common))
        else:
            self.biz(PathNotFound(name="PathNotFound", **common))

    def error(self, *, reason: str, **kw):
        fields = {k: node_label(v) for k, v in kw.items()}
        self._emit("ERROR", "search_error", reason=reason, **fields)

    # ------------- Business Event Reporting --------------------------

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)
