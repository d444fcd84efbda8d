import io
import json
import logging

import pytest

from path_engine.app.events import PathFound, PathNotFound
from path_engine.domain.entities.geography import Cell
from path_engine.domain.errors import UnknownNodeError
from path_engine.domain.graphs.graphs_grid import GridGraph
from path_engine.io.recorder import JsonlSink, MemorySink, Recorder
from path_engine.io.search_logging import SearchLogging, _default_json_logger
from path_engine.search.astar import AStar


@pytest.fixture
def logger(caplog):
    caplog.set_level(logging.DEBUG, logger="test.search")
    return logging.getLogger("test.search")


def _msgs(caplog):
    return [r.getMessage() for r in caplog.records]


def test_lifecycle_records(logger, caplog):
    sink = MemorySink()
    hooks = SearchLogging(run_id="r1", logger=logger, recorder=Recorder(sink))
    AStar(hooks=hooks).find_shortest_path(GridGraph(3, 3), Cell(2, 0), Cell(0, 0))

    assert _msgs(caplog) == ["search_start", "search_end"]
    start, end = caplog.records
    assert start.extra["start"] == "2,0"
    assert start.extra["heuristic"] == "default"
    assert end.extra["found"] is True
    assert end.extra["path_len"] == 3
    assert end.extra["run_id"] == "r1"
    assert [type(e) for e in sink.events] == [PathFound]


def test_debug_expansions_are_sampled(logger, caplog):
    hooks = SearchLogging(logger=logger, debug=True, sample_every=2)
    res = AStar(hooks=hooks).find_shortest_path(GridGraph(1, 6), Cell(0, 0), Cell(0, 5))
    expands = [r for r in caplog.records if r.getMessage() == "expand"]
    assert len(res.visited) == 6
    assert [r.extra["seq"] for r in expands] == [2, 4, 6]
    assert all(r.levelno == logging.DEBUG for r in expands)


def test_failures_and_errors(logger, caplog):
    sink = MemorySink()
    hooks = SearchLogging(logger=logger, recorder=Recorder(sink))
    finder = AStar(hooks=hooks)
    g = GridGraph(3, 3, blocked=[Cell(0, 1), Cell(1, 0)])

    assert not finder.find_shortest_path(g, Cell(2, 2), Cell(0, 0)).found
    assert isinstance(sink.events[-1], PathNotFound)
    assert sink.events[-1].seq == 1

    with pytest.raises(UnknownNodeError):
        finder.find_shortest_path(g, Cell(2, 2), Cell(0, 1))
    err = caplog.records[-1]
    assert err.levelno == logging.ERROR
    assert err.getMessage() == "search_error"
    assert err.extra["reason"] == "unknown_endpoint"
    assert err.extra["node"] == "0,1"


def test_json_formatter_merges_extra_fields():
    log = _default_json_logger(name="path_engine.test_json")
    formatter = log.handlers[0].formatter
    record = log.makeRecord(
        log.name, logging.INFO, __file__, 1, "search_end", (), None, extra={"extra": {"k": 1}}
    )
    payload = json.loads(formatter.format(record))
    assert payload == {"level": "INFO", "msg": "search_end", "logger": log.name, "k": 1}


def test_recorder_survives_a_broken_sink(caplog):
    class Broken:
        def write(self, ev):
            raise OSError("disk full")

    good = MemorySink()
    rec = Recorder(Broken(), good)
    ev = PathNotFound(run_id="r", seq=1, name="PathNotFound", start="0", goal="3", expanded=2)
    rec.emit(ev)
    assert good.events == [ev]
    assert rec.failures == 1
    assert "Broken" in caplog.text


def test_memory_sink_filters_by_event_type():
    sink = MemorySink()
    assert sink.last is None
    miss = PathNotFound(run_id="r", seq=1, name="PathNotFound", start="0", goal="3", expanded=2)
    hit = PathFound(
        run_id="r", seq=2, name="PathFound", start="0", goal="1", expanded=2,
        path=["0", "1"], cost=1.0,
    )
    sink.write(miss)
    sink.write(hit)
    assert sink.of_type(PathFound) == [hit]
    assert sink.of_type(PathNotFound) == [miss]
    assert sink.last is hit


def test_jsonl_sink_writes_one_line_per_event():
    buf = io.StringIO()
    ev = PathNotFound(run_id="r", seq=1, name="PathNotFound", start="0", goal="3", expanded=2)
    JsonlSink(buf).write(ev)
    assert json.loads(buf.getvalue()) == {
        "run_id": "r",
        "seq": 1,
        "name": "PathNotFound",
        "start": "0",
        "goal": "3",
        "expanded": 2,
        "reason": "exhausted",
    }
