# path_engine/app/build.py
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from path_engine.app.protocols import PathFinder, SearchGraph
from path_engine.config.models import ScenarioModel
from path_engine.domain.entities.geography import NodeId
from path_engine.domain.entities.search import SearchResult
from path_engine.io.recorder import JsonlSink, Recorder, Sink
from path_engine.io.search_logging import SearchLogging  # JSON logs
from path_engine.runtime.registries import make_endpoints, make_graph, make_path_finder
from path_engine.search.hooks import NoopHooks, SearchHooks


@dataclass
class App:
    model: ScenarioModel
    graph: SearchGraph
    finder: PathFinder
    hooks: SearchHooks
    recorder: Recorder | None
    start: NodeId
    goal: NodeId

    def run(self) -> SearchResult:
        return self.finder.find_shortest_path(self.graph, self.start, self.goal)


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    sinks: Sequence[Sink] | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks & recorder
    recorder = Recorder(*(sinks or [JsonlSink()])) if use_logging else None
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Graph snapshot & endpoints
    graph = make_graph(model.graph)
    start, goal = make_endpoints(model)

    # 3) Engine
    finder = make_path_finder(model.search, hooks=hooks)

    return App(model, graph, finder, hooks, recorder, start, goal)
