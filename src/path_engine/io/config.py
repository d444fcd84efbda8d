# src/path_engine/io/config.py
import json
import os
from pathlib import Path

from path_engine.config.models import ScenarioModel


def load_scenario(path: str | Path) -> ScenarioModel:
    p = Path(os.path.expandvars(os.path.expanduser(str(path))))
    with p.open("r", encoding="utf-8") as f:
        return ScenarioModel.model_validate(json.load(f))
