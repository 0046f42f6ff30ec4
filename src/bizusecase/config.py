from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULT_CONFIG_PATH = Path(os.getenv("BIZUSECASE_CONFIG", "config.yaml"))


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    with open(cfg_path, "r") as f:
        return yaml.safe_load(f) or {}


def generator_seed(cfg: Dict[str, Any]) -> int | None:
    seed = (cfg.get("generator") or {}).get("seed")
    return None if seed is None else int(seed)


__all__ = ["load_config", "generator_seed", "DEFAULT_CONFIG_PATH"]
