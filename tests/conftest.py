import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from bizusecase.config import load_config
from bizusecase.engine import UseCase, UseCaseGenerator


class PickIndex:
    """Stands in for ``random.Random``: always picks the same candidate position."""

    def __init__(self, index: int):
        self.index = index

    def choice(self, seq):
        return seq[min(self.index, len(seq) - 1)]


@pytest.fixture(scope="session")
def config_path() -> Path:
    return ROOT / "config.yaml"


@pytest.fixture(scope="session")
def cfg(config_path):
    return load_config(config_path)


@pytest.fixture
def generator():
    return UseCaseGenerator(rng=random.Random(1234))


@pytest.fixture
def first_pick_generator():
    return UseCaseGenerator(rng=PickIndex(0))


@pytest.fixture
def last_pick_generator():
    return UseCaseGenerator(rng=PickIndex(99))


@pytest.fixture
def make_use_case():
    def _make(priority="medium", feasibility="moderate", benefits=(), requirements=()):
        uc = UseCase("Test", "Domain", "Description", list(benefits), list(requirements))
        return uc.set_priority(priority).set_feasibility(feasibility)

    return _make


@pytest.fixture
def client(monkeypatch, config_path):
    from fastapi.testclient import TestClient

    monkeypatch.setenv("BIZUSECASE_CONFIG", str(config_path))
    from api.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="session")
def script_module():
    import importlib.util

    def _load(name: str):
        script_path = ROOT / "scripts" / f"{name}.py"
        spec = importlib.util.spec_from_file_location(name, script_path)
        module = importlib.util.module_from_spec(spec)
        assert spec.loader is not None
        spec.loader.exec_module(module)
        return module

    return _load


@pytest.fixture(scope="session")
def pick_index():
    return PickIndex
