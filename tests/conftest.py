"""
Shared fixtures: temporary-directory season store and match logger,
a frozen clock, and a TestClient wired to both.
"""

import datetime as dt
import json

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.stats_facade import get_match_logger, get_season_store
from match_log import MatchLogger
from season_store import SeasonStore


FROZEN_NOW = dt.datetime(2024, 5, 1, 18, 22, 3, 456000, tzinfo=dt.timezone.utc)


def make_tree(won=0, lost=0, draw=0):
    """All Maps > Push > Colosseo > won/lost/draw."""
    return {
        "name": "All Maps",
        "children": [
            {
                "name": "Push",
                "children": [
                    {
                        "name": "Colosseo",
                        "children": [
                            {"name": "won", "size": won},
                            {"name": "lost", "size": lost},
                            {"name": "draw", "size": draw},
                        ],
                    }
                ],
            }
        ],
    }


@pytest.fixture
def frozen_now():
    return FROZEN_NOW


@pytest.fixture
def tree_factory():
    return make_tree


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    (path / "data.json").write_text(json.dumps(make_tree()), encoding="utf-8")
    return path


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "log"


@pytest.fixture
def store(data_dir):
    return SeasonStore(data_dir, prefix="ow2_s", template_id="data")


@pytest.fixture
def match_logger(log_dir):
    return MatchLogger(log_dir, clock=lambda: FROZEN_NOW)


@pytest.fixture
def client(store, match_logger):
    app.dependency_overrides[get_season_store] = lambda: store
    app.dependency_overrides[get_match_logger] = lambda: match_logger
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
