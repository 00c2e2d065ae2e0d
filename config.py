from __future__ import annotations

import os
from pathlib import Path

# Project root (this file's directory). Every default path hangs off it.
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

DATA_DIR = os.environ.get("STATS_DATA_DIR") or os.path.join(BASE_DIR, "data")
LOG_DIR = os.environ.get("STATS_LOG_DIR") or os.path.join(BASE_DIR, "log")
STATIC_DIR = os.path.join(BASE_DIR, "static")

# Season files: "<DATA_PREFIX><n>.json"; the template lives at "<DEFAULT_SEASON_ID>.json".
DATA_PREFIX = os.environ.get("STATS_DATA_PREFIX") or "ow2_s"
DEFAULT_SEASON_ID = "data"

# Match logs: one "<LOG_FILE_PREFIX><YYYY-MM-DD><LOG_FILE_SUFFIX>" per UTC day.
LOG_FILE_PREFIX = "matches_"
LOG_FILE_SUFFIX = ".log"

HOST = os.environ.get("STATS_HOST") or "0.0.0.0"
PORT = int(os.environ.get("STATS_PORT") or 3000)
LOG_LEVEL = (os.environ.get("STATS_LOG_LEVEL") or "INFO").upper()


def index_page_path() -> Path:
    return Path(STATIC_DIR) / "index.html"
