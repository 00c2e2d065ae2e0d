from __future__ import annotations

import logging
from functools import lru_cache

import config
from match_log import MatchLogger
from season_store import SeasonStore

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_season_store() -> SeasonStore:
    """Process-wide store built from config. Tests swap it via dependency_overrides."""
    logger.info("Season data directory: %s", config.DATA_DIR)
    return SeasonStore(config.DATA_DIR, prefix=config.DATA_PREFIX, template_id=config.DEFAULT_SEASON_ID)


@lru_cache(maxsize=1)
def get_match_logger() -> MatchLogger:
    logger.info("Match logs will be saved to: %s", config.LOG_DIR)
    return MatchLogger(
        config.LOG_DIR,
        file_prefix=config.LOG_FILE_PREFIX,
        file_suffix=config.LOG_FILE_SUFFIX,
    )
