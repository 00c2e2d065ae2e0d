from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from config import DEFAULT_SEASON_ID
from match_log import MatchLogger
from save_service import save_season_document
from season_store import SeasonStore
from app.services.stats_facade import get_match_logger, get_season_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/data")
@router.get("/api/data/{season}")
async def api_load_data(season: str = DEFAULT_SEASON_ID, store: SeasonStore = Depends(get_season_store)):
    try:
        return store.load(season)
    except Exception:
        logger.exception("Failed to read data file for season %r", season)
        raise HTTPException(status_code=500, detail="Failed to read data file")


@router.post("/api/data")
@router.post("/api/data/{season}")
async def api_save_data(
    document: Any = Body(...),
    season: str = DEFAULT_SEASON_ID,
    store: SeasonStore = Depends(get_season_store),
    match_logger: MatchLogger = Depends(get_match_logger),
):
    try:
        return save_season_document(
            store=store,
            match_logger=match_logger,
            season_id=season,
            document=document,
        )
    except Exception:
        logger.exception("Error saving JSON file for season %r", season)
        raise HTTPException(status_code=500, detail="Failed to save data file")
