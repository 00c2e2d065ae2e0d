from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from save_service import create_season
from season_store import SeasonStore
from app.schemas.seasons import SeasonCreateRequest, SeasonSummary
from app.services.stats_facade import get_season_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/seasons", response_model=List[SeasonSummary])
async def api_list_seasons(store: SeasonStore = Depends(get_season_store)):
    try:
        return store.list_seasons()
    except Exception:
        logger.exception("Failed to list seasons")
        raise HTTPException(status_code=500, detail="Failed to get seasons")


@router.post("/api/seasons")
async def api_create_season(req: SeasonCreateRequest, store: SeasonStore = Depends(get_season_store)):
    try:
        return create_season(store=store, season_number=req.seasonNumber)
    except Exception:
        logger.exception("Failed to create season %r", req.seasonNumber)
        raise HTTPException(status_code=500, detail="Failed to create season")
