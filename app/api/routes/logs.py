from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from match_log import MatchLogger, log_date_iso
from app.services.stats_facade import get_match_logger

logger = logging.getLogger(__name__)

router = APIRouter()

TODAY_ALIAS = "today"


@router.get("/api/logs")
async def api_log_dates(match_logger: MatchLogger = Depends(get_match_logger)):
    try:
        return match_logger.list_dates()
    except Exception:
        logger.exception("Failed to read log directory")
        raise HTTPException(status_code=500, detail="Failed to read log directory")


@router.get("/api/logs/{date}")
async def api_log_entries(date: str, match_logger: MatchLogger = Depends(get_match_logger)):
    """Parsed match log for one UTC day (YYYY-MM-DD, or "today")."""
    try:
        if date == TODAY_ALIAS:
            date = log_date_iso(match_logger.now())
        return [entry.to_dict() for entry in match_logger.read_entries(date)]
    except Exception:
        logger.exception("Failed to read log file for %r", date)
        raise HTTPException(status_code=500, detail="Failed to read log file")
