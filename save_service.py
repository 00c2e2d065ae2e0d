from __future__ import annotations

import logging
from typing import Any, Dict, List

from match_log import MatchLogger
from season_store import SeasonNotFoundError, SeasonStore, SeasonStoreError
from stat_diff import StatChange, detect_stat_changes

logger = logging.getLogger(__name__)


def _load_previous(store: SeasonStore, season_id: str) -> Any:
    """Prior document, or None when there is none to diff against (first save)."""
    try:
        return store.load(season_id)
    except SeasonNotFoundError:
        return None
    except SeasonStoreError:
        # Unreadable prior file: treat like a first save. The write below still
        # validates the id and replaces the bad file.
        logger.warning("Previous document for %s is unreadable; skipping diff", season_id, exc_info=True)
        return None


def log_stat_changes(
    match_logger: MatchLogger,
    changes: List[StatChange],
    *,
    season_id: str,
) -> Dict[str, int]:
    """Write one log line per unit of increase. All lines share one timestamp."""
    at = match_logger.now()
    logged = 0
    failed = 0
    for change in changes:
        for _ in range(change.match_count):
            ok = match_logger.record(change.category, change.map_name, change.result, season_id, at=at)
            if ok:
                logged += 1
            else:
                failed += 1
    return {"logged": logged, "failed": failed}


def save_season_document(
    *,
    store: SeasonStore,
    match_logger: MatchLogger,
    season_id: str,
    document: Any,
) -> Dict[str, Any]:
    """Load old → overwrite with new → diff → log every increase.

    Log failures are counted, never raised: the document is already persisted
    by the time logging starts.
    """
    old_document = _load_previous(store, season_id)

    store.save(season_id, document)

    changes: List[StatChange] = []
    counts = {"logged": 0, "failed": 0}
    if old_document is not None:
        changes = detect_stat_changes(old_document, document)
        counts = log_stat_changes(match_logger, changes, season_id=season_id)

    logger.info("Data saved successfully: %s (%d stat change(s))", season_id, len(changes))
    return {
        "success": True,
        "message": "Data saved successfully",
        "loggedMatches": counts["logged"],
        "failedLogWrites": counts["failed"],
    }


def create_season(*, store: SeasonStore, season_number: Any) -> Dict[str, Any]:
    sid = store.create(season_number)
    return {"success": True, "message": "Season created successfully", "id": sid}
