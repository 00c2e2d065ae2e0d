"""Append-only, date-partitioned match result log.

One file per UTC day (``matches_YYYY-MM-DD.log``), shared by every season.
Each line has a fixed grammar::

    [2024-05-01 18:22:03] INFO: Match result - Season: ow2_s3, Category: Push, Map: Colosseo, Result: WON

Writing is best-effort: ``MatchLogger.record`` reports failures on the
module logger and returns False instead of raising, so a failed append never
fails the save that triggered it.
"""

from __future__ import annotations

import datetime as _dt
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_FILE_PREFIX = "matches_"
DEFAULT_FILE_SUFFIX = ".log"
DEFAULT_SEASON = "current"

_LINE_RE = re.compile(
    r"\[([^\]]+)\] (\w+): Match result - Season: ([^,]+), Category: ([^,]+), Map: ([^,]+), Result: (\w+)"
)
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

Clock = Callable[[], _dt.datetime]


def utc_now() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


def _as_utc(moment: _dt.datetime) -> _dt.datetime:
    # naive datetimes are taken to be UTC already
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(_dt.timezone.utc).replace(tzinfo=None)


def log_timestamp(moment: _dt.datetime) -> str:
    """ISO-like ``YYYY-MM-DD HH:MM:SS`` in UTC, no milliseconds or zone suffix."""
    return _as_utc(moment).strftime("%Y-%m-%d %H:%M:%S")


def log_date_iso(moment: _dt.datetime) -> str:
    return _as_utc(moment).date().isoformat()


def require_date_iso(value: Any, *, field: str = "date") -> str:
    """Return ``value`` as a validated YYYY-MM-DD string. Fail-loud."""
    s = str(value or "").strip()
    if not _DATE_RE.fullmatch(s):
        raise ValueError(f"Invalid {field}: {value!r}")
    try:
        _dt.date.fromisoformat(s)
    except ValueError as exc:
        raise ValueError(f"Invalid {field}: {value!r}") from exc
    return s


def format_log_line(
    *,
    timestamp: str,
    season: str,
    category: str,
    map_name: str,
    result: str,
    level: str = "INFO",
) -> str:
    return (
        f"[{timestamp}] {level}: Match result - Season: {season}, "
        f"Category: {category}, Map: {map_name}, Result: {str(result).upper()}"
    )


@dataclass(frozen=True)
class MatchLogEntry:
    raw_line: str
    timestamp: Optional[str] = None
    level: Optional[str] = None
    season: Optional[str] = None
    map_category: Optional[str] = None
    map_name: Optional[str] = None
    result: Optional[str] = None

    @property
    def parsed(self) -> bool:
        return self.timestamp is not None

    def to_dict(self) -> Dict[str, Any]:
        if not self.parsed:
            return {"rawLine": self.raw_line}
        return {
            "timestamp": self.timestamp,
            "level": self.level,
            "season": self.season,
            "mapCategory": self.map_category,
            "mapName": self.map_name,
            "result": self.result,
            "rawLine": self.raw_line,
        }


def parse_log_line(line: str) -> MatchLogEntry:
    """Parse one log line; lines outside the grammar come back raw (never dropped)."""
    m = _LINE_RE.fullmatch(line)
    if m is None:
        return MatchLogEntry(raw_line=line)
    return MatchLogEntry(
        raw_line=line,
        timestamp=m.group(1),
        level=m.group(2),
        season=m.group(3),
        map_category=m.group(4),
        map_name=m.group(5),
        result=m.group(6).lower(),
    )


class MatchLogger:
    """Writes and reads the daily ``matches_<date>.log`` files under ``log_dir``."""

    def __init__(
        self,
        log_dir: str | Path,
        *,
        clock: Optional[Clock] = None,
        file_prefix: str = DEFAULT_FILE_PREFIX,
        file_suffix: str = DEFAULT_FILE_SUFFIX,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.file_prefix = file_prefix
        self.file_suffix = file_suffix
        self._clock: Clock = clock or utc_now

    def now(self) -> _dt.datetime:
        return self._clock()

    def ensure_log_dir(self) -> Path:
        if not self.log_dir.exists():
            self.log_dir.mkdir(parents=True, exist_ok=True)
            logger.info("Log directory created: %s", self.log_dir)
        return self.log_dir

    def log_path_for(self, date_iso: str) -> Path:
        return self.log_dir / f"{self.file_prefix}{require_date_iso(date_iso)}{self.file_suffix}"

    def record(
        self,
        category: str,
        map_name: str,
        outcome: str,
        season: str = DEFAULT_SEASON,
        *,
        at: Optional[_dt.datetime] = None,
    ) -> bool:
        """Append one match line. Returns False (and reports) if the append failed."""
        try:
            moment = at if at is not None else self.now()
            self.ensure_log_dir()
            line = format_log_line(
                timestamp=log_timestamp(moment),
                season=season,
                category=category,
                map_name=map_name,
                result=outcome,
            )
            path = self.log_path_for(log_date_iso(moment))
            with path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except Exception:
            logger.warning(
                "Failed to log match result: %s/%s - %s (season=%s)",
                category,
                map_name,
                outcome,
                season,
                exc_info=True,
            )
            return False

        logger.info("Match logged: %s/%s - %s", category, map_name, outcome)
        return True

    def read_entries(self, date_iso: Optional[str] = None) -> List[MatchLogEntry]:
        """Entries for one UTC day (today if omitted); empty if that day has no file."""
        if date_iso is None:
            date_iso = log_date_iso(self.now())
        path = self.log_path_for(date_iso)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []

        entries: List[MatchLogEntry] = []
        for line in content.strip().split("\n"):
            if not line.strip():
                continue
            entries.append(parse_log_line(line))
        return entries

    def list_dates(self) -> List[str]:
        """Dates that have a log file, most recent first."""
        root = self.ensure_log_dir()
        dates = []
        for entry in root.iterdir():
            name = entry.name
            if not (name.startswith(self.file_prefix) and name.endswith(self.file_suffix)):
                continue
            dates.append(name[len(self.file_prefix): len(name) - len(self.file_suffix)])
        dates.sort(reverse=True)
        return dates
