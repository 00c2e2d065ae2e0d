from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "ow2_s"
DEFAULT_TEMPLATE_ID = "data"
_SUFFIX = ".json"
_FORBIDDEN_ID_CHARS = ("/", "\\", "\x00")


class SeasonStoreError(ValueError):
    pass


class SeasonNotFoundError(SeasonStoreError):
    pass


def _validate_season_id(season_id: str) -> str:
    """Any file stem is a season id, as long as it stays inside the data directory."""
    sid = str(season_id or "")
    if not sid:
        raise SeasonStoreError("season id is required")
    if sid in (".", "..") or any(ch in sid for ch in _FORBIDDEN_ID_CHARS):
        raise SeasonStoreError(f"invalid season id: {season_id!r}")
    return sid


class SeasonStore:
    """Whole-document JSON files, one per season, under ``data_dir``.

    File names:
      <template_id>.json        template / primary document ("data")
      <prefix><number>.json     numbered seasons ("ow2_s3")

    Saves overwrite in place. There is no locking; the last writer wins.
    """

    def __init__(self, data_dir: str | Path, *, prefix: str = DEFAULT_PREFIX, template_id: str = DEFAULT_TEMPLATE_ID) -> None:
        self.data_dir = Path(data_dir)
        self.prefix = prefix
        self.template_id = template_id

    def season_id_for(self, season_number: Any) -> str:
        return _validate_season_id(f"{self.prefix}{season_number}")

    def season_path(self, season_id: str) -> Path:
        return self.data_dir / f"{_validate_season_id(season_id)}{_SUFFIX}"

    def exists(self, season_id: str) -> bool:
        return self.season_path(season_id).is_file()

    def load(self, season_id: str) -> Any:
        path = self.season_path(season_id)
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as exc:
            raise SeasonNotFoundError(f"season not found: {season_id}") from exc
        except json.JSONDecodeError as exc:
            raise SeasonStoreError(f"season file is not valid JSON: {path.name}") from exc

    def save(self, season_id: str, document: Any) -> Path:
        path = self.season_path(season_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(document, ensure_ascii=False, indent=2)
        with path.open("w", encoding="utf-8") as f:
            f.write(payload)
        return path

    def create(self, season_number: Any) -> str:
        """Copy the template document to a new numbered season. Overwrites silently."""
        sid = self.season_id_for(season_number)
        template = self.season_path(self.template_id)
        try:
            text = template.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SeasonNotFoundError(f"template not found: {template.name}") from exc

        if self.exists(sid):
            logger.info("Season %s already exists; overwriting from template", sid)
        target = self.season_path(sid)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        logger.info("Season created: %s (from %s)", sid, template.name)
        return sid

    def list_seasons(self) -> List[Dict[str, str]]:
        seasons = []
        for entry in self.data_dir.iterdir():
            name = entry.name
            if not (name.startswith(self.prefix) and name.endswith(_SUFFIX)):
                continue
            sid = name[: -len(_SUFFIX)]
            seasons.append({"id": sid, "name": f"Season {sid[len(self.prefix):]}"})
        seasons.sort(key=lambda s: s["id"])
        return seasons
