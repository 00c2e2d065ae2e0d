from __future__ import annotations

from typing import Union

from pydantic import BaseModel


class SeasonCreateRequest(BaseModel):
    seasonNumber: Union[int, float, str]


class SeasonSummary(BaseModel):
    id: str
    name: str
