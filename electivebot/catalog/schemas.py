"""Schemas of raw catalog entries."""

from datetime import datetime
from typing import Any

from dateutil.parser import isoparse
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogLecture(BaseModel):
    """Lecture as written in the catalog file."""

    start: datetime
    end: datetime
    location: str | int | None = None

    @field_validator("start", "end", mode="before")
    @classmethod
    def parse_iso(cls, value: Any) -> datetime:
        if not isinstance(value, str):
            raise ValueError("expected an ISO 8601 string")
        return isoparse(value)


class CatalogCourse(BaseModel):
    """Course as written in the catalog file."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    lectures: list[CatalogLecture] = []
