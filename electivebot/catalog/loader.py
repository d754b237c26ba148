"""Course catalog loading.

The catalog is a JSON array of courses:

    [
        {
            "name": "Algebra",
            "lectures": [
                {"start": "2026-10-19T10:40", "end": "2026-10-19T12:10", "location": "108"}
            ]
        }
    ]

Timestamps are ISO 8601. Timestamps without an offset are read in the
configured timezone.
"""

import json
import logging
from datetime import tzinfo
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from electivebot.catalog.schemas import CatalogCourse, CatalogLecture
from electivebot.core.models import Course, Lecture
from electivebot.utils.time_utils import from_utc, to_utc

logger = logging.getLogger(__name__)


def to_lecture(raw: CatalogLecture, tz: tzinfo) -> Lecture:
    """Convert a validated lecture, raising ValueError if its times are unusable."""
    try:
        start = to_utc(raw.start, tz)
        end = to_utc(raw.end, tz)
        # Lecture times are shown in tz later on
        from_utc(start, tz)
        from_utc(end, tz)
    except OverflowError as e:
        raise ValueError(f"lecture time out of range: {e}") from e

    if end < start:
        raise ValueError("lecture ends before it starts")

    location = str(raw.location) if raw.location not in (None, "") else None
    return Lecture(start=start, end=end, location=location)


def parse_course(raw: Any, tz: tzinfo) -> Course | None:
    """Parse a course entry, returning None if it is malformed."""
    try:
        entry = CatalogCourse.model_validate(raw)
        lectures = tuple(to_lecture(item, tz) for item in entry.lectures)

    except ValidationError as e:
        logger.warning(f"Dropping catalog entry: {e.error_count()} validation errors")
        return None
    except ValueError as e:
        logger.warning(f"Dropping catalog entry {entry.name!r}: {e}")
        return None

    return Course(name=entry.name, lectures=lectures)


def parse_catalog(data: Any, tz: tzinfo) -> list[Course | None]:
    """Parse every entry of the catalog, malformed ones as None."""
    if not isinstance(data, list):
        logger.warning("Catalog must be a JSON array")
        return []
    return [parse_course(item, tz) for item in data]


def load_catalog(path: Path, tz: tzinfo) -> tuple[Course, ...]:
    """Load the course catalog once at startup.

    Malformed entries and repeated course names are dropped. A missing or
    unreadable file gives an empty catalog.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read catalog at {path}: {e}")
        return ()

    courses: list[Course] = []
    seen: set[str] = set()

    for course in parse_catalog(data, tz):
        if course is None:
            continue
        if course.name in seen:
            logger.warning(f"Dropping duplicate course {course.name!r}")
            continue
        seen.add(course.name)
        courses.append(course)

    logger.info(f"Loaded {len(courses)} courses from {path}")
    return tuple(courses)
