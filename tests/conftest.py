"""Shared fixtures."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from electivebot.core.models import Course, Lecture, new_model

UTC = ZoneInfo("UTC")

# Wednesday
NOW = datetime(2026, 3, 4, 12, 0, tzinfo=UTC)


def make_lecture(start: datetime, minutes: int = 90, location: str | None = "108") -> Lecture:
    return Lecture(start=start, end=start + timedelta(minutes=minutes), location=location)


@pytest.fixture
def catalog():
    """Three courses, Algebra twice this week, Physics last week and next week."""
    return (
        Course(
            name="Algebra",
            lectures=(
                make_lecture(datetime(2026, 3, 4, 14, 0, tzinfo=UTC)),
                make_lecture(datetime(2026, 3, 6, 10, 40, tzinfo=UTC)),
            ),
        ),
        Course(
            name="Physics",
            lectures=(
                make_lecture(datetime(2026, 2, 25, 9, 0, tzinfo=UTC)),
                make_lecture(datetime(2026, 3, 11, 9, 0, tzinfo=UTC)),
            ),
        ),
        Course(name="Chemistry", lectures=()),
    )


@pytest.fixture
def model(catalog):
    return new_model(catalog, NOW, UTC)
