"""Data models."""

from dataclasses import dataclass, field
from datetime import datetime, tzinfo


@dataclass(frozen=True)
class Lecture:
    """A single lecture occurrence of a course."""

    start: datetime  # UTC
    end: datetime  # UTC
    location: str | None = None


@dataclass(frozen=True)
class Course:
    """Elective course from the catalog.

    Courses are identified by name everywhere, so equality ignores lectures.
    """

    name: str
    lectures: tuple[Lecture, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class ReminderEntry:
    """A reminder in a chat's reminder list."""

    label: str
    due_at: datetime | None = None  # UTC, None once fired

    @property
    def is_pending(self) -> bool:
        return self.due_at is not None


@dataclass
class Model:
    """Conversation state of a single chat.

    The reducer never mutates a Model in place, it builds a new one with
    dataclasses.replace and fresh lists.
    """

    all_courses: tuple[Course, ...]
    current_time: datetime
    time_zone: tzinfo
    my_courses: list[Course] = field(default_factory=list)  # newest first
    reminders: list[ReminderEntry] = field(default_factory=list)
    todos: list[str] = field(default_factory=list)  # newest first


def new_model(catalog: tuple[Course, ...], now: datetime, time_zone: tzinfo) -> Model:
    """Create the initial Model for a chat."""
    return Model(all_courses=catalog, current_time=now, time_zone=time_zone)
