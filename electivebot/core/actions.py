"""Actions the bot can perform.

Every inbound update decodes to exactly one of these values, and inline
buttons carry them as their callback payload. Anything time-dependent is
captured into the action when it is created so the reducer stays pure.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Action:
    """Base class of all actions."""


@dataclass(frozen=True)
class NoAction(Action):
    """Perform no action."""


@dataclass(frozen=True)
class Start(Action):
    """Display the start message and the course catalog."""

    now: datetime


@dataclass(frozen=True)
class Help(Action):
    """Display the start message only."""


@dataclass(frozen=True)
class ShowAllCourses(Action):
    """Display the catalog as an inline keyboard."""


@dataclass(frozen=True)
class ShowItems(Action):
    """Display the selected courses."""


@dataclass(frozen=True)
class AddItem(Action):
    """Add a catalog course to the selected courses."""

    title: str


@dataclass(frozen=True)
class RemoveItem(Action):
    """Remove a course from the selected courses by name."""

    title: str


@dataclass(frozen=True)
class RevealItemActions(Action):
    """Show course details together with the course action keyboard."""

    title: str


@dataclass(frozen=True)
class SetReminderIn(Action):
    """Set a reminder for every lecture of a selected course."""

    title: str


@dataclass(frozen=True)
class AddReminder(Action):
    """Set a single reminder with a free title."""

    title: str
    due_at: datetime


@dataclass(frozen=True)
class RemoveReminder(Action):
    """Remove reminders by label."""

    title: str


@dataclass(frozen=True)
class ShowReminder(Action):
    """Display the reminder list."""

    title: str


@dataclass(frozen=True)
class WeekCourses(Action):
    """Display selected courses that have a lecture this week."""


@dataclass(frozen=True)
class ShowTime(Action):
    """Display a title together with a time description."""

    title: str
    time: str


@dataclass(frozen=True)
class AddToDo(Action):
    text: str


@dataclass(frozen=True)
class ShowToDo(Action):
    """Display to-do notes mentioning a course."""

    title: str


@dataclass(frozen=True)
class ShowAllToDo(Action):
    pass


@dataclass(frozen=True)
class RemoveToDo(Action):
    title: str


@dataclass(frozen=True)
class SetTime(Action):
    """Update the chat's notion of the current time."""

    time: datetime
