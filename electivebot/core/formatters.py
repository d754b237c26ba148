"""Message text formatters."""

from datetime import tzinfo

from electivebot.core.models import Course, Lecture
from electivebot.utils.time_utils import from_utc


def format_lecture(lecture: Lecture, tz: tzinfo) -> str:
    """Format a lecture time and place, e.g. "Mon 19 Oct 10:40-12:10, 108"."""
    start = from_utc(lecture.start, tz)
    end = from_utc(lecture.end, tz)

    if start.date() == end.date():
        text = f"{start.strftime('%a %d %b %H:%M')}-{end.strftime('%H:%M')}"
    else:
        text = f"{start.strftime('%a %d %b %H:%M')} - {end.strftime('%a %d %b %H:%M')}"

    if lecture.location:
        text += f", {lecture.location}"
    return text


def format_course(course: Course, tz: tzinfo) -> str:
    """Format a course with its numbered lecture schedule."""
    lines = [course.name]

    if not course.lectures:
        lines.append("No lectures scheduled")

    for index, lecture in enumerate(course.lectures, start=1):
        lines.append(f"{index}. {format_lecture(lecture, tz)}")

    return "\n".join(lines)


def format_reminder_label(course_name: str, index: int, lecture: Lecture, tz: tzinfo) -> str:
    """Label of a lecture reminder: course name, lecture number and time."""
    return " ".join([course_name, str(index), format_lecture(lecture, tz)])


def format_welcome_message() -> str:
    """Format the welcome message for /start."""
    return """
Welcome to Elective course schedule
/start - show list of all possible courses
/show - show list of selected courses
/remove_course - remove course from list of selected courses
/remove_todo - remove todo item from list of todo items
/show_week - show courses on this week
/show_todo - show your todo list
/remind - set a reminder, e.g. /remind 30 Submit essay
/remove_reminder - remove a reminder by its text
/help - show this message
""".strip()
