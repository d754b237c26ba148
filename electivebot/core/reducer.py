"""Action reducer - the per-chat state machine.

handle_action is a pure function: it never reads the clock, never sends
anything and never mutates the Model it is given. Replies and follow-up
actions are returned as effects for the dispatcher to execute.
"""

from dataclasses import replace
from typing import Callable

from electivebot.core.actions import (
    Action,
    AddItem,
    AddReminder,
    AddToDo,
    Help,
    NoAction,
    RemoveItem,
    RemoveReminder,
    RemoveToDo,
    RevealItemActions,
    SetReminderIn,
    SetTime,
    ShowAllCourses,
    ShowAllToDo,
    ShowItems,
    ShowReminder,
    ShowTime,
    ShowToDo,
    Start,
    WeekCourses,
)
from electivebot.core.effects import Button, Effect, Enqueue, SendMenu, SendText
from electivebot.core.formatters import (
    format_course,
    format_lecture,
    format_reminder_label,
    format_welcome_message,
)
from electivebot.core.models import Course, Lecture, Model, ReminderEntry
from electivebot.utils import constants as c
from electivebot.utils.time_utils import format_relative_time, week_window

Transition = tuple[Model, list[Effect]]


def find_catalog_course(title: str, model: Model) -> Course | None:
    """Find a course in the catalog by exact name."""
    return next((course for course in model.all_courses if course.name == title), None)


def find_my_course(title: str, model: Model) -> Course | None:
    """Find a course in the selected courses by exact name."""
    return next((course for course in model.my_courses if course.name == title), None)


def first_lecture_this_week(course: Course, model: Model) -> Lecture | None:
    """First lecture of the course starting between now and the end of the week.

    Only the first one in schedule order is considered even when several
    lectures fall in the window.
    """
    week_start, week_end = week_window(model.current_time, model.time_zone)
    for lecture in course.lectures:
        if week_start <= lecture.start < week_end and lecture.start >= model.current_time:
            return lecture
    return None


def course_reminders(course: Course, model: Model) -> list[ReminderEntry]:
    """One reminder per lecture, due when the lecture starts."""
    return [
        ReminderEntry(
            label=format_reminder_label(course.name, index, lecture, model.time_zone),
            due_at=lecture.start,
        )
        for index, lecture in enumerate(course.lectures, start=1)
    ]


def _no_action(action: NoAction, model: Model) -> Transition:
    return model, []


def _start(action: Start, model: Model) -> Transition:
    return model, [
        SendText(format_welcome_message()),
        Enqueue(ShowAllCourses()),
        Enqueue(SetTime(action.now)),
    ]


def _help(action: Help, model: Model) -> Transition:
    return model, [SendText(format_welcome_message())]


def _show_all_courses(action: ShowAllCourses, model: Model) -> Transition:
    if not model.all_courses:
        return model, [SendMenu(c.NO_CATALOG, edit=True)]

    buttons = tuple(Button(course.name, AddItem(course.name)) for course in model.all_courses)
    return model, [SendMenu(c.CATALOG_HEADER, buttons, edit=True)]


def _show_items(action: ShowItems, model: Model) -> Transition:
    if not model.my_courses:
        return model, [SendMenu(c.NO_COURSES_SELECTED, edit=True)]

    buttons = tuple(
        Button(course.name, RevealItemActions(course.name)) for course in model.my_courses
    )
    return model, [SendMenu(c.MY_COURSES_HEADER, buttons, edit=True)]


def _add_item(action: AddItem, model: Model) -> Transition:
    course = find_catalog_course(action.title, model)

    # Unknown or already selected courses leave the list as it is
    if course is not None and course not in model.my_courses:
        model = replace(model, my_courses=[course, *model.my_courses])

    return model, [SendText(c.COURSE_ADDED)]


def _remove_item(action: RemoveItem, model: Model) -> Transition:
    my_courses = [course for course in model.my_courses if course.name != action.title]
    return replace(model, my_courses=my_courses), [
        SendText(c.COURSE_REMOVED.format(title=action.title)),
        Enqueue(ShowItems()),
    ]


def _reveal_item_actions(action: RevealItemActions, model: Model) -> Transition:
    course = find_catalog_course(action.title, model)
    if course is None:
        return model, [SendMenu(c.NOTHING_TO_SHOW, edit=True)]

    title = action.title
    buttons = (
        Button(c.BTN_SET_REMINDER, SetReminderIn(title)),
        Button(c.BTN_BACK, ShowItems()),
        Button(c.BTN_SHOW_REMINDERS, ShowReminder(title)),
        Button(c.BTN_TODO_IN.format(title=title), ShowToDo(title)),
        Button(c.BTN_REMOVE_COURSE, RemoveItem(title)),
    )
    return model, [SendMenu(format_course(course, model.time_zone), buttons, edit=True)]


def _set_reminder_in(action: SetReminderIn, model: Model) -> Transition:
    course = find_my_course(action.title, model)
    if course is not None:
        model = replace(model, reminders=[*model.reminders, *course_reminders(course, model)])

    return model, [SendText(c.REMINDER_SET)]


def _add_reminder(action: AddReminder, model: Model) -> Transition:
    entry = ReminderEntry(label=action.title, due_at=action.due_at)
    return replace(model, reminders=[*model.reminders, entry]), [SendText(c.REMINDER_SET)]


def _remove_reminder(action: RemoveReminder, model: Model) -> Transition:
    reminders = [entry for entry in model.reminders if entry.label != action.title]
    return replace(model, reminders=reminders), [
        SendText(c.REMINDER_REMOVED.format(title=action.title))
    ]


def _show_reminder(action: ShowReminder, model: Model) -> Transition:
    # The whole list is shown whatever course the request came from
    if not model.reminders:
        return model, [SendMenu(c.NO_REMINDERS, edit=True)]

    buttons = []
    for entry in model.reminders:
        if entry.due_at is None:
            status = c.REMINDER_FIRED
        else:
            status = format_relative_time(entry.due_at, model.current_time)
        buttons.append(Button(entry.label, ShowTime(entry.label, status)))

    return model, [SendMenu(c.REMINDERS_HEADER, tuple(buttons), edit=True)]


def _week_courses(action: WeekCourses, model: Model) -> Transition:
    buttons = []
    for course in model.my_courses:
        lecture = first_lecture_this_week(course, model)
        if lecture is None:
            continue
        lecture_text = format_lecture(lecture, model.time_zone)
        buttons.append(Button(course.name, ShowTime(course.name, lecture_text)))

    if not buttons:
        return model, [SendMenu(c.NO_WEEK_LECTURES, edit=True)]

    return model, [SendMenu(c.WEEK_HEADER, tuple(buttons), edit=True)]


def _show_time(action: ShowTime, model: Model) -> Transition:
    return model, [SendText(f"{action.title} - {action.time}")]


def _add_todo(action: AddToDo, model: Model) -> Transition:
    return replace(model, todos=[action.text, *model.todos]), [SendText(c.TODO_ADDED)]


def _show_todo(action: ShowToDo, model: Model) -> Transition:
    matching = [todo for todo in model.todos if action.title in todo]
    if not matching:
        return model, [SendText(c.NO_TODO_IN.format(title=action.title))]
    return model, [SendText("\n".join(matching))]


def _show_all_todo(action: ShowAllToDo, model: Model) -> Transition:
    if not model.todos:
        return model, [SendText(c.NO_TODO)]
    return model, [SendText("\n".join(model.todos))]


def _remove_todo(action: RemoveToDo, model: Model) -> Transition:
    todos = [todo for todo in model.todos if todo != action.title]
    return replace(model, todos=todos), [SendText(c.TODO_REMOVED.format(title=action.title))]


def _set_time(action: SetTime, model: Model) -> Transition:
    return replace(model, current_time=action.time), []


_HANDLERS: dict[type[Action], Callable[[Action, Model], Transition]] = {
    NoAction: _no_action,
    Start: _start,
    Help: _help,
    ShowAllCourses: _show_all_courses,
    ShowItems: _show_items,
    AddItem: _add_item,
    RemoveItem: _remove_item,
    RevealItemActions: _reveal_item_actions,
    SetReminderIn: _set_reminder_in,
    AddReminder: _add_reminder,
    RemoveReminder: _remove_reminder,
    ShowReminder: _show_reminder,
    WeekCourses: _week_courses,
    ShowTime: _show_time,
    AddToDo: _add_todo,
    ShowToDo: _show_todo,
    ShowAllToDo: _show_all_todo,
    RemoveToDo: _remove_todo,
    SetTime: _set_time,
}


def handle_action(action: Action, model: Model) -> Transition:
    """Compute the next Model and the effects of an action.

    Args:
        action: The action to apply
        model: Current state of the chat (left untouched)

    Returns:
        The new Model and the effects to execute, in order
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unknown action: {action!r}")
    return handler(action, model)
