"""Decoding of Telegram updates into actions.

Decoders are tried in order and the first one returning an action wins.
Free text is the catch-all, so it must stay last.
"""

import re
from datetime import datetime, timedelta
from typing import Callable

from telegram import Update

from electivebot.core.actions import (
    Action,
    AddReminder,
    AddToDo,
    Help,
    RemoveItem,
    RemoveReminder,
    RemoveToDo,
    ShowAllToDo,
    ShowItems,
    Start,
    WeekCourses,
)

COMMAND_PATTERN = re.compile(r"^/(?P<name>\w+)(?:@\w+)?(?:\s+(?P<args>.*))?$", re.DOTALL)
REMIND_PATTERN = re.compile(r"^(?P<minutes>\d+)\s+(?P<title>.+)$", re.DOTALL)

Decoder = Callable[[Update, datetime], Action | None]


def parse_command(text: str) -> tuple[str, str] | None:
    """Split "/name@bot args" into (name, args)."""
    match = COMMAND_PATTERN.match(text.strip())
    if not match:
        return None
    return match.group("name"), (match.group("args") or "").strip()


def parse_remind_args(args: str, now: datetime) -> AddReminder | None:
    """Parse "<minutes> <title>" of the /remind command."""
    match = REMIND_PATTERN.match(args)
    if not match:
        return None

    due_at = now + timedelta(minutes=int(match.group("minutes")))
    return AddReminder(title=match.group("title").strip(), due_at=due_at)


def _message_text(update: Update) -> str | None:
    if not update.message or not update.message.text:
        return None
    return update.message.text


def decode_command(update: Update, now: datetime) -> Action | None:
    """Known text commands."""
    text = _message_text(update)
    if text is None:
        return None

    parsed = parse_command(text)
    if parsed is None:
        return None

    name, args = parsed

    if name == "show":
        return ShowItems()
    elif name == "remove_course":
        return RemoveItem(args)
    elif name == "remove_todo":
        return RemoveToDo(args)
    elif name == "show_todo":
        return ShowAllToDo()
    elif name == "start":
        return Start(now)
    elif name == "help":
        return Help()
    elif name == "show_week":
        return WeekCourses()
    elif name == "remind":
        return parse_remind_args(args, now)
    elif name == "remove_reminder":
        return RemoveReminder(args)

    return None


def decode_callback(update: Update, now: datetime) -> Action | None:
    """Button presses carry the action value as their callback data."""
    query = update.callback_query
    if query is None:
        return None

    # Stale buttons come back as InvalidCallbackData once evicted from the cache
    if isinstance(query.data, Action):
        return query.data
    return None


def decode_text(update: Update, now: datetime) -> Action | None:
    """Any other text becomes a to-do note."""
    text = _message_text(update)
    if text is None:
        return None
    return AddToDo(text)


DECODERS: list[Decoder] = [decode_command, decode_callback, decode_text]


def decode_update(update: Update, now: datetime) -> Action | None:
    """Turn an update into an action, or None if nothing matches."""
    for decoder in DECODERS:
        action = decoder(update, now)
        if action is not None:
            return action
    return None
