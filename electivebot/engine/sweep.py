"""Reminder sweep - fires due reminders of a chat."""

from dataclasses import replace
from datetime import datetime

from electivebot.core.actions import SetTime
from electivebot.core.effects import Effect, SendText
from electivebot.core.models import Model
from electivebot.core.reducer import handle_action
from electivebot.utils.constants import REMINDER_PREFIX


def sweep_reminders(model: Model, now: datetime) -> tuple[Model, list[Effect]]:
    """Refresh the chat clock and fire every reminder that is due.

    This runs once per chat on every sweep tick and:
    1. Applies SetTime(now) to the Model
    2. Emits one notification per pending reminder due at or before now
    3. Marks those reminders as fired (due_at = None)

    Fired and future reminders are left untouched.
    """
    model, effects = handle_action(SetTime(now), model)

    reminders = []
    for entry in model.reminders:
        if entry.due_at is not None and entry.due_at <= model.current_time:
            effects.append(SendText(REMINDER_PREFIX + entry.label))
            entry = replace(entry, due_at=None)
        reminders.append(entry)

    return replace(model, reminders=reminders), effects
