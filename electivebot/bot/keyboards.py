"""Inline keyboard builders."""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from electivebot.core.effects import Button


def menu_keyboard(buttons: tuple[Button, ...]) -> InlineKeyboardMarkup | None:
    """Single-column keyboard, one action per row.

    The Action itself is the callback payload; the application runs with
    arbitrary callback data so it comes back as the same value on press.
    """
    if not buttons:
        return None

    return InlineKeyboardMarkup(
        [[InlineKeyboardButton(button.label, callback_data=button.action)] for button in buttons]
    )
