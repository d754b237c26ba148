"""Effects produced by the reducer and executed by the dispatcher."""

from dataclasses import dataclass

from electivebot.core.actions import Action


@dataclass(frozen=True)
class Button:
    """Inline button bound to an action."""

    label: str
    action: Action


@dataclass(frozen=True)
class Effect:
    """Base class of all effects."""


@dataclass(frozen=True)
class SendText(Effect):
    """Reply with plain text."""

    text: str


@dataclass(frozen=True)
class SendMenu(Effect):
    """Reply with text and a single column of buttons.

    With edit=True the message the update originated from is edited
    in place when there is one.
    """

    text: str
    buttons: tuple[Button, ...] = ()
    edit: bool = False


@dataclass(frozen=True)
class Enqueue(Effect):
    """Run a follow-up action after the current one."""

    action: Action
