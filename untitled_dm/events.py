# untitled-dm — session launcher menu — MIT Licensed
"""
Events consumed by the menu loop.

The loop reads from one ordered stream carrying three kinds of event:

- `KeyPressed`: the operator pressed a bound key.
- `RunCompleted`: a confirmed command exited with status 0.
- `RunFailed`: a confirmed command could not start or exited non-zero.

`Event` is the union of the three; the menu dispatches on it with `match`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NO_COMMAND_MESSAGE = "No command to run\n"


class Key(Enum):
    """Menu actions triggered from the keyboard."""

    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    TOGGLE = "toggle"
    CONFIRM = "confirm"


KEY_BINDINGS: dict[str, Key] = {
    "c-c": Key.QUIT,
    "q": Key.QUIT,
    "up": Key.UP,
    "k": Key.UP,
    "down": Key.DOWN,
    "j": Key.DOWN,
    "space": Key.TOGGLE,
    "enter": Key.CONFIRM,
}


@dataclass(frozen=True)
class KeyPressed:
    key: Key


@dataclass(frozen=True)
class RunCompleted:
    output: str


@dataclass(frozen=True)
class RunFailed:
    output: str
    error: str


RunResult = RunCompleted | RunFailed
Event = KeyPressed | RunCompleted | RunFailed
