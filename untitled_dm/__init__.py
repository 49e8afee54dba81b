"""
untitled-dm

A minimal terminal menu for picking and launching a session or command.

Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .menu import Menu
from .registry import Command, CommandRegistry
from .state import SelectionState
from .version import __version__

logger = logging.getLogger("untitled_dm")


__all__ = [
    "Command",
    "CommandRegistry",
    "Menu",
    "SelectionState",
    "__version__",
]
