# untitled-dm — session launcher menu — MIT Licensed
"""Global console instance for untitled-dm."""
from rich.console import Console

from untitled_dm.themes import get_one_theme

console = Console(color_system="truecolor", theme=get_one_theme())
