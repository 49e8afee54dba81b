# untitled-dm — session launcher menu — MIT Licensed
"""Helpers bridging rich renderables and prompt_toolkit formatted text."""
from prompt_toolkit.formatted_text import StyleAndTextTuples
from rich.console import Console
from rich.text import Text


def rich_text_to_prompt_text(text: Text) -> StyleAndTextTuples:
    """
    Convert a Rich Text object to a list of (style, text) tuples
    compatible with prompt_toolkit.
    """
    console = Console(color_system=None, file=None, width=999, legacy_windows=False)
    return [
        (str(segment.style or ""), segment.text)
        for segment in text.render(console)
        if segment.text
    ]
