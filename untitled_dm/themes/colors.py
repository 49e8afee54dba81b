# untitled-dm — session launcher menu — MIT Licensed
"""
One Dark palette shared by the rich console and the prompt_toolkit view.

Every attribute is a style string understood by both libraries, so the same
constant can be used in rich markup (`f"[{OneColors.CYAN}]..."`) and in
prompt_toolkit `(style, text)` fragments. The `_b` suffix adds bold.
"""
from rich.theme import Theme


class OneColors:
    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    GREEN = "#98C379"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    DARK_RED_b = f"bold {DARK_RED}"
    LIGHT_RED_b = f"bold {LIGHT_RED}"
    GREEN_b = f"bold {GREEN}"
    LIGHT_YELLOW_b = f"bold {LIGHT_YELLOW}"
    BLUE_b = f"bold {BLUE}"
    CYAN_b = f"bold {CYAN}"


def get_one_theme() -> Theme:
    """Rich theme aligning log level colors with the One Dark palette."""
    return Theme(
        {
            "logging.level.debug": OneColors.COMMENT_GREY,
            "logging.level.info": OneColors.CYAN,
            "logging.level.warning": OneColors.LIGHT_YELLOW,
            "logging.level.error": OneColors.DARK_RED_b,
        }
    )
