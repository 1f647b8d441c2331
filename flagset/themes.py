# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palette and rich theme used for flagset console output.

`OneColors` holds One Dark hex colors; the `_b` variants are bold. They are
plain strings usable in rich markup (`f"[{OneColors.CYAN}]text[/]"`).
"""
from rich.theme import Theme


class OneColors:
    """One Dark palette."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    LIGHT_RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    LIGHT_RED_b = f"bold {LIGHT_RED}"
    DARK_RED_b = f"bold {DARK_RED}"
    GREEN_b = f"bold {GREEN}"
    LIGHT_YELLOW_b = f"bold {LIGHT_YELLOW}"
    BLUE_b = f"bold {BLUE}"
    CYAN_b = f"bold {CYAN}"


def get_flagset_theme() -> Theme:
    """Named styles for help and error output."""
    return Theme(
        {
            "flag": OneColors.CYAN_b,
            "value_types": OneColors.LIGHT_YELLOW,
            "description": OneColors.WHITE,
            "error": OneColors.DARK_RED_b,
            "hint": OneColors.COMMENT_GREY,
        }
    )
