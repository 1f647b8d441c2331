# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for flagset output."""
from rich.console import Console

from flagset.themes import get_flagset_theme

console = Console(color_system="truecolor", theme=get_flagset_theme())
