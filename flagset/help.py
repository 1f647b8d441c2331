# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders help text for a list of candidate flag groups.

For each group, in declared order, the renderer prints the flag spellings and the
declared value types on one line, the description on the next, and a blank line.
Rendering only reads the declarations, so it can run any number of times without
affecting later parses.
"""
from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape

from flagset.console import console as default_console
from flagset.group import FlagGroup
from flagset.themes import OneColors


class HelpRenderer:
    """Formats and prints help for candidate flag groups."""

    def __init__(
        self, candidates: Sequence[FlagGroup], console: Console | None = None
    ) -> None:
        self.candidates = list(candidates)
        self.console: Console = console or default_console

    @staticmethod
    def usage_line(group: FlagGroup) -> str:
        line = ", ".join(group.spec.spellings)
        type_names = group.type_names()
        if type_names:
            line = f"{line} {type_names}"
        return line

    def render_text(self) -> str:
        """Return the help text as plain text."""
        blocks = []
        for group in self.candidates:
            blocks.append(f"{self.usage_line(group)}\n{group.spec.description}\n\n")
        return "".join(blocks)

    def render(self) -> None:
        """Print the help text through the rich console."""
        for group in self.candidates:
            line = f"[{OneColors.CYAN_b}]{escape(', '.join(group.spec.spellings))}[/]"
            type_names = group.type_names()
            if type_names:
                line = f"{line} [{OneColors.LIGHT_YELLOW}]{escape(type_names)}[/]"
            self.console.print(line, highlight=False)
            self.console.print(
                escape(group.spec.description), style=OneColors.WHITE, highlight=False
            )
            self.console.print()
