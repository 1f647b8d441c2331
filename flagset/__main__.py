"""
Flagset

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from flagset.config import loader
from flagset.console import console
from flagset.exceptions import ParseError
from flagset.flag_parser import FlagParser
from flagset.group import ParsedGroup
from flagset.logger import logger
from flagset.utils import program_name, setup_logging

HELP_FLAGS = ("-h", "--help")


def find_flagset_config() -> Path | None:
    candidates = [
        Path.cwd() / "flagset.yaml",
        Path.cwd() / "flagset.toml",
        Path.cwd() / ".flagset.yaml",
        Path.cwd() / ".flagset.toml",
        Path(os.environ.get("FLAGSET_CONFIG", "flagset.yaml")),
        Path.home() / ".config" / "flagset" / "flagset.yaml",
        Path.home() / ".config" / "flagset" / "flagset.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def build_result_table(parser: FlagParser, parsed: ParsedGroup) -> Table:
    group = parser.get_group(parsed.name)
    converters = group.converters if group else ()
    table = Table(title=f"{parsed.flag} ({parsed.name})", title_justify="left")
    table.add_column("#", justify="right", style="hint")
    table.add_column("Name", style="flag")
    table.add_column("Type", style="value_types")
    table.add_column("Value")
    for index, value in enumerate(parsed.values):
        name = parsed.names[index] if parsed.names else ""
        type_name = converters[index].name if index < len(converters) else ""
        table.add_row(str(index), name, escape(type_name), escape(repr(value)))
    return table


def wants_help(parser: FlagParser, args: Sequence[str]) -> bool:
    if not args:
        return True
    if args[0] not in HELP_FLAGS:
        return False
    return not any(group.spec.matches(args[0]) for group in parser.groups)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    config_path = find_flagset_config()
    if not config_path:
        console.print(
            "[error]No flagset declaration file found.[/error] "
            "Create flagset.yaml or set FLAGSET_CONFIG.",
            highlight=False,
        )
        return 2

    try:
        parser = loader(config_path)
    except (ValueError, FileNotFoundError) as error:
        logger.error("Failed to load %s: %s", config_path, error)
        console.print(f"[error]{escape(str(error))}[/error]", highlight=False)
        return 2

    if not parser.program:
        parser.program = program_name()

    if wants_help(parser, args):
        usage = escape(f"usage: {parser.program} FLAG [VALUES...]")
        console.print(f"[bold]{usage}[/bold]\n", highlight=False)
        parser.render_help()
        return 0

    try:
        parsed = parser.parse_args(args)
    except ParseError as error:
        console.print(
            f"[error]error:[/error] {escape(error.describe())}", highlight=False
        )
        console.print("[hint]Use --help to see the accepted flags.[/hint]")
        return 1

    console.print(build_result_table(parser, parsed))
    return 0


def run() -> None:
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
