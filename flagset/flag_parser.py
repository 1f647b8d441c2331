# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagParser`, the declaration table for a program's
accepted flag groups, and the `parse_args` / `display_help` entry points.

A program declares a handful of candidate groups, each a flag followed by a
statically typed sequence of values. Parsing picks the first candidate, in
declaration order, that matches the argument vector, and rejects the result if
any argument is left over.

Example Usage:
    parser = FlagParser()
    parser.add_group("copy", "--copy", "-c", "Copy a file", values=[Path, Path])
    parser.add_group(
        "resize",
        "--resize",
        "-r",
        "Resize to WIDTH and optional HEIGHT",
        values=[int, int | None],
    )

    result = parser.parse_args(["--copy", "a.txt", "b.txt"])
    # result.name == "copy"
    # result[0] == Path("a.txt")

    parser.render_help()

This is not a full POSIX/GNU grammar: there is no `--flag=value` syntax, no
bundling of short flags, and a flag cannot be repeated.
"""
from __future__ import annotations

import sys
from typing import Any, Sequence

from rich.console import Console

from flagset.exceptions import DeclarationError
from flagset.group import FlagGroup, FlagSpec, ParsedGroup
from flagset.help import HelpRenderer
from flagset.logger import logger
from flagset.outcome import Failure
from flagset.registry import ConversionRegistry, default_registry
from flagset.selector import select_group


def parse_args(
    candidates: Sequence[FlagGroup], raw_args: Sequence[str] | None = None
) -> ParsedGroup:
    """
    Parse a full argument vector against candidate groups.

    Args:
        candidates (Sequence[FlagGroup]): Groups to try, highest priority first.
        raw_args (Sequence[str] | None): Argument vector including the program
            name. Defaults to `sys.argv`.

    Returns:
        ParsedGroup: The winning group's values, with nothing left over.

    Raises:
        NoCandidateMatched: If no candidate matched.
        TrailingArgumentsError: If the winning group left arguments unconsumed.
    """
    if raw_args is None:
        raw_args = sys.argv
    tokens = tuple(raw_args[1:])
    outcome = select_group(candidates, tokens)
    if isinstance(outcome, Failure):
        raise outcome.error
    parsed: ParsedGroup = outcome.value
    parsed.ensure_no_remaining_arguments()
    return parsed


def display_help(
    candidates: Sequence[FlagGroup], console: Console | None = None
) -> None:
    """Print the help text for `candidates`."""
    HelpRenderer(candidates, console).render()


class FlagParser:
    """
    Declaration table of candidate flag groups.

    Groups are kept in declaration order, which is also their parse priority.
    Value types are resolved through a `ConversionRegistry`, so `add_group` accepts
    plain Python types (`int`, `str`, `Path`, `int | None`, `tuple[int, str]`),
    converters (`UINT32`, `AnyOrder([...])`) and other groups for nesting.
    """

    def __init__(
        self,
        program: str = "",
        registry: ConversionRegistry | None = None,
        console: Console | None = None,
    ) -> None:
        self.program: str = program
        self.registry: ConversionRegistry = registry or default_registry
        self.console: Console | None = console
        self._groups: dict[str, FlagGroup] = {}

    def add_group(
        self,
        name: str,
        full: str,
        short: str = "",
        description: str = "",
        values: Sequence[Any] = (),
        names: Sequence[str] | None = None,
    ) -> FlagGroup:
        """
        Declare a candidate group.

        Args:
            name (str): Unique name of the group.
            full (str): Long flag spelling.
            short (str): Short flag spelling, or empty.
            description (str): Help text.
            values (Sequence[Any]): Value types following the flag, in order.
            names (Sequence[str] | None): Optional field names for the values.

        Returns:
            FlagGroup: The declared group, usable as a nested value type.

        Raises:
            DeclarationError: If the name is taken or a value type is unknown.
        """
        if not name:
            raise DeclarationError("Flag groups must have a name")
        if name in self._groups:
            raise DeclarationError(f"Flag group '{name}' is already declared")
        converters = [self.registry.resolve(value) for value in values]
        group = FlagGroup(name, FlagSpec(full, short, description), converters, names)
        self._groups[name] = group
        logger.debug("Declared %s", group)
        return group

    def add_groups(self, groups: Sequence[FlagGroup]) -> None:
        """Register already-built groups, keeping their order."""
        for group in groups:
            if group.name in self._groups:
                raise DeclarationError(f"Flag group '{group.name}' is already declared")
            self._groups[group.name] = group

    def get_group(self, name: str) -> FlagGroup | None:
        return self._groups.get(name)

    @property
    def groups(self) -> list[FlagGroup]:
        return list(self._groups.values())

    def parse_args(self, args: Sequence[str] | None = None) -> ParsedGroup:
        """
        Parse `args` (without the program name) against the declared groups.

        Defaults to `sys.argv[1:]`.
        """
        if args is None:
            args = sys.argv[1:]
        return parse_args(self.groups, [self.program, *args])

    def help_text(self) -> str:
        return HelpRenderer(self.groups).render_text()

    def render_help(self) -> None:
        display_help(self.groups, self.console)

    def __str__(self) -> str:
        return f"FlagParser(program={self.program!r}, groups={len(self._groups)})"

    def __repr__(self) -> str:
        return str(self)
