# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declaration loader for flagset flag groups.

Flag groups can be declared in a YAML or TOML file instead of Python code:

    program: backup
    groups:
      - name: copy
        full: --copy
        short: -c
        description: Copy one path to another
        values: [path, path]
        names: [source, target]
      - name: level
        full: --level
        values:
          - any_order: [uint16, "[string]"]

A value type descriptor is one of:
- a type name (`string`, `path`, `int`, `long`, `uint16`, `uint32`, `uint64`,
  `float`, `bool`, `datetime`)
- `[X]` or `{optional: X}` for an optional value
- `{sequence: [...]}` for an ordered sub-sequence
- `{any_order: [...]}` for values accepted in any rotation of the declared order
- the name of a group declared earlier in the file, to nest that group
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from flagset.converters import (
    AnyOrder,
    Converter,
    GroupConverter,
    OptionalConverter,
    SequenceConverter,
)
from flagset.exceptions import DeclarationError
from flagset.flag_parser import FlagParser
from flagset.logger import logger
from flagset.registry import ConversionRegistry, default_registry

COMPOSITE_KEYS = ("optional", "sequence", "any_order")


class RawGroup(BaseModel):
    """Raw flag group model for flagset declaration files."""

    name: str
    full: str
    short: str = ""
    description: str = ""
    values: list[Any] = Field(default_factory=list)
    names: list[str] | None = None

    @field_validator("full")
    @classmethod
    def validate_full(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("full flag spelling cannot be empty")
        return value

    @model_validator(mode="after")
    def validate_names(self) -> RawGroup:
        if self.names is not None and len(self.names) != len(self.values):
            raise ValueError(
                f"group '{self.name}' declares {len(self.values)} value(s) "
                f"but {len(self.names)} name(s)"
            )
        return self


class FlagsetConfig(BaseModel):
    """Flagset declaration file model."""

    program: str = ""
    groups: list[RawGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> FlagsetConfig:
        seen: set[str] = set()
        for group in self.groups:
            if group.name in seen:
                raise ValueError(f"group '{group.name}' is declared more than once")
            seen.add(group.name)
        return self

    def to_parser(self, registry: ConversionRegistry | None = None) -> FlagParser:
        parser = FlagParser(program=self.program, registry=registry)
        for raw_group in self.groups:
            values = [
                resolve_descriptor(value, parser, parser.registry)
                for value in raw_group.values
            ]
            parser.add_group(
                raw_group.name,
                raw_group.full,
                raw_group.short,
                raw_group.description,
                values=values,
                names=raw_group.names,
            )
        return parser


def resolve_descriptor(
    descriptor: Any, parser: FlagParser, registry: ConversionRegistry = default_registry
) -> Converter:
    """Turn a value type descriptor from a declaration file into a converter."""
    if isinstance(descriptor, str):
        group = parser.get_group(descriptor.strip())
        if group is not None:
            return GroupConverter(group)
        return registry.resolve_name(descriptor)

    if isinstance(descriptor, dict):
        if len(descriptor) != 1 or next(iter(descriptor)) not in COMPOSITE_KEYS:
            raise DeclarationError(
                f"Invalid value type {descriptor!r}: expected one key of "
                f"{', '.join(COMPOSITE_KEYS)}"
            )
        key, inner = next(iter(descriptor.items()))
        if key == "optional":
            return OptionalConverter(resolve_descriptor(inner, parser, registry))
        if not isinstance(inner, list):
            raise DeclarationError(f"'{key}' expects a list of value types")
        converters = [resolve_descriptor(item, parser, registry) for item in inner]
        if key == "sequence":
            return SequenceConverter(converters)
        return AnyOrder(converters)

    raise DeclarationError(f"Invalid value type {descriptor!r}")


def loader(
    file_path: Path | str, registry: ConversionRegistry | None = None
) -> FlagParser:
    """
    Load flag group declarations from a YAML or TOML file.

    Args:
        file_path (str | Path): Path to the declaration file.
        registry (ConversionRegistry | None): Registry used to resolve type names.

    Returns:
        FlagParser: A parser holding the declared groups in file order.

    Raises:
        ValueError: If the file format is unsupported or the content is invalid.
        FileNotFoundError: If the file does not exist.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such declaration file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            try:
                raw_config = yaml.safe_load(config_file)
            except yaml.YAMLError as error:
                raise ValueError(f"Invalid YAML in {path}: {error}") from error
        elif suffix == ".toml":
            try:
                raw_config = toml.load(config_file)
            except toml.TomlDecodeError as error:
                raise ValueError(f"Invalid TOML in {path}: {error}") from error
        else:
            raise ValueError(f"Unsupported declaration format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Declaration file must contain a dictionary with a list of groups.\n"
            "Example:\n"
            "program: 'backup'\n"
            "groups:\n"
            "  - name: 'copy'\n"
            "    full: '--copy'\n"
            "    values: ['path', 'path']"
        )

    config = FlagsetConfig(**raw_config)
    try:
        parser = config.to_parser(registry)
    except DeclarationError as error:
        raise ValueError(f"Invalid declaration in {path}: {error}") from error
    logger.debug("Loaded %d flag group(s) from %s", len(parser.groups), path)
    return parser
