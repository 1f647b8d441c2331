"""
Flagset

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .converters import (
    INT,
    LONG,
    NULL,
    PATH,
    STRING,
    UINT16,
    UINT32,
    UINT64,
    AnyOrder,
    CoercedConverter,
    Converter,
    CustomConverter,
    GroupConverter,
    IntegerConverter,
    OptionalConverter,
    SequenceConverter,
)
from .flag_parser import FlagParser, display_help, parse_args
from .group import FlagGroup, FlagSpec, ParsedGroup
from .registry import ConversionRegistry, default_registry
from .version import __version__

logger = logging.getLogger("flagset")


__all__ = [
    "AnyOrder",
    "CoercedConverter",
    "ConversionRegistry",
    "Converter",
    "CustomConverter",
    "FlagGroup",
    "FlagParser",
    "FlagSpec",
    "GroupConverter",
    "INT",
    "IntegerConverter",
    "LONG",
    "NULL",
    "OptionalConverter",
    "PATH",
    "ParsedGroup",
    "STRING",
    "SequenceConverter",
    "UINT16",
    "UINT32",
    "UINT64",
    "__version__",
    "default_registry",
    "display_help",
    "parse_args",
]
