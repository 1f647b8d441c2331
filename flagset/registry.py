# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Maps declared value types to converters.

`ConversionRegistry.resolve()` accepts the Python spellings used when declaring a
flag group and returns the matching `Converter`:

- a `Converter` instance is used as is
- a `FlagGroup` becomes a nested-group converter
- `None` declares a value-less slot
- `str`, `int`, `pathlib.Path` map to the built-in leaves
- `X | None` / `Optional[X]` wraps `X` in an optional converter
- `tuple[A, B, ...]` becomes an ordered sub-sequence
- explicitly registered types use their registered converter
- classes exposing `parse(tokens)` and `name()` use the extension contract
- enums, `bool`, `float`, `datetime`, `Literal[...]` and other string-constructible
  classes are coerced from a single token

`resolve_name()` does the same for the textual descriptors used in declaration
files (`"uint32"`, `"[path]"`, ...).
"""
from __future__ import annotations

import types
from datetime import datetime
from pathlib import PurePath
from typing import Any, Callable, Literal, Union, get_args, get_origin

from flagset.converters import (
    INT,
    LONG,
    NULL,
    PATH,
    STRING,
    UINT16,
    UINT32,
    UINT64,
    CoercedConverter,
    Converter,
    CustomConverter,
    GroupConverter,
    OptionalConverter,
    SequenceConverter,
    is_convertible,
)
from flagset.exceptions import DeclarationError
from flagset.group import FlagGroup

ConverterFactory = Callable[[Any], Converter]


class ConversionRegistry:
    """A type-indexed family of converters, open to new types via `register()`."""

    def __init__(self) -> None:
        self._by_type: dict[Any, Converter | ConverterFactory] = {
            str: STRING,
            int: INT,
        }
        self._by_name: dict[str, Converter] = {
            converter.name: converter
            for converter in (INT, LONG, UINT16, UINT32, UINT64, STRING, PATH)
        }
        self._by_name.update(
            {
                "str": STRING,
                "float": CoercedConverter(float),
                "bool": CoercedConverter(bool),
                "datetime": CoercedConverter(datetime),
            }
        )

    def register(
        self,
        target: Any,
        converter: Converter | ConverterFactory,
        name: str | None = None,
    ) -> None:
        """
        Register a converter (or a factory called with the type) for `target`.

        When `converter` is an instance, it also becomes resolvable by its display
        name, or by `name` if given.
        """
        if not isinstance(converter, Converter) and not callable(converter):
            raise DeclarationError(
                f"Converter for {target!r} must be a Converter or a callable"
            )
        self._by_type[target] = converter
        if isinstance(converter, Converter):
            self._by_name[name or converter.name] = converter

    def names(self) -> list[str]:
        return sorted(self._by_name)

    def resolve(self, hint: Any) -> Converter:
        if isinstance(hint, Converter):
            return hint
        if isinstance(hint, FlagGroup):
            return GroupConverter(hint)
        if hint is None or hint is type(None):
            return NULL

        origin = get_origin(hint)
        args = get_args(hint)

        if isinstance(hint, types.UnionType) or origin is Union:
            members = [arg for arg in args if arg is not type(None)]
            if len(members) == len(args):
                return CoercedConverter(hint)
            if len(members) == 1:
                return OptionalConverter(self.resolve(members[0]))
            return OptionalConverter(CoercedConverter(Union[tuple(members)]))

        if origin is tuple:
            if not args or Ellipsis in args:
                raise DeclarationError(
                    f"{hint!r}: only fixed-length tuples can be declared"
                )
            return SequenceConverter([self.resolve(arg) for arg in args])

        if origin is Literal:
            return CoercedConverter(hint)

        if origin is not None:
            raise DeclarationError(f"Cannot declare a value of type {hint!r}")

        try:
            registered = self._by_type.get(hint)
        except TypeError:
            registered = None
        if registered is not None:
            if isinstance(registered, Converter):
                return registered
            return registered(hint)

        if isinstance(hint, type):
            if issubclass(hint, PurePath):
                return PATH
            if is_convertible(hint):
                return CustomConverter(hint)
            return CoercedConverter(hint)

        raise DeclarationError(f"Cannot declare a value of type {hint!r}")

    def resolve_name(self, text: str) -> Converter:
        """Resolve a textual descriptor such as `uint32` or `[path]`."""
        text = text.strip()
        if text.startswith("[") and text.endswith("]"):
            return OptionalConverter(self.resolve_name(text[1:-1]))
        if not text:
            return NULL
        converter = self._by_name.get(text)
        if converter is None:
            valid = ", ".join(self.names())
            raise DeclarationError(
                f"Unknown value type '{text}'. Must be one of: {valid}"
            )
        return converter


default_registry = ConversionRegistry()
