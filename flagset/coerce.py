# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Single-token coercion for value types without a dedicated converter.

`CoercedConverter` hands each token to `coerce_value`, which understands:
- enums, matched by member name or by the string form of the member value
- `bool` words (`true`/`false`, `yes`/`no`, `on`/`off`, `1`/`0`)
- `datetime` strings, parsed with dateutil
- `Literal[...]` choices, compared by their string form
- unions, whose members are tried left to right
- any class whose constructor takes one string (`float`, `Decimal`, ...)

Every failure is a `ValueError` (or the `TypeError` a constructor raises), which
the converter turns into a `ConversionError` for the offending token.
"""
import types
from datetime import datetime
from enum import Enum
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSE_WORDS = frozenset({"false", "f", "no", "n", "off", "0"})


def coerce_bool(token: str) -> bool:
    """Read a boolean word, case-insensitively. Unknown words are rejected."""
    word = token.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"'{token}' is not a recognized boolean")


def coerce_enum(token: str, enum_type: type[Enum]) -> Enum:
    if token in enum_type.__members__:
        return enum_type[token]
    for member in enum_type:
        if str(member.value) == token:
            return member
    raise ValueError(f"'{token}' should be one of {type_display_name(enum_type)}")


def coerce_literal(token: str, literal_type: Any) -> Any:
    for choice in get_args(literal_type):
        if str(choice) == token:
            return choice
    raise ValueError(f"'{token}' should be one of {type_display_name(literal_type)}")


def coerce_datetime(token: str) -> datetime:
    try:
        return date_parser.parse(token)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"'{token}' could not be parsed as a datetime") from error


def coerce_value(token: str, target_type: Any) -> Any:
    """
    Convert one token to `target_type`.

    Raises:
        ValueError: If the token is not a valid value of the type.
        TypeError: If the type's constructor rejects a string argument.
    """
    origin = get_origin(target_type)
    if origin is Literal:
        return coerce_literal(token, target_type)

    if isinstance(target_type, types.UnionType) or origin is Union:
        for member in get_args(target_type):
            try:
                return coerce_value(token, member)
            except (ValueError, TypeError):
                continue
        raise ValueError(
            f"'{token}' could not be coerced to {type_display_name(target_type)}"
        )

    if isinstance(target_type, type) and issubclass(target_type, Enum):
        return coerce_enum(token, target_type)
    if target_type is bool:
        return coerce_bool(token)
    if target_type is datetime:
        return coerce_datetime(token)
    return target_type(token)


def type_display_name(target_type: Any) -> str:
    """Return the display name used in help text for a coercion target."""
    origin = get_origin(target_type)
    if origin is Literal:
        return "{" + ",".join(str(arg) for arg in get_args(target_type)) + "}"
    if isinstance(target_type, types.UnionType) or origin is Union:
        return " | ".join(type_display_name(arg) for arg in get_args(target_type))
    if isinstance(target_type, type) and issubclass(target_type, Enum):
        return "{" + ",".join(str(member.value) for member in target_type) + "}"
    return getattr(target_type, "__name__", str(target_type)).lower()
