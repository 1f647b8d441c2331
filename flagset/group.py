# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flag groups: a literal flag bound to a typed sequence of values.

A `FlagGroup` recognizes its flag (long or short spelling) as the leading token,
strips it, and converts the rest with its declared value converters. A successful
match produces a `ParsedGroup`, an immutable record of the converted values and
the tokens left over.

Key Types:
- `FlagSpec`: the flag's long and short spellings plus its description.
- `FlagGroup`: a declared candidate group.
- `ParsedGroup`: the result of matching a group against a token list.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

from flagset.converters import Converter, SequenceConverter
from flagset.exceptions import (
    DeclarationError,
    FlagNotRecognized,
    TrailingArgumentsError,
)
from flagset.outcome import Converted, Failure, Outcome, Tokens


@dataclass(frozen=True)
class FlagSpec:
    """
    The spellings and description of one flag.

    Attributes:
        full (str): Long spelling, e.g. `--output`. Also the group's display name.
        short (str): Short spelling, e.g. `-o`. Empty if the flag has none.
        description (str): Help text.
    """

    full: str
    short: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.full, str) or not self.full:
            raise DeclarationError("A flag must have a non-empty full spelling")
        if not isinstance(self.short, str):
            raise DeclarationError(f"Short flag for {self.full} must be a string")
        if any(char.isspace() for char in self.full + self.short):
            raise DeclarationError(
                f"Flag spellings for {self.full} cannot contain spaces"
            )

    @property
    def spellings(self) -> tuple[str, ...]:
        return tuple(spelling for spelling in (self.full, self.short) if spelling)

    def matches(self, token: str) -> bool:
        return token in self.spellings


@dataclass(frozen=True)
class ParsedGroup:
    """
    The typed values produced by a successful flag match.

    Values are indexed by declared position; when the group declared field names,
    they can also be looked up by name.
    """

    name: str
    flag: str
    values: tuple[Any, ...]
    remaining: Tokens = ()
    names: tuple[str, ...] = field(default=())

    def __getitem__(self, key: int | str) -> Any:
        if isinstance(key, str):
            if key not in self.names:
                raise KeyError(f"{self.name} has no value named '{key}'")
            return self.values[self.names.index(key)]
        return self.values[key]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def as_dict(self) -> dict[str, Any]:
        """Return the values keyed by field name, or by position if unnamed."""
        keys = self.names or tuple(str(index) for index in range(len(self.values)))
        return dict(zip(keys, self.values))

    def ensure_no_remaining_arguments(self) -> None:
        """Raise `TrailingArgumentsError` if any token was left unconsumed."""
        if self.remaining:
            raise TrailingArgumentsError(self.remaining[0])


class FlagGroup:
    """
    A declared candidate group: one flag and the value types that follow it.

    Args:
        name (str): Registration name of the group.
        spec (FlagSpec): The flag spellings and description.
        values (Sequence[Converter]): Converters for the values after the flag,
            in declared order. `AnyOrder` members allow their values in any rotation.
        names (Sequence[str] | None): Optional field names, one per value.
    """

    def __init__(
        self,
        name: str,
        spec: FlagSpec,
        values: Sequence[Converter] = (),
        names: Sequence[str] | None = None,
    ) -> None:
        self.name = name
        self.spec = spec
        self.payload = SequenceConverter(values)
        self.names: tuple[str, ...] = tuple(names or ())
        if self.names and len(self.names) != len(self.payload):
            raise DeclarationError(
                f"Group '{name}' declares {len(self.payload)} value(s) "
                f"but {len(self.names)} name(s)"
            )
        if len(set(self.names)) != len(self.names):
            raise DeclarationError(f"Group '{name}' has duplicate value names")

    @property
    def converters(self) -> tuple[Converter, ...]:
        return self.payload.converters

    def type_names(self) -> str:
        """Comma-joined display names of the declared value types."""
        return self.payload.name

    def match(self, tokens: Tokens) -> Outcome:
        if not tokens:
            return Failure(FlagNotRecognized(None))
        if not self.spec.matches(tokens[0]):
            return Failure(FlagNotRecognized(tokens[0]))
        outcome = self.payload.attempt(tokens[1:])
        if isinstance(outcome, Failure):
            return outcome.chain(f"Parsing flag {self.spec.full} failed.")
        parsed = ParsedGroup(
            name=self.name,
            flag=self.spec.full,
            values=outcome.value,
            remaining=outcome.remaining,
            names=self.names,
        )
        return Converted(parsed, outcome.remaining)

    def parse(self, tokens: Sequence[str]) -> ParsedGroup:
        """Match `tokens`, raising the `ParseError` on failure."""
        outcome = self.match(tuple(tokens))
        if isinstance(outcome, Failure):
            raise outcome.error
        return outcome.value

    def __str__(self) -> str:
        return (
            f"FlagGroup(name={self.name!r}, flag={self.spec.full!r}, "
            f"values=[{self.type_names()}])"
        )

    def __repr__(self) -> str:
        return str(self)
