# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the converters that turn tokens into typed values.

Every value type a flag group can declare is represented by a `Converter`: it
has a display name used in help text and error messages, and an `attempt()`
method that takes the remaining tokens and returns an `Outcome`. Converters are
immutable and hold no per-parse state, so one instance can be shared by any
number of groups.

Leaf converters consume exactly one token (`IntegerConverter`,
`StringConverter`, `PathConverter`, `CoercedConverter`) or none at all
(`NullConverter`). Composite converters wrap other converters:

- `OptionalConverter`: the inner value, or `None` without consuming anything.
- `SequenceConverter`: a fixed, ordered tuple of values.
- `AnyOrder`: a tuple of values that may be supplied in any rotation of the
  declared order; results are always reported in declared order.
- `GroupConverter`: a nested flag group, parsed with its own flag matcher.
- `CustomConverter`: any user class exposing `parse(tokens)` and `name()`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

from flagset.coerce import coerce_value, type_display_name
from flagset.exceptions import (
    ArityError,
    ConversionError,
    DeclarationError,
    ParseError,
    PermutationExhausted,
)
from flagset.logger import logger
from flagset.outcome import Converted, Failure, Outcome, Tokens, is_suffix
from flagset.sequence import convert_step, parse_sequence

if TYPE_CHECKING:
    from flagset.group import FlagGroup


class Converter(ABC):
    """
    Base class for all converters.

    Subclasses implement `name` and `attempt()`. `accepts_empty` is True for
    converters that can succeed without any tokens left, which exempts them from
    the arity check done by the sequence parser.
    """

    accepts_empty: bool = False

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def attempt(self, tokens: Tokens) -> Outcome: ...

    def convert(self, tokens: Sequence[str]) -> Converted[Any]:
        """Convert `tokens`, raising the `ParseError` on failure."""
        outcome = self.attempt(tuple(tokens))
        if isinstance(outcome, Failure):
            raise outcome.error
        return outcome

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __repr__(self) -> str:
        return str(self)


class IntegerConverter(Converter):
    """Converts one token to an integer, optionally bounded to a fixed range."""

    def __init__(
        self,
        name: str,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> None:
        self._name = name
        self.minimum = minimum
        self.maximum = maximum

    @property
    def name(self) -> str:
        return self._name

    def attempt(self, tokens: Tokens) -> Outcome:
        if not tokens:
            return Failure(ArityError())
        token = tokens[0]
        try:
            value = int(token, 10)
        except ValueError:
            return Failure(ConversionError(token, self.name))
        if self.minimum is not None and value < self.minimum:
            return Failure(ConversionError(token, self.name, f"below {self.minimum}"))
        if self.maximum is not None and value > self.maximum:
            return Failure(ConversionError(token, self.name, f"above {self.maximum}"))
        return Converted(value, tokens[1:])


class StringConverter(Converter):
    """Takes one token verbatim."""

    @property
    def name(self) -> str:
        return "string"

    def attempt(self, tokens: Tokens) -> Outcome:
        if not tokens:
            return Failure(ArityError())
        return Converted(tokens[0], tokens[1:])


class PathConverter(Converter):
    """Wraps one token in a `pathlib.Path`."""

    @property
    def name(self) -> str:
        return "path"

    def attempt(self, tokens: Tokens) -> Outcome:
        if not tokens:
            return Failure(ArityError())
        return Converted(Path(tokens[0]), tokens[1:])


class NullConverter(Converter):
    """Consumes nothing and always yields `None`."""

    accepts_empty = True

    @property
    def name(self) -> str:
        return ""

    def attempt(self, tokens: Tokens) -> Outcome:
        return Converted(None, tokens)


class CoercedConverter(Converter):
    """Converts one token with `coerce_value` (enums, bools, floats, datetimes, ...)."""

    def __init__(self, target_type: Any, name: str | None = None) -> None:
        self.target_type = target_type
        self._name = name or type_display_name(target_type)

    @property
    def name(self) -> str:
        return self._name

    def attempt(self, tokens: Tokens) -> Outcome:
        if not tokens:
            return Failure(ArityError())
        token = tokens[0]
        try:
            value = coerce_value(token, self.target_type)
        except (ValueError, TypeError) as error:
            return Failure(ConversionError(token, self.name, str(error)))
        return Converted(value, tokens[1:])


class OptionalConverter(Converter):
    """
    Converts the inner type if possible, otherwise yields `None`.

    An absent value never consumes tokens: the original token list is returned
    untouched.
    """

    accepts_empty = True

    def __init__(self, inner: Converter) -> None:
        self.inner = inner

    @property
    def name(self) -> str:
        return f"[{self.inner.name}]"

    def attempt(self, tokens: Tokens) -> Outcome:
        if not tokens:
            return Converted(None, tokens)
        outcome = self.inner.attempt(tokens)
        if isinstance(outcome, Failure):
            logger.debug(
                "Optional %s absent: %s", self.inner.name, outcome.error.message
            )
            return Converted(None, tokens)
        return outcome


class SequenceConverter(Converter):
    """Converts a fixed, ordered tuple of values."""

    def __init__(self, converters: Sequence[Converter]) -> None:
        self.converters: tuple[Converter, ...] = tuple(converters)
        self.accepts_empty = all(
            converter.accepts_empty for converter in self.converters
        )

    @property
    def name(self) -> str:
        return ", ".join(converter.name for converter in self.converters)

    def attempt(self, tokens: Tokens) -> Outcome:
        return parse_sequence(self.converters, tokens)

    def __len__(self) -> int:
        return len(self.converters)


class AnyOrder(Converter):
    """
    Converts a tuple of values supplied in any rotation of the declared order.

    The search tries the declared order first, then moves the first type to the
    end and retries, for at most one full cycle. Only rotations are explored: for
    three or more types an input order that is not a rotation of the declared
    order (declared `A, B, C`, given `B, A, C`) is rejected with
    `PermutationExhausted`.

    Values are always returned in declared order, whichever rotation matched.

    The cycle runs twice at most. The first pass is strict: an optional slot that
    comes up absent while tokens remain fails the rotation unless it is the last
    slot, since the token in front of it may belong to a slot further along. If
    no rotation passes, a second pass accepts absent optionals in any slot, so
    optionals that are all missing ahead of a later value still match.
    """

    def __init__(self, converters: Sequence[Converter]) -> None:
        self.converters: tuple[Converter, ...] = tuple(converters)
        self.accepts_empty = all(
            converter.accepts_empty for converter in self.converters
        )

    @property
    def name(self) -> str:
        return ", ".join(converter.name for converter in self.converters)

    def rotations(self) -> list[list[int]]:
        """Declared positions in the order each rotation tries them."""
        positions = list(range(len(self.converters)))
        return [
            positions[shift:] + positions[:shift] for shift in range(len(positions))
        ]

    def _attempt_order(
        self, order: list[int], tokens: Tokens, strict: bool = True
    ) -> Outcome:
        values = []
        remaining = tokens
        last = len(order) - 1
        for step, position in enumerate(order):
            converter = self.converters[position]
            outcome = convert_step(converter, remaining, position)
            if isinstance(outcome, Failure):
                return outcome
            if (
                strict
                and isinstance(converter, OptionalConverter)
                and outcome.value is None
                and remaining
                and step < last
            ):
                return Failure(
                    ConversionError(remaining[0], converter.inner.name)
                ).chain(f"Optional value #{position + 1} absent before the last slot")
            values.append(outcome.value)
            remaining = outcome.remaining
        return Converted(tuple(values), remaining)

    def _search(self, tokens: Tokens, strict: bool) -> Outcome:
        failures: list[ParseError] = []
        for order in self.rotations():
            outcome = self._attempt_order(order, tokens, strict)
            if isinstance(outcome, Converted):
                values: list[Any] = [None] * len(order)
                for position, value in zip(order, outcome.value):
                    values[position] = value
                return Converted(tuple(values), outcome.remaining)
            logger.debug(
                "AnyOrder(%s) %s rotation %s failed: %s",
                self.name,
                "strict" if strict else "relaxed",
                order,
                outcome.error.message,
            )
            failures.append(outcome.error)
        return Failure(PermutationExhausted(self.name, failures))

    def attempt(self, tokens: Tokens) -> Outcome:
        if not self.converters:
            return Converted((), tokens)
        outcome = self._search(tokens, strict=True)
        if isinstance(outcome, Converted) or not any(
            isinstance(converter, OptionalConverter) for converter in self.converters
        ):
            return outcome
        relaxed = self._search(tokens, strict=False)
        return relaxed if isinstance(relaxed, Converted) else outcome

    def __len__(self) -> int:
        return len(self.converters)


class GroupConverter(Converter):
    """Parses a nested flag group; the value is its `ParsedGroup`."""

    def __init__(self, group: FlagGroup) -> None:
        self.group = group

    @property
    def name(self) -> str:
        return self.group.spec.full

    def attempt(self, tokens: Tokens) -> Outcome:
        return self.group.match(tokens)


class CustomConverter(Converter):
    """
    Adapts a user-defined type to the converter interface.

    The type must be constructible without arguments and expose:
    - `parse(tokens) -> remaining`: initialize itself from the leading tokens and
      return the unconsumed tail.
    - `name() -> str`: display name for help text.

    `ParseError`, `ValueError`, `TypeError` and `IndexError` raised by `parse`
    become failures. A type that cannot be built without arguments is rejected
    with `DeclarationError` when the converter is created.
    """

    def __init__(self, target_type: type) -> None:
        if not is_convertible(target_type):
            raise TypeError(
                f"{target_type!r} must define parse(tokens) and name() to be converted"
            )
        self.target_type = target_type
        try:
            prototype = target_type()
        except TypeError as error:
            raise DeclarationError(
                f"{target_type.__name__} must be constructible without arguments"
            ) from error
        self._name = str(prototype.name())

    @property
    def name(self) -> str:
        return self._name

    def attempt(self, tokens: Tokens) -> Outcome:
        instance = self.target_type()
        try:
            remaining = tuple(instance.parse(list(tokens)))
        except ParseError as error:
            return Failure(error)
        except (ValueError, TypeError, IndexError) as error:
            token = tokens[0] if tokens else ""
            return Failure(ConversionError(token, self.name, str(error)))
        if not is_suffix(remaining, tokens):
            return Failure(
                ConversionError(
                    tokens[0] if tokens else "",
                    self.name,
                    "parse() returned tokens that are not a suffix of its input",
                )
            )
        return Converted(instance, remaining)


def is_convertible(target: Any) -> bool:
    """Check whether a class meets the `parse(tokens)` / `name()` contract."""
    return (
        isinstance(target, type)
        and callable(getattr(target, "parse", None))
        and callable(getattr(target, "name", None))
    )


INT = IntegerConverter("int")
LONG = IntegerConverter("long", -(2**63), 2**63 - 1)
UINT16 = IntegerConverter("uint16", 0, 2**16 - 1)
UINT32 = IntegerConverter("uint32", 0, 2**32 - 1)
UINT64 = IntegerConverter("uint64", 0, 2**64 - 1)
STRING = StringConverter()
PATH = PathConverter()
NULL = NullConverter()
