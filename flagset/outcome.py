# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result types threaded through every conversion step.

Each attempt returns either `Converted` (the value plus the unconsumed tail of the
token list) or `Failure` (a `ParseError` that has not been raised). Backtracking
points branch on the failure variant instead of unwinding the stack; errors are
only raised at the public entry points.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from flagset.exceptions import ParseError

T = TypeVar("T")

Tokens = tuple[str, ...]


@dataclass(frozen=True)
class Converted(Generic[T]):
    """A successfully converted value and the tokens left after it."""

    value: T
    remaining: Tokens


@dataclass(frozen=True)
class Failure:
    """A conversion attempt that did not succeed."""

    error: ParseError

    def chain(self, message: str) -> Failure:
        """Return a failure wrapping this one with extra context."""
        return Failure(self.error.with_context(message))


Outcome = Union[Converted[Any], Failure]


def is_suffix(remaining: Tokens, tokens: Tokens) -> bool:
    """Check that `remaining` is a (possibly empty) suffix of `tokens`."""
    if len(remaining) > len(tokens):
        return False
    return tokens[len(tokens) - len(remaining) :] == remaining
