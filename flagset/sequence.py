# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Left-to-right parsing of an ordered list of value types.

The declared order is load-bearing: each converter runs against the tail left by
the previous one and the first failure fails the whole sequence. There is no
backtracking here; `AnyOrder` and the group selector build theirs on top.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from flagset.exceptions import ArityError
from flagset.outcome import Converted, Failure, Outcome, Tokens

if TYPE_CHECKING:
    from flagset.converters import Converter


def convert_step(converter: Converter, tokens: Tokens, position: int) -> Outcome:
    """Convert one declared value, failing fast on an empty token list."""
    outcome: Outcome
    if not tokens and not converter.accepts_empty:
        outcome = Failure(ArityError())
    else:
        outcome = converter.attempt(tokens)
    if isinstance(outcome, Failure):
        return outcome.chain(
            f"Could not convert type {converter.name} (value #{position + 1})"
        )
    return outcome


def parse_sequence(converters: Sequence[Converter], tokens: Tokens) -> Outcome:
    """
    Convert `converters` in order against `tokens`.

    Returns:
        Outcome: `Converted` holding a tuple with one value per converter and the
        tail left by the last one, or the first `Failure` encountered.
    """
    values = []
    remaining = tokens
    for position, converter in enumerate(converters):
        outcome = convert_step(converter, remaining, position)
        if isinstance(outcome, Failure):
            return outcome
        values.append(outcome.value)
        remaining = outcome.remaining
    return Converted(tuple(values), remaining)
