# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Chooses which candidate flag group parses a token list.

Candidates are tried in declared order and the first one that matches wins, even
if a later candidate would also match. Failed candidates are discarded; their
failures are only kept to explain a `NoCandidateMatched` error.
"""
from __future__ import annotations

from typing import Sequence

from flagset.exceptions import NoCandidateMatched, ParseError
from flagset.group import FlagGroup
from flagset.logger import logger
from flagset.outcome import Converted, Failure, Outcome, Tokens


def select_group(candidates: Sequence[FlagGroup], tokens: Tokens) -> Outcome:
    """
    Return the outcome of the first candidate that matches `tokens`.

    Returns:
        Outcome: `Converted` holding the winning `ParsedGroup`, or a `Failure`
        wrapping `NoCandidateMatched` with every candidate's failure.
    """
    failures: list[ParseError] = []
    for group in candidates:
        outcome = group.match(tokens)
        if isinstance(outcome, Converted):
            logger.debug("Selected flag group '%s'", group.name)
            return outcome
        logger.debug(
            "Flag group '%s' did not match: %s", group.name, outcome.error.describe()
        )
        failures.append(outcome.error)
    return Failure(NoCandidateMatched(failures))
