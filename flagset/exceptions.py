# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by flagset.

Declaration problems (bad flag specs, unknown value types, duplicate groups) are
reported with `DeclarationError` as soon as a group is declared. Parse problems
are reported with subclasses of `ParseError`, a chainable error that keeps the
full context trail from the failing leaf up to the flag being parsed.

Exception Hierarchy:
- FlagsetError
    ├── DeclarationError
    └── ParseError
        ├── ArityError
        ├── ConversionError
        ├── FlagNotRecognized
        ├── PermutationExhausted
        ├── NoCandidateMatched
        └── TrailingArgumentsError

`ArityError`, `ConversionError` and `FlagNotRecognized` are recoverable: optional
values, any-order clusters and the group selector fall through on them.
`NoCandidateMatched` and `TrailingArgumentsError` are final and reach the caller.
"""
from __future__ import annotations

from typing import Sequence


class FlagsetError(Exception):
    """Base exception for flagset."""


class DeclarationError(FlagsetError):
    """Exception raised when a flag group or value type is declared incorrectly."""


class ParseError(FlagsetError):
    """
    A message-carrying parse failure that can wrap an inner failure.

    Wrapping never loses the inner message: `trace()` returns the whole chain,
    outermost context first.
    """

    def __init__(self, message: str, cause: ParseError | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def with_context(self, message: str) -> ParseError:
        """Return a new error carrying `message` and wrapping this one."""
        return ParseError(message, cause=self)

    @property
    def root(self) -> ParseError:
        """The innermost error of the chain."""
        error = self
        while error.cause is not None:
            error = error.cause
        return error

    def trace(self) -> list[str]:
        messages = []
        error: ParseError | None = self
        while error is not None:
            messages.append(error.message)
            error = error.cause
        return messages

    def describe(self) -> str:
        """Render the chain, one message per line."""
        return "\n  caused by: ".join(self.trace())


class ArityError(ParseError):
    """Exception raised when too few tokens remain for a required value."""

    def __init__(self, message: str = "Missing arguments") -> None:
        super().__init__(message)


class ConversionError(ParseError):
    """Exception raised when a token cannot be interpreted as the target type."""

    def __init__(self, token: str, type_name: str, detail: str = "") -> None:
        message = f'Could not convert "{token}" to a {type_name}'
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.token = token
        self.type_name = type_name


class FlagNotRecognized(ParseError):
    """Exception raised when the leading token is not one of a group's flags."""

    def __init__(self, token: str | None) -> None:
        if token is None:
            message = "Could not parse empty flags"
        else:
            message = f"Could not parse flag: {token}"
        super().__init__(message)
        self.token = token


class PermutationExhausted(ParseError):
    """Exception raised when no rotation of an any-order cluster parses."""

    def __init__(self, type_name: str, failures: Sequence[ParseError]) -> None:
        super().__init__(
            f"No ordering of ({type_name}) matched after {len(failures)} rotation(s)",
            cause=failures[-1] if failures else None,
        )
        self.type_name = type_name
        self.failures = list(failures)


class NoCandidateMatched(ParseError):
    """Exception raised when every candidate flag group failed to parse."""

    def __init__(self, failures: Sequence[ParseError]) -> None:
        reasons = "; ".join(failure.message for failure in failures)
        message = "No flag group matched the arguments"
        if reasons:
            message = f"{message} ({reasons})"
        super().__init__(message)
        self.failures = list(failures)

    def describe(self) -> str:
        lines = [self.message]
        for failure in self.failures:
            lines.append("  - " + failure.describe().replace("\n", "\n    "))
        return "\n".join(lines)


class TrailingArgumentsError(ParseError):
    """Exception raised when tokens remain after a successful parse."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Argument {token} not parsed.")
        self.token = token
