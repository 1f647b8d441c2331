from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal

import pytest

from flagset.coerce import coerce_value, type_display_name


# --- Tests ---
@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.14", float, 3.14),
        ("True", bool, True),
        ("hello", str, "hello"),
        ("", str, ""),
        ("False", bool, False),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("1", bool | str, True),
    ],
)
def test_coerce_value_union_success(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_coerce_value_typing_union_equivalent():
    from typing import Union

    assert coerce_value("123", Union[int, str]) == 123
    assert coerce_value("abc", Union[int, str]) == "abc"


def test_coerce_value_int_enum():
    class Status(Enum):
        SUCCESS = 0
        FAILURE = 1
        PENDING = 2

    assert coerce_value("0", Status) == Status.SUCCESS
    assert coerce_value("PENDING", Status) == Status.PENDING

    with pytest.raises(ValueError):
        coerce_value("3", Status)


class Mode(Enum):
    DEV = "dev"
    PROD = "prod"


def test_literal_coercion():
    assert coerce_value("dev", Literal["dev", "prod"]) == "dev"
    with pytest.raises(ValueError):
        coerce_value("staging", Literal["dev", "prod"])


def test_enum_coercion():
    assert coerce_value("dev", Mode) == Mode.DEV
    assert coerce_value("DEV", Mode) == Mode.DEV
    with pytest.raises(ValueError):
        coerce_value("staging", Mode)


def test_path_coercion():
    result = coerce_value("/tmp/test.txt", Path)
    assert isinstance(result, Path)
    assert str(result) == "/tmp/test.txt"


def test_datetime_coercion():
    result = coerce_value("2023-10-01T13:00:00", datetime)
    assert isinstance(result, datetime)
    assert result.year == 2023 and result.month == 10

    with pytest.raises(ValueError):
        coerce_value("not-a-date", datetime)


def test_bool_coercion():
    assert coerce_value("true", bool) is True
    assert coerce_value("0", bool) is False
    assert coerce_value("yes", bool) is True
    assert coerce_value("off", bool) is False


def test_bool_coercion_rejects_unknown_words():
    """Unknown words are rejected instead of being treated as True."""
    with pytest.raises(ValueError):
        coerce_value("maybe", bool)
    with pytest.raises(ValueError):
        coerce_value("", bool)


@pytest.mark.parametrize(
    "target_type, expected",
    [
        (float, "float"),
        (bool, "bool"),
        (datetime, "datetime"),
        (Mode, "{dev,prod}"),
        (Literal["a", "b"], "{a,b}"),
        (int | float, "int | float"),
    ],
)
def test_type_display_name(target_type, expected):
    assert type_display_name(target_type) == expected


def test_literal_choices_keep_their_type():
    assert coerce_value("2", Literal[1, 2, 3]) == 2
    with pytest.raises(ValueError) as excinfo:
        coerce_value("4", Literal[1, 2, 3])
    assert "{1,2,3}" in str(excinfo.value)


def test_enum_error_lists_values():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("gif", Mode)
    assert "{dev,prod}" in str(excinfo.value)


@pytest.mark.parametrize("word", ["Y", " on ", "TRUE"])
def test_bool_words_are_case_insensitive(word):
    assert coerce_value(word, bool) is True
