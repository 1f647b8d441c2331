from pathlib import Path

from flagset.converters import INT, PATH, STRING, OptionalConverter
from flagset.outcome import Converted


def test_optional_present():
    converter = OptionalConverter(INT)
    assert converter.attempt(("5", "x")) == Converted(5, ("x",))


def test_optional_absent_keeps_tokens():
    converter = OptionalConverter(INT)
    outcome = converter.attempt(("abc",))
    assert isinstance(outcome, Converted)
    assert outcome.value is None
    assert outcome.remaining == ("abc",)


def test_optional_absent_on_empty_tokens():
    converter = OptionalConverter(PATH)
    assert converter.attempt(()) == Converted(None, ())
    assert converter.accepts_empty


def test_optional_string_always_present():
    converter = OptionalConverter(STRING)
    assert converter.attempt(("anything",)).value == "anything"


def test_optional_name():
    assert OptionalConverter(INT).name == "[int]"
    assert OptionalConverter(PATH).name == "[path]"


def test_optional_path_value():
    assert OptionalConverter(PATH).attempt(("a",)).value == Path("a")
