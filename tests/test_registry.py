from datetime import datetime
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Literal, Optional

import pytest

from flagset.converters import (
    INT,
    NULL,
    PATH,
    STRING,
    UINT32,
    AnyOrder,
    CoercedConverter,
    CustomConverter,
    GroupConverter,
    IntegerConverter,
    OptionalConverter,
    SequenceConverter,
)
from flagset.exceptions import DeclarationError
from flagset.group import FlagGroup, FlagSpec
from flagset.registry import ConversionRegistry


class Color(Enum):
    RED = "red"


class Version:
    def __init__(self):
        self.parts = ()

    def parse(self, tokens):
        self.parts = tuple(int(part) for part in tokens[0].split("."))
        return tokens[1:]

    def name(self):
        return "version"


@pytest.fixture
def registry():
    return ConversionRegistry()


@pytest.mark.parametrize(
    "hint, expected",
    [(str, STRING), (int, INT), (Path, PATH), (PurePosixPath, PATH), (None, NULL)],
)
def test_builtin_hints(registry, hint, expected):
    assert registry.resolve(hint) is expected


def test_converter_passthrough(registry):
    assert registry.resolve(UINT32) is UINT32
    any_order = AnyOrder([INT, STRING])
    assert registry.resolve(any_order) is any_order


@pytest.mark.parametrize("hint", [int | None, Optional[int]])
def test_optional_hints(registry, hint):
    converter = registry.resolve(hint)
    assert isinstance(converter, OptionalConverter)
    assert converter.inner is INT


def test_optional_union_hint(registry):
    converter = registry.resolve(int | float | None)
    assert isinstance(converter, OptionalConverter)
    assert converter.attempt(("2.5",)).value == 2.5


def test_tuple_hint(registry):
    converter = registry.resolve(tuple[int, str])
    assert isinstance(converter, SequenceConverter)
    assert converter.converters == (INT, STRING)
    assert converter.attempt(("1", "a")).value == (1, "a")


def test_variadic_tuple_rejected(registry):
    with pytest.raises(DeclarationError):
        registry.resolve(tuple[int, ...])


@pytest.mark.parametrize("hint", [float, bool, datetime, Color, Literal["a", "b"]])
def test_coerced_hints(registry, hint):
    assert isinstance(registry.resolve(hint), CoercedConverter)


def test_custom_hint(registry):
    converter = registry.resolve(Version)
    assert isinstance(converter, CustomConverter)
    assert converter.attempt(("1.2.3",)).value.parts == (1, 2, 3)


def test_group_hint(registry):
    group = FlagGroup("size", FlagSpec("--size"), [INT])
    converter = registry.resolve(group)
    assert isinstance(converter, GroupConverter)
    assert converter.name == "--size"


def test_register_converter(registry):
    class Port(int):
        pass

    port = IntegerConverter("port", 1, 65535)
    registry.register(Port, port)
    assert registry.resolve(Port) is port
    assert registry.resolve_name("port") is port


def test_register_factory(registry):
    class Celsius(float):
        pass

    registry.register(Celsius, lambda hint: CoercedConverter(hint, name="celsius"))
    assert registry.resolve(Celsius).name == "celsius"


def test_register_rejects_non_converter(registry):
    with pytest.raises(DeclarationError):
        registry.register(int, 5)


def test_unresolvable_hint(registry):
    with pytest.raises(DeclarationError):
        registry.resolve(list[int])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("string", STRING),
        ("str", STRING),
        ("path", PATH),
        ("int", INT),
        ("uint32", UINT32),
    ],
)
def test_resolve_name(registry, text, expected):
    assert registry.resolve_name(text) is expected


def test_resolve_name_optional(registry):
    converter = registry.resolve_name("[uint32]")
    assert isinstance(converter, OptionalConverter)
    assert converter.inner is UINT32


def test_resolve_name_unknown(registry):
    with pytest.raises(DeclarationError) as excinfo:
        registry.resolve_name("uint8")
    assert "uint16" in str(excinfo.value)


def test_registries_are_independent(registry):
    registry.register(bytes, CoercedConverter(str, name="blob"))
    assert "blob" not in ConversionRegistry().names()


def test_custom_type_with_required_arguments(registry):
    class Scaled:
        def __init__(self, factor):
            self.factor = factor

        def parse(self, tokens):
            return tokens[1:]

        def name(self):
            return "scaled"

    with pytest.raises(DeclarationError):
        registry.resolve(Scaled)
