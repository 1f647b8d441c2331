import io
from pathlib import Path

import pytest
from rich.console import Console

from flagset import FlagParser, display_help
from flagset.converters import STRING, UINT16, AnyOrder, OptionalConverter
from flagset.help import HelpRenderer


def plain_console():
    return Console(file=io.StringIO(), color_system=None, width=120)


@pytest.fixture
def parser():
    parser = FlagParser(program="backup")
    parser.add_group(
        "copy", "--copy", "-c", "Copy SOURCE to TARGET", values=[Path, Path]
    )
    parser.add_group(
        "level",
        "--level",
        "-l",
        "Set [the] level",
        values=[AnyOrder([UINT16, OptionalConverter(STRING)])],
    )
    parser.add_group("version", "--version", "", "Show the version")
    return parser


def test_render_text(parser):
    assert parser.help_text() == (
        "--copy, -c path, path\n"
        "Copy SOURCE to TARGET\n"
        "\n"
        "--level, -l uint16, [string]\n"
        "Set [the] level\n"
        "\n"
        "--version\n"
        "Show the version\n"
        "\n"
    )


def test_render_prints_each_group(parser):
    console = plain_console()
    display_help(parser.groups, console)
    output = console.file.getvalue()
    assert output == parser.help_text()


def test_help_is_idempotent(parser):
    console = plain_console()
    renderer = HelpRenderer(parser.groups, console)
    renderer.render()
    first = console.file.getvalue()
    renderer.render()
    assert console.file.getvalue() == first * 2
    assert parser.parse_args(["--version"]).values == ()


def test_render_help_default_console(parser, capsys):
    parser.render_help()
    captured = capsys.readouterr()
    assert "Copy SOURCE to TARGET" in captured.out
    assert "Show the version" in captured.out


def test_nested_group_shows_its_flag():
    parser = FlagParser()
    size = parser.add_group("size", "--size", "-s", "Size", values=[int, int])
    parser.add_group("resize", "--resize", "-r", "Resize", values=[Path, size])
    assert "--resize, -r path, --size\n" in parser.help_text()
