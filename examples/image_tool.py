import sys
from enum import Enum
from pathlib import Path

from rich.markup import escape

from flagset import PATH, UINT32, AnyOrder, FlagParser, OptionalConverter
from flagset.console import console
from flagset.exceptions import ParseError
from flagset.utils import setup_logging


class Format(Enum):
    PNG = "png"
    JPEG = "jpeg"


class Crop:
    """WIDTHxHEIGHT, e.g. 640x480."""

    def __init__(self):
        self.width = 0
        self.height = 0

    def parse(self, tokens):
        width, height = tokens[0].lower().split("x")
        self.width, self.height = int(width), int(height)
        return tokens[1:]

    def name(self):
        return "WxH"


def build_parser() -> FlagParser:
    parser = FlagParser(program="image_tool")
    size = parser.add_group(
        "size", "--size", "-s", "Target size in pixels", values=[UINT32, UINT32]
    )
    parser.add_group(
        "convert",
        "--convert",
        "-c",
        "Convert an image; the format and output may come in either order",
        values=[
            Path,
            AnyOrder([parser.registry.resolve(Format), OptionalConverter(PATH)]),
        ],
        names=["source", "format_and_output"],
    )
    parser.add_group("resize", "--resize", "-r", "Resize an image", values=[Path, size])
    parser.add_group("crop", "--crop", "", "Crop an image", values=[Path, Crop])
    parser.add_group("help", "--help", "-h", "Show this help")
    return parser


def main() -> int:
    setup_logging()
    parser = build_parser()
    try:
        parsed = parser.parse_args()
    except ParseError as error:
        console.print(
            f"[error]error:[/error] {escape(error.describe())}", highlight=False
        )
        parser.render_help()
        return 1

    if parsed.name == "help":
        parser.render_help()
        return 0

    console.print(escape(f"{parsed.flag}: {parsed.values!r}"), highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
