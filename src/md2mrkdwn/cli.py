import argparse
import sys
from typing import List, Optional

from md2mrkdwn.config import load_config
from md2mrkdwn.constants import (
    EXIT_IO_ERROR,
    EXIT_OK,
    EXIT_PARSE_ERROR,
    OUTPUT_BLOCKS,
)
from md2mrkdwn.converter import MarkdownToMrkdwn
from md2mrkdwn.exceptions import ParseError
from md2mrkdwn.logger import logger
from md2mrkdwn.renderer import unescape


def read_input(path: Optional[str]) -> str:
    """Read Markdown from ``path``, or from stdin when path is None or "-"."""
    if path is None or path == "-":
        logger.debug("Reading markdown from stdin")
        return sys.stdin.read()

    logger.debug(f"Reading markdown from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2mrkdwn",
        description="Convert markdown to mrkdwn format and dump it to stdout",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
Examples:
  1. Escaped mrkdwn string:
     md2mrkdwn README.md

  2. Block Kit JSON from stdin:
     cat README.md | md2mrkdwn --blocks --indent 2

  3. Readable mrkdwn (escaping undone):
     md2mrkdwn --plain README.md
"""
    )
    parser.add_argument("path", nargs="?",
                        help="Markdown file to convert. Reads stdin when omitted or '-'")
    parser.add_argument("-b", "--blocks", action="store_true", default=None,
                        help="Output Block Kit JSON instead of a mrkdwn string")
    parser.add_argument("--plain", action="store_true", default=None,
                        help="Undo escaping in mrkdwn string output")
    parser.add_argument("--indent", type=int, default=None,
                        help="Pretty-print Block Kit JSON with this indentation")
    parser.add_argument("--config", default=None,
                        help="JSON config file (default: md2mrkdwn.json)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging on stderr")
    return parser


def convert(text: str, blocks: bool = False, plain: bool = False,
            indent: Optional[int] = None,
            converter: Optional[MarkdownToMrkdwn] = None) -> str:
    """Run one conversion the way the CLI does."""
    converter = converter or MarkdownToMrkdwn()
    if blocks:
        return converter.blocks_stringify(text, indent=indent)

    result = converter.mrkdwnify(text)
    if plain:
        result = unescape(result)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_config(args.config)
    logger.set_level("DEBUG" if args.verbose else settings["log_level"])

    blocks = args.blocks if args.blocks is not None else settings["output"] == OUTPUT_BLOCKS
    plain = args.plain if args.plain is not None else settings["plain"]
    indent = args.indent if args.indent is not None else settings["json_indent"]

    try:
        text = read_input(args.path)
    except OSError as e:
        logger.error(f"Failed to read input: {e}")
        return EXIT_IO_ERROR

    try:
        output = convert(text, blocks=blocks, plain=plain, indent=indent)
    except ParseError as e:
        logger.error(f"Failed to convert markdown: {e}")
        return EXIT_PARSE_ERROR

    sys.stdout.write(output)
    sys.stdout.flush()
    logger.debug(f"Wrote {len(output)} chars ({'blocks' if blocks else 'text'})")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
