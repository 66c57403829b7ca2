"""Command-line drill-down navigation over a document's headings."""

import argparse
import asyncio
import logging
import os
import sys
from typing import Optional, TextIO

from .exceptions import OutlineNavError
from .loader import is_remote, load_outline
from .navigation.controller import Jumper, navigate
from .navigation.providers import EditorJumper, PrintJumper, TerminalSelectionProvider
from .parser.hierarchy import Outline, flatten_outline, nest_outline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="outline-nav",
        description="Drill down through a document's headings and jump to one",
    )
    parser.add_argument("source", help="Path or http(s) URL of a .md, .mdx or .rst document")
    parser.add_argument(
        "--jumper",
        choices=["print", "editor"],
        default="print",
        help="How to jump: print file:line (default) or open an editor at the line",
    )
    parser.add_argument("--editor", default=None, help="Editor command (default: $OUTLINE_NAV_EDITOR, $VISUAL, $EDITOR)")
    parser.add_argument("--dump", action="store_true", help="Print the outline instead of navigating")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        name = os.environ.get("OUTLINE_NAV_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, name, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def dump_outline(outline: Outline, output: TextIO) -> None:
    """Print the outline indented by depth, with ids and line numbers."""
    for node, depth in flatten_outline(nest_outline(outline)):
        print(f"{'  ' * depth}[{node.id}] {node.title} (line {node.line})", file=output)


def make_jumper(args: argparse.Namespace, outline: Outline) -> Jumper:
    if args.jumper == "editor":
        if is_remote(args.source):
            logger.warning("Cannot open a remote document in an editor; printing the location instead")
        else:
            return EditorJumper(args.source, editor=args.editor)
    return PrintJumper(outline.name or args.source)


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the outline-nav command."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        outline = asyncio.run(load_outline(args.source))
    except OutlineNavError as e:
        print(f"outline-nav: {e}", file=sys.stderr)
        return 1

    if args.dump:
        dump_outline(outline, sys.stdout)
        return 0

    if not len(outline):
        print(f"outline-nav: no headings found in {args.source}", file=sys.stderr)
        return 1

    try:
        navigate(outline, TerminalSelectionProvider(), make_jumper(args, outline))
    except OutlineNavError as e:
        print(f"outline-nav: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
