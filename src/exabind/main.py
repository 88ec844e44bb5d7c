"""Top-level CLI entrypoint dispatcher."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .grammar import KeymapParseError
from .keymap import KeyMap
from .loader import DEFAULT_SHORTCUTS_FILE, load_keymap
from .tui import run_tui


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exabind",
        description="Keyboard shortcut visualization for KDE global shortcuts.",
    )
    parser.add_argument(
        "-s",
        "--shortcuts-file",
        help=f"path to the KDE global shortcuts file (default: {DEFAULT_SHORTCUTS_FILE})",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="print the parsed keymap and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log parsing details")
    return parser


def dump_keymap(keymap: KeyMap, console: Console | None = None) -> None:
    console = console or Console()
    console.print(f"keymap {keymap.name}: {len(keymap)} categories")
    for name, _count in sorted(keymap.categories(), key=lambda item: item[0].casefold()):
        table = Table(title=Text(name), title_justify="left", expand=False)
        table.add_column("action")
        table.add_column("shortcuts")
        for action in keymap.actions_by_category(name):
            table.add_row(Text(action.name), Text(", ".join(str(s) for s in action.shortcuts)))
        console.print(table)


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        keymap = load_keymap(args.shortcuts_file)
    except (OSError, KeymapParseError) as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")

    if args.dump:
        dump_keymap(keymap)
        return
    run_tui(keymap)
