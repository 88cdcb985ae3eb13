#!/usr/bin/env python3
"""Action Items CLI.

Runs the "Collect Action Items" command over a text file held in an in-memory
editor buffer.

Usage examples:
  bin/action_items_cli.py collect notes.md              # print the synchronized document
  bin/action_items_cli.py collect notes.md --in-place   # rewrite notes.md
  bin/action_items_cli.py collect notes.md -o out.md --config action_items.yaml
  bin/action_items_cli.py list notes.md                 # one action item per line
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from action_items import ActionItemsPlugin, ConfigError, TextBuffer, extract_action_items, load_config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maintain an Action Items section from // marker lines")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set the logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command")

    collect = subparsers.add_parser("collect", help="Synchronize the Action Items section of a file")
    collect.add_argument("input", type=Path, help="Text file to process")
    output_group = collect.add_mutually_exclusive_group()
    output_group.add_argument("-o", "--output", type=Path, default=None, help="Write the result to this file")
    output_group.add_argument("--in-place", action="store_true", help="Rewrite the input file")
    collect.add_argument("--config", type=Path, default=None, help="YAML configuration file")

    list_parser = subparsers.add_parser("list", help="Print the action items found in a file")
    list_parser.add_argument("input", type=Path, help="Text file to scan")
    list_parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    return parser


def _read_input(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"[error] cannot read {path}: {e}", file=sys.stderr)
        return None


def _run_collect(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    text = _read_input(args.input)
    if text is None:
        return 1

    buffer = TextBuffer(text)
    plugin = ActionItemsPlugin(config)
    plugin.dispatch("command", buffer)
    result = buffer.get_value()

    target = args.input if args.in_place else args.output
    if target is None:
        sys.stdout.write(result)
        return 0
    if result == text and target == args.input:
        print(f"[collect] unchanged: {target}")
        return 0
    target.write_text(result, encoding="utf-8")
    print(f"[collect] wrote: {target}")
    return 0


def _run_list(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    text = _read_input(args.input)
    if text is None:
        return 1
    for item in extract_action_items(text.split('\n'), config.marker_prefix):
        print(item)
    return 0


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        stream=sys.stderr
    )

    try:
        if args.command == "collect":
            return _run_collect(args)
        if args.command == "list":
            return _run_list(args)
    except ConfigError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
