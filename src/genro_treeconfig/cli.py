# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command line access to configuration files.

Usage:
    treeconfig create settings.json
    treeconfig set settings.json server.ports '[80, 443]'
    treeconfig set settings.json server.host localhost
    treeconfig get settings.json server.ports.0

Values given to ``set`` are parsed as JSON; text that is not valid JSON is
stored as a string.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .codec import loads
from .configuration import DEFAULT_INDENT, create, load
from .exceptions import ConfigParseError, TreeConfigError
from .node import ScalarNode, TreeNode


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def _parse_value(text: str) -> TreeNode:
    try:
        return loads(text)
    except ConfigParseError:
        return ScalarNode(text)


def _cmd_create(args: argparse.Namespace) -> int:
    create(args.file, force=args.force)
    return 0


def _cmd_get(args: argparse.Namespace) -> int:
    config = load(args.file)
    print(config.get(args.path).to_text(args.indent))
    return 0


def _cmd_set(args: argparse.Namespace) -> int:
    config = load(args.file)
    config.set(args.path, _parse_value(args.value))
    config.save(args.indent)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='treeconfig',
        description='Read and write values of a configuration file by dotted path'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    commands = parser.add_subparsers(dest='command', required=True)

    create_cmd = commands.add_parser('create', help='Create an empty configuration file')
    create_cmd.add_argument('file', help='Configuration file')
    create_cmd.add_argument('--force', action='store_true',
                            help='Replace an existing entry that is not a regular file')
    create_cmd.set_defaults(handler=_cmd_create)

    get_cmd = commands.add_parser('get', help='Print the value at a path')
    get_cmd.add_argument('file', help='Configuration file')
    get_cmd.add_argument('path', nargs='?', default='', help='Dotted path (default: whole content)')
    get_cmd.add_argument('--indent', type=_non_negative, default=DEFAULT_INDENT,
                         help='Indent width, 0 for compact output')
    get_cmd.set_defaults(handler=_cmd_get)

    set_cmd = commands.add_parser('set', help='Store a value at a path and save')
    set_cmd.add_argument('file', help='Configuration file')
    set_cmd.add_argument('path', help='Dotted path')
    set_cmd.add_argument('value', help='JSON value, or plain text stored as a string')
    set_cmd.add_argument('--indent', type=_non_negative, default=DEFAULT_INDENT,
                         help='Indent width used when saving')
    set_cmd.set_defaults(handler=_cmd_set)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    try:
        return args.handler(args)
    except (TreeConfigError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
