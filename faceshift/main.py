#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/main.py

import argparse
import sys

from faceshift import __version__
from faceshift.core.errors import FaceShiftError
from faceshift.logic.shift import resolver
from faceshift.logic.shift.renderer import render_hues
from faceshift.subcommands.command_registry import SUBCOMMANDS
from faceshift.shared.logger import log, FaceShiftArgumentParser
from faceshift.shared.preview import ensure_truecolor
from faceshift.shared.sanitizer import INPUT_HANDLERS


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the top-level faceshift command."""
    parser = FaceShiftArgumentParser(
        prog="faceshift",
        description="faceshift: tint theme faces with a linear RGB color shift",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"faceshift {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "--list-hues",
        nargs="?",
        const="text",
        default=None,
        choices=["text", "json", "prettyjson"],
        type=INPUT_HANDLERS["output"],
        help="list available hues and exit (json formats include the matrices)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="JSON settings file whose 'shifts' extend the hue list",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_main_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Entry point when no subcommand was given."""
    if args.list_hues:
        settings = resolver.load_settings(args)
        render_hues(settings.shifts, args.list_hues)
        sys.exit(0)

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    parser.print_help()


def main() -> None:
    """Main entry point for faceshift CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()
    ensure_truecolor()
    try:
        handle_main_command(args, parser)
    except FaceShiftError as e:
        log("error", str(e))
        sys.exit(2)


if __name__ == "__main__":
    main()
