#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/subcommands/preview.py

import argparse
import sys

from faceshift.core import config as c
from faceshift.core.conversions import name_to_rgb
from faceshift.core.errors import FaceShiftError
from faceshift.logic.shift import resolver
from faceshift.logic.shift.engine import shift_by_hues
from faceshift.logic.shift.renderer import render_preview
from faceshift.shared.logger import log, FaceShiftArgumentParser
from faceshift.shared.preview import ensure_truecolor
from faceshift.shared.sanitizer import INPUT_HANDLERS


def handle_preview_command(args: argparse.Namespace) -> None:
    settings = resolver.load_settings(args)

    if args.hex:
        value, title = args.hex, args.hex
    else:
        # resolve early so an unknown name fails before any output
        name_to_rgb(args.color_name)
        value, title = args.color_name, args.color_name

    if args.all_hues or not args.hue:
        hues = sorted(settings.shifts)
    else:
        hues = args.hue

    render_preview(value, title, shift_by_hues(value, settings, hues), args.output)


def get_preview_parser() -> argparse.ArgumentParser:
    parser = FaceShiftArgumentParser(
        prog="faceshift preview",
        description="faceshift preview: show a single color shifted toward each hue",
        formatter_class=argparse.RawTextHelpFormatter
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-H", "--hex",
        type=INPUT_HANDLERS["hex"],
        help="base hex code"
    )
    input_group.add_argument(
        "-cn", "--color-name",
        type=INPUT_HANDLERS["color_name"],
        help="base color name"
    )
    parser.add_argument(
        "-u", "--hue",
        nargs="+",
        type=INPUT_HANDLERS["hue"],
        default=None,
        help="hues to preview (default: all)"
    )
    parser.add_argument(
        "-all", "--all-hues",
        action="store_true",
        help="preview every configured hue"
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="JSON settings file"
    )
    parser.add_argument(
        "-o", "--output",
        default="text",
        choices=c.OUTPUT_FORMATS,
        type=INPUT_HANDLERS["output"],
        help="output format (default: text)"
    )
    parser.add_argument(
        "-i", "--intensity",
        type=INPUT_HANDLERS["intensity"],
        default=None,
        help=f"value of 'i' cells: 0 to 1 (default: {c.DEFAULT_INTENSITY})"
    )
    parser.add_argument(
        "--minimum",
        type=INPUT_HANDLERS["float"],
        default=None,
        help=f"value of 'm' cells (default: {c.DEFAULT_MINIMUM})"
    )
    parser.add_argument(
        "--maximum",
        type=INPUT_HANDLERS["float"],
        default=None,
        help=f"value of 'M' cells (default: {c.DEFAULT_MAXIMUM})"
    )
    parser.add_argument(
        "-f", "--force-fit",
        action="store_true",
        help="raise every channel below 1.0 to 1.0 after the shift"
    )
    parser.add_argument(
        "-p", "--precision",
        type=INPUT_HANDLERS["precision"],
        default=None,
        help=f"hex digits per channel (default: {c.DEFAULT_PRECISION})"
    )
    return parser


def main() -> None:
    parser = get_preview_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    try:
        handle_preview_command(args)
    except FaceShiftError as e:
        log("error", str(e))
        sys.exit(2)


if __name__ == "__main__":
    main()
