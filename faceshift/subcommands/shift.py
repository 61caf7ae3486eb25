#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/subcommands/shift.py

import argparse
import sys

from faceshift.core import config as c
from faceshift.core.errors import FaceShiftError
from faceshift.logic.shift import resolver
from faceshift.logic.shift.engine import setup
from faceshift.logic.shift.host import HookRegistry, activate_context
from faceshift.logic.shift.renderer import render_overrides
from faceshift.shared.logger import log, FaceShiftArgumentParser
from faceshift.shared.preview import ensure_truecolor
from faceshift.shared.sanitizer import INPUT_HANDLERS


def handle_shift_command(args: argparse.Namespace) -> None:
    settings = resolver.load_settings(args)
    table = resolver.load_theme(args.theme)
    contexts = resolver.build_contexts(args)
    prefix = None if args.no_prefix else args.prefix
    faces = resolver.expand_faces(settings, table, prefix)

    mode = contexts.current_context()
    hooks = HookRegistry()
    actions = setup(
        {mode: args.hue},
        hooks,
        source=table,
        contexts=contexts,
        settings=settings,
        faces=faces,
    )

    overrides = [o for applied in activate_context(mode, contexts, hooks) for o in applied]
    if actions[mode].is_ignored():
        log("info", f"'{mode}' is ignored, nothing shifted")
    elif not faces:
        log("warning", "none of the configured faces are defined by the theme")

    render_overrides(overrides, table, args.hue, args.output)


def get_shift_parser() -> argparse.ArgumentParser:
    parser = FaceShiftArgumentParser(
        prog="faceshift shift",
        description="faceshift shift: tint the faces of a JSON theme toward a hue",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-t", "--theme",
        required=True,
        help="JSON theme file mapping faces to foreground/background ('-' for stdin)"
    )
    parser.add_argument(
        "-u", "--hue",
        required=True,
        type=INPUT_HANDLERS["hue"],
        help="hue to shift toward, see 'faceshift --list-hues'"
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="JSON settings file (intensity, minimum, maximum, force_fit, precision, shifts, faces, ignore)"
    )
    parser.add_argument(
        "-o", "--output",
        default="text",
        choices=c.OUTPUT_FORMATS,
        type=INPUT_HANDLERS["output"],
        help="output format: text lists overrides, json prints the shifted theme (default: text)"
    )

    matrix_group = parser.add_argument_group("matrix values")
    matrix_group.add_argument(
        "-i", "--intensity",
        type=INPUT_HANDLERS["intensity"],
        default=None,
        help=f"value of 'i' cells: 0 to 1 (default: {c.DEFAULT_INTENSITY})"
    )
    matrix_group.add_argument(
        "--minimum",
        type=INPUT_HANDLERS["float"],
        default=None,
        help=f"value of 'm' cells (default: {c.DEFAULT_MINIMUM})"
    )
    matrix_group.add_argument(
        "--maximum",
        type=INPUT_HANDLERS["float"],
        default=None,
        help=f"value of 'M' cells (default: {c.DEFAULT_MAXIMUM})"
    )
    matrix_group.add_argument(
        "-f", "--force-fit",
        action="store_true",
        help="raise every channel below 1.0 to 1.0 after the shift"
    )
    matrix_group.add_argument(
        "-p", "--precision",
        type=INPUT_HANDLERS["precision"],
        default=None,
        help=f"hex digits per channel: {c.MIN_PRECISION} to {c.MAX_PRECISION} (default: {c.DEFAULT_PRECISION})"
    )

    face_group = parser.add_argument_group("faces")
    face_group.add_argument(
        "--faces",
        nargs="+",
        type=INPUT_HANDLERS["face"],
        default=None,
        help=f"faces to shift (default: {' '.join(c.FIXED_FACES)})"
    )
    face_group.add_argument(
        "--prefix",
        default=c.FACE_PREFIX,
        help=f"also shift every theme face starting with this prefix (default: {c.FACE_PREFIX})"
    )
    face_group.add_argument(
        "--no-prefix",
        action="store_true",
        help="only shift the faces listed by --faces or the config"
    )

    context_group = parser.add_argument_group("contexts")
    context_group.add_argument(
        "-m", "--mode",
        type=INPUT_HANDLERS["context"],
        default=c.DEFAULT_CONTEXT,
        help=f"context to activate (default: {c.DEFAULT_CONTEXT})"
    )
    context_group.add_argument(
        "--parents",
        nargs="+",
        type=INPUT_HANDLERS["parent"],
        default=None,
        metavar="CHILD:PARENT",
        help="context derivations, e.g. python-mode:prog-mode"
    )
    context_group.add_argument(
        "--ignore",
        nargs="+",
        type=INPUT_HANDLERS["context"],
        default=None,
        help="contexts, and contexts derived from them, left unshifted"
    )
    return parser


def main() -> None:
    parser = get_shift_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    try:
        handle_shift_command(args)
    except FaceShiftError as e:
        log("error", str(e))
        sys.exit(2)


if __name__ == "__main__":
    main()
