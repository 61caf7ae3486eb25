#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: faceshift/subcommands/command_registry.py

from . import preview, shift

SUBCOMMANDS = {
    'shift': shift,
    'preview': preview,
}
