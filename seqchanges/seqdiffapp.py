# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .change_format import changes_to_json
from .diffing.sequences import diff_strings
from .log import info, init_logging
from .prettyprint import PrintWriter, pretty_print_changes
from .utils import EXPLICIT_MISSING_FILE, read_text, setup_std_streams


_description = "Compute the changes of a new text since an old text."


def _read_inputs(base, remote):
    """Read the two input files, or return an error message."""
    texts = []
    for fn in (base, remote):
        # Missing files are only allowed as the explicit null file
        if fn != EXPLICIT_MISSING_FILE and not os.path.exists(fn):
            return None, "Missing file {}".format(fn)
        try:
            texts.append(read_text(fn))
        except UnicodeDecodeError as e:
            return None, "Could not decode file {} as UTF-8: {}".format(fn, e)
    return texts, None


def main_diff(args):
    """Main handler of diff CLI"""
    if args.strings:
        a, b = args.base, args.remote
        names = None, None
    else:
        texts, message = _read_inputs(args.base, args.remote)
        if message:
            print(message)
            return 1
        a, b = texts
        names = args.base, args.remote

    info("Diffing by %s, reduced=%s", args.unit, args.reduced)
    changes = diff_strings(a, b, unit=args.unit, reduced=args.reduced)

    if args.out:
        with open(args.out, "w") as f:
            json.dump(changes_to_json(changes), f, indent=2, separators=(",", ": "))
    else:
        config = prettyprint_config_from_args(args, out=PrintWriter())
        pretty_print_changes(names[0], names[1], changes, config)
    return 0


def _build_arg_parser(prog='seqchanges-diff'):
    """Creates an argument parser for the diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)

    parser.add_argument(
        "base", help="the old filename, or old text with --strings.")
    parser.add_argument(
        "remote", help="the new filename, or new text with --strings.")
    parser.add_argument(
        '--strings',
        action='store_true',
        default=False,
        help="treat the arguments as literal texts instead of filenames.")
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the changes are written to this file as JSON. "
             "Otherwise they are printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    init_logging()
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
