# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

from .args import (
    add_generic_args, add_prettyprint_args, ConfigBackedParser,
    prettyprint_config_from_args,
)
from .change_format import changes_from_json
from .log import error, init_logging
from .prettyprint import PrintWriter, pretty_print_changes
from .utils import setup_std_streams


_description = """Show saved changes in terminal.
Reads the JSON output of `seqchanges diff --out`.
"""


def load_changes(source):
    """Load saved changes from a filename or an open file.

    Raises ValueError if the content is not JSON (json.JSONDecodeError)
    or not a valid list of changes (ChangeFormatError).
    """
    if isinstance(source, str):
        with io.open(source, encoding='utf-8') as f:
            return changes_from_json(json.load(f))
    return changes_from_json(json.load(source))


def main_show(args):
    if args.changes == ["-"]:
        sources = [sys.stdin]
    elif not args.changes:
        print("Missing filenames.")
        return 1
    else:
        for fn in args.changes:
            if not os.path.exists(fn):
                print("Missing file {}".format(fn))
                return 1
        sources = args.changes

    config = prettyprint_config_from_args(args, out=PrintWriter())
    for source in sources:
        name = getattr(source, 'name', source)
        try:
            changes = load_changes(source)
        except ValueError as e:
            error("Could not read changes from %s: %s", name, e)
            return 1

        if len(sources) > 1:
            # Same separator as 'more' uses between files
            print(":"*14)
            print(name)
            print(":"*14)
        pretty_print_changes(None, None, changes, config)

    return 0


def _build_arg_parser(prog='seqchanges-show'):
    """Creates an argument parser for the show command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    parser.add_argument("changes", nargs="*", help="changes filename(s) or - to read from stdin")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    init_logging()
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
