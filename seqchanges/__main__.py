# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

import importlib
import sys

from ._version import __version__

# command name -> module providing main(args)
COMMANDS = {
    "diff": "seqchanges.seqdiffapp",
    "show": "seqchanges.seqshowapp",
}

USAGE = """\
Usage: seqchanges COMMAND [OPTIONS]
       seqchanges -h | --version | --config

Commands: {commands}

Examples: seqchanges diff old.txt new.txt
          seqchanges diff --strings --unit char sitting kitten
          seqchanges diff old.txt new.txt --out changes.json
          seqchanges show changes.json
""".format(commands=", ".join(sorted(COMMANDS)))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if not args:
        sys.exit("Option missing.\n\n" + USAGE)

    cmd, args = args[0], args[1:]
    if cmd in COMMANDS:
        return importlib.import_module(COMMANDS[cmd]).main(args)
    if cmd == '--version':
        sys.exit(__version__)
    if cmd in ('-h', '--help'):
        sys.exit(USAGE)
    if cmd == '--config':
        from .config import entrypoint_configurables, print_config
        print('All available config options, and their current values:\n',
              file=sys.stderr)
        print_config(sorted(entrypoint_configurables), sys.stderr)
        sys.exit(1)
    sys.exit("Unrecognized command '%s'\n\n%s" % (cmd, USAGE))


if __name__ == "__main__":
    sys.exit(main_dispatch())
