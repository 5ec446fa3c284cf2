# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import logging
import sys

from ._version import __version__
from .config import build_config, entrypoint_configurables, log_levels, print_config
from .diffing.sequences import diff_units
from .log import set_seqchanges_log_level


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser with defaults from the config of its entry point.

    The entry point is the first word of prog. Once parsed, a log_level
    argument is applied to the seqchanges loggers, whether it came from
    the command line or from a config file.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**build_config(entrypoint))
        namespace, extras = super(ConfigBackedParser, self).parse_known_args(
            args=args, namespace=namespace)
        level = getattr(namespace, 'log_level', None)
        if level is not None:
            set_seqchanges_log_level(getattr(logging, level))
        return namespace, extras


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_config([parser.prog], sys.stderr)
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all seqchanges commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=log_levels,
        help="set the log level by name.",
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that compute changes.
    """
    parser.add_argument(
        '-u', '--unit',
        default='line',
        choices=diff_units,
        help="diff text by 'line' or by 'char' (unicode code point).")
    parser.add_argument(
        '--no-reduce',
        dest='reduced',
        action="store_false",
        default=True,
        help="keep insertion and deletion pairs of equal value "
             "instead of combining them into moves.")


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )
