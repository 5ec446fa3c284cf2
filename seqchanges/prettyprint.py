# -*- coding: utf-8 -*-

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import sys

import colorama

from .change_format import ChangeOp


# Indentation offset in pretty-print
IND = "  "

ColoredConstants = namedtuple('ColoredConstants', (
    'INSERT',
    'DELETE',
    'SUBSTITUTE',
    'MOVE',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        INSERT     = '{color}+  '.format(color=colorama.Fore.GREEN),
        DELETE     = '{color}-  '.format(color=colorama.Fore.RED),
        SUBSTITUTE = '{color}~  '.format(color=colorama.Fore.YELLOW),
        MOVE       = '{color}>  '.format(color=colorama.Fore.CYAN),
        INFO       = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET      = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        INSERT     = '+  ',
        DELETE     = '-  ',
        SUBSTITUTE = '~  ',
        MOVE       = '>  ',
        INFO       = '## ',
        RESET      = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def INSERT(self):
        return col_const[self.use_color].INSERT

    @property
    def DELETE(self):
        return col_const[self.use_color].DELETE

    @property
    def SUBSTITUTE(self):
        return col_const[self.use_color].SUBSTITUTE

    @property
    def MOVE(self):
        return col_const[self.use_color].MOVE

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

    def prefix_for(self, op):
        return {
            ChangeOp.INSERTION: self.INSERT,
            ChangeOp.DELETION: self.DELETE,
            ChangeOp.SUBSTITUTION: self.SUBSTITUTE,
            ChangeOp.MOVE: self.MOVE,
        }[op]

DefaultConfig = PrettyPrintConfig()


class PrintWriter(object):
    "File-like writer going through print(), so output follows a replaced sys.stdout."
    def write(self, text):
        print(text, end="")


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format a changed value for single-line display."
    if isinstance(v, str):
        # Make whitespace changes like line endings visible
        return repr(v)
    return str(v)


def pretty_print_change(change, prefix="", config=DefaultConfig):
    "Print a single change on one line."
    fields = dict(zip(change._fields, change._values()))
    fields["value"] = format_value(change.value)
    text = change._description.format(**fields)
    config.out.write("%s%s%s%s\n" % (prefix, config.prefix_for(change.op), text, config.RESET))


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    "Print a (nested) dict of strings, one key per line."
    for k in sorted(d):
        v = d[k]
        if isinstance(v, dict):
            config.out.write("%s%s:\n" % (prefix, k))
            pretty_print_dict(v, prefix + IND, config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_changes(afn, bfn, changes, config=DefaultConfig):
    """Pretty-print the changes of bfn since afn.

    afn and bfn are only used for the header.
    """
    if afn is not None or bfn is not None:
        config.out.write("%s--- %s  %s%s\n" % (config.INFO, afn, file_timestamp(afn), config.RESET))
        config.out.write("%s+++ %s  %s%s\n" % (config.INFO, bfn, file_timestamp(bfn), config.RESET))

    if not changes:
        config.out.write("%sno changes%s\n" % (config.INFO, config.RESET))
        return

    for change in changes:
        pretty_print_change(change, IND, config)
