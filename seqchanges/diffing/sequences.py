# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

from ..log import debug
from .moves import reduce_moves
from .wagner_fischer import wagner_fischer_changes

__all__ = ["diff_sequence", "diff_strings", "diff_strings_by_char", "diff_strings_linewise"]


diff_units = ("char", "line")


def diff_sequence(a, b, reduced=True):
    """Compute the changes of sequence b since sequence a.

    The sequences can be any objects supporting len() and integer
    indexing, with elements comparable with ==.

    If reduced is True, insertion and deletion pairs of equal value
    are combined into moves.
    """
    changes = wagner_fischer_changes(a, b)
    if reduced:
        changes = reduce_moves(changes)
    debug("Found %d changes between sequences of length %d and %d",
          len(changes), len(a), len(b))
    return changes


def diff_strings_by_char(a, b, reduced=True):
    """Compute char-based changes of two strings.

    A char is a unicode code point, as given by iterating over a str.
    Combining sequences (e.g. 'e' followed by a combining accent) are
    therefore diffed as separate elements.
    """
    assert isinstance(a, str) and isinstance(b, str), (
        'Arguments need to be string types. Got %r and %r' % (a, b))
    if a == b:
        return []
    return diff_sequence(a, b, reduced=reduced)


def diff_strings_linewise(a, b, reduced=True):
    """Compute line-based changes of two strings.

    Lines keep their line endings, so a change of line ending
    only is also reported.
    """
    assert isinstance(a, str) and isinstance(b, str), (
        'Arguments need to be string types. Got %r and %r' % (a, b))
    if a == b:
        return []
    return diff_sequence(a.splitlines(True), b.splitlines(True), reduced=reduced)


def diff_strings(a, b, unit="char", reduced=True):
    "Compute the changes of two strings, diffing by unit 'char' or 'line'."
    if unit == "char":
        return diff_strings_by_char(a, b, reduced=reduced)
    elif unit == "line":
        return diff_strings_linewise(a, b, reduced=reduced)
    else:
        raise ValueError("Unknown diff unit {!r}, expected one of {!r}.".format(unit, diff_units))
