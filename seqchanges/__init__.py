# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .change_format import (
    Change, ChangeOp, Insertion, Deletion, Substitution, Move,
    validate_changes, changes_to_json, changes_from_json,
)
from .diffing import diff_sequence, diff_strings, reduce_moves
from .observing import ObservableSequence, ChangeObserver


__all__ = [
    "__version__",
    "Change", "ChangeOp",
    "Insertion", "Deletion", "Substitution", "Move",
    "validate_changes", "changes_to_json", "changes_from_json",
    "diff_sequence", "diff_strings", "reduce_moves",
    "ObservableSequence", "ChangeObserver",
    ]
