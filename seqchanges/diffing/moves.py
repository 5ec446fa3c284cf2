# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

from ..change_format import ChangeOp, Move
from ..profiling import timer

__all__ = ["reduce_moves"]


def _find_first(changes, op, value):
    for i, c in enumerate(changes):
        if c.op == op and c.value == value:
            return i
    return None


@timer.profile('reduce moves')
def reduce_moves(changes):
    """Combine insertion and deletion pairs of equal value into moves.

    The changes are scanned once from left to right. An insertion is
    paired with the first deletion of an equal value among the changes
    already kept, and vice versa. Each change is paired at most once,
    and substitutions never take part in a pair.
    """
    reduced = []
    for change in changes:
        if change.op == ChangeOp.INSERTION:
            i = _find_first(reduced, ChangeOp.DELETION, change.value)
            if i is not None:
                deletion = reduced.pop(i)
                change = Move(change.value, deletion.destination, change.destination)
        elif change.op == ChangeOp.DELETION:
            i = _find_first(reduced, ChangeOp.INSERTION, change.value)
            if i is not None:
                insertion = reduced.pop(i)
                change = Move(change.value, change.destination, insertion.destination)
        reduced.append(change)
    return reduced
