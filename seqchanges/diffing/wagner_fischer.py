# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Wagner-Fischer edit distance, keeping the changes rather than the distance.

Each cell T[x][y] of the table holds the shortest list of changes
transforming A[:x] into B[:y]. The cells are immutable chains that
share their prefix with the cell they were extended from, so the
diagonal copy for equal elements is free.
"""

from ..change_format import Insertion, Deletion, Substitution
from ..log import debug
from ..profiling import timer

__all__ = ["wagner_fischer_changes"]


class ChangeChain(object):
    """Immutable linked list of changes, last change first."""
    __slots__ = ("parent", "change", "length")

    def __init__(self, parent=None, change=None):
        self.parent = parent
        self.change = change
        self.length = 0 if parent is None else parent.length + 1

    def __len__(self):
        return self.length

    def extended(self, change):
        "Return a new chain with change appended, sharing this chain."
        return ChangeChain(self, change)

    def to_list(self):
        changes = []
        node = self
        while node.parent is not None:
            changes.append(node.change)
            node = node.parent
        changes.reverse()
        return changes


EMPTY_CHAIN = ChangeChain()


def changes_table(A, B):
    "Compute grid T[x][y] == shortest chain of changes transforming A[:x] into B[:y]."
    N = len(A)
    M = len(B)

    T = [[EMPTY_CHAIN]*(M+1) for i in range(N+1)]
    for x in range(1, N+1):
        T[x][0] = T[x-1][0].extended(Deletion(A[x-1], x-1))
    for y in range(1, M+1):
        T[0][y] = T[0][y-1].extended(Insertion(B[y-1], y-1))

    for y in range(1, M+1):
        b = B[y-1]
        for x in range(1, N+1):
            a = A[x-1]
            if a == b:
                T[x][y] = T[x-1][y-1]
                continue
            deleted = T[x-1][y]
            inserted = T[x][y-1]
            substituted = T[x-1][y-1]
            shortest = min(deleted.length, inserted.length, substituted.length)
            # Ties go to deletion, then insertion, then substitution
            if deleted.length == shortest:
                T[x][y] = deleted.extended(Deletion(a, x-1))
            elif inserted.length == shortest:
                T[x][y] = inserted.extended(Insertion(b, y-1))
            else:
                T[x][y] = substituted.extended(Substitution(b, y-1))
    return T


def wagner_fischer_changes(A, B):
    """Compute the shortest list of changes transforming A into B.

    The changes are not reduced, i.e. moved elements show up
    as separate insertions and deletions.
    """
    N, M = len(A), len(B)
    if N == 0 and M == 0:
        return []
    debug("Computing changes table of size %d x %d", N + 1, M + 1)
    with timer.time('changes table'):
        T = changes_table(A, B)
    return T[N][M].to_list()
