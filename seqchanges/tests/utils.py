# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

from seqchanges.change_format import is_valid_changes
from seqchanges.diffing import diff_sequence


def levenshtein(a, b):
    "Plain edit distance, for checking the length of change lists."
    prev = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        curr = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            if a[i-1] == b[j-1]:
                curr[j] = prev[j-1]
            else:
                curr[j] = 1 + min(prev[j], curr[j-1], prev[j-1])
        prev = curr
    return prev[len(b)]


def check_changes(a, b):
    "Check the general properties of the changes of b since a."
    raw = diff_sequence(a, b, reduced=False)
    reduced = diff_sequence(a, b)
    assert is_valid_changes(raw, old=a, new=b)
    assert is_valid_changes(reduced, old=a, new=b)
    assert len(raw) == levenshtein(a, b)
    assert len(reduced) <= len(raw)
    assert (len(raw) == 0) == (list(a) == list(b))
    return raw, reduced


def check_symmetric_changes(a, b):
    "Check the changes of b since a and vice versa."
    check_changes(a, b)
    check_changes(b, a)


sequence_examples = [
    ([], []),
    ([1], [1]),
    ([1, 2], [1, 2]),
    ([2, 1], [1, 2]),
    ([1, 2, 3], [1, 2]),
    ([2, 1, 3], [1, 2]),
    ([1, 2], [1, 2, 3]),
    ([2, 1], [1, 2, 3]),
    ([1, 2], [1, 2, 1, 2]),
    ([1, 2, 3, 4, 1, 2], [3, 4, 2, 3]),
    (list("abcab"), list("ayb")),
    (list("xaxcxabc"), list("abcy")),
    (list("sitting"), list("kitten")),
    ([1, 2, 3, 4, 5], [5, 4, 3, 2, 1]),
    ]
