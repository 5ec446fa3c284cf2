# coding: utf-8

# Copyright (c) seqchanges Development Team.
# Distributed under the terms of the Modified BSD License.

from .sequences import diff_sequence, diff_strings
from .moves import reduce_moves

__all__ = ["diff_sequence", "diff_strings", "reduce_moves"]
