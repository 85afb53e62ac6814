# -*- coding: utf-8 -*-
"""
Longest-common-subsequence alignment of two token sequences.

Operations use the same names as ``difflib`` opcodes. The tie-break order is
fixed so that output is byte-stable across runs and implementations.
"""
import logging

logger = logging.getLogger(__name__)

EQUAL = 'equal'
INSERT = 'insert'
DELETE = 'delete'


class AlignmentTooLarge(ValueError):
    """Raised when the LCS table would exceed the configured size."""

    def __init__(self, old_len, new_len, max_cells):
        ValueError.__init__(
            self,
            'alignment of %d x %d tokens exceeds max_alignment_cells=%d'
            % (old_len, new_len, max_cells),
        )
        self.old_len = old_len
        self.new_len = new_len
        self.max_cells = max_cells


def lcs_table(old, new):
    """
    ``table[i][j]`` is the LCS length of ``old[:i]`` and ``new[:j]``.
    """
    m = len(new)
    table = [[0] * (m + 1)]
    for a in old:
        prev = table[-1]
        row = [0] * (m + 1)
        for j in range(1, m + 1):
            if a == new[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
        table.append(row)
    return table


def align(old, new, max_cells=None):
    """
    Align two lists of strings, returning a list of EQUAL/INSERT/DELETE.

    From cell (i, j) the backtrack takes a match only when it contributes to
    the LCS length, then prefers INSERT over DELETE on ties. This keeps
    deletions contiguous at the end of a changed block.

    >>> align(['The', 'cat', 'sat'], ['The', 'dog', 'sat'])
    ['equal', 'delete', 'insert', 'equal']
    """
    if max_cells is not None and len(old) * len(new) > max_cells:
        raise AlignmentTooLarge(len(old), len(new), max_cells)

    table = lcs_table(old, new)
    i, j = len(old), len(new)
    ops = []
    while i > 0 or j > 0:
        if i > 0 and j > 0 and old[i - 1] == new[j - 1] and table[i][j] > table[i - 1][j]:
            ops.append(EQUAL)
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            ops.append(INSERT)
            j -= 1
        else:
            ops.append(DELETE)
            i -= 1
    ops.reverse()
    logger.debug('aligned %d old / %d new tokens, lcs=%d',
                 len(old), len(new), table[-1][-1])
    return ops
