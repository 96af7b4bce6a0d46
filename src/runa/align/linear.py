"""
Optimal alignment in linear memory (Hirschberg's divide and conquer).

The first sequence is cut at its middle row ``i* = len(x) // 2``. A single
forward sweep over two rolling rows finds the column ``j*`` where the optimal
path crosses that row (:func:`coupure`), and the two independent halves
``(x[:i*], y[:j*])`` and ``(x[i*:], y[j*:])`` are solved in turn. No level keeps
more than two rows, so the whole alignment needs O(n + m) memory.
"""
from typing import Sequence

import numpy as np

from runa.align.alignment import Align, EmptySequenceError
from runa.core.metric import MetricSpace, has_kernel
from runa.utils.resources import jit


# Functions ------------------------------------------------------------------------------------------------------------
def coupure(x: Sequence, y: Sequence, space: MetricSpace) -> int:
    """
    Finds the column of ``y`` where an optimal alignment crosses row ``len(x) // 2``.

    Rows up to the middle row carry their own column as origin. Past it, each
    cell inherits the origin of the predecessor that realises its minimum,
    using the same tie-break as :func:`~runa.align.solution.sol_1_tab`
    (diagonal, then insertion, then deletion). The origin that reaches the
    last cell is the cut.

    Args:
        x: First sequence.
        y: Second sequence.
        space: Cost model.

    Returns:
        ``j*`` in ``[0, len(y)]``.
    """
    if has_kernel(space):
        return int(_coupure_kernel(space.encode(x), space.encode(y), space.matrix, space.INS, space.DEL))
    n, m = len(x), len(y)
    mid = n // 2
    sub, ins, dele = space.sub, space.INS, space.DEL
    prev = [space.ZERO_COST] * (m + 1)
    cur = [space.ZERO_COST] * (m + 1)
    for j in range(1, m + 1): prev[j] = prev[j - 1] + ins
    prev_origin = list(range(m + 1))
    cur_origin = list(range(m + 1))
    for i in range(1, n + 1):
        xi = x[i - 1]
        track = i > mid
        cur[0] = prev[0] + dele
        if track: cur_origin[0] = prev_origin[0]
        for j in range(1, m + 1):
            diag = prev[j - 1] + sub(xi, y[j - 1])
            left = cur[j - 1] + ins
            up = prev[j] + dele
            if diag <= left and diag <= up:
                cur[j] = diag
                if track: cur_origin[j] = prev_origin[j - 1]
            elif left <= up:
                cur[j] = left
                if track: cur_origin[j] = cur_origin[j - 1]
            else:
                cur[j] = up
                if track: cur_origin[j] = prev_origin[j]
        prev, cur = cur, prev
        prev_origin, cur_origin = cur_origin, prev_origin
    return prev_origin[m]


def align_lettre_mot(a, y: Sequence, space: MetricSpace) -> Align:
    """
    Optimal alignment of the single element ``a`` against ``y``. O(len(y)) time.

    ``a`` goes against the first element of ``y`` with the cheapest
    substitution, everything else in ``y`` against gaps. When even that
    substitution costs more than a deletion plus an insertion, ``a`` is
    deleted and all of ``y`` inserted.

    Raises:
        EmptySequenceError: If ``y`` is empty.
    """
    if len(y) == 0: raise EmptySequenceError(f'Cannot align {a!r} against an empty sequence')
    gap = space.GAP
    best_k, best = 0, space.INF_COST
    for k, b in enumerate(y):
        if (cost := space.sub(a, b)) < best: best_k, best = k, cost
    if best > space.INS + space.DEL: return Align([a] + [gap] * len(y), [gap] + list(y), gap)
    return Align([gap] * best_k + [a] + [gap] * (len(y) - best_k - 1), y, gap)


def sol_2(x: Sequence, y: Sequence, space: MetricSpace) -> Align:
    """
    Optimal alignment in O(n*m) time and O(n + m) memory.

    Subproblems are kept on an explicit stack of ``(x-range, y-range)`` pairs
    and solved left to right, so deep splits never grow the call stack. The
    alignment has the same cost as :func:`~runa.align.solution.sol_1` but may
    differ from it when several optima exist.

    Examples:
        >>> from runa.dna import DNA
        >>> aln = sol_2('TATATGAGTC', 'TATTT', DNA)
        >>> aln.cost(DNA)
        10
    """
    gap = space.GAP
    cut = _cutter(x, y, space)
    rx, ry = [], []
    stack = [(0, len(x), 0, len(y))]
    while stack:
        xs, xe, ys, ye = stack.pop()
        if xs == xe:
            rx.extend([gap] * (ye - ys))
            ry.extend(y[k] for k in range(ys, ye))
        elif ys == ye:
            rx.extend(x[k] for k in range(xs, xe))
            ry.extend([gap] * (xe - xs))
        elif xe - xs == 1:
            part = align_lettre_mot(x[xs], [y[k] for k in range(ys, ye)], space)
            rx.extend(part.x)
            ry.extend(part.y)
        else:
            mid, j = xs + (xe - xs) // 2, ys + cut(xs, xe, ys, ye)
            stack.append((mid, xe, j, ye))
            stack.append((xs, mid, ys, j))
    return Align(rx, ry, gap)


def sol_2_rec(x: Sequence, y: Sequence, space: MetricSpace) -> Align:
    """
    Recursive form of :func:`sol_2`, concatenating the alignments of both halves.

    Recursion depth grows with ``len(x)`` in the worst case; prefer :func:`sol_2`
    for long sequences.
    """
    x, y = list(x), list(y)
    if not x: return Align([space.GAP] * len(y), y, space.GAP)
    if not y: return Align(x, [space.GAP] * len(x), space.GAP)
    if len(x) == 1: return align_lettre_mot(x[0], y, space)
    mid, j = len(x) // 2, coupure(x, y, space)
    return sol_2_rec(x[:mid], y[:j], space) + sol_2_rec(x[mid:], y[j:], space)


def _cutter(x: Sequence, y: Sequence, space: MetricSpace):
    """Returns ``cut(xs, xe, ys, ye)`` giving the cut of ``(x[xs:xe], y[ys:ye])`` relative to ``ys``."""
    if has_kernel(space):
        ex, ey = space.encode(x), space.encode(y)
        matrix, ins, dele = space.matrix, space.INS, space.DEL
        return lambda xs, xe, ys, ye: int(_coupure_kernel(ex[xs:xe], ey[ys:ye], matrix, ins, dele))
    return lambda xs, xe, ys, ye: coupure([x[k] for k in range(xs, xe)], [y[k] for k in range(ys, ye)], space)


# Kernels --------------------------------------------------------------------------------------------------------------
@jit(nopython=True, cache=True, nogil=True)
def _coupure_kernel(x, y, matrix, ins, dele):
    n = len(x)
    m = len(y)
    mid = n // 2
    prev = np.empty(m + 1, dtype=np.int64)
    cur = np.empty(m + 1, dtype=np.int64)
    prev_origin = np.arange(m + 1)
    cur_origin = np.arange(m + 1)
    for j in range(m + 1): prev[j] = j * ins
    for i in range(1, n + 1):
        xi = x[i - 1]
        track = i > mid
        cur[0] = prev[0] + dele
        if track: cur_origin[0] = prev_origin[0]
        for j in range(1, m + 1):
            diag = prev[j - 1] + matrix[xi, y[j - 1]]
            left = cur[j - 1] + ins
            up = prev[j] + dele
            if diag <= left and diag <= up:
                cur[j] = diag
                if track: cur_origin[j] = prev_origin[j - 1]
            elif left <= up:
                cur[j] = left
                if track: cur_origin[j] = cur_origin[j - 1]
            else:
                cur[j] = up
                if track: cur_origin[j] = prev_origin[j]
        prev, cur = cur, prev
        prev_origin, cur_origin = cur_origin, prev_origin
    return prev_origin[m]
