"""
Edit distance between two sequences under a pluggable cost model.

Three interchangeable implementations that must agree on every input:

* :func:`dist_naif` enumerates every edit script (exponential, oracle only).
* :func:`dist_1` fills the full (n+1)x(m+1) table, see :func:`dist_dp_full`.
* :func:`dist_2` keeps two rolling rows and only returns the distance.
"""
from typing import Sequence, Union
from warnings import warn

import numpy as np

from runa.core.metric import MetricSpace, has_kernel
from runa.utils.resources import PerformanceWarning, jit


# Constants ------------------------------------------------------------------------------------------------------------
NAIVE_WARN_LENGTH = 20


# Functions ------------------------------------------------------------------------------------------------------------
def dist_naif(x: Sequence, y: Sequence, space: MetricSpace):
    """
    Calculates the distance between ``x`` and ``y`` by trying every edit script.

    Runs in exponential time; only use it as an oracle on tiny inputs.

    Args:
        x: First sequence.
        y: Second sequence.
        space: Cost model.

    Returns:
        The minimum cost over all edit scripts.

    Examples:
        >>> from runa.core.metric import UnitMetricSpace
        >>> dist_naif('abc', 'abs', UnitMetricSpace())
        1
    """
    x, y = tuple(x), tuple(y)
    if len(x) + len(y) > NAIVE_WARN_LENGTH:
        warn(f'Naive distance on sequences of combined length {len(x) + len(y)} may not terminate in reasonable time',
             PerformanceWarning)
    return _dist_naif_rec(x, y, 0, 0, space.ZERO_COST, space.INF_COST, space)


def _dist_naif_rec(x, y, i, j, cost, best, space):
    """Accumulates ``cost`` along the current script and returns the best total seen so far."""
    if i == len(x) and j == len(y): return min(cost, best)
    if i < len(x) and j < len(y): best = _dist_naif_rec(x, y, i + 1, j + 1, cost + space.sub(x[i], y[j]), best, space)
    if i < len(x): best = _dist_naif_rec(x, y, i + 1, j, cost + space.DEL, best, space)
    if j < len(y): best = _dist_naif_rec(x, y, i, j + 1, cost + space.INS, best, space)
    return best


def dist_dp_full(x: Sequence, y: Sequence, space: MetricSpace) -> Union[np.ndarray, list[list]]:
    """
    Computes the full dynamic-programming table for ``x`` and ``y``.

    Entry ``[i][j]`` is the minimum cost of transforming ``x[:i]`` into ``y[:j]``.
    Matrix-backed cost models get an int64 numpy array, other models a list of rows.

    Args:
        x: First sequence.
        y: Second sequence.
        space: Cost model.

    Returns:
        The (len(x)+1) x (len(y)+1) table.
    """
    if has_kernel(space): return _dp_full_kernel(space.encode(x), space.encode(y), space.matrix, space.INS, space.DEL)
    n, m = len(x), len(y)
    sub, ins, dele = space.sub, space.INS, space.DEL
    table = [[space.ZERO_COST] * (m + 1) for _ in range(n + 1)]
    for j in range(1, m + 1): table[0][j] = table[0][j - 1] + ins
    for i in range(1, n + 1):
        prev, row, xi = table[i - 1], table[i], x[i - 1]
        row[0] = prev[0] + dele
        for j in range(1, m + 1):
            row[j] = min(prev[j - 1] + sub(xi, y[j - 1]), row[j - 1] + ins, prev[j] + dele)
    return table


def dist_1(x: Sequence, y: Sequence, space: MetricSpace):
    """Distance through the full table. O(n*m) time and memory."""
    cost = dist_dp_full(x, y, space)[len(x)][len(y)]
    return int(cost) if has_kernel(space) else cost


def dist_2(x: Sequence, y: Sequence, space: MetricSpace):
    """
    Distance through two rolling rows. O(n*m) time, O(m) memory.

    Gives exactly the same value as :func:`dist_1`, but no alignment can be
    recovered since a single row carries no backtrace information.
    """
    if has_kernel(space):
        return int(_dist_rows_kernel(space.encode(x), space.encode(y), space.matrix, space.INS, space.DEL))
    n, m = len(x), len(y)
    sub, ins, dele = space.sub, space.INS, space.DEL
    prev = [space.ZERO_COST] * (m + 1)
    cur = [space.ZERO_COST] * (m + 1)
    for j in range(1, m + 1): prev[j] = prev[j - 1] + ins
    for i in range(1, n + 1):
        xi = x[i - 1]
        cur[0] = prev[0] + dele
        for j in range(1, m + 1):
            cur[j] = min(prev[j - 1] + sub(xi, y[j - 1]), cur[j - 1] + ins, prev[j] + dele)
        prev, cur = cur, prev
    return prev[m]


# Kernels --------------------------------------------------------------------------------------------------------------
@jit(nopython=True, cache=True, nogil=True)
def _dp_full_kernel(x, y, matrix, ins, dele):
    n = len(x)
    m = len(y)
    table = np.empty((n + 1, m + 1), dtype=np.int64)
    for j in range(m + 1): table[0, j] = j * ins
    for i in range(1, n + 1):
        table[i, 0] = i * dele
        xi = x[i - 1]
        for j in range(1, m + 1):
            best = table[i - 1, j - 1] + matrix[xi, y[j - 1]]
            left = table[i, j - 1] + ins
            if left < best: best = left
            up = table[i - 1, j] + dele
            if up < best: best = up
            table[i, j] = best
    return table


@jit(nopython=True, cache=True, nogil=True)
def _dist_rows_kernel(x, y, matrix, ins, dele):
    n = len(x)
    m = len(y)
    prev = np.empty(m + 1, dtype=np.int64)
    cur = np.empty(m + 1, dtype=np.int64)
    for j in range(m + 1): prev[j] = j * ins
    for i in range(1, n + 1):
        cur[0] = i * dele
        xi = x[i - 1]
        for j in range(1, m + 1):
            best = prev[j - 1] + matrix[xi, y[j - 1]]
            left = cur[j - 1] + ins
            if left < best: best = left
            up = prev[j] + dele
            if up < best: best = up
            cur[j] = best
        prev, cur = cur, prev
    return prev[m]
