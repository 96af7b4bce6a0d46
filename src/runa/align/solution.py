"""
Optimal alignment through the full dynamic-programming table.

Ties between predecessors are broken in a fixed order everywhere in the
package: diagonal (match or substitution) first, then insertion (left,
consumes ``y``), then deletion (up, consumes ``x``).
"""
from typing import Sequence

from runa.align.alignment import Align
from runa.align.distance import dist_dp_full
from runa.core.metric import MetricSpace, has_kernel


# Functions ------------------------------------------------------------------------------------------------------------
def sol_1_tab(x: Sequence, y: Sequence, table, space: MetricSpace) -> Align:
    """
    Walks a full table back from ``(len(x), len(y))`` to ``(0, 0)``.

    Args:
        x: First sequence.
        y: Second sequence.
        table: The table built by :func:`~runa.align.distance.dist_dp_full` for ``x`` and ``y``.
        space: Cost model the table was built with.

    Returns:
        An optimal alignment whose cost equals ``table[len(x)][len(y)]``.
    """
    gap, sub, ins = space.GAP, space.sub, space.INS
    i, j = len(x), len(y)
    rx, ry = [], []
    while i > 0 and j > 0:
        cost = table[i][j]
        if cost == table[i - 1][j - 1] + sub(x[i - 1], y[j - 1]):
            i, j = i - 1, j - 1
            rx.append(x[i])
            ry.append(y[j])
        elif cost == table[i][j - 1] + ins:
            j -= 1
            rx.append(gap)
            ry.append(y[j])
        else:
            i -= 1
            rx.append(x[i])
            ry.append(gap)
    while i > 0:
        i -= 1
        rx.append(x[i])
        ry.append(gap)
    while j > 0:
        j -= 1
        rx.append(gap)
        ry.append(y[j])
    rx.reverse()
    ry.reverse()
    return Align(rx, ry, gap)


def prog_dyn(x: Sequence, y: Sequence, space: MetricSpace) -> tuple:
    """
    Distance and optimal alignment in one pass over the full table.

    Returns:
        A ``(cost, Align)`` tuple.

    Examples:
        >>> from runa.core.metric import UnitMetricSpace
        >>> cost, aln = prog_dyn('abc', 'ac', UnitMetricSpace())
        >>> cost, aln
        (1, Align('abc', 'a-c'))
    """
    table = dist_dp_full(x, y, space)
    cost = table[len(x)][len(y)]
    return int(cost) if has_kernel(space) else cost, sol_1_tab(x, y, table, space)


def sol_1(x: Sequence, y: Sequence, space: MetricSpace) -> Align:
    """Optimal alignment through the full table. O(n*m) time and memory."""
    return sol_1_tab(x, y, dist_dp_full(x, y, space), space)
