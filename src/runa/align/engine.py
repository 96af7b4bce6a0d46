"""
Interchangeable distance and alignment implementations, selected by name.
"""
from typing import Callable, Sequence

from runa.align.alignment import Align
from runa.align.distance import dist_naif, dist_1, dist_2
from runa.align.linear import sol_2
from runa.align.solution import sol_1
from runa.core.metric import MetricSpace


# Constants ------------------------------------------------------------------------------------------------------------
DISTANCES: dict[str, Callable] = {'dist_naif': dist_naif, 'dist_1': dist_1, 'dist_2': dist_2}
SOLUTIONS: dict[str, Callable] = {'sol_1': sol_1, 'sol_2': sol_2}


# Functions ------------------------------------------------------------------------------------------------------------
def distance(x: Sequence, y: Sequence, space: MetricSpace, method: str = 'dist_2'):
    """
    Edit distance between ``x`` and ``y``.

    Args:
        x: First sequence.
        y: Second sequence.
        space: Cost model.
        method: One of ``dist_naif``, ``dist_1`` or ``dist_2``; all return the same value.

    Raises:
        KeyError: If the method is unknown.
    """
    if (func := DISTANCES.get(method)) is None:
        raise KeyError(f'Unknown distance "{method}", choose from {", ".join(DISTANCES)}')
    return func(x, y, space)


def align(x: Sequence, y: Sequence, space: MetricSpace, method: str = 'sol_2') -> Align:
    """
    Optimal alignment of ``x`` and ``y``.

    Args:
        x: First sequence.
        y: Second sequence.
        space: Cost model.
        method: ``sol_1`` (full table) or ``sol_2`` (linear memory); both alignments have the same cost.

    Raises:
        KeyError: If the method is unknown.
    """
    if (func := SOLUTIONS.get(method)) is None:
        raise KeyError(f'Unknown alignment "{method}", choose from {", ".join(SOLUTIONS)}')
    return func(x, y, space)
