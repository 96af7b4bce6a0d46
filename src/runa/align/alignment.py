"""
Module for representing pairwise alignments and checking their cost.
"""
from itertools import groupby
from typing import Sequence, Iterable, Iterator

from runa.core.metric import MetricSpace


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class AlignError(ValueError):
    """Base class for alignment contract violations."""


class AlignmentLengthError(AlignError):
    """Raised when the two sides of an alignment differ in length."""


class EmptySequenceError(AlignError):
    """Raised when an element is aligned against an empty sequence."""


# Classes --------------------------------------------------------------------------------------------------------------
class Align:
    """
    A pairwise alignment: two equal-length sequences that may hold the gap element.

    Column ``k`` pairs ``x[k]`` with ``y[k]``. An element against a gap is a
    deletion (gap in ``y``) or an insertion (gap in ``x``).

    Attributes:
        x (tuple): Side of the first sequence.
        y (tuple): Side of the second sequence.
        gap: Gap element of the cost model that built the alignment.

    Examples:
        >>> aln = Align('AC-T', 'A-GT')
        >>> len(aln)
        4
        >>> aln.cigar()
        '1M1D1I1M'
    """
    __slots__ = ('x', 'y', 'gap')
    _CIGAR_MATCH, _CIGAR_INS, _CIGAR_DEL, _CIGAR_EQ, _CIGAR_DIFF = 'M', 'I', 'D', '=', 'X'

    def __init__(self, x: Iterable = (), y: Iterable = (), gap=MetricSpace.GAP):
        self.x = tuple(x)
        self.y = tuple(y)
        self.gap = gap
        if len(self.x) != len(self.y):
            raise AlignmentLengthError(f'Alignment sides differ in length ({len(self.x)} != {len(self.y)})')

    def __len__(self): return len(self.x)
    def __iter__(self) -> Iterator[tuple]: return zip(self.x, self.y)
    def __repr__(self): return f"Align({''.join(map(str, self.x))!r}, {''.join(map(str, self.y))!r})"
    def __str__(self): return self.format()
    def __hash__(self): return hash((self.x, self.y))

    def __eq__(self, other):
        if self is other: return True
        if not isinstance(other, Align): return False
        return self.x == other.x and self.y == other.y

    def __add__(self, other: 'Align') -> 'Align':
        if not isinstance(other, Align): return NotImplemented
        if self.gap != other.gap: raise AlignError(f'Cannot join alignments with gaps {self.gap!r} and {other.gap!r}')
        return Align(self.x + other.x, self.y + other.y, self.gap)

    def cost(self, space: MetricSpace):
        """Total cost of the alignment under ``space``, see :func:`cout_align`."""
        return cout_align(self.x, self.y, space)

    def strip(self) -> tuple[list, list]:
        """Returns both sides with every gap removed, which gives back the aligned sequences."""
        return rm_gaps(self.x, self.gap), rm_gaps(self.y, self.gap)

    def cigar(self, extended: bool = False) -> str:
        """
        Run-length encodes the columns as a CIGAR string.

        Args:
            extended: Use ``=``/``X`` for matches and mismatches instead of ``M``.
        """
        gap = self.gap

        def op(column):
            a, b = column
            if a == gap: return self._CIGAR_INS
            if b == gap: return self._CIGAR_DEL
            if extended: return self._CIGAR_EQ if a == b else self._CIGAR_DIFF
            return self._CIGAR_MATCH
        return ''.join(f'{sum(1 for _ in run)}{o}' for o, run in groupby(self, key=op))

    def format(self, width: int = 60) -> str:
        """Lays the alignment out over lines of ``width`` columns, the first sequence above the second."""
        if width < 1: raise ValueError(f'Width must be positive, not {width}')
        x, y = [str(e) for e in self.x], [str(e) for e in self.y]
        blocks = []
        for start in range(0, len(x), width):
            blocks.append(''.join(x[start:start + width]) + '\n' + ''.join(y[start:start + width]))
        return '\n\n'.join(blocks)


# Functions ------------------------------------------------------------------------------------------------------------
def cout_align(x: Sequence, y: Sequence, space: MetricSpace):
    """
    Cost of the alignment whose sides are ``x`` and ``y``.

    A column of two gaps is tolerated and charged ``INS + DEL``.

    Raises:
        AlignmentLengthError: If the sides differ in length.
    """
    if len(x) != len(y): raise AlignmentLengthError(f'Alignment sides differ in length ({len(x)} != {len(y)})')
    gap, cost = space.GAP, space.ZERO_COST
    for a, b in zip(x, y):
        if a == gap and b == gap: cost = cost + space.INS + space.DEL
        elif b == gap: cost = cost + space.DEL
        elif a == gap: cost = cost + space.INS
        else: cost = cost + space.sub(a, b)
    return cost


def alignment_cost(align: Align, space: MetricSpace):
    """Cost of an :class:`Align` value under ``space``."""
    return cout_align(align.x, align.y, space)


def mot_gaps(n: int, space: MetricSpace) -> list:
    """A word made of ``n`` gaps."""
    return [space.GAP] * n


def rm_gaps(seq: Iterable, gap='-') -> list:
    """Removes every gap from ``seq``."""
    return [e for e in seq if e != gap]
