"""
Cost models for edit distance and alignment.

A cost model (``MetricSpace``) names the gap symbol, the fixed insertion and
deletion costs and the substitution cost between two elements. Every algorithm
in :mod:`runa.align` takes one as its last argument and never assumes a domain.
"""
from abc import ABC, abstractmethod
from numbers import Integral
from typing import Any, Hashable, Union, Iterable
import math

import numpy as np

from runa.core.alphabet import Alphabet


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class MetricSpaceError(Exception):
    """Raised when a cost model breaks its own invariants."""


# Classes --------------------------------------------------------------------------------------------------------------
class MetricSpace(ABC):
    """
    Abstract cost model.

    Subclasses override the class attributes and implement :meth:`sub`.
    ``sub`` is never called with ``GAP``; callers guarantee it.

    Attributes:
        ZERO_COST: Cost of the empty edit script.
        INF_COST: Absorbing maximum, never preferred over a finite cost by ``min``.
        GAP: Sentinel element used in alignments only.
        INS: Cost of inserting one element of the second sequence.
        DEL: Cost of deleting one element of the first sequence.
    """
    ZERO_COST: Any = 0
    INF_COST: Any = math.inf
    GAP: Hashable = '-'
    INS: Any = 1
    DEL: Any = 1

    @abstractmethod
    def sub(self, a, b):
        """Cost of aligning ``a`` against ``b`` (zero when they are equal)."""
        ...

    def __repr__(self): return f"{self.__class__.__name__}(ins={self.INS}, del={self.DEL}, gap={self.GAP!r})"


class UnitMetricSpace(MetricSpace):
    """
    Levenshtein costs over any elements supporting equality.

    Examples:
        >>> from runa.align.distance import dist_2
        >>> dist_2('kitten', 'sitting', UnitMetricSpace())
        3
    """
    def sub(self, a, b): return 0 if a == b else 1


class MatrixMetricSpace(MetricSpace):
    """
    Integer costs read from a square substitution matrix indexed by alphabet code.

    Sequences over such a space can be encoded to uint8 arrays, which lets the
    distance and divide point functions run on compiled kernels.

    Examples:
        >>> space = MatrixMetricSpace.build(Alphabet('ACGT'), mismatch=1, ins=2, dele=2)
        >>> space.sub('A', 'C')
        1
    """
    _DTYPE = np.int64

    def __init__(self, alphabet: Alphabet, matrix: Union[np.ndarray, Iterable], ins: int = 1, dele: int = 1,
                 gap: str = '-'):
        """
        Initializes the cost model.

        Args:
            alphabet: Alphabet whose codes index the matrix.
            matrix: Square matrix of substitution costs, zero on the diagonal.
            ins: Insertion cost.
            dele: Deletion cost.
            gap: Gap symbol, which must not belong to the alphabet.

        Raises:
            MetricSpaceError: If any invariant of the cost model is broken.
        """
        matrix = np.array(matrix)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise MetricSpaceError(f'Substitution matrix must be square, not {matrix.shape}')
        if matrix.shape[0] != len(alphabet):
            raise MetricSpaceError(f'Substitution matrix is {matrix.shape} but the alphabet has {len(alphabet)} symbols')
        if not np.issubdtype(matrix.dtype, np.integer): raise MetricSpaceError('Substitution costs must be integers')
        if np.any(np.diagonal(matrix) != 0): raise MetricSpaceError('Matching elements must cost nothing')
        if np.any(matrix < 0): raise MetricSpaceError('Substitution costs must be non-negative')
        for name, cost in (('Insertion', ins), ('Deletion', dele)):
            if not isinstance(cost, Integral) or cost < 0:
                raise MetricSpaceError(f'{name} cost must be a non-negative integer, not {cost!r}')
        if gap in alphabet: raise MetricSpaceError(f'Gap symbol "{gap}" cannot belong to the alphabet')

        self.alphabet = alphabet
        self.matrix = np.ascontiguousarray(matrix, dtype=self._DTYPE)
        self.matrix.flags.writeable = False
        self.INS = int(ins)
        self.DEL = int(dele)
        self.GAP = gap

    def sub(self, a, b):
        """
        Reads the cost from the matrix, resolving symbols the same way :meth:`encode` does.

        Raises:
            AlphabetError: If either symbol is outside the alphabet.
        """
        return int(self.matrix[self.alphabet.index(a), self.alphabet.index(b)])

    def encode(self, seq) -> np.ndarray:
        """Encodes a sequence of elements for the compiled kernels."""
        return self.alphabet.encode(seq)

    @classmethod
    def build(cls, alphabet: Alphabet, mismatch: int = 1, ins: int = 1, dele: int = 1, gap: str = '-'):
        """Builds a model where every mismatch costs the same."""
        n = len(alphabet)
        matrix = np.full((n, n), mismatch, dtype=cls._DTYPE)
        np.fill_diagonal(matrix, 0)
        return cls(alphabet, matrix, ins=ins, dele=dele, gap=gap)


# Functions ------------------------------------------------------------------------------------------------------------
def has_kernel(space: MetricSpace) -> bool:
    """
    True when ``space`` can run on the compiled integer kernels.

    A subclass that overrides ``sub`` no longer matches its matrix, so it takes the generic route.
    """
    return isinstance(space, MatrixMetricSpace) and type(space).sub is MatrixMetricSpace.sub
