"""
DNA sequences: the nucleotide cost model and the test instance format.
"""
from typing import Union, Iterable

import numpy as np

from runa.core.alphabet import Alphabet, AlphabetError
from runa.core.metric import MatrixMetricSpace


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class InstanceFormatError(Exception):
    """Raised when a test instance does not follow the `.adn` layout."""


# Classes --------------------------------------------------------------------------------------------------------------
class DnaMetricSpace(MatrixMetricSpace):
    """
    Nucleotide costs: a match is free, a transition (A<->G, C<->T) costs 3,
    a transversion 4, an insertion or deletion 2.

    Examples:
        >>> DNA.sub('A', 'G'), DNA.sub('A', 'T'), DNA.INS
        (3, 4, 2)
    """
    ALPHABET = Alphabet('ACGT')
    TRANSITION = 3
    TRANSVERSION = 4
    INDEL = 2
    _PURINES = frozenset('AG')

    def __init__(self):
        matrix = np.full((len(self.ALPHABET), len(self.ALPHABET)), self.TRANSVERSION, dtype=np.int64)
        for i, a in enumerate(self.ALPHABET):
            for j, b in enumerate(self.ALPHABET):
                if a == b: matrix[i, j] = 0
                elif (a in self._PURINES) == (b in self._PURINES): matrix[i, j] = self.TRANSITION
        super().__init__(self.ALPHABET, matrix, ins=self.INDEL, dele=self.INDEL, gap='-')


class DnaBlock:
    """
    A pair of DNA sequences to align, as stored in a test instance.

    Examples:
        >>> block = DnaBlock.parse('10\\n5\\nT A T A T G A G T C\\nT A T T T\\n')
        >>> block
        DnaBlock('TATATGAGTC', 'TATTT')
    """
    __slots__ = ('x', 'y')

    def __init__(self, x: Union[str, Iterable[str]], y: Union[str, Iterable[str]]):
        self.x = ''.join(x).upper()
        self.y = ''.join(y).upper()
        for seq in (self.x, self.y):
            if bad := set(seq).difference(DNA.alphabet):
                raise AlphabetError(f'Not a DNA symbol: {", ".join(sorted(bad))}')

    def __iter__(self): return iter((self.x, self.y))
    def __repr__(self): return f"DnaBlock('{self.x}', '{self.y}')"
    def __len__(self): return len(self.x)

    def __eq__(self, other):
        if not isinstance(other, DnaBlock): return False
        return self.x == other.x and self.y == other.y

    @classmethod
    def parse(cls, text: str) -> 'DnaBlock':
        """
        Parses the `.adn` layout: the length of x, the length of y, then the
        symbols of x followed by the symbols of y, separated by whitespace.

        Raises:
            InstanceFormatError: If the header or the symbol counts are wrong.
        """
        tokens = text.split()
        if len(tokens) < 2: raise InstanceFormatError('Instance must start with the lengths of both sequences')
        try: n, m = int(tokens[0]), int(tokens[1])
        except ValueError as e: raise InstanceFormatError(f'Invalid sequence lengths: {tokens[:2]}') from e
        if n < 0 or m < 0: raise InstanceFormatError(f'Sequence lengths cannot be negative: {n}, {m}')
        symbols = tokens[2:]
        if len(symbols) != n + m:
            raise InstanceFormatError(f'Expected {n} + {m} symbols, found {len(symbols)}')
        if any(len(s) != 1 for s in symbols): raise InstanceFormatError('Symbols must be single characters')
        try: return cls(symbols[:n], symbols[n:])
        except AlphabetError as e: raise InstanceFormatError(str(e)) from e

    def dumps(self) -> str:
        """Serialises the block back to the `.adn` layout."""
        return f"{len(self.x)}\n{len(self.y)}\n{' '.join(self.x)}\n{' '.join(self.y)}\n"


# Constants ------------------------------------------------------------------------------------------------------------
DNA = DnaMetricSpace()
