"""
Module for representing ASCII alphabets of sequence elements
"""
from typing import Union, Iterable, Final

import numpy as np


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class AlphabetError(Exception):
    """Raised when an alphabet is invalid or a sequence holds symbols outside of it."""


# Classes --------------------------------------------------------------------------------------------------------------
class Alphabet:
    """
    A class to represent an alphabet of single-character ASCII symbols.

    Symbols are encoded to their position in the alphabet, which is how the
    alignment kernels index substitution matrices.

    Examples:
        >>> dna = Alphabet('ACGT')
        >>> dna.encode('GATTACA')
        array([2, 0, 3, 3, 0, 1, 0], dtype=uint8)
    """
    __slots__ = ('_data', '_symbols', '_lookup_table')
    DTYPE: Final = np.uint8
    INVALID: Final = np.iinfo(DTYPE).max
    MAX_LEN: Final = int(INVALID)
    ENCODING: Final = 'ascii'

    def __init__(self, symbols: Union[str, bytes]):
        """
        Initializes an Alphabet.

        Args:
            symbols: The symbols in the alphabet, in code order.

        Raises:
            AlphabetError: If symbols are not ASCII, too many, or contain duplicates.
        """
        if isinstance(symbols, str):
            if not symbols.isascii(): raise AlphabetError('Alphabet symbols must be a valid ASCII string')
            symbols = symbols.encode(self.ENCODING)
        if not symbols: raise AlphabetError('Alphabet cannot be empty')
        if not symbols.isascii(): raise AlphabetError('Alphabet symbols must be a valid ASCII string')
        if len(symbols) > self.MAX_LEN:
            raise AlphabetError(f'Alphabet size cannot exceed {self.MAX_LEN} symbols ({self.DTYPE})')
        if len(set(symbols.upper())) != len(symbols): raise AlphabetError('Alphabet contains duplicate symbols')

        self._data: np.ndarray = np.frombuffer(symbols, dtype=self.DTYPE)
        self._symbols = symbols.decode(self.ENCODING)
        self._lookup_table = np.full(256, self.INVALID, dtype=self.DTYPE)
        indices = np.arange(len(symbols), dtype=self.DTYPE)
        self._lookup_table[np.frombuffer(symbols, dtype=self.DTYPE)] = indices
        self._lookup_table[np.frombuffer(symbols.lower(), dtype=self.DTYPE)] = indices
        self._lookup_table.flags.writeable = False

    def __len__(self): return len(self._data)
    def __iter__(self): return iter(self._symbols)
    def __getitem__(self, item): return self._symbols[item]
    def __repr__(self): return f"Alphabet('{self._symbols}')"
    def __str__(self): return self._symbols
    def __hash__(self): return hash(self._symbols)

    def __contains__(self, item):
        if isinstance(item, (str, bytes)) and len(item) == 1 and item.isascii():
            return self._lookup_table[ord(item)] != self.INVALID
        return False

    def __eq__(self, other):
        if self is other: return True
        if not isinstance(other, Alphabet): return False
        return self._symbols == other._symbols

    def index(self, symbol: str) -> int:
        """Returns the code of a single symbol."""
        if symbol not in self: raise AlphabetError(f'Symbol "{symbol}" is not in alphabet {self}')
        return int(self._lookup_table[ord(symbol)])

    def encode(self, seq: Union[str, bytes, Iterable[str]]) -> np.ndarray:
        """
        Encodes a sequence of symbols to an array of codes.

        Args:
            seq: A string, bytes, or any iterable of single-character symbols.

        Returns:
            A uint8 numpy array of codes.

        Raises:
            AlphabetError: If the sequence holds a symbol outside the alphabet.
        """
        if isinstance(seq, np.ndarray) and seq.dtype == self.DTYPE: return seq
        if not isinstance(seq, (str, bytes)): seq = ''.join(seq)
        if isinstance(seq, str):
            if not seq.isascii(): raise AlphabetError(f'Sequence contains non-ASCII symbols for alphabet {self}')
            seq = seq.encode(self.ENCODING)
        codes = self._lookup_table[np.frombuffer(seq, dtype=self.DTYPE)]
        if np.any(bad := codes == self.INVALID):
            raise AlphabetError(f'Symbol "{chr(seq[int(np.argmax(bad))])}" is not in alphabet {self}')
        return codes

    def decode(self, codes: np.ndarray) -> str:
        """Decodes an array of codes back to a string of symbols."""
        return self._data[np.asarray(codes, dtype=np.intp)].tobytes().decode(self.ENCODING)
