# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "synseq.sequence"
__author__ = "Synseq contributors"
__all__ = ["LetterAlphabet", "ALPHABETS", "get_alphabet", "is_word"]

import string
from types import MappingProxyType
import numpy as np
from synseq.sequence.codec import to_code
from synseq.sequence.kind import Kind


class LetterAlphabet(object):
    """
    This class defines the allowed symbols for a :class:`Seq` of a
    certain :class:`Kind`.

    The alphabet size is limited to the 94 printable, non-whitespace
    ASCII characters.
    Internally the symbols are saved as *NumPy* ``uint8`` array,
    accompanied by a membership table with an entry for each of the 256
    possible byte values.
    Hence, testing whether a byte sequence is a *word* over the
    alphabet, i.e. consists only of symbols of this alphabet, is a
    single vectorized lookup.

    Upper and lower case letters are different symbols.

    Objects of this class are immutable.

    Parameters
    ----------
    symbols : iterable object or str or bytes
        The symbols, that are allowed in this alphabet.

    Examples
    --------

    >>> alph = LetterAlphabet("ACGT")
    >>> alph.is_word(b"GATTACA")
    True
    >>> alph.is_word(b"GATTACA!")
    False
    >>> "T" in alph
    True
    >>> "t" in alph
    False
    """

    PRINTABLES = (string.digits + string.ascii_letters + string.punctuation).encode(
        "ASCII"
    )

    def __init__(self, symbols):
        if len(symbols) == 0:
            raise ValueError("Symbol list is empty")
        if isinstance(symbols, bytes):
            symbols = [bytes([code]) for code in symbols]
        codes = []
        for symbol in symbols:
            if not isinstance(symbol, (str, bytes)) or len(symbol) != 1:
                raise ValueError(f"Symbol {repr(symbol)} is not a single letter")
            if isinstance(symbol, str):
                if not symbol.isascii():
                    raise ValueError(f"Symbol {repr(symbol)} is not ASCII")
                symbol = symbol.encode("ASCII")
            if symbol not in LetterAlphabet.PRINTABLES:
                raise ValueError(
                    f"Symbol {repr(symbol)} is not printable or whitespace"
                )
            codes.append(symbol[0])
        self._symbols = np.array(codes, dtype=np.uint8)
        self._symbols.setflags(write=False)
        self._members = np.zeros(256, dtype=bool)
        self._members[self._symbols] = True
        self._members.setflags(write=False)

    def __repr__(self):
        """Represent LetterAlphabet as a string for debugging."""
        return f"LetterAlphabet({repr(''.join(self.get_symbols()))})"

    def get_symbols(self):
        """
        Get the symbols in the alphabet.

        Returns
        -------
        symbols : tuple of str
            The symbols, in the order given at construction.
        """
        return tuple(chr(code) for code in self._symbols)

    def is_word(self, sequence):
        """
        Check whether a byte sequence consists only of symbols of this
        alphabet.

        Parameters
        ----------
        sequence : bytes or bytearray or memoryview or ndarray, dtype=uint8
            The byte sequence to check.

        Returns
        -------
        is_word : bool
            True, if every byte is a symbol of this alphabet.
            An empty sequence is always a word.

        Raises
        ------
        TypeError
            If `sequence` is not a byte sequence or an array with a
            dtype other than ``uint8``.
        """
        code = to_code(sequence)
        return bool(np.all(self._members[code]))

    def __str__(self):
        return str(self.get_symbols())

    def __len__(self):
        return len(self._symbols)

    def __iter__(self):
        return iter(self.get_symbols())

    def __contains__(self, symbol):
        if isinstance(symbol, str):
            if len(symbol) != 1 or not symbol.isascii():
                return False
            return bool(self._members[ord(symbol)])
        if isinstance(symbol, bytes):
            if len(symbol) != 1:
                return False
            return bool(self._members[symbol[0]])
        return False

    def __hash__(self):
        return hash(self._symbols.tobytes())

    def __eq__(self, item):
        if item is self:
            return True
        if not isinstance(item, LetterAlphabet):
            return False
        return np.array_equal(self._symbols, item._symbols)


ALPHABETS = MappingProxyType(
    {
        Kind.DNA: LetterAlphabet("ACGTacgt"),
        Kind.RNA: LetterAlphabet("ACGUacgu"),
        # The 20 standard amino acids
        Kind.PROTEIN: LetterAlphabet(
            "ARNDCEQGHILKMFPSTWYVarndceqghilkmfpstwyv"
        ),
    }
)


def get_alphabet(kind):
    """
    Get the alphabet of a sequence kind.

    Parameters
    ----------
    kind : Kind
        The sequence kind.

    Returns
    -------
    alphabet : LetterAlphabet
        The alphabet containing the allowed symbols of `kind`.
    """
    return ALPHABETS[kind]


def is_word(kind, sequence):
    """
    Check whether a byte sequence is valid for the given sequence kind.

    Parameters
    ----------
    kind : Kind
        The sequence kind whose alphabet is used.
    sequence : bytes or bytearray or memoryview or ndarray, dtype=uint8
        The byte sequence to check.

    Returns
    -------
    is_word : bool
        True, if every byte is in the alphabet of `kind`.

    Examples
    --------

    >>> is_word(Kind.DNA, b"acgtACGT")
    True
    >>> is_word(Kind.RNA, b"ACGT")
    False
    >>> is_word(Kind.PROTEIN, b"")
    True
    """
    return ALPHABETS[kind].is_word(sequence)
