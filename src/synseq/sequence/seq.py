# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The central sequence type of this package.
"""

__name__ = "synseq.sequence"
__author__ = "Synseq contributors"
__all__ = ["Seq", "DETECTION_ORDER"]

import functools
import logging
from types import MappingProxyType
import numpy as np
from synseq.sequence.alphabet import is_word
from synseq.sequence.bytemap import ByteMap
from synseq.sequence.codec import to_code
from synseq.sequence.complement import reverse_complement
from synseq.sequence.error import (
    InvalidConversionError,
    InvalidKindError,
    InvalidSequenceError,
)
from synseq.sequence.kind import Kind

logger = logging.getLogger(__name__)

# The first kind whose alphabet accepts a sequence wins
DETECTION_ORDER = (Kind.DNA, Kind.RNA, Kind.PROTEIN)

_CONVERSION_TABLES = MappingProxyType(
    {
        # Transcription
        (Kind.DNA, Kind.RNA): bytes.maketrans(b"Tt", b"Uu"),
    }
)


@functools.total_ordering
class Seq(object):
    """
    An immutable biological sequence, tagged with its :class:`Kind`.

    A :class:`Seq` can only be created from symbols that are valid for
    its kind, i.e. each byte of the sequence is in the alphabet of the
    kind.
    This guarantee holds for the entire lifetime of the object, as all
    operations return new :class:`Seq` objects, that are valid by
    construction.
    Upper and lower case symbols are distinguished and the case is kept
    by all operations.

    Parameters
    ----------
    sequence : str or bytes or bytearray or memoryview or ndarray, dtype=uint8
        The symbols of the sequence.
        A :class:`str` must contain only ASCII characters to be valid.
    kind : Kind, optional
        The kind of the sequence.
        By default, the kind is detected from the symbols:
        The kinds in :data:`DETECTION_ORDER` are tried one after
        another and the first kind, whose alphabet contains all symbols,
        is taken.
        Consequently, a sequence that is valid DNA and valid protein
        is classified as DNA.

    Raises
    ------
    InvalidKindError
        If `kind` is given and the sequence contains symbols, that are
        not in the alphabet of `kind`.
    InvalidSequenceError
        If `kind` is not given and the sequence is not valid for any
        kind.

    Examples
    --------

    >>> dna = Seq("AAAACCCGGT")
    >>> dna
    Seq('AAAACCCGGT', Kind.DNA)
    >>> print(dna.reverse_complement())
    ACCGGGTTTT
    >>> print(dna.convert(Kind.RNA))
    AAAACCCGGU
    >>> print(Seq("MAMAPRTEINSTRING").kind)
    Protein
    >>> Seq("ACGU", Kind.DNA)
    Traceback (most recent call last):
    ...
    synseq.sequence.InvalidKindError: The provided sequence was not valid DNA
    """

    __slots__ = ("_bytes", "_kind")

    def __init__(self, sequence, kind=None):
        sequence = _to_bytes(sequence)
        if kind is None:
            kind = _detect_kind(sequence)
        elif not isinstance(kind, Kind):
            raise TypeError(f"Expected 'Kind', got '{type(kind).__name__}'")
        elif sequence is None or not is_word(kind, sequence):
            raise InvalidKindError(kind)
        self._bytes = sequence
        self._kind = kind

    @classmethod
    def _from_valid(cls, sequence, kind):
        # Skips validation, the caller guarantees the invariant
        seq = object.__new__(cls)
        seq._bytes = sequence
        seq._kind = kind
        return seq

    @staticmethod
    def new(sequence):
        """
        Create a sequence and detect its kind.

        Parameters
        ----------
        sequence : str or bytes or bytearray or memoryview or ndarray, dtype=uint8
            The symbols of the sequence.

        Returns
        -------
        seq : Seq
            The sequence, whose kind is the first kind in
            :data:`DETECTION_ORDER` that accepts all symbols.

        Raises
        ------
        InvalidSequenceError
            If the sequence is neither valid DNA, nor RNA nor protein.
        """
        return Seq(sequence)

    @staticmethod
    def dna(sequence):
        """
        Create a DNA sequence.

        Parameters
        ----------
        sequence : str or bytes or bytearray or memoryview or ndarray, dtype=uint8
            The symbols of the sequence.

        Returns
        -------
        seq : Seq
            The DNA sequence.

        Raises
        ------
        InvalidKindError
            If the sequence is not valid DNA.
        """
        return Seq(sequence, Kind.DNA)

    @staticmethod
    def rna(sequence):
        """
        Create a RNA sequence.

        Parameters
        ----------
        sequence : str or bytes or bytearray or memoryview or ndarray, dtype=uint8
            The symbols of the sequence.

        Returns
        -------
        seq : Seq
            The RNA sequence.

        Raises
        ------
        InvalidKindError
            If the sequence is not valid RNA.
        """
        return Seq(sequence, Kind.RNA)

    @staticmethod
    def protein(sequence):
        """
        Create a protein sequence.

        Parameters
        ----------
        sequence : str or bytes or bytearray or memoryview or ndarray, dtype=uint8
            The symbols of the sequence.

        Returns
        -------
        seq : Seq
            The protein sequence.

        Raises
        ------
        InvalidKindError
            If the sequence is not valid protein.
        """
        return Seq(sequence, Kind.PROTEIN)

    @staticmethod
    def from_dict(data):
        """
        Create a sequence from its dictionary representation.

        The sequence is validated again.

        Parameters
        ----------
        data : dict
            A dictionary as returned by :meth:`to_dict()`.

        Returns
        -------
        seq : Seq
            The sequence.

        Raises
        ------
        InvalidKindError
            If the sequence is not valid for the given kind.
        ValueError
            If the kind name is unknown.
        """
        return Seq(data["sequence"], Kind(data["kind"]))

    def to_dict(self):
        """
        Convert this sequence into a dictionary, containing only
        JSON-compatible values.

        Returns
        -------
        data : dict
            The symbols as ``'sequence'`` and the kind name as
            ``'kind'``.

        Examples
        --------

        >>> Seq.rna("ACGU").to_dict()
        {'sequence': 'ACGU', 'kind': 'RNA'}
        """
        return {"sequence": str(self), "kind": self._kind.value}

    @property
    def kind(self):
        """
        Kind: The kind of this sequence.
        """
        return self._kind

    @property
    def code(self):
        """
        ndarray, dtype=uint8: A read-only view on the bytes of this
        sequence.
        """
        return np.frombuffer(self._bytes, dtype=np.uint8)

    def is_empty(self):
        """
        Check whether this sequence contains no symbols.

        Returns
        -------
        is_empty : bool
            True, if the length of this sequence is zero.
        """
        return len(self._bytes) == 0

    def copy(self):
        """
        Copy this sequence.

        Returns
        -------
        copy : Seq
            An equal sequence.
        """
        return Seq._from_valid(self._bytes, self._kind)

    def reverse(self):
        """
        Reverse the order of the symbols.

        Returns
        -------
        reversed : Seq
            The reversed sequence of the same kind.

        Examples
        --------

        >>> print(Seq.protein("MAMAPRTEINSTRING").reverse())
        GNIRTSNIETRPAMAM
        """
        return Seq._from_valid(self._bytes[::-1], self._kind)

    def count_elements(self):
        """
        Count the occurrences of each symbol.

        Returns
        -------
        counts : ByteMap
            The count of each byte value.

        Examples
        --------

        >>> Seq.dna("GATTACA").count_elements().to_dict()
        {'A': 3, 'C': 1, 'G': 1, 'T': 2}
        """
        return ByteMap.from_bytes(self._bytes)

    def reverse_complement(self):
        """
        Get the reverse complement of this nucleotide sequence.

        The case of each symbol is preserved.

        Returns
        -------
        rev_compl : Seq
            The reverse complement sequence of the same kind.

        Raises
        ------
        ReverseComplementError
            If this is a protein sequence.

        Examples
        --------

        >>> print(Seq.dna("aaaacCCGGT").reverse_complement())
        ACCGGgtttt
        """
        return Seq._from_valid(
            reverse_complement(self._kind, self._bytes), self._kind
        )

    def convert(self, kind):
        """
        Convert this sequence into a sequence of another kind.

        Converting into the own kind gives an equal copy.
        DNA is converted into RNA by replacing ``T`` with ``U`` and
        ``t`` with ``u``.
        No other conversion is supported.

        Parameters
        ----------
        kind : Kind
            The target kind.

        Returns
        -------
        converted : Seq
            The sequence of the target kind.

        Raises
        ------
        InvalidConversionError
            If the conversion is not supported.

        Examples
        --------

        >>> print(Seq.dna("GaTgGaAcTt").convert(Kind.RNA))
        GaUgGaAcUu
        """
        if not isinstance(kind, Kind):
            raise TypeError(f"Expected 'Kind', got '{type(kind).__name__}'")
        if kind == self._kind:
            return self.copy()
        try:
            table = _CONVERSION_TABLES[self._kind, kind]
        except KeyError:
            raise InvalidConversionError(self._kind, kind) from None
        return Seq._from_valid(self._bytes.translate(table), kind)

    def __bytes__(self):
        return self._bytes

    def __len__(self):
        return len(self._bytes)

    def __str__(self):
        return self._bytes.decode("ASCII")

    def __repr__(self):
        """Represent Seq as a string for debugging."""
        return f"Seq({repr(str(self))}, {repr(self._kind)})"

    def __eq__(self, item):
        if not isinstance(item, Seq):
            return NotImplemented
        return self._bytes == item._bytes and self._kind == item._kind

    def __lt__(self, item):
        if not isinstance(item, Seq):
            return NotImplemented
        return (self._bytes, self._kind) < (item._bytes, item._kind)

    def __hash__(self):
        return hash((self._bytes, self._kind))

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __getstate__(self):
        return self._bytes, self._kind

    def __setstate__(self, state):
        self._bytes, self._kind = state


def _to_bytes(sequence):
    """
    Convert the accepted input types into :class:`bytes`.

    ``None`` is returned for a :class:`str` with non-ASCII characters,
    as such a sequence cannot be valid for any kind.
    """
    if isinstance(sequence, str):
        if not sequence.isascii():
            return None
        return sequence.encode("ASCII")
    return to_code(sequence).tobytes()


def _detect_kind(sequence):
    if sequence is not None:
        for kind in DETECTION_ORDER:
            logger.debug("Trying to interpret sequence as %s", kind)
            if is_word(kind, sequence):
                logger.debug("Sequence was detected as %s", kind)
                return kind
    logger.debug("Sequence is not valid for any kind")
    raise InvalidSequenceError()
