# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "synseq.sequence"
__author__ = "Synseq contributors"
__all__ = ["complement_table", "reverse_complement"]

from types import MappingProxyType
import numpy as np
from synseq.sequence.codec import to_code
from synseq.sequence.error import ReverseComplementError
from synseq.sequence.kind import Kind


def _create_table(pairs):
    # Bytes without a partner are mapped onto themselves
    table = np.arange(256, dtype=np.uint8)
    for symbol, compl_symbol in pairs.items():
        for case in (str.upper, str.lower):
            table[ord(case(symbol))] = ord(case(compl_symbol))
    table.setflags(write=False)
    return table


_COMPLEMENT_TABLES = MappingProxyType(
    {
        Kind.DNA: _create_table({"A": "T", "C": "G", "G": "C", "T": "A"}),
        Kind.RNA: _create_table({"A": "U", "C": "G", "G": "C", "U": "A"}),
    }
)


def complement_table(kind):
    """
    Get the lookup table that maps each byte value onto its
    complement.

    Parameters
    ----------
    kind : Kind
        The nucleotide sequence kind.

    Returns
    -------
    table : ndarray, shape=(256,), dtype=uint8
        The read-only lookup table.
        Bytes that are not nucleotide symbols are mapped onto
        themselves.

    Raises
    ------
    ReverseComplementError
        If `kind` is not a nucleotide kind.
    """
    try:
        return _COMPLEMENT_TABLES[kind]
    except KeyError:
        raise ReverseComplementError(kind) from None


def reverse_complement(kind, sequence):
    """
    Get the reverse complement of a nucleotide byte sequence.

    The case of each symbol is preserved.

    Parameters
    ----------
    kind : Kind
        The nucleotide sequence kind, either ``Kind.DNA`` or
        ``Kind.RNA``.
    sequence : bytes or bytearray or memoryview or ndarray, dtype=uint8
        The nucleotide sequence.

    Returns
    -------
    rev_compl : bytes
        The reverse complement of `sequence`.

    Raises
    ------
    ReverseComplementError
        If `kind` is not a nucleotide kind.
    TypeError
        If `sequence` is not a byte sequence or an array with a
        dtype other than ``uint8``.

    Examples
    --------

    >>> reverse_complement(Kind.DNA, b"aaaacCCGGT")
    b'ACCGGgtttt'
    >>> reverse_complement(Kind.RNA, b"AAAACCCGGU")
    b'ACCGGGUUUU'
    """
    table = complement_table(kind)
    code = to_code(sequence)
    return table[code][::-1].tobytes()
