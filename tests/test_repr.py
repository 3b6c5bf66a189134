# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
from synseq.sequence import (  # noqa: F401
    InvalidConversionError,
    InvalidKindError,
    InvalidSequenceError,
    Kind,
    LetterAlphabet,
    ReverseComplementError,
    Seq,
    SequenceError,
)


@pytest.mark.parametrize(
    "repr_object",
    [
        Kind.DNA,
        Kind.PROTEIN,
        Seq.dna("AACTGCTA"),
        Seq.rna("aacugcua"),
        Seq.protein("MIKTITE"),
        Seq.dna(""),
        LetterAlphabet("ACGT"),
        InvalidConversionError(Kind.RNA, Kind.DNA),
        InvalidKindError(Kind.PROTEIN),
        ReverseComplementError(Kind.PROTEIN),
        InvalidSequenceError(),
        SequenceError(),
    ],
)
def test_repr(repr_object):
    assert eval(repr(repr_object)) == repr_object
