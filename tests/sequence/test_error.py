# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pickle
import pytest
import synseq.sequence as seq


@pytest.mark.parametrize(
    "error, message",
    [
        (
            seq.InvalidConversionError(seq.Kind.PROTEIN, seq.Kind.DNA),
            "Cannot convert Protein to DNA",
        ),
        (
            seq.InvalidConversionError(seq.Kind.PROTEIN, seq.Kind.RNA),
            "Cannot convert Protein to RNA",
        ),
        (
            seq.InvalidKindError(seq.Kind.DNA),
            "The provided sequence was not valid DNA",
        ),
        (
            seq.InvalidKindError(seq.Kind.RNA),
            "The provided sequence was not valid RNA",
        ),
        (
            seq.InvalidKindError(seq.Kind.PROTEIN),
            "The provided sequence was not valid Protein",
        ),
        (
            seq.InvalidSequenceError(),
            "The provided sequence was not valid DNA, RNA, or Protein",
        ),
        (
            seq.ReverseComplementError(seq.Kind.PROTEIN),
            "Cannot reverse complement Protein",
        ),
    ],
)
def test_message(error, message):
    """
    Check that the error messages match the expected sentences
    exactly.
    """
    assert str(error) == message
    assert isinstance(error, seq.SequenceError)


def test_payload():
    error = seq.InvalidConversionError(seq.Kind.RNA, seq.Kind.DNA)
    assert error.source == seq.Kind.RNA
    assert error.target == seq.Kind.DNA
    assert seq.InvalidKindError(seq.Kind.RNA).kind == seq.Kind.RNA
    assert seq.ReverseComplementError(seq.Kind.PROTEIN).kind == seq.Kind.PROTEIN


def test_equality():
    assert seq.InvalidKindError(seq.Kind.DNA) == seq.InvalidKindError(seq.Kind.DNA)
    assert seq.InvalidKindError(seq.Kind.DNA) != seq.InvalidKindError(seq.Kind.RNA)
    # Same payload, but different error
    assert seq.InvalidKindError(seq.Kind.PROTEIN) != seq.ReverseComplementError(
        seq.Kind.PROTEIN
    )
    assert seq.InvalidSequenceError() == seq.InvalidSequenceError()
    assert len({seq.InvalidSequenceError(), seq.InvalidSequenceError()}) == 1


@pytest.mark.parametrize(
    "error",
    [
        seq.InvalidConversionError(seq.Kind.DNA, seq.Kind.PROTEIN),
        seq.InvalidKindError(seq.Kind.RNA),
        seq.ReverseComplementError(seq.Kind.PROTEIN),
        seq.InvalidSequenceError(),
    ],
)
def test_pickle(error):
    restored = pickle.loads(pickle.dumps(error))
    assert restored == error
    assert str(restored) == str(error)


def test_base_error():
    """
    The base class can be raised on its own, with a generic message.
    """
    error = seq.SequenceError()
    assert str(error) == "Invalid sequence or unsupported sequence operation"
    assert error == seq.SequenceError()
    assert error != seq.InvalidSequenceError()
    with pytest.raises(seq.SequenceError):
        raise error


def test_order():
    """
    Errors are ordered by their class first and by their kinds second.
    """
    errors = [
        seq.InvalidSequenceError(),
        seq.ReverseComplementError(seq.Kind.PROTEIN),
        seq.InvalidKindError(seq.Kind.PROTEIN),
        seq.InvalidKindError(seq.Kind.RNA),
        seq.InvalidKindError(seq.Kind.DNA),
        seq.InvalidConversionError(seq.Kind.PROTEIN, seq.Kind.DNA),
        seq.InvalidConversionError(seq.Kind.DNA, seq.Kind.PROTEIN),
    ]
    assert sorted(errors) == errors[::-1]
    assert seq.InvalidKindError(seq.Kind.DNA) < seq.InvalidKindError(seq.Kind.RNA)
    assert seq.InvalidKindError(seq.Kind.DNA) <= seq.InvalidKindError(seq.Kind.DNA)
    assert seq.InvalidSequenceError() > seq.InvalidKindError(seq.Kind.PROTEIN)
    with pytest.raises(TypeError):
        seq.InvalidSequenceError() < 42
