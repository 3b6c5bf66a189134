# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors of the `sequence` subpackage.
"""

__name__ = "synseq.sequence"
__author__ = "Synseq contributors"
__all__ = [
    "SequenceError",
    "InvalidConversionError",
    "InvalidKindError",
    "ReverseComplementError",
    "InvalidSequenceError",
]

import functools


@functools.total_ordering
class SequenceError(Exception):
    """
    Base class of all errors raised for invalid sequences or
    unsupported sequence operations.

    Two errors are equal, if they are of the same class and carry
    the same sequence kinds.
    Errors are ordered by their class, in the order the classes are
    declared in this module, and then by their sequence kinds.

    Examples
    --------

    >>> from synseq.sequence import Kind
    >>> sorted([InvalidSequenceError(), InvalidKindError(Kind.RNA),
    ...         InvalidKindError(Kind.DNA)])
    [InvalidKindError(Kind.DNA), InvalidKindError(Kind.RNA), InvalidSequenceError()]
    """

    _rank = 0

    def __init__(self, *kinds):
        self._kinds = kinds
        super().__init__(self._message())

    def _message(self):
        return "Invalid sequence or unsupported sequence operation"

    def __reduce__(self):
        return type(self), self._kinds

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(k) for k in self._kinds)})"

    def __eq__(self, item):
        if not isinstance(item, SequenceError):
            return False
        return type(self) is type(item) and self._kinds == item._kinds

    def __lt__(self, item):
        if not isinstance(item, SequenceError):
            return NotImplemented
        return (self._rank, self._kinds) < (item._rank, item._kinds)

    def __hash__(self):
        return hash((type(self), self._kinds))


class InvalidConversionError(SequenceError):
    """
    Indicates that a sequence cannot be converted from one kind into
    another.

    Parameters
    ----------
    source, target : Kind
        The kind of the sequence and the requested kind.

    Examples
    --------

    >>> from synseq.sequence import Kind
    >>> print(InvalidConversionError(Kind.PROTEIN, Kind.DNA))
    Cannot convert Protein to DNA
    """

    _rank = 1

    def __init__(self, source, target):
        super().__init__(source, target)

    @property
    def source(self):
        return self._kinds[0]

    @property
    def target(self):
        return self._kinds[1]

    def _message(self):
        return f"Cannot convert {self.source} to {self.target}"


class InvalidKindError(SequenceError):
    """
    Indicates that a sequence contains symbols outside the alphabet of
    the explicitly requested kind.

    Parameters
    ----------
    kind : Kind
        The requested kind.
    """

    _rank = 2

    def __init__(self, kind):
        super().__init__(kind)

    @property
    def kind(self):
        return self._kinds[0]

    def _message(self):
        return f"The provided sequence was not valid {self.kind}"


class ReverseComplementError(SequenceError):
    """
    Indicates that no complement is defined for the symbols of a
    sequence kind, i.e. for proteins.

    Parameters
    ----------
    kind : Kind
        The kind of the sequence.
    """

    _rank = 3

    def __init__(self, kind):
        super().__init__(kind)

    @property
    def kind(self):
        return self._kinds[0]

    def _message(self):
        return f"Cannot reverse complement {self.kind}"


class InvalidSequenceError(SequenceError):
    """
    Indicates that a sequence is neither valid DNA, nor RNA nor
    protein.
    """

    _rank = 4

    def __init__(self):
        super().__init__()

    def _message(self):
        return "The provided sequence was not valid DNA, RNA, or Protein"
