# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "synseq.sequence"
__author__ = "Synseq contributors"
__all__ = ["Kind"]

import functools
from enum import Enum


@functools.total_ordering
class Kind(Enum):
    """
    The biological category a :class:`Seq` is validated against.

    The value of each member is its canonical display name.
    Members are ordered by declaration, i.e.
    ``DNA < RNA < PROTEIN``.

    Examples
    --------

    >>> print(Kind.PROTEIN)
    Protein
    >>> Kind("RNA")
    Kind.RNA
    >>> sorted([Kind.PROTEIN, Kind.DNA, Kind.RNA])
    [Kind.DNA, Kind.RNA, Kind.PROTEIN]
    """

    DNA = "DNA"
    RNA = "RNA"
    PROTEIN = "Protein"

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"Kind.{self.name}"

    def __lt__(self, other):
        if not isinstance(other, Kind):
            return NotImplemented
        members = list(Kind)
        return members.index(self) < members.index(other)
