# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for handling biological sequences.

A :class:`Seq` is an immutable succession of single letter symbols,
tagged with a :class:`Kind`: DNA, RNA or protein.
The set of symbols, that can occur in a sequence of a certain kind, is
defined by a :class:`LetterAlphabet`:
The DNA alphabet contains ``A``, ``C``, ``G`` and ``T``, the RNA
alphabet contains ``A``, ``C``, ``G`` and ``U`` and the protein
alphabet contains the 20 standard amino acids, each in upper and lower
case.
If a :class:`Seq` is created from a symbol, that is not in the alphabet
of the requested kind, an :class:`InvalidKindError` is raised.
If no kind is given, the kind is detected from the symbols, by trying
DNA, RNA and protein in this order.

Internally, a :class:`Seq` stores the symbols as :class:`bytes`,
which are also accessible as *NumPy* ``uint8`` array via
:attr:`Seq.code`.
The case of each symbol is kept, also by transforms like
:meth:`Seq.reverse_complement()` and :meth:`Seq.convert()`.

Every operation that is not defined for the kind of a sequence, raises
a :class:`SequenceError`.
"""

__name__ = "synseq.sequence"
__author__ = "Synseq contributors"

from .kind import *
from .error import *
from .alphabet import *
from .bytemap import *
from .complement import *
from .seq import *
