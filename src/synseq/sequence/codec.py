# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Conversion of the accepted byte sequence types into sequence code.
"""

__name__ = "synseq.sequence"
__author__ = "Synseq contributors"
__all__ = []

import numpy as np


def to_code(sequence):
    """
    Convert a byte sequence into a C-contiguous ``uint8`` array.

    Parameters
    ----------
    sequence : bytes or bytearray or memoryview or ndarray, dtype=uint8
        The byte sequence.
        Arrays and views need not be contiguous.

    Returns
    -------
    code : ndarray, dtype=uint8
        The byte values.
        The array shares memory with `sequence` where possible.

    Raises
    ------
    TypeError
        If `sequence` is not a byte sequence or an array of another
        dtype.
    """
    if isinstance(sequence, (bytes, bytearray)):
        return np.frombuffer(sequence, dtype=np.uint8)
    if isinstance(sequence, memoryview):
        sequence = np.asarray(sequence)
    if isinstance(sequence, np.ndarray):
        if sequence.dtype != np.uint8:
            raise TypeError(
                f"Expected array with dtype 'uint8', got '{sequence.dtype}'"
            )
        return np.ascontiguousarray(sequence).reshape(-1)
    raise TypeError(f"'{type(sequence).__name__}' is not a byte sequence")
