# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "synseq.sequence"
__author__ = "Synseq contributors"
__all__ = ["ByteMap"]

from numbers import Integral
import numpy as np
from synseq.sequence.codec import to_code


class ByteMap(object):
    """
    A counter for each of the 256 possible byte values.

    All counts are zero initially.
    A count is addressed either by the byte value itself or by the
    corresponding single letter, given as :class:`str` or
    :class:`bytes`.

    Examples
    --------

    >>> counts = ByteMap.from_bytes(b"GATTACA")
    >>> counts["A"]
    3
    >>> counts[ord("T")]
    2
    >>> counts.increment("T")
    >>> counts.to_dict()
    {'A': 3, 'C': 1, 'G': 1, 'T': 3}
    >>> counts.total()
    8
    """

    def __init__(self):
        self._counts = np.zeros(256, dtype=np.int64)

    @staticmethod
    def from_bytes(sequence):
        """
        Count the occurrences of each byte value in a byte sequence.

        Parameters
        ----------
        sequence : bytes or bytearray or memoryview or ndarray, dtype=uint8
            The bytes to count.

        Returns
        -------
        counts : ByteMap
            The counts of each byte value.
        """
        byte_map = ByteMap()
        code = to_code(sequence)
        byte_map._counts += np.bincount(code, minlength=256)
        return byte_map

    def increment(self, key):
        """
        Add one to the count of a byte value.

        Parameters
        ----------
        key : int or str or bytes
            The byte value or the corresponding single letter.
        """
        self._counts[ByteMap._index(key)] += 1

    def total(self):
        """
        Get the sum of all counts.

        Returns
        -------
        total : int
            The sum of all counts.
        """
        return int(self._counts.sum())

    def items(self):
        """
        Iterate over all byte values with a non-zero count.

        Yields
        ------
        byte : int
            The byte value, in ascending order.
        count : int
            The count of `byte`.
        """
        for byte in np.nonzero(self._counts)[0]:
            yield int(byte), int(self._counts[byte])

    def to_dict(self):
        """
        Convert the non-zero counts into a dictionary.

        Returns
        -------
        counts : dict of (str -> int)
            The counts, with the byte values converted to letters.
        """
        return {chr(byte): count for byte, count in self.items()}

    def as_array(self):
        """
        Get the counts as array.

        Returns
        -------
        counts : ndarray, shape=(256,), dtype=int64
            A copy of the counts, indexed by byte value.
        """
        return self._counts.copy()

    def __getitem__(self, key):
        return int(self._counts[ByteMap._index(key)])

    def __len__(self):
        return len(self._counts)

    def __eq__(self, item):
        if not isinstance(item, ByteMap):
            return False
        return np.array_equal(self._counts, item._counts)

    def __repr__(self):
        """Represent ByteMap as a string for debugging."""
        return f"ByteMap({self.to_dict()})"

    @staticmethod
    def _index(key):
        if isinstance(key, (str, bytes)):
            if len(key) != 1:
                raise KeyError(f"{repr(key)} is not a single letter")
            if isinstance(key, str) and not key.isascii():
                raise KeyError(f"{repr(key)} is not an ASCII letter")
            key = ord(key)
        elif not isinstance(key, Integral) or isinstance(key, bool):
            raise TypeError(
                f"'{type(key).__name__}' cannot be used as byte value"
            )
        if key < 0 or key > 255:
            raise KeyError(f"{key} is not a valid byte value")
        return int(key)
