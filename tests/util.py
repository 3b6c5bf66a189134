# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
from synseq.sequence import ALPHABETS


def random_symbols(rng, kind, length):
    """
    Create random symbols from the alphabet of the given kind.
    """
    symbols = np.frombuffer(
        "".join(ALPHABETS[kind].get_symbols()).encode("ASCII"), dtype=np.uint8
    )
    return rng.choice(symbols, size=length).tobytes()
