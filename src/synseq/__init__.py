# This source code is part of the Synseq package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *Synseq*.
The functionality is located in the :mod:`synseq.sequence` subpackage.
"""

__version__ = "0.1.0"
__name__ = "synseq"
__author__ = "Synseq contributors"
