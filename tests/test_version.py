from importlib.metadata import version
import synseq


def test_version():
    """
    Check if version given in the package is equal to the version of
    the installed distribution.
    """
    assert synseq.__version__ == version("synseq")
