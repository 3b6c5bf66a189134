import numpy as np
import pytest
import synseq.sequence as seq
from tests.util import random_symbols

SEQ_LENGTH = 1_000_000


@pytest.fixture(scope="module", params=list(seq.Kind), ids=str)
def symbols(request):
    rng = np.random.default_rng(0)
    return request.param, random_symbols(rng, request.param, SEQ_LENGTH)


@pytest.fixture(scope="module")
def nucleotide_seq():
    rng = np.random.default_rng(0)
    return seq.Seq.dna(random_symbols(rng, seq.Kind.DNA, SEQ_LENGTH))


@pytest.mark.benchmark
def benchmark_detection(symbols):
    _, sequence = symbols
    seq.Seq.new(sequence)


@pytest.mark.benchmark
def benchmark_count_elements(nucleotide_seq):
    nucleotide_seq.count_elements()


@pytest.mark.benchmark
def benchmark_reverse_complement(nucleotide_seq):
    nucleotide_seq.reverse_complement()


@pytest.mark.benchmark
def benchmark_convert(nucleotide_seq):
    nucleotide_seq.convert(seq.Kind.RNA)
