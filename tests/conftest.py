import pytest

from fasta_pipeline.models.sequence_record import SequenceRecord

MULTI_FASTA = """>seq1 first sequence
ACGTACGTGG
CCAA
>seq2
ttttgggg
>empty
>seq4
NNACGTRY
"""


@pytest.fixture
def multi_fasta() -> str:
    return MULTI_FASTA


@pytest.fixture
def records() -> list[SequenceRecord]:
    return [
        SequenceRecord("alpha", "ACGT"),
        SequenceRecord('seq"1', "GGGCCCAT"),
        SequenceRecord("blank", ""),
        SequenceRecord("ambig", "ANNNG"),
    ]
