import pytest

from fasta_pipeline.config import ExportConfig
from fasta_pipeline.core.fasta_parser import parse_fasta
from fasta_pipeline.core.json_loader import load_records_json
from fasta_pipeline.exceptions import RecordFormatError
from fasta_pipeline.utils.exporters import export_records

STAT_FIELDS = ["length", "gc_content", "codon_count", "count_a", "count_c", "count_g", "count_t"]


def _stats(record):
    return {field: getattr(record, field) for field in STAT_FIELDS}


@pytest.mark.parametrize("include_stats", [True, False])
def test_json_round_trip_preserves_statistics(multi_fasta, include_stats):
    records = parse_fasta(multi_fasta)
    text = export_records(records, "json", ExportConfig(json_include_stats=include_stats))
    reloaded = load_records_json(text)

    assert reloaded == records
    assert [_stats(r) for r in reloaded] == [_stats(r) for r in records]


def test_loader_normalizes_sequence():
    records = load_records_json('[{"name": " a ", "sequence": "ac gt\\n"}]')
    assert records[0].name == "a"
    assert records[0].sequence == "ACGT"


def test_loader_recomputes_stats():
    records = load_records_json('[{"name": "a", "sequence": "GG", "gc_content": 3.0}]')
    assert records[0].gc_content == 100.0


def test_loader_accepts_empty_list():
    assert load_records_json("[]") == []


@pytest.mark.parametrize("text", [
    "not json",
    '{"name": "a", "sequence": "A"}',
    '[{"name": "a"}]',
    '[{"name": "a", "sequence": 5}]',
    '["ACGT"]',
])
def test_loader_rejects_malformed_input(text):
    with pytest.raises(RecordFormatError):
        load_records_json(text)


def test_round_trip_with_internal_whitespace():
    records = parse_fasta(">x\nAC GT\n>y\ng c\tA\n")
    reloaded = load_records_json(export_records(records, "json"))

    assert reloaded == records
    assert [_stats(r) for r in reloaded] == [_stats(r) for r in records]
    assert reloaded[0].length == 4
