import pytest

from fasta_pipeline.utils.table_builders import STATS_COLUMNS, build_sequence_stats_df, summarize_lengths


def test_stats_dataframe(records):
    df = build_sequence_stats_df(records)
    assert list(df.columns) == STATS_COLUMNS
    assert list(df["Name"]) == ["alpha", 'seq"1', "blank", "ambig"]
    assert list(df["Length"]) == [4, 8, 0, 5]
    assert list(df["CG %"]) == [50.0, 75.0, 0.0, 20.0]
    assert list(df["Codons"]) == [2, 6, 0, 3]
    assert list(df["G"]) == [1, 3, 0, 1]


def test_stats_dataframe_empty():
    df = build_sequence_stats_df([])
    assert df.empty
    assert list(df.columns) == STATS_COLUMNS


def test_summarize_lengths(records):
    summary = summarize_lengths(records)
    assert summary["count"] == 4
    assert summary["total_length"] == 17
    assert summary["min_length"] == 0
    assert summary["max_length"] == 8
    assert summary["mean_length"] == pytest.approx(4.25)
    assert summary["mean_gc_content"] == pytest.approx((50 + 75 + 0 + 20) / 4)


def test_summarize_no_records():
    assert summarize_lengths([]) == {
        "count": 0,
        "total_length": 0,
        "min_length": 0,
        "max_length": 0,
        "mean_length": 0.0,
        "mean_gc_content": 0.0,
    }
