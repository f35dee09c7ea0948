# fasta_pipeline/utils/table_builders.py

from typing import Sequence

import pandas as pd

from fasta_pipeline.models.sequence_record import SequenceRecord

STATS_COLUMNS = ["Name", "Length", "CG %", "Codons", "A", "C", "G", "T"]


def build_sequence_stats_df(records: Sequence[SequenceRecord]) -> pd.DataFrame:
    rows = []

    for record in records:
        counts = record.nucleotide_counts
        rows.append({
            "Name": record.name,
            "Length": record.length,
            "CG %": round(record.gc_content, 2),
            "Codons": record.codon_count,
            "A": counts["A"],
            "C": counts["C"],
            "G": counts["G"],
            "T": counts["T"],
        })

    return pd.DataFrame(rows, columns=STATS_COLUMNS)


def summarize_lengths(records: Sequence[SequenceRecord]) -> dict:
    """Aggregate length and GC figures over a set of records."""
    if not records:
        return {
            "count": 0,
            "total_length": 0,
            "min_length": 0,
            "max_length": 0,
            "mean_length": 0.0,
            "mean_gc_content": 0.0,
        }

    lengths = pd.Series([r.length for r in records], dtype="int64")
    gc = pd.Series([r.gc_content for r in records], dtype="float64")
    return {
        "count": int(lengths.size),
        "total_length": int(lengths.sum()),
        "min_length": int(lengths.min()),
        "max_length": int(lengths.max()),
        "mean_length": float(lengths.mean()),
        "mean_gc_content": float(gc.mean()),
    }
