# fasta_pipeline/core/sequence_stats.py

from typing import Dict

NUCLEOTIDES = ("A", "C", "G", "T")


def count_nucleotides(sequence: str) -> Dict[str, int]:
    """
    Count each DNA base in an uppercase sequence.

    Characters outside A/C/G/T (ambiguity codes, gaps) are not counted.
    """
    return {base: sequence.count(base) for base in NUCLEOTIDES}


def gc_content(sequence: str) -> float:
    """Percentage of G and C in the sequence, 0.0 for an empty sequence."""
    if not sequence:
        return 0.0
    gc = sequence.count("G") + sequence.count("C")
    return gc / len(sequence) * 100


def codon_count(sequence: str) -> int:
    # sliding window of width 3, not len // 3
    return max(0, len(sequence) - 2)
