from dataclasses import dataclass
from typing import Dict

from fasta_pipeline.core.sequence_stats import codon_count, count_nucleotides, gc_content


@dataclass(frozen=True)
class SequenceRecord:
    name: str
    sequence: str

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def nucleotide_counts(self) -> Dict[str, int]:
        return count_nucleotides(self.sequence)

    @property
    def count_a(self) -> int:
        return self.nucleotide_counts["A"]

    @property
    def count_c(self) -> int:
        return self.nucleotide_counts["C"]

    @property
    def count_g(self) -> int:
        return self.nucleotide_counts["G"]

    @property
    def count_t(self) -> int:
        return self.nucleotide_counts["T"]

    @property
    def gc_content(self) -> float:
        return gc_content(self.sequence)

    @property
    def codon_count(self) -> int:
        return codon_count(self.sequence)

    def to_dict(self, include_stats: bool = True) -> dict:
        data = {
            "name": self.name,
            "sequence": self.sequence,
        }
        if include_stats:
            counts = self.nucleotide_counts
            data.update({
                "length": self.length,
                "gc_content": float(self.gc_content),
                "codon_count": self.codon_count,
                "count_a": counts["A"],
                "count_c": counts["C"],
                "count_g": counts["G"],
                "count_t": counts["T"],
            })
        return data

    @staticmethod
    def from_dict(data: dict) -> "SequenceRecord":
        return SequenceRecord(
            name=str(data.get("name", "")),
            sequence=data["sequence"]
        )

    @property
    def dict(self):
        return self.to_dict()
