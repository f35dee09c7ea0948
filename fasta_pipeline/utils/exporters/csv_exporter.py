# fasta_pipeline/utils/exporters/csv_exporter.py

import csv
import io
from decimal import Decimal
from typing import Sequence

from fasta_pipeline.models.sequence_record import SequenceRecord

from .base import ExporterBase

CSV_HEADER = ["Name", "Length", "CG%", "Codons", "A", "C", "G", "T"]


class CsvExporter(ExporterBase):
    extension = ".csv"

    def export(self, records: Sequence[SequenceRecord]) -> str:
        output = io.StringIO()
        # QUOTE_NONNUMERIC quotes only the name; numbers (Decimal included) stay bare
        writer = csv.writer(
            output,
            quoting=csv.QUOTE_NONNUMERIC,
            lineterminator=self.config.csv_line_terminator,
        )

        output.write(",".join(CSV_HEADER) + self.config.csv_line_terminator)
        for record in records:
            counts = record.nucleotide_counts
            writer.writerow([
                record.name,
                record.length,
                Decimal(f"{record.gc_content:.2f}"),
                record.codon_count,
                counts["A"],
                counts["C"],
                counts["G"],
                counts["T"],
            ])

        return output.getvalue()
