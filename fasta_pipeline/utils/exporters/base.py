# fasta_pipeline/utils/exporters/base.py

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from fasta_pipeline.config import ExportConfig
from fasta_pipeline.models.sequence_record import SequenceRecord


class ExporterBase(ABC):
    extension: str = ""

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()

    @abstractmethod
    def export(self, records: Sequence[SequenceRecord]) -> str:
        """Export records to a string in this exporter's format"""
        pass

    def filename(self) -> str:
        """Default filename for download"""
        return f"sequence_stats{self.extension}"
