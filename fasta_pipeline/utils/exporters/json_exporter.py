# fasta_pipeline/utils/exporters/json_exporter.py

import json
from typing import Sequence

from fasta_pipeline.models.sequence_record import SequenceRecord

from .base import ExporterBase


class JsonExporter(ExporterBase):
    extension = ".json"

    def export(self, records: Sequence[SequenceRecord]) -> str:
        payload = [
            record.to_dict(include_stats=self.config.json_include_stats)
            for record in records
        ]
        return json.dumps(payload, indent=self.config.json_indent, ensure_ascii=False)
