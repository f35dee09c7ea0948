# fasta_pipeline/core/json_loader.py

import json
import logging
from typing import List

from fasta_pipeline.exceptions import RecordFormatError
from fasta_pipeline.models.sequence_record import SequenceRecord

logger = logging.getLogger(__name__)


def load_records_json(text: str) -> List[SequenceRecord]:
    """
    Loads records previously written by the JSON exporter.

    Only ``name`` and ``sequence`` are read; statistics stored alongside
    them are ignored and recomputed from the sequence.

    Raises:
        RecordFormatError: if the text is not a JSON array of record objects.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordFormatError(f"Invalid JSON: {e}") from e

    if not isinstance(raw, list):
        raise RecordFormatError("Record JSON must be a list of record objects.")

    records = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict) or not isinstance(entry.get("sequence"), str):
            raise RecordFormatError(f"Entry {i} is not a record with a string 'sequence'.")
        record = SequenceRecord.from_dict(entry)
        records.append(SequenceRecord(
            name=record.name.strip(),
            sequence="".join(record.sequence.split()).upper()
        ))

    logger.debug(f"Loaded {len(records)} record(s) from JSON")
    return records
