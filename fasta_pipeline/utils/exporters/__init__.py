# fasta_pipeline/utils/exporters/__init__.py

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from fasta_pipeline.config import ExportConfig
from fasta_pipeline.exceptions import UnsupportedFormatError
from fasta_pipeline.models.sequence_record import SequenceRecord

from .base import ExporterBase
from .csv_exporter import CsvExporter
from .json_exporter import JsonExporter

logger = logging.getLogger(__name__)

EXPORTERS = {
    "json": JsonExporter,
    "csv": CsvExporter,
}


def get_exporter(name: str, **kwargs) -> ExporterBase:
    exporter_cls = EXPORTERS.get(name.lower().lstrip("."))
    if not exporter_cls:
        raise UnsupportedFormatError(f"Unknown export format: {name!r}")
    return exporter_cls(**kwargs)


def exporter_for_path(path: Union[str, Path], **kwargs) -> ExporterBase:
    """Pick an exporter from the output file's extension (.json or .csv)."""
    suffix = Path(path).suffix
    if not suffix:
        raise UnsupportedFormatError(f"Cannot infer export format from {str(path)!r}: no extension")
    return get_exporter(suffix, **kwargs)


def export_records(
    records: Sequence[SequenceRecord],
    fmt: str,
    config: Optional[ExportConfig] = None
) -> str:
    exporter = get_exporter(fmt, config=config)
    logger.debug(f"Exporting {len(records)} record(s) with {type(exporter).__name__}")
    return exporter.export(records)
