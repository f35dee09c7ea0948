# fasta_pipeline/pipeline.py

import logging
from typing import Any, Dict, Iterable, Optional

from fasta_pipeline.config import ExportConfig
from fasta_pipeline.core.fasta_parser import parse_fasta_files
from fasta_pipeline.utils.exporters import export_records
from fasta_pipeline.utils.table_builders import summarize_lengths

logger = logging.getLogger(__name__)


def run_pipeline(
    contents: Iterable[str],
    fmt: Optional[str] = None,
    config: Optional[ExportConfig] = None
) -> Dict[str, Any]:
    records = parse_fasta_files(contents)
    logger.info(f"Loaded {len(records)} sequence(s)")

    # export first so an unsupported format fails before anything is returned
    exported = export_records(records, fmt, config) if fmt else None

    return {
        "records": records,
        "summary": summarize_lengths(records),
        "export": exported,
    }
