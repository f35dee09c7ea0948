# fasta_pipeline/core/fasta_parser.py

import logging
from typing import Iterable, List, Optional

from fasta_pipeline.models.sequence_record import SequenceRecord

logger = logging.getLogger(__name__)


def parse_fasta(content: str) -> List[SequenceRecord]:
    """
    Parses FASTA text into sequence records.

    Args:
        content (str): Full text of a FASTA file, lines separated by '\\n'.

    Returns:
        List of SequenceRecord, one per header line, in file order.
        Sequence lines are uppercased, stripped of any whitespace and
        joined without separators; lines before the first header are ignored.
    """
    records: List[SequenceRecord] = []
    name: Optional[str] = None
    chunks: List[str] = []

    for line in content.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue

        if trimmed.startswith(">"):
            if name is not None:
                records.append(SequenceRecord(name, "".join(chunks)))
            name = trimmed[1:].lstrip()
            chunks = []
        else:
            chunks.append("".join(trimmed.split()).upper())

    if name is not None:
        records.append(SequenceRecord(name, "".join(chunks)))

    logger.debug(f"Parsed {len(records)} FASTA record(s)")
    return records


def parse_fasta_files(contents: Iterable[str]) -> List[SequenceRecord]:
    """Parse several FASTA texts independently and concatenate the results in order."""
    records: List[SequenceRecord] = []
    for content in contents:
        records.extend(parse_fasta(content))
    return records
