"""Exceptions raised by the FASTA pipeline."""


class FastaPipelineError(Exception):
    """Base exception for the FASTA pipeline."""


class UnsupportedFormatError(FastaPipelineError, ValueError):
    """Raised when records are exported to a format with no exporter."""


class RecordFormatError(FastaPipelineError, ValueError):
    """Raised when serialized records cannot be loaded."""
