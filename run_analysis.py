#!/usr/bin/env python3

import argparse
import logging
import os
import sys
from typing import List, Optional

from fasta_pipeline.config import ExportConfig
from fasta_pipeline.exceptions import UnsupportedFormatError
from fasta_pipeline.pipeline import run_pipeline
from fasta_pipeline.utils.exporters import EXPORTERS, exporter_for_path
from fasta_pipeline.utils.table_builders import build_sequence_stats_df


def setup_logging(level: int) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        return
    stderr_log_handler = logging.StreamHandler(sys.stderr)
    stderr_log_handler.setLevel(level)
    stderr_log_handler.setFormatter(logging.Formatter("{asctime} [{module}:{levelname}] {message}", style='{'))
    root.addHandler(stderr_log_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute per-sequence statistics for FASTA files.")
    parser.add_argument("files", nargs="+", help="FASTA files (.fasta, .fa), read in the order given")
    parser.add_argument("--output", help="Write the exported statistics to this path (.json or .csv)")
    parser.add_argument("--format", choices=sorted(EXPORTERS), help="Export format; defaults to the output extension")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation. Default: 2")
    parser.add_argument("--no-stats", action="store_true", help="Only write name and sequence to JSON")
    parser.add_argument(
        "-d", "--debug",
        help="Output detailed debugging messages",
        action="store_const", dest="log_level", const=logging.DEBUG, default=logging.WARNING
    )
    parser.add_argument(
        "-v", "--verbose",
        help="Output progress and other informative messages",
        action="store_const", dest="log_level", const=logging.INFO
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    for path in args.files:
        if not os.path.exists(path):
            print(f"[ERROR] FASTA file not found: {path}", file=sys.stderr)
            return 1

    try:
        config = ExportConfig(json_indent=args.indent, json_include_stats=not args.no_stats)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    fmt = args.format
    if args.output and not fmt:
        try:
            fmt = exporter_for_path(args.output).extension
        except UnsupportedFormatError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return 2

    contents = []
    for path in args.files:
        try:
            with open(path, encoding="utf-8") as f:
                contents.append(f.read())
        except (OSError, UnicodeDecodeError) as e:
            print(f"[ERROR] Could not read FASTA file {path}: {e}", file=sys.stderr)
            return 1

    result = run_pipeline(contents, fmt, config)

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as out:
            out.write(result["export"])
        logging.info(f"Wrote {len(result['records'])} record(s) to {args.output}")
        print(f"[✓] Output written to: {args.output}")
    elif result["export"] is not None:
        print(result["export"])
    else:
        print(build_sequence_stats_df(result["records"]).to_string(index=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
