#!/usr/bin/env python3
"""
csv-to-txf command line

Commands:
- convert <csv-file>   CSV export → TXF file (default command)
- init <csv-file>      write a starter merchant-mapping config for an export
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from txf_converter import __version__
from txf_converter.controllers import (
    ConvertOptions,
    convert_file,
    dump_config,
    extract_unique_payees,
    generate_config_template,
    load_config,
    merge_config,
    parse_csv_file,
)
from txf_converter.data_model import ConversionOutcome, ConversionStatus, TxfConversionError
from txf_converter.utilities import (
    configure_logging,
    default_config_path,
    open_for_write,
    resolve_path,
)

log = logging.getLogger(__name__)

EXIT_CODES: Dict[ConversionStatus, int] = {
    ConversionStatus.OK: 0,
    ConversionStatus.CONFIG_INVALID: 1,
    ConversionStatus.ROW_INVALID: 1,
    ConversionStatus.CONFIG_UNAVAILABLE: 2,
    ConversionStatus.CONFIG_MALFORMED: 2,
    ConversionStatus.INPUT_UNREADABLE: 2,
    ConversionStatus.INPUT_INVALID: 2,
    ConversionStatus.OUTPUT_UNWRITABLE: 2,
    ConversionStatus.MERCHANT_UNMAPPED: 3,
}

_COMMANDS = ("convert", "init")


def exit_code_for(status: ConversionStatus) -> int:
    return EXIT_CODES[status]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="csv-to-txf",
        description="Convert transaction CSV exports to TXF files for tax software.",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = ap.add_subparsers(dest="command", required=True)

    cv = sub.add_parser("convert", help="Convert a CSV file to TXF format")
    cv.add_argument("csv_file", type=Path, help="Path to the CSV export")
    cv.add_argument("-c", "--config", type=Path, default=default_config_path(),
                    help="Path to merchant mappings YAML file")
    cv.add_argument("-o", "--output", type=Path,
                    help="Output TXF file path (default: CSV path with .txf suffix)")
    cv.add_argument("--tax-year", type=int, default=date.today().year,
                    help="Tax year for date validation (default: current year)")
    cv.add_argument("--category", help="Only convert rows whose Category equals this value")
    cv.add_argument("--dry-run", action="store_true", help="Validate without writing output")
    cv.add_argument("-v", "--verbose", action="store_true", help="Show detailed processing info")
    cv.add_argument("-q", "--quiet", action="store_true",
                    help="Suppress warnings, show errors only")
    cv.add_argument("--log-file", type=Path, help="Also write a debug log to this file")

    it = sub.add_parser("init", help="Generate a config template from a CSV file")
    it.add_argument("csv_file", type=Path, help="Path to the CSV export")
    it.add_argument("-o", "--output", type=Path, help="Output YAML file path (default: stdout)")
    it.add_argument("--merge", action="store_true", help="Merge with existing config file")
    it.add_argument("-c", "--config", type=Path, default=default_config_path(),
                    help="Path to existing config for --merge")
    it.add_argument("--log-file", type=Path, help="Also write a debug log to this file")
    return ap


def _with_default_command(argv: List[str]) -> List[str]:
    if argv and argv[0] not in _COMMANDS and argv[0] not in ("-h", "--help", "--version"):
        return ["convert", *argv]
    return argv


def print_outcome(outcome: ConversionOutcome, *, dry_run: bool, verbose: bool, quiet: bool) -> None:
    if not outcome.succeeded:
        for error in outcome.errors:
            print(error, file=sys.stderr)
        return

    if outcome.transactions_processed == 0:
        if not quiet:
            print("No transactions to process.")
        return

    if not quiet:
        print("")
        print(f"{outcome.transactions_processed} transactions processed")
        print(f"Total: ${abs(outcome.total_amount):,.2f}")
        print(f"{outcome.unique_organizations} unique organizations")
        if outcome.warnings:
            print(f"{len(outcome.warnings)} warning(s)")
            for warning in outcome.warnings:
                print(f"  {warning}")
        print("")
        if dry_run:
            print("[Dry run - no file written]")
        else:
            print(f"Output written to: {outcome.output_path}")

    if verbose and outcome.txf_content:
        print("")
        print("Generated TXF:")
        print(outcome.txf_content.replace("\r\n", "\n"), end="")


def run_convert(args: argparse.Namespace) -> int:
    options = ConvertOptions(
        tax_year=args.tax_year,
        output_path=args.output,
        category=args.category,
        dry_run=args.dry_run,
    )
    outcome = convert_file(args.csv_file, args.config, options)
    log.debug("Outcome: %s", outcome.to_dict())
    print_outcome(outcome, dry_run=args.dry_run, verbose=args.verbose, quiet=args.quiet)
    return exit_code_for(outcome.status)


def run_init(args: argparse.Namespace) -> int:
    try:
        rows = parse_csv_file(resolve_path(args.csv_file))
    except TxfConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return exit_code_for(e.status)

    if not rows:
        print("No transactions found in CSV file.")
        return 0

    merchants = extract_unique_payees(rows)
    output = None
    if args.merge:
        try:
            existing = load_config(resolve_path(args.config))
        except TxfConversionError as e:
            # Nothing usable to merge into: fall back to a fresh template.
            log.warning("Not merging: %s", e)
        else:
            output = dump_config(merge_config(existing, merchants))
    if output is None:
        output = generate_config_template(merchants)

    if args.output:
        out_path = resolve_path(args.output)
        try:
            with open_for_write(out_path, newline=None) as f:
                f.write(output)
        except OSError as e:
            print(f"Error: failed to write {out_path}: {e}", file=sys.stderr)
            return exit_code_for(ConversionStatus.OUTPUT_UNWRITABLE)
        print(f"Config template written to: {out_path}")
        print(f"Found {len(merchants)} unique merchants.")
    else:
        print(output, end="")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(
        _with_default_command(list(sys.argv[1:] if argv is None else argv))
    )
    configure_logging(
        verbose=getattr(args, "verbose", False), log_file=args.log_file
    )
    if args.command == "init":
        return run_init(args)
    return run_convert(args)


if __name__ == "__main__":
    sys.exit(main())
