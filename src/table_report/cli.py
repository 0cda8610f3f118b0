"""Command-line interface for rendering table reports."""

import argparse
import csv
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
from faker import Faker

from .config import ReportConfig, load_config
from .document import TableReportGenerator
from .errors import ConfigurationError, ReportError
from .sample_data import EXPENSE_COLUMNS, generate_expense_rows, sum_amounts
from .table_model import Column


def read_csv_rows(path: Path) -> Tuple[List[str], List[List[Optional[str]]]]:
    """Read column names from the first line and rows from the rest."""
    try:
        with open(path, "r", newline="") as f:
            reader = csv.reader(f)
            try:
                header = next(reader)
            except StopIteration:
                raise ConfigurationError(f"{path} is empty") from None
            rows = [[cell if cell != "" else None for cell in row] for row in reader if row]
    except OSError as exc:
        raise ConfigurationError(f"Cannot read {path}: {exc}") from exc
    return header, rows


def parse_column_widths(text: str, names: List[str]) -> List[Column]:
    """Parse a comma-separated width list matching the column names."""
    try:
        widths = [float(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise ConfigurationError(f"Column widths must be numbers, got {text!r}") from None
    if len(widths) != len(names):
        raise ConfigurationError(
            f"Got {len(widths)} column widths for {len(names)} columns"
        )
    return [Column(name=name, width=width) for name, width in zip(names, widths)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a table of rows into a paginated PDF report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="CSV file whose first line holds the column names",
    )
    parser.add_argument(
        "--demo",
        type=int,
        metavar="N",
        help="Render N generated sample expense rows instead of a CSV file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for --demo rows",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output PDF path (default: <out_dir>/report.pdf)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--landscape",
        action="store_true",
        help="Render pages in landscape orientation (overrides config)",
    )
    parser.add_argument(
        "--from",
        dest="period_start",
        type=date.fromisoformat,
        default=date(2025, 1, 1),
        help="Start of the reported period (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--to",
        dest="period_end",
        type=date.fromisoformat,
        default=date(2025, 12, 31),
        help="End of the reported period (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--total",
        help="Summary total (default: sum of the last column)",
    )
    parser.add_argument(
        "--column-widths",
        help="Comma-separated column widths in points (default: equal split)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(args: argparse.Namespace) -> Path:
    """Render the report described by parsed arguments."""
    config: ReportConfig = load_config(args.config)
    if args.landscape:
        config.orientation = "landscape"

    if args.demo is not None:
        rng = np.random.default_rng(args.seed)
        fake = Faker()
        fake.seed_instance(args.seed)
        names = list(EXPENSE_COLUMNS)
        rows = generate_expense_rows(
            args.demo, rng, fake,
            period_start=args.period_start,
            period_end=args.period_end,
        )
    elif args.input is not None:
        names, rows = read_csv_rows(args.input)
    else:
        raise ConfigurationError("Provide an input CSV file or --demo N")

    if args.column_widths:
        columns = parse_column_widths(args.column_widths, names)
    else:
        columns = names

    total = args.total if args.total is not None else f"{sum_amounts(rows):,.2f}"

    generator = TableReportGenerator(config)
    return generator.generate(
        columns, rows, args.period_start, args.period_end, total,
        output_path=args.output,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        path = run(args)
    except ReportError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Report written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
