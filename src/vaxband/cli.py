"""Command-line interface for vaxband."""

from __future__ import annotations

import argparse
import sys
from datetime import date

from vaxband.config.settings import Settings
from vaxband.console.logger import EvaluationConsole
from vaxband.orchestrator.evaluator import Evaluator
from vaxband.storage.table import load_reference_table


console = EvaluationConsole()


def _load_settings(table_path: str | None, verbose: bool = False) -> Settings:
    settings = Settings()
    if table_path:
        settings.table.path = table_path
    console.verbose = verbose
    console.setup_logging(settings.log_level)
    return settings


def check_birth_date(
    birth_date: str,
    today: date | None = None,
    table_path: str | None = None,
    as_json: bool = False,
    verbose: bool = False,
) -> None:
    """Evaluate a birth date and print the results."""
    settings = _load_settings(table_path, verbose)
    evaluation = Evaluator(settings).evaluate(birth_date, today)
    if as_json:
        console.print_json(evaluation)
    else:
        console.print_evaluation(evaluation)


def show_bands(table_path: str | None = None) -> None:
    """Show the age bands and their column headers."""
    settings = _load_settings(table_path)
    console.print_bands(settings.table.columns.as_mapping())


def show_table(table_path: str | None = None) -> None:
    """Show status counts per band for the reference table."""
    settings = _load_settings(table_path)
    console.print_table_stats(load_reference_table(settings=settings))


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="vaxband", description="Age-based vaccine and lab checker"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    chk = subparsers.add_parser("check", help="Evaluate a date of birth")
    chk.add_argument("birth_date", help="Date of birth (YYYY-MM-DD)")
    chk.add_argument("--today", help="Reference date (YYYY-MM-DD), defaults to today")
    chk.add_argument("--table", help="Reference table JSON path")
    chk.add_argument("--json", action="store_true", help="Print the evaluation as JSON")
    chk.add_argument("--verbose", "-v", action="store_true", help="Show log output")

    bands_cmd = subparsers.add_parser("bands", help="List age bands")
    bands_cmd.add_argument("--table", help="Reference table JSON path")

    table_cmd = subparsers.add_parser("table", help="Show reference table statistics")
    table_cmd.add_argument("--table", help="Reference table JSON path")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "check":
            today = None
            if args.today:
                try:
                    today = date.fromisoformat(args.today)
                except ValueError:
                    console.print_error(f"Invalid reference date: {args.today}")
                    sys.exit(1)
            check_birth_date(args.birth_date, today, args.table, args.json, args.verbose)
        elif args.command == "bands":
            show_bands(args.table)
        elif args.command == "table":
            show_table(args.table)
    except KeyboardInterrupt:
        console.console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
