"""Command-line runner: load employees, run the analyses, render the report."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from orgcheck.compensation import SalaryAnalysisReport, analyze_salaries
from orgcheck.config import AnalyzerConfig, load_analyzer_config
from orgcheck.ingest import ingest_employee_records
from orgcheck.models import Employee
from orgcheck.org_structure import OrgIndex
from orgcheck.report import build_report
from orgcheck.reporting_lines import ReportingLineAnalysisReport, analyze_reporting_lines
from orgcheck.transform import load_employees, normalize_employee_records
from orgcheck.utils.io import write_output
from orgcheck.utils.types import AnalysisName, ValidationOutcome
from orgcheck.utils.validators import validate_referential_integrity, validate_unique

type AnalysisResult = tuple[SalaryAnalysisReport | None, ReportingLineAnalysisReport | None]

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def run_analysis(
    employees: list[Employee],
    config: AnalyzerConfig,
    analysis: AnalysisName = AnalysisName.ALL,
) -> AnalysisResult:
    """Build the index once and run the selected analyses over it."""
    index = OrgIndex.from_employees(employees)
    salary = lines = None
    match analysis:
        case AnalysisName.SALARIES:
            salary = analyze_salaries(index, config)
        case AnalysisName.REPORTING_LINES:
            lines = analyze_reporting_lines(index, config)
        case AnalysisName.ALL:
            salary = analyze_salaries(index, config)
            lines = analyze_reporting_lines(index, config)
    return salary, lines


def validate_records(path: Path) -> list[tuple[str, ValidationOutcome]]:
    """Run record-level and organizational checks on an employee file."""
    try:
        records = normalize_employee_records(ingest_employee_records(path))
    except (FileNotFoundError, ValueError) as exc:
        return [("records", {"valid": False, "status": "error", "errors": [str(exc)]})]

    roots = records[records["manager_id"].isna()]
    match len(roots):
        case 1:
            root_check = {"valid": True, "status": "ok", "errors": []}
        case n:
            root_check = {"valid": False, "status": "error", "errors": [f"Expected exactly one CEO, found {n}"]}

    return [
        ("records", {"valid": True, "status": "ok", "errors": []}),
        ("unique ids", validate_unique(records, ["employee_id"])),
        ("manager references", validate_referential_integrity(
            records, records, "manager_id", "employee_id",
        )),
        ("single CEO", root_check),
    ]


def _print_validation(results: list[tuple[str, ValidationOutcome]]) -> None:
    table = Table(title="Validation Results")
    table.add_column("Check")
    table.add_column("Valid")
    table.add_column("Details")

    for name, outcome in results:
        status = "[green]✓[/green]" if outcome["valid"] else "[red]✗[/red]"
        detail = "; ".join(outcome["errors"]) or "OK"
        table.add_row(name, status, detail)

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orgcheck",
        description="Check manager salaries and reporting-line lengths in an employee CSV",
    )
    parser.add_argument("csv_path", type=Path, help="Employee CSV (Id,firstName,lastName,salary,managerId)")
    parser.add_argument("--config", type=Path, help="TOML or YAML file with analyzer settings")
    parser.add_argument(
        "--analysis",
        choices=[a.value for a in AnalysisName],
        default=AnalysisName.ALL.value,
        help="Which analysis to run",
    )
    parser.add_argument("--format", dest="output_format", choices=["table", "json", "summary"], default="table")
    parser.add_argument("--output", type=Path, help="Write json/summary output to this file")
    parser.add_argument("--validate", action="store_true", help="Only validate the input, don't analyze")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )

    if args.validate:
        results = validate_records(args.csv_path)
        _print_validation(results)
        return 0 if all(outcome["valid"] for _, outcome in results) else 1

    try:
        config = load_analyzer_config(args.config)
        employees = load_employees(args.csv_path)
    except FileNotFoundError as exc:
        err_console.print(f"[red]Error reading file: {escape(str(exc))}[/red]")
        return 1
    except ValueError as exc:
        err_console.print(f"[red]Error parsing input: {escape(str(exc))}[/red]")
        return 1

    if not employees:
        console.print("No employees found in the file.")
        return 0

    if args.output_format == "table":
        console.print(f"[bold]Analyzing organizational structure for {len(employees)} employees...[/bold]\n")

    salary, lines = run_analysis(employees, config, AnalysisName(args.analysis))
    rendered = build_report(salary, lines, config, args.output_format, out=console)

    if rendered is not None:
        if args.output:
            write_output(rendered, args.output)
        else:
            console.print(rendered, markup=False, highlight=False, emoji=False, soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
