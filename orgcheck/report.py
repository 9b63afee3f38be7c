"""Render salary and reporting-line results for the console or as JSON.

Table output goes through a rich Console; the ``json`` and ``summary``
formats return plain strings so they can also be written to a file.
"""

import json
from datetime import datetime

from rich.console import Console
from rich.table import Table

from orgcheck.compensation import ManagerSalaryIssue, SalaryAnalysisReport
from orgcheck.config import DEFAULT_CONFIG, AnalyzerConfig
from orgcheck.reporting_lines import ReportingLineAnalysisReport, ReportingLineIssue
from orgcheck.utils.types import ReportFormat

console = Console()


def _money(amount: float) -> str:
    return f"${amount:,.2f}"


def _salary_table(title: str, issues: tuple[ManagerSalaryIssue, ...], bound_label: str, gap_label: str) -> Table:
    table = Table(title=title)
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Salary", justify="right")
    table.add_column("Avg report salary", justify="right")
    table.add_column(bound_label, justify="right")
    table.add_column(gap_label, justify="right")

    for issue in issues:
        manager = issue.manager
        table.add_row(
            manager.employee_id,
            manager.full_name,
            _money(manager.salary),
            _money(issue.avg_subordinate_salary),
            _money(issue.expected_salary),
            _money(issue.difference),
        )
    return table


def render_salary_report(report: SalaryAnalysisReport, out: Console | None = None) -> None:
    out = out or console
    if report.underpaid:
        out.print(_salary_table(
            "Managers earning less than they should", report.underpaid, "Should earn at least", "Short by",
        ))
    else:
        out.print("[green]No managers earning less than they should.[/green]")

    if report.overpaid:
        out.print(_salary_table(
            "Managers earning more than they should", report.overpaid, "Should earn at most", "Over by",
        ))
    else:
        out.print("[green]No managers earning more than they should.[/green]")


def render_reporting_line_report(
    report: ReportingLineAnalysisReport,
    config: AnalyzerConfig = DEFAULT_CONFIG,
    out: Console | None = None,
) -> None:
    out = out or console
    if not report.has_issues:
        out.print("[green]No employees with reporting lines too long.[/green]")
        return

    table = Table(title=f"Employees with reporting lines too long (max {config.max_reporting_line_length} managers)")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Managers above", justify="right")
    table.add_column("Too long by", justify="right")
    for issue in report.issues:
        table.add_row(
            issue.employee.employee_id,
            issue.employee.full_name,
            str(issue.reporting_line_length),
            str(issue.excess),
        )
    out.print(table)


def _issue_counts(
    salary: SalaryAnalysisReport | None,
    lines: ReportingLineAnalysisReport | None,
) -> dict[str, int]:
    return {
        "underpaid": len(salary.underpaid) if salary else 0,
        "overpaid": len(salary.overpaid) if salary else 0,
        "reporting_lines": len(lines.issues) if lines else 0,
    }


def has_issues(
    salary: SalaryAnalysisReport | None,
    lines: ReportingLineAnalysisReport | None,
) -> bool:
    return bool((salary and salary.has_issues) or (lines and lines.has_issues))


def _salary_issue_dict(issue: ManagerSalaryIssue) -> dict:
    return {
        "id": issue.manager.employee_id,
        "name": issue.manager.full_name,
        "salary": issue.manager.salary,
        "avg_subordinate_salary": round(issue.avg_subordinate_salary, 2),
        "expected_salary": round(issue.expected_salary, 2),
        "difference": round(issue.difference, 2),
    }


def _line_issue_dict(issue: ReportingLineIssue) -> dict:
    return {
        "id": issue.employee.employee_id,
        "name": issue.employee.full_name,
        "reporting_line_length": issue.reporting_line_length,
        "excess": issue.excess,
    }


def to_json(
    salary: SalaryAnalysisReport | None,
    lines: ReportingLineAnalysisReport | None,
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> str:
    report = {
        "timestamp": datetime.now().isoformat(),
        "config": {
            "min_salary_ratio": config.min_salary_ratio,
            "max_salary_ratio": config.max_salary_ratio,
            "max_reporting_line_length": config.max_reporting_line_length,
        },
        "has_issues": has_issues(salary, lines),
        "counts": _issue_counts(salary, lines),
    }
    if salary is not None:
        report["underpaid_managers"] = [_salary_issue_dict(i) for i in salary.underpaid]
        report["overpaid_managers"] = [_salary_issue_dict(i) for i in salary.overpaid]
    if lines is not None:
        report["reporting_line_issues"] = [_line_issue_dict(i) for i in lines.issues]
    return json.dumps(report, indent=2)


def to_summary(
    salary: SalaryAnalysisReport | None,
    lines: ReportingLineAnalysisReport | None,
) -> str:
    counts = _issue_counts(salary, lines)
    status = "ISSUES" if has_issues(salary, lines) else "OK"
    return (
        f"{status}: {counts['underpaid']} underpaid, {counts['overpaid']} overpaid, "
        f"{counts['reporting_lines']} reporting lines too long"
    )


def render_summary(
    salary: SalaryAnalysisReport | None,
    lines: ReportingLineAnalysisReport | None,
    out: Console | None = None,
) -> None:
    out = out or console
    if has_issues(salary, lines):
        out.print("\n[bold yellow]Analysis complete. Please review the issues above.[/bold yellow]")
    else:
        out.print("\n[bold green]No issues found. Organizational structure looks good![/bold green]")


def build_report(
    salary: SalaryAnalysisReport | None,
    lines: ReportingLineAnalysisReport | None,
    config: AnalyzerConfig = DEFAULT_CONFIG,
    output_format: ReportFormat = "table",
    out: Console | None = None,
) -> str | None:
    """Render results in the requested format.

    ``table`` prints to the console and returns None; ``json`` and
    ``summary`` return the rendered text.
    """
    match output_format:
        case "json":
            return to_json(salary, lines, config)
        case "summary":
            return to_summary(salary, lines)
        case "table":
            if salary is not None:
                render_salary_report(salary, out)
            if lines is not None:
                render_reporting_line_report(lines, config, out)
            render_summary(salary, lines, out)
            return None
        case other:
            raise ValueError(f"Unsupported report format: {other}")
