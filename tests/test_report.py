from __future__ import annotations

import json

import pytest
from rich.console import Console

from orgcheck.compensation import analyze_salaries
from orgcheck.org_structure import OrgIndex
from orgcheck.report import build_report, to_summary
from orgcheck.reporting_lines import analyze_reporting_lines
from tests.conftest import make_chain, make_employee


@pytest.fixture
def recording_console() -> Console:
    return Console(record=True, width=200, color_system=None)


def _text(console: Console) -> str:
    # table titles wrap to the table width
    return " ".join(console.export_text().split())


@pytest.fixture
def flagged_org() -> OrgIndex:
    employees = make_chain(5) + [
        make_employee("m", 45_000, "1", "Under"),
        make_employee("d1", 50_000, "m"),
        make_employee("d2", 50_000, "m"),
    ]
    return OrgIndex.from_employees(employees)


def test_table_lists_issues(flagged_org, recording_console):
    salary = analyze_salaries(flagged_org)
    lines = analyze_reporting_lines(flagged_org)

    assert build_report(salary, lines, out=recording_console) is None

    text = _text(recording_console)
    assert "Managers earning less than they should" in text
    assert "Under Doe" in text
    assert "$15,000.00" in text
    assert "Employees with reporting lines too long (max 4 managers)" in text
    assert "Please review the issues above" in text


def test_table_without_issues(recording_console):
    index = OrgIndex.from_employees([make_employee("1", 70_000), make_employee("2", 50_000, "1")])

    build_report(analyze_salaries(index), analyze_reporting_lines(index), out=recording_console)

    text = _text(recording_console)
    assert "No managers earning less than they should." in text
    assert "No managers earning more than they should." in text
    assert "No employees with reporting lines too long." in text
    assert "No issues found" in text


def test_table_skips_analyses_not_run(flagged_org, recording_console):
    build_report(None, analyze_reporting_lines(flagged_org), out=recording_console)

    text = _text(recording_console)
    assert "earning less" not in text
    assert "reporting lines too long" in text


def test_json_report(flagged_org):
    salary = analyze_salaries(flagged_org)
    lines = analyze_reporting_lines(flagged_org)

    data = json.loads(build_report(salary, lines, output_format="json"))

    assert data["has_issues"] is True
    assert data["config"]["max_reporting_line_length"] == 4
    under = {i["id"]: i for i in data["underpaid_managers"]}
    assert under["m"]["difference"] == 15_000.0
    assert under["m"]["avg_subordinate_salary"] == 50_000.0
    assert [i["id"] for i in data["reporting_line_issues"]] == ["6"]
    assert data["reporting_line_issues"][0]["excess"] == 1


def test_json_report_omits_analyses_not_run(flagged_org):
    data = json.loads(build_report(analyze_salaries(flagged_org), None, output_format="json"))

    assert "reporting_line_issues" not in data
    assert data["counts"]["reporting_lines"] == 0


def test_summary():
    index = OrgIndex.from_employees(make_chain(5))

    assert to_summary(None, analyze_reporting_lines(index)) == (
        "ISSUES: 0 underpaid, 0 overpaid, 1 reporting lines too long"
    )
    assert to_summary(None, None).startswith("OK:")


def test_unknown_format():
    with pytest.raises(ValueError, match="Unsupported report format"):
        build_report(None, None, output_format="xml")
