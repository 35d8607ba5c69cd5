# src/actioncheck/cli/report.py

"""
Rich rendering of a RunSummary for the terminal.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from actioncheck.runner import CaseReport, RunSummary


def _status_text(report: CaseReport) -> Text:
    if report.error is not None:
        return Text("ERROR", style="bold magenta")
    if report.passed:
        return Text("PASS", style="bold green")
    return Text("FAIL", style="bold red")


def render_summary(summary: RunSummary, console: Console) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Result")
    table.add_column("Action")
    table.add_column("Target")
    table.add_column("Description")
    table.add_column("Time", justify="right")

    for report in summary.reports:
        test_case = report.test_case
        table.add_row(
            _status_text(report),
            test_case.action.value,
            Text(test_case.target),
            Text(test_case.description),
            f"{report.duration * 1000:.0f}ms",
        )
    console.print(table)

    for report in summary.reports:
        problems = report.problems
        if not problems:
            continue
        console.print(Text(report.test_case.description, style="bold"))
        for problem in problems:
            console.print(Text(f"  - {problem}"))

    console.print(
        f"{summary.passed} passed, {summary.failed} failed, "
        f"{summary.errored} errored, {summary.skipped} skipped"
    )

# ⚙️🛠️
