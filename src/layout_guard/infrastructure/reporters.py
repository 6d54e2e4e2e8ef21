"""Terminal and JSON reporters for check and fix results."""

import json
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from layout_guard.domain.constants import LAYOUT_GUARD_BANNER
from layout_guard.domain.entities import CheckResult, FixSummary, Violation
from layout_guard.domain.protocols import ReporterProtocol
from layout_guard.domain.rules import StyleRule


class TerminalStyleReporter(ReporterProtocol):
    """Terminal reporter using rich tables."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def report_check(self, result: CheckResult) -> None:
        violations = result.violations
        if not violations:
            self.console.print("\n✅ No layout violations detected.")
            return
        table = Table(title=LAYOUT_GUARD_BANNER, header_style="bold #F9A602")
        table.add_column("Location", style="#00EEFF")
        table.add_column("Rule", style="#C41E3A")
        table.add_column("Fix?")
        table.add_column("Message")
        for violation in violations:
            table.add_row(
                escape(violation.location),
                f"{violation.code} {violation.symbol}",
                "✅ Auto" if violation.fixable else "⚠️ Manual",
                escape(violation.message),
            )
        self.console.print(table)
        self._print_summary(violations)

    def _print_summary(self, violations: Sequence[Violation]) -> None:
        summary = Table(title="Summary by rule", header_style="bold #007BFF")
        summary.add_column("Rule", style="#C41E3A")
        summary.add_column("Count", style="bold #007BFF", justify="right")
        summary.add_column("Fixable", justify="right")
        counts: dict[tuple[str, str], list[int]] = {}
        for violation in violations:
            row = counts.setdefault((violation.code, violation.symbol), [0, 0])
            row[0] += 1
            row[1] += int(violation.fixable)
        for (code, symbol), (count, fixable) in sorted(counts.items()):
            summary.add_row(f"{code} {symbol}", str(count), str(fixable))
        self.console.print(summary)
        self.console.print(
            f"Found {len(violations)} violation(s). Run 'layout-guard fix' to apply auto-fixes.")

    def report_fix(self, summary: FixSummary) -> None:
        self.console.print(
            f"\n🛠️ Files repaired: {summary.files_modified}, fixes applied: {summary.fixes_applied}")
        if summary.remaining:
            self.report_check(CheckResult.from_violations(summary.remaining))
        else:
            self.console.print("✅ No layout violations remain.")

    def report_rules(self, rules: Sequence[StyleRule]) -> None:
        table = Table(title="Available rules", header_style="bold #F9A602")
        table.add_column("Code", style="#C41E3A")
        table.add_column("Symbol", style="#00EEFF")
        table.add_column("Fix?")
        table.add_column("Options")
        table.add_column("Description")
        for rule in rules:
            options = ", ".join(
                f"{name}={value!r}" for name, value in rule.option_values().items())
            table.add_row(
                rule.code,
                rule.symbol,
                "✅ Auto" if rule.fixable else "⚠️ Manual",
                options or "-",
                rule.description,
            )
        self.console.print(table)


class JsonStyleReporter(ReporterProtocol):
    """Writes machine-readable JSON to stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _emit(self, payload: object) -> None:
        self.console.out(json.dumps(payload, indent=2), highlight=False)

    def report_check(self, result: CheckResult) -> None:
        self._emit([v.to_dict() for v in result.violations])

    def report_fix(self, summary: FixSummary) -> None:
        self._emit({
            "files_modified": summary.files_modified,
            "fixes_applied": summary.fixes_applied,
            "remaining": [v.to_dict() for v in summary.remaining],
        })

    def report_rules(self, rules: Sequence[StyleRule]) -> None:
        self._emit([
            {
                "code": rule.code,
                "symbol": rule.symbol,
                "description": rule.description,
                "fixable": rule.fixable,
                "options": rule.option_values(),
            }
            for rule in rules
        ])
