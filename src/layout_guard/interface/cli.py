"""CLI entry points for layout-guard - Thin Controller using Typer."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from layout_guard.domain.config import ConfigurationLoader
from layout_guard.domain.constants import LAYOUT_GUARD_BANNER, LAYOUT_GUARD_PREFIX
from layout_guard.domain.protocols import (
    FileSystemProtocol,
    ParserGatewayProtocol,
    ReporterProtocol,
    TelemetryPort,
)
from layout_guard.domain.rules.catalog import RuleCatalog
from layout_guard.domain.services.rule_engine import StyleEngine
from layout_guard.use_cases.apply_fixes import ApplyFixesUseCase
from layout_guard.use_cases.check_style import CheckStyleUseCase


class OutputFormat(str, Enum):
    TERMINAL = "terminal"
    JSON = "json"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    parser: ParserGatewayProtocol
    filesystem: FileSystemProtocol
    terminal_reporter: ReporterProtocol
    json_reporter: ReporterProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def build_engine(config: ConfigurationLoader, only: Optional[list[str]] = None) -> StyleEngine:
        """Engine with every configured rule, optionally narrowed to `only`."""
        rules = RuleCatalog.create_rules(
            rule_options=config.rule_options,
            disabled=config.disabled_rules,
            only=only or (),
        )
        return StyleEngine(rules, indent_unit=config.indent_unit)

    @staticmethod
    def select_reporter(deps: CLIDependencies, output: OutputFormat) -> ReporterProtocol:
        return deps.json_reporter if output is OutputFormat.JSON else deps.terminal_reporter

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name=LAYOUT_GUARD_PREFIX,
            help=f"{LAYOUT_GUARD_BANNER}\nContinuation-line and indentation rules with auto-fix.",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Path = typer.Argument(Path("."), help="File or directory to check"),  # noqa: B008
            output: OutputFormat = typer.Option(
                OutputFormat.TERMINAL, "--format", "-f", help="Output format"),
            rule: Optional[list[str]] = typer.Option(
                None, "--rule", "-r", help="Only run this rule (code or symbol); repeatable"),
        ) -> None:
            """Report layout violations. Exits 1 when any are found."""
            if output is OutputFormat.TERMINAL:
                deps.telemetry.handshake()
            use_case = CheckStyleUseCase(
                parser=deps.parser,
                engine=CLIAppFactory.build_engine(deps.config_loader, rule),
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                extensions=deps.config_loader.extensions,
                exclude=deps.config_loader.exclude,
            )
            result = use_case.execute(str(path))
            CLIAppFactory.select_reporter(deps, output).report_check(result)
            if result.has_violations():
                raise typer.Exit(code=1)

        @app.command()
        def fix(
            path: Path = typer.Argument(Path("."), help="File or directory to fix"),  # noqa: B008
            no_backup: bool = typer.Option(
                False, "--no-backup", help="Do not write .bak copies before modifying files"),
            max_passes: Optional[int] = typer.Option(
                None, "--max-passes", min=1, help="Upper bound on lint/fix passes per file"),
            output: OutputFormat = typer.Option(
                OutputFormat.TERMINAL, "--format", "-f", help="Output format"),
            rule: Optional[list[str]] = typer.Option(
                None, "--rule", "-r", help="Only fix this rule (code or symbol); repeatable"),
        ) -> None:
            """Apply auto-fixes until the files are stable. Exits 1 when violations remain."""
            if output is OutputFormat.TERMINAL:
                deps.telemetry.handshake()
            use_case = ApplyFixesUseCase(
                parser=deps.parser,
                engine=CLIAppFactory.build_engine(deps.config_loader, rule),
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
                extensions=deps.config_loader.extensions,
                exclude=deps.config_loader.exclude,
                max_passes=max_passes or deps.config_loader.max_fix_passes,
                create_backups=not no_backup,
            )
            summary = use_case.execute(str(path))
            CLIAppFactory.select_reporter(deps, output).report_fix(summary)
            if summary.remaining:
                raise typer.Exit(code=1)

        @app.command()
        def rules(
            output: OutputFormat = typer.Option(
                OutputFormat.TERMINAL, "--format", "-f", help="Output format"),
        ) -> None:
            """List every rule, disabled ones included, with its effective options."""
            available = RuleCatalog.create_rules(rule_options=deps.config_loader.rule_options)
            CLIAppFactory.select_reporter(deps, output).report_rules(available)

        return app
