"""Console telemetry: rich output mirrored to a logging logger."""

import logging

from rich.console import Console
from rich.markup import escape

from layout_guard.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """
    Implements TelemetryPort for the CLI.

    Messages go to stderr so machine-readable reports on stdout stay clean.
    """

    def __init__(self, name: str, color: str, welcome: str, verbose: bool = False) -> None:
        self.name = name
        self.color = color
        self.welcome = welcome
        self.verbose = verbose
        self.console = Console(stderr=True)
        self.logger = logging.getLogger(name.lower())

    def handshake(self) -> None:
        self.console.print(f"[bold {self.color}]{escape(self.welcome)}[/bold {self.color}]")
        self.logger.info(self.welcome)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]{self.name}[/{self.color}] {escape(message)}")
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]warning:[/yellow] {escape(message)}")
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]error:[/bold red] {escape(message)}")
        self.logger.error(message)

    def debug(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"[dim]{escape(message)}[/dim]")
        self.logger.debug(message)
