from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from layout_guard.domain.entities import CheckResult, FixSummary
    from layout_guard.domain.rules import StyleRule
    from layout_guard.domain.syntax_tree import SyntaxTree


class ParserGatewayProtocol(Protocol):
    """Protocol for the host parser that turns source text into a SyntaxTree."""

    def parse(self, text: str, path: str = "") -> "SyntaxTree":
        """Parse text; the path's extension selects the grammar."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        ...

    def exists(self, path: str) -> bool:
        """Return True if path exists (file or directory)."""
        ...

    def glob_source_files(
        self,
        path: str,
        extensions: tuple[str, ...],
        exclude: tuple[str, ...] = (),
    ) -> list[str]:
        """Source files under path with a matching extension, minus excluded parts."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...

    def backup(self, path: str, suffix: str) -> str:
        """Copy path next to itself with suffix appended. Returns the backup path."""
        ...


class ReporterProtocol(Protocol):
    """Protocol for rendering check and fix results."""

    def report_check(self, result: "CheckResult") -> None: ...
    def report_fix(self, summary: "FixSummary") -> None: ...
    def report_rules(self, rules: "Sequence[StyleRule]") -> None: ...
