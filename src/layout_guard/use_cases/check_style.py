"""Use Case: lint a file set and collect layout violations."""

from layout_guard.domain.constants import DEFAULT_EXCLUDES, DEFAULT_EXTENSIONS
from layout_guard.domain.entities import CheckResult, FileReport, Violation
from layout_guard.domain.protocols import (
    FileSystemProtocol,
    ParserGatewayProtocol,
    TelemetryPort,
)
from layout_guard.domain.services.rule_engine import StyleEngine


class CheckStyleUseCase:
    """Parse each source file, run the engine, and gather per-file reports."""

    def __init__(
        self,
        parser: ParserGatewayProtocol,
        engine: StyleEngine,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
        exclude: tuple[str, ...] = DEFAULT_EXCLUDES,
    ) -> None:
        self.parser = parser
        self.engine = engine
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.extensions = extensions
        self.exclude = exclude

    def lint_text(self, text: str, path: str = "") -> list[Violation]:
        return self.engine.lint(self.parser.parse(text, path))

    def check_file(self, path: str) -> FileReport:
        try:
            text = self.filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            self.telemetry.warning(f"Skipping {path}: {exc}")
            return FileReport(path=path, skipped_reason=str(exc))
        violations = self.lint_text(text, path)
        self.telemetry.debug(f"{path}: {len(violations)} violation(s)")
        return FileReport(path=path, violations=violations)

    def execute(self, target_path: str) -> CheckResult:
        files = self.filesystem.glob_source_files(target_path, self.extensions, self.exclude)
        self.telemetry.step(f"Checking {len(files)} file(s) in {target_path}")
        return CheckResult(files=[self.check_file(path) for path in files])
