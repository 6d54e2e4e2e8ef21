"""Use Case: Apply layout fixes to source files."""

from layout_guard.domain.constants import (
    BACKUP_SUFFIX,
    DEFAULT_EXCLUDES,
    DEFAULT_EXTENSIONS,
    DEFAULT_MAX_FIX_PASSES,
)
from layout_guard.domain.entities import FixSummary, TextFixResult, Violation
from layout_guard.domain.protocols import (
    FileSystemProtocol,
    ParserGatewayProtocol,
    TelemetryPort,
)
from layout_guard.domain.services.fix_applier import FixApplier
from layout_guard.domain.services.rule_engine import StyleEngine


class ApplyFixesUseCase:
    """
    Lint, apply non-overlapping fixes, and re-lint until stable.

    Each pass re-parses the rewritten text, so ranges never go stale. The loop
    stops when a pass applies nothing or after max_passes passes.
    """

    def __init__(
        self,
        parser: ParserGatewayProtocol,
        engine: StyleEngine,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
        exclude: tuple[str, ...] = DEFAULT_EXCLUDES,
        max_passes: int = DEFAULT_MAX_FIX_PASSES,
        create_backups: bool = True,
    ) -> None:
        self.parser = parser
        self.engine = engine
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.extensions = extensions
        self.exclude = exclude
        self.max_passes = max(1, max_passes)
        self.create_backups = create_backups

    def _lint(self, text: str, path: str) -> list[Violation]:
        return self.engine.lint(self.parser.parse(text, path))

    def fix_text(self, text: str, path: str = "") -> TextFixResult:
        current = text
        applied_total = 0
        passes = 0
        while passes < self.max_passes:
            violations = self._lint(current, path)
            outcome = FixApplier.apply_violations(current, violations)
            if outcome.applied == 0 or outcome.text == current:
                return TextFixResult(current, applied_total, passes, violations)
            passes += 1
            applied_total += outcome.applied
            current = outcome.text
        remaining = self._lint(current, path)
        if any(v.fixable for v in remaining):
            self.telemetry.warning(
                f"{path or '<text>'}: fixes did not converge after {self.max_passes} pass(es)")
        return TextFixResult(current, applied_total, passes, remaining)

    def _execute_one_file(self, path: str) -> TextFixResult | None:
        try:
            original = self.filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            self.telemetry.warning(f"Skipping {path}: {exc}")
            return None
        result = self.fix_text(original, path)
        if result.text == original:
            return result
        if self.create_backups:
            self.filesystem.backup(path, BACKUP_SUFFIX)
        self.filesystem.write_text(path, result.text)
        self.telemetry.step(
            f"Repaired {path}: {result.applied} fix(es) in {result.passes} pass(es)")
        return result

    def execute(self, target_path: str) -> FixSummary:
        """Apply fixes to all files in target path."""
        self.telemetry.step(f"Starting fix run on {target_path}")
        files = self.filesystem.glob_source_files(target_path, self.extensions, self.exclude)
        modified = 0
        applied = 0
        remaining: list[Violation] = []
        for path in files:
            result = self._execute_one_file(path)
            if result is None:
                continue
            if result.applied:
                modified += 1
                applied += result.applied
            remaining.extend(result.remaining)
        self.telemetry.step(f"Fix run complete. Files repaired: {modified}")
        if remaining:
            self.telemetry.warning(f"{len(remaining)} violation(s) need manual attention")
        return FixSummary(files_modified=modified, fixes_applied=applied, remaining=remaining)
