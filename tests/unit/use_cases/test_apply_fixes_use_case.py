import unittest
from unittest.mock import MagicMock

from layout_guard.domain.rules.catalog import RuleCatalog
from layout_guard.domain.rules.lambda_body_newline import LambdaBodyNewlineRule
from layout_guard.domain.services.rule_engine import StyleEngine
from layout_guard.use_cases.apply_fixes import ApplyFixesUseCase
from layout_test_utils import GATEWAY

NESTED_ON_OPERATOR_LINE = "const config = {\n\tname: 'x',\n};\n"


class TestApplyFixesUseCase(unittest.TestCase):
    def setUp(self) -> None:
        self.files = {
            "/src/dirty.ts": "const user = await repo.getById(id);\n",
            "/src/clean.ts": 'const name = "layout";\n',
        }
        self.filesystem = MagicMock()
        self.filesystem.glob_source_files.return_value = sorted(self.files)
        self.filesystem.read_text.side_effect = lambda path: self.files[path]
        self.telemetry = MagicMock()

    def _use_case(self, **overrides) -> ApplyFixesUseCase:
        kwargs = {
            "parser": GATEWAY,
            "engine": StyleEngine(RuleCatalog.create_rules()),
            "filesystem": self.filesystem,
            "telemetry": self.telemetry,
        }
        kwargs.update(overrides)
        return ApplyFixesUseCase(**kwargs)

    def test_fix_text_single_pass(self) -> None:
        result = self._use_case().fix_text("const user = await repo.getById(id);\n")
        self.assertEqual(result.text, "const user =\n\tawait repo.getById(id);\n")
        self.assertEqual(result.applied, 1)
        self.assertEqual(result.passes, 1)
        self.assertEqual(result.remaining, [])

    def test_fix_text_combines_fixes_from_several_rules(self) -> None:
        code = "const handler = (event) => dispatchTheEvent(event, context, options);\n"
        result = self._use_case().fix_text(code)
        self.assertEqual(
            result.text,
            "const handler =\n\t(event) =>\n\tdispatchTheEvent(event, context, options);\n",
        )
        self.assertEqual(result.applied, 2)
        self.assertEqual(result.remaining, [])

    def test_fix_text_reruns_until_stable(self) -> None:
        result = self._use_case().fix_text(NESTED_ON_OPERATOR_LINE)
        self.assertEqual(result.passes, 2)
        self.assertEqual(
            result.text,
            "const config =\n\t{\n\t\tname: 'x',\n\t};\n",
        )
        self.assertEqual(result.remaining, [])

    def test_fix_text_respects_pass_limit(self) -> None:
        result = self._use_case(max_passes=1).fix_text(NESTED_ON_OPERATOR_LINE)
        self.assertEqual(result.passes, 1)
        self.assertEqual([v.code for v in result.remaining], ["LG004", "LG004"])
        self.telemetry.warning.assert_called_once()

    def test_execute_writes_changed_files_with_backup(self) -> None:
        summary = self._use_case().execute("/src")
        self.filesystem.backup.assert_called_once_with("/src/dirty.ts", ".bak")
        self.filesystem.write_text.assert_called_once_with(
            "/src/dirty.ts", "const user =\n\tawait repo.getById(id);\n")
        self.assertEqual(summary.files_modified, 1)
        self.assertEqual(summary.fixes_applied, 1)
        self.assertEqual(summary.remaining, [])

    def test_execute_without_backups(self) -> None:
        self._use_case(create_backups=False).execute("/src")
        self.filesystem.backup.assert_not_called()
        self.filesystem.write_text.assert_called_once()

    def test_clean_files_are_not_written(self) -> None:
        self.filesystem.glob_source_files.return_value = ["/src/clean.ts"]
        summary = self._use_case().execute("/src")
        self.filesystem.write_text.assert_not_called()
        self.assertEqual(summary.files_modified, 0)

    def test_unfixable_violations_are_reported_as_remaining(self) -> None:
        self.files["/src/dirty.ts"] = (
            "run((value) => /* keep */ transformTheValue(value, options));\n")
        use_case = self._use_case(engine=StyleEngine([LambdaBodyNewlineRule()]))
        summary = use_case.execute("/src")
        self.assertEqual([v.code for v in summary.remaining], ["LG001"])
        self.filesystem.write_text.assert_not_called()
        self.telemetry.warning.assert_any_call("1 violation(s) need manual attention")

    def test_unreadable_file_is_skipped(self) -> None:
        self.filesystem.read_text.side_effect = PermissionError("denied")
        summary = self._use_case().execute("/src")
        self.assertEqual(summary.files_modified, 0)
        self.assertEqual(self.telemetry.warning.call_count, 2)
