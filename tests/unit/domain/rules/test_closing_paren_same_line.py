import unittest

from layout_guard.domain.rules.closing_paren_same_line import ClosingParenSameLineRule
from layout_test_utils import fix_once, lint


class TestClosingParenSameLineRule(unittest.TestCase):
    def setUp(self) -> None:
        self.rule = ClosingParenSameLineRule()

    def test_call_arguments(self) -> None:
        code = "doWork(\n\tfirst,\n\tsecond\n);\n"
        (violation,) = lint(code, self.rule)
        self.assertEqual(violation.position.line, 4)
        self.assertEqual(fix_once(code, self.rule), "doWork(\n\tfirst,\n\tsecond);\n")

    def test_parameters(self) -> None:
        code = "function f(\n\ta: number,\n\tb: number\n) {}\n"
        self.assertEqual(
            fix_once(code, self.rule),
            "function f(\n\ta: number,\n\tb: number) {}\n",
        )

    def test_parenthesized_expression(self) -> None:
        code = "const total = (\n\ta + b\n);\n"
        self.assertEqual(fix_once(code, self.rule), "const total = (\n\ta + b);\n")

    def test_empty_argument_list_is_skipped(self) -> None:
        self.assertEqual(lint("doWork(\n);\n", self.rule), [])

    def test_single_line_call(self) -> None:
        self.assertEqual(lint("doWork(first, second);\n", self.rule), [])

    def test_trailing_comma_is_kept(self) -> None:
        code = "doWork(\n\tfirst,\n);\n"
        self.assertEqual(fix_once(code, self.rule), "doWork(\n\tfirst,);\n")

    def test_trailing_comment_blocks_the_fix(self) -> None:
        (violation,) = lint("doWork(\n\tfirst // last\n);\n", self.rule)
        self.assertIsNone(violation.fix)

    def test_fix_is_idempotent(self) -> None:
        code = "outer(\n\tinner(\n\t\tvalue\n\t)\n);\n"
        fixed = fix_once(code, self.rule)
        self.assertEqual(fixed, "outer(\n\tinner(\n\t\tvalue));\n")
        self.assertEqual(lint(fixed, self.rule), [])

    def test_for_of_header(self) -> None:
        code = "for (const item of items\n) {\n\tuse(item);\n}\n"
        (violation,) = lint(code, self.rule)
        self.assertEqual(violation.position.line, 2)
        self.assertEqual(fix_once(code, self.rule), "for (const item of items) {\n\tuse(item);\n}\n")

    def test_classic_for_header(self) -> None:
        code = "for (let i = 0;\n\ti < n;\n\ti++\n) {\n\tuse(i);\n}\n"
        self.assertEqual(
            fix_once(code, self.rule),
            "for (let i = 0;\n\ti < n;\n\ti++) {\n\tuse(i);\n}\n",
        )

    def test_single_line_for_header(self) -> None:
        self.assertEqual(lint("for (const key in table) {\n\tuse(key);\n}\n", self.rule), [])
