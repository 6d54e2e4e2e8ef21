import unittest
from collections.abc import Mapping
from typing import ClassVar

from layout_guard.domain.entities import NodeKind, SyntaxNode
from layout_guard.domain.rules import Handler, OptionSpec, RuleContext, StyleRule
from layout_guard.domain.rules.assignment_newline import AssignmentNewlineRule
from layout_guard.domain.rules.operator_continuation_indent import (
    OperatorContinuationIndentRule,
)
from layout_guard.domain.services.rule_engine import StyleEngine
from layout_test_utils import parse


class RecordingRule(StyleRule):
    """Reports every literal it sees, so dispatch order is observable."""

    code: str = "XX001"
    symbol: str = "recording"
    description: str = "records literals"
    fixable: bool = False
    options_schema: ClassVar[Mapping[str, OptionSpec]] = {}

    def __init__(self) -> None:
        self.seen: list[str] = []
        self.contexts: set[int] = set()

    def handlers(self) -> Mapping[NodeKind, Handler]:
        return {NodeKind.LITERAL: self.visit}

    def visit(self, node: SyntaxNode, context: RuleContext) -> None:
        self.seen.append(context.tree.text(node))
        self.contexts.add(id(context))
        context.report(node, "literal")


class TestStyleEngine(unittest.TestCase):
    def test_dispatches_nodes_in_document_order(self) -> None:
        rule = RecordingRule()
        StyleEngine([rule]).lint(parse("f(1, [2, 3]);\nconst x = 4;\n"))
        self.assertEqual(rule.seen, ["1", "2", "3", "4"])

    def test_one_context_per_rule_and_file(self) -> None:
        rule = RecordingRule()
        engine = StyleEngine([rule])
        engine.lint(parse("f(1, 2);\n"))
        self.assertEqual(len(rule.contexts), 1)
        engine.lint(parse("g(3);\n"))
        self.assertEqual(len(rule.contexts), 2)

    def test_violations_sorted_by_position_then_code(self) -> None:
        code = "const a = compute()\n|| other;\nconst b = load();\n"
        violations = StyleEngine(
            [OperatorContinuationIndentRule(), AssignmentNewlineRule()]
        ).lint(parse(code))
        keys = [(v.position.line, v.position.column, v.code) for v in violations]
        self.assertEqual(keys, sorted(keys))
        self.assertEqual([v.code for v in violations], ["LG003", "LG002", "LG003"])

    def test_rules_property_is_a_copy(self) -> None:
        engine = StyleEngine([RecordingRule()])
        engine.rules.clear()
        self.assertEqual(len(engine.rules), 1)

    def test_violation_carries_path_and_rule_identity(self) -> None:
        violations = StyleEngine([RecordingRule()]).lint(parse("f(1);\n", "src/a.ts"))
        (violation,) = violations
        self.assertEqual(violation.path, "src/a.ts")
        self.assertEqual(violation.symbol, "recording")
        self.assertEqual(violation.location, "src/a.ts:1:2")
        self.assertFalse(violation.fixable)
