"""Assignment continuation indent rule (LG005)."""

from collections.abc import Mapping
from typing import ClassVar

from layout_guard.domain.entities import NodeKind, SyntaxNode
from layout_guard.domain.rules import Fixer, Handler, OptionSpec, RuleContext, StyleRule
from layout_guard.domain.rules.assignments import ASSIGNMENT_KINDS, assignment_parts, gap_text


class AssignmentContinuationIndentRule(StyleRule):
    """Rule for LG005: a value wrapped onto the line after '=' is indented exactly one unit deeper."""

    code: str = "LG005"
    symbol: str = "assignment-continuation-indent"
    description: str = "Continuation line after '=' should be indented one level deeper than the statement."
    fixable: bool = True
    options_schema: ClassVar[Mapping[str, OptionSpec]] = {}

    def handlers(self) -> Mapping[NodeKind, Handler]:
        return {kind: self.check_assignment for kind in ASSIGNMENT_KINDS}

    def check_assignment(self, node: SyntaxNode, context: RuleContext) -> None:
        tree = context.tree
        parts = assignment_parts(node, tree)
        if parts is None or "\n" not in gap_text(parts, tree):
            return
        value_token = parts.next_token
        previous = tree.token_before(value_token, include_comments=True)
        if previous is not None and previous.end.line == value_token.start.line:
            return

        indentation = context.indentation
        expected = indentation.line_indent(parts.operator.start.line) + indentation.unit
        current = indentation.line_indent(value_token.start.line)
        if current == expected:
            return
        indent_range = indentation.indent_range(value_token.start.line)

        def fix(fixer: Fixer):
            return fixer.replace_range(indent_range, expected)

        context.report(
            value_token,
            "Continuation line after '=' should be indented one level deeper.",
            fix,
        )
