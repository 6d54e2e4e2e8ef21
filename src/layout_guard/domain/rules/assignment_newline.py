"""Assignment newline rule (LG003): non-trivial right-hand sides start on the line after '='."""

from collections.abc import Mapping
from typing import ClassVar

from layout_guard.domain.constants import SIMPLE_IDENTIFIER_MAX_LENGTH
from layout_guard.domain.entities import NodeKind, SyntaxNode, TextRange
from layout_guard.domain.rules import Fixer, Handler, OptionSpec, RuleContext, StyleRule
from layout_guard.domain.rules.assignments import ASSIGNMENT_KINDS, assignment_parts, gap_text
from layout_guard.domain.syntax_tree import SyntaxTree


class SimpleValueClassifier:
    """
    Decides whether a right-hand side may stay on the '=' line.

    Checks run in a fixed order and the first match wins: scalar literal,
    short identifier, empty array, empty object, template without
    substitutions, unary expression over a simple operand.
    """

    def __init__(self, tree: SyntaxTree) -> None:
        self._tree = tree

    def is_simple(self, node: SyntaxNode) -> bool:
        tree = self._tree
        node = tree.unwrap_parentheses(node)
        if node.kind is NodeKind.LITERAL:
            return True
        if node.kind is NodeKind.IDENTIFIER:
            return len(tree.text(node)) < SIMPLE_IDENTIFIER_MAX_LENGTH
        if node.kind is NodeKind.ARRAY:
            return not node.children
        if node.kind is NodeKind.OBJECT:
            return not node.children
        if node.kind is NodeKind.TEMPLATE:
            return not any(
                child.kind is NodeKind.TEMPLATE_SUBSTITUTION
                for child in tree.children(node)
            )
        if node.kind is NodeKind.UNARY:
            argument = tree.child(node, "argument")
            return argument is not None and self.is_simple(argument)
        return False


class AssignmentNewlineRule(StyleRule):
    """Rule for LG003: expected newline after '=' for non-simple values."""

    code: str = "LG003"
    symbol: str = "assignment-newline"
    description: str = "Enforce a newline after '=' in bindings, assignments and class fields with non-simple values."
    fixable: bool = True
    options_schema: ClassVar[Mapping[str, OptionSpec]] = {}

    def handlers(self) -> Mapping[NodeKind, Handler]:
        return {kind: self.check_assignment for kind in ASSIGNMENT_KINDS}

    def check_assignment(self, node: SyntaxNode, context: RuleContext) -> None:
        tree = context.tree
        parts = assignment_parts(node, tree)
        if parts is None:
            return
        if SimpleValueClassifier(tree).is_simple(parts.value):
            return
        if "\n" in gap_text(parts, tree):
            return

        gap = TextRange(parts.gap_start, parts.gap_end)
        indentation = context.indentation
        replacement = (
            tree.source.newline
            + indentation.line_indent(parts.operator.start.line)
            + indentation.unit
        )

        def fix(fixer: Fixer):
            if tree.has_comment_between(gap.start, gap.end):
                return None
            return fixer.replace_range(gap, replacement)

        context.report(parts.value, "Expected newline after '='.", fix)
