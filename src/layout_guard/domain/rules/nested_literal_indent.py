"""Nested literal indentation rule (LG004)."""

from collections.abc import Mapping
from typing import ClassVar

from layout_guard.domain.entities import (
    LITERAL_CONTAINER_KINDS,
    NodeKind,
    SyntaxNode,
    Token,
)
from layout_guard.domain.rules import Fixer, Handler, OptionSpec, RuleContext, StyleRule
from layout_guard.domain.rules.assignments import ASSIGNMENT_KINDS, assignment_parts, gap_text


class NestedLiteralIndentRule(StyleRule):
    """
    Rule for LG004: members of a wrapped object/array literal follow the assignment's indent.

    Applies only once '=' is followed by a newline and the value is a
    multi-line object or array literal. Members sit at
    base + (depth + 1) units and the closing delimiter at base + depth,
    where base is the assignment line's indent and depth starts at 1.
    """

    code: str = "LG004"
    symbol: str = "nested-literal-indent"
    description: str = "Indent object/array literal members relative to the assignment they belong to."
    fixable: bool = True
    options_schema: ClassVar[Mapping[str, OptionSpec]] = {}

    def handlers(self) -> Mapping[NodeKind, Handler]:
        return {kind: self.check_assignment for kind in ASSIGNMENT_KINDS}

    def check_assignment(self, node: SyntaxNode, context: RuleContext) -> None:
        tree = context.tree
        parts = assignment_parts(node, tree)
        if parts is None:
            return
        value = parts.value
        if value.kind not in LITERAL_CONTAINER_KINDS or not value.children:
            return
        if "\n" not in gap_text(parts, tree):
            return
        base_indent = context.indentation.line_indent(parts.operator.start.line)
        self.check_literal(value, base_indent, 1, context)

    def check_literal(
        self,
        literal: SyntaxNode,
        base_indent: str,
        depth: int,
        context: RuleContext,
    ) -> None:
        tree = context.tree
        items = tree.children(literal)
        if not items:
            return
        opening = tree.first_token(literal)
        closing = tree.last_token(literal)
        if opening is None or closing is None:
            return
        if opening.start.line == closing.end.line:
            return

        unit = context.indentation.unit
        content_indent = base_indent + unit * (depth + 1)
        delimiter_indent = base_indent + unit * depth

        for item in items:
            first = tree.first_token(item)
            if first is None:
                continue
            previous = tree.token_before(first)
            if previous is not None and first.start.line != previous.end.line:
                self._check_line_indent(
                    first,
                    content_indent,
                    f"Content should be indented {depth + 1} level(s) from assignment.",
                    context,
                )

            if item.kind is NodeKind.PROPERTY:
                self._check_property_value(item, base_indent, depth, context)
            elif item.kind in LITERAL_CONTAINER_KINDS:
                self.check_literal(item, base_indent, depth + 1, context)

        previous = tree.token_before(closing)
        if previous is not None and closing.start.line != previous.end.line:
            self._check_line_indent(
                closing,
                delimiter_indent,
                "Closing delimiter should align with the opening delimiter.",
                context,
            )

    def _check_property_value(
        self,
        item: SyntaxNode,
        base_indent: str,
        depth: int,
        context: RuleContext,
    ) -> None:
        tree = context.tree
        key = tree.child(item, "key")
        value = tree.child(item, "value")
        if key is None or value is None or value.kind not in LITERAL_CONTAINER_KINDS:
            return
        separator = tree.token_after_node(key)
        value_first = tree.first_token(value)
        if separator is None or separator.type != ":" or value_first is None:
            return
        between = tree.source.slice(separator.range.end, value_first.range.start)
        if "\n" in between:
            self.check_literal(value, base_indent, depth + 1, context)
        elif value.children and value.is_multiline:
            self.check_literal(value, base_indent, depth + 1, context)

    @staticmethod
    def _check_line_indent(
        token: Token,
        expected: str,
        message: str,
        context: RuleContext,
    ) -> None:
        indentation = context.indentation
        current = indentation.line_indent(token.start.line)
        if current == expected:
            return
        indent_range = indentation.indent_range(token.start.line)

        def fix(fixer: Fixer):
            return fixer.replace_range(indent_range, expected)

        context.report(token, message, fix)
