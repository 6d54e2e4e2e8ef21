"""Operator continuation indent rule (LG002)."""

from collections.abc import Mapping
from typing import ClassVar

from layout_guard.domain.chains import ChainAnalyzer
from layout_guard.domain.entities import NodeKind, SyntaxNode, Token
from layout_guard.domain.rules import Fixer, Handler, OptionSpec, RuleContext, StyleRule


class OperatorContinuationIndentRule(StyleRule):
    """
    Rule for LG002: continuation operators sit one unit deeper than the chain's reference line.

    Every operator of one chain (and both '?' and ':' of a conditional) is
    compared against the same reference operand, never against its
    immediate left neighbour, so long chains stay flat.
    """

    code: str = "LG002"
    symbol: str = "operator-continuation-indent"
    description: str = "Continuation lines starting with an operator are indented one level past the chain's first operand."
    fixable: bool = True
    options_schema: ClassVar[Mapping[str, OptionSpec]] = {}

    def handlers(self) -> Mapping[NodeKind, Handler]:
        return {
            NodeKind.BINARY: self.check_binary,
            NodeKind.CONDITIONAL: self.check_conditional,
        }

    def check_binary(self, node: SyntaxNode, context: RuleContext) -> None:
        tree = context.tree
        left = tree.child(node, "left")
        if left is None:
            return
        operator = tree.token_after_node(left)
        if operator is None or operator.range.start >= node.range.end:
            return
        if operator.start.line <= left.end.line:
            return
        analyzer = ChainAnalyzer(tree)
        reference = analyzer.leftmost_operand(analyzer.chain_root(node))
        self._check_operator_line(operator, reference, context)

    def check_conditional(self, node: SyntaxNode, context: RuleContext) -> None:
        tree = context.tree
        reference = ChainAnalyzer(tree).condition_reference(node)
        if reference is None:
            return
        condition = tree.child(node, "condition")
        consequence = tree.child(node, "consequence")
        if condition is not None:
            question = tree.token_after_node(condition)
            if (
                question is not None
                and question.type == "?"
                and question.start.line > condition.end.line
            ):
                self._check_operator_line(question, reference, context)
        if consequence is not None:
            colon = tree.token_after_node(consequence)
            if (
                colon is not None
                and colon.type == ":"
                and colon.start.line > consequence.end.line
            ):
                self._check_operator_line(colon, reference, context)

    def _check_operator_line(
        self,
        operator: Token,
        reference: SyntaxNode,
        context: RuleContext,
    ) -> None:
        indentation = context.indentation
        expected_depth = indentation.line_depth(reference.start.line) + 1
        actual_depth = indentation.line_depth(operator.start.line)
        if actual_depth == expected_depth:
            return
        expected = indentation.expected_indent(expected_depth)
        indent_range = indentation.indent_range(operator.start.line)

        def fix(fixer: Fixer):
            return fixer.replace_range(indent_range, expected)

        context.report(
            operator,
            f"Continuation operator '{operator.value}' should be indented {expected_depth} level(s); found {actual_depth}.",
            fix,
        )
