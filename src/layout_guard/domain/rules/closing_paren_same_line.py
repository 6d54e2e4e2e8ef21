"""Closing paren rule (LG006): ')' stays on the line of the last content."""

from collections.abc import Mapping
from typing import ClassVar

from layout_guard.domain.entities import NodeKind, SyntaxNode, TextRange, Token
from layout_guard.domain.rules import Fixer, Handler, OptionSpec, RuleContext, StyleRule


class ClosingParenSameLineRule(StyleRule):
    """Rule for LG006: a closing ')' never sits alone on its line."""

    code: str = "LG006"
    symbol: str = "closing-paren-same-line"
    description: str = "Closing ')' should be on the same line as the last content."
    fixable: bool = True
    options_schema: ClassVar[Mapping[str, OptionSpec]] = {}

    def handlers(self) -> Mapping[NodeKind, Handler]:
        return {
            NodeKind.ARGUMENTS: self.check_list,
            NodeKind.PARAMETERS: self.check_list,
            NodeKind.PARENTHESIZED: self.check_parenthesized,
            NodeKind.FOR_LOOP: self.check_loop_header,
        }

    def check_list(self, node: SyntaxNode, context: RuleContext) -> None:
        if not node.children:
            return
        self._check_closing(node, context.tree.last_token(node), context)

    def check_parenthesized(self, node: SyntaxNode, context: RuleContext) -> None:
        self._check_closing(node, context.tree.last_token(node), context)

    def check_loop_header(self, node: SyntaxNode, context: RuleContext) -> None:
        """The header's ')' is the token right before the loop body."""
        tree = context.tree
        body = tree.child(node, "body")
        if body is None:
            return
        body_first = tree.first_token(body)
        if body_first is None:
            return
        self._check_closing(node, tree.token_before(body_first), context)

    @staticmethod
    def _check_closing(node: SyntaxNode, closing: Token | None, context: RuleContext) -> None:
        tree = context.tree
        if closing is None or closing.type != ")":
            return
        previous = tree.token_before(closing, include_comments=True)
        if previous is None or previous.range.start < node.range.start:
            return
        if previous.end.line == closing.start.line:
            return
        gap = TextRange(previous.range.end, closing.range.start)

        def fix(fixer: Fixer):
            if previous.is_comment:
                return None
            return fixer.replace_range(gap, "")

        context.report(
            closing,
            "Closing ')' should be on the same line as the last content.",
            fix,
        )
