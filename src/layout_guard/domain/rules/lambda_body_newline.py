"""Lambda body newline rule (LG001): long expression-bodied lambdas break after '=>'."""

from collections.abc import Mapping
from typing import ClassVar

from layout_guard.domain.constants import DEFAULT_LAMBDA_MAX_LENGTH
from layout_guard.domain.entities import (
    LITERAL_CONTAINER_KINDS,
    NodeKind,
    SyntaxNode,
    TextRange,
    Token,
)
from layout_guard.domain.rules import (
    Fixer,
    Handler,
    OptionSpec,
    RuleContext,
    StyleRule,
    resolve_options,
)


class LambdaBodyNewlineRule(StyleRule):
    """Rule for LG001: expression body of a long lambda starts on the next line."""

    code: str = "LG001"
    symbol: str = "lambda-body-newline"
    description: str = "Lambda expression bodies longer than max_length start on a new line after '=>'."
    fixable: bool = True
    options_schema: ClassVar[Mapping[str, OptionSpec]] = {
        "max_length": OptionSpec(
            type=int,
            default=DEFAULT_LAMBDA_MAX_LENGTH,
            minimum=1,
            description="Longest lambda (in characters) allowed on one line with '=>'.",
        ),
    }

    def __init__(self, options: Mapping[str, object] | None = None) -> None:
        resolved = resolve_options(self.options_schema, options)
        self.max_length = int(resolved["max_length"])  # type: ignore[call-overload]

    def handlers(self) -> Mapping[NodeKind, Handler]:
        return {NodeKind.LAMBDA: self.check_lambda}

    def check_lambda(self, node: SyntaxNode, context: RuleContext) -> None:
        tree = context.tree
        body = tree.child(node, "body")
        if body is None or body.kind is NodeKind.BLOCK:
            return
        if tree.unwrap_parentheses(body).kind in LITERAL_CONTAINER_KINDS:
            return
        arrow = self._introducer(node, body, context)
        if arrow is None:
            return
        body_first = tree.first_token(body)
        if body_first is None or body_first.start.line > arrow.end.line:
            return

        effective_length = max(len(tree.text(node)), len(tree.text(body)))
        if effective_length <= self.max_length:
            return

        gap = TextRange(arrow.range.end, body_first.range.start)
        indentation = context.indentation
        replacement = tree.source.newline + indentation.expected_indent(
            indentation.line_depth(arrow.start.line) + 1)

        def fix(fixer: Fixer):
            if tree.has_comment_between(gap.start, gap.end):
                return None
            return fixer.replace_range(gap, replacement)

        context.report(
            body,
            f"Lambda body exceeds {self.max_length} characters; start it on a new line after '=>'.",
            fix,
        )

    @staticmethod
    def _introducer(node: SyntaxNode, body: SyntaxNode, context: RuleContext) -> Token | None:
        """The '=>' token between parameters and body."""
        tree = context.tree
        body_first = tree.first_token(body)
        if body_first is None:
            return None
        token = tree.token_before(body_first)
        if token is not None and token.type == "=>" and token.range.start >= node.range.start:
            return token
        return None
