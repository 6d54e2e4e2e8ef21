"""Host traversal: visits nodes in document order and dispatches them to rule handlers."""

from collections.abc import Sequence

from layout_guard.domain.constants import TAB_UNIT
from layout_guard.domain.entities import NodeKind, Violation
from layout_guard.domain.indentation import IndentationModel
from layout_guard.domain.rules import Handler, RuleContext, StyleRule
from layout_guard.domain.syntax_tree import SyntaxTree


class StyleEngine:
    """
    Runs a fixed set of rules over one SyntaxTree per call.

    Single-threaded and synchronous: each node is visited once, and every
    handler registered for its kind runs inline with its own RuleContext.
    """

    def __init__(self, rules: Sequence[StyleRule], indent_unit: str = TAB_UNIT) -> None:
        self._rules = list(rules)
        self._indent_unit = indent_unit

    @property
    def rules(self) -> list[StyleRule]:
        return list(self._rules)

    def lint(self, tree: SyntaxTree) -> list[Violation]:
        indentation = IndentationModel(tree.source, self._indent_unit)
        contexts = [RuleContext(rule, tree, indentation) for rule in self._rules]
        dispatch: dict[NodeKind, list[tuple[Handler, RuleContext]]] = {}
        for rule, context in zip(self._rules, contexts):
            for kind, handler in rule.handlers().items():
                dispatch.setdefault(kind, []).append((handler, context))

        for node in tree.preorder():
            for handler, context in dispatch.get(node.kind, ()):
                handler(node, context)

        violations = [v for context in contexts for v in context.violations]
        return sorted(
            violations,
            key=lambda v: (v.position.line, v.position.column, v.code),
        )
