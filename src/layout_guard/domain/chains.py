"""Chain analysis for left-associative operator trees."""

from layout_guard.domain.entities import NodeKind, SyntaxNode
from layout_guard.domain.syntax_tree import SyntaxTree


class ChainAnalyzer:
    """
    Finds the root and leftmost operand of an operator chain.

    `a || b || c` parses as `((a || b) || c)`; every operator in it shares
    one reference operand (`a`) so continuation lines stay flat.
    """

    def __init__(self, tree: SyntaxTree) -> None:
        self._tree = tree

    @staticmethod
    def _same_chain(node: SyntaxNode, other: SyntaxNode) -> bool:
        return (
            node.kind is NodeKind.BINARY
            and other.kind is NodeKind.BINARY
            and node.operator == other.operator
        )

    def chain_root(self, node: SyntaxNode) -> SyntaxNode:
        current = node
        parent = self._tree.parent(current)
        while (
            parent is not None
            and self._same_chain(current, parent)
            and current.field == "left"
        ):
            current = parent
            parent = self._tree.parent(current)
        return current

    def leftmost_operand(self, node: SyntaxNode) -> SyntaxNode:
        current = node
        while True:
            left = self._tree.child(current, "left")
            if left is None:
                return current
            if not self._same_chain(current, left):
                return left
            current = left

    def condition_reference(self, node: SyntaxNode) -> SyntaxNode | None:
        """Reference operand of a conditional: its test unwrapped through any chain."""
        test = self._tree.child(node, "condition")
        if test is None:
            return None
        if test.kind is NodeKind.BINARY:
            return self.leftmost_operand(test)
        return test
