"""Locating the '=' operator and right-hand side of assignment-like nodes."""

from dataclasses import dataclass

from layout_guard.domain.entities import NodeKind, SyntaxNode, Token
from layout_guard.domain.syntax_tree import SyntaxTree

ASSIGNMENT_KINDS: tuple[NodeKind, ...] = (
    NodeKind.VARIABLE_BINDING,
    NodeKind.ASSIGNMENT,
    NodeKind.CLASS_FIELD,
)

_VALUE_FIELDS: dict[NodeKind, str] = {
    NodeKind.VARIABLE_BINDING: "value",
    NodeKind.ASSIGNMENT: "right",
    NodeKind.CLASS_FIELD: "value",
}


@dataclass(frozen=True)
class AssignmentParts:
    """An assignment-like node split into its '=' token and right-hand side."""
    node: SyntaxNode
    value: SyntaxNode
    operator: Token
    next_token: Token

    @property
    def gap_start(self) -> int:
        return self.operator.range.end

    @property
    def gap_end(self) -> int:
        return self.next_token.range.start


def assignment_parts(node: SyntaxNode, tree: SyntaxTree) -> AssignmentParts | None:
    """Return the parts of a binding/assignment/field, or None if any is missing."""
    field = _VALUE_FIELDS.get(node.kind)
    if field is None:
        return None
    value = tree.child(node, field)
    if value is None:
        return None
    first = tree.first_token(value)
    if first is None:
        return None
    operator = tree.token_before(first)
    while operator is not None and operator.range.start >= node.range.start:
        if operator.type == "=":
            break
        operator = tree.token_before(operator)
    else:
        return None
    next_token = tree.token_after(operator)
    if next_token is None:
        return None
    return AssignmentParts(node=node, value=value, operator=operator, next_token=next_token)


def gap_text(parts: AssignmentParts, tree: SyntaxTree) -> str:
    """Raw text between '=' and the next code token (comments included)."""
    return tree.source.slice(parts.gap_start, parts.gap_end)
