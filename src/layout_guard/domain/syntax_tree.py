"""Arena-backed syntax tree with token-stream navigation."""

from bisect import bisect_left
from collections.abc import Iterator, Sequence

from layout_guard.domain.entities import NodeKind, SyntaxNode, Token
from layout_guard.domain.source_text import SourceText


class SyntaxTree:
    """
    Flat arena of SyntaxNode slots (pre-order) plus the file's token stream.

    Built once per file by the parser gateway and discarded after the pass.
    Neighbour lookups skip comment tokens unless asked not to.
    """

    def __init__(
        self,
        source: SourceText,
        nodes: Sequence[SyntaxNode],
        tokens: Sequence[Token],
    ) -> None:
        self.source = source
        self.nodes = tuple(nodes)
        self.tokens = tuple(tokens)
        self._token_starts = [t.range.start for t in self.tokens]

    @property
    def root(self) -> SyntaxNode | None:
        return self.nodes[0] if self.nodes else None

    def preorder(self) -> Iterator[SyntaxNode]:
        """Nodes in document (pre-order) order. Arena order is pre-order."""
        return iter(self.nodes)

    def parent(self, node: SyntaxNode) -> SyntaxNode | None:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def children(self, node: SyntaxNode) -> list[SyntaxNode]:
        return [self.nodes[i] for i in node.children]

    def child(self, node: SyntaxNode, field: str) -> SyntaxNode | None:
        """Child stored under a grammar field name (left, right, value, ...)."""
        for i in node.children:
            candidate = self.nodes[i]
            if candidate.field == field:
                return candidate
        return None

    def text(self, node: SyntaxNode) -> str:
        return self.source.slice(node.range.start, node.range.end)

    def unwrap_parentheses(self, node: SyntaxNode) -> SyntaxNode:
        current = node
        while current.kind is NodeKind.PARENTHESIZED:
            inner = self.children(current)
            if len(inner) != 1:
                break
            current = inner[0]
        return current

    # -- tokens -----------------------------------------------------------

    def first_token(self, node: SyntaxNode) -> Token | None:
        """First non-comment token inside the node's range."""
        index = bisect_left(self._token_starts, node.range.start)
        while index < len(self.tokens):
            token = self.tokens[index]
            if token.range.start >= node.range.end:
                return None
            if not token.is_comment:
                return token
            index += 1
        return None

    def last_token(self, node: SyntaxNode) -> Token | None:
        """Last non-comment token inside the node's range."""
        index = bisect_left(self._token_starts, node.range.end) - 1
        while index >= 0:
            token = self.tokens[index]
            if token.range.start < node.range.start:
                return None
            if not token.is_comment and token.range.end <= node.range.end:
                return token
            index -= 1
        return None

    def token_before(self, token: Token, include_comments: bool = False) -> Token | None:
        index = token.index - 1
        while index >= 0:
            candidate = self.tokens[index]
            if include_comments or not candidate.is_comment:
                return candidate
            index -= 1
        return None

    def token_after(self, token: Token, include_comments: bool = False) -> Token | None:
        index = token.index + 1
        while index < len(self.tokens):
            candidate = self.tokens[index]
            if include_comments or not candidate.is_comment:
                return candidate
            index += 1
        return None

    def token_after_node(self, node: SyntaxNode) -> Token | None:
        """First non-comment token starting at or after the node's end."""
        index = bisect_left(self._token_starts, node.range.end)
        while index < len(self.tokens):
            token = self.tokens[index]
            if not token.is_comment:
                return token
            index += 1
        return None

    def tokens_between(self, start: int, end: int) -> list[Token]:
        """All tokens, comments included, lying inside [start, end)."""
        index = bisect_left(self._token_starts, start)
        found: list[Token] = []
        while index < len(self.tokens) and self.tokens[index].range.end <= end:
            found.append(self.tokens[index])
            index += 1
        return found

    def has_comment_between(self, start: int, end: int) -> bool:
        return any(t.is_comment for t in self.tokens_between(start, end))
