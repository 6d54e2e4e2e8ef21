"""
Tree-sitter parser gateway.

Converts a tree-sitter concrete syntax tree for TypeScript/JavaScript into the
parser-neutral SyntaxTree the layout rules work on:

- a flat token stream built from leaf nodes (strings and regexes stay whole,
  comments become comment tokens);
- an arena of named nodes in pre-order, each holding its parent slot, its
  field name inside the parent and, for operator nodes, the operator text.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from layout_guard.domain.constants import TSX_EXTENSIONS
from layout_guard.domain.entities import NodeKind, SyntaxNode, TextRange, Token
from layout_guard.domain.protocols import ParserGatewayProtocol
from layout_guard.domain.source_text import SourceText
from layout_guard.domain.syntax_tree import SyntaxTree

logger = logging.getLogger(__name__)

KIND_BY_TYPE: dict[str, NodeKind] = {
    "program": NodeKind.PROGRAM,
    "arrow_function": NodeKind.LAMBDA,
    "binary_expression": NodeKind.BINARY,
    "ternary_expression": NodeKind.CONDITIONAL,
    "variable_declarator": NodeKind.VARIABLE_BINDING,
    "assignment_expression": NodeKind.ASSIGNMENT,
    "augmented_assignment_expression": NodeKind.AUGMENTED_ASSIGNMENT,
    "public_field_definition": NodeKind.CLASS_FIELD,
    "field_definition": NodeKind.CLASS_FIELD,
    "object": NodeKind.OBJECT,
    "array": NodeKind.ARRAY,
    "pair": NodeKind.PROPERTY,
    "string": NodeKind.LITERAL,
    "number": NodeKind.LITERAL,
    "true": NodeKind.LITERAL,
    "false": NodeKind.LITERAL,
    "null": NodeKind.LITERAL,
    "regex": NodeKind.REGEX,
    "identifier": NodeKind.IDENTIFIER,
    "undefined": NodeKind.IDENTIFIER,
    "template_string": NodeKind.TEMPLATE,
    "template_substitution": NodeKind.TEMPLATE_SUBSTITUTION,
    "unary_expression": NodeKind.UNARY,
    "statement_block": NodeKind.BLOCK,
    "parenthesized_expression": NodeKind.PARENTHESIZED,
    "arguments": NodeKind.ARGUMENTS,
    "formal_parameters": NodeKind.PARAMETERS,
    "for_statement": NodeKind.FOR_LOOP,
    "for_in_statement": NodeKind.FOR_LOOP,
}

# Named nodes emitted as a single token; their inner pieces are not tokens.
ATOMIC_TYPES = frozenset({"string", "regex"})

COMMENT_TYPES = frozenset({"comment", "html_comment"})


@dataclass
class _PendingNode:
    kind: NodeKind
    type: str
    start: int
    end: int
    parent: int | None
    field: str | None
    children: list[int] = field(default_factory=list)
    operator: str | None = None


class _TreeBuilder:
    """Accumulates arena slots and tokens while the cursor walks the tree."""

    def __init__(self, source: SourceText) -> None:
        self.source = source
        self.pending: list[_PendingNode] = []
        self.tokens: list[Token] = []

    def add_node(self, node: Node, parent: int | None, field_name: str | None) -> int:
        index = len(self.pending)
        self.pending.append(_PendingNode(
            kind=KIND_BY_TYPE.get(node.type, NodeKind.OTHER),
            type=node.type,
            start=self.source.char_offset(node.start_byte),
            end=self.source.char_offset(node.end_byte),
            parent=parent,
            field=field_name,
        ))
        if parent is not None:
            self.pending[parent].children.append(index)
        return index

    def add_token(self, node: Node, token_type: str) -> None:
        start = self.source.char_offset(node.start_byte)
        end = self.source.char_offset(node.end_byte)
        self.tokens.append(Token(
            index=len(self.tokens),
            type=token_type,
            value=self.source.slice(start, end),
            range=TextRange(start, end),
            start=self.source.position_at(start),
            end=self.source.position_at(end),
        ))

    def set_operator(self, slot: int | None, operator: str) -> None:
        if slot is not None and self.pending[slot].operator is None:
            self.pending[slot].operator = operator

    def build(self) -> SyntaxTree:
        nodes = [
            SyntaxNode(
                index=i,
                kind=p.kind,
                type=p.type,
                range=TextRange(p.start, p.end),
                start=self.source.position_at(p.start),
                end=self.source.position_at(p.end),
                parent=p.parent,
                field=p.field,
                children=tuple(p.children),
                operator=p.operator,
            )
            for i, p in enumerate(self.pending)
        ]
        return SyntaxTree(self.source, nodes, self.tokens)


class TreeSitterGateway(ParserGatewayProtocol):
    """Parses TypeScript/JavaScript with tree-sitter; TSX grammar for .tsx/.jsx."""

    def __init__(self) -> None:
        self._parsers: dict[str, Parser] = {}

    def get_parser(self, grammar: str) -> Parser:
        """Get or create a cached parser for 'typescript' or 'tsx'."""
        if grammar not in self._parsers:
            if grammar == "tsx":
                language = Language(tree_sitter_typescript.language_tsx())
            else:
                language = Language(tree_sitter_typescript.language_typescript())
            self._parsers[grammar] = Parser(language)
            logger.debug("Loaded %s grammar", grammar)
        return self._parsers[grammar]

    @staticmethod
    def detect_grammar(path: str) -> str:
        return "tsx" if Path(path).suffix.lower() in TSX_EXTENSIONS else "typescript"

    def parse(self, text: str, path: str = "", grammar: str | None = None) -> SyntaxTree:
        source = SourceText(text, path)
        parser = self.get_parser(grammar or self.detect_grammar(path))
        ts_tree = parser.parse(bytes(text, "utf-8"))
        if ts_tree.root_node.has_error:
            logger.debug("Syntax errors in %s; malformed constructs are skipped", path or "<text>")
        builder = _TreeBuilder(source)
        self._walk(ts_tree.root_node, builder)
        return builder.build()

    @staticmethod
    def _walk(root: Node, builder: _TreeBuilder) -> None:
        cursor = root.walk()
        # Arena slot that children of the current node attach to.
        parents: list[int | None] = [None]
        while True:
            node = cursor.node
            parent_slot = parents[-1]
            descend = False
            child_parent = parent_slot
            if node.type in COMMENT_TYPES:
                builder.add_token(node, "comment")
            elif node.start_byte == node.end_byte:
                pass  # inserted (missing) node
            elif node.is_named:
                child_parent = builder.add_node(node, parent_slot, cursor.field_name)
                if node.type in ATOMIC_TYPES or node.child_count == 0:
                    builder.add_token(node, node.type)
                else:
                    descend = True
            else:
                if node.child_count == 0:
                    builder.add_token(node, node.type)
                    if cursor.field_name == "operator":
                        builder.set_operator(parent_slot, node.type)
                else:
                    descend = True

            if descend and cursor.goto_first_child():
                parents.append(child_parent)
                continue
            while not cursor.goto_next_sibling():
                if not cursor.goto_parent():
                    return
                parents.pop()
