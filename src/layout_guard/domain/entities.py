from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict


class NodeKind(Enum):
    """Parser-neutral syntax node kinds the layout rules dispatch on."""
    PROGRAM = "program"
    LAMBDA = "lambda"
    BINARY = "binary"
    CONDITIONAL = "conditional"
    VARIABLE_BINDING = "variable_binding"
    ASSIGNMENT = "assignment"
    AUGMENTED_ASSIGNMENT = "augmented_assignment"
    CLASS_FIELD = "class_field"
    OBJECT = "object"
    ARRAY = "array"
    PROPERTY = "property"
    LITERAL = "literal"
    REGEX = "regex"
    IDENTIFIER = "identifier"
    TEMPLATE = "template"
    TEMPLATE_SUBSTITUTION = "template_substitution"
    UNARY = "unary"
    BLOCK = "block"
    PARENTHESIZED = "parenthesized"
    ARGUMENTS = "arguments"
    PARAMETERS = "parameters"
    FOR_LOOP = "for_loop"
    OTHER = "other"


LITERAL_CONTAINER_KINDS: frozenset[NodeKind] = frozenset(
    {NodeKind.OBJECT, NodeKind.ARRAY})


@dataclass(frozen=True, order=True)
class Position:
    """1-indexed line, 0-indexed character column."""
    line: int
    column: int


@dataclass(frozen=True)
class TextRange:
    """Half-open character offset range [start, end)."""
    start: int
    end: int

    def overlaps(self, other: "TextRange") -> bool:
        """True when the ranges share a character or start at the same offset."""
        if self.start == other.start:
            return True
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class Token:
    """A lexical unit from the host tokenizer. Rules only read tokens."""
    index: int
    type: str
    value: str
    range: TextRange
    start: Position
    end: Position

    @property
    def is_comment(self) -> bool:
        return self.type == "comment"


@dataclass(frozen=True)
class SyntaxNode:
    """
    One slot of the arena-backed syntax tree.

    Parent and children are slot indices into SyntaxTree.nodes, never object
    references, so the arena can be dropped as a flat list.
    """
    index: int
    kind: NodeKind
    type: str
    range: TextRange
    start: Position
    end: Position
    parent: int | None = None
    field: str | None = None
    children: tuple[int, ...] = ()
    operator: str | None = None

    @property
    def is_multiline(self) -> bool:
        return self.start.line != self.end.line


@dataclass(frozen=True)
class Fix:
    """Minimal replacement of one text range."""
    range: TextRange
    text: str


class ViolationDict(TypedDict):
    """Serialization shape of a Violation."""
    path: str
    line: int
    column: int
    code: str
    symbol: str
    message: str
    fixable: bool


@dataclass(frozen=True)
class Violation:
    """A reported layout mismatch, optionally carrying a Fix."""

    code: str
    symbol: str
    message: str
    path: str
    position: Position
    fix: Fix | None = None

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    @property
    def location(self) -> str:
        return f"{self.path}:{self.position.line}:{self.position.column}"

    def to_dict(self) -> ViolationDict:
        """Convert to dictionary for serialization."""
        return {
            "path": self.path,
            "line": self.position.line,
            "column": self.position.column,
            "code": self.code,
            "symbol": self.symbol,
            "message": self.message,
            "fixable": self.fixable,
        }


@dataclass(frozen=True)
class FileReport:
    """Violations found in one file."""
    path: str
    violations: list[Violation] = field(default_factory=list)
    skipped_reason: str | None = None


@dataclass(frozen=True)
class CheckResult:
    """Result of a check run across a file set."""
    files: list[FileReport] = field(default_factory=list)

    @classmethod
    def from_violations(cls, violations: list[Violation]) -> "CheckResult":
        """Group a flat violation list into per-file reports, keeping order."""
        by_path: dict[str, list[Violation]] = {}
        for violation in violations:
            by_path.setdefault(violation.path, []).append(violation)
        return cls(files=[FileReport(path, found) for path, found in by_path.items()])

    @property
    def violations(self) -> list[Violation]:
        return [v for report in self.files for v in report.violations]

    def has_violations(self) -> bool:
        """Check if any violations were found."""
        return any(report.violations for report in self.files)

    def counts_by_rule(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for violation in self.violations:
            counts[violation.code] = counts.get(violation.code, 0) + 1
        return counts


@dataclass(frozen=True)
class FixOutcome:
    """Text after applying a batch of fixes, plus what was applied or deferred."""
    text: str
    applied: int
    skipped: int


@dataclass(frozen=True)
class TextFixResult:
    """One file's text after the multi-pass fix loop."""
    text: str
    applied: int
    passes: int
    remaining: list[Violation] = field(default_factory=list)


@dataclass(frozen=True)
class FixSummary:
    """Result of a fix run across a file set."""
    files_modified: int
    fixes_applied: int
    remaining: list[Violation] = field(default_factory=list)
