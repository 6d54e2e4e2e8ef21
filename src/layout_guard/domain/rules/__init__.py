"""Rule plugin contract: rule protocol, option schema, report/fix context."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol

from layout_guard.domain.entities import (
    Fix,
    NodeKind,
    SyntaxNode,
    TextRange,
    Token,
    Violation,
)
from layout_guard.domain.indentation import IndentationModel
from layout_guard.domain.source_text import SourceText
from layout_guard.domain.syntax_tree import SyntaxTree

__all__ = [
    "Fixer",
    "Handler",
    "OptionSpec",
    "RuleContext",
    "StyleRule",
    "resolve_options",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionSpec:
    """Declared configuration option of a rule."""

    type: type
    default: object
    minimum: int | None = None
    description: str = ""

    def coerce(self, name: str, raw: object) -> object:
        """Return raw if it has the right type and minimum, else the default (with a warning)."""
        if raw is None:
            return self.default
        # bool is an int subclass; never accept it for integer options.
        if isinstance(raw, bool) and self.type is not bool:
            valid = False
        else:
            valid = isinstance(raw, self.type)
        if valid and self.minimum is not None and isinstance(raw, int):
            valid = raw >= self.minimum
        if not valid:
            logger.warning(
                "Invalid value %r for option '%s'; using default %r.",
                raw, name, self.default)
            return self.default
        return raw


def resolve_options(
    schema: Mapping[str, OptionSpec],
    raw: Mapping[str, object] | None,
) -> dict[str, object]:
    """Resolve raw option values against a schema. Unknown keys are ignored."""
    raw = raw or {}
    for key in raw:
        if key not in schema:
            logger.warning("Unknown rule option '%s' ignored.", key)
    return {name: spec.coerce(name, raw.get(name)) for name, spec in schema.items()}


class Fixer:
    """Capability handed to fix callbacks."""

    @staticmethod
    def replace_range(text_range: TextRange, text: str) -> Fix:
        return Fix(range=text_range, text=text)


FixFunction = Callable[[Fixer], Fix | None]


class RuleContext:
    """
    Per-(rule, file) view handed to handlers: tree, tokens, line model, report().

    Violations accumulate in an ordinary list owned by this context.
    """

    def __init__(
        self,
        rule: "StyleRule",
        tree: SyntaxTree,
        indentation: IndentationModel,
    ) -> None:
        self.rule = rule
        self.tree = tree
        self.indentation = indentation
        self.violations: list[Violation] = []
        self._fixer = Fixer()

    @property
    def source(self) -> SourceText:
        return self.tree.source

    def report(
        self,
        anchor: SyntaxNode | Token,
        message: str,
        fix: FixFunction | None = None,
    ) -> Violation:
        computed = fix(self._fixer) if fix is not None else None
        violation = Violation(
            code=self.rule.code,
            symbol=self.rule.symbol,
            message=message,
            path=self.tree.source.path,
            position=anchor.start,
            fix=computed,
        )
        self.violations.append(violation)
        return violation


Handler = Callable[[SyntaxNode, RuleContext], None]


class StyleRule(Protocol):
    """A layout rule: identity, schema, and node-kind handlers."""

    code: str
    symbol: str
    description: str
    fixable: bool
    options_schema: Mapping[str, OptionSpec]

    def handlers(self) -> Mapping[NodeKind, Handler]:
        """Map node kinds to handler callables."""
        ...

    def option_values(self) -> dict[str, object]:
        """Effective option values; rules keep each resolved option as an attribute of the same name."""
        return {
            name: getattr(self, name, spec.default)
            for name, spec in self.options_schema.items()
        }
