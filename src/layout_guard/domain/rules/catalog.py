"""Rule catalog: builds configured rule instances and resolves rule names."""

import logging
from collections.abc import Iterable, Mapping

from layout_guard.domain.rules import StyleRule
from layout_guard.domain.rules.assignment_continuation_indent import (
    AssignmentContinuationIndentRule,
)
from layout_guard.domain.rules.assignment_newline import AssignmentNewlineRule
from layout_guard.domain.rules.closing_paren_same_line import ClosingParenSameLineRule
from layout_guard.domain.rules.lambda_body_newline import LambdaBodyNewlineRule
from layout_guard.domain.rules.nested_literal_indent import NestedLiteralIndentRule
from layout_guard.domain.rules.operator_continuation_indent import (
    OperatorContinuationIndentRule,
)

logger = logging.getLogger(__name__)

RULE_CLASSES: tuple[type, ...] = (
    LambdaBodyNewlineRule,
    OperatorContinuationIndentRule,
    AssignmentNewlineRule,
    NestedLiteralIndentRule,
    AssignmentContinuationIndentRule,
    ClosingParenSameLineRule,
)


class RuleCatalog:
    """
    Creates rule instances from per-rule options.

    Rules are addressed by code (LG001) or symbol (lambda-body-newline).
    """

    @staticmethod
    def canonical_code(name: str) -> str | None:
        """Return the rule code for a code or symbol, or None if unknown."""
        wanted = name.strip()
        for rule_cls in RULE_CLASSES:
            if wanted.upper() == rule_cls.code or wanted.lower() == rule_cls.symbol:
                return str(rule_cls.code)
        return None

    @staticmethod
    def create_rules(
        rule_options: Mapping[str, Mapping[str, object]] | None = None,
        disabled: Iterable[str] = (),
        only: Iterable[str] = (),
    ) -> list[StyleRule]:
        """Instantiate every enabled rule, passing it its options table."""
        rule_options = rule_options or {}
        disabled_codes = RuleCatalog._resolve_names(disabled)
        only_codes = RuleCatalog._resolve_names(only)
        rules: list[StyleRule] = []
        for rule_cls in RULE_CLASSES:
            if rule_cls.code in disabled_codes:
                continue
            if only_codes and rule_cls.code not in only_codes:
                continue
            options = rule_options.get(rule_cls.symbol) or rule_options.get(rule_cls.code)
            if rule_cls.options_schema:
                rules.append(rule_cls(options))
            else:
                if options:
                    logger.warning("Rule '%s' takes no options; ignoring %r.", rule_cls.symbol, dict(options))
                rules.append(rule_cls())
        return rules

    @staticmethod
    def _resolve_names(names: Iterable[str]) -> set[str]:
        codes: set[str] = set()
        for name in names:
            code = RuleCatalog.canonical_code(name)
            if code is None:
                logger.warning("Unknown rule '%s' ignored.", name)
                continue
            codes.add(code)
        return codes
