import unittest

from layout_guard.domain.rules import OptionSpec, resolve_options
from layout_guard.domain.rules.catalog import RULE_CLASSES, RuleCatalog
from layout_guard.domain.rules.lambda_body_newline import LambdaBodyNewlineRule


class TestRuleCatalog(unittest.TestCase):
    def test_all_rules_enabled_by_default(self) -> None:
        rules = RuleCatalog.create_rules()
        self.assertEqual(
            [r.code for r in rules],
            ["LG001", "LG002", "LG003", "LG004", "LG005", "LG006"],
        )
        self.assertTrue(all(r.fixable for r in rules))

    def test_codes_and_symbols_are_unique(self) -> None:
        codes = [cls.code for cls in RULE_CLASSES]
        symbols = [cls.symbol for cls in RULE_CLASSES]
        self.assertEqual(len(set(codes)), len(codes))
        self.assertEqual(len(set(symbols)), len(symbols))

    def test_canonical_code_accepts_code_or_symbol(self) -> None:
        self.assertEqual(RuleCatalog.canonical_code("lg003"), "LG003")
        self.assertEqual(RuleCatalog.canonical_code("assignment-newline"), "LG003")
        self.assertIsNone(RuleCatalog.canonical_code("no-such-rule"))

    def test_disable_by_code_and_symbol(self) -> None:
        rules = RuleCatalog.create_rules(disabled=["LG001", "closing-paren-same-line"])
        codes = [r.code for r in rules]
        self.assertNotIn("LG001", codes)
        self.assertNotIn("LG006", codes)
        self.assertEqual(len(codes), 4)

    def test_unknown_rule_name_warns(self) -> None:
        with self.assertLogs("layout_guard.domain.rules.catalog", level="WARNING") as logs:
            rules = RuleCatalog.create_rules(disabled=["LG999"])
        self.assertEqual(len(rules), 6)
        self.assertIn("LG999", logs.output[0])

    def test_only_narrows_the_rule_set(self) -> None:
        rules = RuleCatalog.create_rules(only=["LG002", "assignment-newline"])
        self.assertEqual([r.code for r in rules], ["LG002", "LG003"])

    def test_rule_options_reach_the_rule(self) -> None:
        rules = RuleCatalog.create_rules(
            rule_options={"lambda-body-newline": {"max_length": 80}},
            only=["LG001"],
        )
        (rule,) = rules
        self.assertIsInstance(rule, LambdaBodyNewlineRule)
        self.assertEqual(rule.max_length, 80)

    def test_options_for_rule_without_schema_are_ignored(self) -> None:
        with self.assertLogs("layout_guard.domain.rules.catalog", level="WARNING"):
            rules = RuleCatalog.create_rules(rule_options={"LG003": {"x": 1}}, only=["LG003"])
        self.assertEqual(len(rules), 1)


class TestResolveOptions(unittest.TestCase):
    def setUp(self) -> None:
        self.schema = {"max_length": OptionSpec(type=int, default=40, minimum=1)}

    def test_missing_value_uses_default(self) -> None:
        self.assertEqual(resolve_options(self.schema, None), {"max_length": 40})

    def test_below_minimum_uses_default(self) -> None:
        with self.assertLogs("layout_guard.domain.rules", level="WARNING"):
            resolved = resolve_options(self.schema, {"max_length": 0})
        self.assertEqual(resolved, {"max_length": 40})

    def test_unknown_option_warns(self) -> None:
        with self.assertLogs("layout_guard.domain.rules", level="WARNING") as logs:
            resolved = resolve_options(self.schema, {"maxLength": 10})
        self.assertEqual(resolved, {"max_length": 40})
        self.assertIn("maxLength", logs.output[0])

    def test_option_values_reflect_configured_options(self) -> None:
        self.assertEqual(LambdaBodyNewlineRule({"max_length": 60}).option_values(), {"max_length": 60})
        self.assertEqual(LambdaBodyNewlineRule().option_values(), {"max_length": 40})
        rules = RuleCatalog.create_rules()
        self.assertEqual(rules[2].option_values(), {})
