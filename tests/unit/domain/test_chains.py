import unittest

from layout_guard.domain.chains import ChainAnalyzer
from layout_guard.domain.entities import NodeKind
from layout_test_utils import parse


class TestChainAnalyzer(unittest.TestCase):
    def _binaries(self, tree):
        return [n for n in tree.preorder() if n.kind is NodeKind.BINARY]

    def test_chain_root_walks_up_same_operator_lefts(self) -> None:
        tree = parse("const v = a\n\t|| b\n\t|| c\n\t|| d;\n")
        outer, middle, inner = self._binaries(tree)
        analyzer = ChainAnalyzer(tree)
        self.assertEqual(analyzer.chain_root(inner), outer)
        self.assertEqual(analyzer.chain_root(middle), outer)
        self.assertEqual(analyzer.chain_root(outer), outer)

    def test_leftmost_operand_of_chain(self) -> None:
        tree = parse("const v = a || b || c;\n")
        outer = self._binaries(tree)[0]
        leftmost = ChainAnalyzer(tree).leftmost_operand(outer)
        self.assertEqual(tree.text(leftmost), "a")

    def test_different_operator_stops_the_chain(self) -> None:
        tree = parse("const v = a && b || c;\n")
        outer, inner = self._binaries(tree)
        self.assertEqual(outer.operator, "||")
        self.assertEqual(inner.operator, "&&")
        analyzer = ChainAnalyzer(tree)
        self.assertEqual(analyzer.chain_root(inner), inner)
        # The && sub-expression is the leftmost operand of the || chain.
        self.assertEqual(analyzer.leftmost_operand(outer), inner)

    def test_right_operand_is_not_part_of_the_chain(self) -> None:
        tree = parse("const v = a || (b || c);\n")
        outer = self._binaries(tree)[0]
        inner = self._binaries(tree)[1]
        self.assertEqual(ChainAnalyzer(tree).chain_root(inner), inner)
        self.assertNotEqual(outer, inner)

    def test_condition_reference_unwraps_test_chain(self) -> None:
        tree = parse("const v = ready && valid ? yes : no;\n")
        (conditional,) = [n for n in tree.preorder() if n.kind is NodeKind.CONDITIONAL]
        reference = ChainAnalyzer(tree).condition_reference(conditional)
        self.assertEqual(tree.text(reference), "ready")

    def test_condition_reference_for_plain_test(self) -> None:
        tree = parse("const v = ready ? yes : no;\n")
        (conditional,) = [n for n in tree.preorder() if n.kind is NodeKind.CONDITIONAL]
        self.assertEqual(tree.text(ChainAnalyzer(tree).condition_reference(conditional)), "ready")
