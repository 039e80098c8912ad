"""
Unit tests for the CNF model: literals, clauses and formulas.
"""

import unittest

from satengine.formula import Clause, Formula, Literal, ReduceStatus, Variable

from sat_helpers import fm, lits


class TestLiteral(unittest.TestCase):
    """Test cases for Variable and Literal."""

    def test_double_negation(self):
        """Negating twice gives back an equal literal."""
        a = Literal.pos("a")
        self.assertEqual(a.negate().negate(), a)
        self.assertEqual(~~a, a)

    def test_negation_flips_polarity_only(self):
        a = Literal.pos("a")
        na = a.negate()
        self.assertEqual(na.variable, a.variable)
        self.assertFalse(na.positive)
        self.assertNotEqual(a, na)

    def test_value_semantics(self):
        """Literals over the same variable and polarity are interchangeable."""
        self.assertEqual(Literal.neg("x"), Literal(Variable("x"), False))
        self.assertEqual(hash(Literal.neg("x")), hash(Literal(Variable("x"), False)))
        self.assertEqual(len({Literal.pos("x"), Literal.pos("x")}), 1)

    def test_str(self):
        self.assertEqual(str(Literal.pos("a")), "a")
        self.assertEqual(str(Literal.neg("a")), "~a")


class TestClause(unittest.TestCase):
    """Test cases for Clause construction and reduction."""

    def test_duplicates_collapse_and_order_is_kept(self):
        clause = Clause(lits("b", "a", "b"))
        self.assertEqual(clause.size, 2)
        self.assertEqual(clause.literals, tuple(lits("b", "a")))
        self.assertEqual(clause.choose_literal(), Literal.pos("b"))

    def test_equality_ignores_order(self):
        self.assertEqual(Clause(lits("a", "b")), Clause(lits("b", "a")))
        self.assertEqual(hash(Clause(lits("a", "b"))), hash(Clause(lits("b", "a"))))

    def test_empty_clause(self):
        clause = Clause()
        self.assertTrue(clause.is_empty())
        with self.assertRaises(ValueError):
            clause.choose_literal()

    def test_add_returns_copy(self):
        clause = Clause(lits("a"))
        bigger = clause.add(Literal.neg("b"))
        self.assertEqual(len(clause), 1)
        self.assertEqual(len(bigger), 2)

    def test_reduce_eliminates_satisfied_clause(self):
        outcome = Clause(lits("a", "b")).reduce(Literal.pos("a"))
        self.assertEqual(outcome.status, ReduceStatus.ELIMINATED)
        self.assertIsNone(outcome.result)

    def test_reduce_removes_negation(self):
        outcome = Clause(lits("~a", "b", "c")).reduce(Literal.pos("a"))
        self.assertEqual(outcome.status, ReduceStatus.REDUCED)
        self.assertEqual(outcome.result, Clause(lits("b", "c")))

    def test_reduce_falsifies_unit_negation(self):
        outcome = Clause(lits("~a")).reduce(Literal.pos("a"))
        self.assertEqual(outcome.status, ReduceStatus.FALSIFIED)
        self.assertTrue(outcome.falsified)

    def test_reduce_unrelated_literal(self):
        clause = Clause(lits("b", "c"))
        outcome = clause.reduce(Literal.pos("a"))
        self.assertEqual(outcome.status, ReduceStatus.UNCHANGED)
        self.assertIs(outcome.result, clause)

    def test_reduce_never_grows_clause(self):
        clause = Clause(lits("a", "~b", "c"))
        for lit in lits("a", "~a", "b", "~b", "d"):
            outcome = clause.reduce(lit)
            if outcome.result is not None:
                self.assertLessEqual(len(outcome.result), len(clause))
        # the original clause is untouched
        self.assertEqual(clause, Clause(lits("a", "~b", "c")))


class TestFormula(unittest.TestCase):
    """Test cases for Formula."""

    def test_add_and_remove_return_new_formulas(self):
        formula = fm(("a", "b"))
        extended = formula.add_clause(Clause(lits("~a")))
        self.assertEqual(len(formula), 1)
        self.assertEqual(len(extended), 2)

        shrunk = extended.remove_clause(Clause(lits("b", "a")))
        self.assertEqual(len(shrunk), 1)
        self.assertEqual(len(extended), 2)
        self.assertIs(formula.remove_clause(Clause(lits("z"))), formula)

    def test_smallest_clause_first_on_ties(self):
        formula = fm(("a", "b", "c"), ("d", "e"), ("f", "g"))
        self.assertEqual(formula.smallest_clause(), Clause(lits("d", "e")))
        with self.assertRaises(ValueError):
            Formula().smallest_clause()

    def test_properties(self):
        formula = fm(("b", "~a"), ("a", "c", "d"))
        self.assertEqual(formula.max_clause_width, 3)
        self.assertEqual(
            formula.variables(), [Variable("b"), Variable("a"), Variable("c"), Variable("d")]
        )
        self.assertEqual(formula.num_variables, 4)
        self.assertFalse(formula.has_empty_clause)
        self.assertTrue(formula.add_clause(Clause()).has_empty_clause)
        self.assertEqual(Formula().max_clause_width, 0)

    def test_reduce(self):
        formula = fm(("a", "b"), ("~a", "c"), ("d",))
        outcome = formula.reduce(Literal.pos("a"))
        self.assertEqual(outcome.status, ReduceStatus.REDUCED)
        self.assertEqual(outcome.result, fm(("c",), ("d",)))

    def test_reduce_detects_conflict(self):
        formula = fm(("a",), ("~a",))
        self.assertTrue(formula.reduce(Literal.pos("a")).falsified)
        self.assertTrue(formula.reduce(Literal.neg("a")).falsified)

    def test_reduce_to_empty_formula(self):
        outcome = fm(("a", "b"), ("a",)).reduce(Literal.pos("a"))
        self.assertTrue(outcome.result.is_empty())


if __name__ == "__main__":
    unittest.main()
