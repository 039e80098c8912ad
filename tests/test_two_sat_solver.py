"""
Tests for the implication-graph 2-SAT solver.
"""

import unittest

from satengine.formula import Clause, Formula, Literal, Variable
from satengine.solvers import SolverStatus, TwoSatSolver
from satengine.utils.exceptions import InvalidClauseError

from sat_helpers import brute_force_satisfiable, fm, satisfies, seeded_formulas


class TestTwoSatScenarios(unittest.TestCase):
    """Hand-written scenarios."""

    def setUp(self):
        self.solver = TwoSatSolver()

    def test_single_binary_clause(self):
        result = self.solver.solve(fm(("a", "b")))
        self.assertTrue(result.is_sat)
        self.assertTrue(result.assignment[Variable("a")] or result.assignment[Variable("b")])

    def test_single_negative_unit(self):
        result = self.solver.solve(fm(("~a",)))
        self.assertTrue(result.is_sat)
        self.assertFalse(result.assignment[Variable("a")])

    def test_contradicting_units(self):
        result = self.solver.solve(fm(("a",), ("~a",)))
        self.assertTrue(result.is_unsat)
        self.assertIsNone(result.assignment)

    def test_all_four_binary_clauses(self):
        formula = fm(("a", "b"), ("~a", "b"), ("a", "~b"), ("~a", "~b"))
        result = self.solver.solve(formula)
        self.assertEqual(result.status, SolverStatus.UNSATISFIABLE)
        self.assertIn(result.statistics["conflict_variable"], {"a", "b"})

    def test_empty_clause_is_unsat(self):
        result = self.solver.solve(Formula([Clause(), Clause([Literal.pos("a")])]))
        self.assertTrue(result.is_unsat)

    def test_empty_formula_is_sat(self):
        result = self.solver.solve(Formula())
        self.assertTrue(result.is_sat)
        self.assertEqual(result.assignment, {})

    def test_wide_clause_is_usage_error(self):
        with self.assertRaises(InvalidClauseError):
            self.solver.solve(fm(("a", "b", "c")))

    def test_width_checked_before_empty_clause(self):
        formula = Formula([Clause(), Clause([Literal.pos(n) for n in "abc"])])
        with self.assertRaises(InvalidClauseError):
            self.solver.solve(formula)

    def test_every_variable_assigned(self):
        formula = fm(("a", "b"), ("~c", "d"), ("e",))
        result = self.solver.solve(formula)
        self.assertEqual(set(result.assignment), set(formula.variables()))

    def test_forced_chain(self):
        """A unit at the head of an implication chain forces the whole chain."""
        formula = fm(("x1",), ("~x1", "x2"), ("~x2", "x3"), ("~x3", "x4"))
        result = self.solver.solve(formula)
        self.assertTrue(all(result.assignment.values()))

    def test_chain_assignment_respects_implication_direction(self):
        """
        x1 -> x2 -> x3 -> ~x1 leaves x1 = FALSE as the only option. Walking
        the components from sources to sinks would commit x1 = TRUE first.
        """
        formula = fm(("~x1", "x2"), ("~x2", "x3"), ("x1", "~x3"), ("~x1", "~x2"), ("x3", "x2"))
        self.assertFalse(brute_force_satisfiable(formula))
        self.assertTrue(self.solver.solve(formula).is_unsat)

        formula = fm(("~x1", "x2"), ("~x2", "x3"), ("~x1", "~x3"))
        result = self.solver.solve(formula)
        self.assertTrue(result.is_sat)
        self.assertTrue(satisfies(formula, result.assignment))
        self.assertFalse(result.assignment[Variable("x1")])

    def test_statistics(self):
        self.solver.solve(fm(("a", "b")))
        stats = self.solver.get_statistics()
        self.assertEqual(stats["solver_name"], "2sat")
        self.assertEqual(stats["vertices"], 4)
        self.assertEqual(stats["edges"], 2)


class TestTwoSatProperties(unittest.TestCase):
    """Soundness and completeness against a brute-force oracle."""

    def test_agrees_with_brute_force(self):
        solver = TwoSatSolver()
        seen = {True: 0, False: 0}
        for formula in seeded_formulas(seed=2024, count=300, num_vars=6, num_clauses=10, max_width=2):
            expected = brute_force_satisfiable(formula)
            result = solver.solve(formula)
            seen[expected] += 1
            self.assertEqual(result.is_sat, expected, msg=str(formula))
            self.assertNotEqual(result.status, SolverStatus.UNKNOWN)
            if result.is_sat:
                self.assertTrue(satisfies(formula, result.assignment), msg=str(formula))
        # the sample has to exercise both outcomes to mean anything
        self.assertGreater(seen[True], 0)
        self.assertGreater(seen[False], 0)

    def test_literal_and_negation_never_both_true(self):
        solver = TwoSatSolver()
        for formula in seeded_formulas(seed=5, count=50, num_vars=5, num_clauses=6, max_width=2):
            result = solver.solve(formula)
            if result.is_sat:
                env = result.environment
                for variable in formula.variables():
                    pos = env.eval_literal(Literal(variable, True))
                    neg = env.eval_literal(Literal(variable, False))
                    self.assertIsNot(pos, neg)


if __name__ == "__main__":
    unittest.main()
