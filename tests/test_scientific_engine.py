import math
import unittest

from CalcModules import ScientificEngine as S
from CalcModules.Result import Success, Failure
from CalcModules.ScientificEngine import PrecedenceClass


class TestOperators(unittest.TestCase):
    def test_add(self):
        self.assertEqual(S.add([1.0, 2.0, 3.5]), Success(6.5))
        self.assertEqual(S.add([]), Failure("No operands provided for +", code="3103"))

    def test_subtract(self):
        self.assertEqual(S.subtract([10.0, 2.0, 3.0]), Success(5.0))
        self.assertEqual(S.subtract([4.0]), Success(4.0))
        self.assertFalse(S.subtract([]).successful)

    def test_multiply(self):
        self.assertEqual(S.multiply([2.0, 3.0, 4.0]), Success(24.0))
        self.assertEqual(S.multiply([]).code, "3103")

    def test_divide(self):
        self.assertEqual(S.divide([24.0, 2.0, 3.0]), Success(4.0))
        self.assertEqual(S.divide([7.0]), Success(7.0))
        self.assertEqual(S.divide([]).reason, "No operands provided for /")

    def test_divide_by_zero_follows_ieee(self):
        self.assertEqual(S.divide([5.0, 0.0]).value, math.inf)
        self.assertEqual(S.divide([-5.0, 0.0]).value, -math.inf)
        self.assertTrue(math.isnan(S.divide([0.0, 0.0]).value))

    def test_exponent(self):
        self.assertEqual(S.exponent([2.0, 10.0]), Success(1024.0))
        self.assertEqual(
            S.exponent([2.0]),
            Failure("Invalid number of operands for ^ (required operands: 2)", code="3102"),
        )

    def test_exponent_edge_values(self):
        self.assertEqual(S.exponent([10.0, 400.0]).value, math.inf)
        self.assertEqual(S.exponent([-10.0, 401.0]).value, -math.inf)
        self.assertEqual(S.exponent([0.0, -1.0]).value, math.inf)
        self.assertTrue(math.isnan(S.exponent([-8.0, 1.0 / 3.0]).value))


class TestFunctions(unittest.TestCase):
    def test_root(self):
        self.assertEqual(S.root([9.0]), Success(3.0))
        self.assertAlmostEqual(S.root([27.0, 3.0]).value, 3.0, places=10)
        self.assertTrue(math.isnan(S.root([-1.0]).value))
        self.assertIn("sqrt", S.root([1.0, 2.0, 3.0]).reason)

    def test_logarithm(self):
        self.assertAlmostEqual(S.logarithm([math.e]).value, 1.0, places=12)
        self.assertAlmostEqual(S.logarithm([8.0, 2.0]).value, 3.0, places=12)
        self.assertEqual(S.logarithm([0.0]).value, -math.inf)
        self.assertTrue(math.isnan(S.logarithm([-1.0]).value))
        self.assertEqual(S.logarithm([]).code, "3102")

    def test_trigonometry_in_radians(self):
        self.assertEqual(S.sin([0.0]), Success(0.0))
        self.assertEqual(S.cos([0.0]), Success(1.0))
        self.assertEqual(S.tan([0.0]), Success(0.0))
        self.assertAlmostEqual(S.sin([math.pi / 2]).value, 1.0, places=12)

    def test_reciprocal_trigonometry(self):
        self.assertAlmostEqual(S.csc([math.pi / 2]).value, 1.0, places=12)
        self.assertEqual(S.sec([0.0]), Success(1.0))
        self.assertAlmostEqual(S.cot([math.pi / 4]).value, 1.0, places=12)
        self.assertEqual(S.cot([0.0]).value, math.inf)

    def test_trigonometry_arity(self):
        self.assertEqual(
            S.sin([1.0, 2.0]),
            Failure("Invalid number of operands for sin (required operands: 1)", code="3102"),
        )
        # csc/sec/cot report the failure of the function they are built on
        self.assertIn("for sin", S.csc([]).reason)
        self.assertIn("for cos", S.sec([]).reason)
        self.assertIn("for tan", S.cot([1.0, 2.0]).reason)

    def test_sin_of_infinity_is_nan(self):
        self.assertTrue(math.isnan(S.sin([math.inf]).value))


class TestTables(unittest.TestCase):
    def test_operation_orders(self):
        self.assertIs(S.OPERATION_ORDERS["sin"], PrecedenceClass.FUNCTIONS_AND_BRACKETS)
        self.assertIs(S.OPERATION_ORDERS["^"], PrecedenceClass.EXPONENTS)
        self.assertIs(S.OPERATION_ORDERS["/"], PrecedenceClass.MULTIPLY_DIVIDE)
        self.assertIs(S.OPERATION_ORDERS["-"], PrecedenceClass.ADD_SUBTRACT)
        self.assertEqual(set(S.FUNCTIONS), {"sqrt", "ln", "sin", "cos", "tan", "csc", "sec", "cot"})

    def test_compare(self):
        self.assertTrue(S.compare(0.1 + 0.2, 0.3))
        self.assertTrue(S.compare(math.inf, math.inf))
        self.assertFalse(S.compare(1.0, 2.0))
        self.assertFalse(S.compare(1.0, 1.1, tolerance=0.01))


if __name__ == "__main__":
    unittest.main()
