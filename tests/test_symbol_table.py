import math
import unittest

from CalcModules import error as E
from CalcModules.SymbolTable import SymbolTable


class TestSymbolTable(unittest.TestCase):
    def setUp(self):
        self.symbols = SymbolTable()

    def test_initial_values(self):
        self.assertEqual(self.symbols.get("pi"), math.pi)
        self.assertEqual(self.symbols.get("e"), math.e)
        self.assertIsNone(self.symbols.get("ans"))
        self.assertIsNone(self.symbols.get("A"))
        self.assertIsNone(self.symbols.get("Z"))
        self.assertEqual(self.symbols.defined(), {"e": math.e, "pi": math.pi})

    def test_set_user_slot_and_ans(self):
        self.symbols.set("Q", 4)
        self.symbols.set("ans", 2.5)
        self.assertEqual(self.symbols.get("Q"), 4.0)
        self.assertEqual(self.symbols.defined()["ans"], 2.5)

    def test_membership(self):
        self.assertIn("e", self.symbols)
        self.assertIn("ans", self.symbols)
        self.assertNotIn("x", self.symbols)
        self.assertNotIn("sin", self.symbols)

    def test_unknown_and_read_only_names(self):
        with self.assertRaises(E.SymbolError) as ctx:
            self.symbols.set("x", 1.0)
        self.assertEqual(ctx.exception.code, "3400")

        with self.assertRaises(E.SymbolError) as ctx:
            self.symbols.set("pi", 3.0)
        self.assertEqual(ctx.exception.code, "3401")
        self.assertEqual(self.symbols.get("pi"), math.pi)

        with self.assertRaises(E.SymbolError):
            self.symbols.get("foo")


if __name__ == "__main__":
    unittest.main()
