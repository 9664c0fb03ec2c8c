# SymbolTable.py
"""Named constants available to expressions.

The name set is fixed: the user slots A-Z and 'ans' start unset, 'e' and 'pi'
always hold their mathematical values. A table belongs to one console session
and is passed explicitly into the tokenizer.
"""

import math
import string

from . import error as E


USER_DEFINABLE_CONSTANTS = list(string.ascii_uppercase)
READ_ONLY_CONSTANTS = {"e": math.e, "pi": math.pi}


class SymbolTable:

    def __init__(self):
        self._values = {name: None for name in USER_DEFINABLE_CONSTANTS}
        self._values["ans"] = None
        self._values.update(READ_ONLY_CONSTANTS)

    def __contains__(self, name):
        return name in self._values

    def get(self, name):
        """Return the value bound to name, or None if the slot is unset."""
        if name not in self._values:
            raise E.SymbolError(f"Unknown symbol: {name}", code="3400")
        return self._values[name]

    def set(self, name, value):
        if name not in self._values:
            raise E.SymbolError(f"Unknown symbol: {name}", code="3400")
        if name in READ_ONLY_CONSTANTS:
            raise E.SymbolError(f"Constant is read-only: {name}", code="3401")
        self._values[name] = None if value is None else float(value)

    def defined(self):
        """Return {name: value} for every slot that currently holds a value."""
        return {name: value for name, value in self._values.items() if value is not None}

    def __repr__(self):
        return f"SymbolTable({self.defined()!r})"
