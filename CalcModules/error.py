# error.py
"""Error taxonomy for the calculator.

Every error carries a four-digit code. The evaluation pipeline never raises;
it returns Failure values tagged with one of these codes. The exceptions below
are raised at the edges (Result.unwrap, symbol table misuse, console commands) and
wrapped by the console session.
"""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class SyntaxError(MathError):
    pass

class ArityError(MathError):
    pass

class TypeError(MathError):
    pass

class ResidualError(MathError):
    pass

class SymbolError(MathError):
    pass


# Error codes are structured in:
# 1. Digit: Main Error
# 2. Digit: Error class (0 Syntax, 1 Arity, 2 Type, 3 Residual, 4 Symbol)
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "3000" : "Expression could not be interpreted: ", # + tokenizer messages
    "3002" : "No calculator history found for ", # + name

    "3100" : "Not enough arguments supplied for operator",
    "3101" : "No arguments supplied for function",
    "3102" : "Invalid number of operands",
    "3103" : "No operands provided",

    "3200" : "Operand is not a number",

    "3300" : "No more operators to apply to the remaining numbers",

    "3400" : "Unknown symbol: ", # + name
    "3401" : "Constant is read-only: ", # + name

    "6000" : "Clipboard unavailable",

    "9999" : "Unexpected Error: " #+error
}


_CLASS_BY_PREFIX = {
    "30" : SyntaxError,
    "31" : ArityError,
    "32" : TypeError,
    "33" : ResidualError,
    "34" : SymbolError,
}


def error_class(code):
    """Return the MathError subclass that owns the given code."""
    return _CLASS_BY_PREFIX.get(str(code)[:2], MathError)

