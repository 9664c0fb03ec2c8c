# ScientificEngine.py
"""Operation library: arithmetic operators and unary scientific functions.

Every operation takes a list of floats and returns Success(value) or
Failure(reason). Float arithmetic follows IEEE semantics: division by zero
gives +-inf (or nan for 0/0), math domain errors give nan / -inf and overflow
gives inf, instead of raising.
"""

import math
import logging
from enum import Enum

from .Result import Success, Failure

logger = logging.getLogger(__name__)


class PrecedenceClass(Enum):
    """BEDMAS tiers, highest binding priority first."""
    FUNCTIONS_AND_BRACKETS = 1
    EXPONENTS = 2
    MULTIPLY_DIVIDE = 3
    ADD_SUBTRACT = 4


# -----------------------------
# IEEE helpers
# -----------------------------

def _ieee_divide(dividend, divisor):
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


def _is_odd_integer(number):
    return math.isfinite(number) and number == int(number) and int(number) % 2 == 1


def _ieee_pow(base, exponent):
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 ** negative -> inf, negative ** fraction -> nan
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        logger.debug("pow(%r, %r) is outside the real domain", base, exponent)
        return math.nan


def _ln(number):
    if math.isnan(number) or number < 0:
        logger.debug("ln(%r) is outside the real domain", number)
        return math.nan
    if number == 0:
        return -math.inf
    return math.log(number)


def _guarded(function, number):
    try:
        return function(number)
    except ValueError:
        logger.debug("%s(%r) is outside the real domain", function.__name__, number)
        return math.nan


def _arity_failure(name, required):
    return Failure(f"Invalid number of operands for {name} (required operands: {required})", code="3102")


# -----------------------------
# Operators
# -----------------------------

def add(elements):
    """Sum of all elements."""
    if not elements:
        return Failure("No operands provided for +", code="3103")
    return Success(float(sum(elements)))


def subtract(elements):
    """First element minus the sum of the rest; a single element is returned as-is."""
    if not elements:
        return Failure("No operands provided for -", code="3103")
    if len(elements) == 1:
        return Success(elements[0])
    return Success(elements[0] - add(elements[1:]).value)


def multiply(elements):
    """Product of all elements."""
    if not elements:
        return Failure("No operands provided for *", code="3103")
    product = 1.0
    for number in elements:
        product *= number
    return Success(product)


def divide(elements):
    """First element divided by the product of the rest; a single element is returned as-is."""
    if not elements:
        return Failure("No operands provided for /", code="3103")
    if len(elements) == 1:
        return Success(elements[0])
    return Success(_ieee_divide(elements[0], multiply(elements[1:]).value))


def exponent(elements):
    if len(elements) != 2:
        return _arity_failure("^", 2)
    return Success(_ieee_pow(elements[0], elements[1]))


# -----------------------------
# Functions
# -----------------------------

def root(elements):
    """Square root of one element, or the n-th root for [number, n]."""
    if len(elements) == 1:
        number = elements[0]
        return Success(math.nan if number < 0 else _guarded(math.sqrt, number))
    if len(elements) == 2:
        return Success(_ieee_pow(elements[0], _ieee_divide(1.0, elements[1])))
    return _arity_failure("sqrt", "1 or 2")


def logarithm(elements):
    """Natural logarithm of one element, or log of elements[0] to base elements[1]."""
    if len(elements) == 1:
        return Success(_ln(elements[0]))
    if len(elements) == 2:
        return Success(_ieee_divide(_ln(elements[0]), _ln(elements[1])))
    return _arity_failure("ln", "1 or 2")


def sin(elements):
    if len(elements) != 1:
        return _arity_failure("sin", 1)
    return Success(_guarded(math.sin, elements[0]))


def cos(elements):
    if len(elements) != 1:
        return _arity_failure("cos", 1)
    return Success(_guarded(math.cos, elements[0]))


def tan(elements):
    if len(elements) != 1:
        return _arity_failure("tan", 1)
    return Success(_guarded(math.tan, elements[0]))


def _reciprocal_of(function, elements):
    result = function(elements)
    if not result.successful:
        return result
    return Success(_ieee_divide(1.0, result.value))


def csc(elements):
    return _reciprocal_of(sin, elements)


def sec(elements):
    return _reciprocal_of(cos, elements)


def cot(elements):
    return _reciprocal_of(tan, elements)


def compare(left, right, tolerance=1e-10):
    """Return True if both values are equal within an absolute tolerance."""
    if left == right:
        return True
    return abs(left - right) <= tolerance


# Binary operators and unary functions, keyed by the text that names them in an expression
OPERATORS = {
    "^": exponent,
    "*": multiply,
    "/": divide,
    "+": add,
    "-": subtract,
}

FUNCTIONS = {
    "sqrt": root,
    "ln": logarithm,
    "sin": sin,
    "cos": cos,
    "tan": tan,
    "csc": csc,
    "sec": sec,
    "cot": cot,
}

OPERATION_ORDERS = {
    "+": PrecedenceClass.ADD_SUBTRACT,
    "-": PrecedenceClass.ADD_SUBTRACT,
    "*": PrecedenceClass.MULTIPLY_DIVIDE,
    "/": PrecedenceClass.MULTIPLY_DIVIDE,
    "^": PrecedenceClass.EXPONENTS,
    **{name: PrecedenceClass.FUNCTIONS_AND_BRACKETS for name in FUNCTIONS},
}
