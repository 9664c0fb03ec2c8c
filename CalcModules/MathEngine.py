# MathEngine.py
"""""
Core calculation engine for the calculator.

Pipeline
--------
1) Tokenizer: converts a raw input string into a flat list of tokens (see Tokenizer.py).
2) Bracket resolver: collapses the rightmost (innermost) bracket group into a single
   number until no brackets remain.
3) Precedence evaluator: reduces a bracket-free token list in BEDMAS order:
   functions (right to left) -> exponents -> multiply/divide -> add/subtract
   (each left to right).
4) Formatter: renders results for display.

Every stage returns a Success or Failure; the first failure aborts the evaluation.
"""""

import math
import logging
from decimal import Decimal, ROUND_HALF_EVEN, localcontext

from . import ScientificEngine
from . import Tokenizer
from .ScientificEngine import PrecedenceClass
from .Result import Success, Failure
from .Tokenizer import Token, TokenKind

logger = logging.getLogger(__name__)

BINARY_ORDER = [
    PrecedenceClass.EXPONENTS,
    PrecedenceClass.MULTIPLY_DIVIDE,
    PrecedenceClass.ADD_SUBTRACT,
]


# -----------------------------
# Index bookkeeping
# -----------------------------

def classify(tokens):
    """Bucket the index of every operator / function token by its precedence class.

    Returns a dict with one ascending list of indices per PrecedenceClass.
    """
    buckets = {precedence: [] for precedence in PrecedenceClass}
    for index, token in enumerate(tokens):
        if token.kind in (TokenKind.OPERATOR, TokenKind.FUNCTION):
            buckets[ScientificEngine.OPERATION_ORDERS[token.value]].append(index)
    return buckets


def shunt(buckets, consumed_index, width):
    """Move every bucketed index above consumed_index down by width.

    Called after a reduction shrank the token list by width elements.
    """
    for precedence, indices in buckets.items():
        buckets[precedence] = [index - width if index > consumed_index else index for index in indices]


# -----------------------------
# Precedence evaluator
# -----------------------------

def _apply_function(tokens, index):
    """Apply the function at tokens[index] to the number on its right."""
    name = tokens[index].value

    if index == len(tokens) - 1:
        return Failure(f"No arguments supplied for {name} function", code="3101")

    argument = tokens[index + 1]
    if not argument.is_number:
        return Failure(f"{argument} is not a number...", code="3200")

    return ScientificEngine.FUNCTIONS[name]([argument.value])


def _apply_operator(tokens, index):
    """Apply the binary operator at tokens[index] to its neighbours."""
    symbol = tokens[index].value

    if index == 0 or index == len(tokens) - 1:
        return Failure(f"Not enough arguments (requires 2) supplied for {symbol}", code="3100")

    left, right = tokens[index - 1], tokens[index + 1]
    for operand in (left, right):
        if not operand.is_number:
            return Failure(f"{operand} is not a number...", code="3200")

    return ScientificEngine.OPERATORS[symbol]([left.value, right.value])


def reduce(tokens):
    """Evaluate a bracket-free token list in place.

    The list shrinks to a single number on success. Any failure aborts at once.
    """
    buckets = classify(tokens)

    # Functions from rightmost to leftmost, so 'sin cos 0' applies cos first
    functions = buckets[PrecedenceClass.FUNCTIONS_AND_BRACKETS]
    while functions:
        index = functions.pop()
        result = _apply_function(tokens, index)
        if not result.successful:
            return result

        logger.debug("%s %s -> %r", tokens[index], tokens[index + 1], result.value)
        tokens[index:index + 2] = [Token.number(result.value)]
        shunt(buckets, index, 1)
        functions = buckets[PrecedenceClass.FUNCTIONS_AND_BRACKETS]

    for precedence in BINARY_ORDER:
        while buckets[precedence]:
            index = buckets[precedence].pop(0)
            result = _apply_operator(tokens, index)
            if not result.successful:
                return result

            logger.debug("%s %s %s -> %r", tokens[index - 1], tokens[index], tokens[index + 1], result.value)
            tokens[index - 1:index + 2] = [Token.number(result.value)]
            shunt(buckets, index, 2)

    if len(tokens) != 1:
        return Failure("No more operators to apply to the remaining numbers", code="3300")

    return Success(tokens[0].value)


# -----------------------------
# Bracket resolver
# -----------------------------

def resolve(tokens):
    """Collapse bracket groups innermost first, then reduce what remains.

    Brackets are assumed balanced and non-empty (see Tokenizer.check_expression).
    """
    while any(token.is_bracket for token in tokens):
        open_index = max(index for index, token in enumerate(tokens)
                         if token.kind is TokenKind.OPEN_BRACKET)
        close_index = next(index for index in range(open_index + 1, len(tokens))
                           if tokens[index].kind is TokenKind.CLOSE_BRACKET)

        result = resolve(tokens[open_index + 1:close_index])
        if not result.successful:
            return result

        logger.debug("Bracket at %d collapsed to %r", open_index, result.value)
        tokens[open_index:close_index + 1] = [Token.number(result.value)]

    return reduce(tokens)


def evaluate(tokens):
    """Evaluate a token list produced by Tokenizer.tokenize."""
    return resolve(tokens)


# -----------------------------
# Result formatting
# -----------------------------

def _non_finite(value):
    if math.isnan(value):
        return "nan"
    return "inf" if value > 0 else "-inf"


def format_result(value, decimal_places=10):
    """Render a value for display with at most decimal_places decimals, trailing zeros dropped."""
    if not math.isfinite(value):
        return _non_finite(value)

    exact = Decimal(repr(value))
    with localcontext() as context:
        # Enough precision for quantize() on very large numbers
        context.prec = max(50, exact.adjusted() + decimal_places + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_EVEN)

    if rounded == 0:
        return "0"
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_literal(value):
    """Render a finite value as a plain decimal literal that tokenizes back to the same float."""
    if not math.isfinite(value):
        return _non_finite(value)
    return format(Decimal(repr(value)), "f")


# -----------------------------
# Public entry point
# -----------------------------

def interpret(problem, symbols):
    """Check and tokenize raw input.

    Returns (tokens, errors); tokens is None whenever errors is not empty.
    """
    errors = Tokenizer.check_expression(problem)
    if errors:
        return None, errors
    return Tokenizer.tokenize(problem, symbols)


def calculate(problem, symbols):
    """Main API: interpret -> evaluate. Returns Success(float) or Failure."""
    tokens, errors = interpret(problem, symbols)
    if errors:
        return Failure("\n".join(errors), code="3000")
    return evaluate(tokens)
