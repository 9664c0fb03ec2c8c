# Tokenizer.py
"""
Tokenizer / grouper for calculator input.

Characters are scanned left to right and grouped into runs: a *number* run
(digits and '.') or a *command* run (letters, operator symbols, brackets).
Crossing from one run type to the other flushes the finished run:

- number runs become NUMBER tokens (append_number)
- command runs are split into operators, functions, brackets and constants
  (append_command); constants are substituted by their value right away

Errors are collected in an error log instead of aborting, so the user sees
every problem with the input at once. A non-empty log means the token list
must be discarded.
"""

import logging
from enum import Enum

from . import ScientificEngine

logger = logging.getLogger(__name__)

BRACKETS = {"(": ")", "[": "]"}
CLOSING_BRACKETS = set(BRACKETS.values())
NUMBER_CHARACTERS = set("0123456789.")


# -----------------------------
# Token types
# -----------------------------

class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"


class Token:
    """A classified unit of an expression: number, operator, function name or bracket."""

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value

    @classmethod
    def number(cls, value):
        return cls(TokenKind.NUMBER, float(value))

    @classmethod
    def operator(cls, symbol):
        return cls(TokenKind.OPERATOR, symbol)

    @classmethod
    def command(cls, text):
        """Build the token for an operator symbol, function name or bracket character."""
        if text in ScientificEngine.OPERATORS:
            return cls(TokenKind.OPERATOR, text)
        if text in ScientificEngine.FUNCTIONS:
            return cls(TokenKind.FUNCTION, text)
        if text in BRACKETS:
            return cls(TokenKind.OPEN_BRACKET, text)
        if text in CLOSING_BRACKETS:
            return cls(TokenKind.CLOSE_BRACKET, text)
        raise ValueError(f"Not a command: {text!r}")

    @property
    def is_number(self):
        return self.kind is TokenKind.NUMBER

    @property
    def is_bracket(self):
        return self.kind in (TokenKind.OPEN_BRACKET, TokenKind.CLOSE_BRACKET)

    def __eq__(self, other):
        return isinstance(other, Token) and (self.kind, self.value) == (other.kind, other.value)

    def __str__(self):
        if self.is_number:
            return repr(self.value)
        return self.value

    def __repr__(self):
        return f"Token({self.kind.name}, {self.value!r})"


def is_command(text):
    return text in ScientificEngine.OPERATORS or text in ScientificEngine.FUNCTIONS


# -----------------------------
# Input checks (run before tokenizing)
# -----------------------------

def brackets_matching(expression):
    """Return True if every '(' / '[' is closed by its own kind, in order."""
    unmatched = []
    for character in expression:
        if character in BRACKETS:
            unmatched.append(character)
        elif character in CLOSING_BRACKETS:
            if not unmatched or BRACKETS[unmatched.pop()] != character:
                return False
    return not unmatched


def contains_empty_brackets(expression):
    """Return True if an opening bracket is directly followed by a closing one, e.g. '()' or '[]'."""
    for current, following in zip(expression, expression[1:]):
        if current in BRACKETS and following in CLOSING_BRACKETS:
            return True
    return False


def check_expression(raw):
    """Return the list of structural problems with raw input (empty list when fine).

    Whitespace is ignored here, so '( )' counts as empty brackets.
    """
    compact = "".join(raw.split())
    errors = []

    if not compact:
        errors.append("Try entering something...")
    if not brackets_matching(compact):
        errors.append("Brackets do not match")
    if contains_empty_brackets(compact):
        errors.append("Expression contains empty brackets")

    return errors


# -----------------------------
# Grouper
# -----------------------------

class Grouper:
    """Accumulates tokens and errors for a single tokenize call."""

    def __init__(self, symbols):
        self.symbols = symbols
        self.tokens = []
        self.error_log = []
        # Token count at the last whitespace; a number emitted right before a
        # space is not multiplied with the number that follows it.
        self.separator_at = None

    def mark_separator(self):
        self.separator_at = len(self.tokens)

    def append_number(self, number):
        """Append a number, folding in a unary minus and inserting implicit '*'."""
        tokens = self.tokens

        if tokens and tokens[-1] == Token.operator("-"):
            if len(tokens) == 1 or tokens[-2].kind in (TokenKind.OPERATOR, TokenKind.FUNCTION,
                                                       TokenKind.OPEN_BRACKET):
                number = -number
                tokens.pop()

        # Juxtaposed numbers multiply: '5pi' -> 5 * pi
        if tokens and tokens[-1].is_number and len(tokens) != self.separator_at:
            tokens.append(Token.operator("*"))

        tokens.append(Token.number(number))

    def append_literal(self, literal):
        try:
            number = float(literal)
        except ValueError:
            self.error_log.append(f"Invalid number: {literal}")
            return
        self.append_number(number)

    def append_constant(self, name):
        value = self.symbols.get(name)
        if value is not None:
            self.append_number(value)
        elif len(name) == 1:
            self.error_log.append(f"Undefined constant: {name}")
        else:
            self.error_log.append(f"No calculator history found for {name}")

    def append_command(self, letters):
        """Split a command run into constants, brackets, operators and functions."""
        command = ""

        for letter in letters:
            # Single letter constants only count at the start of a command, since
            # 'e' also appears inside function names such as 'sec'.
            if not command and letter in self.symbols:
                self.append_constant(letter)
                continue

            if letter in BRACKETS or letter in CLOSING_BRACKETS:
                if command:
                    self.error_log.append(f"Unrecognised command: {command}")
                    command = ""
                self.tokens.append(Token.command(letter))
                continue

            command += letter

            if len(command) >= 2 and command in self.symbols:
                self.append_constant(command)
                command = ""
                continue

            if is_command(command):
                self.tokens.append(Token.command(command))
                command = ""

        if command:
            self.error_log.append(f"Unrecognised command: {command}")


def tokenize(raw, symbols):
    """Group raw input into tokens.

    Args:
        raw: the expression as typed (any iterable of single characters).
        symbols: the SymbolTable used to substitute constants.

    Returns:
        (tokens, error_log). tokens is None whenever error_log is not empty.
    """
    grouper = Grouper(symbols)
    section = []
    section_is_number = True

    def flush():
        if not section:
            return
        if section_is_number:
            grouper.append_literal("".join(section))
        else:
            grouper.append_command(section)
        section.clear()

    for character in raw:
        if character.isspace():
            flush()
            grouper.mark_separator()
            continue

        character_is_number = character in NUMBER_CHARACTERS
        if section and character_is_number != section_is_number:
            flush()

        section.append(character)
        section_is_number = character_is_number

    flush()

    if grouper.error_log:
        logger.debug("Tokenizing %r failed: %s", "".join(raw), grouper.error_log)
        return None, grouper.error_log

    logger.debug("Tokens: %s", [str(token) for token in grouper.tokens])
    return grouper.tokens, grouper.error_log
