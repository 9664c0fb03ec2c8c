# Console.py
"""""
Console front end for the calculator.

Responsibilities
----------------
- Read expressions line by line and dispatch them to MathEngine
- Reject malformed input early (blank input, unmatched or empty brackets)
- Compare two expressions separated by '='
- Keep the history of successful queries and the 'ans' constant up to date
- Small commands: help, history, copy (clipboard), sto X, q

The session owns its SymbolTable; it is only changed between evaluations.
"""""

import sys
import logging
from collections import namedtuple

import pyperclip

from . import error as E
from . import config_manager
from . import MathEngine
from . import ScientificEngine
from .SymbolTable import SymbolTable, USER_DEFINABLE_CONSTANTS

logger = logging.getLogger(__name__)

# A successful calculation as entered by the user
Query = namedtuple("Query", ["expression", "answer"])


class Session:

    def __init__(self, stdin=None, stdout=None, settings=None, symbols=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.settings = settings if settings is not None else config_manager.load_setting_value("all")
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.history = []
        self.error_messages = []
        self.running = True
        self.ui_strings = config_manager.load_ui_strings()

        self.commands = {
            "q": self.quit,
            "help": self.show_help,
            "history": self.show_history,
            "copy": self.copy_answer,
        }

    def write(self, text=""):
        print(text, file=self.stdout)

    def format(self, value):
        return MathEngine.format_result(value, self.settings["decimal_places"])

    # -----------------------------
    # Main loop
    # -----------------------------

    def run(self):
        """Prompt for input until 'q' or end of input."""
        logger.info("Session started")
        self.write(self.ui_strings.get("banner", ""))

        while self.running:
            self.write()
            self.stdout.write(self.ui_strings.get("prompt", "Expression: "))
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                # End of input behaves like 'q'
                self.write()
                break

            self.handle(line)

        logger.info("Session ended after %d queries", len(self.history))

    def handle(self, line):
        """Process a single line of input."""
        expression = line.strip()
        self.error_messages = []

        try:
            if expression in self.commands:
                self.commands[expression]()
            elif expression.split()[:1] == ["sto"]:
                self.store(expression)
            elif "=" in expression:
                self.report_comparison(expression)
            else:
                self.report_expression(expression)

        except E.MathError as e:
            e.equation = expression
            logger.debug("%s (%s) for %r", e.code, E.ERROR_MESSAGES.get(e.code, "Unknown error"), e.equation)
            self.write(f"Error {e.code}: {e.message}")

        except Exception as e:
            # Found an unexpected crash we didn't plan for (e.g., a bug in the code)
            logger.exception("Unexpected crash while handling %r", expression)
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=expression
            )
            self.write(f"Error {critical_error.code}: {critical_error.message}")

    # -----------------------------
    # Calculations
    # -----------------------------

    def read_expression(self, expression):
        """Check and tokenize an expression; problems are recorded in self.error_messages."""
        tokens, errors = MathEngine.interpret(expression, self.symbols)
        self.error_messages.extend(errors)
        return tokens

    def report_expression(self, expression):
        tokens = self.read_expression(expression)
        if tokens is None:
            self.report_error("interpret")
            return

        result = MathEngine.evaluate(tokens)
        if not result.successful:
            self.error_messages.append(result.reason)
            self.report_error("solve")
            return

        self.write(f" -> {self.format(result.value)}")
        self.remember(expression, result.value)

    def report_comparison(self, expression):
        """Evaluate both sides of 'lhs = rhs' and print whether they are equal."""
        if expression.count("=") > 1:
            self.error_messages.append("More than one equals sign entered")
            self.report_error("interpret")
            return

        left_side, right_side = expression.split("=")
        left_tokens = self.read_expression(left_side)
        right_tokens = self.read_expression(right_side)
        if left_tokens is None or right_tokens is None:
            self.report_error("interpret")
            return

        left_result = MathEngine.evaluate(left_tokens)
        right_result = MathEngine.evaluate(right_tokens)
        if not (left_result.successful and right_result.successful):
            for result in (left_result, right_result):
                if not result.successful:
                    self.error_messages.append(result.reason)
            self.report_error("solve")
            return

        equal = ScientificEngine.compare(left_result.value, right_result.value,
                                         self.settings["comparison_tolerance"])
        self.write(f" -> {equal}")

    def remember(self, expression, answer):
        self.history.append(Query(expression, answer))
        limit = self.settings["history_limit"]
        if limit > 0:
            del self.history[:-limit]
        self.symbols.set("ans", answer)

    def report_error(self, failed_action):
        self.write(f"Failed to {failed_action} input due to the following reason(s):")
        for message in self.error_messages:
            self.write(f" -> {message}")

    # -----------------------------
    # Commands
    # -----------------------------

    def quit(self):
        self.running = False

    def show_help(self):
        self.write(self.ui_strings.get("help", ""))

    def show_history(self):
        if not self.history:
            self.write("No calculations yet.")
            return
        for number, query in enumerate(self.history, start=1):
            self.write(f" {number}. {query.expression} -> {self.format(query.answer)}")

    def _answer(self):
        answer = self.symbols.get("ans")
        if answer is None:
            raise E.SyntaxError("No calculator history found for ans", code="3002")
        return answer

    def copy_answer(self):
        text = self.format(self._answer())
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise E.MathError(f"Clipboard unavailable: {e}", code="6000")
        self.write(f" -> copied {text}")

    def store(self, expression):
        """'sto X' stores the last answer in the user constant X."""
        parts = expression.split()
        if len(parts) != 2 or parts[1] not in USER_DEFINABLE_CONSTANTS:
            raise E.SymbolError("Usage: sto X (X is a letter from A to Z)", code="3400")

        answer = self._answer()
        self.symbols.set(parts[1], answer)
        self.write(f" -> {parts[1]} = {self.format(answer)}")


def main():
    Session().run()
