# MathEngine.py
"""""
Core calculation engine for the Scientific Calculator.

Pipeline
--------
1) Preprocessing: strip every whitespace character from the input.
2) Evaluator: a single-pass recursive-descent parser that evaluates while it
   parses (no token list, no AST). Precedence is encoded by call nesting:
   expression -> term -> factor -> power -> base.
3) calculate(): caller-level use case that guards blank input and turns
   errors into a CalculationResult instead of raising.
4) Formatter: renders a float for display.
"""""

import math
import string
from dataclasses import dataclass
from typing import Optional

from . import ScientificEngine
from . import error as E
from .log import get_logger

logger = get_logger(__name__)

# End-of-input sentinel for the cursor
END = None

DIGITS = set(string.digits)


# -----------------------------
# Evaluator (recursive descent)
# -----------------------------

class ExpressionEvaluator:
    """Evaluate one expression string.

    Single use: construct from the expression, call evaluate() once, discard.
    The cursor (pos, char) only moves forward.
    """

    def __init__(self, expression):
        self.expression = "".join(expression.split())
        self.pos = -1
        self.char = END
        self.next_char()

    def next_char(self):
        """Advance the cursor by one character."""
        self.pos += 1
        self.char = self.expression[self.pos] if self.pos < len(self.expression) else END

    def eat(self, char_to_eat):
        """Consume char_to_eat if it is under the cursor."""
        if self.char == char_to_eat:
            self.next_char()
            return True
        return False

    def evaluate(self):
        """Evaluate the whole expression; trailing input is an error."""
        result = self.parse_expression()
        if self.char is not END:
            raise E.TrailingInputError(self.char, self.pos)
        return result

    def parse_expression(self):
        """Addition and subtraction (left-associative)."""
        x = self.parse_term()
        while True:
            if self.eat('+'):
                x += self.parse_term()
            elif self.eat('-'):
                x -= self.parse_term()
            else:
                return x

    def parse_term(self):
        """Multiplication and division (left-associative)."""
        x = self.parse_factor()
        while True:
            if self.eat('*'):
                x *= self.parse_factor()
            elif self.eat('/'):
                position = self.pos
                divisor = self.parse_factor()
                if divisor == 0.0:
                    raise E.DivisionByZeroError(position=position)
                x /= divisor
            else:
                return x

    def parse_factor(self):
        """Unary '+'/'-' (stackable), otherwise a power.

        The sign applies to the whole following factor, including a trailing
        '^', so -2^2 == -(2^2).
        """
        if self.eat('+'):
            return self.parse_factor()
        if self.eat('-'):
            return -self.parse_factor()
        return self.parse_power()

    def parse_power(self):
        """A base with an optional '^' exponent.

        The exponent is parsed as a factor, which makes '^' right-associative.
        """
        x = self.parse_base()
        position = self.pos
        if self.eat('^'):
            x = ScientificEngine.power(x, self.parse_factor(), position)
        return x

    def parse_base(self):
        """Numbers, '(' expression ')' and function applications."""
        start_pos = self.pos

        # Parenthesized sub-expression
        if self.eat('('):
            x = self.parse_expression()
            if not self.eat(')'):
                raise E.UnmatchedParenthesisError(self.pos)
            return x

        # Numbers: greedy run of digits and '.', validated afterwards
        if self.char is not END and (self.char in DIGITS or self.char == '.'):
            while self.char is not END and (self.char in DIGITS or self.char == '.'):
                self.next_char()
            number_str = self.expression[start_pos:self.pos]
            try:
                return float(number_str)
            except ValueError:
                raise E.InvalidNumberFormatError(number_str, start_pos)

        # Functions: greedy run of letters, argument is the next factor
        if self.char is not END and self.char.isalpha():
            while self.char is not END and self.char.isalpha():
                self.next_char()
            name = self.expression[start_pos:self.pos]
            if not ScientificEngine.is_function(name):
                raise E.UnknownFunctionError(name, start_pos)
            argument = self.parse_factor()
            return ScientificEngine.apply_function(name, argument, start_pos)

        if self.char is END and not self.expression:
            raise E.EmptyExpressionError(position=self.pos)
        raise E.UnexpectedCharacterError(self.char, self.pos)


def evaluate(expression):
    """Evaluate expression and return a float. Raises MathError subclasses."""
    return ExpressionEvaluator(expression).evaluate()


# -----------------------------
# Use case
# -----------------------------

@dataclass(frozen=True)
class CalculationResult:
    """Outcome of calculate(): exactly one of value / error is set."""

    value: Optional[float] = None
    error: Optional[E.MathError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def calculate(expression):
    """Main API: blank guard -> evaluate -> CalculationResult. Never raises for bad input."""
    if not expression or expression.isspace():
        return CalculationResult(error=E.EmptyExpressionError(equation=expression))

    try:
        value = evaluate(expression)

    # Known errors: attach the equation and hand them back
    except E.MathError as e:
        e.equation = expression
        logger.debug("Calculation failed [%s %s] at %s: %s", e.code, e.kind, e.position, e.message)
        return CalculationResult(error=e)

    # Nesting deeper than the interpreter stack
    except RecursionError:
        e = E.MathError("Expression is nested too deeply.", code="9999", equation=expression)
        logger.warning("Calculation failed [%s]: %s", e.code, e.message)
        return CalculationResult(error=e)

    logger.debug("%r = %r", expression, value)
    return CalculationResult(value=value)


# -----------------------------
# Result formatting
# -----------------------------

def format_result(value, decimal_places=8):
    """Render a float for display.

    Integral values print without a decimal point. Everything else is rounded
    to decimal_places, then trailing zeros and a dangling '.' are removed.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if value == math.trunc(value):
        return str(math.trunc(value))

    rendered = f"{value:.{decimal_places}f}".rstrip('0').rstrip('.')
    # Tiny values round away completely
    if rendered in ("-0", ""):
        return "0"
    return rendered


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem: ")
    problem = input()
    outcome = calculate(problem)
    print(format_result(outcome.value) if outcome.ok else f"Error: {outcome.error.message}")


if __name__ == "__main__":
    # Allow running this module directly for quick CLI tests:
    #   python -m Calculator.MathEngine
    test_main()
