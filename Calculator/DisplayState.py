# DisplayState.py
"""""
Presentation state of the calculator window.

The window owns one DisplayState and replaces it on every button press with
the value returned by one of the pure functions below. Nothing here touches
Qt, so the editing rules can be exercised without a display.

    expression       the text being edited (upper line)
    result           the last result, "0" or "Error" (lower line)
    just_evaluated   True right after '=', the next input starts over
"""""

from dataclasses import dataclass, replace

from . import MathEngine
from . import ScientificEngine

ERROR_TEXT = "Error"
OPERATORS = ("+", "-", "*", "/", "^")


@dataclass(frozen=True)
class DisplayState:
    expression: str = ""
    result: str = "0"
    just_evaluated: bool = False


def clear():
    """Return the initial (empty) state."""
    return DisplayState()


def last_number_has_decimal(expression):
    """True if the number at the end of expression already contains '.'."""
    for char in reversed(expression):
        if char == ".":
            return True
        if char in OPERATORS or char in "()":
            return False
    return False


def is_chainable(result):
    """True if result is a rendered finite number that can be typed back in."""
    return result not in (ERROR_TEXT, "Infinity", "-Infinity", "NaN")


def append_token(state, token):
    """Append a button's token to the expression, keeping the input sensible."""
    if state.just_evaluated:
        # An operator chains onto a finite result, anything else starts over
        if token in OPERATORS and is_chainable(state.result):
            # (-4)^2 must not re-parse as -(4^2)
            expression = f"({state.result})" if state.result.startswith("-") else state.result
            state = DisplayState(expression=expression, result=state.result)
        else:
            state = clear()

    expression = state.expression

    # --- Decimal point ---
    if token == ".":
        if expression.endswith(".") or last_number_has_decimal(expression):
            return state
        if not expression or expression[-1] in OPERATORS:
            return replace(state, expression=expression + "0.")

    # --- Functions: "sin" -> "sin(", with '*' after a digit ---
    elif ScientificEngine.is_function(token):
        if expression and expression[-1].isdigit():
            expression += "*"
        return replace(state, expression=expression + token + "(")

    # --- Operators: only '-' may start, a new operator replaces the last one ---
    elif token in OPERATORS:
        if not expression:
            if token == "-":
                return replace(state, expression=token)
            return state
        if expression[-1] in OPERATORS:
            return replace(state, expression=expression[:-1] + token)

    return replace(state, expression=expression + token)


def paste(state, text):
    """Append pasted text verbatim (whitespace at the ends removed)."""
    text = text.strip()
    if not text:
        return state
    if state.just_evaluated:
        state = clear()
    return replace(state, expression=state.expression + text)


def delete_last(state):
    """DEL: drop the last character, or clear everything after '='."""
    if state.just_evaluated:
        return clear()
    if not state.expression:
        return state

    expression = state.expression[:-1]
    if not expression:
        return replace(state, expression=expression, result="0")
    return replace(state, expression=expression)


def apply_result(state, outcome, decimal_places=8):
    """Fold a CalculationResult into the state.

    On success the formatted value becomes both the result and the new
    expression, so the next operator chains onto it.
    """
    if outcome.ok:
        rendered = MathEngine.format_result(outcome.value, decimal_places)
        return DisplayState(expression=rendered, result=rendered, just_evaluated=True)
    return replace(state, result=ERROR_TEXT, just_evaluated=True)


def press(state, button, decimal_places=8):
    """Handle one button press synchronously (C, DEL, = or an input token)."""
    if button == "C":
        return clear()
    elif button == "DEL":
        return delete_last(state)
    elif button == "=":
        if not state.expression.strip():
            return replace(state, result="0")
        return apply_result(state, MathEngine.calculate(state.expression), decimal_places)
    return append_token(state, button)
