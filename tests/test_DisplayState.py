import pytest

from Calculator import DisplayState as DS
from Calculator import MathEngine


def _type(*buttons, state=None):
    state = state or DS.clear()
    for button in buttons:
        state = DS.press(state, button)
    return state


def test_initial_state():
    state = DS.clear()
    assert state.expression == ""
    assert state.result == "0"
    assert not state.just_evaluated


def test_digits_append():
    assert _type("1", "2", "+", "3").expression == "12+3"


@pytest.mark.parametrize(
    "buttons, expected",
    [
        ((".",), "0."),
        (("5", "+", "."), "5+0."),
        (("1", ".", "."), "1."),
        (("1", ".", "5", "."), "1.5"),
        (("1", ".", "5", "+", "2", "."), "1.5+2."),
    ],
)
def test_decimal_point_rules(buttons, expected):
    assert _type(*buttons).expression == expected


def test_function_button_opens_parenthesis():
    assert _type("sin").expression == "sin("
    assert _type("2", "sqrt").expression == "2*sqrt("
    assert _type("(", "ln").expression == "(ln("


def test_only_minus_may_start_expression():
    assert _type("+").expression == ""
    assert _type("*").expression == ""
    assert _type("-").expression == "-"


def test_new_operator_replaces_previous():
    assert _type("5", "+", "*").expression == "5*"
    assert _type("5", "^", "-").expression == "5-"


def test_delete_last():
    state = _type("1", "2")
    state = DS.press(state, "DEL")
    assert state.expression == "1"
    state = DS.press(state, "DEL")
    assert state.expression == ""
    assert state.result == "0"
    assert DS.press(state, "DEL") == state


def test_clear():
    assert _type("1", "+", "2", "C") == DS.clear()


def test_evaluate_sets_result_and_expression():
    state = _type("2", "+", "3", "*", "4", "=")
    assert state.result == "14"
    assert state.expression == "14"
    assert state.just_evaluated


def test_digit_after_evaluation_starts_over():
    state = _type("2", "+", "3", "=", "7")
    assert state.expression == "7"
    assert state.result == "0"
    assert not state.just_evaluated


def test_operator_after_evaluation_chains():
    state = _type("1", "0", "/", "2", "=")
    assert state.result == "5"
    state = _type("+", "1", "=", state=state)
    assert state.result == "6"


def test_error_shows_error_text():
    state = _type("5", "/", "0", "=")
    assert state.result == DS.ERROR_TEXT
    assert state.expression == "5/0"
    assert state.just_evaluated


def test_input_after_error_starts_over():
    state = _type("5", "/", "0", "=", "+")
    assert state.expression == ""
    state = DS.press(state, "7")
    assert state.expression == "7"
    assert state.result == "0"


def test_delete_after_evaluation_clears():
    state = _type("1", "+", "1", "=", "DEL")
    assert state == DS.clear()


def test_evaluate_blank_expression_shows_zero():
    state = _type("=")
    assert state.result == "0"
    assert not state.just_evaluated


def test_apply_result_uses_decimal_places():
    outcome = MathEngine.calculate("1/3")
    state = DS.apply_result(DS.clear(), outcome, decimal_places=3)
    assert state.result == "0.333"


def test_paste():
    state = DS.paste(_type("2", "*"), " (1+2) ")
    assert state.expression == "2*(1+2)"
    assert DS.paste(state, "   ") == state

    evaluated = _type("1", "=")
    assert DS.paste(evaluated, "9").expression == "9"


@pytest.mark.parametrize(
    "expression, expected",
    [("", False), ("1.5+2", False), ("1+2.5", True), ("(3.", True), ("sin(2", False)],
)
def test_last_number_has_decimal(expression, expected):
    assert DS.last_number_has_decimal(expression) is expected


def test_negative_result_chains_as_a_whole():
    state = _type("0", "-", "4", "=", "^", "2")
    assert state.expression == "(-4)^2"
    state = DS.press(state, "=")
    assert state.result == "16"


def test_negative_result_chains_with_other_operators():
    state = _type("2", "-", "5", "=", "*", "2", "=")
    assert state.result == "-6"


@pytest.mark.parametrize("buttons", [("1", "0", "^", "4", "0", "0", "="), ("(", "0", "-", "8", ")", "^", "0", ".", "5", "=")])
def test_non_finite_result_does_not_chain(buttons):
    state = _type(*buttons)
    assert state.result in ("Infinity", "NaN")
    state = DS.press(state, "+")
    assert state.expression == ""
    assert DS.press(state, "3").expression == "3"
