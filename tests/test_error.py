import pytest

from Calculator import error as E

ALL_ERRORS = [
    (E.EmptyExpressionError(), "EmptyExpression"),
    (E.UnexpectedCharacterError("#", 1), "UnexpectedCharacter"),
    (E.UnmatchedParenthesisError(3), "UnmatchedParenthesis"),
    (E.InvalidNumberFormatError("1.2.3", 0), "InvalidNumberFormat"),
    (E.UnknownFunctionError("foo", 0), "UnknownFunction"),
    (E.DivisionByZeroError(2), "DivisionByZero"),
    (E.DomainError("sqrt of negative", 0), "DomainError"),
    (E.TrailingInputError(")", 5), "TrailingInput"),
]


@pytest.mark.parametrize("error, kind", ALL_ERRORS)
def test_error_kinds(error, kind):
    assert isinstance(error, E.MathError)
    assert error.kind == kind
    assert error.code in E.ERROR_MESSAGES
    assert error.code[0] in E.Error_Dictionary


def test_error_codes_are_unique():
    codes = [error.code for error, _ in ALL_ERRORS]
    assert len(codes) == len(set(codes))


def test_messages_name_the_offender():
    assert str(E.UnknownFunctionError("foo", 4)) == "Unknown function: foo at position 4"
    assert str(E.UnmatchedParenthesisError(4)) == "Missing ')' at position 4"
    assert str(E.TrailingInputError(")", 5)) == "Unexpected character: ')' at position 5"
    assert "end of expression" in str(E.UnexpectedCharacterError(None, 2))


def test_math_error_defaults():
    error = E.MathError("boom")
    assert error.code == "9999"
    assert error.position is None
    assert error.equation is None
    assert "boom" in repr(error)
