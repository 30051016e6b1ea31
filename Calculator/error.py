# error.py


class MathError(Exception):
    """Base error for everything the calculator can reject.

    Carries a four digit code (see ERROR_MESSAGES), a stable kind name,
    the offending position in the whitespace-stripped expression (if known)
    and the equation itself, which calculate() attaches.
    """

    kind = "MathError"

    def __init__(self, message, code="9999", position=None, equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.position = position
        self.equation = equation

    def __repr__(self):
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, position={self.position!r})"


class EmptyExpressionError(MathError):
    kind = "EmptyExpression"

    def __init__(self, message="Expression cannot be empty", position=None, equation=None):
        super().__init__(message, code="3000", position=position, equation=equation)


class UnexpectedCharacterError(MathError):
    kind = "UnexpectedCharacter"

    def __init__(self, character, position, equation=None):
        # character is None when the expression ended where a factor was expected
        if character is None:
            message = f"Unexpected end of expression at position {position}"
        else:
            message = f"Unexpected character: '{character}' at position {position}"
        super().__init__(message, code="3001", position=position, equation=equation)
        self.character = character


class UnmatchedParenthesisError(MathError):
    kind = "UnmatchedParenthesis"

    def __init__(self, position, equation=None):
        super().__init__(f"Missing ')' at position {position}", code="3002", position=position, equation=equation)


class InvalidNumberFormatError(MathError):
    kind = "InvalidNumberFormat"

    def __init__(self, text, position, equation=None):
        super().__init__(f"Invalid number format: {text}", code="3003", position=position, equation=equation)
        self.text = text


class UnknownFunctionError(MathError):
    kind = "UnknownFunction"

    def __init__(self, name, position, equation=None):
        super().__init__(f"Unknown function: {name} at position {position}", code="3004",
                         position=position, equation=equation)
        self.name = name


class DivisionByZeroError(MathError):
    kind = "DivisionByZero"

    def __init__(self, position=None, equation=None):
        super().__init__("Division by zero", code="3005", position=position, equation=equation)


class DomainError(MathError):
    kind = "DomainError"

    def __init__(self, message, position=None, equation=None):
        super().__init__(message, code="2006", position=position, equation=equation)


class TrailingInputError(MathError):
    kind = "TrailingInput"

    def __init__(self, character, position, equation=None):
        super().__init__(f"Unexpected character: '{character}' at position {position}", code="3007",
                         position=position, equation=equation)
        self.character = character


Error_Dictionary = {

    "2": "Scientific Calculation Error",
    "3": "Calculator Error",
    "4": "UI Error",
    "5": "Configuration Error",
    "9": "Unexpected Error"

}

# Error codes are structured in:
# 1. Digit: Main Error (see Error_Dictionary)
# 2. Digit: Sub-area
# 3. and 4. Digit: Error Number

ERROR_MESSAGES = {
    "2006": "Argument outside of the function's domain.",

    "3000": "Empty expression.",
    "3001": "Unexpected character.",
    "3002": "Missing ')'.",
    "3003": "Invalid number.",
    "3004": "Unknown function.",
    "3005": "Division by Zero",
    "3007": "Unexpected input after the expression.",

    "4002": "Calculation already Running!",
    "4501": "Not all Settings could be saved: ",  # + Error raising setting

    "9999": "Unexpected Error: "  # + error
}
