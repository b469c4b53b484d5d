

class EvaluationError(Exception):
    def __init__(self, message, code="9999", expression=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.expression = expression

class InvalidCharacterError(EvaluationError):
    def __init__(self, char, position, expression=None):
        super().__init__(f"Invalid character '{char}' at position {position}", code="3001", expression=expression)
        self.char = char
        self.position = position

class InvalidNumberError(EvaluationError):
    def __init__(self, text, expression=None):
        super().__init__(f"Invalid number: '{text}'", code="3002", expression=expression)
        self.text = text

class MismatchedParenthesesError(EvaluationError):
    def __init__(self, message="Mismatched parentheses", expression=None):
        super().__init__(message, code="3003", expression=expression)

class InvalidExpressionError(EvaluationError):
    def __init__(self, message="Invalid expression", expression=None):
        super().__init__(message, code="3004", expression=expression)


Error_Dictionary = {

    "1" : "Missing Files",
    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3001" : "Invalid character.",
    "3002" : "Invalid number.",
    "3003" : "Mismatched parentheses.",
    "3004" : "Invalid expression.",

    "5001" : "Settings could not be loaded, using defaults.",
    "5002" : "Settings could not be saved.",

    "9999" : "Unexpected Error."
}


def describe(error):
    """Return a one-line diagnostic for an error: code, category and message."""
    category = Error_Dictionary.get(error.code[:1], "Unknown Error")
    return f"Error {error.code} ({category}): {error.message}"
