"""Expression Calculator: tokenizer, shunting-yard converter and postfix evaluator
with console and PySide6 front-ends."""

from .MathEngine import evaluate, calculate, format_result, tokenize, to_postfix, evaluate_postfix
from .error import (
    EvaluationError, InvalidCharacterError, InvalidNumberError,
    MismatchedParenthesesError, InvalidExpressionError
)

__all__ = [
    'evaluate', 'calculate', 'format_result', 'tokenize', 'to_postfix', 'evaluate_postfix',
    'EvaluationError', 'InvalidCharacterError', 'InvalidNumberError',
    'MismatchedParenthesesError', 'InvalidExpressionError'
]
