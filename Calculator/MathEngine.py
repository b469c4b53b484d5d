# MathEngine.py
"""
Core evaluation engine for the Expression Calculator.

Pipeline
--------
1) Tokenizer: converts a raw input string into typed tokens (numbers, operators, parentheses).
2) Shunting-yard converter: reorders the tokens into postfix (RPN) order,
   honoring operator precedence and associativity.
3) Postfix evaluator: reduces the postfix sequence on a value stack to a single float.
4) Formatter: renders results with '.' as decimal separator, independent of the locale.

Both front-ends (Console.py and UI.py) only talk to `evaluate` / `calculate`.
Division by zero and out-of-domain powers follow IEEE-754 (inf / nan) and are never errors.
"""

import logging
import math
from enum import Enum
from typing import NamedTuple, Optional

from . import config_manager as config_manager
from . import error as E

logger = logging.getLogger(__name__)

APPROX_SIGN = "\u2248"  # "≈"


# -----------------------------
# Token and operator types
# -----------------------------

class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


class Token(NamedTuple):
    """A single lexical unit. `value` is only set for numbers, `position` is the source index."""
    type: TokenType
    text: str
    value: Optional[float] = None
    position: Optional[int] = None

    def __repr__(self):
        if self.type is TokenType.NUMBER:
            return f"Number({self.value!r})"
        elif self.type is TokenType.OPERATOR:
            return f"Operator({self.text!r})"
        elif self.type is TokenType.LEFT_PAREN:
            return "LeftParen"
        return "RightParen"


LEFT = "left"
RIGHT = "right"


class OperatorInfo(NamedTuple):
    precedence: int
    associativity: str
    arity: int


# Prefix negation produced by the tokenizer for a sign that is not part of a literal, e.g. "-(2+3)".
# It binds tighter than '^' so that "-(2)^2" behaves like the literal "-2^2".
NEGATE = "neg"

OPERATORS = {
    "+": OperatorInfo(1, LEFT, 2),
    "-": OperatorInfo(1, LEFT, 2),
    "*": OperatorInfo(2, LEFT, 2),
    "/": OperatorInfo(2, LEFT, 2),
    "^": OperatorInfo(3, RIGHT, 2),
    NEGATE: OperatorInfo(4, RIGHT, 1),
}

# Characters that are always binary operators in the input
Operations = ["+", "-", "*", "/", "^"]

# A '-' directly after one of these (or at the start) is a sign
UNARY_CONTEXT = ["(", "+", "-", "*", "/", "^"]

DIGITS = "0123456789"


# -----------------------------
# Tokenizer
# -----------------------------

def is_number_char(char):
    """Return True for characters that may appear inside a numeric literal."""
    return char in DIGITS or char == "."


def is_unary_minus(problem, index):
    """Return True if the '-' at `index` is a sign rather than a subtraction.

    Whitespace between the sign and the preceding character is ignored.
    """
    b = index - 1
    while b >= 0 and problem[b].isspace():
        b -= 1
    return b < 0 or problem[b] in UNARY_CONTEXT


def tokenize(problem):
    """Yield the tokens of `problem` from left to right.

    A unary minus directly followed by a digit or '.' is folded into the literal
    (Number(-3.0)); any other unary minus becomes the prefix operator `neg`.

    Raises:
        InvalidCharacterError: character outside the supported grammar.
        InvalidNumberError: digit/dot run that is not a valid float (e.g. "1.2.3").
    """
    b = 0
    while b < len(problem):
        current_char = problem[b]

        # --- Whitespace (ignored) ---
        if current_char.isspace():
            b += 1
            continue

        sign = current_char == "-" and is_unary_minus(problem, b)

        # --- Numbers: digits and decimal separator, optionally with a leading sign ---
        if is_number_char(current_char) or (sign and b + 1 < len(problem) and is_number_char(problem[b + 1])):
            start = b
            b += 1
            while b < len(problem) and is_number_char(problem[b]):
                b += 1

            str_number = problem[start:b]
            try:
                value = float(str_number)
            except ValueError:
                raise E.InvalidNumberError(str_number) from None
            yield Token(TokenType.NUMBER, str_number, value, start)
            continue

        # --- Operators ---
        if sign:
            yield Token(TokenType.OPERATOR, NEGATE, position=b)
        elif current_char in Operations:
            yield Token(TokenType.OPERATOR, current_char, position=b)

        # --- Parentheses ---
        elif current_char == "(":
            yield Token(TokenType.LEFT_PAREN, "(", position=b)
        elif current_char == ")":
            yield Token(TokenType.RIGHT_PAREN, ")", position=b)

        else:
            raise E.InvalidCharacterError(current_char, b)

        b += 1


# -----------------------------
# Shunting-yard converter
# -----------------------------

def pops_before(incoming, top):
    """Return True if operator `top` on the stack must be output before `incoming` is pushed.

    Equal precedence pops for left-associative operators only, which is what
    makes 8/4/2 == (8/4)/2 while 2^3^2 == 2^(3^2).
    """
    if incoming.associativity == LEFT:
        return incoming.precedence <= top.precedence
    return incoming.precedence < top.precedence


def to_postfix(tokens):
    """Convert infix tokens into a postfix list (numbers and operators only).

    Raises:
        MismatchedParenthesesError: a ')' without '(' or an unclosed '('.
    """
    output = []
    operator_stack = []

    for token in tokens:
        if token.type is TokenType.NUMBER:
            output.append(token)

        elif token.type is TokenType.OPERATOR:
            incoming = OPERATORS[token.text]
            while operator_stack and operator_stack[-1].type is TokenType.OPERATOR:
                if not pops_before(incoming, OPERATORS[operator_stack[-1].text]):
                    break
                output.append(operator_stack.pop())
            operator_stack.append(token)

        elif token.type is TokenType.LEFT_PAREN:
            operator_stack.append(token)

        elif token.type is TokenType.RIGHT_PAREN:
            while operator_stack and operator_stack[-1].type is not TokenType.LEFT_PAREN:
                output.append(operator_stack.pop())
            if not operator_stack:
                raise E.MismatchedParenthesesError(f"Missing '(' for ')' at position {token.position}.")
            operator_stack.pop()  # discard '('

    while operator_stack:
        token = operator_stack.pop()
        if token.type is not TokenType.OPERATOR:
            raise E.MismatchedParenthesesError(f"Missing ')' for '(' at position {token.position}.")
        output.append(token)

    return output


# -----------------------------
# Postfix evaluator
# -----------------------------

def divide(a, b):
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is nan."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def power(a, b):
    """IEEE-754 (C pow) semantics for a ** b without raising."""
    odd_integer_exponent = math.isfinite(b) and b.is_integer() and b % 2 == 1
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and odd_integer_exponent:
            return -math.inf
        return math.inf
    except ValueError:
        # 0 ** negative -> pole, negative ** fraction -> outside the real domain
        if a == 0:
            if math.copysign(1.0, a) < 0 and odd_integer_exponent:
                return -math.inf
            return math.inf
        return math.nan


BINARY_FUNCTIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": divide,
    "^": power,
}


def evaluate_postfix(postfix):
    """Reduce a postfix token sequence to a single float.

    Raises:
        InvalidExpressionError: an operator lacks operands, or the stack does not
            end with exactly one value (empty input, adjacent numbers, ...).
    """
    stack = []

    for token in postfix:
        if token.type is TokenType.NUMBER:
            stack.append(token.value)
            continue

        if token.type is not TokenType.OPERATOR:
            raise E.InvalidExpressionError(f"Unexpected token in postfix sequence: {token!r}")

        info = OPERATORS[token.text]
        if len(stack) < info.arity:
            symbol = "-" if token.text == NEGATE else token.text
            raise E.InvalidExpressionError(f"Missing operand for '{symbol}'.")

        if info.arity == 1:
            stack.append(-stack.pop())
        else:
            # Second pop is the left operand
            b = stack.pop()
            a = stack.pop()
            stack.append(BINARY_FUNCTIONS[token.text](a, b))

    if len(stack) != 1:
        if not stack:
            raise E.InvalidExpressionError("Empty expression.")
        raise E.InvalidExpressionError(f"Missing operator: {len(stack)} values left.")

    return stack[0]


# -----------------------------
# Result formatting
# -----------------------------

def format_result(ergebnis, decimal_places=None):
    """Render a float with '.' as decimal separator.

    Returns:
        (rendered_value, rounding_flag) where rounding_flag tells whether rounding
        to `decimal_places` changed the value. None disables rounding.
    """
    rounding = False

    if math.isnan(ergebnis):
        return "NaN", rounding
    if math.isinf(ergebnis):
        return ("Infinity" if ergebnis > 0 else "-Infinity"), rounding

    if decimal_places is not None and not ergebnis.is_integer():
        gerundetes_ergebnis = round(ergebnis, max(decimal_places, 0))
        if gerundetes_ergebnis != ergebnis:
            rounding = True
        ergebnis = gerundetes_ergebnis

    # Integer results are shown without a fraction (20.0 -> "20"), huge ones keep the exponent
    if ergebnis.is_integer() and abs(ergebnis) < 1e16:
        return str(int(ergebnis)), rounding
    return repr(ergebnis), rounding


# -----------------------------
# Public entry points
# -----------------------------

def evaluate(problem):
    """Evaluate an arithmetic expression string and return the float result.

    Every failure is an EvaluationError subclass with `expression` set to `problem`.
    """
    if not isinstance(problem, str):
        raise TypeError(f"expression must be a string, not {type(problem).__name__}")

    try:
        postfix = to_postfix(tokenize(problem))
        logger.debug("Postfix for %r: %s", problem, postfix)
        ergebnis = evaluate_postfix(postfix)

    except E.EvaluationError as e:
        e.expression = problem
        logger.info("Could not evaluate %r: %s", problem, E.describe(e))
        raise

    logger.debug("%r evaluated to %r", problem, ergebnis)
    return ergebnis


def calculate(problem):
    """Front-end API: evaluate, round per settings and render "= x" or "≈ x"."""
    try:
        decimal_places = int(config_manager.load_setting_value("decimal_places"))
    except (TypeError, ValueError):
        decimal_places = config_manager.DEFAULT_SETTINGS["decimal_places"]

    try:
        ergebnis = evaluate(problem)
    except E.EvaluationError:
        raise
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        logger.exception("Unexpected failure while evaluating %r", problem)
        raise E.EvaluationError(message=f"Unexpected crash: {e}", code="9999", expression=problem) from e

    ausgabe_string, rounding = format_result(ergebnis, decimal_places)
    if rounding:
        return f"{APPROX_SIGN} {ausgabe_string}"
    return f"= {ausgabe_string}"
