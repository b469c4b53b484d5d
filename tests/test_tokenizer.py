"""Tests for MathEngine.tokenize."""

import types

import pytest

from Calculator import error as E
from Calculator.MathEngine import NEGATE, Token, TokenType, to_postfix, tokenize


def kinds(text):
    return [repr(token) for token in tokenize(text)]


def test_tokenize_is_lazy():
    tokens = tokenize("1+$")
    assert isinstance(tokens, types.GeneratorType)
    assert next(tokens) == Token(TokenType.NUMBER, "1", 1.0, 0)
    assert next(tokens) == Token(TokenType.OPERATOR, "+", position=1)
    with pytest.raises(E.InvalidCharacterError):
        next(tokens)


def test_numbers_operators_and_parentheses():
    assert kinds("(1+2)*3.5/4^2") == [
        "LeftParen", "Number(1.0)", "Operator('+')", "Number(2.0)", "RightParen",
        "Operator('*')", "Number(3.5)", "Operator('/')", "Number(4.0)", "Operator('^')", "Number(2.0)",
    ]


def test_whitespace_is_skipped():
    assert kinds("  12 \t+\n3 ") == ["Number(12.0)", "Operator('+')", "Number(3.0)"]


def test_leading_dot_literal():
    assert kinds(".5") == ["Number(0.5)"]


def test_unary_minus_at_start_is_folded():
    assert kinds("-3+5") == ["Number(-3.0)", "Operator('+')", "Number(5.0)"]


@pytest.mark.parametrize("operator", ["(", "+", "-", "*", "/", "^"])
def test_unary_minus_after_operator_or_paren(operator):
    tokens = list(tokenize(f"4{operator}-2"))
    assert tokens[-1] == Token(TokenType.NUMBER, "-2", -2.0, 2)


def test_unary_minus_ignores_whitespace_before_it():
    assert kinds("4 *  -2") == ["Number(4.0)", "Operator('*')", "Number(-2.0)"]


def test_binary_minus_after_number_and_paren():
    assert kinds("5-2") == ["Number(5.0)", "Operator('-')", "Number(2.0)"]
    assert kinds("(5)-2") == ["LeftParen", "Number(5.0)", "RightParen", "Operator('-')", "Number(2.0)"]
    assert kinds("5 -2") == ["Number(5.0)", "Operator('-')", "Number(2.0)"]


def test_unary_minus_before_parenthesis_is_negation():
    assert kinds("-(2+3)") == [
        f"Operator('{NEGATE}')", "LeftParen", "Number(2.0)", "Operator('+')", "Number(3.0)", "RightParen",
    ]


def test_leading_plus_stays_binary_operator():
    assert kinds("+5") == ["Operator('+')", "Number(5.0)"]


def test_invalid_character_reports_char_and_position():
    with pytest.raises(E.InvalidCharacterError) as excinfo:
        list(tokenize("1$2"))
    assert excinfo.value.char == "$"
    assert excinfo.value.position == 1
    assert excinfo.value.code == "3001"


@pytest.mark.parametrize("text, literal", [("1.2.3", "1.2.3"), ("2+.", "."), ("-.", "-.")])
def test_malformed_number(text, literal):
    with pytest.raises(E.InvalidNumberError) as excinfo:
        list(tokenize(text))
    assert excinfo.value.text == literal


def test_tokens_are_immutable():
    token = next(tokenize("7"))
    with pytest.raises(AttributeError):
        token.value = 8.0


def test_tokens_record_source_position():
    tokens = list(tokenize(" (12 + -3.5) ^ -(2)"))
    assert [token.position for token in tokens] == [1, 2, 5, 7, 11, 13, 15, 16, 17, 18]
    assert tokens[3].text == "-3.5"
    assert tokens[6].text == NEGATE


def test_mismatched_parenthesis_message_names_position():
    with pytest.raises(E.MismatchedParenthesesError) as excinfo:
        to_postfix(tokenize("1 + (2"))
    assert "position 4" in excinfo.value.message


def test_sign_separated_by_space_becomes_negation():
    assert kinds("- 3") == [f"Operator('{NEGATE}')", "Number(3.0)"]
    assert kinds("2*- 3") == ["Number(2.0)", "Operator('*')", f"Operator('{NEGATE}')", "Number(3.0)"]
