"""Tests for tokenize(): scanning, unary detection and implicit multiplication."""

import pytest

from mathparser.util import InvalidTokenException, MalformedExpressionException
from mathparser.util.equations import tokenize
from mathparser.util.tokens import (
    LEFT_BRACKET,
    NUMBER,
    OPERATOR,
    RIGHT_BRACKET,
    UNARY,
    Token,
)


def symbols(expression):
    return [t.symbol for t in tokenize(expression)]


def types(expression):
    return [t.type for t in tokenize(expression)]


# --- Scanning ---

def test_simple_expression():
    """Numbers and operators become separate tokens."""
    assert symbols("4+3") == ["4", "+", "3"]
    assert types("4+3") == [NUMBER, OPERATOR, NUMBER]


def test_whitespace_is_skipped():
    assert symbols("  5 +  ( 1 )\t") == ["5", "+", "(", "1", ")"]


def test_number_values_are_floats():
    tokens = tokenize("12 + 3.5 + .25 + 7.")
    values = [t.value for t in tokens if t.type == NUMBER]
    assert values == [12.0, 3.5, 0.25, 7.0]
    assert all(isinstance(v, float) for v in values)


def test_non_number_tokens_have_no_value():
    assert all(t.value is None for t in tokenize("(1+2)") if t.type != NUMBER)


def test_positions_follow_source_text():
    tokens = tokenize("10 * (2)")
    assert [t.position for t in tokens] == [0, 3, 5, 6, 7]


def test_all_bracket_styles():
    assert types("{[(1)]}") == [
        LEFT_BRACKET, LEFT_BRACKET, LEFT_BRACKET, NUMBER,
        RIGHT_BRACKET, RIGHT_BRACKET, RIGHT_BRACKET,
    ]


def test_empty_expression():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_tokens_are_immutable():
    token = tokenize("1")[0]
    with pytest.raises(AttributeError):
        token.symbol = "2"


# --- Unary minus ---

@pytest.mark.parametrize("expression,index", [
    ("-5", 0),
    ("2*-5", 2),
    ("(-5)", 1),
    ("[-5]", 1),
    ("2^-1", 2),
    ("--5", 1),
])
def test_unary_minus_contexts(expression, index):
    """A minus at the start, after an operator or after an opening bracket is unary."""
    tokens = tokenize(expression)
    assert tokens[index] == Token(UNARY, "-", None, index)


def test_binary_minus_after_value():
    assert types("3-2") == [NUMBER, OPERATOR, NUMBER]
    assert types("(3)-2")[3] == OPERATOR


def test_number_literal_never_carries_sign():
    tokens = tokenize("-8/2")
    assert tokens[0].type == UNARY
    assert tokens[1].value == 8.0


def test_unary_plus():
    assert types("+3") == [UNARY, NUMBER]


# --- Implicit multiplication ---

def test_number_then_open_bracket():
    assert symbols("29[(-10)+1]") == [
        "29", "*", "[", "(", "-", "10", ")", "+", "1", "]",
    ]


def test_close_bracket_then_number():
    assert symbols("(4-20)13") == ["(", "4", "-", "20", ")", "*", "13"]


def test_close_bracket_then_open_bracket():
    assert symbols("(2)(3)") == ["(", "2", ")", "*", "(", "3", ")"]


def test_implicit_operator_has_no_position():
    inserted = tokenize("2(3)")[1]
    assert inserted == Token(OPERATOR, "*")
    assert inserted.position is None


def test_explicit_operator_is_not_doubled():
    assert symbols("2*(3)") == ["2", "*", "(", "3", ")"]


# --- Errors ---

@pytest.mark.parametrize("expression", ["3 4", "1.2.3", "(1) 2 3"])
def test_adjacent_numbers_are_malformed(expression):
    with pytest.raises(MalformedExpressionException):
        tokenize(expression)


@pytest.mark.parametrize("expression,token,position", [
    ("2 + x", "x", 4),
    ("3 % 2", "%", 2),
    (".", ".", 0),
    ("1 & 1", "&", 2),
])
def test_invalid_token(expression, token, position):
    with pytest.raises(InvalidTokenException) as info:
        tokenize(expression)
    assert info.value.token == token
    assert info.value.position == position


def test_tokenize_is_deterministic():
    assert tokenize("5 + ((1 + 2) * 4) - 3") == tokenize("5 + ((1 + 2) * 4) - 3")
