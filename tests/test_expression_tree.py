import pytest

from algolab.expression_tree import (
    ExpressionError,
    Number,
    Operation,
    evaluate,
    format_tree,
    parse_expression,
)


def test_parse_builds_tree():
    tree = parse_expression("(* (+ 1 1) 2)")
    assert tree == Operation("*", Operation("+", Number(1), Number(1)), Number(2))


def test_parse_multidigit_number():
    assert parse_expression("  42 ") == Number(42)


def test_evaluate_nested():
    assert evaluate(parse_expression("( + 1 ( * 2 3 ) )")) == 7


def test_subtraction_can_go_negative():
    assert evaluate(parse_expression("( - 1 5 )")) == -4


def test_division_truncates_toward_zero():
    assert evaluate(parse_expression("( / ( - 0 7 ) 2 )")) == -3


@pytest.mark.parametrize("a,b", [(3, 4), (10, 2), (0, 9)])
def test_addition_and_multiplication(a, b):
    assert evaluate(parse_expression(f"(+ {a} {b})")) == a + b
    assert evaluate(parse_expression(f"(* {a} {b})")) == a * b


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate(parse_expression("( / 5 ( - 2 2 ) )"))


def test_incorrect_operation():
    with pytest.raises(ExpressionError):
        evaluate(parse_expression("( % 5 2 )"))


@pytest.mark.parametrize("text", ["", "   ", "x", "( +", "( + 1"])
def test_malformed_expression(text):
    with pytest.raises(ExpressionError):
        parse_expression(text)


@pytest.mark.parametrize(
    "text",
    ["7", "( + 1 2 )", "( * ( + 1 1 ) ( - 10 3 ) )", "( / 100 ( * 5 5 ) )"],
)
def test_format_round_trip(text):
    tree = parse_expression(text)
    assert format_tree(tree) == text
    assert parse_expression(format_tree(tree)) == tree