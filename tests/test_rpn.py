import pytest

from algolab.rpn import (
    InvalidCharacterError,
    PostfixError,
    StackEmptyError,
    StackNotEmptyError,
    evaluate_postfix,
)


def test_simple_sum():
    assert evaluate_postfix("1 2 +") == 3


def test_compound_expression():
    assert evaluate_postfix("9 6 - 1 2 + *") == 9


def test_missing_operand():
    with pytest.raises(StackEmptyError):
        evaluate_postfix("2 +")


def test_leftover_operand():
    with pytest.raises(StackNotEmptyError):
        evaluate_postfix("3 4 5 +")


def test_empty_expression():
    with pytest.raises(StackEmptyError):
        evaluate_postfix("")


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("4 0 /")


def test_invalid_character():
    with pytest.raises(InvalidCharacterError):
        evaluate_postfix("1 2 x +")


def test_errors_share_base_class():
    for expression in ("+", "1 2", "1 a"):
        with pytest.raises(PostfixError):
            evaluate_postfix(expression)


def test_single_digit_is_its_own_value():
    assert evaluate_postfix("7") == 7


def test_operand_order_for_subtraction_and_division():
    assert evaluate_postfix("8 2 -") == -evaluate_postfix("2 8 -")
    assert evaluate_postfix("8 2 /") * 2 == 8


def test_division_truncates_toward_zero():
    assert evaluate_postfix("0 7 - 2 /") == -evaluate_postfix("7 2 /")