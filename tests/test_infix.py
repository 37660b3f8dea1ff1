import pytest

from algolab.infix import UnbalancedParenthesesError, is_operator, priority, to_postfix


def test_precedence():
    assert to_postfix("2 + 3 * 5") == "2 3 5 * +"


def test_parentheses():
    assert to_postfix("(2 + 3) * 5") == "2 3 + 5 *"


def test_unclosed_parenthesis():
    with pytest.raises(UnbalancedParenthesesError):
        to_postfix("(2 + 3 * 5")


def test_extra_closing_parenthesis():
    with pytest.raises(UnbalancedParenthesesError):
        to_postfix("(2 + 3 * 5))")


def test_priorities_from_source():
    assert priority("(") == 0
    assert priority("+") == priority("-") == 1
    assert priority("*") == priority("/") == 2
    assert priority("x") == 100


@pytest.mark.parametrize("char", ["+", "-", "*", "/"])
def test_operators_recognised(char):
    assert is_operator(char) is True


@pytest.mark.parametrize("char", ["(", ")", "1", " ", "^"])
def test_non_operators_rejected(char):
    assert is_operator(char) is False


def test_empty_expression():
    assert to_postfix("") == ""


def test_single_digit():
    assert to_postfix("7") == "7"


@pytest.mark.parametrize("expression", ["1 + 2 * 3 - 4", "(1 + 2) * (3 - 4) / 5", "((9))"])
def test_digit_order_preserved_and_parentheses_dropped(expression):
    result = to_postfix(expression)
    digits_in = [c for c in expression if c.isdigit()]
    assert [c for c in result.split() if c.isdigit()] == digits_in
    assert "(" not in result and ")" not in result


@pytest.mark.parametrize("expression", ["1 + 2 * 3 - 4", "(1 + 2) * (3 - 4) / 5"])
def test_operator_count_preserved(expression):
    operators = sorted(c for c in expression if is_operator(c))
    assert sorted(t for t in to_postfix(expression).split() if is_operator(t)) == operators