import pytest

from dsakit.postfix import infix_to_postfix, priority


@pytest.mark.parametrize(
    "op, expected",
    [("^", 3), ("*", 2), ("/", 2), ("+", 1), ("-", 1), ("(", 0), ("a", 0)],
)
def test_priority(op, expected):
    assert priority(op) == expected


def test_precedence_example():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_parentheses_example():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_left_associative_example():
    assert infix_to_postfix("a-b-c") == "ab-c-"


@pytest.mark.parametrize(
    "formula",
    ["a+b", "(a+b)*(c-d)", "a^b/c+d*e", "((a))", "x*(y+z)^w-v/u"],
)
def test_operands_keep_order_and_symbols_are_kept(formula):
    result = infix_to_postfix(formula)
    operands = [c for c in formula if c.isalpha()]
    assert [c for c in result if c.isalpha()] == operands
    assert "(" not in result and ")" not in result
    assert sorted(result) == sorted(c for c in formula if c not in "()")


def test_operand_only_passes_through():
    assert infix_to_postfix("abc") == "abc"


def test_empty_formula():
    assert infix_to_postfix("") == ""


@pytest.mark.parametrize("formula", [")", "a+b)", "(a)+b)"])
def test_unbalanced_closing_parenthesis_raises(formula):
    with pytest.raises(ValueError):
        infix_to_postfix(formula)


def test_unmatched_opening_parenthesis_is_flushed():
    result = infix_to_postfix("(a")
    assert result.startswith("a")
    assert result.count("(") == 1