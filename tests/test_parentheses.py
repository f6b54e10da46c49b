import pytest

from codekata.parentheses import generate_parenthesis, longest_valid_parentheses

_LONGEST_CASES = {
    "(()(((()": 2, ")()())": 4, "(()()": 4, "((((()))": 6,
    "": 0, "((((": 0, ")((": 0, ")))": 0, ")))(": 0,
    "()(()": 2, "(()": 2,
    "(((((())))()()()))": 18,
    "(()))))))(())))(((((())))()()()))": 18,
}


@pytest.mark.parametrize("s", sorted(_LONGEST_CASES))
def test_longest_valid_parentheses(s):
    assert longest_valid_parentheses(s) == _LONGEST_CASES[s]


def test_longest_rejects_other_characters():
    with pytest.raises(ValueError):
        longest_valid_parentheses("(a)")


def test_generate_three_pairs():
    assert generate_parenthesis(3) == ["((()))", "(()())", "(())()", "()(())", "()()()"]


def test_generate_zero_pairs():
    assert generate_parenthesis(0) == [""]


def test_generated_strings_are_all_valid():
    for s in generate_parenthesis(4):
        assert longest_valid_parentheses(s) == 8
    assert len(generate_parenthesis(4)) == 14