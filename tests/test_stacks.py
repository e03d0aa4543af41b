import pytest

from algokit.stacks import MinStack, eval_rpn, is_valid_parentheses


def test_min_stack_tracks_minimum_through_pushes_and_pops():
    values = [5, 3, 7, 3, 1, 8, 1, 9]
    stack = MinStack()
    for i, v in enumerate(values):
        stack.push(v)
        assert stack.get_min() == min(values[: i + 1])
        assert stack.top() == v
    for i in range(len(values) - 1, 0, -1):
        assert stack.pop() == values[i]
        assert stack.get_min() == min(values[:i])
        assert stack.top() == values[i - 1]


def test_min_stack_duplicate_minimum():
    stack = MinStack()
    stack.push(0)
    stack.push(1)
    stack.push(0)
    stack.pop()
    assert stack.get_min() == 0
    assert len(stack) == 2


@pytest.mark.parametrize("method", ["pop", "top", "get_min"])
def test_min_stack_empty_raises(method):
    stack = MinStack()
    with pytest.raises(IndexError):
        getattr(stack, method)()
    assert len(stack) == 0
    stack.push(4)
    assert stack.top() == 4
    assert stack.get_min() == 4


def test_eval_rpn_examples():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9
    assert eval_rpn(["4", "13", "5", "/", "+"]) == 6


def test_eval_rpn_division_truncates_toward_zero():
    assert eval_rpn(["-7", "2", "/"]) == -3
    assert eval_rpn(["7", "-2", "/"]) == eval_rpn(["-7", "2", "/"])


def test_eval_rpn_single_number():
    assert eval_rpn(["-42"]) == -42


def test_eval_rpn_operand_order():
    assert eval_rpn(["10", "4", "-"]) == 10 - 4


def test_eval_rpn_errors():
    with pytest.raises(ValueError):
        eval_rpn([])
    with pytest.raises(ValueError):
        eval_rpn(["1", "+"])
    with pytest.raises(ValueError):
        eval_rpn(["x"])
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


@pytest.mark.parametrize("s", ["", "()", "()[]{}", "{[()]}", "([]{})"])
def test_valid_parentheses(s):
    assert is_valid_parentheses(s) is True


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "(a)", "]["])
def test_invalid_parentheses(s):
    assert is_valid_parentheses(s) is False


def test_nesting_preserves_validity():
    s = "()"
    for opener, closer in ["[]", "{}", "()"] * 3:
        s = opener + s + closer
        assert is_valid_parentheses(s)
        assert not is_valid_parentheses(s + opener)