import random

import pytest

from leetsolve.stacks import MinStack, eval_rpn, is_valid, simplify_path


def test_eval_rpn_examples():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9
    assert eval_rpn(["4", "13", "5", "/", "+"]) == 6


def test_eval_rpn_division_truncates_toward_zero():
    assert eval_rpn(["-7", "2", "/"]) == -3
    assert eval_rpn(["7", "-2", "/"]) == eval_rpn(["-7", "2", "/"])


def test_eval_rpn_single_number():
    assert eval_rpn(["42"]) == 42


def test_eval_rpn_subtraction_operand_order():
    a, b = 17, 5
    assert eval_rpn([str(a), str(b), "-"]) == a - b


def test_eval_rpn_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


def test_eval_rpn_missing_operand():
    with pytest.raises(ValueError):
        eval_rpn(["1", "+"])


def test_eval_rpn_bad_token_and_empty():
    with pytest.raises(ValueError):
        eval_rpn(["x"])
    with pytest.raises(ValueError):
        eval_rpn([])


def test_min_stack_tracks_minimum_and_top():
    rng = random.Random(9)
    values = [rng.randint(-100, 100) for _ in range(25)]
    stack = MinStack()
    for count, value in enumerate(values, start=1):
        stack.push(value)
        assert stack.top() == value
        assert stack.get_min() == min(values[:count])
    for count in range(len(values), 0, -1):
        assert stack.get_min() == min(values[:count])
        assert stack.top() == values[count - 1]
        stack.pop()
    assert len(stack) == 0


def test_min_stack_empty_behaviour():
    stack = MinStack()
    stack.pop()
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.get_min()


def test_min_stack_duplicate_minimums():
    stack = MinStack()
    for value in (3, 1, 1):
        stack.push(value)
    stack.pop()
    assert stack.get_min() == 1
    stack.pop()
    assert stack.get_min() == 3


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/home/", "/home"),
        ("/../", "/"),
        ("/home//foo/", "/home/foo"),
        ("/a/./b/../../c/", "/c"),
    ],
)
def test_simplify_path(path, expected):
    assert simplify_path(path) == expected


@pytest.mark.parametrize("path", ["/a/b/../c/./d//", "/...", "/x/../../y", "/"])
def test_simplify_path_is_idempotent(path):
    once = simplify_path(path)
    assert simplify_path(once) == once
    assert once.startswith("/")
    assert "//" not in once


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[]}", "", "a(b)c"])
def test_is_valid_true(text):
    assert is_valid(text)


@pytest.mark.parametrize("text", ["(]", "([)]", "(", ")", "]["])
def test_is_valid_false(text):
    assert not is_valid(text)