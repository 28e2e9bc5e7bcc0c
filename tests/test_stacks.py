import pytest

from drillbook.stacks import (
    BoundedStack,
    StackOverflowError,
    StackUnderflowError,
    is_valid_brackets,
    push_at_bottom,
)


def test_bounded_stack_holds_exactly_capacity():
    st = BoundedStack(3)
    for value in (1, 2, 3):
        st.push(value)
    assert len(st) == 3
    with pytest.raises(StackOverflowError):
        st.push(4)
    assert st.peek() == 3


def test_bounded_stack_underflow():
    st = BoundedStack(2)
    assert st.is_empty() is True
    with pytest.raises(StackUnderflowError):
        st.pop()
    with pytest.raises(StackUnderflowError):
        st.peek()


def test_bounded_stack_is_lifo():
    values = [5, 8, 13, 21]
    st = BoundedStack(len(values))
    for value in values:
        st.push(value)
    popped = [st.pop() for _ in values]
    assert popped == values[::-1]
    assert st.is_empty() is True


def test_bounded_stack_negative_capacity():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_push_at_bottom_source_example():
    stack = [3, 2, 1]
    result = push_at_bottom(stack, 5)
    assert result is stack
    assert stack[0] == 5
    assert stack[1:] == [3, 2, 1]
    assert stack[-1] == 1


def test_push_at_bottom_empty_stack():
    assert push_at_bottom([], 7) == [7]


@pytest.mark.parametrize("text", ["[{()}]", "", "()[]{}", "(([]){})"])
def test_valid_brackets(text):
    assert is_valid_brackets(text) is True


@pytest.mark.parametrize("text", ["(]", "((", ")", "([)]", "{a}"])
def test_invalid_brackets(text):
    assert is_valid_brackets(text) is False