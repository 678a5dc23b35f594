import pytest

from dsakit.stacks import bottom_element, middle_element


def test_bottom_element():
    stack = [10, 20, 30, 40]
    assert bottom_element(stack) == 10
    assert stack == [10, 20, 30, 40]


def test_bottom_of_single():
    assert bottom_element([5]) == 5


def test_middle_element_even():
    stack = [10, 20, 30, 40, 50, 60]
    assert middle_element(stack) == 40
    assert stack == [10, 20, 30, 40, 50, 60]


def test_middle_element_odd():
    assert middle_element([1, 2, 3]) == 2


def test_middle_of_single():
    assert middle_element([9]) == 9


def test_empty_stack_raises():
    with pytest.raises(IndexError):
        bottom_element([])
    with pytest.raises(IndexError):
        middle_element([])