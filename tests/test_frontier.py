import pytest

from planefill.core.errors import FloodFillError, FrontierUnderflow
from planefill.core.frontier import Frontier


def test_pop_returns_seeds_last_in_first_out():
    frontier = Frontier()
    frontier.push(1, 2)
    frontier.push(3, 4)

    assert len(frontier) == 2
    assert frontier.pop() == (3, 4)
    assert frontier.pop() == (1, 2)
    assert frontier.is_empty()


def test_pop_from_empty_frontier_raises():
    frontier = Frontier()
    with pytest.raises(FrontierUnderflow):
        frontier.pop()

    frontier.push(0, 0)
    frontier.pop()
    with pytest.raises(IndexError):
        frontier.pop()
    assert issubclass(FrontierUnderflow, FloodFillError)


def test_storage_doubles_and_keeps_seeds():
    frontier = Frontier(capacity=2)
    for i in range(5):
        frontier.push(i, -i)

    assert frontier.capacity == 8
    assert [frontier.pop() for _ in range(5)] == [(i, -i) for i in reversed(range(5))]


def test_clear_keeps_capacity():
    frontier = Frontier(capacity=1)
    frontier.push(0, 0)
    frontier.push(1, 1)
    capacity = frontier.capacity

    frontier.clear()

    assert frontier.is_empty()
    assert frontier.capacity == capacity


def test_large_coordinates_survive():
    frontier = Frontier()
    frontier.push(2**40, 2**41)
    assert frontier.pop() == (2**40, 2**41)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        Frontier(capacity=0)
