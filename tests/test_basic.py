"""Basic tests for chaining_iter."""

import pytest

from chaining_iter import EXHAUSTED, DoubleEndedIterChain, IterChain, Span


def test_empty():
    """A chain with no segments has nothing to yield."""
    chain = IterChain()

    assert chain.pull() is EXHAUSTED


def test_contains_all_empty():
    """Only zero-length segments means no items."""
    chain = IterChain()
    chain.include(Span(0, 0))
    chain.include(Span(0, 0))

    assert chain.pull() is EXHAUSTED


def test_starts_with_empty():
    """A leading zero-length segment is skipped."""
    chain = IterChain()
    chain.include(Span(0, 0))
    chain.include(Span(1, 2))

    assert chain.pull() == 1
    assert chain.pull() is EXHAUSTED


def test_empty_in_middle():
    """A zero-length segment between two others contributes nothing."""
    chain = IterChain()
    chain.include(Span(0, 1))
    chain.include(Span(1, 1))
    chain.include(Span(2, 3))

    assert chain.pull() == 0
    assert chain.pull() == 2
    assert chain.pull() is EXHAUSTED


def test_double_ended_iter():
    """Front and back pulls each work on their own end."""
    chain = DoubleEndedIterChain()
    chain.include(Span(0, 3))
    chain.include(Span(5, 7))

    assert next(chain) == 0
    assert chain.next_back() == 6


def test_include_front():
    """A segment included at the front is consulted first."""
    chain = IterChain()
    chain.include(Span(3, 5))
    chain.include_front(Span(0, 3))

    assert next(chain) == 0


def test_iterator_protocol():
    """Chains work anywhere an iterator is expected."""
    chain = IterChain.from_iterables([1, 2], (), "ab")

    assert list(chain) == [1, 2, "a", "b"]
    with pytest.raises(StopIteration):
        next(chain)


def test_reversed_drain():
    """reversed() drains a double-ended chain from the back."""
    chain = DoubleEndedIterChain.from_iterables(range(0, 3), [10, 11])

    assert list(reversed(chain)) == [11, 10, 2, 1, 0]
    assert chain.is_empty
