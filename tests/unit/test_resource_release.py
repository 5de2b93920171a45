"""
Tests that chains hold no reference to segments they have dropped.
"""

import doctest
import weakref

from chaining_iter import DoubleEndedIterChain, IterChain
from tests.utils import (
    MemoryTracker,
    RecordingSegment,
    assert_no_object_leak,
    assert_released,
    memory_utils,
)


def test_segment_released_after_forward_exhaustion():
    """A drained segment is collectable while the chain lives on."""
    segment = RecordingSegment([1])
    segment_ref = weakref.ref(segment)
    chain = IterChain([segment])
    del segment

    assert list(chain) == [1]

    assert_released(segment_ref, "Segment dropped from the front")
    assert chain.is_empty


def test_segment_released_after_backward_exhaustion():
    """A segment drained from the back is collectable."""
    keep = RecordingSegment([0])
    segment = RecordingSegment([1, 2])
    segment_ref = weakref.ref(segment)
    chain = DoubleEndedIterChain([keep, segment])
    del segment

    assert chain.next_back() == 2
    assert chain.next_back() == 1
    assert chain.next_back() == 0

    assert_released(segment_ref, "Segment dropped from the back")


def test_pending_segments_released_with_chain():
    """Discarding a chain releases the segments it still holds."""
    segment = RecordingSegment([1, 2, 3])
    segment_ref = weakref.ref(segment)
    chain = IterChain([segment])
    del segment
    next(chain)

    del chain

    assert_released(segment_ref, "Segment held by a discarded chain")


def test_segment_released_after_close():
    segment = RecordingSegment([1, 2, 3])
    segment_ref = weakref.ref(segment)
    chain = IterChain([segment])
    del segment

    chain.close()

    assert_released(segment_ref, "Segment released by close()")


def test_draining_many_segments_leaves_nothing_behind():
    """Segments do not accumulate over a long traversal."""

    def operation():
        chain = IterChain(RecordingSegment([i]) for i in range(200))
        assert sum(chain) == sum(range(200))
        assert chain.is_empty

    assert_no_object_leak(operation, "RecordingSegment")


def test_interleaved_include_and_drain_does_not_grow():
    chain = IterChain()

    with MemoryTracker("RecordingSegment") as tracker:
        for i in range(100):
            chain.include(RecordingSegment([i, i]))
            assert next(chain) == i
            assert next(chain) == i

        assert chain.pull(None) is None

    tracker.assert_no_growth()


def test_memory_utils_examples_run():
    """The usage examples in the memory helpers run as written."""
    results = doctest.testmod(memory_utils)

    assert results.attempted > 0
    assert results.failed == 0
