"""
Chaining Iter Chains - Run-Time Composition of Sequence Producers
=================================================================

This module provides chains that hold an ordered, growable collection of
same-typed sequence producers ("segments") and consume them as one continuous
sequence.

Key classes:
- IterChain: forward traversal over any iterators
- DoubleEndedIterChain: forward and backward traversal over double-ended
  segments

Unlike `itertools.chain`, segments can be added at either end at any time,
including between pulls. Exhausted segments are dropped as soon as a pull
discovers them, so each segment is released once and skipped at most once.

Performance characteristics:
- include() / include_front(): O(1) deque append
- next() / next_back(): amortized O(1) across a full traversal
"""

import copy
import logging
from collections import deque
from collections.abc import Iterable
from functools import total_ordering
from typing import Any, Deque, Generic, Iterator, Tuple, Type, Union

from .protocols import DoubleEndedSegment, Segment
from .segments import as_segment
from .types import EXHAUSTED, T

# ============================================================================
# EXCEPTIONS
# ============================================================================


class SegmentTypeError(TypeError):
    """Value included in a chain does not provide the chain's segment capability."""

    pass


# ============================================================================
# FORWARD CHAIN
# ============================================================================


@total_ordering
class IterChain(Generic[T]):
    """
    Chain of forward sequence producers consumed as one sequence.

    Segments are pulled front to back. A segment that raises `StopIteration`
    is removed from the chain and never consulted again; the next segment is
    tried within the same pull, so empty segments are transparent.

    Running out of items is not terminal. Including another segment after a
    pull returned `EXHAUSTED` makes its items reachable on the next pull.

    Attributes:
        close_exhausted: Call `close()` on segments as they are dropped.

    Example:
        ```python
        chain = IterChain()
        chain.include(iter([1, 2]))
        chain.include(iter([]))
        chain.include(x * 10 for x in range(3, 5))

        list(chain)       # [1, 2, 30, 40]
        chain.pull()      # EXHAUSTED

        chain.include(iter([5]))
        next(chain)       # 5
        ```
    """

    __slots__ = ("_segments", "close_exhausted")

    segment_protocol: Type = Segment

    def __init__(
        self, segments: Iterable[Segment[T]] = (), *, close_exhausted: bool = True
    ):
        self._segments: Deque[Segment[T]] = deque()
        self.close_exhausted = close_exhausted
        for segment in segments:
            self.include(segment)

    @classmethod
    def from_iterables(
        cls, *iterables: Iterable[T], close_exhausted: bool = True
    ) -> "IterChain[T]":
        """Build a chain with one segment per iterable, via `as_segment()`."""
        return cls(
            (as_segment(iterable) for iterable in iterables),
            close_exhausted=close_exhausted,
        )

    # ------------------------------------------------------------------
    # Segment management
    # ------------------------------------------------------------------

    def include(self, segment: Segment[T]) -> None:
        """Include the given segment at the end of the chain."""
        self._segments.append(self._check_segment(segment))

    def include_front(self, segment: Segment[T]) -> None:
        """
        Include the given segment at the front of the chain.

        The next forward pull consults it before any segment already held.

        Example:
            ```python
            chain = DoubleEndedIterChain()
            chain.include(Span(3, 5))
            chain.include_front(Span(0, 3))
            next(chain)  # 0
            ```
        """
        self._segments.appendleft(self._check_segment(segment))

    def _check_segment(self, segment: Any) -> Segment[T]:
        if isinstance(segment, self.segment_protocol):
            return segment
        message = (
            f"{type(self).__name__} cannot include {type(segment).__name__!r}: "
            f"expected a {self.segment_protocol.__name__}"
        )
        if isinstance(segment, Iterable) and not isinstance(segment, Segment):
            message += "; wrap plain iterables with as_segment()"
        raise SegmentTypeError(message)

    def _drop(self, segment: Segment[T], end: str) -> None:
        segments = self._segments
        # The segment may have included others into the chain before raising
        if end == "front" and segments and segments[0] is segment:
            segments.popleft()
        elif end == "back" and segments and segments[-1] is segment:
            segments.pop()
        else:
            for index, held in enumerate(segments):
                if held is segment:
                    del segments[index]
                    break
            else:
                return
        logging.debug("Dropping exhausted segment %r from the %s", segment, end)
        self._release(segment)

    def _release(self, segment: Segment[T]) -> None:
        if self.close_exhausted:
            close = getattr(segment, "close", None)
            if callable(close):
                close()

    @property
    def segments(self) -> Tuple[Segment[T], ...]:
        """Snapshot of the held segments, in traversal order."""
        return tuple(self._segments)

    @property
    def is_empty(self) -> bool:
        """True when the chain holds no segments."""
        return not self._segments

    # ------------------------------------------------------------------
    # Forward traversal
    # ------------------------------------------------------------------

    def __iter__(self) -> "IterChain[T]":
        return self

    def __next__(self) -> T:
        segments = self._segments
        while segments:
            segment = segments[0]
            try:
                return next(segment)
            except StopIteration:
                self._drop(segment, "front")
        raise StopIteration

    def pull(self, default: Any = EXHAUSTED) -> Union[T, Any]:
        """
        Pull the next item from the front of the chain.

        Same as `next(chain, default)`; running out of items is a normal
        result here rather than `StopIteration`.

        Returns:
            The next item, or `default` (EXHAUSTED unless given) when every
            segment is exhausted.
        """
        try:
            return self.__next__()
        except StopIteration:
            return default

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release every remaining segment. The chain stays usable."""
        if self._segments:
            logging.debug(
                "Closing %s with %d segment(s)", type(self).__name__, len(self._segments)
            )
        while self._segments:
            self._release(self._segments.popleft())

    def __enter__(self) -> "IterChain[T]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def clone(self) -> "IterChain[T]":
        """
        Create an independent copy of the chain.

        Each segment is copied with `copy.copy`; segments that cannot be
        copied, such as generators, make this raise `TypeError`.
        """
        new_chain = type(self)(close_exhausted=self.close_exhausted)
        new_chain._segments = deque(copy.copy(segment) for segment in self._segments)
        return new_chain

    def __copy__(self) -> "IterChain[T]":
        return self.clone()

    # ------------------------------------------------------------------
    # Structural comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IterChain):
            return NotImplemented
        return self._segments == other._segments

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, IterChain):
            return NotImplemented
        return self._segments < other._segments

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._segments)!r})"


# ============================================================================
# DOUBLE-ENDED CHAIN
# ============================================================================


class DoubleEndedIterChain(IterChain[T]):
    """
    Chain of double-ended segments that can also be consumed from the back.

    Only segments satisfying `DoubleEndedSegment` are accepted, which is
    what makes `next_back()` available. Backward pulls ask the last segment
    for `next_back()` and drop it from the back once it is exhausted.

    Forward and backward pulls may be interleaved. When both ends reach the
    same segment, that segment's own double-ended contract guarantees that
    no item is returned twice.

    A DoubleEndedIterChain is itself a DoubleEndedSegment, so chains nest.

    Example:
        ```python
        chain = DoubleEndedIterChain()
        chain.include(Span(0, 3))
        chain.include(Span(5, 7))

        next(chain)        # 0
        chain.next_back()  # 6
        list(reversed(chain))  # [5, 2, 1]
        ```
    """

    __slots__ = ()

    segment_protocol: Type = DoubleEndedSegment

    def include(self, segment: DoubleEndedSegment[T]) -> None:
        """Include the given double-ended segment at the end of the chain."""
        super().include(segment)

    def include_front(self, segment: DoubleEndedSegment[T]) -> None:
        """Include the given double-ended segment at the front of the chain."""
        super().include_front(segment)

    def next_back(self) -> T:
        """
        Pull the next item from the back of the chain.

        Raises:
            StopIteration: Every segment is exhausted from the back.
        """
        segments = self._segments
        while segments:
            segment = segments[-1]
            try:
                return segment.next_back()
            except StopIteration:
                self._drop(segment, "back")
        raise StopIteration

    def pull_back(self, default: Any = EXHAUSTED) -> Union[T, Any]:
        """
        Pull the next item from the back of the chain.

        Returns:
            The last remaining item, or `default` (EXHAUSTED unless given)
            when every segment is exhausted from the back.
        """
        try:
            return self.next_back()
        except StopIteration:
            return default

    def __reversed__(self) -> Iterator[T]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return
