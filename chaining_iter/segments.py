"""
Chaining Iter Segments - Double-Ended Sequence Producers
========================================================

Python's built-in iterators only advance from the front. This module provides
the double-ended producers a `DoubleEndedIterChain` needs:

- Span: half-open integer range `[start, stop)` pulled from either end
- SequenceCursor: cursor over any `Sequence` pulled from either end
- as_segment: wrap an arbitrary iterable in the most capable segment
"""

from collections.abc import Sequence
from functools import total_ordering
from typing import Any, Generic, Iterable, Union

from .protocols import DoubleEndedSegment, Segment
from .types import T

# ============================================================================
# INTEGER SPAN
# ============================================================================


@total_ordering
class Span:
    """
    Half-open integer range that yields from both ends.

    The front yields `start, start + 1, ...`; the back yields
    `stop - 1, stop - 2, ...`. Both ends draw from the same remaining
    interval, so an integer is never yielded twice. A span whose `stop`
    is not greater than `start` is empty.

    Example:
        ```python
        span = Span(0, 4)
        next(span)         # 0
        span.next_back()   # 3
        list(span)         # [1, 2]
        ```
    """

    __slots__ = ("start", "stop")

    def __init__(self, start: int, stop: int):
        self.start = start
        self.stop = stop

    def __iter__(self) -> "Span":
        return self

    def __next__(self) -> int:
        if self.start >= self.stop:
            raise StopIteration
        value = self.start
        self.start += 1
        return value

    def next_back(self) -> int:
        if self.start >= self.stop:
            raise StopIteration
        self.stop -= 1
        return self.stop

    def __len__(self) -> int:
        return max(self.stop - self.start, 0)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (self.start, self.stop) == (other.start, other.stop)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (self.start, self.stop) < (other.start, other.stop)

    # Mutable iterator state
    __hash__ = None

    def __copy__(self) -> "Span":
        return Span(self.start, self.stop)

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.stop})"


# ============================================================================
# SEQUENCE CURSOR
# ============================================================================


class SequenceCursor(Generic[T]):
    """
    Double-ended cursor over a `Sequence`.

    The cursor keeps a front index and a back index into the sequence and
    never copies it. The sequence must not change length while the cursor
    is in use.
    """

    __slots__ = ("sequence", "_front", "_back")

    def __init__(self, sequence: Sequence):
        self.sequence = sequence
        self._front = 0
        self._back = len(sequence)

    def __iter__(self) -> "SequenceCursor[T]":
        return self

    def __next__(self) -> T:
        if self._front >= self._back:
            raise StopIteration
        item = self.sequence[self._front]
        self._front += 1
        return item

    def next_back(self) -> T:
        if self._front >= self._back:
            raise StopIteration
        self._back -= 1
        return self.sequence[self._back]

    def __len__(self) -> int:
        return self._back - self._front

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return (
            self._front == other._front
            and self._back == other._back
            and self.sequence == other.sequence
        )

    __hash__ = None

    def __copy__(self) -> "SequenceCursor[T]":
        cursor = SequenceCursor(self.sequence)
        cursor._front = self._front
        cursor._back = self._back
        return cursor

    def __repr__(self) -> str:
        return (
            f"SequenceCursor({self.sequence!r}, front={self._front}, back={self._back})"
        )


# ============================================================================
# CONVERSION
# ============================================================================


def as_segment(iterable: Iterable[T]) -> Union[DoubleEndedSegment[T], Segment[T]]:
    """
    Wrap an iterable in the most capable segment available for it.

    - double-ended producers are returned unchanged
    - `range` objects with step 1 become a `Span`
    - other sequences become a `SequenceCursor`
    - anything else becomes a forward-only `iter(iterable)`
    """
    if isinstance(iterable, DoubleEndedSegment):
        return iterable
    if isinstance(iterable, range) and iterable.step == 1:
        return Span(iterable.start, iterable.stop)
    if isinstance(iterable, Sequence):
        return SequenceCursor(iterable)
    return iter(iterable)
