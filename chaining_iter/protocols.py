"""
Chaining Iter Protocols - Segment Interface Definitions
=======================================================

This module defines the Protocol-based interfaces a sequence producer must
satisfy to be held by a chain.

Two capabilities exist:

- `Segment` - the forward capability. Every Python iterator already
  satisfies it: `__next__` yields the next item or raises `StopIteration`.
- `DoubleEndedSegment` - extends `Segment` with `next_back()`, which yields
  the last remaining item or raises `StopIteration`.

A double-ended producer keeps one pool of remaining items for both ends: an
item taken from the front is never handed out again from the back, and vice
versa. Chains rely on that contract when forward and backward pulls meet on
the same segment.

Both protocols are `@runtime_checkable` so chains can reject a producer of
the wrong capability when it is included.
"""

from typing import Iterator, Protocol, runtime_checkable

from .types import T_co

# ============================================================================
# FORWARD CAPABILITY
# ============================================================================


@runtime_checkable
class Segment(Protocol[T_co]):
    """
    Protocol for a forward sequence producer.

    Any iterator qualifies: generators, `iter(list)`, file objects,
    `itertools` products, and the chains of this package.

    Example:
        ```python
        def drain(segment: Segment[int]) -> list[int]:
            return list(segment)

        drain(iter([1, 2, 3]))   # [1, 2, 3]
        drain(x * 2 for x in range(3))
        ```
    """

    def __iter__(self) -> Iterator[T_co]: ...

    def __next__(self) -> T_co:
        """
        Yield the next item from the front.

        Raises:
            StopIteration: No item remains at the front.
        """
        ...


# ============================================================================
# DOUBLE-ENDED CAPABILITY
# ============================================================================


@runtime_checkable
class DoubleEndedSegment(Segment[T_co], Protocol[T_co]):
    """
    Protocol for a sequence producer that can also be pulled from its end.

    Example:
        ```python
        span = Span(0, 3)
        next(span)        # 0
        span.next_back()  # 2
        next(span)        # 1
        span.next_back()  # raises StopIteration
        ```
    """

    def next_back(self) -> T_co:
        """
        Yield the last item not yet yielded from either end.

        Raises:
            StopIteration: No item remains.
        """
        ...
