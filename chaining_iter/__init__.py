"""
Chaining Iter - Run-Time Chains of Same-Typed Iterators

Chain an arbitrary number of iterators at run time, at either end, and
consume them as one sequence. Chains of double-ended segments can also be
consumed from the back.
"""

from .chain import DoubleEndedIterChain, IterChain, SegmentTypeError
from .protocols import DoubleEndedSegment, Segment
from .segments import SequenceCursor, Span, as_segment
from .types import EXHAUSTED

__all__ = [
    # Chains
    "IterChain",
    "DoubleEndedIterChain",
    # Segment protocols
    "Segment",
    "DoubleEndedSegment",
    # Segments
    "Span",
    "SequenceCursor",
    "as_segment",
    # Sentinel and exceptions
    "EXHAUSTED",
    "SegmentTypeError",
]
