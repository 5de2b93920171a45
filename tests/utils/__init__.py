"""
Test utilities for chaining_iter.

This package contains shared testing utilities: instrumented segments and
memory helpers for checking that chains release what they drop.
"""

from .memory_utils import (
    MemoryTracker,
    assert_no_object_leak,
    assert_released,
    count_types,
)
from .segments import FailingSegment, ForwardOnly, RecordingSegment

__all__ = [
    "assert_released",
    "assert_no_object_leak",
    "count_types",
    "MemoryTracker",
    "RecordingSegment",
    "ForwardOnly",
    "FailingSegment",
]
