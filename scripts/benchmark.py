#!/usr/bin/env python3
"""
Chaining Iter Performance Benchmarks

This script measures how fast chains move items compared with
`itertools.chain`, scaling each workload until it hits a time limit, and
prints the results as rich tables.

Usage:
    python scripts/benchmark.py           # Run all benchmarks
    python scripts/benchmark.py --config  # Show current benchmark configuration
    python scripts/benchmark.py --quiet   # Only show the final results table

Configuration:
    Adjust the constants at the top of the file to change benchmark parameters.
"""

import argparse
import gc
import sys
import time
import tracemalloc
from dataclasses import dataclass
from itertools import chain as itertools_chain
from typing import Any, Callable, Dict, Optional

# Add the project root to the Python path
sys.path.insert(0, ".")

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from chaining_iter import DoubleEndedIterChain, IterChain, Span

# Configuration constants - adjust these to change benchmark behavior
TIME_LIMIT_SECONDS = 1.0  # Maximum time allowed per workload
STARTING_N = 10  # Starting number of segments
SCALE_FACTOR = 1.5  # How much to multiply N by each iteration
SEGMENT_SIZE = 100  # Items per segment


@dataclass
class MemoryMetrics:
    """Peak traced memory while draining a large chain."""

    segments: int
    peak_memory_kb: int
    retained_memory_kb: int


def _drain_iter_chain(n: int) -> int:
    chain = IterChain()
    for i in range(n):
        chain.include(iter(range(i * SEGMENT_SIZE, (i + 1) * SEGMENT_SIZE)))
    count = 0
    for _ in chain:
        count += 1
    return count


def _drain_itertools_chain(n: int) -> int:
    segments = [range(i * SEGMENT_SIZE, (i + 1) * SEGMENT_SIZE) for i in range(n)]
    count = 0
    for _ in itertools_chain.from_iterable(segments):
        count += 1
    return count


def _drain_alternating(n: int) -> int:
    chain = DoubleEndedIterChain(
        Span(i * SEGMENT_SIZE, (i + 1) * SEGMENT_SIZE) for i in range(n)
    )
    count = 0
    while True:
        try:
            next(chain) if count % 2 else chain.next_back()
        except StopIteration:
            return count
        count += 1


def _drain_sparse(n: int) -> int:
    """Every other segment is empty, exercising the skip path."""
    chain = IterChain()
    for i in range(n):
        chain.include(Span(0, 0))
        chain.include(Span(i, i + 1))
    return sum(1 for _ in chain)


class ChainBenchmark:
    """Rich-formatted display for chain benchmarks."""

    def __init__(self, quiet: bool = False):
        self.console = Console()
        self.quiet = quiet
        self.results: Dict[str, Dict[str, Any]] = {}
        self.memory: Optional[MemoryMetrics] = None

    def run_benchmarks(self):
        """Run all benchmarks and display results."""
        start_time = time.time()

        if not self.quiet:
            self._display_header()

        self._run("iter_chain", "IterChain forward drain", _drain_iter_chain)
        self._run("itertools", "itertools.chain baseline", _drain_itertools_chain)
        self._run("alternating", "DoubleEndedIterChain alternating", _drain_alternating)
        self._run("sparse", "IterChain with empty segments", _drain_sparse)

        self.memory = self._profile_memory()

        self._display_final_results(start_time)

    def _display_header(self):
        header = Panel(
            Align.center("Chaining Iter Benchmark Suite"),
            title="Chaining Iter Benchmarks",
            border_style="blue",
        )
        self.console.print(header)
        self.console.print()

    def _run(self, key: str, name: str, operation: Callable[[int], int]):
        if not self.quiet:
            self.console.print(f"[yellow]Running {name}...[/yellow]")

        result = self._run_adaptive_benchmark(operation)
        self.results[key] = {"name": name, **result}

        if not self.quiet:
            self.console.print(
                f"[green]✓[/green] {name}: {result['items_per_second']:,.0f} items/sec "
                f"({result['max_n']} segments)"
            )

    def _run_adaptive_benchmark(self, operation: Callable[[int], int]) -> Dict[str, Any]:
        """Scale the workload until one run takes at least the time limit."""
        n = STARTING_N

        while True:
            start_time = time.perf_counter()
            items = operation(n)
            operation_time = time.perf_counter() - start_time

            result = {
                "max_n": n,
                "items": items,
                "operation_time": operation_time,
                "items_per_second": items / operation_time if operation_time else 0.0,
            }

            if operation_time >= TIME_LIMIT_SECONDS:
                return result
            n = int(n * SCALE_FACTOR) + 1

    def _profile_memory(self) -> MemoryMetrics:
        """Drain a large chain under tracemalloc to check segments are released."""
        segments = 10_000
        gc.collect()
        tracemalloc.start()
        try:
            chain = IterChain(Span(i, i + 10) for i in range(segments))
            for _ in chain:
                pass
            current, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        return MemoryMetrics(
            segments=segments,
            peak_memory_kb=peak // 1024,
            retained_memory_kb=current // 1024,
        )

    def _display_final_results(self, start_time: float):
        elapsed = time.time() - start_time

        table = Table(title="Final Benchmark Results")
        table.add_column("Benchmark", style="cyan", no_wrap=True)
        table.add_column("Max Workload", style="magenta")
        table.add_column("Throughput", style="green", justify="right")
        table.add_column("vs itertools", style="yellow", justify="right")

        baseline = self.results.get("itertools", {}).get("items_per_second", 0)
        for result in self.results.values():
            ratio = (
                f"{result['items_per_second'] / baseline:.2f}x" if baseline else "N/A"
            )
            table.add_row(
                result["name"],
                f"{result['max_n']:,} segments",
                f"{result['items_per_second'] / 1e6:.2f}M items/sec",
                ratio,
            )

        self.console.print()
        self.console.print(table)

        if self.memory:
            self.console.print()
            self.console.print(
                Panel(
                    f"Segments drained: {self.memory.segments:,}\n"
                    f"Peak traced memory: {self.memory.peak_memory_kb:,} KB\n"
                    f"Retained after drain: {self.memory.retained_memory_kb:,} KB",
                    title="Memory",
                    border_style="cyan",
                )
            )

        self.console.print()
        self.console.print(f"[dim]Benchmark completed in {elapsed:.2f} seconds[/dim]")


def print_config():
    """Print the current benchmark configuration."""
    print("Chaining Iter Benchmark Configuration:")
    print(f"  TIME_LIMIT_SECONDS: {TIME_LIMIT_SECONDS}")
    print(f"  STARTING_N: {STARTING_N}")
    print(f"  SCALE_FACTOR: {SCALE_FACTOR}")
    print(f"  SEGMENT_SIZE: {SEGMENT_SIZE}")


def main():
    """Main entry point for the benchmark script."""
    parser = argparse.ArgumentParser(description="Chaining Iter Performance Benchmarks")
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output, show only final results",
    )

    args = parser.parse_args()

    if args.config:
        print_config()
        return

    if not args.quiet:
        print_config()
        print()

    ChainBenchmark(quiet=args.quiet).run_benchmarks()


if __name__ == "__main__":
    main()
