"""
Timing harness measuring how far each implementation scales.
"""
from time import perf_counter
from typing import Callable, Iterable, Generator

from runa.dna import DnaBlock
from runa.utils.resources import RESOURCES


def lapse(func: Callable[[], object]) -> float:
    """Seconds taken by one call of ``func``."""
    start = perf_counter()
    func()
    return perf_counter() - start


def lapse_sequence(func: Callable[[DnaBlock], object], blocks: Iterable[tuple[int, DnaBlock]],
                   callback: Callable[[int, float], None] = None) -> Generator[tuple[float, int], None, None]:
    """
    Lazily times ``func`` on each ``(size, block)``.

    Args:
        func: Called with each block.
        blocks: Instances to time, usually from :func:`runa.io.read_test_insts_by_size`.
        callback: Called with ``(size, seconds)`` after each run.

    Yields:
        ``(seconds, size)`` tuples.
    """
    for size, block in blocks:
        seconds = lapse(lambda: func(block))
        if callback is not None: callback(size, seconds)
        yield seconds, size


def lapse_limit(func: Callable[[DnaBlock], object], blocks: Iterable[tuple[int, DnaBlock]],
                budget: float = None, callback: Callable[[int, float], None] = None) -> int:
    """
    Largest instance size ``func`` handles within ``budget`` seconds.

    Timing stops at the first instance over budget, so ``blocks`` should grow in size.
    Returns 0 when even the first instance is over budget.
    """
    if budget is None: budget = RESOURCES.bench_budget
    limit = 0
    for seconds, size in lapse_sequence(func, blocks, callback):
        if seconds >= budget: break
        limit = size
    return limit
