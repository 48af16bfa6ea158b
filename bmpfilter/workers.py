"""Sharing image rows out between worker threads."""

from __future__ import annotations

import os
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")


def default_workers() -> int:
    """Number of workers to use when none is given: one per available CPU."""
    return os.cpu_count() or 1


def split_rows(height: int, workers: int) -> list[range]:
    """Split rows 0..height-1 into contiguous, non-empty ranges, one per worker.

    Chunk sizes differ by at most one and the larger chunks come first.
    """
    if height < 0:
        raise ValueError("height must not be negative")
    if workers < 1:
        raise ValueError("at least one worker is required")
    base, extra = divmod(height, workers)
    chunks: list[range] = []
    start = 0
    for index in range(workers):
        size = base + (1 if index < extra else 0)
        if size == 0:
            break
        chunks.append(range(start, start + size))
        start += size
    return chunks


def map_rows(
    func: Callable[[int], T], height: int, workers: int | None = None
) -> list[T]:
    """Call func for every row index and return the results in row order.

    Each worker handles one contiguous block of rows, as split_rows gives.
    Exceptions raised by func propagate to the caller.
    """
    count = default_workers() if workers is None else workers
    chunks = split_rows(height, count)
    if len(chunks) <= 1:
        return [func(row) for row in range(height)]

    def run_chunk(rows: range) -> list[T]:
        return [func(row) for row in rows]

    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        blocks = list(pool.map(run_chunk, chunks))
    return [result for block in blocks for result in block]