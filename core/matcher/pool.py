"""Bounded fan-out for independent scoring passes.

Every pass (one job, or one candidate) is independent and shares no mutable
state, so passes run on a fixed-size thread pool. A pass that raises is
counted as failed and skipped. With a deadline, passes still pending when it
expires are cancelled and counted as timed out; everything that finished in
time is kept.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, FIRST_COMPLETED, wait
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class BatchOutcome(Generic[T, R]):
    """Completed (item, result) pairs in input order, plus failure counts."""
    completed: List[Tuple[T, R]] = field(default_factory=list)
    failed: int = 0
    timed_out: int = 0


def run_bounded(
    fn: Callable[[T], R],
    items: Sequence[T],
    max_workers: int,
    timeout: Optional[float] = None,
    describe: Callable[[T], str] = repr
) -> BatchOutcome[T, R]:
    """
    Apply fn to every item on a bounded thread pool.

    Args:
        fn: Pure function run once per item
        items: Items to process
        max_workers: Upper bound on concurrent passes
        timeout: Seconds for the whole batch, None for no deadline
        describe: Label for an item in log messages

    Returns:
        BatchOutcome with results ordered like items
    """
    outcome: BatchOutcome[T, R] = BatchOutcome()
    if not items:
        return outcome

    deadline = time.monotonic() + timeout if timeout is not None else None
    results: List[Optional[Tuple[T, R]]] = [None] * len(items)

    executor = ThreadPoolExecutor(max_workers=min(max_workers, len(items)))
    try:
        pending = {executor.submit(fn, item): index for index, item in enumerate(items)}

        while pending:
            remaining = None
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break

            done, _ = wait(pending, timeout=remaining, return_when=FIRST_COMPLETED)
            for future in done:
                index = pending.pop(future)
                try:
                    results[index] = (items[index], future.result())
                except Exception as e:
                    outcome.failed += 1
                    logger.warning(f"Scoring pass failed for {describe(items[index])}: {e}")

        if pending:
            for future in pending:
                future.cancel()
            outcome.timed_out = len(pending)
            logger.warning(
                f"Deadline of {timeout}s reached with {len(pending)} of {len(items)} passes unfinished; "
                f"returning {len(items) - len(pending) - outcome.failed} completed results"
            )
    finally:
        # Do not block on passes that missed the deadline
        executor.shutdown(wait=False, cancel_futures=True)

    outcome.completed = [r for r in results if r is not None]
    return outcome


def run_sequential(
    fn: Callable[[T], R],
    items: Sequence[T],
    describe: Callable[[T], str] = repr
) -> BatchOutcome[T, R]:
    """Same contract as run_bounded, on the calling thread."""
    outcome: BatchOutcome[T, R] = BatchOutcome()
    for item in items:
        try:
            outcome.completed.append((item, fn(item)))
        except Exception as e:
            outcome.failed += 1
            logger.warning(f"Scoring pass failed for {describe(item)}: {e}")
    return outcome
