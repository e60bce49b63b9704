"""Sharing data between threads and waiting on work done in the background."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th number from each offset, one thread per offset.

    The result holds one sum per offset, in offset order.
    """
    if workers < 1:
        raise ValueError("at least one worker is required")

    def sum_from(offset: int) -> int:
        total = sum(numbers[offset::workers])
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))


@dataclass
class JobStatus:
    """How many background jobs have finished."""

    jobs_completed: int = 0


def wait_for_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> int:
    """Run jobs on a background thread and poll until they are all done.

    Prints "waiting... " on each poll that finds work outstanding and
    returns how many such polls there were.
    """
    status = JobStatus()
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            with lock:
                status.jobs_completed += 1

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    waits = 0
    while True:
        with lock:
            if status.jobs_completed >= jobs:
                break
        print("waiting... ")
        waits += 1
        time.sleep(poll_delay)
    thread.join()
    return waits