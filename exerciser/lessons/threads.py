"""Work spread over threads: timed jobs, a shared counter and two producers."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import Queue as _Channel


def _timed_job(index: int, delay: float) -> int:
    start = time.monotonic()
    time.sleep(delay)
    print(f"thread {index} is complete")
    return int((time.monotonic() - start) * 1000)


def run_timed_jobs(count: int, delay: float) -> list[int]:
    """Run `count` jobs in parallel threads; return each job's time in milliseconds."""
    if count <= 0:
        return []
    with ThreadPoolExecutor(max_workers=count) as pool:
        results = list(pool.map(_timed_job, range(count), [delay] * count))
    print()
    for index, result in enumerate(results):
        print(f"thread {index} took {result}ms")
    return results


@dataclass
class JobStatus:
    """A count of finished jobs, guarded by a lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


def run_jobs(count: int, delay: float) -> JobStatus:
    """Run `count` threads that each record one finished job in a shared status."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    workers = [threading.Thread(target=job) for _ in range(count)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
        with status.lock:
            print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass
class Queue:
    """Ten numbers split into two halves, sent with a pause between values."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    interval: float = 1.0


def send_tx(queue: Queue, channel) -> list[threading.Thread]:
    """Send both halves on the channel from two threads.

    Each thread puts None on the channel after its last value, so a receiver
    knows the sending is over once it has seen two of them.
    """

    def send(values: list[int]) -> None:
        for value in values:
            print(f"sending {value!r}")
            channel.put(value)
            time.sleep(queue.interval)
        channel.put(None)

    senders = [
        threading.Thread(target=send, args=(list(queue.first_half),), daemon=True),
        threading.Thread(target=send, args=(list(queue.second_half),), daemon=True),
    ]
    for sender in senders:
        sender.start()
    return senders


def receive_all(queue: Queue) -> list[int]:
    """Send the queue's values over a channel and collect them in arrival order."""
    channel: _Channel = _Channel()
    senders = send_tx(queue, channel)
    received: list[int] = []
    finished = 0
    while finished < len(senders):
        value = channel.get()
        if value is None:
            finished += 1
            continue
        print(f"Got: {value}")
        received.append(value)
    for sender in senders:
        sender.join()

    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers but the queue holds {queue.length}"
        )
    return received