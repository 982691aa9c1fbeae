"""Thread drills: timed workers, a shared job counter and a two-sender channel."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import Empty, SimpleQueue
from typing import Any, Protocol

SEND_DELAY = 1.0
_POLL = 0.01


class _Sink(Protocol):
    def put(self, item: Any) -> None: ...


def run_timed_threads(count: int, delay: float) -> list[int]:
    """Run threads that each sleep for the delay; return each one's elapsed milliseconds."""

    def work(index: int) -> int:
        start = time.perf_counter()
        time.sleep(delay)
        print(f"thread {index} is complete")
        return int((time.perf_counter() - start) * 1000)

    with ThreadPoolExecutor(max_workers=max(count, 1)) as pool:
        results = list(pool.map(work, range(count)))

    if len(results) != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")

    print()
    for index, result in enumerate(results):
        print(f"thread {index} took {result}ms")
    return results


@dataclass
class _JobStatus:
    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)


def complete_jobs(count: int, delay: float) -> int:
    """Let each of count threads mark one job done; return the jobs completed."""
    status = _JobStatus()

    def work() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=work) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        with status.lock:
            print(f"jobs completed {status.jobs_completed}")
    with status.lock:
        return status.jobs_completed


@dataclass
class Queue:
    """Values to send, split in two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def _send_tx(queue: Queue, sink: _Sink, delay: float) -> list[threading.Thread]:
    def send(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            sink.put(value)
            time.sleep(delay)

    senders = [
        threading.Thread(target=send, args=(list(queue.first_half),)),
        threading.Thread(target=send, args=(list(queue.second_half),)),
    ]
    for sender in senders:
        sender.start()
    return senders


def send_tx(queue: Queue, sink: _Sink) -> list[threading.Thread]:
    """Send each half of the queue to the sink from its own thread; return the started threads."""
    return _send_tx(queue, sink, SEND_DELAY)


def receive_all(queue: Queue, delay: float = SEND_DELAY) -> list[int]:
    """Receive every value sent from the queue; RuntimeError if the count differs from its length."""
    channel: SimpleQueue[int] = SimpleQueue()
    senders = _send_tx(queue, channel, delay)
    received: list[int] = []
    while any(sender.is_alive() for sender in senders) or not channel.empty():
        try:
            value = channel.get(timeout=_POLL)
        except Empty:
            continue
        print(f"Got: {value}")
        received.append(value)
    for sender in senders:
        sender.join()

    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(f"received {len(received)} values, expected {queue.length}")
    return received