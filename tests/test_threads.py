from queue import SimpleQueue

import pytest

from rustdrill.drills.threads import (
    Queue,
    complete_jobs,
    receive_all,
    run_timed_threads,
    send_tx,
)


def test_run_timed_threads_returns_one_result_per_thread(capsys):
    results = run_timed_threads(4, 0.02)
    assert len(results) == 4
    assert all(result >= 19 for result in results)
    out = capsys.readouterr().out
    assert "thread 0 is complete" in out
    assert "thread 3 took" in out


def test_run_timed_threads_with_none():
    assert run_timed_threads(0, 0.0) == []


def test_complete_jobs_counts_every_thread(capsys):
    assert complete_jobs(10, 0.0) == 10
    out = capsys.readouterr().out
    assert out.strip().splitlines()[-1] == "jobs completed 10"


def test_default_queue():
    queue = Queue()
    assert queue.length == 10
    assert queue.first_half + queue.second_half == list(range(1, 11))


def test_receive_all_gets_every_value(capsys):
    received = receive_all(Queue(), 0.0)
    assert sorted(received) == list(range(1, 11))
    assert "total numbers received: 10" in capsys.readouterr().out


def test_receive_all_keeps_order_within_each_half():
    received = receive_all(Queue(), 0.0)
    first = [value for value in received if value <= 5]
    second = [value for value in received if value > 5]
    assert first == [1, 2, 3, 4, 5]
    assert second == [6, 7, 8, 9, 10]


def test_receive_all_rejects_wrong_length():
    with pytest.raises(RuntimeError):
        receive_all(Queue(length=3, first_half=[1], second_half=[2]), 0.0)


def test_send_tx_delivers_both_halves():
    sink = SimpleQueue()
    senders = send_tx(Queue(length=2, first_half=[1], second_half=[2]), sink)
    for sender in senders:
        sender.join()
    values = []
    while not sink.empty():
        values.append(sink.get())
    assert sorted(values) == [1, 2]
    assert len(senders) == 2