import pytest

from midware.metrics import Metrics, PriorityQueue, main


def test_max_queue_drains_descending():
    queue = PriorityQueue()
    values = [2, 1, 7, 3, 9, -4, 3]
    for v in values:
        queue.push(v)
    assert list(queue.drain()) == sorted(values, reverse=True)
    assert len(queue) == 0


def test_min_queue_drains_ascending():
    queue = PriorityQueue(largest_first=False)
    values = [2, 1, 7, 3, 9, -4, 3]
    for v in values:
        queue.push(v)
    assert list(queue.drain()) == sorted(values)


def test_metrics_by_score():
    queue = PriorityQueue(key=lambda m: m.score)
    items = [Metrics("a", 3.14), Metrics("b", 1.41), Metrics("c", 2.71)]
    for m in items:
        queue.push(m)
    assert queue.peek() == Metrics("a", 3.14)
    assert [m.id for m in queue.drain()] == ["a", "c", "b"]


def test_min_metrics_by_score():
    queue = PriorityQueue(key=lambda m: m.score, largest_first=False)
    items = [Metrics("a", 3.14), Metrics("b", 1.41), Metrics("c", 2.71)]
    for m in items:
        queue.push(m)
    assert [m.id for m in queue.drain()] == ["b", "c", "a"]


def test_equal_keys_keep_insertion_order():
    queue = PriorityQueue(key=lambda m: m.score)
    for name in ["x", "y", "z"]:
        queue.push(Metrics(name, 1.0))
    assert [m.id for m in queue.drain()] == ["x", "y", "z"]


def test_len_bool_and_peek_do_not_remove():
    queue = PriorityQueue()
    assert not queue
    queue.push(5)
    queue.push(8)
    assert queue.peek() == 8
    assert len(queue) == 2
    assert queue
    assert queue.pop() == 8
    assert len(queue) == 1


def test_empty_pop_and_peek_raise():
    queue = PriorityQueue()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:5] == ["Nums max heap: ", "7", "3", "2", "1"]
    assert lines[5:10] == ["Nums min heap: ", "1", "2", "3", "7"]
    assert lines[10:14] == ["Nums max heap: ", "3.14", "2.71", "1.41"]
    assert lines[14:] == ["Nums min heap: ", "1.41", "2.71", "3.14"]