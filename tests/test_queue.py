import math
import random

import pytest

from queue_cli.queue import ProcessQueue


class ScriptedRandom:
    def __init__(self, draws):
        self._draws = list(draws)

    def random(self):
        return self._draws.pop(0)


def _draw_for(value, weight):
    # Uniform draw that makes weighted_random(weight, ...) return value.
    return math.exp(-value / weight)


def test_default_construction_size():
    q = ProcessQueue(rng=random.Random(0))
    assert len(q) == 10


def test_ids_are_dense_and_ordered():
    q = ProcessQueue(size=0, rng=random.Random(7))
    for _ in range(25):
        q.append()
    assert len(q) == 25
    assert [p.process_id for p in q] == list(range(25))


def test_times_are_monotonic_and_waits_non_negative():
    q = ProcessQueue(size=200, rng=random.Random(42))
    procs = q.processes
    for prev, cur in zip(procs, procs[1:]):
        assert cur.time_entered >= prev.time_entered
        assert cur.time_complete >= prev.time_complete
    assert all(p.wait_time >= 0 for p in procs)
    assert procs[0].process_id == 0
    assert procs[0].wait_time == 0.0


def test_append_uses_weights_for_draws():
    rng = ScriptedRandom(
        [
            _draw_for(2.0, 3.0), _draw_for(4.0, 5.0),
            _draw_for(3.0, 3.0), _draw_for(1.0, 5.0),
        ]
    )
    q = ProcessQueue(size=2, rng=rng)
    first, second = q.processes
    assert first.execution_time == pytest.approx(2.0)
    assert first.time_entered == pytest.approx(4.0)
    assert first.time_complete == pytest.approx(6.0)
    assert second.time_entered == pytest.approx(5.0)
    assert second.time_complete == pytest.approx(9.0)
    assert second.wait_time == pytest.approx(1.0)


def test_append_leaves_existing_records_untouched():
    q = ProcessQueue(size=5, rng=random.Random(3))
    before = q.processes
    added = q.append()
    assert q.processes[:5] == before
    assert added.process_id == 5
    assert q[-1] is added


def test_same_seed_gives_same_queue():
    a = ProcessQueue(size=30, rng=random.Random(99))
    b = ProcessQueue(size=30, rng=random.Random(99))
    assert a.processes == b.processes


def test_analyzer_shortcuts():
    q = ProcessQueue(size=20, rng=random.Random(5))
    stats = q.compute_statistics()
    lengths = q.compute_line_length()
    assert stats["Count"] == 20
    assert lengths[0] == 0
    assert sorted(lengths) == list(range(20))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": -1},
        {"process_weight": 0.0},
        {"interval_weight": -2.0},
        {"process_weight": float("nan")},
        {"interval_weight": float("inf")},
    ],
)
def test_invalid_arguments_rejected(kwargs):
    with pytest.raises(ValueError):
        ProcessQueue(rng=random.Random(0), **kwargs)
