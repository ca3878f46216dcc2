from __future__ import annotations

import numpy as np

from perfect_hash_table.builder import build_bucket_table
from perfect_hash_table.hashing import str_hash


def test_empty_bucket_builds_no_table() -> None:
    table = build_bucket_table([], np.random.default_rng(0))

    assert table is not None
    assert table.size == 0
    assert table.trials == 0
    assert not table.holds(b"", str_hash(b""))
    assert table.params.a >= 1


def test_single_key_succeeds_on_first_trial(fixed_rng) -> None:
    table = build_bucket_table([b"x"], fixed_rng)

    assert table.trials == 1
    assert table.size == 1
    assert fixed_rng.calls == 2
    assert table.holds(b"x", str_hash(b"x"))
    assert not table.holds(b"y", str_hash(b"y"))


def test_table_is_collision_free_with_k_squared_slots() -> None:
    keys = [f"key-{i}".encode() for i in range(12)]

    table = build_bucket_table(keys, np.random.default_rng(1))

    assert table.size == 144
    assert int(table.occupied.sum()) == 12
    assert sorted(table.members().values()) == sorted(keys)
    for slot, key in table.members().items():
        assert table.slot_of(str_hash(key)) == slot
    for key in keys:
        assert table.holds(key, str_hash(key))


def test_unoccupied_slots_stay_none() -> None:
    table = build_bucket_table([b"", b"a", b"b"], np.random.default_rng(3))

    assert table.holds(b"", str_hash(b""))
    for i in range(table.size):
        assert (table.slots[i] is None) == (not table.occupied[i])


def test_exhausted_budget_returns_none(fixed_rng) -> None:
    # a=1, b=0 sends both keys to slot 0 of 4
    assert build_bucket_table([b"\x00", b"\x04"], fixed_rng, max_trials=25) is None
    assert fixed_rng.calls == 50


def test_zero_budget_never_draws(fixed_rng) -> None:
    assert build_bucket_table([b"x"], fixed_rng, max_trials=0) is None
    assert fixed_rng.calls == 0
