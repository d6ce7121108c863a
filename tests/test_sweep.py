"""Tests for the k/n sweep controller."""

import numpy as np
import pytest

from diffquot.data.generators import scaled_sequence_fill
from diffquot.sweep import (
    DifferenceUnderflow,
    Measurement,
    StepUnderflow,
    SweepConfig,
    iter_sweep,
    problem_sizes,
    run_sweep,
)
from diffquot.utils.precision import difference_underflow_bound, resolve_precision


def _buffer_for(config: SweepConfig) -> np.ndarray:
    dtype = resolve_precision(config.precision).dtype
    return scaled_sequence_fill(config.capacity, dtype, config.gamma)


def _sweep(config: SweepConfig) -> list:
    return run_sweep(_buffer_for(config), config)


def test_default_problem_sizes():
    assert problem_sizes(SweepConfig()) == [1, 10, 100, 1000]


def test_problem_sizes_stay_below_capacity():
    assert problem_sizes(SweepConfig(capacity=1000)) == [1, 10, 100]
    assert problem_sizes(SweepConfig(capacity=100, n_base=3)) == [1, 3, 9, 27, 81]


def test_default_sweep_scenario():
    config = SweepConfig(capacity=1024, gamma=100.0, precision="double")
    events = _sweep(config)

    last = events[-1]
    assert isinstance(last, DifferenceUnderflow)
    assert last.n == 1
    assert last.k <= difference_underflow_bound(np.float64)

    first = events[0]
    assert isinstance(first, Measurement)
    assert (first.k, first.n) == (0, 1)
    assert first.error == pytest.approx(1.0, abs=1e-9)

    small_k = [e for e in events if isinstance(e, Measurement) and e.n == 1 and 1 <= e.k <= 6]
    assert [e.k for e in small_k] == [1, 2, 3, 4, 5, 6]
    for event in small_k:
        assert abs(event.error - event.h) < 1e-6


def test_measurements_precede_difference_underflow_per_size():
    events = _sweep(SweepConfig())
    for n in (1, 10, 100, 1000):
        per_n = [e for e in events if getattr(e, "n", None) == n]
        underflow_ks = [e.k for e in per_n if isinstance(e, DifferenceUnderflow)]
        if not underflow_ks:
            continue
        first_underflow = min(underflow_ks)
        assert all(e.k < first_underflow for e in per_n if isinstance(e, Measurement))


def test_underflow_above_one_moves_to_next_k():
    events = _sweep(SweepConfig())
    for idx, event in enumerate(events[:-1]):
        if isinstance(event, DifferenceUnderflow):
            assert event.n > 1
            following = events[idx + 1]
            assert following.k == event.k + 1
            assert following.n == 1


@pytest.mark.parametrize("precision", ["single", "double"])
def test_sweep_finishes_on_unit_size_underflow(precision):
    config = SweepConfig(precision=precision)
    events = _sweep(config)
    dtype = resolve_precision(precision).dtype
    assert isinstance(events[-1], DifferenceUnderflow)
    assert events[-1].n == 1
    assert events[-1].k <= difference_underflow_bound(dtype)
    assert not any(isinstance(e, StepUnderflow) for e in events)


@pytest.mark.parametrize(("precision", "k_start"), [("double", 400), ("single", 50)])
def test_step_underflow_halts_before_probing(precision, k_start):
    events = _sweep(SweepConfig(precision=precision, k_start=k_start))
    assert events == [StepUnderflow(k=k_start)]


def test_step_underflow_after_large_k_step():
    events = _sweep(SweepConfig(k_step=1000))
    assert [type(e) for e in events] == [Measurement] * 4 + [StepUnderflow]
    assert events[-1].k == 1000


def test_reverse_order_sweep_terminates():
    events = _sweep(SweepConfig(order="reverse"))
    assert isinstance(events[-1], DifferenceUnderflow)
    assert events[-1].n == 1


def test_emit_sees_events_in_order():
    seen = []
    config = SweepConfig(capacity=100)
    events = run_sweep(_buffer_for(config), config, emit=seen.append)
    assert seen == events


def test_iter_sweep_is_lazy():
    config = SweepConfig()
    sweep = iter_sweep(_buffer_for(config), config)
    first = next(sweep)
    assert isinstance(first, Measurement)
    assert (first.k, first.n) == (0, 1)


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"capacity": 1}, "Capacity"),
        ({"gamma": 0.0}, "gamma"),
        ({"gamma": float("nan")}, "gamma"),
        ({"k_start": -1}, "k_start"),
        ({"k_step": 0}, "k_step"),
        ({"n_start": 0}, "n_start"),
        ({"n_base": 1}, "n_base"),
        ({"precision": "half"}, "precision"),
        ({"order": "sideways"}, "order"),
    ],
)
def test_invalid_config_rejected(overrides, message):
    config = SweepConfig(**overrides)
    buffer = scaled_sequence_fill(1024, np.float64, 1.0)
    with pytest.raises(ValueError, match=message):
        next(iter_sweep(buffer, config))


def test_buffer_precision_must_match():
    buffer = scaled_sequence_fill(1024, np.float32, 100.0)
    with pytest.raises(ValueError, match="does not match"):
        next(iter_sweep(buffer, SweepConfig(precision="double")))


def test_buffer_must_hold_capacity():
    buffer = scaled_sequence_fill(10, np.float64, 100.0)
    with pytest.raises(ValueError, match="smaller than capacity"):
        next(iter_sweep(buffer, SweepConfig()))
