# test/test_builder.py
import numpy as np
import pytest

from buffcurve.core import (
    Equation,
    EquationCatalog,
    MalformedEquation,
    Series,
    build_all_series,
    build_cast_schedule,
    build_series,
    combine_series,
    create_time_axis,
    running_mean,
)


def _const(value):
    return lambda t, cd: np.full(t.shape, value)


T = create_time_axis(100)
SCHED = build_cast_schedule(T, 30, 10)


def test_build_series_gates_and_averages():
    s = build_series(Equation("A", _const(2.0), color="red"), T, 30, SCHED)
    assert s.key == "A"
    assert s.color == "red"
    assert np.all(s.raw == 2.0)
    assert s.gated[10] == 2.0
    assert s.gated[11] == 0.0
    assert s.gated[SCHED.mask].tolist() == [2.0] * 4
    assert s.mean[10] == pytest.approx(2.0 / 11)


def test_build_series_passes_cooldown_to_generator():
    seen = {}

    def gen(t, cd):
        seen["cd"] = cd
        return np.ones(t.shape)

    build_series(Equation("A", gen), T, 27, SCHED)
    assert seen["cd"] == 27


def test_build_series_accepts_plain_lists():
    s = build_series(Equation("A", lambda t, cd: [1.0] * len(t)), T, 30, SCHED)
    assert s.n == T.size


def test_short_generator_raises_malformed_equation_naming_key():
    eq = Equation("Short", lambda t, cd: np.ones(t.size - 1))
    with pytest.raises(MalformedEquation, match="Short"):
        build_series(eq, T, 30, SCHED)


def test_2d_generator_raises_malformed_equation():
    eq = Equation("Wide", lambda t, cd: np.ones((2, t.size)))
    with pytest.raises(MalformedEquation):
        build_series(eq, T, 30, SCHED)


def test_build_all_series_catalog_order():
    cat = EquationCatalog.of(
        Equation("A", _const(1.0)),
        Equation("B", _const(1.0)),
        Equation("C", _const(1.0)),
    )
    out = build_all_series(cat, {"C", "A"}, T, 30, SCHED)
    assert [s.key for s in out] == ["A", "C"]


def test_combine_uses_raw_product_then_gates():
    a = build_series(Equation("A", lambda t, cd: np.where(t < 50, 2.0, 1.0)), T, 30, SCHED)
    b = build_series(Equation("B", _const(0.5)), T, 30, SCHED)
    combined = combine_series([a, b], SCHED, "AB", "white")

    assert combined.key == "AB"
    assert combined.color == "white"
    assert np.allclose(combined.raw, a.raw * b.raw)
    assert np.allclose(combined.gated, np.where(SCHED.mask, a.raw * b.raw, 0.0))
    assert np.allclose(combined.mean, running_mean(combined.gated))


def test_combine_is_commutative():
    a = build_series(Equation("A", lambda t, cd: 1.0 + t / 100.0), T, 30, SCHED)
    b = build_series(Equation("B", lambda t, cd: np.where(t < 40, 1.5, 0.8)), T, 30, SCHED)
    ab = combine_series([a, b], SCHED)
    ba = combine_series([b, a], SCHED)
    assert np.allclose(ab.mean, ba.mean)
    assert ab.key == "Final DPS"


def test_combine_differs_from_product_of_means():
    a = build_series(Equation("A", _const(1.2)), T, 30, SCHED)
    b = build_series(Equation("B", _const(0.9)), T, 30, SCHED)
    combined = combine_series([a, b], SCHED)
    wrong = a.mean * b.mean
    assert not np.allclose(combined.mean, wrong)


def test_combine_zero_series_raises():
    with pytest.raises(MalformedEquation):
        combine_series([], SCHED)


def test_combine_length_mismatch_raises():
    a = Series.from_raw("A", None, np.ones(3), [True, False, True])
    b = Series.from_raw("B", None, np.ones(4), [True, False, True, False])
    with pytest.raises(MalformedEquation):
        combine_series([a, b], build_cast_schedule(np.arange(3), 2, 0))
