# test/test_series.py
import numpy as np
import pytest

from buffcurve.core import Series, running_mean, gate, product, MalformedEquation


def test_running_mean_exact_for_integers():
    out = running_mean([10, 20, 30])
    assert out.tolist() == [10.0, 15.0, 20.0]


def test_running_mean_empty():
    assert running_mean([]).size == 0


def test_running_mean_matches_naive_definition():
    rng = np.random.default_rng(0)
    v = rng.random(200)
    naive = np.array([v[: i + 1].sum() / (i + 1) for i in range(v.size)])
    assert np.allclose(running_mean(v), naive)


def test_running_mean_rejects_2d():
    with pytest.raises(MalformedEquation):
        running_mean([[1.0, 2.0]])


def test_gate_zeroes_non_cast_ticks():
    out = gate([True, False, True], [1.0, 2.0, 3.0])
    assert out.tolist() == [1.0, 0.0, 3.0]


def test_gate_is_idempotent():
    mask = np.array([False, True, False, True, True])
    v = np.array([1.5, 2.0, 3.0, 0.5, 4.0])
    once = gate(mask, v)
    twice = gate(mask, once)
    assert np.array_equal(once, twice)


def test_gate_rejects_length_mismatch():
    with pytest.raises(MalformedEquation):
        gate([True, False], [1.0, 2.0, 3.0])


def test_product_elementwise():
    assert product([[1, 2, 3], [2, 3, 4]]).tolist() == [2.0, 6.0, 12.0]


def test_product_single_array_is_copy():
    a = np.array([1.0, 2.0])
    out = product([a])
    out[0] = 99.0
    assert a[0] == 1.0


def test_product_rejects_empty_and_mismatched():
    with pytest.raises(MalformedEquation):
        product([])
    with pytest.raises(MalformedEquation):
        product([[1.0, 2.0], [1.0]])


def test_series_from_raw_pipeline():
    s = Series.from_raw("A", "red", [2.0, 2.0, 2.0, 2.0], [False, True, False, True])
    assert s.gated.tolist() == [0.0, 2.0, 0.0, 2.0]
    assert np.allclose(s.mean, [0.0, 1.0, 2.0 / 3.0, 1.0])
    assert s.n == 4
    assert s.mean_at(1) == 1.0


def test_series_rejects_length_mismatch():
    with pytest.raises(MalformedEquation):
        Series(key="A", color=None, raw=[1.0, 2.0], gated=[1.0], mean=[1.0, 1.0])


def test_series_rejects_non_1d():
    with pytest.raises(MalformedEquation):
        Series(key="A", color=None, raw=[[1.0]], gated=[[1.0]], mean=[[1.0]])
