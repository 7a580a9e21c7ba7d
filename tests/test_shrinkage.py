import pytest

from wfm_metrics.shrinkage import effective_quantity, shrinkage_breakdown, shrinkage_factor


def test_no_shrinkage_is_identity():
    assert effective_quantity(137.0, 0, 0, 0) == 137.0


def test_full_shrinkage_on_any_factor_zeroes():
    assert effective_quantity(50.0, 100, 10, 5) == 0.0
    assert effective_quantity(50.0, 10, 100, 5) == 0.0
    assert effective_quantity(50.0, 10, 5, 100) == 0.0


def test_roster_example():
    assert effective_quantity(20, 30, 10, 5) == pytest.approx(11.97)


def test_effective_never_exceeds_raw():
    for raw in [0.0, 1.0, 42.0, 1000.0]:
        assert effective_quantity(raw, 34.88, 0, 5.88) <= raw


def test_factor_matches_product():
    assert shrinkage_factor(30, 10, 5) == pytest.approx(0.70 * 0.90 * 0.95)


def test_breakdown_steps_chain():
    steps = shrinkage_breakdown(20, 30, 10, 5)
    assert [s.percent for s in steps] == [30.0, 10.0, 5.0]
    assert steps[0].before == 20.0
    assert steps[0].after == pytest.approx(14.0)
    assert steps[1].before == steps[0].after
    assert steps[2].after == pytest.approx(effective_quantity(20, 30, 10, 5))


def test_whole_results_are_exact():
    assert effective_quantity(90, 30, 0, 0) == 63.0
    assert effective_quantity(50, 34, 0, 0) == 33.0
    assert shrinkage_breakdown(90, 30, 0, 0)[-1].after == 63.0
