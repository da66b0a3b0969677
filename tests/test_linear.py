import pytest

from bbimager.linear import Linear, LinearState


def test_progress_zero_before_redraw():
    assert LinearState().progress(1.0) == 0.0


def test_redraw_sets_start_once():
    state = LinearState()
    state.redraw(2.0)
    state.redraw(3.5)
    assert state.start == 2.0
    assert state.last_redraw == 3.5


def test_progress_fraction():
    state = LinearState()
    state.redraw(0.0)
    state.redraw(0.5)
    assert state.progress(1.0) == pytest.approx(0.5)


def test_progress_wraps_each_cycle():
    state = LinearState()
    state.redraw(10.0)
    state.redraw(10.0 + 2.0 * 3 + 0.5)
    assert state.progress(2.0) == pytest.approx(state.progress(2.0) % 1.0)
    state_short = LinearState()
    state_short.redraw(10.0)
    state_short.redraw(10.5)
    assert state.progress(2.0) == pytest.approx(state_short.progress(2.0))


def test_defaults():
    linear = Linear()
    assert linear.height == 8.0
    assert linear.cycle_duration == 1.0
    assert linear.bar_width_ratio == 0.3
    assert linear.color == (0.0, 0.5, 1.0, 1.0)


@pytest.mark.parametrize("ratio,expected", [(0.95, 0.8), (0.01, 0.1), (0.5, 0.5)])
def test_bar_width_ratio_clamped(ratio, expected):
    assert Linear().with_bar_width_ratio(ratio).bar_width_ratio == expected


def test_builders_return_new_values():
    base = Linear()
    changed = base.with_height(12.0).with_cycle_duration(2.5).with_color((1.0, 0.0, 0.0, 1.0))
    assert changed.height == 12.0
    assert changed.cycle_duration == 2.5
    assert changed.color == (1.0, 0.0, 0.0, 1.0)
    assert base.height == 8.0


def test_bar_bounds_at_start():
    linear = Linear().with_bar_width_ratio(0.5)
    bx, by, bw, bh = linear.bar_bounds(LinearState(), 10.0, 20.0, 200.0, 8.0)
    assert (bx, by, bw, bh) == (10.0, 20.0, 100.0, 8.0)


def test_bar_stays_inside_bounds():
    linear = Linear()
    for step in range(20):
        state = LinearState()
        state.redraw(0.0)
        state.redraw(step * 0.05)
        bx, by, bw, bh = linear.bar_bounds(state, 5.0, 0.0, 300.0, 8.0)
        assert bx >= 5.0
        assert bx + bw <= 5.0 + 300.0 + 1e-9
        assert bw == pytest.approx(300.0 * linear.bar_width_ratio)