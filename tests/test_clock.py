import pytest

from dino_runner.clock import Clock


def test_first_tick_is_zero():
    clock = Clock()
    assert clock.tick(123456.0) == 0.0


def test_regular_delta_in_seconds():
    clock = Clock()
    clock.tick(1000.0)
    assert clock.tick(1016.0) == pytest.approx(0.016)


@pytest.mark.parametrize("gap_ms", [0, 5, 50, 100, 101, 5000, 10 ** 7])
def test_delta_is_clamped(gap_ms):
    clock = Clock()
    clock.tick(0.0)
    delta = clock.tick(float(gap_ms))
    assert 0.0 <= delta <= 0.1


def test_backwards_timestamp_gives_zero():
    clock = Clock()
    clock.tick(500.0)
    assert clock.tick(400.0) == 0.0


def test_game_time_only_advances_while_running():
    clock = Clock()
    assert clock.advance_game_time(0.1, running=True) == pytest.approx(100.0)
    assert clock.advance_game_time(0.1, running=False) == pytest.approx(100.0)
    clock.reset_game_time()
    assert clock.game_time == 0.0
