import pytest

from dino_runner.data_models import Phase, SessionState
from dino_runner.scorer import Scorer, night_progress


@pytest.mark.parametrize("score, expected", [
    (0, 0.0),
    (899, 0.0),
    (900, 0.0),
    (1000, 0.5),
    (1099, 0.995),
    (1100, 1.0),
    (1899, 1.0),
    (1900, 1.0),
    (1999, 0.505),
    (2000, 0.5),
    (2099, 0.005),
    (2100, 0.0),
    (3000, 0.5),
    (4000, 0.5),
])
def test_night_progress_zones(score, expected):
    assert night_progress(score) == pytest.approx(expected)


def test_night_progress_is_bounded_and_continuous():
    step = 1 / 200
    for score in range(0, 8001):
        value = night_progress(score)
        assert 0.0 <= value <= 1.0
        assert abs(night_progress(score + 1) - value) <= step + 1e-9


def test_score_from_distance_at_constant_speed():
    state = SessionState(phase=Phase.RUNNING, game_speed=480.0)
    scorer = Scorer()
    for _ in range(100):
        scorer.update(state, 0.1)
    assert state.distance == pytest.approx(4800.0)
    assert state.score == 480


def test_score_only_grows_while_running():
    scorer = Scorer()
    for phase in (Phase.NOT_STARTED, Phase.OVER):
        state = SessionState(phase=phase, distance=50.0, score=5)
        scorer.update(state, 0.1)
        assert state.distance == 50.0
        assert state.score == 5


def test_night_progress_follows_score():
    state = SessionState(phase=Phase.RUNNING, game_speed=360.0, distance=9990.0)
    Scorer().update(state, 0.1)
    assert state.score == 1002
    assert state.night_progress == pytest.approx(0.51)
