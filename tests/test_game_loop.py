import pytest

from dino_runner.game_loop import GameLoop


class FakeTime:
    def __init__(self):
        self.now = 1.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


def test_run_frames_passes_millisecond_timestamps():
    fake = FakeTime()
    stamps = []
    loop = GameLoop(stamps.append, time_source=fake, sleep=fake.sleep, target_fps=50)
    loop.run_frames(3)
    assert stamps == pytest.approx([1000.0, 1020.0, 1040.0])
    assert loop.frame_count == 3
    assert not loop.running


def test_callback_returning_false_stops_run():
    fake = FakeTime()
    calls = []

    def frame(timestamp_ms):
        calls.append(timestamp_ms)
        return len(calls) < 4

    GameLoop(frame, time_source=fake, sleep=fake.sleep).run()
    assert len(calls) == 4


def test_stop_from_callback():
    fake = FakeTime()
    loop = None

    def frame(timestamp_ms):
        if loop.frame_count == 1:
            loop.stop()

    loop = GameLoop(frame, time_source=fake, sleep=fake.sleep)
    loop.run()
    assert loop.frame_count == 2


def test_slow_frames_do_not_sleep():
    fake = FakeTime()

    def frame(timestamp_ms):
        fake.now += 0.5

    GameLoop(frame, time_source=fake, sleep=fake.sleep).run_frames(2)
    assert fake.sleeps == []


def test_rejects_non_positive_fps():
    with pytest.raises(ValueError):
        GameLoop(lambda t: None, target_fps=0)
