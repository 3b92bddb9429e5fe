import random

import pytest

from dino_runner.constants import CANVAS_WIDTH, OBSTACLE_SPAWN_MAX, OBSTACLE_SPAWN_MIN
from dino_runner.data_models import Bird, BirdAltitude, Cactus, CactusSize
from dino_runner.spawner import Spawner


class SequenceRandom:
    """Replays fixed values for random()."""

    def __init__(self, *values):
        self.values = iter(values)

    def random(self):
        return next(self.values)


def test_reset_schedules_first_spawn_in_base_range():
    spawner = Spawner(rng=random.Random(1))
    for _ in range(100):
        spawner.reset()
        assert OBSTACLE_SPAWN_MIN <= spawner.next_spawn_time <= OBSTACLE_SPAWN_MAX
        assert spawner.last_speed_increase_time == 0.0


@pytest.mark.parametrize("values, kind, variant, y", [
    ((0.9, 0.9), Cactus, CactusSize.SMALL, 140),
    ((0.9, 0.1), Cactus, CactusSize.LARGE, 130),
    ((0.1, 0.9), Bird, BirdAltitude.HIGH, 120),
    ((0.1, 0.1), Bird, BirdAltitude.LOW, 80),
])
def test_create_obstacle_variants(values, kind, variant, y):
    obstacle = Spawner(rng=SequenceRandom(*values)).create_obstacle()
    assert isinstance(obstacle, kind)
    assert (obstacle.size if kind is Cactus else obstacle.altitude) is variant
    assert obstacle.x == CANVAS_WIDTH
    assert obstacle.y == y


def test_obstacle_mix_is_balanced():
    spawner = Spawner(rng=random.Random(3))
    obstacles = [spawner.create_obstacle() for _ in range(2000)]
    birds = sum(isinstance(o, Bird) for o in obstacles)
    assert 800 < birds < 1200
    sizes = {o.size for o in obstacles if isinstance(o, Cactus)}
    altitudes = {o.altitude for o in obstacles if isinstance(o, Bird)}
    assert sizes == set(CactusSize)
    assert altitudes == set(BirdAltitude)


def test_no_spawn_before_scheduled_time():
    spawner = Spawner(rng=random.Random(0))
    spawner.next_spawn_time = 1000.0
    assert spawner.maybe_spawn(999.0, 360.0) is None
    assert spawner.maybe_spawn(1000.0, 360.0) is not None


@pytest.mark.parametrize("speed", [360.0, 480.0, 720.0, 1000.0, 5000.0])
def test_spawn_gap_lower_bound(speed):
    spawner = Spawner(rng=random.Random(11))
    game_time = 0.0
    for _ in range(500):
        spawner.next_spawn_time = game_time
        assert spawner.maybe_spawn(game_time, speed) is not None
        gap = spawner.next_spawn_time - game_time
        assert gap >= 0.5 * OBSTACLE_SPAWN_MIN
        assert gap <= OBSTACLE_SPAWN_MAX
        game_time = spawner.next_spawn_time


def test_spawn_gap_shrinks_with_speed():
    slow = Spawner(rng=random.Random(5))
    fast = Spawner(rng=random.Random(5))
    assert fast.spawn_interval(720.0) == pytest.approx(slow.spawn_interval(360.0) / 2)


def test_speed_ramp_every_second():
    spawner = Spawner()
    assert spawner.ramp_speed(999.0, 360.0) == 360.0
    assert spawner.ramp_speed(1000.0, 360.0) == 366.0
    assert spawner.ramp_speed(1500.0, 366.0) == 366.0
    assert spawner.ramp_speed(2000.0, 366.0) == 372.0


def test_obstacles_scroll_and_cull():
    spawner = Spawner()
    leaving = Cactus(x=-16.0)
    staying = Cactus(x=400.0)
    remaining = spawner.step_obstacles([leaving, staying], 360.0, 0.0, 0.1)
    assert remaining == [staying]
    assert staying.x == pytest.approx(364.0)


def test_bird_wings_flap_with_game_time():
    spawner = Spawner()
    bird = Bird(x=500.0)
    spawner.step_obstacles([bird], 360.0, 0.0, 0.0)
    assert bird.wing_up
    spawner.step_obstacles([bird], 360.0, 83.0, 0.0)
    assert not bird.wing_up


def test_step_appends_spawn_and_ramps():
    spawner = Spawner(rng=random.Random(2))
    spawner.next_spawn_time = 1000.0
    obstacles, speed = spawner.step([], 360.0, 1000.0, 0.016)
    assert len(obstacles) == 1
    assert speed == 366.0
