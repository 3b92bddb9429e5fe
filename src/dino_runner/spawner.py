"""
spawner.py: Obstacle scheduling, scrolling and difficulty ramp.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import (
    CANVAS_WIDTH, MIN_SPAWN_SCALE, OBSTACLE_SPAWN_MAX, OBSTACLE_SPAWN_MIN,
    SPAWN_SPEED_REFERENCE, SPEED_INCREASE_INTERVAL, SPEED_INCREMENT,
    WING_FRAME_MS
)
from .data_models import Bird, BirdAltitude, Cactus, CactusSize, Obstacle

logger = logging.getLogger(__name__)


@dataclass
class Spawner:
    """
    Decides when and what to spawn, and how fast the world scrolls.
    Spawn timing and speed ramp keep separate timestamps.
    """
    rng: random.Random = field(default_factory=random.Random)
    speed_increment: float = SPEED_INCREMENT
    next_spawn_time: float = 0.0            # ms of game time
    last_speed_increase_time: float = 0.0   # ms of game time

    def reset(self):
        self.next_spawn_time = self._base_interval()
        self.last_speed_increase_time = 0.0

    def _base_interval(self) -> float:
        return self.rng.random() * (OBSTACLE_SPAWN_MAX - OBSTACLE_SPAWN_MIN) + OBSTACLE_SPAWN_MIN

    def spawn_interval(self, game_speed: float) -> float:
        """Random gap to the next obstacle, shrinking as speed increases."""
        scale = max(MIN_SPAWN_SCALE, SPAWN_SPEED_REFERENCE / game_speed)
        return self._base_interval() * scale

    def create_obstacle(self) -> Obstacle:
        if self.rng.random() > 0.5:
            size = CactusSize.SMALL if self.rng.random() > 0.5 else CactusSize.LARGE
            return Cactus(x=float(CANVAS_WIDTH), size=size)
        altitude = BirdAltitude.HIGH if self.rng.random() > 0.5 else BirdAltitude.LOW
        return Bird(x=float(CANVAS_WIDTH), altitude=altitude)

    def maybe_spawn(self, game_time: float, game_speed: float) -> Optional[Obstacle]:
        """Creates an obstacle when the scheduled time has come."""
        if game_time < self.next_spawn_time:
            return None
        obstacle = self.create_obstacle()
        self.next_spawn_time = game_time + self.spawn_interval(game_speed)
        logger.debug("Spawned %s at t=%.0fms, next at %.0fms",
                     type(obstacle).__name__, game_time, self.next_spawn_time)
        return obstacle

    def ramp_speed(self, game_time: float, game_speed: float) -> float:
        """Returns the (possibly increased) game speed."""
        if game_time - self.last_speed_increase_time >= SPEED_INCREASE_INTERVAL:
            self.last_speed_increase_time = game_time
            return game_speed + self.speed_increment
        return game_speed

    def step_obstacles(self, obstacles: List[Obstacle], game_speed: float,
                       game_time: float, dt: float) -> List[Obstacle]:
        """Scrolls obstacles left and drops the ones fully off-screen."""
        delta_x = game_speed * dt
        wing_up = int(game_time // WING_FRAME_MS) % 2 == 0
        for obstacle in obstacles:
            obstacle.x -= delta_x
            if isinstance(obstacle, Bird):
                obstacle.wing_up = wing_up
        return [o for o in obstacles if o.x + o.width > 0]

    def step(self, obstacles: List[Obstacle], game_speed: float,
             game_time: float, dt: float) -> Tuple[List[Obstacle], float]:
        """One spawner tick: scroll, spawn, ramp. Returns (obstacles, speed)."""
        obstacles = self.step_obstacles(obstacles, game_speed, game_time, dt)
        obstacle = self.maybe_spawn(game_time, game_speed)
        if obstacle is not None:
            obstacles.append(obstacle)
        return obstacles, self.ramp_speed(game_time, game_speed)
