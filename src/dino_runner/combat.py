"""
combat.py: Shooting-mode projectiles, bird hits and explosions.
"""

import logging
import math
import time
from typing import Callable, List, Optional, Tuple

from .constants import (
    BIRD_HIT_TRAILING_PAD, CANVAS_HEIGHT, CANVAS_WIDTH, GROUND_Y,
    GUN_OFFSET_DUCKING, GUN_OFFSET_STANDING, MUZZLE_OFFSET, PROJECTILE_SPEED,
    SHOOT_COOLDOWN_MS
)
from .data_models import Bird, Explosion, Obstacle, Player, Projectile

logger = logging.getLogger(__name__)


def wall_clock_ms() -> float:
    return time.monotonic() * 1000.0


class CombatSystem:
    """
    Fire-rate limiting and projectile/explosion lifecycle.

    The cooldown runs on real time (time_source), not game time, and is not
    reset between sessions.
    """

    def __init__(self, time_source: Callable[[], float] = wall_clock_ms,
                 cooldown_ms: float = SHOOT_COOLDOWN_MS):
        self.time_source = time_source
        self.cooldown_ms = cooldown_ms
        self.last_shot_time: Optional[float] = None

    @staticmethod
    def gun_position(player: Player, ground_y: float = GROUND_Y) -> Tuple[float, float]:
        dx, dy = GUN_OFFSET_DUCKING if player.ducking else GUN_OFFSET_STANDING
        return player.x + dx, player.draw_y(ground_y) + dy

    def fire(self, player: Player, aim: Tuple[float, float],
             projectiles: List[Projectile]) -> Optional[Projectile]:
        """Shoots toward aim unless the cooldown is still running."""
        now = self.time_source()
        if self.last_shot_time is not None and now - self.last_shot_time < self.cooldown_ms:
            return None
        self.last_shot_time = now

        gun_x, gun_y = self.gun_position(player)
        angle = math.atan2(aim[1] - gun_y, aim[0] - gun_x)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        projectile = Projectile(
            x=gun_x + cos_a * MUZZLE_OFFSET,
            y=gun_y + sin_a * MUZZLE_OFFSET,
            vx=cos_a * PROJECTILE_SPEED,
            vy=sin_a * PROJECTILE_SPEED,
        )
        projectiles.append(projectile)
        return projectile

    def update_projectiles(self, projectiles: List[Projectile], dt: float) -> List[Projectile]:
        for projectile in projectiles:
            projectile.x += projectile.vx * dt
            projectile.y += projectile.vy * dt
        return [p for p in projectiles if p.in_bounds(CANVAS_WIDTH, CANVAS_HEIGHT)]

    @staticmethod
    def update_explosions(explosions: List[Explosion], dt: float) -> List[Explosion]:
        for explosion in explosions:
            explosion.elapsed += dt * 1000.0
        return [e for e in explosions if not e.finished]

    @staticmethod
    def hits(projectile: Projectile, bird: Bird) -> bool:
        return (bird.x <= projectile.x <= bird.x + bird.width + BIRD_HIT_TRAILING_PAD
                and bird.y <= projectile.y <= bird.y + bird.height)

    def resolve_hits(self, projectiles: List[Projectile], obstacles: List[Obstacle],
                     explosions: List[Explosion]) -> int:
        """
        Removes every projectile/bird pair that collided, in place, and spawns
        an explosion for each. A projectile destroys at most one bird.
        Returns the number of birds destroyed.
        """
        kills = 0
        for i in range(len(projectiles) - 1, -1, -1):
            projectile = projectiles[i]
            for j in range(len(obstacles) - 1, -1, -1):
                obstacle = obstacles[j]
                if not isinstance(obstacle, Bird) or not self.hits(projectile, obstacle):
                    continue
                explosions.append(Explosion(*obstacle.center()))
                del obstacles[j]
                del projectiles[i]
                kills += 1
                logger.debug("Bird destroyed at (%.0f, %.0f)", obstacle.x, obstacle.y)
                break
        return kills
