"""
physics_core.py: Deterministic player kinematics and hitbox collision logic.
"""

from typing import Iterable, Optional, Tuple

from .constants import (
    GROUND_Y, OBSTACLE_HITBOX_INSET, PLAYER_HITBOX_MARGIN_TOP,
    PLAYER_HITBOX_MARGIN_X, PLAYER_HITBOX_SHRINK_Y
)
from .data_models import Obstacle, Player

# (x, y, width, height)
Box = Tuple[float, float, float, float]


class PhysicsCore:
    """
    Player physics shared by every game mode.
    Every method mutates the given player in place.
    """

    def advance(self, player: Player, ground_y: float, dt: float):
        """Runs gravity, landing and height bookkeeping for one tick."""
        if player.jumping or player.y < ground_y - player.height:
            accel = player.fast_fall_gravity if player.fast_falling else player.gravity
            player.velocity += accel * dt
            player.y += player.velocity * dt

            target_y = player.resting_y(ground_y)
            if player.y >= target_y:
                player.y = target_y
                player.velocity = 0.0
                player.jumping = False
                player.fast_falling = False

        # Grounded: duck/stand takes effect immediately
        if not player.jumping:
            player.height = player.current_height()
            player.y = ground_y - player.height

    def move_horizontal(self, player: Player, direction: int, dt: float):
        """direction is -1 (left) or +1 (right)."""
        player.x += direction * player.move_speed * dt
        player.x = max(player.min_x, min(player.max_x, player.x))

    def jump(self, player: Player, ground_y: float = GROUND_Y) -> bool:
        """Starts a jump unless already airborne. Returns True if it happened."""
        if player.jumping or player.y < ground_y - player.normal_height:
            return False
        player.velocity = player.jump_impulse
        player.jumping = True
        player.ducking = False
        return True

    def duck(self, player: Player):
        # Ducking mid-air turns into a dive
        if player.jumping:
            player.fast_falling = True
        player.ducking = True

    def stand_up(self, player: Player):
        player.ducking = False

    # ---------- Collision ----------

    def player_hitbox(self, player: Player, ground_y: float = GROUND_Y) -> Box:
        """Body box, inset from the sprite bounds."""
        return (
            player.x + PLAYER_HITBOX_MARGIN_X,
            player.draw_y(ground_y) + PLAYER_HITBOX_MARGIN_TOP,
            player.width - 2 * PLAYER_HITBOX_MARGIN_X,
            player.current_height() - PLAYER_HITBOX_SHRINK_Y,
        )

    @staticmethod
    def obstacle_hitbox(obstacle: Obstacle) -> Box:
        inset = OBSTACLE_HITBOX_INSET
        return (
            obstacle.x + inset,
            obstacle.y + inset,
            obstacle.width - 2 * inset,
            obstacle.height - 2 * inset,
        )

    @staticmethod
    def boxes_overlap(a: Box, b: Box) -> bool:
        """Strict overlap: boxes that only touch do not collide."""
        ax, ay, aw, ah = a
        bx, by, bw, bh = b
        return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by

    def check_collision(self, player: Player, obstacles: Iterable[Obstacle],
                        ground_y: float = GROUND_Y) -> Optional[Obstacle]:
        """Returns the first obstacle hit by the player, or None."""
        player_box = self.player_hitbox(player, ground_y)
        for obstacle in obstacles:
            if self.boxes_overlap(player_box, self.obstacle_hitbox(obstacle)):
                return obstacle
        return None
