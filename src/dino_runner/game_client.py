#!/usr/bin/env python3
"""
game_client.py

pygame front-end: maps keyboard/mouse to session input and draws snapshots.
"""

import logging
import math
import sys

import pygame

from .constants import (
    CANVAS_HEIGHT, CANVAS_WIDTH, DB_FILE, GROUND_HEIGHT, GROUND_Y, TARGET_FPS
)
from .combat import CombatSystem
from .data_models import Bird, Cactus, CactusSize, GameMode, Phase
from .game_loop import GameLoop
from .score_db import SqliteHighScoreStore
from .session import FrameSnapshot, GameSession
from .theme import cloud_x, lerp_color, run_frame, theme_colors

JUMP_KEYS = (pygame.K_UP, pygame.K_w)
DUCK_KEYS = (pygame.K_DOWN, pygame.K_s)
LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


class GameClient:
    def __init__(self, db_file: str = DB_FILE):
        pygame.init()
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
        pygame.display.set_caption("Dino Runner")

        self.store = SqliteHighScoreStore(db_file)
        self.session = GameSession(store=self.store)
        self.loop = GameLoop(self._frame, time_source=lambda: pygame.time.get_ticks() / 1000.0,
                             sleep=lambda s: pygame.time.wait(int(s * 1000)),
                             target_fps=TARGET_FPS)

        self.font = pygame.font.Font(None, 24)
        self.large_font = pygame.font.Font(None, 36)

    def run(self):
        """The main client execution loop."""
        print(f"High scores: classic={self.session.high_scores[GameMode.CLASSIC]} "
              f"shooting={self.session.high_scores[GameMode.SHOOTING]}")
        try:
            self.loop.run()
        finally:
            self.store.close()
            pygame.quit()
        print("Client stopped.")

    def _frame(self, timestamp_ms: float) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self._handle_event(event)

        was_over = self.session.state.over
        self.session.frame(timestamp_ms)
        if self.session.state.over and not was_over:
            print(f"Game over. Final score: {self.session.state.final_score()}")

        self._draw(self.session.snapshot())
        return True

    def _handle_event(self, event):
        session = self.session
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                session.start(GameMode.CLASSIC)
            elif event.key == pygame.K_RETURN:
                session.start(GameMode.SHOOTING)
            elif event.key in JUMP_KEYS:
                session.jump()
            elif event.key in DUCK_KEYS:
                session.duck()
            elif event.key in LEFT_KEYS:
                session.set_moving_left(True)
            elif event.key in RIGHT_KEYS:
                session.set_moving_right(True)
        elif event.type == pygame.KEYUP:
            if event.key in DUCK_KEYS:
                session.stand_up()
            elif event.key in LEFT_KEYS:
                session.set_moving_left(False)
            elif event.key in RIGHT_KEYS:
                session.set_moving_right(False)
        elif event.type == pygame.MOUSEMOTION:
            session.aim(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            session.aim(*event.pos)
            session.fire()

    # ---------- Rendering ----------

    def _draw(self, snap: FrameSnapshot):
        """Renders the game state using pygame."""
        screen = self.screen
        theme = theme_colors(snap.night_progress)
        screen.fill(theme["bg"])

        self._draw_cloud(snap)
        if snap.night_progress > 0:
            self._draw_sky(snap)

        pygame.draw.rect(screen, theme["ground"], (0, GROUND_Y, CANVAS_WIDTH, GROUND_HEIGHT))

        for obstacle in snap.entities.obstacles:
            if isinstance(obstacle, Cactus):
                pygame.draw.rect(screen, theme["obstacle"],
                                 (obstacle.x, obstacle.y, obstacle.width, obstacle.height))
                if obstacle.size is CactusSize.LARGE:
                    pygame.draw.rect(screen, theme["obstacle"], (obstacle.x - 6, obstacle.y + 12, 6, 15))
                    pygame.draw.rect(screen, theme["obstacle"],
                                     (obstacle.x + obstacle.width, obstacle.y + 18, 6, 12))
            elif isinstance(obstacle, Bird):
                wing = -5 if obstacle.wing_up else 5
                pygame.draw.rect(screen, theme["obstacle"], (obstacle.x + 10, obstacle.y + 10, 25, 15))
                pygame.draw.rect(screen, theme["obstacle"], (obstacle.x + 30, obstacle.y + 5, 15, 15))
                pygame.draw.rect(screen, theme["obstacle"], (obstacle.x + 5, obstacle.y + 15 + wing, 20, 5))
                pygame.draw.rect(screen, theme["obstacle"], (obstacle.x + 25, obstacle.y + 15 - wing, 20, 5))

        self._draw_player(snap, theme)
        if snap.mode is GameMode.SHOOTING:
            self._draw_gun(snap)
            for projectile in snap.entities.projectiles:
                pygame.draw.circle(screen, (255, 102, 0), (int(projectile.x), int(projectile.y)), 4)
            for explosion in snap.entities.explosions:
                radius = 10 + explosion.progress * 25
                shade = int(255 * (1 - explosion.progress))
                pygame.draw.circle(screen, (255, 100 + shade // 3, 0), (int(explosion.x), int(explosion.y)),
                                   int(radius))
                pygame.draw.circle(screen, (255, 200, shade), (int(explosion.x), int(explosion.y)),
                                   int(radius * 0.6))

        self._draw_hud(snap, theme)
        pygame.display.flip()

    def _draw_cloud(self, snap: FrameSnapshot):
        color = lerp_color("#cccccc", "#444444", snap.night_progress)
        x = cloud_x(snap.game_time, CANVAS_WIDTH)
        for dx, y, w in ((0, 30, 40), (10, 20, 30), (20, 25, 30)):
            pygame.draw.rect(self.screen, color, (x + dx, y, w, 15))

    def _draw_sky(self, snap: FrameSnapshot):
        level = int(255 * snap.night_progress)
        star_color = (level, level, level)
        star_seed = snap.score // 1000
        for i in range(20):
            x = (i * 73 + star_seed * 37) % CANVAS_WIDTH
            y = (i * 47 + star_seed * 23) % 100
            pygame.draw.rect(self.screen, star_color, (x, y, 2, 2))
        pygame.draw.circle(self.screen, star_color, (CANVAS_WIDTH - 100, 50), 20)

    def _draw_player(self, snap: FrameSnapshot, theme):
        player = snap.entities.player
        top = player.draw_y(GROUND_Y)
        height = player.current_height()
        width = player.width + (8 if player.ducking else 0)
        pygame.draw.rect(self.screen, theme["player"], (player.x, top, width, height - 6))

        # Legs
        on_ground = not player.jumping
        frame = run_frame(snap.game_time, snap.game_speed) if snap.phase is Phase.RUNNING and on_ground else 0
        leg_x = (player.x + 6, player.x + 15) if frame == 0 else (player.x + 3, player.x + 18)
        for x in leg_x:
            pygame.draw.rect(self.screen, theme["player"], (x, top + height - 6, 4, 6))

    def _draw_gun(self, snap: FrameSnapshot):
        """Pistol at the muzzle point, rotated toward the aim point."""
        gun_x, gun_y = CombatSystem.gun_position(snap.entities.player, GROUND_Y)
        angle = math.atan2(snap.aim[1] - gun_y, snap.aim[0] - gun_x)
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        def rotated(x, y):
            return gun_x + x * cos_a - y * sin_a, gun_y + x * sin_a + y * cos_a

        # (x, y, w, h) in gun space: barrel, grip, handle
        for x, y, w, h in ((0, -4, 20, 8), (-5, -6, 12, 12), (-5, 0, 8, 10)):
            corners = [rotated(x, y), rotated(x + w, y), rotated(x + w, y + h), rotated(x, y + h)]
            pygame.draw.polygon(self.screen, (51, 51, 51), corners)

    def _draw_hud(self, snap: FrameSnapshot, theme):
        screen = self.screen
        text = theme["text"]

        score_surf = self.font.render(f"HI {snap.high_score:05d}  {snap.score:05d}", True, text)
        screen.blit(score_surf, (CANVAS_WIDTH - score_surf.get_width() - 10, 10))

        if snap.mode is GameMode.SHOOTING and snap.phase is not Phase.NOT_STARTED:
            kills = self.font.render(f"Birds: {snap.birds_killed}", True, (214, 48, 49))
            screen.blit(kills, (10, 10))

        if snap.phase is Phase.NOT_STARTED:
            for i, line in enumerate(("Press SPACE for Classic Mode", "Press ENTER for Shooting Mode")):
                surf = self.font.render(line, True, text)
                screen.blit(surf, (CANVAS_WIDTH // 2 - surf.get_width() // 2, CANVAS_HEIGHT // 2 - 25 + i * 30))
        elif snap.phase is Phase.OVER:
            overlay = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 77))
            screen.blit(overlay, (0, 0))

            color = lerp_color("#000000", "#ffffff", snap.night_progress)
            title = self.large_font.render("GAME OVER", True, color)
            screen.blit(title, (CANVAS_WIDTH // 2 - title.get_width() // 2, CANVAS_HEIGHT // 2 - 45))
            if snap.mode is GameMode.SHOOTING:
                bonus = snap.final_score - snap.score
                lines = (f"Distance: {snap.score} | Birds: {snap.birds_killed} (+{bonus})",
                         f"Total: {snap.final_score}")
            else:
                lines = (f"Score: {snap.score}",)
            for i, line in enumerate(lines):
                surf = self.font.render(line, True, color)
                screen.blit(surf, (CANVAS_WIDTH // 2 - surf.get_width() // 2, CANVAS_HEIGHT // 2 - 5 + i * 25))


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    db_file = sys.argv[1] if len(sys.argv) > 1 else DB_FILE
    client = GameClient(db_file)
    client.run()


if __name__ == "__main__":
    main()
