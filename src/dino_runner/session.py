"""
session.py: The session controller that owns and advances the whole simulation.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .clock import Clock
from .combat import CombatSystem
from .constants import CANVAS_HEIGHT, CANVAS_WIDTH, GROUND_Y
from .data_models import EntityStore, GameMode, Phase, SessionState
from .physics_core import PhysicsCore
from .score_db import (
    HighScoreStore, MemoryHighScoreStore, load_high_scores, save_high_score
)
from .scorer import Scorer
from .spawner import Spawner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only copy of everything a renderer needs for one frame."""
    entities: EntityStore
    mode: GameMode
    phase: Phase
    score: int
    distance: float
    game_speed: float
    game_time: float
    night_progress: float
    birds_killed: int
    final_score: int
    high_score: int
    aim: Tuple[float, float]


@dataclass
class GameSession:
    """
    The authoritative game state: NOT_STARTED -> RUNNING -> OVER -> RUNNING ...

    Input methods only set flags or act on the player; the effects are
    observed by the next tick().
    """
    store: HighScoreStore = field(default_factory=MemoryHighScoreStore)
    physics: PhysicsCore = field(default_factory=PhysicsCore)
    spawner: Spawner = field(default_factory=Spawner)
    scorer: Scorer = field(default_factory=Scorer)
    combat: CombatSystem = field(default_factory=CombatSystem)
    clock: Clock = field(default_factory=Clock)

    state: SessionState = field(default_factory=SessionState)
    entities: EntityStore = field(default_factory=EntityStore)
    high_scores: Dict[GameMode, int] = field(default_factory=dict)

    aim_point: Tuple[float, float] = (CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)
    moving_left: bool = False
    moving_right: bool = False

    def __post_init__(self):
        self.high_scores = load_high_scores(self.store)

    @property
    def high_score(self) -> int:
        """High score shown for the active mode."""
        return self.high_scores[self.state.mode]

    # ---------- Lifecycle ----------

    def start(self, mode: GameMode = GameMode.CLASSIC) -> bool:
        """Begins a new run unless one is already in progress."""
        if self.state.running:
            return False
        self.reset(mode)
        self.state.phase = Phase.RUNNING
        logger.info("Session started in %s mode (high score %d)", mode.value, self.high_score)
        return True

    def reset(self, mode: Optional[GameMode] = None):
        """Puts every mutable value back to its canonical starting value."""
        self.state = SessionState(mode=mode or self.state.mode)
        self.entities.clear()
        self.spawner.reset()
        self.clock.reset_game_time()

    def _end(self):
        self.state.phase = Phase.OVER
        final_score = self.state.final_score()
        mode = self.state.mode
        if final_score > self.high_scores[mode]:
            self.high_scores[mode] = final_score
            save_high_score(self.store, mode, final_score)
            logger.info("New %s high score: %d", mode.value, final_score)
        logger.info("Game over: score=%d birds=%d final=%d",
                    self.state.score, self.state.birds_killed, final_score)

    # ---------- Input ----------

    def jump(self) -> bool:
        if not self.state.running:
            return False
        return self.physics.jump(self.entities.player, GROUND_Y)

    def duck(self):
        if self.state.running:
            self.physics.duck(self.entities.player)

    def stand_up(self):
        self.physics.stand_up(self.entities.player)

    def set_moving_left(self, held: bool):
        self.moving_left = held

    def set_moving_right(self, held: bool):
        self.moving_right = held

    def aim(self, x: float, y: float):
        self.aim_point = (x, y)

    def fire(self) -> bool:
        """Shoots in shooting mode; False if ignored or cooling down."""
        if self.state.mode is not GameMode.SHOOTING or not self.state.running:
            return False
        projectile = self.combat.fire(self.entities.player, self.aim_point,
                                      self.entities.projectiles)
        return projectile is not None

    # ---------- Simulation ----------

    def frame(self, timestamp_ms: float) -> float:
        """Host entry point: converts a frame timestamp to dt and ticks."""
        dt = self.clock.tick(timestamp_ms)
        self.tick(dt)
        return dt

    def tick(self, dt: float):
        state, entities = self.state, self.entities

        if state.over:
            # Explosions finish animating after the run ends
            if state.mode is GameMode.SHOOTING:
                entities.explosions = self.combat.update_explosions(entities.explosions, dt)
            return
        if not state.running:
            return

        state.game_time = self.clock.advance_game_time(dt, running=True)

        # 1. Player
        player = entities.player
        self.physics.advance(player, GROUND_Y, dt)
        if self.moving_left:
            self.physics.move_horizontal(player, -1, dt)
        if self.moving_right:
            self.physics.move_horizontal(player, 1, dt)

        # 2. Obstacles and difficulty
        entities.obstacles, state.game_speed = self.spawner.step(
            entities.obstacles, state.game_speed, state.game_time, dt)

        # 3. Score and day/night
        self.scorer.update(state, dt)

        # 4. Combat
        if state.mode is GameMode.SHOOTING:
            entities.projectiles = self.combat.update_projectiles(entities.projectiles, dt)
            entities.explosions = self.combat.update_explosions(entities.explosions, dt)
            state.birds_killed += self.combat.resolve_hits(
                entities.projectiles, entities.obstacles, entities.explosions)

        # 5. Collision
        if self.physics.check_collision(player, entities.obstacles, GROUND_Y) is not None:
            self._end()

    def snapshot(self) -> FrameSnapshot:
        state = self.state
        return FrameSnapshot(
            entities=copy.deepcopy(self.entities),
            mode=state.mode,
            phase=state.phase,
            score=state.score,
            distance=state.distance,
            game_speed=state.game_speed,
            game_time=state.game_time,
            night_progress=state.night_progress,
            birds_killed=state.birds_killed,
            final_score=state.final_score(),
            high_score=self.high_score,
            aim=self.aim_point,
        )
