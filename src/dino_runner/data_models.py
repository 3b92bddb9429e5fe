"""
data_models.py: Data structures for the simulation state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

from .constants import (
    BASE_GAME_SPEED, BIRD_HIGH_Y, BIRD_KILL_BONUS, BIRD_LOW_Y, BIRD_SIZE, CACTUS_LARGE_SIZE,
    CACTUS_SMALL_SIZE, CANVAS_HEIGHT, CANVAS_WIDTH, EXPLOSION_DURATION_MS,
    FAST_FALL_ACCEL, GRAVITY_ACCEL, GROUND_Y, JUMP_IMPULSE, MOVE_SPEED,
    PLAYER_DUCK_HEIGHT, PLAYER_MAX_X, PLAYER_MIN_X, PLAYER_NORMAL_HEIGHT,
    PLAYER_START_X, PLAYER_WIDTH
)


class GameMode(Enum):
    CLASSIC = "classic"
    SHOOTING = "shooting"


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


class CactusSize(Enum):
    SMALL = "small"
    LARGE = "large"


class BirdAltitude(Enum):
    HIGH = "high"
    LOW = "low"


@dataclass
class Player:
    """The runner controlled by the user."""
    x: float = PLAYER_START_X
    y: float = GROUND_Y - PLAYER_NORMAL_HEIGHT
    width: int = PLAYER_WIDTH
    height: int = PLAYER_NORMAL_HEIGHT
    normal_height: int = PLAYER_NORMAL_HEIGHT
    duck_height: int = PLAYER_DUCK_HEIGHT
    velocity: float = 0.0

    gravity: float = GRAVITY_ACCEL
    fast_fall_gravity: float = FAST_FALL_ACCEL
    jump_impulse: float = JUMP_IMPULSE
    move_speed: float = MOVE_SPEED
    min_x: float = PLAYER_MIN_X
    max_x: float = PLAYER_MAX_X

    jumping: bool = False
    ducking: bool = False
    fast_falling: bool = False

    def resting_y(self, ground_y: float = GROUND_Y) -> float:
        """y of the player standing (or crouching) on the ground."""
        return ground_y - (self.duck_height if self.ducking else self.normal_height)

    def draw_y(self, ground_y: float = GROUND_Y) -> float:
        """Top edge used for drawing, aiming and collision."""
        if self.ducking and not self.jumping:
            return ground_y - self.duck_height
        return self.y

    def current_height(self) -> int:
        return self.duck_height if self.ducking else self.normal_height


@dataclass
class Cactus:
    """Ground obstacle; immune to projectiles."""
    x: float
    size: CactusSize = CactusSize.SMALL
    width: int = field(init=False)
    height: int = field(init=False)
    y: float = field(init=False)

    def __post_init__(self):
        dims = CACTUS_SMALL_SIZE if self.size is CactusSize.SMALL else CACTUS_LARGE_SIZE
        self.width, self.height = dims
        self.y = GROUND_Y - self.height


@dataclass
class Bird:
    """Airborne obstacle; can be shot down in shooting mode."""
    x: float
    altitude: BirdAltitude = BirdAltitude.HIGH
    width: int = BIRD_SIZE[0]
    height: int = BIRD_SIZE[1]
    y: float = field(init=False)
    wing_up: bool = False

    def __post_init__(self):
        self.y = BIRD_HIGH_Y if self.altitude is BirdAltitude.HIGH else BIRD_LOW_Y

    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


Obstacle = Union[Cactus, Bird]


@dataclass
class Projectile:
    x: float
    y: float
    vx: float
    vy: float

    def in_bounds(self, width: float = CANVAS_WIDTH, height: float = CANVAS_HEIGHT) -> bool:
        return 0 <= self.x <= width and 0 <= self.y <= height


@dataclass
class Explosion:
    x: float
    y: float
    elapsed: float = 0.0            # ms
    duration: float = EXPLOSION_DURATION_MS

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def progress(self) -> float:
        return min(1.0, self.elapsed / self.duration)


@dataclass
class EntityStore:
    """Owns every dynamic entity of one session."""
    player: Player = field(default_factory=Player)
    obstacles: List[Obstacle] = field(default_factory=list)
    projectiles: List[Projectile] = field(default_factory=list)
    explosions: List[Explosion] = field(default_factory=list)

    def clear(self):
        self.player = Player()
        self.obstacles = []
        self.projectiles = []
        self.explosions = []


@dataclass
class SessionState:
    """Scalar state of the current session."""
    mode: GameMode = GameMode.CLASSIC
    phase: Phase = Phase.NOT_STARTED
    score: int = 0
    distance: float = 0.0
    game_speed: float = BASE_GAME_SPEED
    game_time: float = 0.0          # ms
    night_progress: float = 0.0
    birds_killed: int = 0

    @property
    def started(self) -> bool:
        return self.phase is not Phase.NOT_STARTED

    @property
    def over(self) -> bool:
        return self.phase is Phase.OVER

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    def final_score(self) -> int:
        """Score compared against (and stored as) the mode's high score."""
        if self.mode is GameMode.SHOOTING:
            return self.score + self.birds_killed * BIRD_KILL_BONUS
        return self.score
