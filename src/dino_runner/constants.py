"""
constants.py: Centralized configuration for the runner simulation and front-end.
"""

# -------- World Config --------
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 200
GROUND_Y = 180                  # Top of the ground strip
GROUND_HEIGHT = 20

# Time synchronization
MAX_DELTA_TIME = 0.1            # Clamp for a single tick (seconds)
TARGET_FPS = 60

# -------- Player Config (Pixels / Second) --------
PLAYER_START_X = 50
PLAYER_WIDTH = 45
PLAYER_NORMAL_HEIGHT = 45
PLAYER_DUCK_HEIGHT = 27
GRAVITY_ACCEL = 2160.0          # Vertical acceleration (pixels/s^2)
FAST_FALL_ACCEL = 5400.0        # Acceleration while diving (pixels/s^2)
JUMP_IMPULSE = -730.0           # Instantaneous velocity change (pixels/s)
MOVE_SPEED = 300.0              # Horizontal speed (pixels/s)
PLAYER_MIN_X = 10
PLAYER_MAX_X = 750

# Hitbox insets
PLAYER_HITBOX_MARGIN_X = 3      # Each side
PLAYER_HITBOX_MARGIN_TOP = 3
PLAYER_HITBOX_SHRINK_Y = 6      # Total height reduction
OBSTACLE_HITBOX_INSET = 5       # Each side

# -------- Speed & Spawn Config --------
BASE_GAME_SPEED = 360.0         # Scroll speed at session start (pixels/s)
SPEED_INCREMENT = 6.0           # Added every SPEED_INCREASE_INTERVAL
SPEED_INCREASE_INTERVAL = 1000  # ms of game time
OBSTACLE_SPAWN_MIN = 833        # ms
OBSTACLE_SPAWN_MAX = 1667       # ms
SPAWN_SPEED_REFERENCE = 360.0   # Speed at which the base interval is used as-is
MIN_SPAWN_SCALE = 0.5

# -------- Obstacle Config --------
CACTUS_SMALL_SIZE = (17, 40)    # (width, height)
CACTUS_LARGE_SIZE = (25, 50)
BIRD_SIZE = (45, 35)
BIRD_HIGH_Y = 120
BIRD_LOW_Y = 80
WING_FRAME_MS = 83              # ~12 fps wing flap

# -------- Scoring & Day/Night Config --------
DISTANCE_PER_POINT = 10.0
DAY_NIGHT_PERIOD = 2000         # Score points per full cycle
NIGHT_START = 1000              # Cycle position where night is fully halfway in
HALF_TRANSITION = 100           # Half-width of each ramp (points)

# -------- Combat Config (shooting mode) --------
SHOOT_COOLDOWN_MS = 300         # Real time between accepted shots
PROJECTILE_SPEED = 900.0        # pixels/s
MUZZLE_OFFSET = 20              # Projectile spawns this far along the aim line
GUN_OFFSET_STANDING = (30, 21)  # (dx, dy) from the player's top-left corner
GUN_OFFSET_DUCKING = (40, 12)
BIRD_HIT_TRAILING_PAD = 10      # Extra pixels behind a bird that still count
EXPLOSION_DURATION_MS = 250.0
BIRD_KILL_BONUS = 50

# -------- Persistence Config --------
DB_FILE = "dino_runner.db"
HIGH_SCORE_KEY_CLASSIC = "dino_high_score"
HIGH_SCORE_KEY_SHOOTING = "dino_high_score_shooting"
