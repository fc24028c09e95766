from dataclasses import dataclass

# Game Variables
GAME_WIDTH = 600
GAME_HEIGHT = 500
FPS = 60

# bird
BIRD_X = 80
BIRD_SIZE = 30
BIRD_START_Y = 250

# pipes
PIPE_WIDTH = 60
PIPE_GAP = 180
GAP_MARGIN = 50              # keep the whole gap this far from top and bottom
SPAWN_INTERVAL_FRAMES = 90

# physics (per frame, before the speed multiplier)
GRAVITY = 0.5
JUMP_STRENGTH = -9
PIPE_SPEED = 3

# difficulty ramp
SPEED_INCREASE_INTERVAL = 10000  # ms between steps
SPEED_INCREMENT = 0.2
INITIAL_SPEED_MULTIPLIER = 1.0
MAX_SPEED_MULTIPLIER = 2.5


class ConfigError(ValueError):
    """Raised when a GameConfig describes a world that cannot be played."""


@dataclass(frozen=True)
class GameConfig:
    world_width: float = GAME_WIDTH
    world_height: float = GAME_HEIGHT
    bird_x: float = BIRD_X
    bird_size: float = BIRD_SIZE
    bird_start_y: float = BIRD_START_Y
    pipe_width: float = PIPE_WIDTH
    gap_height: float = PIPE_GAP
    gap_margin: float = GAP_MARGIN
    gravity: float = GRAVITY
    jump_strength: float = JUMP_STRENGTH
    pipe_speed: float = PIPE_SPEED
    spawn_interval_frames: int = SPAWN_INTERVAL_FRAMES
    speed_increase_interval_ms: int = SPEED_INCREASE_INTERVAL
    speed_increment: float = SPEED_INCREMENT
    initial_speed_multiplier: float = INITIAL_SPEED_MULTIPLIER
    max_speed_multiplier: float = MAX_SPEED_MULTIPLIER

    def __post_init__(self):
        for name in ("world_width", "world_height", "bird_size", "pipe_width",
                     "gap_height", "pipe_speed"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")

        if self.gap_margin < 0:
            raise ConfigError(f"gap_margin must not be negative, got {self.gap_margin}")
        if self.gravity < 0:
            raise ConfigError(f"gravity must not be negative, got {self.gravity}")
        if self.jump_strength >= 0:
            raise ConfigError(f"jump_strength must point up (negative), got {self.jump_strength}")
        if int(self.spawn_interval_frames) != self.spawn_interval_frames or self.spawn_interval_frames < 1:
            raise ConfigError(f"spawn_interval_frames must be a whole number >= 1, got {self.spawn_interval_frames}")
        if self.speed_increase_interval_ms <= 0:
            raise ConfigError(f"speed_increase_interval_ms must be positive, got {self.speed_increase_interval_ms}")
        if self.speed_increment < 0:
            raise ConfigError(f"speed_increment must not be negative, got {self.speed_increment}")

        if not 0 < self.initial_speed_multiplier <= self.max_speed_multiplier:
            raise ConfigError(
                f"initial_speed_multiplier {self.initial_speed_multiplier} must lie in "
                f"(0, max_speed_multiplier={self.max_speed_multiplier}]"
            )

        # the full gap plus both margins has to fit on screen
        if self.gap_height + 2 * self.gap_margin > self.world_height:
            raise ConfigError(
                f"gap_height {self.gap_height} with margin {self.gap_margin} does not fit "
                f"in world_height {self.world_height}"
            )
        if self.bird_size > self.gap_height:
            raise ConfigError(f"bird_size {self.bird_size} is taller than the gap {self.gap_height}")
        if not 0 <= self.bird_start_y <= self.world_height - self.bird_size:
            raise ConfigError(f"bird_start_y {self.bird_start_y} puts the bird off screen")
        if not 0 <= self.bird_x <= self.world_width - self.bird_size:
            raise ConfigError(f"bird_x {self.bird_x} puts the bird off screen")

    @property
    def min_gap_y(self) -> float:
        return self.gap_margin

    @property
    def max_gap_y(self) -> float:
        return self.world_height - self.gap_height - self.gap_margin


DEFAULT_CONFIG = GameConfig()
