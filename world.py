"""World state for one play session.

A World is created idle, flips to running on the first start/jump, and is
frozen once the bird hits something. Nothing here moves anything; see
engine.advance for that.
"""

import enum
import random
from dataclasses import dataclass, field
from typing import List, Optional

from settings import DEFAULT_CONFIG, GameConfig


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


@dataclass
class Pipe:
    x: float            # left edge of the pair
    gap_y: float        # top of the gap
    passed: bool = False

    def trailing_edge(self, config: GameConfig) -> float:
        return self.x + config.pipe_width

    def top_rect(self, config: GameConfig):
        """(x, y, w, h) of the solid part above the gap."""
        return (self.x, 0.0, config.pipe_width, self.gap_y)

    def bottom_rect(self, config: GameConfig):
        """(x, y, w, h) of the solid part below the gap, down to the floor."""
        gap_bottom = self.gap_y + config.gap_height
        return (self.x, gap_bottom, config.pipe_width, config.world_height - gap_bottom)


@dataclass
class World:
    bird_y: Optional[float] = None           # None: config.bird_start_y
    bird_velocity_y: float = 0.0
    pipes: List[Pipe] = field(default_factory=list)
    frame_count: int = 0
    score: int = 0
    speed_multiplier: Optional[float] = None  # None: config.initial_speed_multiplier
    last_speed_increase_at: int = 0
    session_started_at: int = 0
    ended_at: Optional[int] = None
    phase: Phase = Phase.IDLE
    speed_up_pulse: bool = False
    flap_queued: bool = False

    # not part of the observable state
    config: GameConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)

    def __post_init__(self):
        # starting values come from whichever config the world was built with
        if self.bird_y is None:
            self.bird_y = self.config.bird_start_y
        if self.speed_multiplier is None:
            self.speed_multiplier = self.config.initial_speed_multiplier

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def over(self) -> bool:
        return self.phase is Phase.OVER


def new_world(config: GameConfig = DEFAULT_CONFIG, rng: Optional[random.Random] = None) -> World:
    """Fresh idle world using the given tunables."""
    return World(config=config, rng=rng if rng is not None else random.Random())
