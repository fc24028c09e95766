from typing import Iterable

from settings import GameConfig
from world import Pipe


def out_of_bounds(bird_y: float, config: GameConfig) -> bool:
    # ceiling or ground
    return bird_y < 0 or bird_y + config.bird_size > config.world_height


def hits_pipe(bird_y: float, pipe: Pipe, config: GameConfig) -> bool:
    """True when the bird overlaps the pipe's columns and is not fully inside its gap."""
    bird_left = config.bird_x
    bird_right = config.bird_x + config.bird_size
    if not (bird_right > pipe.x and bird_left < pipe.x + config.pipe_width):
        return False
    return bird_y < pipe.gap_y or bird_y + config.bird_size > pipe.gap_y + config.gap_height


def hits_anything(bird_y: float, pipes: Iterable[Pipe], config: GameConfig) -> bool:
    if out_of_bounds(bird_y, config):
        return True
    return any(hits_pipe(bird_y, pipe, config) for pipe in pipes)
