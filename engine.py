"""Per-frame simulation for the bird, the pipes and the speed ramp.

The presentation layer owns one World, calls advance() once per display
frame with the current tick in milliseconds, and draws whatever view()
returns. start() and jump() are the only commands going the other way.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from collision import hits_anything
from difficulty import elapsed_since, ramp_speed
from world import Phase, Pipe, World, new_world

Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class FrameView:
    bird: Rect
    pipes: List[Tuple[Rect, Rect]]  # (top, bottom) per pipe, left to right
    score: int
    speed_multiplier: float
    phase: Phase
    speed_up_pulse: bool


def integrate_bird(world: World, jump_requested: bool = False) -> None:
    # gravity lands every frame; a jump then replaces the velocity outright
    world.bird_velocity_y += world.config.gravity * world.speed_multiplier
    if jump_requested:
        world.bird_velocity_y = world.config.jump_strength
    world.bird_y += world.bird_velocity_y


def spawn_pipe(world: World) -> Optional[Pipe]:
    config = world.config
    if world.frame_count % config.spawn_interval_frames != 0:
        return None
    pipe = Pipe(x=config.world_width, gap_y=world.rng.uniform(config.min_gap_y, config.max_gap_y))
    world.pipes.append(pipe)
    return pipe


def pipe_step(world: World) -> float:
    """How far every pipe travels this frame."""
    return world.config.pipe_speed * world.speed_multiplier


def scroll_pipes(world: World) -> None:
    step = pipe_step(world)
    for pipe in world.pipes:
        pipe.x -= step
    # stable filter, never delete while iterating
    world.pipes = [pipe for pipe in world.pipes if pipe.x > -world.config.pipe_width]


def score_pipes(world: World) -> int:
    """Count pipes whose trailing edge reached the bird this frame."""
    bird_x = world.config.bird_x
    gained = 0
    for pipe in world.pipes:
        if not pipe.passed and pipe.trailing_edge(world.config) <= bird_x:
            pipe.passed = True
            gained += 1
    world.score += gained
    return gained


def advance(world: World, now: int, jump_requested: bool = False) -> World:
    """Run one frame. Does nothing unless the world is running."""
    if world.phase is not Phase.RUNNING:
        return world

    world.speed_up_pulse = ramp_speed(world, now)

    integrate_bird(world, jump_requested or world.flap_queued)
    world.flap_queued = False

    spawn_pipe(world)
    scroll_pipes(world)
    score_pipes(world)

    if hits_anything(world.bird_y, world.pipes, world.config):
        world.phase = Phase.OVER
        world.ended_at = now
        return world

    world.frame_count += 1
    return world


def _begin(world: World, now: int) -> World:
    world.phase = Phase.RUNNING
    world.session_started_at = now
    world.last_speed_increase_at = now
    return world


def start(world: World, now: int) -> World:
    """Start from idle, or throw away a finished world and start a fresh one."""
    if world.phase is Phase.RUNNING:
        return world
    if world.phase is Phase.OVER:
        world = new_world(world.config, world.rng)
    return _begin(world, now)


def jump(world: World, now: int) -> World:
    """Flap while running; otherwise the same as start()."""
    if world.phase is Phase.RUNNING:
        world.flap_queued = True
        return world
    return start(world, now)


def survival_ms(world: World, now: int) -> int:
    """How long the current session has lasted, frozen once it is over."""
    if world.phase is Phase.IDLE:
        return 0
    end = world.ended_at if world.ended_at is not None else now
    return elapsed_since(end, world.session_started_at)


def view(world: World) -> FrameView:
    config = world.config
    return FrameView(
        bird=(config.bird_x, world.bird_y, config.bird_size, config.bird_size),
        pipes=[(pipe.top_rect(config), pipe.bottom_rect(config)) for pipe in world.pipes],
        score=world.score,
        speed_multiplier=world.speed_multiplier,
        phase=world.phase,
        speed_up_pulse=world.speed_up_pulse,
    )
