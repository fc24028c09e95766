from settings import GameConfig


def elapsed_since(now: int, then: int) -> int:
    """Milliseconds from `then` to `now`; a clock that went backwards counts as 0."""
    return max(0, now - then)


def next_speed_multiplier(current: float, config: GameConfig) -> float:
    """
    One step up the ramp, capped.
    - 1.0 -> 1.2 -> 1.4 ... -> 2.5 with the default tunables
    """
    return min(current + config.speed_increment, config.max_speed_multiplier)


def speed_step_due(now: int, last_increase_at: int, current: float, config: GameConfig) -> bool:
    if current >= config.max_speed_multiplier:
        return False  # already flat out
    return elapsed_since(now, last_increase_at) >= config.speed_increase_interval_ms


def ramp_speed(world, now: int) -> bool:
    """Step the world's speed multiplier if an interval has gone by.

    Returns True on the frame the multiplier changed, which is what the
    presentation layer keys its "SPEED UP!" banner off.
    """
    config = world.config
    if not speed_step_due(now, world.last_speed_increase_at, world.speed_multiplier, config):
        return False
    world.speed_multiplier = next_speed_multiplier(world.speed_multiplier, config)
    world.last_speed_increase_at = now
    return True
