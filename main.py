import argparse
import asyncio
import random
import sys

import pygame

import engine
from controls import JUMP, QUIT, action_for_event
from settings import DEFAULT_CONFIG, FPS
from speed_banner import SpeedBanner
from world import Phase, new_world

# Check if running in web browser
IS_WEB = sys.platform == "emscripten"

# Colors
SKY = (135, 206, 235)
PIPE_GREEN = (34, 139, 34)
BIRD_GOLD = (255, 215, 0)
BEAK = (255, 99, 71)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (250, 204, 21)
DARK_YELLOW = (113, 63, 18)
RED = (239, 68, 68)
OVERLAY = (0, 0, 0, 128)
PANEL = (0, 0, 0, 178)

START_HINTS = (
    "Controls: Press SPACE or Click to jump",
    "Avoid the pipes and survive as long as you can!",
)


def to_rect(r) -> pygame.Rect:
    """(x, y, w, h) floats from the engine -> pygame.Rect for drawing."""
    x, y, w, h = r
    return pygame.Rect(round(x), round(y), round(w), max(0, round(h)))


def format_speed(multiplier: float) -> str:
    return f"{multiplier:.1f}x"


def format_time(ms: int) -> str:
    seconds = ms // 1000
    return f"{seconds // 60}:{seconds % 60:02d}"


def tick(world, banner, now: int) -> bool:
    """Advance one frame and feed the banner. True on the frame the game ends."""
    was_running = world.running
    engine.advance(world, now)
    # a frozen world keeps its last pulse, only frames that ran may trigger
    banner.update(now, was_running and world.speed_up_pulse)
    return was_running and world.over


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Flappy Bird with a speed ramp")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe gap placement")
    parser.add_argument("--fps", type=int, default=FPS, help="frame rate cap (default: %(default)s)")
    # pygbag passes its own arguments through; ignore what we don't know
    args, _ = parser.parse_known_args(argv)
    return args


async def main(argv=None):
    args = parse_args(argv)
    config = DEFAULT_CONFIG
    game_width, game_height = int(config.world_width), int(config.world_height)

    pygame.init()
    print(f"PYGAME INIT OK, IS_WEB = {IS_WEB}")

    # Simple display mode for web compatibility
    flags = 0 if IS_WEB else (pygame.SCALED | pygame.RESIZABLE)
    window = pygame.display.set_mode((game_width, game_height), flags)
    print("Display mode set successfully")

    # Set pixelated rendering for web
    if IS_WEB:
        import platform
        platform.window.canvas.style.imageRendering = "pixelated"

    pygame.display.set_caption("Flappy Bird")
    clock = pygame.time.Clock()

    # Load font
    try:
        font_big = pygame.font.Font(None, 56)
        font = pygame.font.Font(None, 36)
        font_small = pygame.font.Font(None, 24)
        print("Font loaded successfully")
    except Exception as e:
        print(f"Font failed, using system font: {e}")
        font_big = pygame.font.SysFont(None, 56)
        font = pygame.font.SysFont(None, 36)
        font_small = pygame.font.SysFont(None, 24)

    rng = random.Random(args.seed)
    if args.seed is not None:
        print(f"Pipe gaps seeded with {args.seed}")

    world = new_world(config, rng)
    banner = SpeedBanner()
    best_speed = world.speed_multiplier

    def blit_panel(text_surf, topleft=None, topright=None, pad=10):
        panel = pygame.Surface((text_surf.get_width() + 2 * pad, text_surf.get_height() + 2 * pad), pygame.SRCALPHA)
        panel.fill(PANEL)
        panel.blit(text_surf, (pad, pad))
        rect = panel.get_rect(topleft=topleft) if topleft else panel.get_rect(topright=topright)
        window.blit(panel, rect)
        return rect

    def blit_centered(text_surf, y):
        window.blit(text_surf, (game_width / 2 - text_surf.get_width() / 2, y))

    def draw_bird(bird_rect):
        size = bird_rect.width
        cx, cy = bird_rect.centerx, bird_rect.centery
        pygame.draw.circle(window, BIRD_GOLD, (cx, cy), size // 2)
        # eye
        pygame.draw.circle(window, BLACK, (cx + 8, cy - 5), 3)
        # beak
        pygame.draw.polygon(window, BEAK, [
            (bird_rect.right, cy),
            (bird_rect.right + 10, cy - 5),
            (bird_rect.right + 10, cy + 5),
        ])

    def draw(frame, now):
        window.fill(SKY)

        # Draw pipes
        for top, bottom in frame.pipes:
            pygame.draw.rect(window, PIPE_GREEN, to_rect(top))
            pygame.draw.rect(window, PIPE_GREEN, to_rect(bottom))

        draw_bird(to_rect(frame.bird))

        # Score and speed indicator
        blit_panel(font.render(str(frame.score), True, WHITE), topleft=(16, 16))
        speed_rect = blit_panel(font_small.render(format_speed(frame.speed_multiplier), True, YELLOW),
                                topright=(game_width - 16, 16))

        if banner.visible(now):
            text = font_small.render("SPEED UP!", True, DARK_YELLOW)
            surf = pygame.Surface((text.get_width() + 20, text.get_height() + 20), pygame.SRCALPHA)
            surf.fill(YELLOW)
            surf.blit(text, (10, 10))
            surf.set_alpha(banner.alpha(now))
            window.blit(surf, surf.get_rect(topright=(game_width - 16, speed_rect.bottom + 12)))

        if frame.phase is Phase.IDLE:
            shade = pygame.Surface((game_width, game_height), pygame.SRCALPHA)
            shade.fill(OVERLAY)
            window.blit(shade, (0, 0))
            blit_centered(font_big.render("Flappy Bird", True, WHITE), game_height / 2 - 80)
            blit_centered(font.render("Press SPACE or Click to Start", True, WHITE), game_height / 2 - 10)
            blit_centered(font_small.render("Speed increases every 10 seconds!", True, YELLOW), game_height / 2 + 35)
            for i, line in enumerate(START_HINTS):
                blit_centered(font_small.render(line, True, WHITE), game_height - 70 + i * 26)

        # Draw game over text (properly centered)
        if frame.phase is Phase.OVER:
            shade = pygame.Surface((game_width, game_height), pygame.SRCALPHA)
            shade.fill(OVERLAY)
            window.blit(shade, (0, 0))
            blit_centered(font_big.render("Game Over!", True, RED), game_height / 2 - 110)
            blit_centered(font.render(f"Score: {frame.score}", True, WHITE), game_height / 2 - 45)
            blit_centered(font_small.render(f"Max Speed: {format_speed(best_speed)}", True, WHITE), game_height / 2)
            blit_centered(font_small.render(f"Time: {format_time(engine.survival_ms(world, now))}", True, WHITE),
                          game_height / 2 + 28)
            blit_centered(font.render("Press SPACE or Click to Restart", True, WHITE), game_height / 2 + 70)

    # Main game loop
    while True:
        now = pygame.time.get_ticks()

        for event in pygame.event.get():
            action = action_for_event(event)
            if action == QUIT:
                pygame.quit()
                return

            if action == JUMP:
                was = world.phase
                world = engine.jump(world, now)
                if was is not Phase.RUNNING:
                    # new session: banner and best speed start over
                    banner.reset()
                    best_speed = world.speed_multiplier
                    print("Game started" if was is Phase.IDLE else "Game restarted")

        # Update and draw
        ended = tick(world, banner, now)
        best_speed = max(best_speed, world.speed_multiplier)

        if ended:
            print(f"Game over: score {world.score}, speed {format_speed(best_speed)}, "
                  f"time {format_time(engine.survival_ms(world, now))}")

        draw(engine.view(world), now)
        pygame.display.update()
        clock.tick(args.fps)

        await asyncio.sleep(0)


def run():
    asyncio.run(main())


# Run the game
if __name__ == "__main__":
    run()
