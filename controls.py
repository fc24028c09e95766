import pygame

JUMP = "jump"
QUIT = "quit"

FLAP_KEYS = (pygame.K_SPACE, pygame.K_x, pygame.K_UP)


def action_for_event(event):
    """Map a raw pygame event to JUMP, QUIT or None."""
    if event.type == pygame.QUIT:
        return QUIT

    # Handle keyboard input
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return QUIT
        if event.key in FLAP_KEYS:
            return JUMP
        return None

    # Handle touch/mouse input (including mobile FINGERDOWN)
    if event.type == pygame.MOUSEBUTTONDOWN or event.type == pygame.FINGERDOWN:
        return JUMP

    return None
