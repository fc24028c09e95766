import pygame
import pytest

from controls import JUMP, QUIT, action_for_event


@pytest.mark.parametrize("event, expected", [
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE), JUMP),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP), JUMP),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x), JUMP),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), None),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE), QUIT),
    (pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE), None),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)), JUMP),
    (pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5), JUMP),
    (pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 10)), None),
    (pygame.event.Event(pygame.QUIT), QUIT),
])
def test_action_for_event(event, expected):
    assert action_for_event(event) == expected
