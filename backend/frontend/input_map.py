"""
Keyboard mapping for the windowed frontend.

Arrows and WASD are equivalent. Only KEYDOWN events are fed through here,
so a held key produces one intent rather than one per frame.
"""

from typing import Optional

import pygame

from domain.constants import DOWN, LEFT, RIGHT, UP

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

RESTART_KEYS = {pygame.K_SPACE, pygame.K_RETURN}
QUIT_KEYS = {pygame.K_ESCAPE}


def direction_for_key(key: int) -> Optional[str]:
    """Direction for a key code, or None for keys that don't steer."""
    return KEY_DIRECTIONS.get(key)


def is_restart_key(key: int) -> bool:
    return key in RESTART_KEYS


def is_quit_key(key: int) -> bool:
    return key in QUIT_KEYS
