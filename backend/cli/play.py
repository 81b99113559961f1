#!/usr/bin/env python3
"""
Play the torus snake game in a pygame window.

Controls:
    Arrows / WASD   steer
    SPACE / ENTER   restart after losing
    ESC             quit

Usage:
    python play.py
    python play.py --seed 42 --fps 30

    # Headless smoke run (no window)
    SDL_VIDEODRIVER=dummy python play.py --headless-frames 120
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import configure_logging, load_settings  # noqa: E402

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description='Play the torus snake game',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for food placement (overrides SNAKE_SEED)')
    parser.add_argument('--fps', type=int, default=None,
                        help='Frame cap (overrides SNAKE_FPS)')
    parser.add_argument('--headless-frames', dest='headless_frames', type=int, default=None,
                        help='Run this many frames with the dummy video driver, then exit')
    args = parser.parse_args()

    settings = load_settings()
    configure_logging(settings.log_level)
    if args.seed is not None:
        settings.seed = args.seed
    if args.fps is not None:
        settings.fps = args.fps

    # SDL reads the driver at init, so set it before importing pygame
    if args.headless_frames is not None:
        os.environ['SDL_VIDEODRIVER'] = 'dummy'
        os.environ['SDL_AUDIODRIVER'] = 'dummy'

    import pygame
    from domain import GameState
    from frontend.window import SnakeWindow

    pygame.init()
    try:
        window = SnakeWindow(GameState(rng=settings.make_rng()), fps=settings.fps)
        window.run(max_frames=args.headless_frames)
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
