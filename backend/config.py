"""
Runtime settings for the torus snake game.

Grid size and tick interval are fixed constants in domain.constants; only
operational knobs (seed, logging, replay location, frame cap) come from the
environment.

Uses environment variables (a local .env file is loaded first):
- SNAKE_SEED: integer seed for the food/autoplay random source (optional)
- SNAKE_LOG_LEVEL: logging level name (default INFO)
- SNAKE_REPLAY_DIR: where replay JSON and GIFs are written (default completed_games)
- SNAKE_FPS: frame cap for the windowed frontend (default 60)
"""

import logging
import os
import random
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULT_REPLAY_DIR = "completed_games"
DEFAULT_FPS = 60


@dataclass
class Settings:
    seed: Optional[int] = None
    log_level: str = "INFO"
    replay_dir: str = DEFAULT_REPLAY_DIR
    fps: int = DEFAULT_FPS

    def make_rng(self) -> random.Random:
        """A fresh random source, seeded when a seed is configured."""
        return random.Random(self.seed)


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")


def load_settings() -> Settings:
    """
    Build Settings from the environment.

    Raises:
        ValueError: If SNAKE_SEED or SNAKE_FPS is not an integer, or
            SNAKE_FPS is not positive.
    """
    fps = _int_env('SNAKE_FPS', DEFAULT_FPS)
    if fps <= 0:
        raise ValueError(f"SNAKE_FPS must be positive, got {fps}")

    return Settings(
        seed=_int_env('SNAKE_SEED', None),
        log_level=os.getenv('SNAKE_LOG_LEVEL', 'INFO').upper(),
        replay_dir=os.getenv('SNAKE_REPLAY_DIR', DEFAULT_REPLAY_DIR),
        fps=fps,
    )


def configure_logging(level: str = "INFO"):
    """Configure root logging the same way for every entry point."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT
    )
