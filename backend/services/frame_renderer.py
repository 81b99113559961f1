"""
Frame Rendering Service for Snake Game Replays

This service renders game snapshots to images using PIL (Pillow) and
stitches a replay's rounds into an animated GIF.

Each frame shows:
- The board with grid lines
- Food cell
- Snake body and head with eyes
- Score and alive status bar
- A "YOU LOST" banner once the snake is dead
"""

import logging
import os
import tempfile
from typing import Any, Dict, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

# Render settings
DEFAULT_FPS = 5  # One frame per 200ms tick
CELL_SIZE = 24  # Size of each grid cell in pixels
STATUS_BAR_HEIGHT = 40


class ColorScheme:
    """Color configuration for rendered frames"""

    SNAKE = "#4F7022"
    FOOD = "#EA2014"

    BACKGROUND = "#FFFFFF"
    GRID_LINE = "#E5E7EB"
    STATUS_BG = "#1a1f2e"
    STATUS_TEXT = "#FFFFFF"
    BANNER_TEXT = "#FF5064"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class SnakeFrameRenderer:
    """Render snapshots and replays of the snake game"""

    def __init__(self, cell_size: int = CELL_SIZE, fps: int = DEFAULT_FPS):
        self.cell_size = cell_size
        self.fps = fps
        self.font = ImageFont.load_default()

    def frame_size(self, grid_size: int) -> Tuple[int, int]:
        board = grid_size * self.cell_size
        return board, board + STATUS_BAR_HEIGHT

    def render_frame(self, round_data: Dict[str, Any]) -> Image.Image:
        """
        Render a single frame.

        Args:
            round_data: a GameSnapshot.to_dict() entry
        """
        grid_size = round_data['grid_size']
        width, height = self.frame_size(grid_size)

        img = Image.new('RGB', (width, height), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_board(draw, 0, STATUS_BAR_HEIGHT, round_data)
        self._draw_status_bar(draw, width, round_data)

        if not round_data.get('alive', True):
            self._draw_banner(draw, width, height, "YOU LOST")

        return img

    def _draw_status_bar(self, draw: ImageDraw.ImageDraw, width: int, round_data: Dict[str, Any]):
        draw.rectangle([0, 0, width, STATUS_BAR_HEIGHT], fill=hex_to_rgb(ColorScheme.STATUS_BG))

        status_text = (
            f"Score: {round_data.get('score', 0)} | "
            f"Tick: {round_data.get('tick', 0)} | "
            f"{round_data.get('status', 'playing').capitalize()}"
        )
        draw.text((10, 12), status_text, fill=hex_to_rgb(ColorScheme.STATUS_TEXT), font=self.font)

    def _draw_banner(self, draw: ImageDraw.ImageDraw, width: int, height: int, text: str):
        bbox = draw.textbbox((0, 0), text, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        x = width // 2 - text_width // 2
        y = (height + STATUS_BAR_HEIGHT) // 2 - text_height // 2
        draw.rectangle([x - 8, y - 6, x + text_width + 8, y + text_height + 6], fill=(0, 0, 0))
        draw.text((x, y), text, fill=hex_to_rgb(ColorScheme.BANNER_TEXT), font=self.font)

    def _draw_board(self, draw: ImageDraw.ImageDraw, x: int, y: int, round_data: Dict[str, Any]):
        """Draw grid, food and snake"""
        grid_size = round_data['grid_size']
        cell = self.cell_size
        board_pixels = grid_size * cell

        for i in range(grid_size + 1):
            draw.line(
                [x + i * cell, y, x + i * cell, y + board_pixels],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )
            draw.line(
                [x, y + i * cell, x + board_pixels, y + i * cell],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )

        food = round_data.get('food')
        if food is not None:
            self._draw_cell(draw, x + food[0] * cell, y + food[1] * cell, cell, hex_to_rgb(ColorScheme.FOOD))

        snake = round_data.get('snake', [])
        if not snake:
            return

        body_color = hex_to_rgb(ColorScheme.SNAKE)
        for pos_x, pos_y in snake[1:]:
            self._draw_cell(draw, x + pos_x * cell, y + pos_y * cell, cell, body_color, padding=1)

        head_x, head_y = snake[0]
        hx = x + head_x * cell
        hy = y + head_y * cell
        self._draw_cell(draw, hx, hy, cell, darken_color(ColorScheme.SNAKE, 0.3), padding=0)

        # Eyes
        eye_size = max(2, cell // 5)
        eye_y = hy + cell // 3
        draw.ellipse([hx + cell // 4, eye_y, hx + cell // 4 + eye_size, eye_y + eye_size], fill=(255, 255, 255))
        draw.ellipse([hx + 3 * cell // 4 - eye_size, eye_y, hx + 3 * cell // 4, eye_y + eye_size], fill=(255, 255, 255))

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        size: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single cell (for snake body or food)"""
        draw.rectangle(
            [x + padding, y + padding, x + size - padding, y + size - padding],
            fill=color
        )

    def generate_replay_gif(
        self,
        game_id: str,
        replay_data: Dict[str, Any],
        output_path: Optional[str] = None
    ) -> str:
        """
        Generate an animated GIF from a game replay

        Args:
            game_id: The game ID (used for logging and the default file name)
            replay_data: Replay dict with a 'rounds' list
            output_path: Optional output path (if None, uses temp dir)

        Returns:
            Path to the generated GIF

        Raises:
            ValueError: If the replay has no rounds
        """
        rounds: List[Dict[str, Any]] = replay_data.get('rounds', [])
        if not rounds:
            raise ValueError(f"Replay for game {game_id} has no rounds to render")

        logger.info(f"Rendering {len(rounds)} frames for game {game_id}")

        frames = []
        for i, round_data in enumerate(rounds):
            if i % 50 == 0:
                logger.debug(f"Rendering frame {i + 1}/{len(rounds)}")
            frames.append(self.render_frame(round_data))

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"{game_id}_replay.gif")

        frames[0].save(
            output_path,
            save_all=True,
            append_images=frames[1:],
            duration=max(1, int(1000 / self.fps)),
            loop=0
        )

        logger.info(f"Replay GIF created at {output_path}")
        return output_path


def get_replay_gif_path(game_id: str, directory: str) -> str:
    """
    Get the local path for a game's replay GIF

    Args:
        game_id: The game ID
        directory: Replay directory

    Returns:
        Path to the GIF file
    """
    os.makedirs(directory, exist_ok=True)
    return os.path.join(directory, f"{game_id}_replay.gif")
