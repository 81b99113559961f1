"""
SnakeWindow - a pygame window over a GameState.

The window owns the frame loop: every frame it drains input events, polls
GameState.update() (the tick gate decides whether the snake moves) and
redraws. Nothing here changes game rules.
"""

import logging
from typing import Optional, Tuple

import pygame

from domain.constants import WINDOW_HEIGHT, WINDOW_WIDTH, WON
from domain.game_state import GameSnapshot, GameState
from .input_map import direction_for_key, is_quit_key, is_restart_key

logger = logging.getLogger(__name__)

# Colors
BACKGROUND = (10, 12, 20)
GRID_LINE = (28, 32, 46)
SNAKE_HEAD = (80, 255, 120)
SNAKE_BODY = (40, 170, 80)
FOOD = (255, 70, 100)
TEXT = (180, 180, 220)
LOST = (255, 80, 100)


class SnakeWindow:
    """Main window class"""

    def __init__(self, state: GameState, fps: int = 60):
        self.state = state
        self.fps = fps
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()

        self.font_large = pygame.font.Font(None, 72)
        self.font_small = pygame.font.Font(None, 32)

        self.cell_size = min(WINDOW_WIDTH, WINDOW_HEIGHT) // state.grid_size
        board_pixels = self.cell_size * state.grid_size
        self.origin = ((WINDOW_WIDTH - board_pixels) // 2, (WINDOW_HEIGHT - board_pixels) // 2)

    def handle_event(self, event) -> bool:
        """Apply one pygame event. Returns False when the window should close."""
        if event.type == pygame.QUIT:
            return False

        if event.type != pygame.KEYDOWN:
            return True

        if is_quit_key(event.key):
            return False

        if is_restart_key(event.key):
            self.state.restart()
            return True

        direction = direction_for_key(event.key)
        if direction is not None:
            self.state.set_heading(direction)
        return True

    def handle_input(self) -> bool:
        """Handle keyboard input"""
        for event in pygame.event.get():
            if not self.handle_event(event):
                return False
        return True

    def cell_rect(self, cell: Tuple[int, int]) -> pygame.Rect:
        ox, oy = self.origin
        return pygame.Rect(
            ox + cell[0] * self.cell_size,
            oy + cell[1] * self.cell_size,
            self.cell_size,
            self.cell_size
        )

    def draw(self):
        snapshot = self.state.snapshot()
        self.screen.fill(BACKGROUND)
        self._draw_grid(snapshot)

        if snapshot.food is not None:
            pygame.draw.rect(self.screen, FOOD, self.cell_rect(snapshot.food).inflate(-4, -4))

        for cell in snapshot.snake[1:]:
            pygame.draw.rect(self.screen, SNAKE_BODY, self.cell_rect(cell).inflate(-2, -2))
        pygame.draw.rect(self.screen, SNAKE_HEAD, self.cell_rect(snapshot.head))

        score_surface = self.font_small.render(f"Score: {snapshot.score}", True, TEXT)
        self.screen.blit(score_surface, (10, 10))

        if not snapshot.alive:
            self._draw_banner("You lost", snapshot)
        elif snapshot.status == WON:
            self._draw_banner("Board full", snapshot)

        pygame.display.flip()

    def _draw_grid(self, snapshot: GameSnapshot):
        ox, oy = self.origin
        board_pixels = self.cell_size * snapshot.grid_size
        for i in range(snapshot.grid_size + 1):
            offset = i * self.cell_size
            pygame.draw.line(self.screen, GRID_LINE, (ox + offset, oy), (ox + offset, oy + board_pixels))
            pygame.draw.line(self.screen, GRID_LINE, (ox, oy + offset), (ox + board_pixels, oy + offset))

    def _draw_banner(self, title: str, snapshot: GameSnapshot):
        overlay = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (0, 0))

        title_surface = self.font_large.render(title, True, LOST)
        self.screen.blit(title_surface, title_surface.get_rect(center=(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 - 40)))

        hint = f"Score: {snapshot.score}  |  SPACE to restart  |  ESC to quit"
        hint_surface = self.font_small.render(hint, True, TEXT)
        self.screen.blit(hint_surface, hint_surface.get_rect(center=(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 + 30)))

    def step(self) -> bool:
        """One frame: input, at most one simulation tick, render."""
        running = self.handle_input()
        if running:
            self.state.update()
            self.draw()
        return running

    def run(self, max_frames: Optional[int] = None):
        """Main frame loop. max_frames bounds the loop for headless runs."""
        frames = 0
        running = True
        while running:
            self.clock.tick(self.fps)
            running = self.step()
            frames += 1
            if max_frames is not None and frames >= max_frames:
                break
        logger.info(f"Window closed after {frames} frames, score {self.state.score}")
