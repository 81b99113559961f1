#!/usr/bin/env python3
"""
CLI tool to render animated GIFs from Snake game replays

Usage:
    python generate_replay.py <game_id>
    python generate_replay.py --local <path_to_replay.json>

Examples:
    # Render from the replay directory (SNAKE_REPLAY_DIR)
    python generate_replay.py abc-123-def-456

    # Render from a specific local file
    python generate_replay.py --local ../completed_games/snake_game_xyz.json

    # Custom output path and speed
    python generate_replay.py abc-123 --output ./my_replay.gif --fps 10
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import configure_logging, load_settings  # noqa: E402
from services.frame_renderer import SnakeFrameRenderer, get_replay_gif_path, DEFAULT_FPS, CELL_SIZE  # noqa: E402
from services.replay_storage import extract_game_id_from_filename, find_replay, load_replay  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Render animated GIFs from Snake game replays',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    # Input options
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        'game_id',
        nargs='?',
        help='Game ID to load from the replay directory'
    )
    input_group.add_argument(
        '--local',
        type=str,
        help='Path to local replay JSON file'
    )

    # Output options
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output GIF path (default: replay directory)'
    )

    # Render settings
    parser.add_argument(
        '--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frames per second (default: {DEFAULT_FPS})'
    )
    parser.add_argument(
        '--cell-size',
        dest='cell_size',
        type=int,
        default=CELL_SIZE,
        help=f'Pixels per grid cell (default: {CELL_SIZE})'
    )
    return parser


def generate(args: argparse.Namespace, replay_dir: str) -> str:
    """Resolve the replay, render it, and return the GIF path."""
    if args.local:
        game_id = extract_game_id_from_filename(args.local)
        replay_path = args.local
        logger.info(f"Using game ID: {game_id}")
    else:
        game_id = args.game_id
        replay_path = find_replay(game_id, replay_dir)

    replay_data = load_replay(replay_path)

    output = args.output or get_replay_gif_path(game_id, replay_dir)

    renderer = SnakeFrameRenderer(cell_size=args.cell_size, fps=args.fps)
    logger.info(f"Generating replay GIF for game {game_id}...")
    return renderer.generate_replay_gif(game_id, replay_data, output_path=output)


def main():
    args = build_parser().parse_args()
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        gif_path = generate(args, settings.replay_dir)
        logger.info(f"[OK] Replay generated successfully: {gif_path}")

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
