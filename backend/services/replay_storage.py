"""
Local replay storage.

Replays are JSON files named snake_game_<game_id>.json holding a
'metadata' dict and a 'rounds' list of GameSnapshot.to_dict() entries.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


def replay_filename(game_id: str) -> str:
    return f"snake_game_{game_id}.json"


def save_replay(game_id: str, data: Dict[str, Any], directory: str) -> str:
    """
    Write replay data to <directory>/snake_game_<game_id>.json.

    Returns:
        Path of the written file
    """
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, replay_filename(game_id))
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    logger.info(f"Saved replay for game {game_id} to {path}")
    return path


def load_replay(file_path: str) -> Dict[str, Any]:
    """
    Load replay data from a local JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    logger.info(f"Loading replay from local file: {file_path}")

    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Replay file not found: {file_path}")

    with open(file_path, 'r') as f:
        replay_data = json.load(f)

    logger.info(f"Loaded replay with {len(replay_data.get('rounds', []))} rounds")
    return replay_data


def find_replay(game_id: str, directory: str) -> str:
    """Path of a saved replay by game id. Raises FileNotFoundError if missing."""
    path = os.path.join(directory, replay_filename(game_id))
    if not os.path.exists(path):
        raise FileNotFoundError(f"Could not find replay data for game {game_id} at {path}")
    return path


def extract_game_id_from_filename(file_path: str) -> str:
    """Extract game ID from filename"""
    # Expected format: snake_game_<game_id>.json
    filename = Path(file_path).stem
    if filename.startswith('snake_game_'):
        return filename.replace('snake_game_', '', 1)
    return filename
