
"""Keyboard -> game command mapping"""
import logging
from typing import Optional

import pygame

from tetris_config import CONFIG

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_DOWN: "move_down",
    pygame.K_UP: "rotate",
    pygame.K_SPACE: "hard_drop",
    pygame.K_p: "toggle_pause",
    pygame.K_r: "reset",
    pygame.K_s: "start",
    pygame.K_RETURN: "start",
}

DIFFICULTY_KEYS = {
    pygame.K_1: "easy",
    pygame.K_2: "normal",
    pygame.K_3: "hard",
}

def enable_key_repeat():
    """Held keys repeat after KEY_REPEAT_DELAY_MS every KEY_REPEAT_INTERVAL_MS."""
    pygame.key.set_repeat(int(CONFIG["KEY_REPEAT_DELAY_MS"]), int(CONFIG["KEY_REPEAT_INTERVAL_MS"]))

def dispatch(game, key: int) -> Optional[str]:
    """Run the command bound to key; returns its name or None if unbound."""
    if key in DIFFICULTY_KEYS:
        # a running session keeps its preset; the choice applies on the next start
        game.set_difficulty(DIFFICULTY_KEYS[key])
        return "set_difficulty"
    cmd = KEYMAP.get(key)
    if cmd is None: return None
    logger.debug("key %s -> %s", key, cmd)
    getattr(game, cmd)()
    return cmd
