
"""Game constants, difficulty presets and live CONFIG"""
from dataclasses import dataclass
from typing import Dict

COLS, ROWS = 10, 20

KINDS = ["I","O","T","S","Z","J","L"]

LINES_PER_LEVEL = 10
HARD_DROP_PER_CELL = 2
SCORE_TABLE = {1: 100, 2: 300, 3: 500, 4: 800}   # multiplied by current level

@dataclass(frozen=True)
class Difficulty:
    base_speed: int       # ms per row at level 1
    speed_decrement: int  # ms faster per level
    min_speed: int        # floor

DIFFICULTY_SETTINGS: Dict[str, Difficulty] = {
    "easy":   Difficulty(1000, 50, 200),
    "normal": Difficulty(800, 40, 100),
    "hard":   Difficulty(500, 30, 50),
}

CONFIG = {
    "CELL_SIZE": 24,
    "NEXT_CELL_SIZE": 20,
    "KEY_REPEAT_DELAY_MS": 170,
    "KEY_REPEAT_INTERVAL_MS": 50,
    "DIFFICULTY": "normal",
    "SEED": None,
    "HIGH_SCORE_PATH": "~/.retro_tetris/highscore.json",
    "SOUND_ENABLED": True,
    "MUSIC_ENABLED": True,
    "FPS": 60,
}

def line_clear_score(count: int, level: int) -> int:
    if count <= 0: return 0
    return (SCORE_TABLE.get(count) or count * 100) * level

def fall_interval_ms(difficulty: Difficulty, level: int) -> int:
    return max(difficulty.min_speed,
               difficulty.base_speed - (level - 1) * difficulty.speed_decrement)
