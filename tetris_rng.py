
"""Uniform piece randomizer"""
import random
from typing import Optional

from tetris_config import KINDS

class PieceRandom:
    """Plain uniform pick per spawn, repeats allowed (no 7-bag)."""
    def __init__(self, seed: Optional[int]=None):
        self._random = random.Random(seed)

    def next_kind(self) -> str:
        return self._random.choice(KINDS)
