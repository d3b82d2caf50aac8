
"""Piece kinds, canonical shapes and colors"""
from dataclasses import dataclass
from typing import Dict, Optional

from tetris_config import KINDS
from tetris_matrix import Matrix, copy_matrix, width
from tetris_rng import PieceRandom

SHAPES: Dict[str, Matrix] = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
}

# Board cells store these markers directly
COLORS: Dict[str, str] = {
    "I": "#00ffff",
    "O": "#ffff00",
    "T": "#ff00ff",
    "S": "#00ff00",
    "Z": "#ff0000",
    "J": "#0000ff",
    "L": "#ff8800",
}

_default_rng = PieceRandom()

@dataclass
class Piece:
    t: str
    shape: Matrix
    color: str
    x: int = 0
    y: int = 0

    @staticmethod
    def of(t: str) -> "Piece":
        return Piece(t, copy_matrix(SHAPES[t]), COLORS[t])

    @property
    def width(self) -> int:
        return width(self.shape)

def create_random_piece(rng: Optional[PieceRandom]=None) -> Piece:
    """Fresh piece of a uniformly chosen kind; the caller sets x/y."""
    return Piece.of((rng or _default_rng).next_kind())
