
"""Board: occupancy grid with collide, lock and sweep"""
import logging
from typing import List, Optional

from tetris_config import COLS, ROWS
from tetris_matrix import Matrix

logger = logging.getLogger(__name__)

Cell = Optional[str]
Grid = List[List[Cell]]

class Board:
    def __init__(self, cols: int=COLS, rows: int=ROWS):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"board must be at least 1x1, got {cols}x{rows}")
        self.cols, self.rows = cols, rows
        self.grid: Grid = [[None]*cols for _ in range(rows)]

    def clear(self):
        for r in self.grid:
            for x in range(self.cols): r[x] = None

    def is_empty(self, row: int, col: int) -> bool:
        """Out-of-range cells count as not empty."""
        if not (0 <= row < self.rows and 0 <= col < self.cols): return False
        return self.grid[row][col] is None

    def check_collision(self, shape: Matrix, x: int, y: int) -> bool:
        """True if any filled cell leaves the side/bottom bounds or hits a block.

        Rows above the board (y < 0) never collide with content.
        """
        for r,row in enumerate(shape):
            for c,v in enumerate(row):
                if not v: continue
                bx,by = x+c, y+r
                if bx<0 or bx>=self.cols or by>=self.rows: return True
                if by>=0 and self.grid[by][bx] is not None: return True
        return False

    def lock_shape(self, shape: Matrix, x: int, y: int, color: str):
        for r,row in enumerate(shape):
            for c,v in enumerate(row):
                if not v: continue
                bx,by = x+c, y+r
                if 0<=by<self.rows and 0<=bx<self.cols:
                    self.grid[by][bx] = color

    def sweep_completed_rows(self) -> int:
        c=0; y=self.rows-1
        while y>=0:
            if all(cell is not None for cell in self.grid[y]):
                del self.grid[y]; self.grid.insert(0,[None]*self.cols); c+=1
            else: y-=1
        if c: logger.debug("swept %d row(s)", c)
        return c

    def drop_row(self, shape: Matrix, x: int, y: int) -> int:
        """Lowest row the shape can reach straight down from (x, y)."""
        while not self.check_collision(shape, x, y+1): y+=1
        return y

    def rows_view(self):
        return tuple(tuple(r) for r in self.grid)
