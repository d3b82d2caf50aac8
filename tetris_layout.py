# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG, COLS, ROWS

@dataclass
class Dims:
    cell: int
    next_cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

def compute_dims(cols: int = COLS, rows: int = ROWS) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    next_cell = int(CONFIG["NEXT_CELL_SIZE"])
    margin = 16
    panel_w = max(200, next_cell * 4 + 40)

    board_w = cols * cell
    board_h = rows * cell

    return Dims(
        cell=cell, next_cell=next_cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=margin + board_w + margin + panel_w + margin,
        total_h=margin + board_h + margin,
        board_x=margin, board_y=margin,
        panel_x=margin + board_w + margin, panel_y=margin,
    )
