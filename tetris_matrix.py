
"""Matrix helpers for piece shapes"""
from typing import List

Matrix = List[List[int]]

def rotate_cw(m: Matrix) -> Matrix:
    """Return a new matrix turned 90° clockwise; rotated[c][rows-1-r] == m[r][c].

    Works on rectangular input too: an R x C matrix comes back as C x R.
    """
    return [list(r) for r in zip(*m[::-1])]

def copy_matrix(m: Matrix) -> Matrix:
    return [r[:] for r in m]

def width(m: Matrix) -> int:
    return len(m[0]) if m else 0
