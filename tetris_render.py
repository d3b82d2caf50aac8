
"""
Rendering helpers: draw a GameSnapshot with pygame.

- Static background (grid + panel frame) is pre-rendered once per Dims.
- Block sprites are built lazily per color marker and cached.
- HUD text surfaces are re-rendered only when their values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Dict, Tuple

from tetris_layout import Dims
from tetris_config import COLS, ROWS

BG = (0, 0, 0)
GRID = (30, 30, 50)
PANEL = (16, 16, 32)
PANEL_EDGE = (60, 60, 110)
TEXT = (220, 220, 240)
DIM_TEXT = (150, 150, 190)

@dataclass
class HudCache:
    values: Dict[str, object] = field(default_factory=dict)
    surfaces: Dict[str, pygame.Surface] = field(default_factory=dict)

def block_surface(size: int, color: str) -> pygame.Surface:
    """Retro block: base fill, light top/left edge, dark bottom/right edge, centre dot."""
    base = pygame.Color(color)
    light = base.lerp(pygame.Color(255, 255, 255), 0.4)
    dark = base.lerp(pygame.Color(0, 0, 0), 0.4)
    s = pygame.Surface((size - 2, size - 2))
    s.fill(base)
    n = s.get_width()
    edge = max(1, size // 8)
    pygame.draw.rect(s, light, (0, 0, n, edge))
    pygame.draw.rect(s, light, (0, 0, edge, n))
    pygame.draw.rect(s, dark, (0, n - edge, n, edge))
    pygame.draw.rect(s, dark, (n - edge, 0, edge, n))
    dot = max(2, size // 6)
    pygame.draw.rect(s, light, (n // 4, n // 4, dot, dot))
    return s

class RenderAssets:
    """Holds pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.hud = HudCache()
        self._cells: Dict[Tuple[str, int], pygame.Surface] = {}
        self._ghosts: Dict[str, pygame.Surface] = {}
        self._make_static()

    # ---------- Static background ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(COLS + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, PANEL, panel)
        pygame.draw.rect(self.bg, PANEL_EDGE, panel, 1)
        self.pv_x = d.panel_x + (d.panel_w - d.next_cell * 4) // 2
        self.pv_y = d.panel_y + 40
        frame = pygame.Rect(self.pv_x - 6, self.pv_y - 6, d.next_cell * 4 + 12, d.next_cell * 4 + 12)
        pygame.draw.rect(self.bg, BG, frame)
        pygame.draw.rect(self.bg, PANEL_EDGE, frame, 1)

    # ---------- Sprites ----------
    def cell(self, color: str, size: int) -> pygame.Surface:
        key = (color, size)
        if key not in self._cells:
            self._cells[key] = block_surface(size, color)
        return self._cells[key]

    def ghost(self, color: str) -> pygame.Surface:
        if color not in self._ghosts:
            c = self.dims.cell
            g = pygame.Surface((c - 4, c - 4), pygame.SRCALPHA)
            pygame.draw.rect(g, pygame.Color(color), (0, 0, c - 4, c - 4), 1)
            self._ghosts[color] = g
        return self._ghosts[color]

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap):
        screen.blit(self.bg, (0, 0))
        self.draw_board(screen, snap)
        self.draw_panel(screen, snap)
        self.draw_banner(screen, snap)

    def draw_board(self, screen: pygame.Surface, snap):
        d = self.dims
        for y, row in enumerate(snap.board):
            for x, color in enumerate(row):
                if color:
                    screen.blit(self.cell(color, d.cell), (d.board_x + x * d.cell + 1, d.board_y + y * d.cell + 1))
        if snap.piece is None or snap.over:
            return
        for r, row in enumerate(snap.piece):
            for c, v in enumerate(row):
                if not v:
                    continue
                bx = d.board_x + (snap.x + c) * d.cell
                if snap.ghost_y is not None and snap.ghost_y + r >= 0:
                    screen.blit(self.ghost(snap.color), (bx + 2, d.board_y + (snap.ghost_y + r) * d.cell + 2))
                if snap.y + r >= 0:
                    screen.blit(self.cell(snap.color, d.cell), (bx + 1, d.board_y + (snap.y + r) * d.cell + 1))

    def _text(self, key: str, value, fmt: str, color=TEXT) -> pygame.Surface:
        if self.hud.values.get(key) != value or key not in self.hud.surfaces:
            self.hud.values[key] = value
            self.hud.surfaces[key] = self.font.render(fmt.format(value), True, color)
        return self.hud.surfaces[key]

    def draw_panel(self, screen: pygame.Surface, snap):
        d = self.dims
        x = d.panel_x + 12
        screen.blit(self._text("next", "NEXT", "{}"), (x, d.panel_y + 12))
        if snap.next_piece is not None:
            n = d.next_cell
            ox = self.pv_x + (4 - len(snap.next_piece[0])) * n // 2
            oy = self.pv_y + (4 - len(snap.next_piece)) * n // 2
            for r, row in enumerate(snap.next_piece):
                for c, v in enumerate(row):
                    if v:
                        screen.blit(self.cell(snap.next_color, n), (ox + c * n + 1, oy + r * n + 1))
        y = self.pv_y + d.next_cell * 4 + 24
        for key, value, fmt in (
            ("score", snap.score, "SCORE  {}"),
            ("high", snap.high_score, "HIGH   {}"),
            ("level", snap.level, "LEVEL  {}"),
            ("lines", snap.lines, "LINES  {}"),
            ("difficulty", snap.difficulty, "MODE   {}"),
        ):
            screen.blit(self._text(key, value, fmt), (x, y)); y += 24
        y += 12
        for i, line in enumerate((
            "<- -> Move", "Down  Soft drop", "Up    Rotate", "Space Hard drop",
            "P Pause  R Reset", "S Start", "1/2/3 Difficulty", "M Sound  N Music",
        )):
            screen.blit(self._text(f"help{i}", line, "{}", DIM_TEXT), (x, y)); y += 18

    def draw_banner(self, screen: pygame.Surface, snap):
        if snap.over:
            msg = "GAME OVER"
        elif snap.paused:
            msg = "PAUSED"
        elif not snap.running:
            msg = "PRESS S TO START"
        else:
            return
        d = self.dims
        s = self.big_font.render(msg, True, (255, 230, 230))
        rect = s.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        shade = pygame.Surface((d.board_w, rect.height + 24), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 190))
        screen.blit(shade, (d.board_x, rect.y - 12))
        screen.blit(s, rect)
