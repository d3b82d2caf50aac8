
"""Game session: spawn, fall/move/rotate, lock, clear, level-up, game over.

One ``Game`` object owns the board and every session counter. A host driver
feeds it input commands and ``tick(elapsed_ms)`` calls, strictly one at a time,
and reads ``snapshot()`` to draw. Commands issued in the wrong state are
ignored: they return False and change nothing.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import tetris_events as ev
from tetris_board import Board
from tetris_config import (COLS, ROWS, CONFIG, DIFFICULTY_SETTINGS, HARD_DROP_PER_CELL,
                           LINES_PER_LEVEL, fall_interval_ms, line_clear_score)
from tetris_matrix import rotate_cw
from tetris_piece import Piece, create_random_piece
from tetris_rng import PieceRandom

logger = logging.getLogger(__name__)

# Horizontal offsets tried in order when rotating
KICK_OFFSETS = (0, 1, -1, 2, -2)

class GameStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "gameOver"

Shape = Tuple[Tuple[int, ...], ...]

@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view for renderers"""
    board: Tuple[Tuple[Optional[str], ...], ...]
    piece: Optional[Shape]
    x: int
    y: int
    color: Optional[str]
    ghost_y: Optional[int]
    next_piece: Optional[Shape]
    next_color: Optional[str]
    score: int
    high_score: int
    level: int
    lines: int
    difficulty: str
    running: bool
    paused: bool
    over: bool

def _frozen(shape) -> Shape:
    return tuple(tuple(r) for r in shape)

class Game:
    def __init__(self, store=None, rng: Optional[PieceRandom]=None, difficulty: Optional[str]=None,
                 events: Optional[ev.EventBus]=None, cols: int=COLS, rows: int=ROWS):
        self.store = store
        self.rng = rng or PieceRandom(CONFIG["SEED"])
        self.events = events or ev.EventBus()
        self.board = Board(cols, rows)
        self.difficulty = self._check_difficulty(difficulty or CONFIG["DIFFICULTY"])
        self.high_score = self._load_high_score()
        self._reset_session()

    # ---------- lifecycle ----------
    @property
    def running(self) -> bool:
        return self.status in (GameStatus.RUNNING, GameStatus.PAUSED)

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    @property
    def over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def set_difficulty(self, name: str) -> bool:
        """Select a preset; a session already in play keeps the one it started with."""
        self.difficulty = self._check_difficulty(name)
        if self.status is GameStatus.IDLE:
            self.fall_interval = DIFFICULTY_SETTINGS[name].base_speed
        logger.info("difficulty set to %s", name)
        return True

    def start(self) -> bool:
        if self.status not in (GameStatus.IDLE, GameStatus.GAME_OVER):
            return False
        self._reset_session()
        self._preset = DIFFICULTY_SETTINGS[self.difficulty]
        self.fall_interval = self._preset.base_speed
        self.status = GameStatus.RUNNING
        self._spawn()
        logger.info("game started: difficulty=%s fall=%dms", self.difficulty, self.fall_interval)
        return True

    def pause(self) -> bool:
        if self.status is not GameStatus.RUNNING: return False
        self.status = GameStatus.PAUSED
        logger.info("paused")
        return True

    def resume(self) -> bool:
        if self.status is not GameStatus.PAUSED: return False
        self.status = GameStatus.RUNNING
        self._elapsed = 0
        logger.info("resumed")
        return True

    def toggle_pause(self) -> bool:
        return self.resume() if self.paused else self.pause()

    def reset(self) -> bool:
        self._reset_session()
        logger.info("reset")
        return True

    def tick(self, elapsed_ms: float) -> bool:
        """Advance the gravity clock; returns True when an automatic descent ran."""
        if self.status is not GameStatus.RUNNING: return False
        self._elapsed += max(0, elapsed_ms)
        if self._elapsed < self.fall_interval: return False
        self._elapsed = 0
        self.move_down()
        return True

    # ---------- piece commands ----------
    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def move_down(self) -> bool:
        """Soft drop one row, or lock when blocked. No score for soft drops."""
        p = self._active()
        if p is None: return False
        if not self.board.check_collision(p.shape, p.x, p.y+1):
            p.y += 1
        else:
            self._lock()
        return True

    def hard_drop(self) -> bool:
        p = self._active()
        if p is None: return False
        rows = 0
        while not self.board.check_collision(p.shape, p.x, p.y+1):
            p.y += 1; rows += 1
        if rows:
            self.score += rows * HARD_DROP_PER_CELL
            logger.debug("hard drop %d row(s)", rows)
            self.events.emit(ev.HARD_DROP, rows=rows)
        self._lock()
        return True

    def rotate(self) -> bool:
        p = self._active()
        if p is None: return False
        shape = rotate_cw(p.shape)
        for dx in KICK_OFFSETS:
            if not self.board.check_collision(shape, p.x+dx, p.y):
                p.shape = shape; p.x += dx
                logger.debug("rotated %s kick=%d", p.t, dx)
                self.events.emit(ev.ROTATE, kick=dx)
                return True
        logger.debug("rotation blocked")
        return False

    # ---------- renderer helpers ----------
    def ghost_row(self) -> Optional[int]:
        p = self.current
        if p is None: return None
        return self.board.drop_row(p.shape, p.x, p.y)

    def snapshot(self) -> GameSnapshot:
        p, n = self.current, self.next
        return GameSnapshot(
            board=self.board.rows_view(),
            piece=_frozen(p.shape) if p else None,
            x=p.x if p else 0, y=p.y if p else 0,
            color=p.color if p else None,
            ghost_y=self.ghost_row(),
            next_piece=_frozen(n.shape) if n else None,
            next_color=n.color if n else None,
            score=self.score, high_score=self.high_score,
            level=self.level, lines=self.lines,
            difficulty=self.difficulty,
            running=self.running, paused=self.paused, over=self.over,
        )

    # ---------- internals ----------
    def _check_difficulty(self, name: str) -> str:
        if name not in DIFFICULTY_SETTINGS:
            raise ValueError(f"unknown difficulty {name!r}; expected one of {sorted(DIFFICULTY_SETTINGS)}")
        return name

    def _load_high_score(self) -> int:
        if self.store is None: return 0
        return self.store.load() or 0

    def _reset_session(self):
        self.board.clear()
        self.current: Optional[Piece] = None
        self.next: Optional[Piece] = None
        self.score = 0
        self.level = 1
        self.lines = 0
        self._preset = DIFFICULTY_SETTINGS[self.difficulty]
        self.fall_interval = self._preset.base_speed
        self._elapsed = 0
        self.status = GameStatus.IDLE

    def _active(self) -> Optional[Piece]:
        if self.status is not GameStatus.RUNNING: return None
        return self.current

    def _shift(self, dx: int) -> bool:
        p = self._active()
        if p is None or self.board.check_collision(p.shape, p.x+dx, p.y): return False
        p.x += dx
        self.events.emit(ev.MOVE, dx=dx)
        return True

    def _lock(self):
        p = self.current
        self.board.lock_shape(p.shape, p.x, p.y, p.color)
        logger.debug("locked %s at (%d, %d)", p.t, p.x, p.y)
        self.events.emit(ev.LOCK, color=p.color)
        cleared = self.board.sweep_completed_rows()
        if cleared:
            self.lines += cleared
            gained = line_clear_score(cleared, self.level)
            self.score += gained
            self.events.emit(ev.TETRIS_CLEAR if cleared == 4 else ev.LINE_CLEAR,
                             count=cleared, score=gained)
            level = self.lines // LINES_PER_LEVEL + 1
            if level > self.level:
                self.level = level
                self.fall_interval = fall_interval_ms(self._preset, level)
                logger.info("level up: %d, fall=%dms", level, self.fall_interval)
                self.events.emit(ev.LEVEL_UP, level=level, fall_interval=self.fall_interval)
        self._spawn()

    def _spawn(self):
        self.current = self.next or create_random_piece(self.rng)
        self.next = create_random_piece(self.rng)
        p = self.current
        p.x = (self.board.cols - p.width) // 2
        p.y = 0
        logger.debug("spawned %s at (%d, %d), next %s", p.t, p.x, p.y, self.next.t)
        if self.board.check_collision(p.shape, p.x, p.y):
            self._game_over()

    def _game_over(self):
        self.status = GameStatus.GAME_OVER
        new_high = self.score > self.high_score
        if new_high:
            self.high_score = self.score
            if self.store is not None: self.store.save(self.score)
            logger.info("new high score %d", self.score)
        logger.info("game over: score=%d level=%d lines=%d", self.score, self.level, self.lines)
        self.events.emit(ev.GAME_OVER, score=self.score, high_score=self.high_score,
                         new_high_score=new_high)
