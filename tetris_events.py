
"""Named game events and a tiny synchronous bus"""
import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

MOVE = "move"
ROTATE = "rotate"
LOCK = "lock"
HARD_DROP = "hardDrop"
LINE_CLEAR = "lineClear"
TETRIS_CLEAR = "tetrisClear"
LEVEL_UP = "levelUp"
GAME_OVER = "gameOver"

ALL_EVENTS = (MOVE, ROTATE, LOCK, HARD_DROP, LINE_CLEAR, TETRIS_CLEAR, LEVEL_UP, GAME_OVER)

Listener = Callable[[str, Dict], None]

class EventBus:
    """Listeners are called in subscription order as listener(name, payload)."""
    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Listener:
        if listener not in self._listeners:
            self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, name: str, **payload):
        logger.debug("event %s %s", name, payload)
        for fn in list(self._listeners):
            fn(name, payload)
