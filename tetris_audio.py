
"""Synthesised sound effects driven by game events"""
import logging
from typing import Dict, Sequence

import numpy as np
import pygame

import tetris_events as ev
from tetris_config import CONFIG

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

def _envelope(n: int, start: float, end: float=0.01) -> np.ndarray:
    return np.geomspace(start, end, n) if n else np.zeros(0)

def tone(freq: float, duration: float, volume: float=0.1, wave: str="sine",
         freq_end: float=None, end: float=0.01) -> np.ndarray:
    """Mono float samples with an exponential fade-out."""
    n = int(SAMPLE_RATE * duration)
    f = np.geomspace(freq, freq_end, n) if freq_end else np.full(n, float(freq))
    phase = 2 * np.pi * np.cumsum(f) / SAMPLE_RATE
    if wave == "square":
        s = np.sign(np.sin(phase))
    elif wave == "saw":
        s = 2 * ((phase / (2 * np.pi)) % 1.0) - 1
    elif wave == "triangle":
        s = 2 * np.abs(2 * ((phase / (2 * np.pi)) % 1.0) - 1) - 1
    else:
        s = np.sin(phase)
    return s * _envelope(n, volume, end)

def arpeggio(freqs: Sequence[float], step: float, volume: float=0.15, wave: str="square") -> np.ndarray:
    return np.concatenate([tone(f, step, volume, wave) for f in freqs])

EFFECTS = {
    ev.MOVE: lambda: tone(200, 0.05),
    ev.ROTATE: lambda: tone(400, 0.08),
    ev.LOCK: lambda: tone(150, 0.1, 0.15, "square"),
    ev.HARD_DROP: lambda: tone(100, 0.15, 0.2, "saw"),
    ev.LINE_CLEAR: lambda: tone(523, 0.2, 0.2, freq_end=1047),
    ev.TETRIS_CLEAR: lambda: arpeggio([523, 659, 784, 1047], 0.08),
    ev.LEVEL_UP: lambda: arpeggio([262, 330, 392, 523], 0.1),
    ev.GAME_OVER: lambda: arpeggio([392, 370, 349, 330, 311, 294, 277, 262], 0.1, wave="triangle"),
}

NOTE_FREQUENCIES = {
    "A3": 220.00, "B3": 246.94,
    "C4": 261.63, "D4": 293.66, "E4": 329.63, "F4": 349.23, "G4": 392.00,
    "A4": 440.00, "B4": 493.88,
    "C5": 523.25, "D5": 587.33, "E5": 659.26, "F5": 698.46, "G5": 783.99, "A5": 880.00,
    "REST": 0,
}

# Korobeiniki, one chorus: (note, seconds)
MELODY = [
    ("E5", .4), ("B4", .2), ("C5", .2), ("D5", .4), ("C5", .2), ("B4", .2),
    ("A4", .4), ("A4", .2), ("C5", .2), ("E5", .4), ("D5", .2), ("C5", .2),
    ("B4", .4), ("B4", .2), ("C5", .2), ("D5", .4), ("E5", .4),
    ("C5", .4), ("A4", .4), ("A4", .4), ("REST", .4),
    ("REST", .2), ("D5", .4), ("F5", .2), ("A5", .4), ("G5", .2), ("F5", .2),
    ("E5", .4), ("REST", .2), ("C5", .2), ("E5", .4), ("D5", .2), ("C5", .2),
    ("B4", .4), ("B4", .2), ("C5", .2), ("D5", .4), ("E5", .4),
    ("C5", .4), ("A4", .4), ("A4", .8),
]

BASS = [
    ("E4", .8), ("E4", .8), ("A3", .8), ("A3", .8),
    ("B3", .8), ("B3", .8), ("A3", .8), ("A3", .8),
    ("D4", .8), ("D4", .8), ("E4", .8), ("E4", .8),
    ("B3", .8), ("B3", .8), ("A3", 1.6),
]

def sequence(notes, volume: float, wave: str) -> np.ndarray:
    parts = []
    for note, seconds in notes:
        f = NOTE_FREQUENCIES[note]
        parts.append(tone(f, seconds, volume, wave, end=0.001) if f else np.zeros(int(SAMPLE_RATE * seconds)))
    return np.concatenate(parts)

def render_track() -> np.ndarray:
    """Melody (square) over bass (triangle), mixed into one loopable buffer."""
    melody = sequence(MELODY, 0.08, "square")
    bass = sequence(BASS, 0.06, "triangle")
    n = max(len(melody), len(bass))
    mix = np.zeros(n)
    mix[:len(melody)] += melody
    mix[:len(bass)] += bass
    return mix

def make_sound(samples: np.ndarray) -> pygame.mixer.Sound:
    """Float samples in [-1, 1] -> Sound; starts the mixer if needed (raises pygame.error)."""
    if not pygame.mixer.get_init():
        pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
    channels = pygame.mixer.get_init()[2]
    mono = (samples * 32767).astype(np.int16)
    data = mono if channels == 1 else np.ascontiguousarray(np.column_stack([mono] * channels))
    return pygame.sndarray.make_sound(data)

class SoundBoard:
    """Plays one effect per game event; silent if the mixer can't start."""
    def __init__(self, events: ev.EventBus, enabled: bool=None):
        self.enabled = CONFIG["SOUND_ENABLED"] if enabled is None else enabled
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        if self.enabled:
            self._load()
        events.subscribe(self.on_event)

    def _load(self):
        try:
            for name, make in EFFECTS.items():
                self.sounds[name] = make_sound(make())
        except pygame.error as e:
            logger.warning("audio disabled: %s", e)
            self.sounds.clear()
            self.enabled = False

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        if self.enabled and not self.sounds:
            self._load()
        logger.info("sound %s", "on" if self.enabled else "off")
        return self.enabled

    def on_event(self, name: str, payload: dict):
        if not self.enabled: return
        s = self.sounds.get(name)
        if s is not None: s.play()

class Music:
    """Looping background track that follows the session.

    Plays while a game is running and unpaused; stops on pause, reset and game
    over. Each start or resume plays from the top. Switched independently of
    the sound effects.
    """
    def __init__(self, enabled: bool=None, sound=None):
        self.enabled = CONFIG["MUSIC_ENABLED"] if enabled is None else enabled
        self.sound = sound
        self.playing = False
        self._wanted = False

    def _load(self) -> bool:
        if self.sound is not None: return True
        try:
            self.sound = make_sound(render_track())
        except pygame.error as e:
            logger.warning("music disabled: %s", e)
            self.enabled = False
            return False
        return True

    def sync(self, snap):
        """Start or stop to match the snapshot's running/paused/over flags."""
        self._wanted = snap.running and not snap.paused and not snap.over
        self._apply()

    def _apply(self):
        want = self.enabled and self._wanted
        if want and not self.playing:
            if not self._load(): return
            self.sound.play(loops=-1)
            self.playing = True
            logger.info("music started")
        elif not want and self.playing:
            self.sound.stop()
            self.playing = False
            logger.info("music stopped")

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        self._apply()
        logger.info("music %s", "on" if self.enabled else "off")
        return self.enabled
