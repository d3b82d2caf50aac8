import numpy as np

import tetris_events as ev
from tetris_audio import BASS, EFFECTS, MELODY, SAMPLE_RATE, Music, SoundBoard, render_track, tone
from tetris_game import Game

from conftest import ScriptedRandom


def test_every_event_has_an_effect():
    assert set(EFFECTS) == set(ev.ALL_EVENTS)
    for make in EFFECTS.values():
        samples = make()
        assert samples.ndim == 1 and len(samples) > 0
        assert np.abs(samples).max() <= 1.0


def test_tone_length_and_fade():
    s = tone(440, 0.1, volume=0.5)
    assert len(s) == int(SAMPLE_RATE * 0.1)
    assert np.abs(s[:200]).max() > np.abs(s[-200:]).max()


def test_muted_board_subscribes_without_mixer():
    bus = ev.EventBus()
    board = SoundBoard(bus, enabled=False)
    assert board.sounds == {}
    bus.emit(ev.LOCK, color="#fff")


class FakeSound:
    def __init__(self):
        self.calls = []

    def play(self, loops=0):
        self.calls.append(("play", loops))

    def stop(self):
        self.calls.append(("stop",))


def test_track_covers_one_chorus():
    seconds = sum(s for _, s in MELODY)
    assert abs(seconds - sum(s for _, s in BASS)) < 1e-9
    track = render_track()
    assert track.ndim == 1
    assert abs(len(track) - SAMPLE_RATE * seconds) <= len(MELODY)
    assert 0 < np.abs(track).max() <= 1.0


def test_music_follows_session():
    game = Game(rng=ScriptedRandom("O"), difficulty="normal")
    sound = FakeSound()
    music = Music(enabled=True, sound=sound)

    music.sync(game.snapshot())
    assert sound.calls == [] and not music.playing

    game.start()
    music.sync(game.snapshot())
    music.sync(game.snapshot())
    assert sound.calls == [("play", -1)] and music.playing

    game.pause()
    music.sync(game.snapshot())
    assert sound.calls[-1] == ("stop",) and not music.playing

    game.resume()
    music.sync(game.snapshot())
    assert sound.calls[-1] == ("play", -1)

    game.reset()
    music.sync(game.snapshot())
    assert sound.calls[-1] == ("stop",)

    game.start()
    for y in range(2, 20):
        game.board.grid[y][4] = game.board.grid[y][5] = "#444"
    music.sync(game.snapshot())
    game.hard_drop()
    assert game.over
    music.sync(game.snapshot())
    assert sound.calls[-1] == ("stop",) and not music.playing


def test_music_toggle_is_separate():
    game = Game(rng=ScriptedRandom("T"), difficulty="normal")
    sound = FakeSound()
    music = Music(enabled=False, sound=sound)
    game.start()
    music.sync(game.snapshot())
    assert sound.calls == []
    assert music.toggle()
    assert sound.calls == [("play", -1)]
    assert not music.toggle()
    assert sound.calls[-1] == ("stop",)
