from tetris_config import DIFFICULTY_SETTINGS, fall_interval_ms, line_clear_score


def test_presets():
    assert {k: (d.base_speed, d.speed_decrement, d.min_speed) for k, d in DIFFICULTY_SETTINGS.items()} == {
        "easy": (1000, 50, 200),
        "normal": (800, 40, 100),
        "hard": (500, 30, 50),
    }


def test_line_clear_score():
    assert [line_clear_score(n, 1) for n in range(5)] == [0, 100, 300, 500, 800]
    assert line_clear_score(4, 3) == 2400
    assert line_clear_score(5, 1) == 500


def test_fall_interval():
    normal = DIFFICULTY_SETTINGS["normal"]
    assert fall_interval_ms(normal, 1) == 800
    assert fall_interval_ms(normal, 5) == 640
    assert fall_interval_ms(normal, 30) == 100
    assert fall_interval_ms(DIFFICULTY_SETTINGS["easy"], 17) == 200
