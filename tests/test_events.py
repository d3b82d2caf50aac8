import tetris_events as ev


def test_event_names():
    assert ev.ALL_EVENTS == ("move", "rotate", "lock", "hardDrop", "lineClear",
                             "tetrisClear", "levelUp", "gameOver")


def test_listeners_in_order():
    bus = ev.EventBus()
    seen = []
    bus.subscribe(lambda n, p: seen.append(("a", n, p)))
    bus.subscribe(lambda n, p: seen.append(("b", n, p)))
    bus.emit(ev.LOCK, color="#fff")
    assert seen == [("a", "lock", {"color": "#fff"}), ("b", "lock", {"color": "#fff"})]


def test_subscribe_once_and_unsubscribe():
    bus = ev.EventBus()
    seen = []
    fn = lambda n, p: seen.append(n)
    bus.subscribe(fn)
    bus.subscribe(fn)
    bus.emit(ev.MOVE)
    bus.unsubscribe(fn)
    bus.unsubscribe(fn)
    bus.emit(ev.MOVE)
    assert seen == ["move"]
