from timber.flight import FpsCounter, Log


def test_log_starts_parked_at_tree():
    log = Log()
    assert log.position == (810, 720)
    assert log.active is False
    assert log.speed_y == -1500


def test_inactive_log_does_not_move():
    log = Log()
    log.update(0.5)
    assert log.position == (810, 720)


def test_launch_activates_and_sets_speed():
    log = Log(x=0.0, y=0.0)
    log.launch(-5000)
    assert log.active is True
    assert log.speed_x == -5000
    assert log.position == (810, 720)


def test_log_flies_up_and_sideways():
    log = Log()
    log.launch(5000)
    log.update(0.01)
    assert log.x > 810
    assert log.y < 720
    assert log.active is True


def test_log_flying_left_moves_left():
    log = Log()
    log.launch(-5000)
    log.update(0.01)
    assert log.x < 810
    assert log.active is True


def test_log_resets_after_leaving_screen():
    log = Log()
    log.launch(5000)
    log.update(1.0)
    assert log.active is False
    assert log.position == (810, 720)


def test_log_resets_after_leaving_left_edge():
    log = Log()
    log.launch(-5000)
    log.update(1.0)
    assert log.active is False
    assert log.position == (810, 720)


def test_fps_not_refreshed_before_a_second():
    counter = FpsCounter()
    assert counter.tick(0.25) is None
    assert counter.frame_count == 1
    assert counter.text == ""


def test_fps_refreshed_after_a_second():
    counter = FpsCounter()
    results = [counter.tick(0.25) for _ in range(4)]
    assert results[:3] == [None, None, None]
    assert results[3] == "FPS: 4.00"
    assert counter.fps == 4.0
    assert counter.frame_count == 0
    assert counter.elapsed == 0.0


def test_fps_text_persists_between_refreshes():
    counter = FpsCounter()
    refreshed = counter.tick(1.5)
    assert counter.tick(0.1) is None
    assert counter.text == refreshed
    assert counter.text.startswith("FPS: ")