from ttydsp.afsk import AfskGenerator


def _make():
    calls = []
    gen = AfskGenerator(calls.append, mark_freq=1400.0, space_freq=1800.0)
    return gen, calls


def test_starts_on_mark():
    _, calls = _make()
    assert calls == [1400.0]


def test_open_loop_sends_space():
    gen, calls = _make()
    assert gen.update(True) == 1800.0
    assert calls[-1] == 1800.0


def test_closed_loop_sends_mark():
    gen, calls = _make()
    gen.update(True)
    assert gen.update(False) == 1400.0
    assert calls == [1400.0, 1800.0, 1400.0]


def test_every_update_sets_frequency():
    gen, calls = _make()
    for state in [False, False, True, True, False]:
        gen.update(state)
    assert len(calls) == 6