import pytest

try:
    from bubble_shooter import render
except Exception as exc:  # arcade needs GL/display libraries at import
    pytest.skip(f"arcade unavailable: {exc}", allow_module_level=True)


@pytest.fixture
def window(monkeypatch):
    drawn = []
    monkeypatch.setattr(render, "draw_snapshot", lambda snap: drawn.append(("arena", snap)))
    monkeypatch.setattr(render, "draw_hud", lambda snap: drawn.append(("hud", snap)))
    # skip arcade.Window.__init__ so no GL context is opened
    win = render.ArenaWindow.__new__(render.ArenaWindow)
    win.clear = lambda *args, **kwargs: None
    win.snapshot = None
    win.drawn = drawn
    return win


def test_hud_is_drawn_with_every_snapshot(window, quiet_sim):
    snap = quiet_sim.snapshot()
    window.show(snap)

    window.on_draw()

    assert window.drawn == [("arena", snap), ("hud", snap)]


def test_nothing_is_drawn_before_the_first_snapshot(window):
    window.on_draw()
    assert window.drawn == []
