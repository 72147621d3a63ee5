"""Tests for the screensaver loop, terminal lifecycle and command line."""
from __future__ import annotations

import curses
import logging
import signal

import pytest

from conftest import FakeWindow, RecordingSurface, make_world
from fishtank import app
from fishtank.config import VARIANTS


def make_tank(keys, width: int = 80, height: int = 24) -> app.Tank:
    surface = RecordingSurface(width, height, keys=keys)
    world = make_world(width, height).populate()
    return app.Tank(surface, world)


@pytest.fixture
def cursor(monkeypatch):
    calls = []
    monkeypatch.setattr(curses, "curs_set", calls.append)
    return calls


class TestTank:
    def test_runs_until_q(self) -> None:
        tank = make_tank([-1, -1, ord('q')])
        tank.run()
        assert not tank.running
        assert tank.surface.frames() == 2
        assert tank.world.ticks == 2

    @pytest.mark.parametrize("key", [ord('q'), ord('Q'), 27])
    def test_quit_keys(self, key: int) -> None:
        tank = make_tank([key])
        tank.run()
        assert tank.surface.frames() == 0
        assert tank.world.ticks == 0

    def test_other_keys_are_ignored(self) -> None:
        tank = make_tank([ord('x'), ord(' '), ord('q')])
        tank.run()
        assert tank.surface.frames() == 2

    def test_resize(self) -> None:
        tank = make_tank([curses.KEY_RESIZE, ord('q')])
        tank.surface.width, tank.surface.height = 30, 10
        tank.run()
        assert (tank.world.width, tank.world.height) == (30, 10)
        assert ('clear', True) in tank.surface.calls
        assert ('draw', 0, 9, '~' * 30, 'blue') in tank.surface.calls
        assert tank.surface.frames() == 1

    def test_tick_reports_state(self) -> None:
        tank = make_tank([-1, ord('q')])
        tank.running = True
        assert tank.tick() is True
        assert tank.tick() is False

    def test_stop(self) -> None:
        tank = make_tank([])
        tank.running = True
        tank.stop()
        assert not tank.running


class TestRunTank:
    def test_cursor_and_screen_restored(self, no_colors, cursor) -> None:
        window = FakeWindow(keys=[-1, -1, ord('q')])
        app.run_tank(window, VARIANTS['predator'], seed=4)
        assert cursor == [0, 1]
        assert window.erased >= 1
        assert window.refreshed == 3
        assert app.tank_instance is None

    def test_cursor_restored_on_terminal_error(self, no_colors, cursor) -> None:
        window = FakeWindow(keys=[-1, curses.error("gone")])
        with pytest.raises(curses.error):
            app.run_tank(window, VARIANTS['basic'])
        assert cursor == [0, 1]
        assert app.tank_instance is None

    def test_cursor_visibility_unsupported(self, no_colors, monkeypatch) -> None:
        def curs_set(visibility):
            raise curses.error("curs_set() returned ERR")

        monkeypatch.setattr(curses, "curs_set", curs_set)
        app.run_tank(FakeWindow(keys=[ord('q')]), VARIANTS['basic'])


class TestSignals:
    def test_signal_stops_running_tank(self, monkeypatch) -> None:
        tank = make_tank([])
        tank.running = True
        monkeypatch.setattr(app, "tank_instance", tank)
        app.signal_handler(signal.SIGINT, None)
        assert not tank.running

    def test_signal_without_tank_exits(self, monkeypatch) -> None:
        monkeypatch.setattr(app, "tank_instance", None)
        with pytest.raises(SystemExit) as exc:
            app.signal_handler(signal.SIGTERM, None)
        assert exc.value.code == 0


class TestMain:
    def test_clean_quit(self, monkeypatch, capsys) -> None:
        seen = []
        monkeypatch.setattr(curses, "wrapper", lambda *args: seen.append(args))
        before = signal.getsignal(signal.SIGINT)

        assert app.main(['--variant', 'predator', '--seed', '5']) == 0

        assert seen == [(app.run_tank, VARIANTS['predator'], 5)]
        assert capsys.readouterr().out.strip() == app.FAREWELL
        assert signal.getsignal(signal.SIGINT) is before

    def test_defaults_to_basic(self, monkeypatch) -> None:
        seen = []
        monkeypatch.setattr(curses, "wrapper", lambda *args: seen.append(args))
        app.main([])
        assert seen == [(app.run_tank, VARIANTS['basic'], None)]

    def test_terminal_error(self, monkeypatch, capsys) -> None:
        def wrapper(*args):
            raise curses.error("setupterm: could not find terminal")

        monkeypatch.setattr(curses, "wrapper", wrapper)
        assert app.main([]) == 1
        out, err = capsys.readouterr()
        assert "Curses Error: setupterm: could not find terminal" in err
        assert app.FAREWELL not in out

    def test_unknown_variant(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            app.parse_args(['--variant', 'whale'])
        assert exc.value.code == 2

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            app.parse_args(['--version'])
        assert exc.value.code == 0
        assert "fishtank" in capsys.readouterr().out


class TestLogging:
    def test_log_file(self, tmp_path) -> None:
        path = tmp_path / "tank.log"
        logger = app.configure_logging("debug", str(path))
        try:
            world = make_world(variant='predator')
            world.restock()
            text = path.read_text()
            assert "restocked 5 fish" in text
            assert "DEBUG [fishtank.world]" in text
        finally:
            for handler in logger.handlers:
                handler.close()
            app.configure_logging()

    def test_level_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("FISHTANK_LOG_LEVEL", "info")
        logger = app.configure_logging()
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0], logging.NullHandler)

    def test_default_level(self, monkeypatch) -> None:
        monkeypatch.delenv("FISHTANK_LOG_LEVEL", raising=False)
        assert app.configure_logging().level == logging.WARNING
