"""Tests for junction.server.dev and App.run — pounce wiring."""

import sys
import types
from typing import Any

import pytest

from junction.app import App
from junction.config import AppConfig
from junction.server import dev


@pytest.fixture
def fake_pounce(monkeypatch: pytest.MonkeyPatch) -> list[tuple[Any, Any]]:
    """Install stand-in pounce modules that record what the server was given."""
    started: list[tuple[Any, Any]] = []

    class ServerConfig:
        def __init__(self, **kwargs: Any) -> None:
            self.kwargs = kwargs

    class Server:
        def __init__(self, config: ServerConfig, app: Any) -> None:
            self.config = config
            self.app = app

        def run(self) -> None:
            started.append((self.config, self.app))

    config_mod = types.ModuleType("pounce.config")
    config_mod.ServerConfig = ServerConfig  # type: ignore[attr-defined]
    server_mod = types.ModuleType("pounce.server")
    server_mod.Server = Server  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "pounce", types.ModuleType("pounce"))
    monkeypatch.setitem(sys.modules, "pounce.config", config_mod)
    monkeypatch.setitem(sys.modules, "pounce.server", server_mod)
    return started


class TestRunDevServer:
    def test_builds_single_worker_config(self, fake_pounce: list[tuple[Any, Any]]) -> None:
        app = App()
        dev.run_dev_server(app, "0.0.0.0", 9000, log_level="debug")

        [(config, served)] = fake_pounce
        assert served is app
        assert config.kwargs == {
            "host": "0.0.0.0",
            "port": 9000,
            "workers": 1,
            "reload": False,
            "log_level": "debug",
        }


class TestAppRun:
    def test_forwards_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[Any, ...]] = []

        def fake_run(app: App, host: str, port: int, **kwargs: Any) -> None:
            calls.append((app, host, port, kwargs))

        monkeypatch.setattr(dev, "run_dev_server", fake_run)
        app = App(AppConfig(port=3000, debug=True, log_level="warning"))
        app.run()

        assert calls == [(app, "127.0.0.1", 3000, {"reload": True, "log_level": "warning"})]

    def test_arguments_override_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[str, int]] = []
        monkeypatch.setattr(
            dev, "run_dev_server", lambda app, host, port, **kwargs: calls.append((host, port))
        )
        App().run(host="0.0.0.0", port=9999)
        assert calls == [("0.0.0.0", 9999)]
