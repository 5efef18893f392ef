"""Test configuration and fixtures."""

import logging
import threading
import time

import pytest
import uvicorn
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.main import create_app


class LiveServer:
    """Runs an app under uvicorn on an ephemeral port in a background thread."""

    def __init__(self, app: FastAPI, host: str = "127.0.0.1"):
        self.host = host
        config = uvicorn.Config(
            app, host=host, port=0, log_config=None, access_log=False, lifespan="on"
        )
        self.server = uvicorn.Server(config)
        self.thread = threading.Thread(target=self.server.run, daemon=True)
        self.port = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def start(self, timeout: float = 10.0) -> None:
        self.thread.start()
        deadline = time.monotonic() + timeout
        while not self.server.started:
            if not self.thread.is_alive() or time.monotonic() > deadline:
                raise RuntimeError("uvicorn did not start")
            time.sleep(0.01)
        self.port = self.server.servers[0].sockets[0].getsockname()[1]

    def stop(self, timeout: float = 10.0) -> None:
        self.server.should_exit = True
        self.thread.join(timeout)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so env changes made by a test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Undo handler/level changes made by setup_logging."""
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    yield root
    for h in root.handlers[:]:
        if h not in handlers_before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level_before)


@pytest.fixture
def client():
    """Create test client for an app mounted at the root."""
    return TestClient(create_app(Settings(CONTEXT_PATH="")))


@pytest.fixture
def api_client():
    """Create test client for an app mounted under /api."""
    return TestClient(create_app(Settings(CONTEXT_PATH="/api")))


@pytest.fixture
def live_server_factory(restore_root_logger):
    """Return a callable that starts a LiveServer for given settings; all are stopped after the test."""
    started = []

    def factory(settings: Settings) -> LiveServer:
        server = LiveServer(create_app(settings))
        server.start()
        started.append(server)
        return server

    yield factory
    for server in started:
        server.stop()


@pytest.fixture
def live_server(live_server_factory):
    """Start a real server (root context path)."""
    return live_server_factory(Settings(CONTEXT_PATH=""))
