"""Shared test fixtures for the clockstream test suite."""

import threading
import time

import pytest
import uvicorn

from clockstream.config.settings import Settings
from clockstream.main import bind_socket, create_app

# Short tick so live tests finish quickly
TEST_INTERVAL = 0.2


def wait_until(predicate, timeout: float = 2.0) -> bool:
    """Poll ``predicate`` until it is true or ``timeout`` seconds pass."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return predicate()


class _TestServer:
    """Runs the app on a real uvicorn server in a background thread."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.app = create_app(settings)
        self.base_url = ""
        self._server = None
        self._thread = None
        self._sock = None

    @property
    def ticker(self):
        return self.app.state.ticker

    def start(self):
        self._sock = bind_socket(self.settings)
        host, port = self._sock.getsockname()[:2]
        self.base_url = f"http://{host}:{port}"
        config = uvicorn.Config(self.app, log_level="error", timeout_graceful_shutdown=1)
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run, kwargs={"sockets": [self._sock]}, daemon=True
        )
        self._thread.start()
        # Wait for server to be ready
        for _ in range(50):
            if self._server.started:
                return
            time.sleep(0.1)
        raise RuntimeError("test server did not start")

    def stop(self):
        if self._server:
            self._server.should_exit = True
        if self._thread:
            self._thread.join(timeout=5)
        if self._sock:
            self._sock.close()


@pytest.fixture
def settings() -> Settings:
    return Settings(host="127.0.0.1", port=0, interval=TEST_INTERVAL)


@pytest.fixture(scope="module")
def server():
    srv = _TestServer(Settings(host="127.0.0.1", port=0, interval=TEST_INTERVAL))
    srv.start()
    yield srv
    srv.stop()
