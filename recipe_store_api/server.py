"""
Start and stop the Recipe Store API as a unit.

``run_server`` launches uvicorn in a background thread and returns
once the server accepts connections; ``close_server`` asks it to shut
down and waits for the thread to finish.  Application startup and
shutdown (and with them the recipe store) run inside that window, so
a test suite can bracket its run with the two calls::

    server = run_server(port=0)
    try:
        ...  # talk to server.base_url
    finally:
        close_server(server)

``RecipeServer`` can also be used directly as a context manager.
"""

from __future__ import annotations

import logging
import socket
import threading
import time
from typing import Optional

from fastapi import FastAPI
from uvicorn import Config, Server

from recipe_store_api.app.core.config import settings


logger = logging.getLogger(__name__)


class RecipeServer:
    """A uvicorn server serving one application from a daemon thread."""

    def __init__(
        self,
        app: Optional[FastAPI] = None,
        *,
        host: Optional[str] = None,
        port: Optional[int] = None,
        startup_timeout: float = 10.0,
    ) -> None:
        if app is None:
            from recipe_store_api.app.main import create_app

            app = create_app()
        self.app = app
        self.host = host or settings.host
        self.port = settings.port if port is None else port
        self.startup_timeout = startup_timeout
        self._server: Optional[Server] = None
        self._thread: Optional[threading.Thread] = None
        self._socket: Optional[socket.socket] = None

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "RecipeServer":
        """Bind the socket, start serving and wait until startup completes."""
        if self.is_running:
            raise RuntimeError("Server is already running")

        # Bind ourselves so that port 0 resolves to a real port before
        # uvicorn starts.
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((self.host, self.port))
        self.port = sock.getsockname()[1]
        self._socket = sock

        config = Config(app=self.app, host=self.host, port=self.port, log_level="info", lifespan="on")
        self._server = Server(config)
        self._thread = threading.Thread(
            target=self._server.run,
            kwargs={"sockets": [sock]},
            name="recipe-store-server",
            daemon=True,
        )
        self._thread.start()

        deadline = time.monotonic() + self.startup_timeout
        while not self._server.started:
            if not self._thread.is_alive():
                self._release_socket()
                raise RuntimeError("Recipe Store API failed to start")
            if time.monotonic() > deadline:
                self.stop()
                raise TimeoutError(f"Recipe Store API did not start within {self.startup_timeout}s")
            time.sleep(0.01)
        logger.info("Recipe Store API listening on %s", self.base_url)
        return self

    def stop(self, timeout: float = 10.0) -> None:
        """Signal uvicorn to exit and join the serving thread."""
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning("Recipe Store API did not stop within %ss", timeout)
            else:
                logger.info("Recipe Store API on %s stopped", self.base_url)
        self._release_socket()
        self._server = None
        self._thread = None

    def _release_socket(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> "RecipeServer":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()


def run_server(
    app: Optional[FastAPI] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> RecipeServer:
    """Start serving ``app`` (a fresh default app if omitted) and return the server."""
    return RecipeServer(app, host=host, port=port).start()


def close_server(server: RecipeServer) -> None:
    """Stop a server returned by ``run_server``."""
    server.stop()
