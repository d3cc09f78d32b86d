"""Serving lifecycle.

``TodoServer`` owns one uvicorn server. Callers either ``run()`` it in the
foreground, where SIGINT/SIGTERM make uvicorn exit, or ``start()`` it inside a
running event loop and later ``stop()`` it.
"""
import asyncio
import logging
from typing import Optional
import uvicorn
from fastapi import FastAPI
from todo_api.config import Settings, get_settings

logger = logging.getLogger(__name__)


class TodoServer:
    """Handle for a running (or runnable) API server."""

    def __init__(self, app: FastAPI = None, settings: Settings = None, port: int = None):
        if app is None:
            from todo_api.main import app
        self.settings = settings or get_settings()
        self.config = uvicorn.Config(
            app,
            host=self.settings.host,
            port=self.settings.port if port is None else port,
            limit_concurrency=self.settings.limit_concurrency,
            timeout_keep_alive=self.settings.timeout_keep_alive,
            log_config=None,
            log_level=self.settings.log_level.lower(),
        )
        self._server = uvicorn.Server(self.config)
        self._task: Optional[asyncio.Task] = None

    @property
    def started(self) -> bool:
        return self._server.started

    @property
    def port(self) -> int:
        """The bound port; differs from the configured one when that was 0."""
        if self._server.servers:
            sockets = self._server.servers[0].sockets
            if sockets:
                return sockets[0].getsockname()[1]
        return self.config.port

    def run(self) -> None:
        """Serve in the foreground until interrupted."""
        logger.info("Server listening on %s:%s", self.config.host, self.config.port)
        self._server.run()

    async def _serve(self) -> None:
        try:
            await self._server.serve()
        except SystemExit as exc:
            # uvicorn exits the process when it cannot bind; keep that inside the task
            raise RuntimeError(
                f"Server failed to start on {self.config.host}:{self.config.port}"
            ) from exc

    async def start(self) -> None:
        """Start serving in the background; returns once the socket is bound."""
        if self._task is not None:
            raise RuntimeError("Server already started")
        self._task = asyncio.create_task(self._serve())
        while not self._server.started:
            if self._task.done():
                # startup failed, e.g. the port is taken; surface the error
                task, self._task = self._task, None
                await task
                raise RuntimeError("Server exited during startup")
            await asyncio.sleep(0.05)
        logger.info("Server listening on %s:%s", self.config.host, self.port)

    async def stop(self) -> None:
        """Stop accepting connections and wait for the server to exit."""
        if self._task is None:
            return
        self._server.should_exit = True
        await self._task
        self._task = None
        logger.info("Server stopped")
