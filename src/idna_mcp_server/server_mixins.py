"""
Server lifecycle mixin for IDNAMCPServer.
"""

import asyncio
import signal
import sys
from typing import Any

STOP_TIMEOUT = 5.0


def shutdown_signals() -> tuple[int, ...]:
    """Return the signals that should stop the server on this platform."""
    if sys.platform == "win32":
        return (signal.SIGINT, signal.SIGBREAK)
    return (signal.SIGINT, signal.SIGTERM)


class ServerLifecycleMixin:
    """Mixin for server lifecycle management (signals, startup, shutdown).

    Note: This mixin assumes the class has 'server' (FastMCP) and 'logger' attributes
    available when lifecycle methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    logger: Any  # Logger instance

    def setup_signal_handlers(self) -> None:
        """Route shutdown signals to stop()."""
        loop = asyncio.get_running_loop()
        for sig in shutdown_signals():
            try:
                loop.add_signal_handler(sig, lambda s=sig: asyncio.create_task(self._on_signal(s)))
            except NotImplementedError:
                signal.signal(sig, lambda s, _frame: asyncio.create_task(self._on_signal(s)))

    def remove_signal_handlers(self) -> None:
        """Undo setup_signal_handlers() where the loop supports it."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        for sig in shutdown_signals():
            try:
                loop.remove_signal_handler(sig)
            except (NotImplementedError, ValueError):
                pass

    async def _on_signal(self, sig: int) -> None:
        self.logger.info("Received shutdown signal %s", signal.Signals(sig).name)
        await self.stop()

    async def start(self, host: str = "0.0.0.0", port: int = 3000) -> None:
        """Serve the MCP tools over HTTP.

        Args:
            host: The host to bind to. Defaults to "0.0.0.0" (all interfaces)
            port: The port to listen on. Defaults to 3000
        """
        self.setup_signal_handlers()
        self.logger.info("Starting MCP IDNA Server on %s:%d", host, port)
        try:
            await self.server.run_async(transport="http", host=host, port=port)
        except (OSError, RuntimeError) as e:
            self.logger.error("Error starting server: %s", e)
            await self.stop()
            raise

    async def stop(self) -> None:
        """Cancel outstanding tasks and release the signal handlers."""
        self.logger.info("Shutting down MCP IDNA Server...")
        current = asyncio.current_task()
        pending = [task for task in asyncio.all_tasks() if task is not current]
        if pending:
            self.logger.debug("Cancelling %d pending tasks", len(pending))
            for task in pending:
                task.cancel()
            try:
                await asyncio.wait_for(
                    asyncio.gather(*pending, return_exceptions=True), timeout=STOP_TIMEOUT
                )
            except asyncio.TimeoutError:
                self.logger.warning("Timeout waiting for tasks to stop")
        self.remove_signal_handlers()
        self.logger.info("MCP IDNA Server stopped")
