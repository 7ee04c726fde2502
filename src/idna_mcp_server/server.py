"""
MCP IDNA Server - An MCP server for IDN to ACE conversion and IDN lookups.
"""

import asyncio
import sys

import yaml
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger

from idna_mcp_server.server_mixins import ServerLifecycleMixin
from idna_mcp_server.tool_mixins import ToolRegistrationMixin

logger = get_logger(__name__)


class IDNAMCPServer(
    ToolRegistrationMixin,
    ServerLifecycleMixin,
):
    """MCP Server implementation for IDNA operations.

    Uses mixin classes to separate concerns:
    - ToolRegistrationMixin: Registers conversion, inspection and lookup tools
    - ServerLifecycleMixin: Manages server startup/shutdown and signals
    """

    def __init__(self, config_path: str = "config/config.yaml") -> None:
        """Initialize the IDNA MCP server.

        Args:
            config_path: Path to the configuration file.
                Defaults to "config/config.yaml"
        """
        self.config_path = config_path
        self.server = FastMCP(
            name="IDNA MCP Server",
            instructions=(
                "An MCP server that converts internationalized domain names to their "
                "ASCII-compatible (punycode) form and resolves them."
            ),
        )
        self.logger = get_logger(__name__)
        try:
            with open(self.config_path, encoding="utf-8") as f:
                self.config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            self.logger.info("Config file %s not found, using default settings", self.config_path)
            self.config = {}
        except (yaml.YAMLError, OSError) as e:
            self.logger.error("Error loading config: %s", e)
            self.config = {}

        self.register_tools()


async def main() -> None:
    """Main entry point for the IDNA MCP server."""
    server = IDNAMCPServer()
    server_config = server.config.get("server", {})
    try:
        await server.start(
            host=server_config.get("host", "0.0.0.0"),
            port=int(server_config.get("port", 3000)),
        )
    except KeyboardInterrupt:
        await server.stop()
    except (OSError, RuntimeError) as e:
        logger.error("Unexpected error: %s", e)
        await server.stop()
        sys.exit(1)


def run_server() -> None:
    """Run the server with proper asyncio event loop handling."""
    loop = None
    try:
        if sys.platform == "win32":
            loop = asyncio.ProactorEventLoop()
            asyncio.set_event_loop(loop)
        else:
            loop = asyncio.new_event_loop()
            asyncio.set_event_loop(loop)

        loop.run_until_complete(main())
    except KeyboardInterrupt:
        if loop is not None:
            loop.run_until_complete(asyncio.sleep(0))
    finally:
        if loop is not None:
            loop.close()


if __name__ == "__main__":
    run_server()
