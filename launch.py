"""Launch script for the MCP IDNA Server.

This can be used as:
- Direct execution: python launch.py
- Docker entrypoint: ENTRYPOINT ["python", "launch.py"]
- Package CLI: mcp-idna-server (after installation)
"""

import os
import sys

# Add src directory to path for development
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from idna_mcp_server.server import run_server

if __name__ == "__main__":
    run_server()
