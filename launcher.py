"""ABOUTME: Weather MCP server launcher.

Runs over stdio by default. For the HTTP transports, uvicorn.Config is
patched so the server binds to the requested host (0.0.0.0 in Docker) instead
of the default 127.0.0.1.
"""

import os
import sys

from common.mcp_base import setup_logging

# Setup logging early
logger = setup_logging(__name__)

HTTP_TRANSPORTS = ("streamable-http", "sse")
VALID_TRANSPORTS = ("stdio",) + HTTP_TRANSPORTS


def run_server(transport: str = "stdio", host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the weather MCP server.

    Args:
        transport: "stdio", "streamable-http" or "sse"
        host: Host to bind to for HTTP transports
        port: Port to bind to for HTTP transports
    """
    if transport not in VALID_TRANSPORTS:
        raise ValueError(f"Unknown transport: {transport}. Supported: {', '.join(VALID_TRANSPORTS)}")

    from weather_mcp.server import server as weather_server
    mcp_instance = weather_server.mcp
    logger.info("Loaded weather MCP server")

    if transport == "stdio":
        logger.info("Starting weather MCP server (transport: stdio)")
        mcp_instance.run(transport="stdio")
        return

    # Must be patched BEFORE any uvicorn instances are created
    import uvicorn
    original_init = uvicorn.Config.__init__

    def patched_init(self, *args, **kwargs):
        kwargs["host"] = host
        kwargs["port"] = port
        logger.info(f"Patched uvicorn.Config - binding to {host}:{port}")
        return original_init(self, *args, **kwargs)

    uvicorn.Config.__init__ = patched_init

    try:
        logger.info(f"Starting weather MCP server on {host}:{port} (transport: {transport})")
        mcp_instance.run(transport=transport)
    finally:
        uvicorn.Config.__init__ = original_init


def main() -> None:
    """Console entry point; configuration comes from the environment."""
    transport = os.getenv("MCP_TRANSPORT", "stdio")
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    try:
        run_server(transport, host, port)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(2)


if __name__ == "__main__":
    main()
