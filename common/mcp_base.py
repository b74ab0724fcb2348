"""ABOUTME: FastMCP wrapper owning the server instance, its logger and result helpers.

Uses the official MCP SDK (modelcontextprotocol/python-sdk).
"""

import logging
import os
from typing import Any, Dict, Optional
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(logger_name: str, level: Optional[int] = None) -> logging.Logger:
    """Configure root logging once and return a named logger.

    Args:
        logger_name: Logger name, usually the module's __name__
        level: Explicit level; otherwise LOG_LEVEL from the environment, else INFO
    """
    if level is None:
        level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger(logger_name)


def _join_fields(fields: Dict[str, Any]) -> str:
    return ", ".join(f"{key}={value}" for key, value in fields.items())


class MCPServerBase:
    """One FastMCP server plus the logging and result conventions its tools share.

    Tools are registered on ``self.mcp``; every tool logs a start line, then
    either a completion line with metrics or an error line with its code.
    """

    def __init__(self, server_name: str, instructions: Optional[str] = None):
        self.server_name = server_name
        self.logger = setup_logging(server_name)
        self.mcp = FastMCP(server_name, instructions=instructions)

    def run(self, transport: str = "stdio") -> None:
        """Serve over "stdio", "streamable-http" or "sse"."""
        self.logger.info(f"Starting {self.server_name} MCP server (transport: {transport})")
        self.mcp.run(transport=transport)

    def create_success_result(self, text: str, metadata: Optional[Dict[str, Any]] = None) -> CallToolResult:
        """Wrap display text in a CallToolResult.

        Examples:
            >>> result = server.create_success_result("Sunny, 21°C")
            >>> result = server.create_success_result("Forecast ready", {"days": 5})
        """
        extra = {"metadata": metadata} if metadata else {}
        return CallToolResult(content=[TextContent(type="text", text=text)], **extra)

    def log_tool_start(self, tool_name: str, **params) -> None:
        suffix = f": {_join_fields(params)}" if params else ""
        self.logger.info(f"{tool_name} started{suffix}")

    def log_tool_complete(self, tool_name: str, **metrics) -> None:
        """Log a successful tool call, e.g. ``days=5, duration_ms=150``."""
        suffix = f": {_join_fields(metrics)}" if metrics else ""
        self.logger.info(f"{tool_name} completed{suffix}")

    def log_tool_error(self, tool_name: str, error_code: str, error_message: str, **context) -> None:
        suffix = f" ({_join_fields(context)})" if context else ""
        self.logger.error(f"{tool_name} error [{error_code}]: {error_message}{suffix}")
