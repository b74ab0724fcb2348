"""ABOUTME: Shared MCP plumbing - server base, logging, error results, HTTP and validation helpers."""

from .mcp_base import MCPServerBase, setup_logging
from .error_handling import (
    ERROR_VALIDATION_FAILED,
    ERROR_UNEXPECTED,
    create_error_result,
    create_validation_error,
    create_unexpected_error,
)
from .http_utils import safe_http_get, extract_error_reason
from .validation import validate_text

__all__ = [
    "MCPServerBase",
    "setup_logging",
    "ERROR_VALIDATION_FAILED",
    "ERROR_UNEXPECTED",
    "create_error_result",
    "create_validation_error",
    "create_unexpected_error",
    "safe_http_get",
    "extract_error_reason",
    "validate_text",
]
