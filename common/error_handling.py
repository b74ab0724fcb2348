"""ABOUTME: Error results for the weather MCP tools.

Tools never raise into the protocol layer. Every failure becomes an
error-flagged CallToolResult whose metadata names a machine-readable
``error_code`` and an ``error_type`` category, plus whatever request context
the tool attaches.
"""

from typing import Any, Optional
from mcp.types import TextContent, CallToolResult

# Codes owned by the tool layer; domain codes come from weather_mcp.errors
ERROR_VALIDATION_FAILED = "validation_failed"
ERROR_UNEXPECTED = "unexpected_error"


def create_error_result(
    error_message: str,
    error_code: str,
    error_type: str = "error",
    **metadata: Any
) -> CallToolResult:
    """Build the error CallToolResult every tool returns on failure.

    Args:
        error_message: Text shown to the caller, prefixed with "Error: "
        error_code: ERROR_* constant or a domain code such as "ADDRESS_NOT_FOUND"
        error_type: Category, e.g. "validation_error" or "location_error"
        **metadata: Request context merged into the result metadata

    Example:
        result = create_error_result(
            "Address not found: Atlantis",
            "ADDRESS_NOT_FOUND",
            "location_error",
            address="Atlantis",
        )
    """
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {error_message}")],
        isError=True,
        metadata={"error_type": error_type, "error_code": error_code, **metadata},
    )


def create_validation_error(field_name: str, error_message: str, field_value: Optional[Any] = None) -> CallToolResult:
    """Reject a tool argument before any upstream call is made."""
    context = {"field_name": field_name}
    if field_value is not None:
        context["field_value"] = field_value
    return create_error_result(
        f"{field_name}: {error_message}",
        ERROR_VALIDATION_FAILED,
        "validation_error",
        **context
    )


def create_unexpected_error(error_message: str, **context: Any) -> CallToolResult:
    """Report a failure outside the weather service's error taxonomy."""
    return create_error_result(
        f"Unexpected error: {error_message}",
        ERROR_UNEXPECTED,
        "unexpected_error",
        **context
    )
