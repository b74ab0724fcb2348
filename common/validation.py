"""ABOUTME: Argument checks for free-text tool inputs.

Validators return ``(is_valid, error_message)`` so a tool can turn a failure
into a validation error result without raising.
"""

from typing import Any, Optional, Tuple

ValidationOutcome = Tuple[bool, Optional[str]]


def validate_text(value: Any, field_name: str, max_length: int) -> ValidationOutcome:
    """Check that ``value`` is a string with 1 to ``max_length`` meaningful characters.

    Surrounding whitespace does not count towards the length.

    Example:
        is_valid, error = validate_text(address, "address", 256)
    """
    if not isinstance(value, str):
        return False, f"expected a string, got {type(value).__name__}"

    stripped = value.strip()
    if not stripped:
        return False, f"{field_name} cannot be empty or whitespace-only"

    if len(stripped) > max_length:
        return False, f"{field_name} is {len(stripped)} characters long; the limit is {max_length}"

    return True, None
