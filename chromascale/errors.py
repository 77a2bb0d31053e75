from __future__ import annotations
from typing import Any


class InvalidColorInput(ValueError):
    """Raised when an input cannot be interpreted as a color."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        message = f"Invalid color input: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ArgumentError(ValueError):
    """Raised for out-of-range or unknown arguments (step counts, k, algorithm names)."""
