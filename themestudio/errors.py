"""Error codes and error handling utilities for Theme Studio."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for Theme Studio operations."""

    # Recoverable editing conditions, never surfaced as dialogs
    PARSE_FAILURE = auto()
    EMPTY_CAPTURE = auto()
    INCOMPLETE_POLICY_PAIR = auto()

    # Environment/stylesheet errors
    STYLESHEET_NOT_FOUND = auto()
    STYLESHEET_UNREADABLE = auto()
    STYLESHEET_TOO_LARGE = auto()

    # Catalog errors
    CATALOG_INVALID = auto()

    # Export errors
    EXPORT_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.PARSE_FAILURE: "The value could not be parsed. The previous value was kept.",
    ErrorCode.EMPTY_CAPTURE: "Widget styles are still loading.",
    ErrorCode.INCOMPLETE_POLICY_PAIR: "Policy links need both a terms and a privacy URL.",

    ErrorCode.STYLESHEET_NOT_FOUND: "The widget stylesheet was not found.",
    ErrorCode.STYLESHEET_UNREADABLE: "The widget stylesheet could not be read.",
    ErrorCode.STYLESHEET_TOO_LARGE: "The widget stylesheet is too large to inspect.",

    ErrorCode.CATALOG_INVALID: "The wallet/chain catalog is invalid.",

    ErrorCode.EXPORT_FAILED: "Could not save the generated code.",
}


@dataclass
class ThemeStudioError(Exception):
    """Base exception for Theme Studio with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
        }


def format_error_for_user(error: ThemeStudioError) -> str:
    """Format an error for display in the status strip."""
    parts = [error.message]
    if error.path:
        parts.append(f" ({error.path.name})")
    return "".join(parts)
