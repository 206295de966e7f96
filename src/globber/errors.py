"""Error hierarchy for the globber library."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "GlobberError",
    "InvalidPatternError",
    "ConfigNotFoundError",
    "ConfigError",
    "ErrorCodes",
]


class GlobberError(Exception):
    """Base error for all globber errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidPatternError(GlobberError):
    """Raised when a pattern string cannot be compiled."""

    def __init__(
        self,
        pattern: Any,
        reason: str,
        position: int | None = None,
        **kwargs: Any,
    ) -> None:
        details: dict[str, Any] = {"pattern": pattern, "reason": reason}
        if position is not None:
            details["position"] = position
        super().__init__(
            code="INVALID_PATTERN",
            message=f"Invalid pattern {pattern!r}: {reason}",
            details=details,
            **kwargs,
        )

    @property
    def pattern(self) -> Any:
        """The pattern that failed to compile."""
        return self.details["pattern"]

    @property
    def position(self) -> int | None:
        """Index in the pattern where the problem was found, if known."""
        return self.details.get("position")


class ConfigNotFoundError(GlobberError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(GlobberError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All library error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_PATTERN:
            report_bad_pattern()
    """

    INVALID_PATTERN = "INVALID_PATTERN"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
