"""FilterException hierarchy for controlled short-circuits and misconfiguration."""

from __future__ import annotations

from typing import Any

DENIAL_MESSAGE = "You do not have the required role to access this resource."


class FilterException(Exception):
    """Base for all filter pipeline exceptions."""


class FilterAbort(FilterException):
    """Controlled short-circuit with HTTP status code and message."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class AccessDenied(FilterAbort):
    """Authorization check failed (403)."""

    def __init__(self, detail: str = DENIAL_MESSAGE) -> None:
        super().__init__(detail, status_code=403)


class FilterInternalError(FilterException):
    """Engine-level error wrapping unexpected exceptions raised by a filter."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause


class FilterConfigurationError(FilterException):
    """A filter, route or factory was wired incorrectly."""


class ServiceNotRegistered(FilterConfigurationError, LookupError):
    """Requested service key has no registration."""

    def __init__(self, key: Any) -> None:
        name = getattr(key, "__qualname__", repr(key))
        super().__init__(f"No service registered for {name}")
        self.key = key
