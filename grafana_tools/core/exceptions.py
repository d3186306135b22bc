"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Transport, file system and JSON errors are not wrapped: they reach the
caller as the httpx, OSError and json.JSONDecodeError raised underneath.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="SYS_CONFIGURATION_ERROR")


class RequestError(ApplicationError):
    """Raised when Grafana answers with a non-success status."""

    def __init__(self, endpoint: str, status_code: int, server_message: Any = None) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        self.server_message = server_message

        message = f"{endpoint} responded with a {status_code} status"
        if server_message:
            message += f":\n{server_message}"
        super().__init__(message, code="GRAFANA_REQUEST_FAILED")
