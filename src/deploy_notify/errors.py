"""Categorized error handling with actionable messages.

Provides structured error types with exit codes and recovery suggestions
so pipeline steps can tell a bad webhook from an unreachable one.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Exit codes for scripting integration.

    Standard categories:
    - 0: Success
    - 1-9: Usage/config errors (user can fix); 2 is left to argparse
    - 10-19: Webhook authorization errors
    - 20-29: Network errors
    - 30-39: Webhook rejections
    - 40-49: System errors
    """

    SUCCESS = 0

    # Usage/config errors (1-9)
    USAGE_ERROR = 1
    CONFIG_ERROR = 3

    # Webhook authorization errors (10-19)
    WEBHOOK_INVALID = 11

    # Network errors (20-29)
    NETWORK_OFFLINE = 20
    NETWORK_TIMEOUT = 21
    NETWORK_DNS = 22
    NETWORK_PROXY = 23

    # Webhook rejections (30-39)
    WEBHOOK_REJECTED = 30
    WEBHOOK_RATE_LIMIT = 31
    WEBHOOK_SERVER_ERROR = 32

    # System errors (40-49)
    SYSTEM_ERROR = 49


class DeployNotifyError(Exception):
    """Base exception for deploy-notify with structured error info.

    Attributes:
        message: Human-readable error message.
        code: Exit code for scripting.
        suggestion: Actionable recovery suggestion.
        details: Optional additional context.
    """

    code: ClassVar[ExitCode] = ExitCode.USAGE_ERROR
    suggestion: ClassVar[str] = ""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: str | None = None,
    ):
        self.message = message
        self._suggestion = suggestion
        self.details = details
        super().__init__(message)

    def get_suggestion(self) -> str:
        """Get the recovery suggestion."""
        return self._suggestion or self.suggestion

    def format_full(self) -> str:
        """Format the complete error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        suggestion = self.get_suggestion()
        if suggestion:
            parts.append(f"Suggestion: {suggestion}")
        return "\n".join(parts)


# Config Errors


class ConfigError(DeployNotifyError):
    """Configuration file error."""

    code = ExitCode.CONFIG_ERROR
    suggestion = "Check the config file is a JSON object with valid keys."


# Network Errors


class NetworkOfflineError(DeployNotifyError):
    """Webhook host could not be reached."""

    code = ExitCode.NETWORK_OFFLINE
    suggestion = "Check the runner's network access to the webhook host."


class NetworkTimeoutError(DeployNotifyError):
    """Request timed out."""

    code = ExitCode.NETWORK_TIMEOUT
    suggestion = (
        "The request timed out. Try again, or increase timeout with --timeout flag."
    )


class NetworkDNSError(DeployNotifyError):
    """DNS resolution failed."""

    code = ExitCode.NETWORK_DNS
    suggestion = "DNS lookup failed. Check the host part of --hook-url."


class NetworkProxyError(DeployNotifyError):
    """Proxy connection failed."""

    code = ExitCode.NETWORK_PROXY
    suggestion = (
        "Proxy connection failed. Check your proxy settings "
        "(HTTP_PROXY, HTTPS_PROXY environment variables)."
    )


# Webhook Rejections


class WebhookRejectedError(DeployNotifyError):
    """Webhook endpoint answered with a non-success status.

    Attributes:
        status_code: HTTP status returned by the endpoint.
        body: Response body, decoded as text.
    """

    code = ExitCode.WEBHOOK_REJECTED
    suggestion = "Check the payload and the --channel value."

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        suggestion: str | None = None,
    ):
        super().__init__(message, suggestion=suggestion)
        self.status_code = status_code
        self.body = body


class WebhookInvalidError(WebhookRejectedError):
    """Webhook URL is unknown, revoked, or points to an archived channel."""

    code = ExitCode.WEBHOOK_INVALID
    suggestion = "The webhook may have been revoked. Generate a new one and update --hook-url."


class RateLimitError(WebhookRejectedError):
    """Webhook rate limit exceeded."""

    code = ExitCode.WEBHOOK_RATE_LIMIT
    suggestion = "Too many messages were sent to this webhook. Wait before sending again."


class ServerError(WebhookRejectedError):
    """Webhook server error (5xx)."""

    code = ExitCode.WEBHOOK_SERVER_ERROR
    suggestion = "The chat service is having issues. Check its status page."


def categorize_http_error(status_code: int, body: str = "") -> WebhookRejectedError:
    """Convert a webhook HTTP status code to the appropriate error type.

    Args:
        status_code: HTTP status code.
        body: Response body returned by the endpoint.

    Returns:
        Appropriate WebhookRejectedError subclass instance.
    """
    message = f"Error posting to slack: {status_code}"
    if body:
        message += f" {body}"

    if status_code in (403, 404, 410):
        return WebhookInvalidError(message, status_code, body)
    elif status_code == 429:
        return RateLimitError(message, status_code, body)
    elif status_code >= 500:
        return ServerError(message, status_code, body)
    else:
        return WebhookRejectedError(message, status_code, body)


def categorize_network_error(error_reason: str) -> DeployNotifyError:
    """Convert network error reason to appropriate error type.

    Args:
        error_reason: Error reason string from URLError or the socket layer.

    Returns:
        Appropriate DeployNotifyError subclass instance.
    """
    reason_lower = error_reason.lower()

    if "timed out" in reason_lower or "timeout" in reason_lower:
        return NetworkTimeoutError(f"Connection timed out: {error_reason}")
    elif (
        "name or service not known" in reason_lower
        or "getaddrinfo" in reason_lower
        or "nodename nor servname" in reason_lower
    ):
        return NetworkDNSError(f"DNS resolution failed: {error_reason}")
    elif "proxy" in reason_lower or "tunnel" in reason_lower:
        return NetworkProxyError(f"Proxy error: {error_reason}")
    elif "connection refused" in reason_lower or "no route" in reason_lower:
        return NetworkOfflineError(f"Connection failed: {error_reason}")
    else:
        return NetworkOfflineError(f"Network error: {error_reason}")


def format_error_for_user(error: Exception, verbose: bool = False) -> str:
    """Format any exception for user display.

    Args:
        error: Exception to format.
        verbose: If True, include details and suggestions.

    Returns:
        Formatted error message string.
    """
    if isinstance(error, DeployNotifyError):
        if verbose:
            return error.format_full()
        return f"Error: {error.message}"
    else:
        return f"Error: {error}"


def get_exit_code(error: Exception) -> int:
    """Get the exit code for an exception.

    Args:
        error: Exception to get code for.

    Returns:
        Integer exit code.
    """
    if isinstance(error, DeployNotifyError):
        return error.code
    else:
        return ExitCode.SYSTEM_ERROR


__all__ = [
    # Exit codes
    "ExitCode",
    # Base error
    "DeployNotifyError",
    # Config errors
    "ConfigError",
    # Network errors
    "NetworkOfflineError",
    "NetworkTimeoutError",
    "NetworkDNSError",
    "NetworkProxyError",
    # Webhook rejections
    "WebhookRejectedError",
    "WebhookInvalidError",
    "RateLimitError",
    "ServerError",
    # Utilities
    "categorize_http_error",
    "categorize_network_error",
    "format_error_for_user",
    "get_exit_code",
]
