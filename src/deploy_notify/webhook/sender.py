"""Webhook sender posting deployment notifications to Slack."""

from __future__ import annotations

import http.client
import socket
from typing import NamedTuple
from urllib.error import HTTPError, URLError
from urllib.parse import urlsplit
from urllib.request import Request, urlopen

from deploy_notify._version import __version__
from deploy_notify.errors import (
    DeployNotifyError,
    categorize_http_error,
    categorize_network_error,
)
from deploy_notify.message.blocks import Notification

DEFAULT_TIMEOUT = 10  # seconds

ALLOWED_SCHEMES = ("http", "https")


class DeliveryResult(NamedTuple):
    """Response of an accepted webhook request."""

    status_code: int
    body: str


def _read_body(response) -> str:
    try:
        raw = response.read()
    except (OSError, AttributeError):
        return ""
    if not raw:
        return ""
    return raw.decode("utf-8", errors="replace")


def _invalid_url(url: str) -> DeployNotifyError:
    return DeployNotifyError(
        f"Invalid webhook URL: {url}",
        suggestion="Pass a full http:// or https:// URL to --hook-url.",
    )


def build_request(url: str, notification: Notification) -> Request:
    """Build the POST request carrying the notification JSON.

    Args:
        url: Webhook URL.
        notification: Notification to send.

    Returns:
        Prepared urllib Request.
    """
    return Request(
        url,
        data=notification.to_json().encode("utf-8"),
        headers={
            "Content-Type": "application/json",
            "User-Agent": f"deploy-notify/{__version__}",
        },
        method="POST",
    )


def send_notification(
    url: str,
    notification: Notification,
    timeout: float = DEFAULT_TIMEOUT,
) -> DeliveryResult:
    """Send a notification to the webhook in a single request.

    Args:
        url: Webhook URL.
        notification: Notification to send.
        timeout: Request timeout in seconds.

    Returns:
        DeliveryResult with the status code and body of the response.

    Raises:
        WebhookRejectedError: If the endpoint answers with a non-2xx status.
        DeployNotifyError: If the URL is unusable or the request never
            completes (network error subclasses).
    """
    if urlsplit(url).scheme.lower() not in ALLOWED_SCHEMES:
        raise _invalid_url(url)

    try:
        req = build_request(url, notification)
    except ValueError as e:
        raise _invalid_url(url) from e

    try:
        with urlopen(req, timeout=timeout) as response:
            status = response.status
            body = _read_body(response)
    except HTTPError as e:
        raise categorize_http_error(e.code, _read_body(e)) from e
    except URLError as e:
        raise categorize_network_error(str(e.reason)) from e
    except (socket.timeout, TimeoutError) as e:
        raise categorize_network_error(f"timed out after {timeout}s") from e
    except OSError as e:
        raise categorize_network_error(str(e)) from e
    except (http.client.InvalidURL, ValueError) as e:
        # e.g. a non-numeric port, only detected when connecting
        raise _invalid_url(url) from e
    except http.client.HTTPException as e:
        # Endpoint answered with something that is not HTTP
        raise categorize_network_error(str(e) or type(e).__name__) from e

    # urlopen only hands back 2xx/3xx; anything outside 2xx is still a rejection
    if status < 200 or status >= 300:
        raise categorize_http_error(status, body)
    return DeliveryResult(status, body)


__all__ = ["DEFAULT_TIMEOUT", "DeliveryResult", "build_request", "send_notification"]
