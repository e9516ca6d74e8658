"""Webhook delivery for deploy-notify."""

from deploy_notify.webhook.sender import (
    DEFAULT_TIMEOUT,
    DeliveryResult,
    build_request,
    send_notification,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "DeliveryResult",
    "build_request",
    "send_notification",
]
