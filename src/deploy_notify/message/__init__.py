"""Deployment message construction.

Modules:
    blocks: Block Kit value types and JSON serialization
    builder: Mapping from a deployment report to a notification
"""

from deploy_notify.message.blocks import Block, Notification, TextEntry
from deploy_notify.message.builder import (
    DEFAULT_USERNAME,
    build_notification,
    format_build_info,
    format_commit,
    format_header,
)

__all__ = [
    "Block",
    "Notification",
    "TextEntry",
    "DEFAULT_USERNAME",
    "build_notification",
    "format_header",
    "format_build_info",
    "format_commit",
]
