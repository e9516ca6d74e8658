"""deploy-notify - CLI tool to post deployment outcomes to a Slack webhook.

This package builds a Block Kit message from build metadata and delivers it
to an incoming webhook in a single request.
"""

from deploy_notify._version import __version__
from deploy_notify.cli import create_parser, main
from deploy_notify.message.builder import build_notification
from deploy_notify.report import DeploymentReport, GitCommit, Status
from deploy_notify.webhook.sender import send_notification

__all__ = [
    "__version__",
    "create_parser",
    "main",
    "build_notification",
    "send_notification",
    "DeploymentReport",
    "GitCommit",
    "Status",
]
