"""Build the deployment notification from a report.

Every function here is pure: the same report always yields the same blocks.
"""

from __future__ import annotations

from typing import Optional

from deploy_notify.message.blocks import Block, Notification
from deploy_notify.report import DeploymentReport, Status

DEFAULT_USERNAME = "Bitbucket Pipelines"

SUCCESS_EMOJI = ":white_check_mark:"
FAILURE_EMOJI = ":no_entry:"


def format_header(report: DeploymentReport) -> Block:
    """Format the header line announcing the deployment outcome.

    Args:
        report: Deployment report.

    Returns:
        Section block with the outcome sentence.
    """
    if report.status is Status.SUCCESS:
        text = (
            f"{SUCCESS_EMOJI} Deployment of *{report.service}* "
            f"to *{report.environment}* successful."
        )
    else:
        text = (
            f"{FAILURE_EMOJI} Deployment of *{report.service}* "
            f"to *{report.environment}* failed."
        )
    return Block.section(text)


def format_build_info(report: DeploymentReport) -> Block:
    """Format version, build link and triggering user as a fields block.

    Args:
        report: Deployment report.

    Returns:
        Section block with exactly three fields.
    """
    version = f"*Version:*\n{report.version}"
    build = f"*Build:*\n<{report.build_url}|{report.build_number}>"
    triggerer = f"*Triggered by:*\n{report.user}"

    return Block.with_fields([version, build, triggerer])


def format_commit(report: DeploymentReport) -> Optional[Block]:
    """Format the commit as a preformatted block.

    Args:
        report: Deployment report.

    Returns:
        Section block, or None when the report carries no commit.
    """
    if report.git is None:
        return None
    return Block.section(f"```Commit: {report.git.commit}\n{report.git.message}```")


def build_notification(
    report: DeploymentReport,
    username: str = DEFAULT_USERNAME,
) -> Notification:
    """Build the full notification for a deployment.

    Args:
        report: Deployment report.
        username: Display name the message is posted under.

    Returns:
        Notification with header, build info and, if present, commit blocks.
    """
    blocks = [format_header(report), format_build_info(report)]

    commit_block = format_commit(report)
    if commit_block is not None:
        blocks.append(commit_block)

    return Notification(
        username=username,
        channel=report.channel,
        blocks=tuple(blocks),
    )


__all__ = [
    "DEFAULT_USERNAME",
    "format_header",
    "format_build_info",
    "format_commit",
    "build_notification",
]
