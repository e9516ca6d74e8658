"""Deployment report read from the command line.

A report is built once per run and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class Status(Enum):
    """Outcome of the deployment being reported."""

    SUCCESS = "success"
    FAILURE = "failure"


class GitCommit(NamedTuple):
    """Commit hash and message, always supplied together."""

    commit: str
    message: str


@dataclass(frozen=True)
class DeploymentReport:
    """Build metadata for a single deployment notification."""

    status: Status
    service: str
    environment: str
    user: str
    version: str
    build_number: int
    build_url: str
    hook_url: str
    channel: str
    git: Optional[GitCommit] = None


def git_commit_from(commit: Optional[str], message: Optional[str]) -> Optional[GitCommit]:
    """Pair a commit hash with its message.

    Args:
        commit: Commit hash, if given.
        message: Commit message, if given.

    Returns:
        GitCommit when both values are present, None otherwise.
    """
    if commit is None or message is None:
        return None
    return GitCommit(commit, message)


__all__ = ["Status", "GitCommit", "DeploymentReport", "git_commit_from"]
