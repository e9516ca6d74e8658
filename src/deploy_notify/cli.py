"""Command-line interface for deploy-notify.

This module provides the main entry point and argument parsing for the
deploy-notify CLI tool.
"""

import argparse
import platform
import sys
from pathlib import Path
from typing import List, Optional

from deploy_notify._version import __version__
from deploy_notify.config.settings import MAX_TIMEOUT, load_config
from deploy_notify.display.colors import Colors, disable_colors
from deploy_notify.errors import (
    ConfigError,
    DeployNotifyError,
    WebhookRejectedError,
    format_error_for_user,
    get_exit_code,
)
from deploy_notify.message.builder import build_notification
from deploy_notify.report import DeploymentReport, Status, git_commit_from
from deploy_notify.webhook.sender import send_notification


def non_negative_int(value: str) -> int:
    """argparse type for build numbers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer: '{value}'")
    return number


def timeout_seconds(value: str) -> float:
    """argparse type for request timeouts."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'") from None
    if not 0 < seconds <= MAX_TIMEOUT:
        raise argparse.ArgumentTypeError(f"must be between 0 and {MAX_TIMEOUT}: '{value}'")
    return seconds


def version_string() -> str:
    """Version and system information shown by -V."""
    return (
        f"deploy-notify {__version__} "
        f"(Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}, "
        f"{platform.system()} {platform.machine()})"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="deploy-notify",
        description="Notify a Slack channel of a deployment outcome",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  deploy-notify --hook-url URL --channel '#deploys' --status success \\
      --service api --environment prod --user alice --version 1.2.3 \\
      --build-number 42 --build-url https://ci.example.com/42
  deploy-notify ... --git-commit abc123 --git-message 'fix bug'
  deploy-notify ... --dry-run         Print the payload instead of sending it
  deploy-notify ... --fail-on-error   Exit non-zero if the webhook rejects the message

Config:
  --hook-url and --channel may come from a JSON config file
  (default: ~/.config/deploy-notify/config.json).
""",
    )

    required = parser.add_argument_group("deployment")
    required.add_argument("--hook-url", metavar="URL", help="Slack incoming webhook URL")
    required.add_argument("--channel", help="Channel to post to, e.g. '#deploys'")
    required.add_argument(
        "--status",
        required=True,
        choices=[status.value for status in Status],
        help="Outcome of the deployment",
    )
    required.add_argument("--service", required=True, help="Name of the deployed service")
    required.add_argument("--environment", required=True, help="Target environment")
    required.add_argument("--user", required=True, help="User who triggered the deployment")
    required.add_argument("--version", required=True, help="Version being deployed")
    required.add_argument(
        "--build-number",
        required=True,
        type=non_negative_int,
        metavar="N",
        help="CI build number",
    )
    required.add_argument("--build-url", required=True, metavar="URL", help="Link to the CI build")

    git = parser.add_argument_group("commit (both or neither)")
    git.add_argument("--git-commit", metavar="HASH", help="Deployed commit hash")
    git.add_argument("--git-message", metavar="MESSAGE", help="Deployed commit message")

    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to JSON config file (default: ~/.config/deploy-notify/config.json)",
    )
    parser.add_argument(
        "--timeout",
        type=timeout_seconds,
        metavar="SECONDS",
        help="Webhook request timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit non-zero when the webhook rejects the message",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the JSON payload instead of sending it",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show delivery confirmation and error suggestions",
    )
    parser.add_argument(
        "-V",
        action="version",
        version=version_string(),
        help="Show program version and system information",
    )

    return parser


def report_from_args(args: argparse.Namespace, config: dict) -> DeploymentReport:
    """Build the deployment report from parsed arguments.

    Command-line values take precedence over config values.

    Args:
        args: Parsed command-line arguments.
        config: Loaded configuration.

    Returns:
        DeploymentReport for this run.

    Raises:
        ValueError: If the webhook URL or channel is given nowhere.
    """
    hook_url = args.hook_url or config.get("hook_url")
    channel = args.channel or config.get("channel")

    missing = [
        flag
        for flag, value in (("--hook-url", hook_url), ("--channel", channel))
        if not value
    ]
    if missing:
        raise ValueError(f"the following arguments are required: {', '.join(missing)}")

    return DeploymentReport(
        status=Status(args.status),
        service=args.service,
        environment=args.environment,
        user=args.user,
        version=args.version,
        build_number=args.build_number,
        build_url=args.build_url,
        hook_url=hook_url,
        channel=channel,
        git=git_commit_from(args.git_commit, args.git_message),
    )


def print_error(error: Exception, verbose: bool = False) -> None:
    """Print a diagnostic for an error to standard error."""
    print(
        f"{Colors.RED}{format_error_for_user(error, verbose=verbose)}{Colors.RESET}",
        file=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for deploy-notify CLI.

    Parses arguments, builds the notification and posts it once. Remote
    rejections are reported but only change the exit status with
    --fail-on-error; network failures always exit non-zero.

    Args:
        argv: Argument list, defaults to sys.argv[1:].
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        disable_colors()

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as e:
        print_error(e, verbose=True)
        sys.exit(get_exit_code(e))

    try:
        report = report_from_args(args, config)
    except ValueError as e:
        parser.error(str(e))

    timeout = args.timeout if args.timeout is not None else config["timeout"]
    fail_on_error = args.fail_on_error or config["fail_on_error"]

    notification = build_notification(report, username=config["username"])

    if args.dry_run:
        print(notification.to_json(indent=2))
        return

    try:
        result = send_notification(report.hook_url, notification, timeout=timeout)
    except WebhookRejectedError as e:
        print_error(e, verbose=args.verbose)
        if fail_on_error:
            sys.exit(get_exit_code(e))
        return
    except DeployNotifyError as e:
        print_error(e, verbose=args.verbose)
        sys.exit(get_exit_code(e))

    if args.verbose:
        print(
            f"{Colors.GREEN}Notification sent to {report.channel}{Colors.RESET} "
            f"{Colors.DIM}(HTTP {result.status_code}){Colors.RESET}",
            file=sys.stderr,
        )


__all__ = [
    "create_parser",
    "report_from_args",
    "version_string",
    "main",
]
