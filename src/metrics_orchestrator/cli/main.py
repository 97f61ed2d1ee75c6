"""Main CLI entry point."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from metrics_orchestrator.constants import GITHUB_REPOSITORY_ENV, LOG_LEVEL_ENV
from metrics_orchestrator.errors import ConfigError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metrics-orchestrator",
        description="Normalize metrics renderer targets",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help=f"Debug logging on stderr (default level from {LOG_LEVEL_ENV}, else WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # targets
    targets_parser = subparsers.add_parser(
        "targets", help="Normalize targets from a YAML configuration file"
    )
    targets_parser.add_argument(
        "--config",
        type=Path,
        required=True,
        metavar="PATH",
        help="Path to the targets YAML file",
    )
    targets_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output",
    )

    # open-source
    open_source_parser = subparsers.add_parser(
        "open-source", help="Resolve repositories for the open-source workflow"
    )
    open_source_parser.add_argument(
        "--input",
        type=str,
        default=None,
        metavar="JSON",
        help="JSON array of repository names or {repository, contributors_branch} objects",
    )
    open_source_parser.add_argument(
        "--descriptors",
        action="store_true",
        help="Emit repository and contributors_branch objects instead of bare names",
    )

    # render
    render_parser = subparsers.add_parser("render", help="Normalize render workflow inputs")
    render_sub = render_parser.add_subparsers(dest="render_command", required=True)

    profile_parser = render_sub.add_parser("profile", help="Profile dashboard inputs")
    profile_parser.add_argument("--target-user", required=True, metavar="USER")
    profile_parser.add_argument("--branch-name", metavar="BRANCH")
    profile_parser.add_argument("--target-path", metavar="PATH")
    profile_parser.add_argument("--temp-artifact", metavar="PATH")
    profile_parser.add_argument("--time-zone", metavar="TZ")
    profile_parser.add_argument("--display-name", metavar="NAME")
    profile_parser.add_argument("--include-private", metavar="BOOL")

    repository_parser = render_sub.add_parser("repository", help="Single repository inputs")
    repository_parser.add_argument("--target-repo", required=True, metavar="REPO")
    repository_parser.add_argument("--target-owner", metavar="OWNER")
    repository_parser.add_argument(
        "--github-repo",
        default=None,
        metavar="OWNER/REPO",
        help=f"Repository running the workflow (default: ${GITHUB_REPOSITORY_ENV})",
    )
    repository_parser.add_argument("--target-path", metavar="PATH")
    repository_parser.add_argument("--temp-artifact", metavar="PATH")
    repository_parser.add_argument("--branch-name", metavar="BRANCH")
    repository_parser.add_argument("--contributors-branch", metavar="BRANCH")
    repository_parser.add_argument("--time-zone", metavar="TZ")

    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName((os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse args and dispatch to subcommands. Configuration errors exit with status 1."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "targets":
            _run_targets(args)
        elif args.command == "open-source":
            _run_open_source(args)
        elif args.command == "render":
            _run_render(args)
    except ConfigError as e:
        logger.debug("Command %s failed (%s)", args.command, e.kind)
        print(str(e), file=sys.stderr)
        raise SystemExit(1)


def _run_targets(args: argparse.Namespace) -> None:
    """Run targets command."""
    from metrics_orchestrator.normalizing import load_targets

    document = load_targets(args.config)
    data = document.model_dump(mode="json")
    if args.pretty:
        print(json.dumps(data, indent=2))
    else:
        print(json.dumps(data, separators=(",", ":")))


def _run_open_source(args: argparse.Namespace) -> None:
    """Run open-source command."""
    from metrics_orchestrator.open_source import resolve_open_source_targets

    targets = resolve_open_source_targets(args.input)
    if args.descriptors:
        data = [t.model_dump(mode="json") for t in targets]
    else:
        data = [t.repository for t in targets]
    print(json.dumps(data, separators=(",", ":")))


def _run_render(args: argparse.Namespace) -> None:
    """Run render profile/repository commands."""
    from metrics_orchestrator.render_inputs import (
        normalize_profile_inputs,
        normalize_repository_inputs,
    )

    if args.render_command == "profile":
        logger.info("Normalizing profile inputs: user=%s", args.target_user)
        result = normalize_profile_inputs(
            args.target_user,
            branch_name=args.branch_name,
            target_path=args.target_path,
            temp_artifact=args.temp_artifact,
            time_zone=args.time_zone,
            display_name=args.display_name,
            include_private=args.include_private,
        )
    else:
        logger.info("Normalizing repository inputs: repo=%s", args.target_repo)
        github_repo = args.github_repo or os.environ.get(GITHUB_REPOSITORY_ENV, "")
        result = normalize_repository_inputs(
            args.target_repo,
            github_repo,
            target_owner=args.target_owner,
            target_path=args.target_path,
            temp_artifact=args.temp_artifact,
            branch_name=args.branch_name,
            contributors_branch=args.contributors_branch,
            time_zone=args.time_zone,
        )
    print(json.dumps(result.model_dump(mode="json"), separators=(",", ":")))


if __name__ == "__main__":
    main()
