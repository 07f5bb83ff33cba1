"""Command-line interface for gh-shorthand."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Config, load_config, resolve_token
from .github import GitHubAPIError, GitHubClient
from .parser import Matcher, parse
from .render import generate_items, render_items
from .types import MatcherOptions, Result

logger = logging.getLogger(__name__)

MODES = ("open", "search", "find")

OPEN_OPTIONS = MatcherOptions(repo=True, user=True, issue=True, path=True)
SEARCH_OPTIONS = MatcherOptions(require_repo=True, query=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-shorthand",
        description="Resolve GitHub shorthand into launcher items",
    )
    parser.add_argument("words", nargs="*", help="Input text, joined with spaces")
    parser.add_argument(
        "-m",
        "--mode",
        choices=MODES,
        default="open",
        help="open a repo/issue/path, search issues in a repo, or find anything (default: open)",
    )
    parser.add_argument("--config", type=Path, help="Path to the JSON config file")
    parser.add_argument(
        "--lookup",
        action="store_true",
        help="Fetch the issue title from GitHub when an issue is matched",
    )
    parser.add_argument("--token", help="Explicit GitHub token for --lookup")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return _handle_input(args)
    except GitHubAPIError as exc:
        print(f"GitHub API error: {exc}", file=sys.stderr)
        return 2
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def match_input(config: Config, text: str, mode: str = "open") -> Result:
    """Run the matcher configured for ``mode`` against ``text``."""
    if mode == "find":
        return parse(config.repos, config.users, text, bare_user=True, ignore_numeric=True)
    if mode == "search":
        options = SEARCH_OPTIONS
    elif mode == "open":
        options = OPEN_OPTIONS
    else:
        raise RuntimeError(f"Unknown mode '{mode}'")
    return Matcher(config.repos, config.users, config.default_repo, options).match(text)


def _handle_input(args: argparse.Namespace) -> int:
    text = " ".join(args.words)
    logger.debug("input: %r", text)

    config = load_config(args.config)
    result = match_input(config, text, args.mode)
    logger.debug("result: %r", result)

    issue_title = None
    if args.lookup and result.repository and result.issue:
        issue_title = _lookup_issue_title(config, args.token, result)

    render_items(generate_items(result, issue_title=issue_title), sys.stdout)
    return 0


def _lookup_issue_title(config: Config, explicit: Optional[str], result: Result) -> Optional[str]:
    token = resolve_token(explicit=explicit, config=config)
    if not token:
        logger.debug("no GitHub token available, skipping issue lookup")
        return None
    client = GitHubClient(token)
    try:
        return client.issue_title(result.repository, result.issue)
    except GitHubAPIError as exc:
        logger.warning("could not look up %s#%s: %s", result.repository, result.issue, exc)
        return None


if __name__ == "__main__":
    sys.exit(main())
