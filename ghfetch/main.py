"""ghfetch entry point.

Fetches a GitHub resource collection (all pages) or a single user and prints
one JSON object per line. Usage: ghfetch issues owner/repo -q state=all.
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel

from ghfetch.adapters import GitHubAdapter, GitHubError
from ghfetch.adapters.credentials import EnvCredentials
from ghfetch.config import load_config
from ghfetch.logging import FetchLogging

REPO_COMMANDS = ("issues", "milestones", "releases")


def _parse_query(pairs: List[str] | None) -> Dict[str, List[str]] | None:
    """Turn ["k=v", "k=w"] into {"k": ["v", "w"]}; None when no pairs given."""
    if not pairs:
        return None
    query: Dict[str, List[str]] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"query must be key=value, got {pair!r}")
        query.setdefault(key, []).append(value)
    return query


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI: global options, then a resource subcommand."""
    parser = argparse.ArgumentParser(
        prog="ghfetch",
        description="ghfetch - read-only GitHub REST client with Link-header pagination",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    sub = parser.add_subparsers(dest="command")

    for name in REPO_COMMANDS:
        p = sub.add_parser(name, help=f"List {name} of a repository")
        p.add_argument("repo", help="Repository in owner/repo format")
        if name != "releases":
            p.add_argument(
                "--query",
                "-q",
                action="append",
                metavar="KEY=VALUE",
                help="Query parameter (repeatable), e.g. state=all",
            )

    p = sub.add_parser("teams", help="List teams of an organization")
    p.add_argument("org", help="Organization login")

    p = sub.add_parser("members", help="List members of a team")
    p.add_argument("team_id", type=int, help="Numeric team id")

    sub.add_parser("notifications", help="List notifications of the authenticated user")

    p = sub.add_parser("user", help="Fetch a single user")
    p.add_argument("login", help="User login")

    args = parser.parse_args(argv)
    if not args.check and args.command is None:
        parser.error("a command is required")
    try:
        args.query = _parse_query(getattr(args, "query", None))
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    return args


def fetch(adapter: GitHubAdapter, args: argparse.Namespace) -> List[BaseModel]:
    """Dispatch the parsed command to the adapter."""
    if args.command == "issues":
        return list(adapter.list_issues(args.repo, args.query))
    if args.command == "milestones":
        return list(adapter.list_milestones(args.repo, args.query))
    if args.command == "releases":
        return list(adapter.list_releases(args.repo))
    if args.command == "teams":
        return list(adapter.list_teams(args.org))
    if args.command == "members":
        return list(adapter.list_team_members(args.team_id))
    if args.command == "notifications":
        return list(adapter.list_notifications())
    if args.command == "user":
        return [adapter.get_user(args.login)]
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config, fetch, print JSON lines."""
    args = parse_args(argv)

    config_path = args.config
    example_fallback = False
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")
            example_fallback = True

    config = load_config(config_path)
    fetch_logging = FetchLogging(config.logging)
    fetch_logging.setup()
    log = fetch_logging.get_logger()
    if example_fallback:
        log.warning("config.yaml not found, using config.example.yaml")

    if args.check:
        fallback = config.github.credentials
        auth = "basic auth" if EnvCredentials(fallback.username, fallback.token)() else "anonymous"
        print("Config OK:", config.github.api_url, auth)
        return 0

    adapter = GitHubAdapter.from_config(config)
    try:
        records = fetch(adapter, args)
    except GitHubError as e:
        log.error("Fetch failed after %d records: %s", len(e.partial), e)
        return 1
    finally:
        adapter.close()

    for record in records:
        print(record.model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
