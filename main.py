"""
CLI entrypoint for the gameplay tag registry.

This script performs the following steps:
- loads .env (if present) and configs/settings.yaml
- configures logging
- builds the tag registry from the YAML tag assets
- runs the selected command:
    tree   print the tag hierarchy
    check  evaluate a tag query against a set of owned tags
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from application import build_container, build_query, build_registry, render_tag_tree
from application.constants import EXIT_MATCH, EXIT_NO_MATCH, MATCH_TEXT, NO_MATCH_TEXT
from domain.tags.query import QueryType
from infrastructure.config import load_settings
from infrastructure.constants import SETTINGS_FILE
from infrastructure.observability import configure_logging, set_log_context

logger = logging.getLogger(__name__)

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Inspect gameplay tags and evaluate tag queries")
    p.add_argument(
        "--settings",
        type=str,
        default=str(SETTINGS_FILE),
        help="Path to settings.yaml (default: configs/settings.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default=None,
        choices=_LEVELS,
        help="Console log level (overrides settings)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    tree = sub.add_parser("tree", help="Print the tag hierarchy")
    tree.add_argument("--descriptions", action="store_true", help="Show tag descriptions")

    check = sub.add_parser("check", help="Evaluate a query against owned tags")
    check.add_argument("--tags", nargs="*", default=[], help="Owned tag paths")
    check.add_argument(
        "--mode",
        type=str,
        default=QueryType.ALL.value,
        choices=[q.value for q in QueryType],
        help="Query type",
    )
    check.add_argument("--required", nargs="*", default=[])
    check.add_argument("--blocked", nargs="*", default=[])
    check.add_argument("--any", nargs="*", default=[], dest="any_of")
    check.add_argument("--none-of", nargs="*", default=[])

    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    settings = load_settings(Path(args.settings))
    console_level = args.console_level or settings.console_level
    configure_logging(log_file=settings.log_file, console_level=getattr(logging, console_level))
    set_log_context(command=args.command)

    registry = build_registry(settings)

    if args.command == "tree":
        print(render_tag_tree(registry, with_descriptions=args.descriptions))
        return 0

    owned = build_container(registry, args.tags)
    query = build_query(
        registry,
        {
            "query_type": args.mode,
            "required": args.required,
            "blocked": args.blocked,
            "any": args.any_of,
            "none_of": args.none_of,
        },
    )

    matched = query.matches(owned)
    print(query.describe())
    print(MATCH_TEXT if matched else NO_MATCH_TEXT)
    logger.info("Query evaluated against %d owned tags: matched=%s", owned.count(), matched)
    return EXIT_MATCH if matched else EXIT_NO_MATCH


if __name__ == "__main__":
    sys.exit(main())
