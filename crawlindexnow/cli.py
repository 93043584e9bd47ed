"""Command-line entry point: the root command and its subcommands."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from datetime import datetime

from . import shopify, sitemap
from .shopify import BANNER

VERSION = "dev"
COMMIT = "none"
DATE = "unknown"

_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(?:\.\d+)?(?:Z|[+-](?:[01]\d|2[0-3]):[0-5]\d)"
)

_ROOT_LONG = """
Crawl n' Index is a simple CLI that pulls your Shopify site's URL, and
submits them to various indexes to speed up the indexing process.
"""

_SHOPIFY_LONG = """

Gathers all of the Shopify's URL by parsing every single sitemap pages,
packages them nicely and posts them to IndexNow's API.
"""

_SITEMAP_LONG = """

Gathers all of the website's URLs by parsing every single sitemap pages,
packages them nicely and posts them to IndexNow's API.
"""


@dataclass
class CommandOptions:
    """The flags shared by the submission commands."""

    domain: str = ""
    key: str = ""

    def validate(self) -> "CommandOptions":
        """Raise ``ValueError`` if a required flag is empty."""
        if not self.domain:
            raise ValueError("domain is required to execute this command")
        if not self.key:
            raise ValueError("indexNowKey is required to execute this command")
        return self


def format_version(version: str, commit: str, date: str) -> str:
    """Return the version line; a build date must be RFC 3339 unless "unknown"."""
    if date != "unknown":
        match = _RFC3339.fullmatch(date)
        if match is None:
            raise ValueError(f'parsing time "{date}" as RFC3339: invalid format')
        try:
            datetime.strptime(f"{match[1]}T{match[2]}", "%Y-%m-%dT%H:%M:%S")
        except ValueError as exc:
            raise ValueError(f'parsing time "{date}": {exc}') from exc
        date = match[1]
    return f"{version} ({date}) [{commit}]"


def build_parser(version: str, commit: str, date: str) -> argparse.ArgumentParser:
    """Build the root parser with the ``shopify`` and ``sitemap`` commands."""
    parser = argparse.ArgumentParser(
        prog="crawl-n-indexnow",
        description=BANNER + _ROOT_LONG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version="%(prog)s version " + format_version(version, commit, date),
    )
    commands = parser.add_subparsers(dest="command", metavar="command")

    specs = (
        ("shopify", "Sends all of the Shopify's URLs to IndexNow.", _SHOPIFY_LONG,
         "the Shopify domain", shopify.execute),
        ("sitemap", "Sends all of the Sitemap URLs to IndexNow.", _SITEMAP_LONG,
         "the website's domain", sitemap.execute),
    )
    for name, short, long, domain_help, runner in specs:
        sub = commands.add_parser(
            name,
            help=short,
            description=BANNER + long,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        sub.add_argument("--domain", default="", help=domain_help)
        sub.add_argument("--key", default="", help="the IndexNow key")
        sub.set_defaults(run=runner)
    return parser


def main(argv=None) -> int:
    """Run the command line and return the exit status."""
    try:
        parser = build_parser(VERSION, COMMIT, DATE)
    except ValueError as exc:
        print(exc)
        return 1

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    options = CommandOptions(domain=args.domain, key=args.key)
    try:
        options.validate()
        args.run(options.domain, options.key)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("failed to run command", exc)
        return 1
    except Exception as exc:  # last-resort guard so the command never dies with a traceback
        print("Panic: Recovered in main: ", exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())