from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from dotenv import find_dotenv, load_dotenv

from .config import Settings, configure_logging
from .errors import ArgumentError, ScrobblerError
from .lastfm import LastFmClient
from .main import run as _run

log = logging.getLogger(__name__)

USAGE = """
  scrobble-me-this OPTIONS CSV_FILE
  cat CSV_FILE | scrobble-me-this OPTIONS"""

CREDENTIALS_HELP = """Getting Last.fm API Credentials:
1. Go to <https://www.last.fm/api/account/create>
2. Create a new API account
3. Note your API key and API secret
4. Use your regular Last.fm username and password for authentication

Credentials can also be set with LASTFM_API_KEY, LASTFM_API_SECRET,
LASTFM_USERNAME and LASTFM_PASSWORD (environment or .env file).
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="scrobble-me-this",
        usage=USAGE,
        description="Scrobble (artist, track) pairs from a CSV file to Last.fm.",
        epilog=CREDENTIALS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("csv_file", nargs="?", help="CSV file to read (default: standard input)")
    p.add_argument("-k", "--api-key", help="Last.fm API key (required)")
    p.add_argument("-s", "--api-secret", help="Last.fm API secret (required)")
    p.add_argument("-u", "--username", help="Last.fm username (required)")
    p.add_argument("-p", "--password", help="Last.fm password (required)")
    p.add_argument("-d", "--delimiter", default=",", help='CSV delimiter (default: ",")')
    p.add_argument(
        "-H",
        "--header",
        action="store_true",
        help="CSV has header row (recognised headers: artist, track, title)",
    )
    p.add_argument("-D", "--debug", action="store_true", help="Show debug output")
    return p


def main(argv: list[str] | None = None, stdin: TextIO | None = None, client: LastFmClient | None = None) -> int:
    """Run the command line tool and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))

    try:
        settings = Settings.from_args(args)
    except ArgumentError as e:
        sys.stderr.write(f"Error: {e.message}\n")
        return 1

    configure_logging(settings.log_level)
    log.debug("Settings: %s", settings)

    try:
        _run(settings, client=client, stdin=stdin)
    except ScrobblerError as e:
        log.error("Error: %s", e.message)
        if settings.debug:
            raise
        return 1

    return 0


def run():
    """Entry point for scrobble-me-this command."""
    sys.exit(main())
