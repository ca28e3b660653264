#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from zonesync import __version__
from zonesync.app import SyncError, sync_dns
from zonesync.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zonesync",
        description=(
            "Synchronise RouterOS static DNS entries with Nomad services. "
            "Configured through NOMAD_TAG, ROS_ADDRESS, ROS_USERNAME, ROS_PASSWORD "
            "and DNS_DOMAIN."
        ),
        epilog=f"zonesync {__version__}",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    _parse_args(argv if argv is not None else sys.argv[1:])

    try:
        result = sync_dns()
    except SyncError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(1)

    if not result.changed:
        log.info("Zone already up to date")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(1)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
