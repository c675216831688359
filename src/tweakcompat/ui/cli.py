from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from tweakcompat.app import sync_submissions
from tweakcompat.config import ConfigurationError, configure_logging
from tweakcompat.domain.model import RunMode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile tweak compatibility submissions into the JSON catalog"
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=[mode.value for mode in RunMode],
        default=RunMode.PROCESS.value,
        help=(
            "'process' handles new open issues and labels them; "
            "'rebuild' wipes the catalog and replays closed issues (default: %(default)s)"
        ),
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding tweaks.json and the published json/ tree",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    if parsed_args.verbose:
        configure_logging(level=logging.DEBUG, force=True)

    try:
        sync_submissions(RunMode(parsed_args.mode), data_dir=parsed_args.data_dir)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during run")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
