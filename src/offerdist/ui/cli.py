from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from offerdist.adapters.rdflib_store import RdflibGraphStore
from offerdist.app import distribute_offerings
from offerdist.config import ConfigurationError, configure_logging
from offerdist.domain.distribution import Phase, check_batch_size

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from offerdist.domain.distribution import ReconciliationResult

log = logging.getLogger(__name__)

INTERRUPTED_EXIT_CODE = 130

COMMAND_PHASES: dict[str, Phase | None] = {
    "distribute": None,
    "clean-suppliers-without-constraints": Phase.CLEANUP_UNCONSTRAINED,
    "add-suppliers": Phase.FILL_CONSTRAINED,
    "remove-suppliers": Phase.TRIM_CONSTRAINED,
}

COMMAND_HELP: dict[str, str] = {
    "distribute": "Run every distribution phase in order",
    "clean-suppliers-without-constraints": "Drop links to businesses without constraints",
    "add-suppliers": "Add links allowed by business constraints",
    "remove-suppliers": "Drop links excluded by business constraints",
}


def _batch_size(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid batch size: {value}") from exc
    try:
        return check_batch_size(parsed)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--batch-size",
        type=_batch_size,
        default=None,
        help="Links rewritten per store request (defaults to config)",
    )
    common.add_argument(
        "--graph-file",
        type=Path,
        help="Reconcile a local Turtle file instead of the SPARQL endpoint",
    )
    common.add_argument(
        "--output",
        type=Path,
        help="Where to write the reconciled graph (defaults to --graph-file)",
    )

    parser = argparse.ArgumentParser(description="Distribute offerings over business entities")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for command, help_text in COMMAND_HELP.items():
        subparsers.add_parser(command, parents=[common], help=help_text)

    args = parser.parse_args(list(argv))
    if args.output is not None and args.graph_file is None:
        parser.error("--output requires --graph-file")
    return args


def _run(args: argparse.Namespace) -> ReconciliationResult:
    phase = COMMAND_PHASES[args.command]
    if args.graph_file is None:
        return distribute_offerings(phase, batch_size=args.batch_size)

    local_store = RdflibGraphStore.from_file(args.graph_file)
    result = distribute_offerings(phase, store=local_store, batch_size=args.batch_size)
    if result.succeeded:
        local_store.save(args.output or args.graph_file)
    return result


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        configure_logging()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(2)
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        result = _run(parsed_args)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during distribution")
        sys.exit(1)

    if result.failure is not None:
        log.error(
            "Distribution failed during phase %s: %s",
            result.failure.phase,
            result.failure.error,
        )
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.warning("Interrupted by user (Ctrl+C); the run did not finish")
    sys.exit(INTERRUPTED_EXIT_CODE)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
