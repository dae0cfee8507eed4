from __future__ import annotations

import argparse
import logging
import random

from rich.console import Console
from rich.logging import RichHandler

from .queue import DEFAULT_INTERVAL_WEIGHT, DEFAULT_PROCESS_WEIGHT, ProcessQueue
from .report import build_process_table, format_line_lengths, format_statistics

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="queue-cli",
        description="Single-server FIFO queue simulator with wait-time statistics.",
    )
    parser.add_argument(
        "--size",
        "-n",
        type=int,
        default=100,
        help="Number of processes generated when the queue is built (default: 100).",
    )
    parser.add_argument(
        "--extra",
        "-e",
        type=int,
        default=1,
        help="Processes appended one at a time after the queue is built (default: 1).",
    )
    parser.add_argument(
        "--process-weight",
        type=float,
        default=DEFAULT_PROCESS_WEIGHT,
        help=f"Mean execution time of a process (default: {DEFAULT_PROCESS_WEIGHT}).",
    )
    parser.add_argument(
        "--interval-weight",
        type=float,
        default=DEFAULT_INTERVAL_WEIGHT,
        help=f"Mean time between arrivals (default: {DEFAULT_INTERVAL_WEIGHT}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random number generator, for reproducible runs.",
    )
    parser.add_argument(
        "--show-processes",
        action="store_true",
        help="Also print a table of every generated process.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every generated process.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_report(queue: ProcessQueue, console: Console, show_processes: bool) -> None:
    if show_processes:
        console.print(build_process_table(queue.processes))
        console.print()

    console.print("Wait time statistics:", highlight=False, soft_wrap=True)
    for line in format_statistics(queue.compute_statistics()):
        console.print(line, highlight=False, soft_wrap=True)

    console.print()

    for line in format_line_lengths(queue.compute_line_length()):
        console.print(line, highlight=False, soft_wrap=True)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if args.extra < 0:
        parser.error(f"--extra must be non-negative, got {args.extra}")

    rng = random.Random(args.seed)
    logger.info(
        "Building queue: size=%d extra=%d process_weight=%s interval_weight=%s seed=%s",
        args.size,
        args.extra,
        args.process_weight,
        args.interval_weight,
        args.seed,
    )

    try:
        queue = ProcessQueue(
            size=args.size,
            process_weight=args.process_weight,
            interval_weight=args.interval_weight,
            rng=rng,
        )
    except ValueError as exc:
        parser.error(str(exc))

    for _ in range(args.extra):
        queue.append()

    _print_report(queue, Console(), args.show_processes)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
