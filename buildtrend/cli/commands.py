from __future__ import annotations

import argparse
import logging
import sys

from buildtrend.history import FileHistorySource, HistoryError, load_history
from buildtrend.status import StatusError, get_public_build_status
from buildtrend.trend import BuildResult

from .args import build_parser


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)

        match args.command:
            case "status":
                return cmd_status(args)
            case "tasks":
                return cmd_tasks(args)
            case _:
                return 2

    except (HistoryError, StatusError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def main() -> None:
    sys.exit(run_cli())


def cmd_status(args: argparse.Namespace) -> int:
    result = get_public_build_status(FileHistorySource(args.history))
    status = result.anticipated_build_status
    print(f"anticipated: {status.value}")
    return 0 if status == BuildResult.SUCCEEDED else 1


def cmd_tasks(args: argparse.Namespace) -> int:
    history = load_history(args.history)
    if not history:
        return 0

    for entry in history[0]:
        task = entry.task
        suffix = " (flaky)" if task.flaky else ""
        print(f"{task.name} {task.status.value}{suffix}")
    return 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
