from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="buildtrend")

    parser.add_argument(
        "--history",
        default="buildtrend.yml",
        help="Path to build history file, newest build first",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # status
    subparsers.add_parser("status", help="Show anticipated build status")

    # tasks
    subparsers.add_parser("tasks", help="List tasks of the newest build")

    return parser
