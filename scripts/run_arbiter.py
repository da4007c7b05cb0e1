#!/usr/bin/env python3
"""Referee Hanabi games from a command transcript and print per-game counters."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / ".env")

from src.arbiter import ArbiterError, GameArbiter, format_result, parse_commands

logger = logging.getLogger("run_arbiter")


def run(lines: TextIO, out: TextIO, as_json: bool = False) -> int:
    """Feed command lines to a fresh arbiter. Returns the number of games reported."""
    arbiter = GameArbiter()
    games = 0
    for result in arbiter.run_games(parse_commands(lines)):
        games += 1
        if as_json:
            print(result.model_dump_json(), file=out)
        else:
            print(format_result(result), file=out)
    return games


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input", "-i", type=Path, default=None,
                        help="Command transcript (default: stdin)")
    parser.add_argument("--json", action="store_true",
                        help="Print each result as a JSON object")
    parser.add_argument("--log-level", default=os.getenv("HANABI_LOG_LEVEL", "WARNING"),
                        help="Logging level for diagnostics on stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.input is not None:
            with open(args.input) as f:
                games = run(f, sys.stdout, as_json=args.json)
        else:
            games = run(sys.stdin, sys.stdout, as_json=args.json)
    except ArbiterError as e:
        logger.error("Rejected input: %s", e)
        return 1

    logger.info("Reported %d games", games)
    return 0


if __name__ == "__main__":
    sys.exit(main())
