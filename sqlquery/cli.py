# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# COMMANDS:
# ---------
# 1. Run one collection cycle:
#    python -m sqlquery.cli gather
#
# 2. Collect periodically:
#    python -m sqlquery.cli run --interval 30 --cycles 10
#
# 3. Print a sample configuration:
#    python -m sqlquery.cli sample-config
#
# Configuration comes from the environment / .env (see config.py).
# ==============================================

import argparse
import logging
import sys
from typing import List, Optional

from sqlquery.config import get_config, sample_config
from sqlquery.exceptions import SqlQueryError
from sqlquery.pipeline import CollectionPipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sqlquery", description="Perform SQL query and read results")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("gather", help="run one collection cycle")

    run = commands.add_parser("run", help="collect periodically")
    run.add_argument("--interval", type=float, default=None, help="seconds between cycles")
    run.add_argument("--cycles", type=int, default=None, help="stop after N cycles")

    commands.add_parser("sample-config", help="print a sample configuration")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(asctime)s] %(levelname)s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr
    )

    if args.command == "sample-config":
        print(sample_config(), end="")
        return 0

    try:
        config = get_config()
        if args.command == "run" and args.interval is not None:
            config.interval_seconds = args.interval
        with CollectionPipeline(config) as pipeline:
            if args.command == "gather":
                result = pipeline.run_once()
                logging.getLogger(__name__).info(
                    "Emitted %d rows from %d queries", result.total_rows, len(result.rows_per_query)
                )
            else:
                pipeline.run(max_cycles=args.cycles)
    except SqlQueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
