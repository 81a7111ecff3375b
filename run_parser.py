#!/usr/bin/env python3
# run_parser.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Command-line interface for Galileo model parsing with configurable logging levels

import sys
import argparse
from collections import Counter
from pathlib import Path
from typing import Dict

from galileo import FaultTree, ParseError, parse_file
from galileo.ast_nodes import Gate
from utils.logger import configure_logging, get_logger
from utils.model_reader import ModelFileError


def summarize(tree: FaultTree) -> Dict[str, int]:
    """Count gates by operation and basic events.

    Args:
        tree: Parsed model

    Returns:
        Mapping from entity kind label to count, in a stable order
    """
    counts: Counter = Counter()
    for entity in tree.entities:
        if isinstance(entity, Gate):
            counts[f"{type(entity.operation).__name__} gates"] += 1
        else:
            counts["Basic events"] += 1

    ordered = {"Or gates": 0, "And gates": 0, "VotingOf gates": 0, "Basic events": 0}
    ordered.update(counts)
    return ordered


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Galileo dynamic fault tree model parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_parser.py model.dft
  python run_parser.py model.dft --check
  python run_parser.py model.dft --summary -v
  python run_parser.py model.dft --debug

Model file format:
  model.dft:
    toplevel System;
    System or Pump Valve;
    Pump lambda=0.001 dorm=0.5;
    Valve ph=[-2, 2; 0, 0] failurestates=1;
        """,
    )

    parser.add_argument("model", type=Path, help="Path to Galileo model file")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check", action="store_true", help="Only check that the model parses"
    )
    mode.add_argument(
        "--summary", action="store_true", help="Print entity counts instead of the model"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the model parser.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        tree = parse_file(args.model)

        if args.check:
            logger.model_loaded(str(args.model), tree.top_event, len(tree.entities))
            print(f"{args.model}: OK")
            return 0

        if args.summary:
            logger.model_loaded(str(args.model), tree.top_event, len(tree.entities))
            for kind, count in summarize(tree).items():
                print(f"{kind}: {count}")
            return 0

        print(str(tree), end="")
        return 0

    except ModelFileError as e:
        logger.error(f"Model file error: {e}")
        return 1

    except ParseError as e:
        logger.parse_failure(str(args.model), str(e))
        return 2

    except KeyboardInterrupt:
        logger.error("Parsing interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
