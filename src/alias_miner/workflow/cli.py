"""Command line interface: ``alias-miner suggest HISTORY_FILE COUNT``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from alias_miner.history import HistoryFileError
from alias_miner.suggest import RankingStrategyType
from alias_miner.workflow.configuration import ConfigError, ConfigLoader, SuggestConfig
from alias_miner.workflow.workflow import SuggestionWorkflow


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alias-miner",
        description="Suggest shell aliases from frequently used command prefixes.",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    suggest_parser = subcommands.add_parser("suggest", help="print a table of suggested aliases")
    suggest_parser.add_argument("history_file", type=Path, help="history file to mine")
    suggest_parser.add_argument("count", type=int, help="number of aliases to suggest")
    suggest_parser.add_argument(
        "--strategy",
        choices=[kind.value for kind in RankingStrategyType],
        default=None,
        help="ranking strategy (default: feature_weighted)",
    )
    suggest_parser.add_argument(
        "--config", type=Path, default=None, help="YAML file with ranking settings"
    )
    suggest_parser.add_argument(
        "-v", "--verbose", action="store_true", help="log extraction details"
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def _load_config(args: argparse.Namespace) -> SuggestConfig:
    overrides = {
        "history_file": args.history_file,
        "count": args.count,
        "strategy": args.strategy,
    }
    if args.config is not None:
        return ConfigLoader().load(args.config, overrides)
    return SuggestConfig.model_validate({k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = _load_config(args)
        table = SuggestionWorkflow(config).execute()
    except (ConfigError, HistoryFileError, ValidationError) as exc:
        logger.error("Encountered error: {}", exc)
        return 1

    print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
