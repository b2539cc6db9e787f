"""Reading shell history files."""

from alias_miner.history.parser import (
    HISTORY_LINE,
    ExecutedCommand,
    HistoryFileError,
    parse_history,
    parse_line,
    read_history,
)

__all__ = [
    "HISTORY_LINE",
    "ExecutedCommand",
    "HistoryFileError",
    "parse_history",
    "parse_line",
    "read_history",
]
