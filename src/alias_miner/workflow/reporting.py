"""Plain-text rendering of ranked suggestions."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from alias_miner.suggest import Suggestion

HEADERS = ("Command", "Uses", "Rank", "Last Used", "Average Time of Use", "Time σ")
TIME_FORMAT = "%Y-%m-%d %I:%M%p"


def _format_time(value: Optional[datetime], missing: str) -> str:
    return value.strftime(TIME_FORMAT) if value is not None else missing


def format_row(suggestion: Suggestion) -> List[str]:
    if suggestion.std_time is not None:
        deviation = f"{int(suggestion.std_time.total_seconds() // 3600)} hours"
    else:
        deviation = "N/A"
    return [
        suggestion.command,
        str(suggestion.uses),
        f"{suggestion.rank:.2f}",
        _format_time(suggestion.last_executed, "Unknown"),
        _format_time(suggestion.mean_time, "N/A"),
        deviation,
    ]


def build_table(suggestions: Iterable[Suggestion]) -> str:
    """Lay suggestions out as an aligned text table with a header row."""

    rows: List[Sequence[str]] = [HEADERS]
    rows.extend(format_row(suggestion) for suggestion in suggestions)
    widths = [max(len(row[column]) for row in rows) for column in range(len(HEADERS))]

    def _line(row: Sequence[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()

    separator = "-+-".join("-" * width for width in widths)
    return "\n".join([_line(rows[0]), separator, *(_line(row) for row in rows[1:])])


class SuggestionReporter:
    """Formats suggestion results for terminal output."""

    def report(self, suggestions: Sequence[Suggestion], history_label: str) -> str:
        logger.info("Suggesting {} aliases from {}", len(suggestions), history_label)
        return build_table(suggestions)
