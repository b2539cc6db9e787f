"""Parsing of shell history files into executed-command records."""

from __future__ import annotations

import re
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from loguru import logger

# zsh extended history: ": <epoch>:<elapsed>;<command>"; plain lines have no prefix.
HISTORY_LINE = re.compile(r"^(: (?P<time>\d{10}):\d+;)?(?P<cmd>.*)")


class HistoryFileError(RuntimeError):
    """Raised when a history file cannot be opened or read."""


class ExecutedCommand(NamedTuple):
    """One line of history: the command's arguments and when it ran, if known."""

    args: Tuple[str, ...]
    time: Optional[int] = None

    @property
    def command(self) -> str:
        return " ".join(self.args)


def parse_line(line: str) -> Optional[ExecutedCommand]:
    match = HISTORY_LINE.match(line)
    if match is None:
        return None
    time = match.group("time")
    return ExecutedCommand(
        args=tuple(match.group("cmd").split()),
        time=int(time) if time is not None else None,
    )


def parse_history(lines: Iterable[str]) -> List[ExecutedCommand]:
    """Parse history lines into commands, one per line."""

    commands: List[ExecutedCommand] = []
    for line in lines:
        parsed = parse_line(line.rstrip("\r\n"))
        if parsed is not None:
            commands.append(parsed)
    return commands


def _decoded_lines(handle: BinaryIO) -> Iterator[str]:
    for number, raw in enumerate(handle, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Skipping unparseable history line {}", number)


def read_history(path: Path) -> List[ExecutedCommand]:
    """Read and parse the history file at ``path``, dropping lines that aren't UTF-8."""

    try:
        with Path(path).open("rb") as handle:
            commands = parse_history(_decoded_lines(handle))
    except OSError as exc:
        raise HistoryFileError(f"Unable to open history file {path}: {exc}") from exc
    logger.debug("Read {} commands from {}", len(commands), path)
    return commands
