"""Example script comparing the ranking strategies on a small inline history."""

from __future__ import annotations

import textwrap

from alias_miner.history import parse_history
from alias_miner.suggest import RankingStrategyType, build, suggest
from alias_miner.workflow.configuration import SuggestConfig
from alias_miner.workflow.reporting import build_table

SAMPLE_HISTORY = textwrap.dedent(
    """\
    : 1556993411:0;cargo fmt
    : 1556991281:0;cargo build --release
    : 1556994001:0;cargo build --release
    : 1556995120:0;git commit --amend --no-edit
    : 1556995190:0;git commit --amend --no-edit
    : 1556995230:0;git push --force-with-lease origin HEAD
    : 1556996002:0;docker compose up --build --detach
    ls -la
    ls -la
    cd ..
    """
).splitlines()


def demo_strategies(count: int = 5) -> None:
    commands = parse_history(SAMPLE_HISTORY)
    for kind in RankingStrategyType:
        config = SuggestConfig(count=count, strategy=kind)
        suggestions = suggest(build(commands), config.count, config.build_strategy())
        print(f"\n{'=' * 60}\nStrategy: {kind.value}\n{'=' * 60}")
        print(build_table(suggestions))


if __name__ == "__main__":
    demo_strategies()
