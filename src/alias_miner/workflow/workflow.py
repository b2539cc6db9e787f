from typing import List, Optional

from alias_miner.history import read_history
from alias_miner.suggest import Suggestion, build, suggest
from alias_miner.workflow.configuration import SuggestConfig
from alias_miner.workflow.reporting import SuggestionReporter


class SuggestionWorkflow:
    """High-level façade that ties reading, ranking and reporting together."""

    def __init__(
        self,
        config: SuggestConfig,
        reporter: Optional[SuggestionReporter] = None,
    ) -> None:
        self._config = config
        self._reporter = reporter or SuggestionReporter()

    def suggestions(self) -> List[Suggestion]:
        commands = read_history(self._config.history_file)
        trie = build(commands)
        return suggest(trie, self._config.count, self._config.build_strategy())

    def execute(self) -> str:
        return self._reporter.report(self.suggestions(), str(self._config.history_file))
