"""Per-entry rule evaluation."""

from __future__ import annotations

from typing import Callable, List, Sequence

from .config import LintConfig
from .entry import Entry
from .result import Violation
from .rules import Rule
from .rules.anchor import AnchorRule
from .rules.file_type import FileTypeRule
from .rules.placement import PlacementRule


def load_rules() -> List[Rule]:
    return [
        FileTypeRule(),
        PlacementRule(),
        AnchorRule(),
    ]


class RuleEngine:
    """Run every rule against one entry; rules are independent of each other."""

    def __init__(self, config: LintConfig, rules: Sequence[Rule] | None = None) -> None:
        self.config = config
        self.rules: Sequence[Rule] = tuple(rules) if rules is not None else tuple(load_rules())

    def evaluate(self, entry: Entry) -> List[Violation]:
        violations: List[Violation] = []
        self.emit(entry, violations.append)
        return violations

    def emit(self, entry: Entry, sink: Callable[[Violation], None]) -> None:
        """Hand each violation for ``entry`` to ``sink`` as soon as it is found."""

        for rule in self.rules:
            violation = rule.check(entry, self.config)
            if violation is not None:
                sink(violation)
