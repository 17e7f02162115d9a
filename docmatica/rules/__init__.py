"""Rule registry for the linter."""

from __future__ import annotations

from typing import Optional, Protocol

from docmatica.config import LintConfig
from docmatica.entry import Entry
from docmatica.result import Violation


class Rule(Protocol):
    """Protocol implemented by all rule evaluators."""

    name: str

    def check(self, entry: Entry, config: LintConfig) -> Optional[Violation]:
        """Return a violation for ``entry``, or ``None`` when it passes."""
