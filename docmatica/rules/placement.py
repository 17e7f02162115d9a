"""Keep content pages inside chapter directories."""

from __future__ import annotations

from typing import Optional

from docmatica.config import LintConfig
from docmatica.entry import Entry
from docmatica.result import Violation

NOT_IN_CHAPTER_MESSAGE = "Not found in chapter directory."


class PlacementRule:
    """Allow only index pages (and the top-level contents page) at a manual root."""

    name = "placement"

    def check(self, entry: Entry, config: LintConfig) -> Optional[Violation]:
        if entry.is_dir or entry.extension != config.markup_extension:
            return None
        if entry.parent not in config.chapter_roots:
            return None
        if entry.name == config.page_name(config.index_page):
            return None
        if entry.parent == config.docs_root and entry.name == config.page_name(config.contents_page):
            return None
        return Violation(path=entry.path, rule=self.name, message=NOT_IN_CHAPTER_MESSAGE)
