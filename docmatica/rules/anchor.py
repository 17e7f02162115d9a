"""Require a page anchor on the first line and a back-to-top link to it."""

from __future__ import annotations

import logging
from typing import Optional

from docmatica.anchors import check_lines
from docmatica.config import LintConfig
from docmatica.entry import Entry
from docmatica.result import Violation
from docmatica.utils import iter_text_lines

logger = logging.getLogger(__name__)


class AnchorRule:
    """Read a markup page and run the anchor checker over its lines."""

    name = "anchor"

    def check(self, entry: Entry, config: LintConfig) -> Optional[Violation]:
        if entry.is_dir or entry.extension != config.markup_extension:
            return None
        try:
            message = check_lines(iter_text_lines(entry.path), config.backref_template)
        except OSError as exc:
            logger.debug("Could not read %s: %s", entry.path, exc)
            message = f"Could not read file: {exc.strerror or exc}"
        if message is None:
            return None
        return Violation(path=entry.path, rule=self.name, message=message)
