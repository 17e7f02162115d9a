"""Back-to-top anchor detection for a single document.

A valid page opens with an anchor definition such as ``.. _admin-top:`` and
somewhere after it carries the back-reference line built from the same
label. Only the first line and verbatim line matches are considered; the
markup in between is never parsed.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

ANCHOR_MISSING_MESSAGE = "Anchor not found at top of page."
BACKREF_MISSING_MESSAGE = "'Back to top' link to anchor not found."
DEFAULT_BACKREF_TEMPLATE = ":ref:`Back to the top <{label}>`"


class AnchorState(str, Enum):
    """Detection states for the opening anchor."""

    AWAITING_FIRST_LINE = "awaiting_first_line"
    ANCHOR_FOUND = "anchor_found"
    ANCHOR_MISSING = "anchor_missing"


def parse_anchor(line: str) -> Optional[str]:
    """Return the label defined by ``line``, or ``None`` if it is not an anchor."""

    fields = line.split()
    if len(fields) != 2 or fields[0] != "..":
        return None
    target = fields[1]
    if not (target.startswith("_") and target.endswith(":")):
        return None
    return target[1:-1]


class AnchorChecker:
    """Single forward pass over the lines of one document."""

    def __init__(self, backref_template: str = DEFAULT_BACKREF_TEMPLATE) -> None:
        self._backref_template = backref_template
        self.state = AnchorState.AWAITING_FIRST_LINE
        self.label: Optional[str] = None
        self.backref_found = False
        self._expected: Optional[str] = None

    def feed(self, line: str) -> None:
        if self.state is AnchorState.AWAITING_FIRST_LINE:
            self.label = parse_anchor(line)
            if self.label is None:
                self.state = AnchorState.ANCHOR_MISSING
            else:
                self.state = AnchorState.ANCHOR_FOUND
                self._expected = self._backref_template.format(label=self.label)
            return
        if self.state is AnchorState.ANCHOR_FOUND and not self.backref_found:
            if line == self._expected:
                self.backref_found = True

    def verdict(self) -> Optional[str]:
        """Return the failure message, or ``None`` when the page is valid."""

        if self.state is not AnchorState.ANCHOR_FOUND:
            return ANCHOR_MISSING_MESSAGE
        if not self.backref_found:
            return BACKREF_MISSING_MESSAGE
        return None


def check_lines(lines: Iterable[str], backref_template: str = DEFAULT_BACKREF_TEMPLATE) -> Optional[str]:
    """Run a fresh checker over ``lines`` and return its verdict."""

    checker = AnchorChecker(backref_template)
    for line in lines:
        checker.feed(line)
    return checker.verdict()
