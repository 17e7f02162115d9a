"""Core result data structures for the linter."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List


@dataclass(frozen=True)
class Violation:
    """Capture a single failed rule for one path."""

    path: Path
    rule: str
    message: str

    def to_dict(self, root: Path) -> Dict[str, str]:
        data = asdict(self)
        data["path"] = relative_display(self.path, root)
        return data


@dataclass
class LintReport:
    """Bundle the violations collected during one run."""

    root: Path
    violations: List[Violation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations

    def add_violation(self, violation: Violation) -> None:
        self.violations.append(violation)

    def sorted_violations(self) -> List[Violation]:
        """Return violations in a stable order, independent of arrival."""

        return sorted(self.violations, key=lambda item: (str(item.path), item.rule, item.message))

    def to_dict(self) -> Dict[str, object]:
        return {
            "root": str(self.root),
            "summary": {"violations": len(self.violations)},
            "violations": [violation.to_dict(self.root) for violation in self.sorted_violations()],
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        return 0 if self.passed else 1


def relative_display(path: Path, root: Path) -> str:
    """Render ``path`` relative to ``root`` with a leading ``./``."""

    relative = os.path.relpath(path, root)
    if relative == os.curdir:
        return os.curdir
    return f"{os.curdir}{os.sep}{relative}"


def format_violation(violation: Violation, root: Path) -> str:
    return f"{relative_display(violation.path, root)}: {violation.message}"
