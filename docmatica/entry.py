"""File-system entries visited by the walker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One node of the scanned tree, read-only once produced."""

    path: Path
    name: str
    is_dir: bool
    extension: str
    parent: str

    @classmethod
    def from_path(cls, path: Path, is_dir: bool) -> "Entry":
        return cls(
            path=path,
            name=path.name,
            is_dir=is_dir,
            extension=path.suffix,
            parent=path.parent.name,
        )
