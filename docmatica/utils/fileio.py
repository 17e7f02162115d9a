"""Basic file IO helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

import yaml


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def iter_text_lines(path: Path) -> Iterator[str]:
    """Yield the lines of ``path`` without their line terminators.

    Lines end at ``\n`` only; one carriage return before it is dropped.
    The handle is closed when the generator is exhausted or discarded.
    Undecodable bytes are replaced rather than raised.
    """

    with path.open("r", encoding="utf-8", errors="replace", newline="\n") as handle:
        for line in handle:
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            yield line
