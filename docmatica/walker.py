"""Tree traversal, exclusion policy and dispatch of per-entry work."""

from __future__ import annotations

import logging
import os
from concurrent.futures import Executor, Future
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, List

from .config import LintConfig
from .engine import RuleEngine
from .entry import Entry
from .result import Violation, relative_display

logger = logging.getLogger(__name__)


class Decision(str, Enum):
    """Outcome of the exclusion policy for one entry."""

    INCLUDE = "include"
    SKIP_ENTRY = "skip_entry"
    SKIP_SUBTREE = "skip_subtree"


def classify(entry: Entry, config: LintConfig) -> Decision:
    """Decide whether ``entry`` is linted, skipped, or pruned with its subtree."""

    skipped = Decision.SKIP_SUBTREE if entry.is_dir else Decision.SKIP_ENTRY
    if entry.name.startswith((".", "_")):
        return skipped
    if entry.parent == config.docs_root:
        if entry.is_dir and entry.name in config.skipped_dirs:
            return Decision.SKIP_SUBTREE
        if entry.name in config.ignored_files:
            return Decision.SKIP_ENTRY
    return Decision.INCLUDE


def iter_entries(root: Path, config: LintConfig) -> Iterator[Entry]:
    """Yield every included entry below ``root``, parents before children.

    The root itself is not yielded. Unreadable directories are logged and
    skipped without stopping the walk.
    """

    def _log_error(error: OSError) -> None:
        location = relative_display(Path(error.filename), root) if error.filename else str(root)
        logger.warning("Error with path %s: %s", location, error.strerror or error)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_error):
        base = Path(dirpath)
        kept: List[str] = []
        for name in sorted(dirnames):
            path = base / name
            # Symlinked directories are not followed and are linted as files.
            entry = Entry.from_path(path, is_dir=not path.is_symlink())
            decision = classify(entry, config)
            if decision is Decision.SKIP_SUBTREE:
                logger.debug("Skipping subtree %s", relative_display(entry.path, root))
                continue
            if entry.is_dir:
                kept.append(name)
            if decision is Decision.INCLUDE:
                yield entry
        dirnames[:] = kept
        for name in sorted(filenames):
            entry = Entry.from_path(base / name, is_dir=False)
            if classify(entry, config) is Decision.INCLUDE:
                yield entry


class Walker:
    """Submit one evaluation unit per included entry without waiting on it."""

    def __init__(self, root: Path, config: LintConfig, engine: RuleEngine, executor: Executor) -> None:
        self.root = root
        self.config = config
        self.engine = engine
        self.executor = executor

    def dispatch(self, sink: Callable[[Violation], None]) -> List[Future]:
        """Walk the tree and return the futures of every dispatched unit."""

        futures: List[Future] = []
        for entry in iter_entries(self.root, self.config):
            logger.debug("Dispatching %s", relative_display(entry.path, self.root))
            futures.append(self.executor.submit(self.engine.emit, entry, sink))
        logger.info("Dispatched %d entries under %s", len(futures), self.root)
        return futures
