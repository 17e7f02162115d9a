"""Only markup pages, and images inside an images directory, are allowed."""

from __future__ import annotations

from typing import Optional

from docmatica.config import LintConfig
from docmatica.entry import Entry
from docmatica.result import Violation


class FileTypeRule:
    """Flag files that are neither markup nor images in the images directory."""

    name = "file_type"

    def check(self, entry: Entry, config: LintConfig) -> Optional[Violation]:
        if entry.is_dir:
            return None
        if entry.extension == config.markup_extension:
            return None
        if entry.parent == config.images_dir and entry.extension in config.image_extensions:
            return None
        return Violation(path=entry.path, rule=self.name, message=self._build_message(config))

    def _build_message(self, config: LintConfig) -> str:
        images = " or ".join(config.image_extensions)
        return (
            f"Does not have a {config.markup_extension} file extension or a {images} extension "
            f"while nested in an '{config.images_dir}' directory."
        )
