"""Lint configuration: the directory names, extensions and templates checked."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from .anchors import DEFAULT_BACKREF_TEMPLATE
from .utils import read_yaml_file

DEFAULT_CONFIG_FILENAME = ".docmatica.yaml"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be applied."""


@dataclass(frozen=True)
class LintConfig:
    """Immutable set of constants shared by the walker and the rules."""

    docs_root: str = "archivematica-docs"
    manual_roots: Tuple[str, ...] = ("admin-manual", "getting-started", "user-manual")
    images_dir: str = "images"
    image_extensions: Tuple[str, ...] = (".png", ".svg")
    markup_extension: str = ".rst"
    ignored_files: Tuple[str, ...] = (
        "requirements.txt",
        "README.md",
        "Makefile",
        "LICENCE",
        "issue_template.md",
        "conf.py",
    )
    skipped_dirs: Tuple[str, ...] = ("locale", "_static")
    index_page: str = "index"
    contents_page: str = "contents"
    backref_template: str = DEFAULT_BACKREF_TEMPLATE

    @property
    def chapter_roots(self) -> Tuple[str, ...]:
        """Directories whose direct children must be index pages only."""

        return (self.docs_root,) + tuple(self.manual_roots)

    def page_name(self, stem: str) -> str:
        return f"{stem}{self.markup_extension}"

    def overlay(self, data: Dict[str, Any]) -> "LintConfig":
        """Return a copy with the keys of ``data`` replacing the defaults."""

        known = {item.name for item in fields(self)}
        changes: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                raise ConfigError(f"Unknown configuration key: {key}")
            default = getattr(self, key)
            if isinstance(default, tuple):
                if isinstance(value, str) or not isinstance(value, (list, tuple)):
                    raise ConfigError(f"Configuration key {key} expects a list")
                value = tuple(str(item) for item in value)
            elif not isinstance(value, str):
                raise ConfigError(f"Configuration key {key} expects a string")
            if key == "backref_template":
                _check_template(value)
            changes[key] = value
        return replace(self, **changes)


def _check_template(template: str) -> None:
    try:
        template.format(label="label")
    except (KeyError, IndexError, ValueError, AttributeError) as exc:
        raise ConfigError(f"Invalid backref_template {template!r}: {exc}") from exc


def load_config(path: Path | None = None, root: Path | None = None) -> LintConfig:
    """Build the configuration for a run.

    An explicit ``path`` must exist. Without one, ``.docmatica.yaml`` in the
    scan ``root`` is used when present, otherwise the defaults apply.
    """

    config = LintConfig()
    if path is None:
        if root is None:
            return config
        path = root / DEFAULT_CONFIG_FILENAME
        if not path.is_file():
            return config
    elif not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        data = read_yaml_file(path)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read configuration {path}: {exc}") from exc
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration at {path} is not a mapping")
    return config.overlay(data)