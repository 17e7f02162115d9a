"""Docmatica: a structural linter for archivematica-docs style trees."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("docmatica")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

__all__ = ["__version__"]
