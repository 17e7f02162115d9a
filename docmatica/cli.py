"""Command-line entry point for the docmatica linter."""

from __future__ import annotations

import argparse
import json
import logging
import os
from concurrent.futures import ThreadPoolExecutor, wait
from pathlib import Path
from typing import List, TextIO

from . import __version__
from .aggregator import Aggregator
from .config import ConfigError, LintConfig, load_config
from .engine import RuleEngine
from .result import LintReport
from .walker import Walker

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = min(32, (os.cpu_count() or 1) + 4)

CHECKS_EPILOG = """\
The following checks will be performed:
- All files found have extension .rst or .svg or .png in an images directory.
- All .rst files are nested within chapter directories, except:
    * index.rst files, which can be in the root of manuals or the root of the repository.
    * contents.rst files, which can be in the root of the repository.
- All .rst files have 'Back to Top' anchors.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docmatica",
        description=(
            f"Docmatica {__version__}: a linter for archivematica-docs. "
            "Works best when run at the root of the archivematica-docs repository."
        ),
        epilog=CHECKS_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Directory to lint. Defaults to the current working directory.",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="YAML file overriding the built-in directory names and extensions.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help="Number of worker threads evaluating entries.",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write a JSON report (e.g., artifacts/lint.json).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log traversal and dispatch details to stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_root(path: str | None) -> Path:
    """Return the absolute scan root, raising ``NotADirectoryError`` if unusable."""

    root = Path(path) if path else Path(os.getcwd())
    root = root.resolve()
    if not root.is_dir():
        raise NotADirectoryError(f"{root} is not a directory")
    return root


def run_lint(root: Path, config: LintConfig, workers: int = DEFAULT_WORKERS, stream: TextIO | None = None) -> LintReport:
    """Walk ``root``, evaluate every entry concurrently and collect the report."""

    engine = RuleEngine(config)
    aggregator = Aggregator(root, stream=stream).start()
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="docmatica") as executor:
        futures = Walker(root, config, engine, executor).dispatch(aggregator.submit)
        wait(futures)
    aggregator.close()
    aggregator.verdict()
    for future in futures:
        future.result()
    return aggregator.report


def write_output(report: LintReport, output_path: str | None) -> None:
    if not output_path:
        return
    payload = json.dumps(report.to_dict(), indent=2)
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(payload, encoding="utf-8")
    logger.info("Report written to %s", output_path)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    try:
        root = resolve_root(args.path)
    except OSError as exc:
        parser.error(f"Unable to resolve the directory to lint: {exc}")
    try:
        config = load_config(Path(args.config_path) if args.config_path else None, root=root)
    except ConfigError as exc:
        parser.error(str(exc))

    report = run_lint(root, config, workers=args.workers)
    write_output(report, args.output_path)
    logger.info("%d violation(s) found under %s", len(report.violations), root)
    return report.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
