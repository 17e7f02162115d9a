from pathlib import Path

from docmatica.config import LintConfig
from docmatica.entry import Entry
from docmatica.rules.file_type import FileTypeRule

CONFIG = LintConfig()


def _entry(path: str, is_dir: bool = False) -> Entry:
    return Entry.from_path(Path(path), is_dir=is_dir)


def test_directories_always_pass():
    assert FileTypeRule().check(_entry("/docs/weird.dir", is_dir=True), CONFIG) is None


def test_markup_files_pass_anywhere():
    assert FileTypeRule().check(_entry("/docs/user-manual/ingest/ingest.rst"), CONFIG) is None
    assert FileTypeRule().check(_entry("/docs/images/stray.rst"), CONFIG) is None


def test_images_pass_only_inside_images_directory():
    rule = FileTypeRule()

    assert rule.check(_entry("/docs/manual/images/diagram.svg"), CONFIG) is None
    assert rule.check(_entry("/docs/manual/images/screen.png"), CONFIG) is None
    assert rule.check(_entry("/docs/manual/diagram.svg"), CONFIG) is not None


def test_other_files_fail_with_allowed_forms_named():
    violation = FileTypeRule().check(_entry("/docs/manual/images/diagram.txt"), CONFIG)

    assert violation is not None
    assert violation.rule == "file_type"
    assert violation.path == Path("/docs/manual/images/diagram.txt")
    assert ".rst" in violation.message
    assert ".png or .svg" in violation.message
    assert "'images'" in violation.message
