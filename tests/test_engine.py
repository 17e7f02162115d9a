from pathlib import Path

from conftest import page, write
from docmatica.config import LintConfig
from docmatica.engine import RuleEngine, load_rules
from docmatica.entry import Entry


def test_default_rules_are_registered():
    assert [rule.name for rule in load_rules()] == ["file_type", "placement", "anchor"]


def test_valid_manual_index_passes_all_rules(tmp_path):
    path = write(tmp_path / "docs" / "admin-manual" / "index.rst", page("admin-top"))

    assert RuleEngine(LintConfig()).evaluate(Entry.from_path(path, is_dir=False)) == []


def test_missing_backref_fails_only_anchor_rule(tmp_path):
    path = write(tmp_path / "docs" / "admin-manual" / "index.rst", page("admin-top", backref=False))
    violations = RuleEngine(LintConfig()).evaluate(Entry.from_path(path, is_dir=False))

    assert [violation.rule for violation in violations] == ["anchor"]


def test_one_file_can_fail_several_rules(tmp_path):
    path = write(tmp_path / "docs" / "user-manual" / "stray.rst", "no anchor here\n")
    violations = RuleEngine(LintConfig()).evaluate(Entry.from_path(path, is_dir=False))

    assert {violation.rule for violation in violations} == {"placement", "anchor"}


def test_directories_produce_no_violations(tmp_path):
    entry = Entry.from_path(tmp_path / "admin-manual", is_dir=True)

    assert RuleEngine(LintConfig()).evaluate(entry) == []


def test_emit_streams_to_sink(tmp_path):
    received = []
    entry = Entry.from_path(Path(tmp_path / "notes.txt"), is_dir=False)

    RuleEngine(LintConfig()).emit(entry, received.append)

    assert [violation.rule for violation in received] == ["file_type"]
