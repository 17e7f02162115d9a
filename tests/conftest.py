from pathlib import Path

import pytest


def page(label: str, body: str = "Some text.", backref: bool = True) -> str:
    lines = [f".. _{label}:", "", "=====", "Title", "=====", "", body, ""]
    if backref:
        lines.append(f":ref:`Back to the top <{label}>`")
    return "\n".join(lines) + "\n"


def write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def docs_tree(tmp_path):
    """A small archivematica-docs checkout with no violations."""

    root = tmp_path / "archivematica-docs"
    write(root / "index.rst", page("home"))
    write(root / "contents.rst", page("contents"))
    write(root / "conf.py", "project = 'docs'\n")
    write(root / "Makefile", "all:\n")
    write(root / ".gitignore", "_build\n")
    write(root / "_build" / "html" / "index.html", "<html></html>\n")
    write(root / "locale" / "fr" / "messages.po", "msgid ''\n")
    write(root / "admin-manual" / "index.rst", page("admin-top"))
    write(root / "admin-manual" / "installation" / "install.rst", page("install"))
    write(root / "admin-manual" / "installation" / "images" / "diagram.svg", "<svg/>\n")
    write(root / "user-manual" / "index.rst", page("user-top"))
    write(root / "user-manual" / "ingest" / "ingest.rst", page("ingest"))
    write(root / "user-manual" / "ingest" / "images" / "screen.png", "png")
    return root
