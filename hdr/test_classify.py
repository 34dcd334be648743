from pathlib import Path

import pytest

from hdr.base import Dialect, TemplateKind
from hdr.classify import SUPPORTED_EXTENSIONS, classify, classify_dialect, is_supported


@pytest.mark.parametrize("name,kind", [
    ("a.js", TemplateKind.SCRIPT),
    ("a.mjs", TemplateKind.SCRIPT),
    ("a.cjs", TemplateKind.SCRIPT),
    ("a.jsx", TemplateKind.SCRIPT),
    ("a.ts", TemplateKind.SCRIPT),
    ("a.tsx", TemplateKind.SCRIPT),
    ("a.mts", TemplateKind.SCRIPT),
    ("a.cts", TemplateKind.SCRIPT),
    ("a.css", TemplateKind.STYLE),
    ("a.scss", TemplateKind.STYLE),
    ("a.less", TemplateKind.STYLE),
    ("a.html", TemplateKind.MARKUP),
    ("a.htm", TemplateKind.MARKUP),
    ("a.sh", TemplateKind.SHELL),
    ("a.bash", TemplateKind.SHELL),
])
def test_classify(name, kind):
    assert classify(Path("src") / name) == kind


def test_classify_is_case_insensitive():
    assert classify("App.TSX") == TemplateKind.SCRIPT
    assert classify(Path("Index.HTML")) == TemplateKind.MARKUP


def test_unsupported_is_none():
    assert classify("package.json") is None
    assert classify("Makefile") is None
    assert classify(".bashrc") is None
    assert classify("archive.tar.gz") is None
    assert not is_supported("notes.md")


def test_script_and_style_share_block_dialect():
    assert classify_dialect("a.ts") == Dialect.BLOCK_COMMENT
    assert classify_dialect("a.css") == Dialect.BLOCK_COMMENT
    assert classify_dialect("a.htm") == Dialect.MARKUP_COMMENT
    assert classify_dialect("a.bash") == Dialect.SHELL_COMMENT
    assert classify_dialect("a.json") is None


def test_supported_extensions():
    assert len(SUPPORTED_EXTENSIONS) == 15
    assert all(ext.startswith(".") and ext == ext.lower() for ext in SUPPORTED_EXTENSIONS)
