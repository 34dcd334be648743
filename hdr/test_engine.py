from pathlib import Path

import pytest

from hdr.base import Outcome
from hdr.config import Configuration
from hdr.engine import HeaderEngine
from hdr.matcher import remove_header

ROOT = Path("/project")
CONFIG = Configuration(author="Jane Doe", license="MIT", year=2024, project_name="demo")


@pytest.fixture
def engine():
    return HeaderEngine(CONFIG, ROOT)


def test_add_to_typescript_file(engine):
    change = engine.add(ROOT / "src" / "foo.ts", "export const x = 1;\n")
    assert change.outcome == Outcome.HEADER_ADDED
    assert change.changed
    assert change.content == (
        "/**\n"
        " * @file src/foo.ts\n"
        " * @description \n"
        " * @license MIT\n"
        " * @copyright 2024 Jane Doe\n"
        " */\n"
        "\n"
        "export const x = 1;\n"
    )


def test_add_with_description(engine):
    change = engine.add(ROOT / "src" / "main.js", "main();\n", description="Entry point")
    assert " * @description Entry point\n" in change.content


def test_add_then_check(engine):
    path = ROOT / "src" / "styles" / "site.scss"
    change = engine.add(path, "body { margin: 0; }\n")
    assert engine.check(path, change.content)
    assert " * @file src/styles/site.scss\n" in change.content


def test_second_add_is_a_no_op(engine):
    path = ROOT / "src" / "foo.ts"
    first = engine.add(path, "export {};\n")
    second = engine.add(path, first.content)
    assert second.outcome == Outcome.SKIPPED_ALREADY_PRESENT
    assert not second.changed
    assert second.content == first.content


def test_add_does_not_refresh_existing_header(engine):
    content = "/**\n * @license GPL-3.0\n */\nfoo();\n"
    change = engine.add(ROOT / "a.ts", content)
    assert change.outcome == Outcome.SKIPPED_ALREADY_PRESENT
    assert change.content == content


def test_add_unsupported_file(engine):
    content = '{ "name": "demo" }\n'
    change = engine.add(ROOT / "package.json", content)
    assert change.outcome == Outcome.SKIPPED_UNSUPPORTED
    assert change.content == content


def test_add_keeps_leading_plain_comment(engine):
    content = "/* eslint-disable */\nfoo();\n"
    change = engine.add(ROOT / "a.js", content)
    assert change.outcome == Outcome.HEADER_ADDED
    assert change.content.endswith("\n\n" + content)


@pytest.mark.parametrize("name,content", [
    ("src/a.ts", "export const x = 1;\n"),
    ("src/a.mjs", ""),
    ("src/a.css", ".a { color: red; }\n"),
    ("src/index.html", "<!DOCTYPE html>\n<html></html>\n"),
    ("src/run.sh", "echo hi\n"),
    ("src/run.bash", "#!/usr/bin/env bash\nset -e\n"),
    ("src/cli.js", "#!/usr/bin/env node\nmain();\n"),
    ("src/a.ts", "  indented();\r\nnext();\r\n"),
    ("src/b.ts", "\ufeffexport {};\n"),
])
def test_remove_undoes_add(engine, name, content):
    path = ROOT / name
    added = engine.add(path, content).content
    assert engine.check(path, added)
    assert remove_header(added) == content

    removed = engine.remove(path, added)
    assert removed.outcome == Outcome.HEADER_REMOVED
    assert removed.content == content


def test_shell_header_goes_below_interpreter_line(engine):
    change = engine.add(ROOT / "scripts" / "build.sh", "#!/bin/bash\nmake\n")
    assert change.content == (
        "#!/bin/bash\n"
        "# @file scripts/build.sh\n"
        "# @license MIT\n"
        "# @copyright 2024 Jane Doe\n"
        "\n"
        "make\n"
    )


def test_interpreter_line_without_newline(engine):
    change = engine.add(ROOT / "a.sh", "#!/bin/sh")
    assert change.content.startswith("#!/bin/sh\n# @file a.sh\n")
    # the interpreter line keeps the newline it gained
    assert engine.remove(ROOT / "a.sh", change.content).content == "#!/bin/sh\n"


def test_header_goes_below_byte_order_mark(engine):
    change = engine.add(ROOT / "a.ts", "\ufeffexport {};\n")
    assert change.outcome == Outcome.HEADER_ADDED
    assert change.content.startswith("\ufeff/**\n * @file a.ts\n")
    assert engine.check(ROOT / "a.ts", change.content)
    assert engine.add(ROOT / "a.ts", change.content).outcome == Outcome.SKIPPED_ALREADY_PRESENT
    assert engine.remove(ROOT / "a.ts", change.content).content == "\ufeffexport {};\n"


def test_byte_order_mark_and_interpreter_line(engine):
    content = "\ufeff#!/bin/sh\necho hi\n"
    change = engine.add(ROOT / "a.sh", content)
    assert change.content.startswith("\ufeff#!/bin/sh\n# @file a.sh\n")
    assert engine.remove(ROOT / "a.sh", change.content).content == content


def test_config_values_are_not_treated_as_placeholders():
    config = Configuration(author="{description} Inc", license="MIT", year=2024, project_name="demo")
    change = HeaderEngine(config, ROOT).add(ROOT / "a.ts", "x;\n", "DESC")
    assert " * @description DESC\n" in change.content
    assert " * @copyright 2024 {description} Inc\n" in change.content


def test_markup_header(engine):
    change = engine.add(ROOT / "public" / "index.htm", "<p>hi</p>\n")
    assert change.content.startswith("<!--\n  @file public/index.htm\n")


def test_remove_without_header(engine):
    content = "export const x = 1;\n"
    change = engine.remove(ROOT / "a.ts", content)
    assert change.outcome == Outcome.SKIPPED_NOTHING_TO_REMOVE
    assert not change.changed
    assert change.content == content


def test_remove_ignores_classification(engine):
    content = "<!--\n  @license MIT\n-->\nexport {};\n"
    change = engine.remove(ROOT / "a.ts", content)
    assert change.outcome == Outcome.HEADER_REMOVED
    assert change.content == "export {};\n"


def test_check(engine):
    assert not engine.check(ROOT / "a.ts", "/* just a comment */\n")
    assert engine.check(ROOT / "a.ts", "/* @copyright 2020 X */\n")
    # check does not care whether the type is supported
    assert engine.check(ROOT / "notes.txt", "# @license MIT\n")


def test_relative_name():
    engine = HeaderEngine(CONFIG, Path("/project/app"))
    assert engine.relative_name(Path("/project/app/src/x.ts")) == "src/x.ts"
    assert engine.relative_name(Path("/project/lib/x.ts")) == "../lib/x.ts"
