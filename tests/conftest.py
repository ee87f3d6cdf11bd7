"""Shared trees and tables."""

from __future__ import annotations

import pytest

from errortree import (
    CodeTable,
    DerivationConfig,
    ErrorTree,
    Numbering,
    Source,
    Span,
    SpanLabel,
    category,
    derive,
    leaf,
)

FS_TOML = """\
[tree]
name = "fs"
numbering = "hierarchical"
acronym = "E"
kind = "error"

[[tree.children]]
name = "file"
number = 1
description = "File-related errors."

  [[tree.children.children]]
  name = "not_found"
  number = 0
  description = "File {path!r} not found."
  fields = { path = "str" }

  [[tree.children.children]]
  name = "not_a_file"
  number = 1
  description = "Path {0!r} does not point to a file."
  fields = { path = "str" }

[[tree.children]]
name = "access"
number = 2
description = "Access errors."

  [[tree.children.children]]
  name = "denied"
  number = 0
  description = "Access denied."

[[tree.children]]
name = "lint"
number = 9
acronym = "W"
kind = "warning"

  [[tree.children.children]]
  name = "long_line"
  number = 0
  description = "Line is {length} characters long."
  fields = { length = "int" }
  label = "shorten this line"

[render]
backends = ["text", "json"]
"""


def make_fs_tree() -> ErrorTree:
    return ErrorTree(
        category(
            "fs",
            category(
                "file",
                leaf("not_found", 0, "File {path!r} not found.", fields={"path": "str"}),
                leaf(
                    "not_a_file",
                    1,
                    "Path {0!r} does not point to a file.",
                    fields={"path": "str"},
                ),
                number=1,
                description="File-related errors.",
            ),
            category(
                "access",
                leaf("denied", 0, "Access denied."),
                number=2,
                description="Access errors.",
            ),
            category(
                "lint",
                leaf(
                    "long_line",
                    0,
                    "Line is {length} characters long.",
                    fields={"length": "int"},
                    label="shorten this line",
                ),
                number=9,
                acronym="W",
                kind="warning",
            ),
            acronym="E",
            kind="error",
        )
    )


@pytest.fixture
def fs_tree() -> ErrorTree:
    return make_fs_tree()


@pytest.fixture
def fs_table(fs_tree: ErrorTree) -> CodeTable:
    return derive(fs_tree, DerivationConfig(numbering=Numbering.HIERARCHICAL))


@pytest.fixture
def fs_toml(tmp_path):
    path = tmp_path / "fs.toml"
    path.write_text(FS_TOML)
    return path


@pytest.fixture
def source() -> Source:
    return Source(uri="src/main.py", text="import os\nprint(open('data.txt'))\n")


@pytest.fixture
def primary_span(source: Source) -> SpanLabel:
    # 'data.txt' on line 2
    start = source.text.index("'data.txt'")
    return SpanLabel(span=Span(start, start + len("'data.txt'"), source))
