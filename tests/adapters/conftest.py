"""Adapter test fixtures: records with spans, notes and causes."""

import pytest

from errortree import (
    DerivationConfig,
    ErrorOccurrence,
    ErrorTree,
    Numbering,
    SeverityTable,
    Span,
    SpanKind,
    SpanLabel,
    build_record,
    category,
    derive,
    leaf,
)


@pytest.fixture
def spanned_record(fs_table, source, primary_span):
    """access.denied with a secondary span on line 1 and a primary one on line 2."""
    secondary = SpanLabel(Span(7, 9, source), SpanKind.SECONDARY, "imported here")
    occ = ErrorOccurrence("access.denied", spans=[secondary, primary_span])
    return build_record(occ, fs_table)


@pytest.fixture
def chained_record(fs_table, primary_span):
    """file.not_found caused by access.denied, itself caused by a PermissionError."""
    inner = ErrorOccurrence("access.denied", cause=PermissionError("nope"))
    occ = ErrorOccurrence("file.not_found", {"path": "data.txt"}, spans=[primary_span], cause=inner)
    return build_record(occ, fs_table)


@pytest.fixture
def warning_record(fs_table):
    return build_record(ErrorOccurrence("lint.long_line", {"length": 120}), fs_table)


@pytest.fixture
def fatal_record():
    """Kind `fatal` configured as a warning, so kind and level disagree."""
    tree = ErrorTree(category("root", leaf("boom", 1, "Boom."), kind="fatal"))
    table = derive(tree, DerivationConfig(numbering=Numbering.FLAT))
    severities = SeverityTable({"fatal": "warning"})
    return build_record(ErrorOccurrence("boom"), table, severities)
