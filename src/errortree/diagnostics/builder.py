"""Turn an ErrorOccurrence into a DiagnosticRecord.

Steps:
    1. Collect the cause chain (following ``__cause__``), rejecting cycles
    2. Resolve each occurrence's leaf in the code table
    3. Check declared fields are bound with the declared types
    4. Expand description and label templates
    5. Map kind to severity
    6. Assemble records innermost-first so each cause becomes a child

Everything here is pure: no shared state is touched, so concurrent calls
are safe and a failure only affects the call that raised it.
"""

from __future__ import annotations

from collections.abc import Mapping

from errortree.diagnostics.types import DEFAULT_SEVERITIES, DiagnosticRecord, SeverityTable
from errortree.engine import CodeTable, DerivedInfo
from errortree.errors import CycleError, TemplateError, UnknownLeafError
from errortree.occurrence import ErrorOccurrence
from errortree.table import current


def build_record(
    occurrence: ErrorOccurrence,
    table: CodeTable | None = None,
    severities: SeverityTable = DEFAULT_SEVERITIES,
) -> DiagnosticRecord:
    """Build the diagnostic record for an occurrence and its causes.

    Args:
        occurrence: The error to describe.
        table: Code table to resolve leaves in. None uses the installed
            process-wide table.
        severities: Kind -> severity mapping.

    Raises:
        UnknownLeafError, TemplateError, UnknownKindError, CycleError.
        TypeError if `occurrence` is not an ErrorOccurrence.
    """
    if not isinstance(occurrence, ErrorOccurrence):
        raise TypeError(f"expected an ErrorOccurrence, got {type(occurrence).__name__}")
    if table is None:
        table = current()

    chain = _cause_chain(occurrence)
    tail = chain[-1].cause

    notes: tuple[str, ...] = ()
    if tail is not None:
        notes = (f"caused by: {type(tail).__name__}: {tail}",)
    record = _build_one(chain[-1], table, severities, children=(), notes=notes)
    for occ in reversed(chain[:-1]):
        record = _build_one(occ, table, severities, children=(record,), notes=())
    return record


def _cause_chain(occurrence: ErrorOccurrence) -> list[ErrorOccurrence]:
    chain: list[ErrorOccurrence] = []
    seen: dict[int, int] = {}
    node: BaseException | None = occurrence
    while isinstance(node, ErrorOccurrence):
        if id(node) in seen:
            cycle = chain[seen[id(node)] :]
            raise CycleError([o.path for o in cycle] + [node.path])
        seen[id(node)] = len(chain)
        chain.append(node)
        node = node.cause
    return chain


def _build_one(
    occ: ErrorOccurrence,
    table: CodeTable,
    severities: SeverityTable,
    *,
    children: tuple[DiagnosticRecord, ...],
    notes: tuple[str, ...],
) -> DiagnosticRecord:
    info = table.get(occ.path)
    if info is None:
        raise UnknownLeafError(occ.path)

    _check_fields(info, occ.fields)
    severity = severities.severity_of(info.kind, info.path)

    return DiagnosticRecord(
        code=info.code,
        kind=info.kind,
        primary_message=info.render_message(occ.fields),
        severity=severity,
        spans=occ.spans,
        children=children,
        path=info.path,
        label=info.render_label(occ.fields),
        notes=notes,
    )


def _check_fields(info: DerivedInfo, values: Mapping[str, object]) -> None:
    for f in info.fields:
        if f.name not in values:
            raise TemplateError(info.path, f"missing value for field '{f.name}'")
        value = values[f.name]
        if not f.accepts(value):
            raise TemplateError(
                info.path,
                f"field '{f.name}' expects {f.type}, got {type(value).__name__}",
            )
