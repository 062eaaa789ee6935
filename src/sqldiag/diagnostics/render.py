"""Render diagnostics and the code catalog for terminal (text) and tooling (JSON) output."""

from __future__ import annotations

from collections.abc import Iterable

from sqldiag.diagnostics.catalog import ReporterCatalog
from sqldiag.diagnostics.codes import ErrorCode
from sqldiag.diagnostics.reporter import Reporter
from sqldiag.diagnostics.types import Diagnostic


def render_text(diagnostics: Iterable[Diagnostic]) -> str:
    """Render diagnostics as human-readable text."""
    lines: list[str] = []
    for d in diagnostics:
        lines.append(f"{d.severity.value}[{d.code}]: {d.message}")
        if d.property is not None:
            index = f"[{d.index}]" if d.index is not None else ""
            lines.append(f"  --> at '{d.property}'{index}")
    return "\n".join(lines)


def render_json(diagnostics: Iterable[Diagnostic]) -> list[dict]:
    """Render diagnostics as JSON-serializable dicts."""
    return [_diagnostic_to_dict(d) for d in diagnostics]


def render_catalog_text(
    catalog: ReporterCatalog, *, suppressed: frozenset[ErrorCode] = frozenset()
) -> str:
    """Documentation page listing every code in the catalog."""
    lines: list[str] = []
    for r in catalog:
        marker = " (suppressed)" if r.code in suppressed else ""
        lines.append(f"{r.code}  {r.severity.value:<7}  {r.name}{marker}")
        if r.summary:
            lines.append(f"    {r.summary}")
        lines.append(f"    highlights: {r.highlighted_property or 'whole node'}")
    return "\n".join(lines)


def render_catalog_json(
    catalog: ReporterCatalog, *, suppressed: frozenset[ErrorCode] = frozenset()
) -> list[dict]:
    return [reporter_to_dict(r, suppressed=r.code in suppressed) for r in catalog]


def reporter_to_dict(r: Reporter, *, suppressed: bool = False) -> dict:
    return {
        "code": str(r.code),
        "name": r.name,
        "severity": r.severity.value,
        "condition": r.condition.__name__,
        "property": r.highlighted_property,
        "summary": r.summary,
        "suppressed": suppressed,
    }


def _diagnostic_to_dict(d: Diagnostic) -> dict:
    return {
        "severity": d.severity.value,
        "code": str(d.code),
        "message": d.message,
        "property": d.property,
        "index": d.index,
    }
