"""Shared output formatting for CLI commands."""

from __future__ import annotations

import json

from sqldiag.diagnostics.catalog import ReporterCatalog
from sqldiag.diagnostics.codes import ErrorCode
from sqldiag.diagnostics.render import (
    render_catalog_json,
    render_catalog_text,
    reporter_to_dict,
)
from sqldiag.diagnostics.reporter import Reporter


def format_catalog(
    catalog: ReporterCatalog,
    *,
    suppressed: frozenset[ErrorCode] = frozenset(),
    output_format: str = "text",
) -> str:
    if output_format == "json":
        return json.dumps(render_catalog_json(catalog, suppressed=suppressed), indent=2)
    return render_catalog_text(catalog, suppressed=suppressed)


def format_reporter(reporter: Reporter, *, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps(reporter_to_dict(reporter), indent=2)

    lines = [
        f"{reporter.code}: {reporter.name}",
        f"  severity:   {reporter.severity.value}",
        f"  condition:  {reporter.condition.__name__}",
        f"  highlights: {reporter.highlighted_property or 'whole node'}",
    ]
    if reporter.summary:
        lines.append("")
        lines.append(f"  {reporter.summary}")
    return "\n".join(lines)
