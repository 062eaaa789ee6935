"""Diagnostic system: codes, condition records, reporters and the catalog."""

from sqldiag.diagnostics import codes
from sqldiag.diagnostics.catalog import ReporterCatalog, build_catalog
from sqldiag.diagnostics.codes import ErrorCode
from sqldiag.diagnostics.reporter import (
    CatalogError,
    Reporter,
    at_property,
    create_reporter,
    whole_node,
)
from sqldiag.diagnostics.sink import DiagnosticCollector, SuppressingSink
from sqldiag.diagnostics.types import (
    Diagnostic,
    DiagnosticInfo,
    DiagnosticSink,
    DiagnosticTarget,
    Severity,
)

__all__ = [
    "CatalogError",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticInfo",
    "DiagnosticSink",
    "DiagnosticTarget",
    "ErrorCode",
    "Reporter",
    "ReporterCatalog",
    "Severity",
    "SuppressingSink",
    "at_property",
    "build_catalog",
    "codes",
    "create_reporter",
    "whole_node",
]
