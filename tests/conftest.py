"""Root conftest — shared fixtures."""

from __future__ import annotations

import pytest

from sqldiag.diagnostics import DiagnosticCollector, ReporterCatalog, build_catalog


@pytest.fixture(scope="session")
def catalog() -> ReporterCatalog:
    return build_catalog()


@pytest.fixture
def collector() -> DiagnosticCollector:
    return DiagnosticCollector()
