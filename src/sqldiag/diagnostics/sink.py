"""Ready-made diagnostic sinks."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from sqldiag.diagnostics.codes import ErrorCode
from sqldiag.diagnostics.types import Diagnostic, DiagnosticInfo, DiagnosticSink, Severity

logger = logging.getLogger(__name__)


@dataclass
class DiagnosticCollector:
    """Sink that keeps every accepted diagnostic. One per validation pass."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __call__(self, severity: Severity, message: str, info: DiagnosticInfo) -> None:
        self.diagnostics.append(Diagnostic(severity=severity, message=message, info=info))

    def __len__(self) -> int:
        return len(self.diagnostics)

    @property
    def has_errors(self) -> bool:
        return any(d.is_blocking for d in self.diagnostics)

    @property
    def max_severity(self) -> Severity | None:
        if not self.diagnostics:
            return None
        return max((d.severity for d in self.diagnostics), key=lambda s: s.rank)

    def by_code(self, code: ErrorCode | str) -> list[Diagnostic]:
        key = ErrorCode.parse(code) if isinstance(code, str) else code
        return [d for d in self.diagnostics if d.code == key]


class SuppressingSink:
    """Drops diagnostics with a suppressed code and forwards the rest."""

    def __init__(self, inner: DiagnosticSink, suppressed: Iterable[ErrorCode]) -> None:
        self.inner = inner
        self.suppressed = frozenset(suppressed)

    def __call__(self, severity: Severity, message: str, info: DiagnosticInfo) -> None:
        if info.code in self.suppressed:
            logger.debug("suppressed %s: %s", info.code, message)
            return
        self.inner(severity, message, info)
