"""Diagnostic values handed from reporters to the validator's sink.

A location resolver returns a DiagnosticTarget. The reporter stamps it with
its code, which yields a new DiagnosticInfo; nothing is mutated after the
fact. The sink receives ``(severity, message, info)``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Protocol

from sqldiag.diagnostics.codes import ErrorCode


class Severity(enum.Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {
    Severity.HINT: 0,
    Severity.INFO: 1,
    Severity.WARNING: 2,
    Severity.ERROR: 3,
}


@dataclass(frozen=True)
class DiagnosticInfo:
    node: Any
    code: ErrorCode
    property: str | None = None
    index: int | None = None


@dataclass(frozen=True)
class DiagnosticTarget:
    """Which part of a node to highlight: the whole node, or one property."""

    node: Any
    property: str | None = None
    index: int | None = None

    def stamp(self, code: ErrorCode) -> DiagnosticInfo:
        return DiagnosticInfo(
            node=self.node, code=code, property=self.property, index=self.index
        )


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    message: str
    info: DiagnosticInfo

    @property
    def code(self) -> ErrorCode:
        return self.info.code

    @property
    def node(self) -> Any:
        return self.info.node

    @property
    def index(self) -> int | None:
        return self.info.index

    @property
    def is_blocking(self) -> bool:
        return self.severity == Severity.ERROR

    # Keep last: this name shadows the builtin decorator for the rest of the body.
    @property
    def property(self) -> str | None:
        return self.info.property


class DiagnosticSink(Protocol):
    """The validator's diagnostic-acceptance callback."""

    def __call__(self, severity: Severity, message: str, info: DiagnosticInfo) -> None: ...
