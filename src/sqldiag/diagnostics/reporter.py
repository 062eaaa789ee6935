"""Reporter factory: binds a code, severity, renderer and location resolver."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from sqldiag.diagnostics.codes import ErrorCode
from sqldiag.diagnostics.types import (
    Diagnostic,
    DiagnosticSink,
    DiagnosticTarget,
    Severity,
)

N = TypeVar("N")
P = TypeVar("P")
N_contra = TypeVar("N_contra", contravariant=True)

# SQL##### leaves room for five digits.
MAX_CODE_VALUE = 99999


class CatalogError(Exception):
    """Raised when a reporter or the catalog is built from invalid configuration."""


class LocationResolver(Protocol[N_contra]):
    """Picks the part of a node to highlight.

    ``property`` names that part for documentation; None means the whole node.
    """

    @property
    def property(self) -> str | None: ...

    def __call__(self, node: N_contra) -> DiagnosticTarget: ...


@dataclass(frozen=True)
class Reporter(Generic[N, P]):
    """A reusable reporter for one error condition.

    Invoked as ``reporter(node, params, accept)``: renders the message from
    ``params``, resolves the highlighted part of ``node``, stamps it with
    ``code`` and hands the result to ``accept`` exactly once. Errors raised
    by ``accept`` propagate to the caller.
    """

    name: str
    code: ErrorCode
    severity: Severity
    render: Callable[[P], str]
    locate: LocationResolver[N]
    condition: type[P]
    highlighted_property: str | None = None
    summary: str = ""

    def __call__(self, node: N, params: P, accept: DiagnosticSink) -> None:
        message = self.render(params)
        info = self.locate(node).stamp(self.code)
        accept(self.severity, message, info)

    def message(self, params: P) -> str:
        return self.render(params)

    def diagnostic(self, node: N, params: P) -> Diagnostic:
        """Build the diagnostic without forwarding it to a sink."""
        return Diagnostic(
            severity=self.severity,
            message=self.render(params),
            info=self.locate(node).stamp(self.code),
        )


def create_reporter(
    name: str,
    code: ErrorCode,
    severity: Severity,
    render: Callable[[P], str],
    locate: LocationResolver[N],
    *,
    condition: type[P],
    summary: str = "",
) -> Reporter[N, P]:
    """Create a reporter. Called once per condition, at catalog construction."""
    if not name:
        raise CatalogError("reporter name must not be empty")
    if (
        not isinstance(code, ErrorCode)
        or not isinstance(code.value, int)
        or not 0 < code.value <= MAX_CODE_VALUE
    ):
        raise CatalogError(f"{name}: invalid diagnostic code {code!r}")
    if not isinstance(severity, Severity):
        raise CatalogError(f"{name}: invalid severity {severity!r}")
    if not isinstance(condition, type):
        raise CatalogError(f"{name}: condition must be a class, got {condition!r}")
    try:
        highlighted = locate.property
    except AttributeError:
        raise CatalogError(
            f"{name}: location resolver must declare the property it highlights"
        ) from None
    return Reporter(
        name=name,
        code=code,
        severity=severity,
        render=render,
        locate=locate,
        condition=condition,
        highlighted_property=highlighted,
        summary=summary,
    )


@dataclass(frozen=True)
class _Locator:
    property: str | None = None

    def __call__(self, node: object) -> DiagnosticTarget:
        return DiagnosticTarget(node=node, property=self.property)


def whole_node() -> LocationResolver[Any]:
    """Location resolver that highlights the entire node."""
    return _Locator()


def at_property(name: str) -> LocationResolver[Any]:
    """Location resolver that highlights one property of the node."""
    return _Locator(property=name)
