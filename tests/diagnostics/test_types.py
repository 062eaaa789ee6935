"""Tests for diagnostic values, codes and severities."""

import dataclasses
from types import SimpleNamespace

import pytest

from sqldiag.diagnostics import (
    Diagnostic,
    DiagnosticTarget,
    ErrorCode,
    Severity,
    codes,
)


def test_diagnostic_code_display():
    assert str(codes.DUPLICATED_VARIABLE_NAME) == "SQL00001"
    assert str(codes.UNKNOWN_DATA_TYPE) == "SQL00013"


def test_parse_code():
    assert ErrorCode.parse("SQL00011") == codes.TABLE_OPERATION_COLUMN_TYPE_MISMATCH
    assert ErrorCode.parse(" SQL00001 ") == ErrorCode(1)


@pytest.mark.parametrize("text", ["", "SQL1", "sql00001", "Q0001", "SQL000001"])
def test_parse_malformed_code(text):
    with pytest.raises(ValueError, match="malformed diagnostic code"):
        ErrorCode.parse(text)


def test_codes_are_ordered():
    assert codes.DUPLICATED_VARIABLE_NAME < codes.UNKNOWN_DATA_TYPE


def test_stamp_builds_new_info():
    node = SimpleNamespace(name="x")
    target = DiagnosticTarget(node=node, property="name", index=2)

    info = target.stamp(codes.DUPLICATED_VARIABLE_NAME)

    assert info.node is node
    assert info.code == codes.DUPLICATED_VARIABLE_NAME
    assert info.property == "name"
    assert info.index == 2
    # The target itself carries no code and stays untouched.
    assert not hasattr(target, "code")


def test_target_is_immutable():
    target = DiagnosticTarget(node=object())
    with pytest.raises(dataclasses.FrozenInstanceError):
        target.property = "name"


def test_diagnostic_delegates_to_info():
    node = SimpleNamespace(operator="+")
    info = DiagnosticTarget(node=node, property="operator").stamp(ErrorCode(3))
    diag = Diagnostic(severity=Severity.ERROR, message="m", info=info)

    assert diag.code == ErrorCode(3)
    assert diag.node is node
    assert diag.property == "operator"
    assert diag.index is None
    assert diag.is_blocking


def test_severity_rank():
    ranked = sorted(Severity, key=lambda s: s.rank)
    assert ranked == [Severity.HINT, Severity.INFO, Severity.WARNING, Severity.ERROR]
    assert Severity("warning") is Severity.WARNING
