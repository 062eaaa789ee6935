"""Tests for diagnostics configuration loading."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from sqldiag.config import ConfigError, DiagnosticsConfig, load_config
from sqldiag.diagnostics import DiagnosticCollector, SuppressingSink, codes
from sqldiag.diagnostics import conditions as c


def test_missing_file_is_empty_config(tmp_path, catalog):
    config = load_config(tmp_path / "nope.toml", catalog=catalog)
    assert config == DiagnosticsConfig()


def test_load_suppressed_codes(tmp_path, catalog):
    path = tmp_path / "config.toml"
    path.write_text('[diagnostics]\nsuppress = ["SQL00009", "SQL00001"]\n')

    config = load_config(path, catalog=catalog)

    assert config.suppressed == {
        codes.CANNOT_DERIVE_TYPE_OF_EXPRESSION,
        codes.DUPLICATED_VARIABLE_NAME,
    }


def test_wrap_applies_suppression(tmp_path, catalog):
    path = tmp_path / "config.toml"
    path.write_text('[diagnostics]\nsuppress = ["SQL00009"]\n')
    collector = DiagnosticCollector()

    sink = load_config(path, catalog=catalog).wrap(collector)
    catalog.report(SimpleNamespace(), c.CannotDeriveTypeOfExpression(), sink)

    assert isinstance(sink, SuppressingSink)
    assert len(collector) == 0


def test_wrap_without_suppression_returns_sink():
    collector = DiagnosticCollector()
    assert DiagnosticsConfig().wrap(collector) is collector


def test_non_utf8_config(tmp_path, catalog):
    path = tmp_path / "config.toml"
    path.write_bytes(b'[diagnostics]\nsuppress = ["\xff"]\n')
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(path, catalog=catalog)


@pytest.mark.parametrize(
    ("content", "match"),
    [
        ('[diagnostics]\nsuppress = ["SQL99999"]\n', "unknown diagnostic code SQL99999"),
        ('[diagnostics]\nsuppress = ["E1"]\n', "malformed diagnostic code"),
        ("[diagnostics]\nsuppress = 9\n", "must be a list"),
        ('diagnostics = "all"\n', "must be a table"),
        ("[diagnostics\n", "Cannot read"),
    ],
)
def test_invalid_config(tmp_path, catalog, content, match):
    path = tmp_path / "config.toml"
    path.write_text(content)
    with pytest.raises(ConfigError, match=match):
        load_config(path, catalog=catalog)
