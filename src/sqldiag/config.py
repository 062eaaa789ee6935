"""Diagnostic configuration: ~/.sqldiag/config.toml.

    [diagnostics]
    suppress = ["SQL00009"]
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from sqldiag.diagnostics.catalog import ReporterCatalog
from sqldiag.diagnostics.codes import ErrorCode
from sqldiag.diagnostics.sink import SuppressingSink
from sqldiag.diagnostics.types import DiagnosticSink

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path.home() / ".sqldiag" / "config.toml"


class ConfigError(Exception):
    """Raised for unreadable or invalid configuration files."""


@dataclass(frozen=True)
class DiagnosticsConfig:
    suppressed: frozenset[ErrorCode] = frozenset()

    def wrap(self, sink: DiagnosticSink) -> DiagnosticSink:
        """Apply suppression to a sink. Returns the sink itself if nothing is suppressed."""
        if not self.suppressed:
            return sink
        return SuppressingSink(sink, self.suppressed)


def _load_file(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def load_config(path: Path | None = None, *, catalog: ReporterCatalog) -> DiagnosticsConfig:
    """Load and validate the [diagnostics] table. A missing file yields an empty config."""
    path = path or DEFAULT_CONFIG_FILE
    logger.debug("loading diagnostics config from %s", path)
    data = _load_file(path)

    section = data.get("diagnostics", {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [diagnostics] must be a table")

    raw = section.get("suppress", [])
    if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
        raise ConfigError(f"{path}: diagnostics.suppress must be a list of code strings")

    suppressed: set[ErrorCode] = set()
    for value in raw:
        try:
            code = ErrorCode.parse(value)
        except ValueError as e:
            raise ConfigError(f"{path}: {e}") from e
        if code not in catalog:
            raise ConfigError(f"{path}: unknown diagnostic code {value}")
        suppressed.add(code)

    return DiagnosticsConfig(suppressed=frozenset(suppressed))
