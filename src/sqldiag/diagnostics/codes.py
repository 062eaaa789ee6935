"""Stable, searchable error code registry.

Codes are assigned monotonically and never reused or renumbered; tooling
stores and filters by them.

Ranges:
- SQL00001-SQL00002 — Names and literals
- SQL00003-SQL00005 — Operators and expression types
- SQL00006-SQL00011 — Result-set shape
- SQL00012-SQL00013 — References and data types
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_CODE_PATTERN = re.compile(r"^SQL(\d{5})$")


@dataclass(frozen=True, order=True)
class ErrorCode:
    value: int

    def __str__(self) -> str:
        return f"SQL{self.value:05d}"

    @classmethod
    def parse(cls, text: str) -> ErrorCode:
        """Parse the `SQL#####` form back into an ErrorCode."""
        match = _CODE_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"malformed diagnostic code {text!r} (expected SQL#####)")
        return cls(int(match.group(1)))


# Names and literals
DUPLICATED_VARIABLE_NAME = ErrorCode(1)
NUMERIC_VALUE_IS_NOT_INTEGER = ErrorCode(2)

# Operators and expression types
BINARY_OPERATOR_NOT_DEFINED = ErrorCode(3)
UNARY_OPERATOR_NOT_DEFINED = ErrorCode(4)
EXPRESSION_MUST_RETURN_BOOLEAN = ErrorCode(5)

# Result-set shape
ALL_STAR_SELECTION_REQUIRES_TABLE_SOURCES = ErrorCode(6)
TABLE_DEFINITION_REQUIRES_AT_LEAST_ONE_COLUMN = ErrorCode(7)
SUB_QUERY_MUST_HAVE_EXACTLY_ONE_COLUMN = ErrorCode(8)
CANNOT_DERIVE_TYPE_OF_EXPRESSION = ErrorCode(9)
TABLE_OPERATION_COLUMN_COUNT_MISMATCH = ErrorCode(10)
TABLE_OPERATION_COLUMN_TYPE_MISMATCH = ErrorCode(11)

# References and data types
INCORRECT_GLOBAL_REFERENCE_TARGET = ErrorCode(12)
UNKNOWN_DATA_TYPE = ErrorCode(13)
