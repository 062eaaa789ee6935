"""Operator vocabularies used in operator-mismatch diagnostics."""

from __future__ import annotations

import enum


class BinaryOperator(str, enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    CONCAT = "||"
    EQ = "="
    NEQ = "<>"
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    AND = "AND"
    OR = "OR"
    LIKE = "LIKE"
    IS = "IS"
    IS_NOT = "IS NOT"


class UnaryOperator(str, enum.Enum):
    PLUS = "+"
    MINUS = "-"
    NOT = "NOT"
    BITWISE_NOT = "~"
