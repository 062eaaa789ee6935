"""Structural contracts for the nodes and type descriptors that reporters receive.

The grammar layer owns the real node classes. Reporters only rely on the
attributes listed here; each attribute name doubles as the property name a
diagnostic can highlight.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class TypeDescriptor(Protocol):
    discriminator: str


class Expression(Protocol):
    """Any expression node. Highlighted as a whole."""


class SourceItem(Protocol):
    name: str


class NumberLiteral(Protocol):
    value: Any


class BinaryExpression(Protocol):
    operator: Any


class UnaryExpression(Protocol):
    operator: Any


class SimpleSelectStatement(Protocol):
    """A SELECT statement. Highlighted as a whole."""


class GlobalReference(Protocol):
    element: Any


class SubQueryExpression(Protocol):
    sub_query: Any


class BinaryTableExpression(Protocol):
    """UNION / EXCEPT / INTERSECT between two table expressions."""

    operator: Any


class DataType(Protocol):
    data_type_names: Sequence[str]
    arguments: Sequence[NumberLiteral]
