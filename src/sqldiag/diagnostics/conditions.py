"""Condition records: one frozen dataclass per reportable error condition.

The class is the tag, and its fields are the data needed to render the
message. Conditions without data are still distinct zero-field classes, so
one condition's record can never be passed where another is expected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union, get_args

from sqldiag.ast import DataType, TypeDescriptor
from sqldiag.operators import BinaryOperator, UnaryOperator


@dataclass(frozen=True)
class DuplicatedVariableName:
    name: str


@dataclass(frozen=True)
class NumericValueIsNotInteger:
    value: float


@dataclass(frozen=True)
class BinaryOperatorNotDefined:
    operator: BinaryOperator | str
    left_type: TypeDescriptor
    right_type: TypeDescriptor


@dataclass(frozen=True)
class UnaryOperatorNotDefined:
    operator: UnaryOperator | str
    operand_type: TypeDescriptor


@dataclass(frozen=True)
class ExpressionMustReturnBoolean:
    result_type: TypeDescriptor


@dataclass(frozen=True)
class AllStarSelectionRequiresTableSources:
    pass


@dataclass(frozen=True)
class TableDefinitionRequiresAtLeastOneColumn:
    pass


@dataclass(frozen=True)
class SubQueryMustHaveExactlyOneColumn:
    pass


@dataclass(frozen=True)
class CannotDeriveTypeOfExpression:
    pass


@dataclass(frozen=True)
class TableOperationColumnCountMismatch:
    pass


@dataclass(frozen=True)
class TableOperationColumnTypeMismatch:
    column_index: int


@dataclass(frozen=True)
class IncorrectGlobalReferenceTarget:
    expected: str
    received: str


@dataclass(frozen=True)
class UnknownDataType:
    data_type: DataType


Condition = Union[
    DuplicatedVariableName,
    NumericValueIsNotInteger,
    BinaryOperatorNotDefined,
    UnaryOperatorNotDefined,
    ExpressionMustReturnBoolean,
    AllStarSelectionRequiresTableSources,
    TableDefinitionRequiresAtLeastOneColumn,
    SubQueryMustHaveExactlyOneColumn,
    CannotDeriveTypeOfExpression,
    TableOperationColumnCountMismatch,
    TableOperationColumnTypeMismatch,
    IncorrectGlobalReferenceTarget,
    UnknownDataType,
]

ALL_CONDITIONS: tuple[type, ...] = get_args(Condition)
