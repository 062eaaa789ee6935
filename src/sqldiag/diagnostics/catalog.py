"""The reporter catalog: one reporter per error condition the validator knows.

Message wording, severity and the highlighted property are decided here and
nowhere else. The validator supplies only the node and the condition record.

    catalog = build_catalog()
    catalog.duplicated_variable_name(item, DuplicatedVariableName("x"), accept)
    catalog.report(item, DuplicatedVariableName("x"), accept)  # same thing

Each catalog field is typed ``Reporter[<node protocol>, <condition>]``, so a
type checker rejects a call that passes another condition's record.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, fields
from typing import Any

from sqldiag import ast
from sqldiag.diagnostics import codes
from sqldiag.diagnostics import conditions as c
from sqldiag.diagnostics.codes import ErrorCode
from sqldiag.diagnostics.reporter import (
    CatalogError,
    Reporter,
    at_property,
    create_reporter,
    whole_node,
)
from sqldiag.diagnostics.types import DiagnosticSink, Severity

logger = logging.getLogger(__name__)

# Integral floats at or above this magnitude keep exponent notation.
_EXPONENT_THRESHOLD = 1e21


# -- Literal rendering ---------------------------------------------------------
# Renderers must not raise; anything unexpected falls back to str().


def _text(value: object) -> str:
    if isinstance(value, enum.Enum):
        return str(value.value)
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _number(value: object) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
            return str(int(value))
    return _text(value)


def _discriminator(descriptor: object) -> str:
    return _text(getattr(descriptor, "discriminator", descriptor))


def _data_type(data_type: ast.DataType) -> str:
    names = " ".join(_text(n) for n in getattr(data_type, "data_type_names", ()) or ())
    args = ", ".join(
        _number(getattr(a, "value", a)) for a in getattr(data_type, "arguments", ()) or ()
    )
    return f"{names}({args})"


# -- Message renderers -----------------------------------------------------------


def _duplicated_variable_name(p: c.DuplicatedVariableName) -> str:
    return f"Duplicated variable name '{_text(p.name)}'."


def _numeric_value_is_not_integer(p: c.NumericValueIsNotInteger) -> str:
    return f"Value '{_number(p.value)}' is not an integer."


def _binary_operator_not_defined(p: c.BinaryOperatorNotDefined) -> str:
    return (
        f"Binary operator '{_text(p.operator)}' is not defined for "
        f"('{_discriminator(p.left_type)}', '{_discriminator(p.right_type)}')."
    )


def _unary_operator_not_defined(p: c.UnaryOperatorNotDefined) -> str:
    return (
        f"Unary operator '{_text(p.operator)}' is not defined for "
        f"'{_discriminator(p.operand_type)}'."
    )


def _expression_must_return_boolean(p: c.ExpressionMustReturnBoolean) -> str:
    return f"Expression must return a boolean, not a '{_discriminator(p.result_type)}'."


def _all_star_selection_requires_table_sources(p: c.AllStarSelectionRequiresTableSources) -> str:
    return "All-star selection requires table sources (FROM is missing)."


def _table_definition_requires_at_least_one_column(
    p: c.TableDefinitionRequiresAtLeastOneColumn,
) -> str:
    return "Table definition requires at least one column."


def _sub_query_must_have_exactly_one_column(p: c.SubQueryMustHaveExactlyOneColumn) -> str:
    return "Sub queries within select statements must have exactly one column."


def _cannot_derive_type_of_expression(p: c.CannotDeriveTypeOfExpression) -> str:
    return "Unable to derive the type of the expression."


def _table_operation_column_count_mismatch(p: c.TableOperationColumnCountMismatch) -> str:
    return (
        "This operation uses tables with different amounts of columns, "
        "which is forbidden. Please add the missing columns."
    )


def _table_operation_column_type_mismatch(p: c.TableOperationColumnTypeMismatch) -> str:
    return (
        "This operation uses tables with different columns types! "
        f"Compare the columns at index {_number(p.column_index)}. "
        "They are not convertable to each other."
    )


def _incorrect_global_reference_target(p: c.IncorrectGlobalReferenceTarget) -> str:
    return (
        f"Expected definition of type '{_text(p.expected)}' "
        f"but received '{_text(p.received)}'."
    )


def _unknown_data_type(p: c.UnknownDataType) -> str:
    return f"Unknown data type '{_data_type(p.data_type)}'."


# -- Catalog -------------------------------------------------------------------


class ReporterIndex:
    """Lookup tables over a set of reporters, by name, condition class and code.

    Rejects two reporters sharing a name, a code or a condition class.
    Iteration yields reporters in code order.
    """

    def __init__(self, reporters: Iterable[Reporter[Any, Any]]) -> None:
        by_name: dict[str, Reporter[Any, Any]] = {}
        by_condition: dict[type, Reporter[Any, Any]] = {}
        by_code: dict[ErrorCode, Reporter[Any, Any]] = {}
        for r in reporters:
            if r.code in by_code:
                raise CatalogError(
                    f"duplicate diagnostic code {r.code}: {by_code[r.code].name} and {r.name}"
                )
            if r.name in by_name:
                raise CatalogError(f"duplicate reporter name {r.name}")
            if r.condition in by_condition:
                raise CatalogError(
                    f"condition {r.condition.__name__} registered twice "
                    f"({by_condition[r.condition].name} and {r.name})"
                )
            by_name[r.name] = r
            by_condition[r.condition] = r
            by_code[r.code] = r

        self._by_name = by_name
        self._by_condition = by_condition
        self._by_code = dict(sorted(by_code.items()))

    def __iter__(self) -> Iterator[Reporter[Any, Any]]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, code: object) -> bool:
        if isinstance(code, str):
            try:
                code = ErrorCode.parse(code)
            except ValueError:
                return False
        return code in self._by_code

    def codes(self) -> frozenset[ErrorCode]:
        return frozenset(self._by_code)

    def by_code(self, code: ErrorCode | str) -> Reporter[Any, Any]:
        key = ErrorCode.parse(code) if isinstance(code, str) else code
        try:
            return self._by_code[key]
        except KeyError:
            raise KeyError(f"unknown diagnostic code: {code}") from None

    def for_condition(self, condition: type) -> Reporter[Any, Any]:
        try:
            return self._by_condition[condition]
        except KeyError:
            raise KeyError(f"no reporter registered for {condition.__name__}") from None


def check_coverage(
    reporters: Iterable[Reporter[Any, Any]],
    conditions: Iterable[type] = c.ALL_CONDITIONS,
) -> None:
    """Raise CatalogError if any condition class is left without a reporter."""
    registered = {r.condition for r in reporters}
    missing = [cls.__name__ for cls in conditions if cls not in registered]
    if missing:
        raise CatalogError(f"conditions without a reporter: {', '.join(missing)}")


@dataclass(frozen=True)
class ReporterCatalog:
    """Immutable, explicitly constructed set of reporters.

    Each reporter is a typed field named after its condition. The same
    reporters are reachable by condition class (``for_condition``/``report``)
    and by code (``by_code``). Iteration yields reporters in code order.
    """

    duplicated_variable_name: Reporter[ast.SourceItem, c.DuplicatedVariableName]
    numeric_value_is_not_integer: Reporter[ast.NumberLiteral, c.NumericValueIsNotInteger]
    binary_operator_not_defined: Reporter[ast.BinaryExpression, c.BinaryOperatorNotDefined]
    unary_operator_not_defined: Reporter[ast.UnaryExpression, c.UnaryOperatorNotDefined]
    expression_must_return_boolean: Reporter[ast.Expression, c.ExpressionMustReturnBoolean]
    all_star_selection_requires_table_sources: Reporter[
        ast.SimpleSelectStatement, c.AllStarSelectionRequiresTableSources
    ]
    table_definition_requires_at_least_one_column: Reporter[
        ast.GlobalReference, c.TableDefinitionRequiresAtLeastOneColumn
    ]
    sub_query_must_have_exactly_one_column: Reporter[
        ast.SubQueryExpression, c.SubQueryMustHaveExactlyOneColumn
    ]
    cannot_derive_type_of_expression: Reporter[ast.Expression, c.CannotDeriveTypeOfExpression]
    table_operation_column_count_mismatch: Reporter[
        ast.BinaryTableExpression, c.TableOperationColumnCountMismatch
    ]
    table_operation_column_type_mismatch: Reporter[
        ast.BinaryTableExpression, c.TableOperationColumnTypeMismatch
    ]
    incorrect_global_reference_target: Reporter[
        ast.GlobalReference, c.IncorrectGlobalReferenceTarget
    ]
    unknown_data_type: Reporter[ast.DataType, c.UnknownDataType]

    _index: ReporterIndex = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        reporters: list[Reporter[Any, Any]] = []
        for f in fields(self):
            if not f.init:
                continue
            reporter = getattr(self, f.name)
            if reporter.name != f.name:
                raise CatalogError(f"reporter {reporter.name} is registered as {f.name}")
            reporters.append(reporter)
        check_coverage(reporters)
        object.__setattr__(self, "_index", ReporterIndex(reporters))

    def __iter__(self) -> Iterator[Reporter[Any, Any]]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, code: object) -> bool:
        return code in self._index

    def codes(self) -> frozenset[ErrorCode]:
        return self._index.codes()

    def by_code(self, code: ErrorCode | str) -> Reporter[Any, Any]:
        return self._index.by_code(code)

    def for_condition(self, condition: type) -> Reporter[Any, Any]:
        return self._index.for_condition(condition)

    def report(self, node: object, condition: c.Condition, accept: DiagnosticSink) -> None:
        """Dispatch a condition record to its reporter."""
        self.for_condition(type(condition))(node, condition, accept)


def build_catalog() -> ReporterCatalog:
    """Construct the catalog of every known condition.

    Raises CatalogError if two entries share a code or a condition class is
    left without a reporter.
    """
    catalog = ReporterCatalog(
        duplicated_variable_name=create_reporter(
            "duplicated_variable_name",
            codes.DUPLICATED_VARIABLE_NAME,
            Severity.ERROR,
            _duplicated_variable_name,
            at_property("name"),
            condition=c.DuplicatedVariableName,
            summary="A source item reuses a name already declared in the same scope.",
        ),
        numeric_value_is_not_integer=create_reporter(
            "numeric_value_is_not_integer",
            codes.NUMERIC_VALUE_IS_NOT_INTEGER,
            Severity.ERROR,
            _numeric_value_is_not_integer,
            at_property("value"),
            condition=c.NumericValueIsNotInteger,
            summary="A numeric literal is used where an integer is required.",
        ),
        binary_operator_not_defined=create_reporter(
            "binary_operator_not_defined",
            codes.BINARY_OPERATOR_NOT_DEFINED,
            Severity.ERROR,
            _binary_operator_not_defined,
            at_property("operator"),
            condition=c.BinaryOperatorNotDefined,
            summary="The binary operator has no definition for the operand type pair.",
        ),
        unary_operator_not_defined=create_reporter(
            "unary_operator_not_defined",
            codes.UNARY_OPERATOR_NOT_DEFINED,
            Severity.ERROR,
            _unary_operator_not_defined,
            at_property("operator"),
            condition=c.UnaryOperatorNotDefined,
            summary="The unary operator has no definition for the operand type.",
        ),
        expression_must_return_boolean=create_reporter(
            "expression_must_return_boolean",
            codes.EXPRESSION_MUST_RETURN_BOOLEAN,
            Severity.ERROR,
            _expression_must_return_boolean,
            whole_node(),
            condition=c.ExpressionMustReturnBoolean,
            summary="A condition (WHERE, HAVING, ON, ...) does not evaluate to a boolean.",
        ),
        all_star_selection_requires_table_sources=create_reporter(
            "all_star_selection_requires_table_sources",
            codes.ALL_STAR_SELECTION_REQUIRES_TABLE_SOURCES,
            Severity.ERROR,
            _all_star_selection_requires_table_sources,
            whole_node(),
            condition=c.AllStarSelectionRequiresTableSources,
            summary="SELECT * is used without a FROM clause.",
        ),
        table_definition_requires_at_least_one_column=create_reporter(
            "table_definition_requires_at_least_one_column",
            codes.TABLE_DEFINITION_REQUIRES_AT_LEAST_ONE_COLUMN,
            Severity.ERROR,
            _table_definition_requires_at_least_one_column,
            at_property("element"),
            condition=c.TableDefinitionRequiresAtLeastOneColumn,
            summary="The referenced table or record definition declares no columns.",
        ),
        sub_query_must_have_exactly_one_column=create_reporter(
            "sub_query_must_have_exactly_one_column",
            codes.SUB_QUERY_MUST_HAVE_EXACTLY_ONE_COLUMN,
            Severity.ERROR,
            _sub_query_must_have_exactly_one_column,
            at_property("sub_query"),
            condition=c.SubQueryMustHaveExactlyOneColumn,
            summary="A sub-query used as a scalar expression returns more than one column.",
        ),
        cannot_derive_type_of_expression=create_reporter(
            "cannot_derive_type_of_expression",
            codes.CANNOT_DERIVE_TYPE_OF_EXPRESSION,
            Severity.ERROR,
            _cannot_derive_type_of_expression,
            whole_node(),
            condition=c.CannotDeriveTypeOfExpression,
            summary="Type analysis could not determine the expression's type.",
        ),
        table_operation_column_count_mismatch=create_reporter(
            "table_operation_column_count_mismatch",
            codes.TABLE_OPERATION_COLUMN_COUNT_MISMATCH,
            Severity.ERROR,
            _table_operation_column_count_mismatch,
            at_property("operator"),
            condition=c.TableOperationColumnCountMismatch,
            summary="UNION/EXCEPT/INTERSECT operands have different column counts.",
        ),
        table_operation_column_type_mismatch=create_reporter(
            "table_operation_column_type_mismatch",
            codes.TABLE_OPERATION_COLUMN_TYPE_MISMATCH,
            Severity.ERROR,
            _table_operation_column_type_mismatch,
            at_property("operator"),
            condition=c.TableOperationColumnTypeMismatch,
            summary="UNION/EXCEPT/INTERSECT operands have incompatible column types.",
        ),
        incorrect_global_reference_target=create_reporter(
            "incorrect_global_reference_target",
            codes.INCORRECT_GLOBAL_REFERENCE_TARGET,
            Severity.ERROR,
            _incorrect_global_reference_target,
            at_property("element"),
            condition=c.IncorrectGlobalReferenceTarget,
            summary="A reference resolves to the wrong kind of definition.",
        ),
        unknown_data_type=create_reporter(
            "unknown_data_type",
            codes.UNKNOWN_DATA_TYPE,
            Severity.ERROR,
            _unknown_data_type,
            whole_node(),
            condition=c.UnknownDataType,
            summary="A data type name matches no built-in or user-defined type.",
        ),
    )
    logger.debug("built diagnostic catalog with %d reporters", len(catalog))
    return catalog
