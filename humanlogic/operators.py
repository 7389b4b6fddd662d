"""
Polymorphic logical operators.

A single set of NOT/AND/OR/normalize entry points for the three value kinds:

* category - a discrete Category
* fuzzy - a plain real number
* logic - a fuzzy common sense Logic vector

Every argument is tagged with value_kind() first; the operation is then looked
up in the table of the tagged kind. Binary operators require both operands to
carry the same tag.
"""

from __future__ import annotations

import logging
from numbers import Real
from typing import Any, Callable, Literal, Union

from humanlogic import category as d
from humanlogic import fuzzy as f
from humanlogic import logic as lg
from humanlogic.category import Category
from humanlogic.error_msg import InvalidArgumentTypeError
from humanlogic.fuzzy import Fuzzy
from humanlogic.logic import Logic

logger = logging.getLogger(__name__)

ValueKind = Literal["category", "fuzzy", "logic"]
Value = Union[Category, Fuzzy, Logic]

_UNARY: dict[ValueKind, dict[str, Callable[[Any], Any]]] = {
    "category": {"not": d.not_},
    "fuzzy": {"not": f.not_, "normalize": f.normalize},
    "logic": {"not": lg.not_, "normalize": lg.normalize},
}

_BINARY: dict[ValueKind, dict[str, Callable[[Any, Any], Any]]] = {
    "category": {"and": d.and_, "or": d.or_},
    "fuzzy": {"and": f.and_, "or": f.or_},
    "logic": {"and": lg.and_, "or": lg.or_},
}


def value_kind(value: Any) -> ValueKind | None:
    """Tag a value with its kind, or None if it is not a logical value."""
    if isinstance(value, Category):
        return "category"
    if isinstance(value, Logic):
        return "logic"
    # bool is a Real subclass but not a fuzzy value
    if isinstance(value, Real) and not isinstance(value, bool):
        return "fuzzy"
    return None


def _unary(operation: str, value: Any) -> Any:
    kind = value_kind(value)
    handler = _UNARY.get(kind, {}).get(operation)
    if handler is None:
        logger.debug("Rejected %s argument of type %s", operation, type(value).__name__)
        raise InvalidArgumentTypeError(operation, value)
    return handler(float(value) if kind == "fuzzy" else value)


def _binary(operation: str, a: Any, b: Any) -> Any:
    kind = value_kind(a)
    if kind is None or kind != value_kind(b):
        logger.debug(
            "Rejected %s arguments of types %s and %s",
            operation,
            type(a).__name__,
            type(b).__name__,
        )
        raise InvalidArgumentTypeError(operation, a, b)
    handler = _BINARY[kind][operation]
    if kind == "fuzzy":
        return handler(float(a), float(b))
    return handler(a, b)


def not_(value: Value) -> Value:
    """Logical NOT of a category, a fuzzy value or a Logic vector"""
    return _unary("not", value)


def and_(a: Value, b: Value) -> Value:
    """Logical AND of two values of the same kind"""
    return _binary("and", a, b)


def or_(a: Value, b: Value) -> Value:
    """Logical OR of two values of the same kind"""
    return _binary("or", a, b)


def normalize(value: Fuzzy | Logic) -> Fuzzy | Logic:
    """
    Normalize a fuzzy value or a Logic vector.

    Fuzzy values are clamped into [0.0, 1.0]; Logic vectors are scaled so that
    their components sum to 1.0 (see Logic.normalize). Categories are already
    canonical and are rejected.
    """
    return _unary("normalize", value)
