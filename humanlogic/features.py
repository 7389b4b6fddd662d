"""
This module defines all Human Logic features using a unified registry system.
The CLI and the HTTP API both dispatch through it.
"""

from typing import (
    Dict,
    Any,
    Callable,
    Optional,
    TypeVar,
    Generic,
)
from dataclasses import dataclass
import logging

from humanlogic.category import CATEGORIES
from humanlogic.error_msg import HumanLogicError
from humanlogic.evaluator import evaluate
from humanlogic.logic import Logic
from humanlogic.operators import value_kind
from humanlogic.parser import parse_expression
from humanlogic.tables import OPERATIONS, to_markdown, truth_table

logger = logging.getLogger("humanlogic.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(success=False, error=error)


@dataclass
class Feature:
    """Base class for all Human Logic features"""

    name: str
    description: str
    handler: Callable


class FeatureRegistry:
    """Registry for all Human Logic features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        """Register a new feature"""
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        """Get a feature by name"""
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        """Get all registered features"""
        return cls._features.copy()


def describe_value(value: Any) -> Dict[str, Any]:
    """JSON-friendly description of a category, fuzzy value or Logic vector"""
    kind = value_kind(value)
    if kind == "category":
        return {"kind": kind, "value": value.value, "category": value.value}
    if kind == "fuzzy":
        return {"kind": kind, "value": float(value)}
    if kind == "logic":
        category = value.as_category()
        return {
            "kind": kind,
            "value": str(value),
            "values": {c.value: v for c, v in value.as_values().items()},
            "category": category.value if category else None,
            "valid": value.is_valid(),
        }
    raise HumanLogicError(f"Cannot describe value of type {type(value).__name__}")


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from humanlogic.version import get_version

    return OperationResult[Dict[str, str]].ok({"version": get_version()})


def handle_evaluate(expression: str = "", **kwargs) -> OperationResult[Dict[str, Any]]:
    """Parse and evaluate a logical expression"""
    if not expression or not expression.strip():
        return OperationResult[Dict[str, Any]].fail("Expression cannot be empty")

    try:
        syntax = parse_expression(expression)
        value = evaluate(syntax)
    except HumanLogicError as e:
        logger.debug("Evaluation of %r failed: %s", expression, e)
        return OperationResult[Dict[str, Any]].fail(str(e))

    result = describe_value(value)
    result["expression"] = syntax.to_syntax()
    logger.debug("%s = %s", result["expression"], result["value"])
    return OperationResult[Dict[str, Any]].ok(result)


def handle_truth_table(
    operation: str = "", vector: bool = False, **kwargs
) -> OperationResult[Dict[str, Any]]:
    """Build the truth table of a logical operation"""
    try:
        table = truth_table(operation, vector=vector)
    except ValueError as e:
        return OperationResult[Dict[str, Any]].fail(str(e))

    result = table.to_dict()
    result["vector"] = vector
    result["categories"] = [category.value for category in CATEGORIES]
    result["markdown"] = to_markdown(table)
    return OperationResult[Dict[str, Any]].ok(result)


def handle_dominance(values: Optional[Dict[str, float]] = None, **kwargs) -> OperationResult[Dict[str, Any]]:
    """Normalize a category-keyed vector and report its dominating category.

    Keys are category names in any case, e.g. "TRUE" or "true".
    """
    try:
        logic = Logic.from_values(
            {str(key).strip().upper(): value for key, value in (values or {}).items()}
        )
    except (TypeError, ValueError) as e:
        return OperationResult[Dict[str, Any]].fail(f"Invalid vector: {e}")

    result = describe_value(logic.normalize())
    result["matches"] = {c.value: logic.eq(c) for c in CATEGORIES}
    return OperationResult[Dict[str, Any]].ok(result)


# ----------------- Feature Registration -----------------

FeatureRegistry.register(
    Feature(
        name="version",
        description="Get the Human Logic version",
        handler=handle_version,
    )
)

FeatureRegistry.register(
    Feature(
        name="evaluate",
        description="Evaluate a logical expression",
        handler=handle_evaluate,
    )
)

FeatureRegistry.register(
    Feature(
        name="truth-table",
        description=f"Truth table of one of: {', '.join(OPERATIONS)}",
        handler=handle_truth_table,
    )
)

FeatureRegistry.register(
    Feature(
        name="dominance",
        description="Dominating category of a category-keyed vector",
        handler=handle_dominance,
    )
)

