"""Evaluation of parsed logical expressions through the polymorphic operators."""

from __future__ import annotations

import logging
from typing import Any, Callable

from humanlogic import operators
from humanlogic.category import Category
from humanlogic.error_msg import EvaluationError, InvalidArgumentTypeError
from humanlogic.logic import Logic
from humanlogic.operators import Value
from humanlogic.parser import ECall, ECategory, ENumber, EVector, Expression, parse_expression

logger = logging.getLogger(__name__)


def _dominating_category(value: Any) -> Category:
    if not isinstance(value, Logic):
        raise InvalidArgumentTypeError("category", value)
    category = value.as_category()
    if category is None:
        raise EvaluationError(f"{value} is not valid and has no dominating category")
    return category


_FUNCTIONS: dict[str, tuple[Callable[..., Any], int]] = {
    "not": (operators.not_, 1),
    "and": (operators.and_, 2),
    "or": (operators.or_, 2),
    "normalize": (operators.normalize, 1),
    "category": (_dominating_category, 1),
}


def evaluate(expression: Expression) -> Value:
    """
    Evaluate an expression AST.

    Args:
        expression: Parsed expression

    Returns:
        A Category, a fuzzy value or a Logic vector

    Raises:
        EvaluationError: for unknown functions, wrong arity or operand kinds
    """
    if isinstance(expression, ECategory):
        return expression.value
    if isinstance(expression, ENumber):
        return expression.value
    if isinstance(expression, EVector):
        return Logic.from_array(expression.components)
    if isinstance(expression, ECall):
        return _evaluate_call(expression)
    raise EvaluationError(f"Unsupported expression type: {type(expression).__name__}")


def _evaluate_call(call: ECall) -> Value:
    entry = _FUNCTIONS.get(call.identifier)
    if entry is None:
        raise EvaluationError(
            f"Unknown function '{call.identifier}'", [(call.identifier, call.position)]
        )
    function, arity = entry
    if len(call.arguments) != arity:
        raise EvaluationError(
            f"Expected {arity} arguments, got {len(call.arguments)}",
            [(call.identifier, call.position)],
        )

    arguments = [evaluate(argument) for argument in call.arguments]
    try:
        return function(*arguments)
    except InvalidArgumentTypeError as exc:
        raise EvaluationError(exc.msg, [(call.identifier, call.position)]) from exc


def evaluate_text(content: str) -> Value:
    """Parse and evaluate an expression string"""
    expression = parse_expression(content)
    logger.debug("Evaluating %s", expression.to_syntax())
    return evaluate(expression)
