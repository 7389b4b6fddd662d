"""Truth tables of the discrete operators and of their fuzzy vector counterparts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from humanlogic import category as d
from humanlogic.category import CATEGORIES, Category
from humanlogic.logic import Logic

OPERATIONS = ("not", "and", "or")


def _vector_not(a: Category) -> Category | None:
    return Logic.from_category(a).not_().as_category()


def _vector_and(a: Category, b: Category) -> Category | None:
    return Logic.from_category(a).and_(Logic.from_category(b)).as_category()


def _vector_or(a: Category, b: Category) -> Category | None:
    return Logic.from_category(a).or_(Logic.from_category(b)).as_category()


_DISCRETE: dict[str, Callable[..., Category | None]] = {
    "not": d.not_,
    "and": d.and_,
    "or": d.or_,
}

_VECTOR: dict[str, Callable[..., Category | None]] = {
    "not": _vector_not,
    "and": _vector_and,
    "or": _vector_or,
}


@dataclass(frozen=True)
class TruthTable:
    """
    Results of a logical operation over all categories.

    For binary operations rows[i][j] is the result for CATEGORIES[i] and
    CATEGORIES[j]; unary operations have a single row.
    """

    operation: str
    rows: tuple[tuple[Category | None, ...], ...]

    @property
    def is_unary(self) -> bool:
        return len(self.rows) == 1

    def lookup(self, a: Category, b: Category | None = None) -> Category | None:
        if self.is_unary:
            return self.rows[0][Category(a).position]
        if b is None:
            raise ValueError(f"Operation '{self.operation}' needs two operands")
        return self.rows[Category(a).position][Category(b).position]

    def to_dict(self) -> dict[str, Any]:
        if self.is_unary:
            table: dict[str, Any] = {
                a.value: _name(result) for a, result in zip(CATEGORIES, self.rows[0])
            }
        else:
            table = {
                a.value: {b.value: _name(result) for b, result in zip(CATEGORIES, row)}
                for a, row in zip(CATEGORIES, self.rows)
            }
        return {"operation": self.operation, "unary": self.is_unary, "table": table}


def _name(category: Category | None) -> str | None:
    return None if category is None else category.value


def truth_table(operation: str, vector: bool = False) -> TruthTable:
    """
    Build the truth table of operation ("not", "and" or "or").

    With vector=True the results come from the fuzzy vector operators applied
    to one-hot values and collapsed back with Logic.as_category(); both kinds
    of table are identical.
    """
    functions = _VECTOR if vector else _DISCRETE
    if operation not in functions:
        raise ValueError(
            f"Unknown operation '{operation}', expected one of: {', '.join(OPERATIONS)}"
        )
    function = functions[operation]
    if operation == "not":
        rows = (tuple(function(a) for a in CATEGORIES),)
    else:
        rows = tuple(tuple(function(a, b) for b in CATEGORIES) for a in CATEGORIES)
    return TruthTable(operation=operation, rows=rows)


def _cell(category: Category | None) -> str:
    return "-" if category is None else f"`{category.value.lower()}`"


def to_markdown(table: TruthTable) -> str:
    """Render a truth table as a Markdown table"""
    names = [_cell(category) for category in CATEGORIES]
    if table.is_unary:
        lines = [
            "| " + " | ".join(names) + " |",
            "|" + " --- |" * len(names),
            "| " + " | ".join(_cell(result) for result in table.rows[0]) + " |",
        ]
        return "\n".join(lines)

    lines = [
        "| `a` \\ `b` | " + " | ".join(names) + " |",
        "|" + " --- |" * (len(names) + 1),
    ]
    for a, row in zip(CATEGORIES, table.rows):
        cells = " | ".join(_cell(result) for result in row)
        lines.append(f"| **{_cell(a)}** | {cells} |")
    return "\n".join(lines)
