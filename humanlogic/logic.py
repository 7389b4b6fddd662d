"""
Fuzzy common sense logic.

Human logic (also known as "common sense") is based on five categories:

* TRUE - certainly positive
* FALSE - certainly negative
* MAYBE - uncertain (could be either positive or negative)
* NEVER - impossible (neither positive nor negative)
* UNDEF - totally unknown

In fuzzy common sense logic a value is a five-dimensional vector. Each
component is the fuzzy value of the respective category, in the fixed order
UNDEF, FALSE, NEVER, MAYBE, TRUE. Results of the logical operators are
normalized so that the components sum to 1.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from humanlogic.category import CATEGORIES, UNDEF, Category
from humanlogic.error_msg import InvalidArgumentTypeError
from humanlogic.fuzzy import FUZZY_FALSE, FUZZY_TRUE, Fuzzy
from humanlogic.fuzzy import and_ as f_and
from humanlogic.fuzzy import not_ as f_not
from humanlogic.fuzzy import or_ as f_or

NORMALIZATION_TOLERANCE = 1e-8


def _component(value: Any) -> Fuzzy:
    if value is None:
        return FUZZY_FALSE
    return float(value)


def _field_name(category: Category) -> str:
    return category.value.lower()


@dataclass(frozen=True)
class Logic:
    """
    Fuzzy common sense logical value.

    Instances are immutable; every operator returns a new value. Use
    Logic.from_category, Logic.from_array and Logic.from_values for the more
    convenient ways of building one, and LogicAccumulator to sum evidence.
    """

    undef: Fuzzy = FUZZY_FALSE
    false: Fuzzy = FUZZY_FALSE
    never: Fuzzy = FUZZY_FALSE
    maybe: Fuzzy = FUZZY_FALSE
    true: Fuzzy = FUZZY_FALSE

    def __post_init__(self) -> None:
        for category in CATEGORIES:
            name = _field_name(category)
            object.__setattr__(self, name, _component(getattr(self, name)))

    # ----------------- Constructors -----------------

    @classmethod
    def from_category(cls, category: Category) -> "Logic":
        """One-hot value: FUZZY_TRUE for category, FUZZY_FALSE for the rest."""
        category = Category(category)
        return cls.from_array(
            FUZZY_TRUE if item is category else FUZZY_FALSE for item in CATEGORIES
        )

    @classmethod
    def from_array(cls, values: Iterable[Fuzzy]) -> "Logic":
        """
        Build a value from fuzzy values in UNDEF, FALSE, NEVER, MAYBE, TRUE order.

        Missing trailing components default to FUZZY_FALSE.
        """
        components = list(values)
        if len(components) > len(CATEGORIES):
            raise ValueError(
                f"Expected at most {len(CATEGORIES)} components, got {len(components)}"
            )
        return cls(*components)

    @classmethod
    def from_values(cls, values: Mapping[Category | str, Fuzzy]) -> "Logic":
        """Build a value from a category-keyed mapping; missing keys are FUZZY_FALSE."""
        components = {_field_name(Category(key)): value for key, value in values.items()}
        return cls(**components)

    # ----------------- Queries -----------------

    def get(self, category: Category) -> Fuzzy:
        return getattr(self, _field_name(Category(category)))

    def _components(self) -> tuple[Fuzzy, ...]:
        return (self.undef, self.false, self.never, self.maybe, self.true)

    def as_list(self) -> list[Fuzzy]:
        return list(self._components())

    def as_values(self) -> dict[Category, Fuzzy]:
        """A fresh category-keyed copy of the components."""
        return dict(zip(CATEGORIES, self._components()))

    def as_category(self) -> Category | None:
        """
        Dominating category, or None for an invalid value.

        Ties are resolved in UNDEF, FALSE, NEVER, MAYBE, TRUE order: a later
        category only takes over on a strictly greater component.
        """
        if not self.is_valid():
            return None
        result = UNDEF
        for category in CATEGORIES[1:]:
            if self.get(result) < self.get(category):
                result = category
        return result

    def scalar(self) -> float:
        """Sum of all components."""
        return self.undef + self.false + self.never + self.maybe + self.true

    def _normalizer(self) -> float:
        return self.scalar() or FUZZY_TRUE

    def get_normalized(self, category: Category) -> Fuzzy:
        """Component of category as it would be after normalize()."""
        return self.get(category) / self._normalizer()

    def is_valid(self) -> bool:
        """At least some weight is assigned to the categories."""
        return self.scalar() > FUZZY_FALSE

    def eq(self, category: Category) -> bool:
        """True if category is the dominating category of this value."""
        position = Category(category).position
        values = self.as_list()
        value = values[position]
        return (
            self.is_valid()
            and all(value > other for other in values[:position])
            and all(value >= other for other in values[position + 1:])
        )

    def ne(self, category: Category) -> bool:
        """True if category is not the dominating category of this value."""
        position = Category(category).position
        values = self.as_list()
        value = values[position]
        return (
            not self.is_valid()
            or any(value <= other for other in values[:position])
            or any(value < other for other in values[position + 1:])
        )

    def __str__(self) -> str:
        return "(" + ",".join(f"{value:.2f}" for value in self._components()) + ")"

    # ----------------- Operators -----------------

    def normalize(self) -> "Logic":
        """
        Scale the components so that they sum to 1.0.

        Returns the same instance when it is already normalized, and also for
        an invalid (all-zero) value, which has nothing to scale.
        """
        normalizer = self._normalizer()
        if abs(normalizer - FUZZY_TRUE) < NORMALIZATION_TOLERANCE:
            return self
        return self._scaled(FUZZY_TRUE / normalizer)

    def _scaled(self, factor: float) -> "Logic":
        return Logic(*(value * factor for value in self._components()))

    def not_(self) -> "Logic":
        """Fuzzy common sense NOT: swaps FALSE with TRUE and NEVER with MAYBE."""
        return Logic(
            undef=self.undef,
            false=self.true,
            never=self.maybe,
            maybe=self.never,
            true=self.false,
        )

    def and_(self, value: "Logic") -> "Logic":
        """
        Fuzzy common sense AND.

        UNDEF absorbs independently of the other components; the remaining
        weight is routed the way the discrete AND table routes each pair.
        """
        if not isinstance(value, Logic):
            raise InvalidArgumentTypeError("and", self, value)
        undef = f_or(self.undef, value.undef)
        not_undef = f_not(undef)
        return Logic(
            undef=undef,
            false=f_and(
                not_undef,
                f_or(
                    self.false,
                    value.false,
                    f_and(self.maybe, value.never),
                    f_and(self.never, value.maybe),
                ),
            ),
            never=f_and(
                not_undef,
                f_or(
                    f_and(self.never, value.never),
                    f_and(self.never, value.true),
                    f_and(self.true, value.never),
                ),
            ),
            maybe=f_and(
                not_undef,
                f_or(
                    f_and(self.maybe, value.maybe),
                    f_and(self.maybe, value.true),
                    f_and(self.true, value.maybe),
                ),
            ),
            true=f_and(not_undef, self.true, value.true),
        ).normalize()

    def or_(self, value: "Logic") -> "Logic":
        """Fuzzy common sense OR, the De Morgan dual of and_()."""
        if not isinstance(value, Logic):
            raise InvalidArgumentTypeError("or", self, value)
        undef = f_or(self.undef, value.undef)
        not_undef = f_not(undef)
        return Logic(
            undef=undef,
            false=f_and(not_undef, self.false, value.false),
            never=f_and(
                not_undef,
                f_or(
                    f_and(self.never, value.never),
                    f_and(self.never, value.false),
                    f_and(self.false, value.never),
                ),
            ),
            maybe=f_and(
                not_undef,
                f_or(
                    f_and(self.maybe, value.maybe),
                    f_and(self.maybe, value.false),
                    f_and(self.false, value.maybe),
                ),
            ),
            true=f_and(
                not_undef,
                f_or(
                    self.true,
                    value.true,
                    f_and(self.maybe, value.never),
                    f_and(self.never, value.maybe),
                ),
            ),
        ).normalize()

    def accumulate(self) -> "LogicAccumulator":
        """Start a LogicAccumulator seeded with this value."""
        return LogicAccumulator(self)

    def __invert__(self) -> "Logic":
        return self.not_()

    def __and__(self, value: Any) -> "Logic":
        if not isinstance(value, Logic):
            return NotImplemented
        return self.and_(value)

    def __or__(self, value: Any) -> "Logic":
        if not isinstance(value, Logic):
            return NotImplemented
        return self.or_(value)


class LogicAccumulator:
    """
    Mutable running sum of Logic values.

    Useful to accumulate unnormalized evidence category by category and
    normalize once at the end. Not thread-safe: accumulate per thread and
    merge the partial sums with add().
    """

    __slots__ = ("_values",)

    def __init__(self, initial: Logic | None = None) -> None:
        if initial is None:
            self._values = [FUZZY_FALSE] * len(CATEGORIES)
        elif isinstance(initial, Logic):
            self._values = initial.as_list()
        else:
            raise InvalidArgumentTypeError("accumulate", initial)

    def add(self, value: Logic | "LogicAccumulator") -> "LogicAccumulator":
        """Add value component-wise. Mutates and returns this accumulator."""
        if isinstance(value, LogicAccumulator):
            components = list(value._values)
        elif isinstance(value, Logic):
            components = value.as_list()
        else:
            raise InvalidArgumentTypeError("add", self, value)
        for position, component in enumerate(components):
            self._values[position] += component
        return self

    __iadd__ = add

    def get(self, category: Category) -> Fuzzy:
        return self._values[Category(category).position]

    def to_logic(self) -> Logic:
        """Snapshot of the current (unnormalized) sum."""
        return Logic.from_array(self._values)

    def normalize(self) -> Logic:
        return self.to_logic().normalize()

    def __str__(self) -> str:
        return str(self.to_logic())

    def __repr__(self) -> str:
        return f"LogicAccumulator({self.to_logic()})"


def not_(value: Logic) -> Logic:
    if isinstance(value, Logic):
        return value.not_()
    raise InvalidArgumentTypeError("not", value)


def and_(a: Logic, b: Logic) -> Logic:
    if isinstance(a, Logic):
        return a.and_(b)
    raise InvalidArgumentTypeError("and", a, b)


def or_(a: Logic, b: Logic) -> Logic:
    if isinstance(a, Logic):
        return a.or_(b)
    raise InvalidArgumentTypeError("or", a, b)


def normalize(value: Logic) -> Logic:
    if isinstance(value, Logic):
        return value.normalize()
    raise InvalidArgumentTypeError("normalize", value)
