"""
Discrete common sense logic.

Only five values exist: UNDEF, FALSE, NEVER, MAYBE and TRUE.
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """
    Discrete logical category.

    * UNDEF - totally unknown
    * FALSE - certainly negative
    * NEVER - impossible (neither positive nor negative)
    * MAYBE - uncertain (could be either positive or negative)
    * TRUE - certainly positive
    """

    UNDEF = "UNDEF"
    FALSE = "FALSE"
    NEVER = "NEVER"
    MAYBE = "MAYBE"
    TRUE = "TRUE"

    def __str__(self) -> str:
        return self.value

    @property
    def position(self) -> int:
        """Position of the category in the UNDEF, FALSE, NEVER, MAYBE, TRUE order."""
        return CATEGORIES.index(self)


UNDEF = Category.UNDEF
FALSE = Category.FALSE
NEVER = Category.NEVER
MAYBE = Category.MAYBE
TRUE = Category.TRUE

# Fixed component order shared with Logic vectors
CATEGORIES: tuple[Category, ...] = (UNDEF, FALSE, NEVER, MAYBE, TRUE)

_NOT = {
    UNDEF: UNDEF,
    FALSE: TRUE,
    NEVER: MAYBE,
    MAYBE: NEVER,
    TRUE: FALSE,
}


def not_(value: Category) -> Category:
    """
    Discrete logical NOT:

    | undef | false | never | maybe | true |
    | --- | --- | --- | --- | --- |
    | undef | true | maybe | never | false |
    """
    return _NOT[value]


def and_(a: Category, b: Category) -> Category:
    """
    Discrete logical AND:

    | a \\ b | undef | false | never | maybe | true |
    | --- | --- | --- | --- | --- | --- |
    | **undef** | undef | undef | undef | undef | undef |
    | **false** | undef | false | false | false | false |
    | **never** | undef | false | never | false | never |
    | **maybe** | undef | false | false | maybe | maybe |
    | **true** | undef | false | never | maybe | true |
    """
    if a is UNDEF or b is UNDEF:
        return UNDEF
    if a is FALSE or b is FALSE:
        return FALSE
    if a is TRUE:
        return b
    if b is TRUE:
        return a
    if a is b:
        return a
    # never and maybe
    return FALSE


def or_(a: Category, b: Category) -> Category:
    """
    Discrete logical OR:

    | a \\ b | undef | false | never | maybe | true |
    | --- | --- | --- | --- | --- | --- |
    | **undef** | undef | undef | undef | undef | undef |
    | **false** | undef | false | never | maybe | true |
    | **never** | undef | never | never | true | true |
    | **maybe** | undef | maybe | true | maybe | true |
    | **true** | undef | true | true | true | true |
    """
    if a is UNDEF or b is UNDEF:
        return UNDEF
    if a is TRUE or b is TRUE:
        return TRUE
    if a is FALSE:
        return b
    if b is FALSE:
        return a
    if a is b:
        return a
    return TRUE
