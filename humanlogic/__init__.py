"""
Human Logic - fuzzy common sense logic.

The three layers can be used directly (humanlogic.fuzzy, humanlogic.category,
humanlogic.logic) or through the polymorphic operators exported here.
"""

from humanlogic.category import CATEGORIES, FALSE, MAYBE, NEVER, TRUE, UNDEF, Category
from humanlogic.error_msg import HumanLogicError, InvalidArgumentTypeError
from humanlogic.fuzzy import FUZZY_FALSE, FUZZY_TRUE, Fuzzy
from humanlogic.logic import Logic, LogicAccumulator
from humanlogic.operators import and_, normalize, not_, or_, value_kind
from humanlogic.version import __version__

__all__ = [
    "CATEGORIES",
    "Category",
    "FALSE",
    "FUZZY_FALSE",
    "FUZZY_TRUE",
    "Fuzzy",
    "HumanLogicError",
    "InvalidArgumentTypeError",
    "Logic",
    "LogicAccumulator",
    "MAYBE",
    "NEVER",
    "TRUE",
    "UNDEF",
    "__version__",
    "and_",
    "normalize",
    "not_",
    "or_",
    "value_kind",
]
