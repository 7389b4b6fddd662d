from __future__ import annotations

from fractions import Fraction

import pytest

import humanlogic as hl
from humanlogic import category as d
from humanlogic import fuzzy as f
from humanlogic.category import CATEGORIES, FALSE, MAYBE, NEVER, TRUE, UNDEF
from humanlogic.error_msg import HumanLogicError, InvalidArgumentTypeError
from humanlogic.logic import Logic
from humanlogic.operators import and_, normalize, not_, or_, value_kind


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (TRUE, "category"),
        (UNDEF, "category"),
        (0.5, "fuzzy"),
        (1, "fuzzy"),
        (Fraction(1, 3), "fuzzy"),
        (Logic(0.5), "logic"),
        (True, None),
        (None, None),
        ("TRUE", None),
        ("0.5", None),
        ([0.1, 0.2], None),
    ],
)
def test_value_kind(value, kind):
    assert value_kind(value) == kind


@pytest.mark.unit
@pytest.mark.parametrize(("a", "b"), [(a, b) for a in CATEGORIES for b in CATEGORIES])
def test_categories_dispatch_to_discrete_tables(a, b):
    assert not_(a) is d.not_(a)
    assert and_(a, b) is d.and_(a, b)
    assert or_(a, b) is d.or_(a, b)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("a", "b"),
    [(0.0, 0.0), (0.2, 0.7), (1.0, 0.3), (-0.5, 0.4), (1.5, 0.9), (1, 0)],
)
def test_fuzzy_values_dispatch_to_scalar_operators(a, b):
    assert not_(a) == f.not_(a)
    assert and_(a, b) == f.and_(a, b)
    assert or_(a, b) == f.or_(a, b)
    assert normalize(a) == f.normalize(a)


@pytest.mark.unit
def test_fuzzy_results_are_floats():
    assert isinstance(and_(1, 0), float)
    assert normalize(Fraction(3, 2)) == 1.0


@pytest.mark.unit
def test_logic_values_dispatch_to_vector_operators(biased_logic):
    a = biased_logic(NEVER)
    b = biased_logic(MAYBE)
    assert not_(a) == a.not_()
    assert and_(a, b) == a.and_(b)
    assert or_(a, b) == a.or_(b)
    assert and_(a, b).as_category() is FALSE
    assert or_(a, b).as_category() is TRUE
    assert normalize(Logic(2, 2)) == Logic(0.5, 0.5)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("a", "b"),
    [
        (TRUE, 0.5),
        (0.5, TRUE),
        (Logic(0.5), 0.5),
        (TRUE, Logic(0.5)),
        (None, None),
        (None, TRUE),
        (TRUE, None),
        ("TRUE", "TRUE"),
        (True, False),
    ],
)
def test_binary_operators_reject_mismatched_kinds(a, b):
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        and_(a, b)
    assert excinfo.value.operation == "and"
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        or_(a, b)
    assert excinfo.value.operation == "or"


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "TRUE", True, object()])
def test_not_rejects_unknown_kinds(value):
    with pytest.raises(InvalidArgumentTypeError):
        not_(value)


@pytest.mark.unit
@pytest.mark.parametrize("value", [TRUE, None, "0.5", False])
def test_normalize_rejects_categories_and_unknown_kinds(value):
    with pytest.raises(InvalidArgumentTypeError):
        normalize(value)


@pytest.mark.unit
def test_invalid_argument_type_error_message():
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        and_(TRUE, 0.5)
    error = excinfo.value
    assert isinstance(error, TypeError)
    assert isinstance(error, HumanLogicError)
    assert str(error) == "Invalid argument type for and: (Category, float)"


@pytest.mark.unit
def test_package_exports_facade():
    assert hl.not_ is not_
    assert hl.and_(hl.TRUE, hl.MAYBE) is hl.MAYBE
    assert hl.or_(0.3, 0.6) == 0.6
    assert hl.normalize(hl.Logic(1, 1, 1, 1, 1)).as_list() == pytest.approx([0.2] * 5)
    assert isinstance(hl.__version__, str)
