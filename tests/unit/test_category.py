from __future__ import annotations

import pytest

from humanlogic.category import CATEGORIES, FALSE, MAYBE, NEVER, TRUE, UNDEF, Category, and_, not_, or_

# Rows are the left operand, columns the right one, both in CATEGORIES order
AND_TABLE = [
    [UNDEF, UNDEF, UNDEF, UNDEF, UNDEF],
    [UNDEF, FALSE, FALSE, FALSE, FALSE],
    [UNDEF, FALSE, NEVER, FALSE, NEVER],
    [UNDEF, FALSE, FALSE, MAYBE, MAYBE],
    [UNDEF, FALSE, NEVER, MAYBE, TRUE],
]

OR_TABLE = [
    [UNDEF, UNDEF, UNDEF, UNDEF, UNDEF],
    [UNDEF, FALSE, NEVER, MAYBE, TRUE],
    [UNDEF, NEVER, NEVER, TRUE, TRUE],
    [UNDEF, MAYBE, TRUE, MAYBE, TRUE],
    [UNDEF, TRUE, TRUE, TRUE, TRUE],
]

PAIRS = [(a, b) for a in CATEGORIES for b in CATEGORIES]


@pytest.mark.unit
def test_category_order_and_names():
    assert CATEGORIES == (UNDEF, FALSE, NEVER, MAYBE, TRUE)
    assert [c.position for c in CATEGORIES] == [0, 1, 2, 3, 4]
    assert str(MAYBE) == "MAYBE"
    assert Category("NEVER") is NEVER


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [(UNDEF, UNDEF), (FALSE, TRUE), (NEVER, MAYBE), (MAYBE, NEVER), (TRUE, FALSE)],
)
def test_not(value, expected):
    assert not_(value) is expected


@pytest.mark.unit
@pytest.mark.parametrize("value", CATEGORIES)
def test_not_is_an_involution(value):
    assert not_(not_(value)) is value


@pytest.mark.unit
@pytest.mark.parametrize(("a", "b"), PAIRS)
def test_and_table(a, b):
    assert and_(a, b) is AND_TABLE[a.position][b.position]


@pytest.mark.unit
@pytest.mark.parametrize(("a", "b"), PAIRS)
def test_or_table(a, b):
    assert or_(a, b) is OR_TABLE[a.position][b.position]


@pytest.mark.unit
@pytest.mark.parametrize(("a", "b"), PAIRS)
def test_de_morgan(a, b):
    assert not_(and_(a, b)) is or_(not_(a), not_(b))
    assert not_(or_(a, b)) is and_(not_(a), not_(b))


@pytest.mark.unit
@pytest.mark.parametrize(("a", "b"), PAIRS)
def test_and_or_are_commutative(a, b):
    assert and_(a, b) is and_(b, a)
    assert or_(a, b) is or_(b, a)
