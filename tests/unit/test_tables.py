from __future__ import annotations

import pytest

from humanlogic import category as d
from humanlogic.category import CATEGORIES, FALSE, MAYBE, NEVER, TRUE, UNDEF
from humanlogic.tables import OPERATIONS, to_markdown, truth_table


@pytest.mark.unit
@pytest.mark.parametrize("operation", OPERATIONS)
def test_vector_tables_match_discrete_tables(operation):
    assert truth_table(operation, vector=True).rows == truth_table(operation).rows


@pytest.mark.unit
def test_binary_table_lookup():
    table = truth_table("and")
    assert not table.is_unary
    for a in CATEGORIES:
        for b in CATEGORIES:
            assert table.lookup(a, b) is d.and_(a, b)
    with pytest.raises(ValueError):
        table.lookup(TRUE)


@pytest.mark.unit
def test_unary_table_lookup():
    table = truth_table("not")
    assert table.is_unary
    assert [table.lookup(c) for c in CATEGORIES] == [UNDEF, TRUE, MAYBE, NEVER, FALSE]


@pytest.mark.unit
def test_unknown_operation():
    with pytest.raises(ValueError, match="Unknown operation 'xor'"):
        truth_table("xor")


@pytest.mark.unit
def test_to_dict():
    data = truth_table("or").to_dict()
    assert data["operation"] == "or"
    assert data["unary"] is False
    assert data["table"]["NEVER"]["MAYBE"] == "TRUE"
    assert data["table"]["UNDEF"]["TRUE"] == "UNDEF"

    data = truth_table("not", vector=True).to_dict()
    assert data["unary"] is True
    assert data["table"] == {
        "UNDEF": "UNDEF",
        "FALSE": "TRUE",
        "NEVER": "MAYBE",
        "MAYBE": "NEVER",
        "TRUE": "FALSE",
    }


@pytest.mark.unit
def test_markdown_for_binary_table():
    lines = to_markdown(truth_table("and")).splitlines()
    assert lines[0] == "| `a` \\ `b` | `undef` | `false` | `never` | `maybe` | `true` |"
    assert lines[1] == "| --- | --- | --- | --- | --- | --- |"
    assert lines[4] == "| **`never`** | `undef` | `false` | `never` | `false` | `never` |"
    assert len(lines) == 2 + len(CATEGORIES)


@pytest.mark.unit
def test_markdown_for_unary_table():
    assert to_markdown(truth_table("not")).splitlines() == [
        "| `undef` | `false` | `never` | `maybe` | `true` |",
        "| --- | --- | --- | --- | --- |",
        "| `undef` | `true` | `maybe` | `never` | `false` |",
    ]
