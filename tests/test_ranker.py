"""
Tests for examscores/ranker.py.

What we test
------------
top_n():
  - Descending by the selected score, at most n records.
  - Equal scores keep input order.
  - Re-ranking a ranked list gives the same list.
  - n larger than the input returns everything; n=0 returns nothing; n<0 raises.

ScoreDimension / rank_all():
  - Six dimensions in report order; TOTAL uses the declared total.
  - Each dimension is ranked independently of the others.
"""

from __future__ import annotations

import pytest

from examscores.ranker import ScoreDimension, rank_all, top_n


@pytest.fixture
def records(make_record):
    return [
        make_record("E1", quiz=10.0, compre=90.0, total=300.0),
        make_record("E2", quiz=25.0, compre=60.0, total=250.0),
        make_record("E3", quiz=25.0, compre=95.0, total=250.0),
        make_record("E4", quiz=5.0, compre=100.0, total=280.0),
    ]


def _ids(records):
    return [r.student_id for r in records]


def test_top_n_descending(records):
    ranked = top_n(records, ScoreDimension.TOTAL.selector, 3)
    assert _ids(ranked) == ["E1", "E4", "E2"]


def test_ties_keep_input_order(records):
    ranked = top_n(records, ScoreDimension.QUIZ.selector, 2)
    assert _ids(ranked) == ["E2", "E3"]

    reversed_input = list(reversed(records))
    ranked = top_n(reversed_input, ScoreDimension.QUIZ.selector, 2)
    assert _ids(ranked) == ["E3", "E2"]


def test_rerank_is_idempotent(records):
    selector = ScoreDimension.TOTAL.selector
    once = top_n(records, selector, 3)
    twice = top_n(once, selector, 3)
    assert once == twice


def test_n_larger_than_input(records):
    ranked = top_n(records, ScoreDimension.COMPRE.selector, 10)
    assert _ids(ranked) == ["E4", "E3", "E1", "E2"]


def test_n_zero(records):
    assert top_n(records, ScoreDimension.QUIZ.selector, 0) == []


def test_negative_n_raises(records):
    with pytest.raises(ValueError):
        top_n(records, ScoreDimension.QUIZ.selector, -1)


def test_input_not_mutated(records):
    before = list(records)
    top_n(records, ScoreDimension.QUIZ.selector, 3)
    assert records == before


def test_dimension_order_and_titles():
    assert [d.title for d in ScoreDimension] == [
        "Quiz (30)", "Mid-Sem (75)", "Lab Test (60)",
        "Weekly Labs", "Compre (105)", "Total (300)",
    ]


def test_total_dimension_uses_declared_total(make_record):
    record = make_record(total=123.0)
    assert ScoreDimension.TOTAL.score(record) == 123.0
    assert record.computed_total == 200.0


@pytest.mark.parametrize("dim,attr", [
    (ScoreDimension.QUIZ, "quiz"),
    (ScoreDimension.MIDSEM, "midsem"),
    (ScoreDimension.LABTEST, "labtest"),
    (ScoreDimension.WEEKLYLABS, "weeklylabs"),
    (ScoreDimension.COMPRE, "compre"),
])
def test_component_projections(make_record, dim, attr):
    record = make_record(quiz=1.0, midsem=2.0, labtest=3.0, weeklylabs=4.0, compre=5.0)
    assert dim.score(record) == getattr(record, attr)


def test_rank_all_is_independent(records):
    result = rank_all(records, 1)
    assert list(result) == list(ScoreDimension)
    assert _ids(result[ScoreDimension.QUIZ]) == ["E2"]
    assert _ids(result[ScoreDimension.COMPRE]) == ["E4"]
    assert _ids(result[ScoreDimension.TOTAL]) == ["E1"]


def test_rank_all_subset(records):
    result = rank_all(records, 2, [ScoreDimension.TOTAL])
    assert list(result) == [ScoreDimension.TOTAL]
