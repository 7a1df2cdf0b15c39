"""Top-N rankings per scoring dimension."""

from enum import Enum
from typing import Callable, Iterable, Sequence

from .models import Record


def _quiz(r: Record) -> float:
    return r.quiz


def _midsem(r: Record) -> float:
    return r.midsem


def _labtest(r: Record) -> float:
    return r.labtest


def _weeklylabs(r: Record) -> float:
    return r.weeklylabs


def _compre(r: Record) -> float:
    return r.compre


def _total(r: Record) -> float:
    return r.reported_total


class ScoreDimension(Enum):
    """Scoring dimensions in report order: (title, projection)."""

    QUIZ = ("Quiz (30)", _quiz)
    MIDSEM = ("Mid-Sem (75)", _midsem)
    LABTEST = ("Lab Test (60)", _labtest)
    WEEKLYLABS = ("Weekly Labs", _weeklylabs)
    COMPRE = ("Compre (105)", _compre)
    TOTAL = ("Total (300)", _total)

    def __init__(self, title: str, selector: Callable[[Record], float]):
        self.title = title
        self.selector = selector

    def score(self, record: Record) -> float:
        return self.selector(record)


def top_n(
    records: Sequence[Record],
    selector: Callable[[Record], float],
    n: int,
) -> list[Record]:
    """
    Return at most ``n`` records, highest score first.

    Records with equal scores keep their input order.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    # sorted() is stable, and reverse=True keeps equal items in input order.
    return sorted(records, key=selector, reverse=True)[:n]


def rank_all(
    records: Sequence[Record],
    n: int,
    dimensions: Iterable[ScoreDimension] = ScoreDimension,
) -> dict[ScoreDimension, list[Record]]:
    """Rank ``records`` independently for each dimension."""
    return {dim: top_n(records, dim.selector, n) for dim in dimensions}
