"""Per-branch and overall totals over accepted records."""

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable

from .models import Record


class NoDataError(LookupError):
    """Raised when an average is requested for a group with no records."""


@dataclass(frozen=True)
class BranchTotals:
    total: float = 0.0
    count: int = 0

    def add(self, value: float) -> "BranchTotals":
        return BranchTotals(self.total + value, self.count + 1)

    def average(self) -> float:
        if self.count == 0:
            raise NoDataError("no records")
        return self.total / self.count


@dataclass(frozen=True)
class AggregationState:
    """
    Sums and counts of declared totals, keyed by branch code.

    Branch keys keep the order in which each branch was first seen.
    """

    by_branch: dict[str, BranchTotals] = field(default_factory=dict)
    grand: BranchTotals = field(default_factory=BranchTotals)

    def branches(self) -> list[str]:
        return list(self.by_branch)

    def count(self, branch_code: str) -> int:
        return self.by_branch.get(branch_code, BranchTotals()).count

    def average(self, branch_code: str) -> float:
        totals = self.by_branch.get(branch_code, BranchTotals())
        try:
            return totals.average()
        except NoDataError:
            raise NoDataError(f"No records for branch {branch_code}") from None

    def overall_average(self) -> float:
        try:
            return self.grand.average()
        except NoDataError:
            raise NoDataError("No records in batch") from None


def fold(state: AggregationState, record: Record) -> AggregationState:
    """Return a new state with ``record.reported_total`` added."""
    code = record.branch.code
    by_branch = dict(state.by_branch)
    by_branch[code] = by_branch.get(code, BranchTotals()).add(record.reported_total)
    return AggregationState(by_branch, state.grand.add(record.reported_total))


def aggregate(records: Iterable[Record]) -> AggregationState:
    """Fold records in input order."""
    return reduce(fold, records, AggregationState())
