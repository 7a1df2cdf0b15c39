"""Typed records produced by row validation."""

from dataclasses import dataclass
from typing import NamedTuple


class Branch(NamedTuple):
    """A resolved branch: short code (``A7``) and its display name (``CSE``)."""

    code: str
    name: str


@dataclass(frozen=True)
class Record:
    """One accepted student row. Built once and never mutated."""

    student_id: str
    branch: Branch
    quiz: float
    midsem: float
    labtest: float
    weeklylabs: float
    compre: float
    reported_total: float
    row_number: int = 0

    @property
    def component_scores(self) -> dict[str, float]:
        return {
            "quiz": self.quiz,
            "midsem": self.midsem,
            "labtest": self.labtest,
            "weeklylabs": self.weeklylabs,
            "compre": self.compre,
        }

    @property
    def pre_compre_total(self) -> float:
        return self.quiz + self.midsem + self.labtest + self.weeklylabs

    @property
    def computed_total(self) -> float:
        return self.pre_compre_total + self.compre

    def total_matches(self, tolerance: float) -> bool:
        """True when the declared total is within ``tolerance`` of the component sum."""
        return abs(self.computed_total - self.reported_total) <= tolerance


@dataclass(frozen=True)
class Rejection:
    """A row that did not become a Record."""

    row_number: int
    reason: str
    detail: str = ""


TOO_FEW_FIELDS = "too_few_fields"
UNKNOWN_BRANCH = "unknown_branch"
