"""Report data assembly and text rendering."""

from dataclasses import dataclass, field
from typing import Iterable

import pandas as pd

from .aggregator import NoDataError
from .pipeline import ScoreBatch
from .ranker import ScoreDimension, rank_all

RULE = "=" * 38


@dataclass(frozen=True)
class RankedEntry:
    rank: int
    student_id: str
    score: float


@dataclass(frozen=True)
class BranchAverage:
    code: str
    name: str
    average: float | None
    count: int


@dataclass
class ReportData:
    """What the report shows, independent of how it is rendered."""

    top_n: int
    rankings: dict[ScoreDimension, list[RankedEntry]] = field(default_factory=dict)
    overall_average: float | None = None
    branch_averages: list[BranchAverage] = field(default_factory=list)
    record_count: int = 0
    diagnostics: list[dict[str, str]] = field(default_factory=list)


def _safe_average(fn, *args) -> float | None:
    try:
        return fn(*args)
    except NoDataError:
        return None


def build_report(
    batch: ScoreBatch,
    top_n: int = 3,
    dimensions: Iterable[ScoreDimension] = ScoreDimension,
) -> ReportData:
    """Rank and average a processed batch."""
    rankings = {}
    for dim, ranked in rank_all(batch.records, top_n, dimensions).items():
        rankings[dim] = [
            RankedEntry(i + 1, record.student_id, dim.score(record))
            for i, record in enumerate(ranked)
        ]

    agg = batch.aggregation
    branch_averages = [
        BranchAverage(
            code=code,
            name=batch.classifier.label_for(code),
            average=_safe_average(agg.average, code),
            count=agg.count(code),
        )
        for code in agg.branches()
    ]

    diagnostics = []
    for rejection in batch.rejected:
        diagnostics.append({
            "row": str(rejection.row_number),
            "type": rejection.reason,
            "message": rejection.detail,
        })
    for record in batch.flagged:
        diagnostics.append({
            "row": str(record.row_number),
            "type": "total_mismatch",
            "message": (
                f"EmpID {record.student_id}: Expected {record.computed_total:.2f}, "
                f"Found {record.reported_total:.2f}"
            ),
        })
    diagnostics.sort(key=lambda d: int(d["row"]))

    return ReportData(
        top_n=top_n,
        rankings=rankings,
        overall_average=_safe_average(agg.overall_average),
        branch_averages=branch_averages,
        record_count=len(batch.records),
        diagnostics=diagnostics,
    )


def format_average(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.2f}"


def format_report(data: ReportData) -> str:
    """Render the two report sections as plain text."""
    lines = [RULE, f"Top {data.top_n} Students for Each Component"]
    for dim, entries in data.rankings.items():
        lines.append("")
        lines.append(f"Top {data.top_n} for {dim.title}:")
        for entry in entries:
            lines.append(f"{entry.rank}. EmpID: {entry.student_id} - {entry.score:.2f}")

    lines.append("")
    lines.append(RULE)
    lines.append("Overall and Branch-Wise Averages")
    lines.append(f"Overall Average Marks: {format_average(data.overall_average)}")
    for branch in data.branch_averages:
        lines.append(
            f"Branch {branch.code} ({branch.name}) Average Marks: {format_average(branch.average)}"
        )
    return "\n".join(lines)


def rankings_frame(data: ReportData, dimension: ScoreDimension) -> pd.DataFrame:
    """One dimension's ranking as a DataFrame (Rank, EmpID, Score)."""
    entries = data.rankings.get(dimension, [])
    return pd.DataFrame(
        {
            "Rank": [e.rank for e in entries],
            "EmpID": [e.student_id for e in entries],
            "Score": [round(e.score, 2) for e in entries],
        }
    )


def averages_frame(data: ReportData) -> pd.DataFrame:
    """Branch averages as a DataFrame, overall row first."""
    rows = [{
        "Branch": "All",
        "Name": "Overall",
        "Students": data.record_count,
        "Average": None if data.overall_average is None else round(data.overall_average, 2),
    }]
    for b in data.branch_averages:
        rows.append({
            "Branch": b.code,
            "Name": b.name,
            "Students": b.count,
            "Average": None if b.average is None else round(b.average, 2),
        })
    return pd.DataFrame(rows, columns=["Branch", "Name", "Students", "Average"])
