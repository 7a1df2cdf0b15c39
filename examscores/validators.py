"""Validation utilities for score rows, records and configuration."""

from typing import Any, Sequence
import logging
import math

from .branches import BranchClassifier
from .models import Record, Rejection, TOO_FEW_FIELDS, UNKNOWN_BRANCH

logger = logging.getLogger(__name__)

MIN_FIELDS = 10

# 0-indexed positions in a score row. Columns 0, 1 and 8 are not read.
COL_STUDENT_ID = 2
COL_CAMPUS_ID = 3
COL_QUIZ = 4
COL_MIDSEM = 5
COL_LABTEST = 6
COL_WEEKLYLABS = 7
COL_COMPRE = 9
COL_TOTAL = 10


def parse_score(value: Any) -> float | None:
    """
    Parse a score cell.

    Returns None when the text is not a finite number; callers treat that
    as zero.
    """
    if value is None:
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def _cell(row: Sequence[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def _score(row: Sequence[str], index: int, row_number: int, warn: bool) -> float:
    raw = _cell(row, index)
    number = parse_score(raw)
    if number is None:
        if warn:
            logger.warning(
                "Row %d: column %d value %r is not a number, using 0", row_number, index, raw
            )
        return 0.0
    return number


def validate_row(
    row: Sequence[str],
    row_number: int,
    classifier: BranchClassifier,
    tolerance: float = 0.01,
    warn_on_unparsed: bool = False,
) -> Record | Rejection:
    """
    Turn one raw row into a Record, or reject it.

    Rows with fewer than ``MIN_FIELDS`` cells are rejected without a log line.
    Unknown branches are rejected with a warning. A declared total that
    differs from the component sum by more than ``tolerance`` is logged but
    the record is still returned.
    """
    if len(row) < MIN_FIELDS:
        return Rejection(row_number, TOO_FEW_FIELDS, str(len(row)))

    student_id = _cell(row, COL_STUDENT_ID)
    campus_id = _cell(row, COL_CAMPUS_ID)
    quiz = _score(row, COL_QUIZ, row_number, warn_on_unparsed)
    midsem = _score(row, COL_MIDSEM, row_number, warn_on_unparsed)
    labtest = _score(row, COL_LABTEST, row_number, warn_on_unparsed)
    weeklylabs = _score(row, COL_WEEKLYLABS, row_number, warn_on_unparsed)
    compre = _score(row, COL_COMPRE, row_number, warn_on_unparsed)
    total = _score(row, COL_TOTAL, row_number, warn_on_unparsed)

    branch = classifier.classify(campus_id)
    if branch is None:
        logger.warning("Skipping row %d due to invalid branch ID: %s", row_number, campus_id)
        return Rejection(row_number, UNKNOWN_BRANCH, campus_id)

    record = Record(
        student_id=student_id,
        branch=branch,
        quiz=quiz,
        midsem=midsem,
        labtest=labtest,
        weeklylabs=weeklylabs,
        compre=compre,
        reported_total=total,
        row_number=row_number,
    )

    if not record.total_matches(tolerance):
        logger.warning(
            "Discrepancy in total marks for EmpID %s: Expected %.2f, Found %.2f",
            student_id,
            record.computed_total,
            total,
        )

    return record


def validate_config(config: dict[str, Any]) -> list[dict[str, str]]:
    """
    Validate configuration and return list of issues.

    Returns:
        List of dicts with 'type' (error/warning) and 'message'.
    """
    issues = []

    tolerance = config.get("tolerance", 0)
    if (
        isinstance(tolerance, bool)
        or not isinstance(tolerance, (int, float))
        or not math.isfinite(tolerance)
        or tolerance < 0
    ):
        issues.append({
            "type": "error",
            "message": f"Tolerance must be a non-negative number, got {tolerance!r}"
        })

    top_n = config.get("top_n", 0)
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 0:
        issues.append({
            "type": "error",
            "message": f"top_n must be a non-negative integer, got {top_n!r}"
        })

    branches = config.get("branches", {})
    if not isinstance(branches, dict):
        issues.append({
            "type": "error",
            "message": f"branches must be an object, got {branches!r}"
        })
        return issues

    key_start = branches.get("key_start", 0)
    key_end = branches.get("key_end", 0)
    min_length = branches.get("min_length", 0)
    offsets = {"key_start": key_start, "key_end": key_end, "min_length": min_length}
    bad_offsets = [
        name for name, value in offsets.items()
        if isinstance(value, bool) or not isinstance(value, int)
    ]

    if bad_offsets:
        for name in bad_offsets:
            issues.append({
                "type": "error",
                "message": f"Branch {name} must be an integer, got {offsets[name]!r}"
            })
    elif not 0 <= key_start < key_end:
        issues.append({
            "type": "error",
            "message": f"Branch key offsets {key_start}-{key_end} are not a valid range"
        })
    elif min_length < key_end:
        issues.append({
            "type": "error",
            "message": f"min_length {min_length} is shorter than the branch key end {key_end}"
        })

    labels = branches.get("labels", {})
    if not isinstance(labels, dict):
        issues.append({
            "type": "error",
            "message": f"Branch labels must be an object, got {labels!r}"
        })
        return issues

    if not labels:
        issues.append({
            "type": "error",
            "message": "No branches defined"
        })

    key_width = 0 if bad_offsets else key_end - key_start
    for code, name in labels.items():
        if key_width > 0 and len(code) != key_width:
            issues.append({
                "type": "warning",
                "message": f"Branch code '{code}' can never match a {key_width}-character key"
            })
        if not str(name).strip():
            issues.append({
                "type": "warning",
                "message": f"Branch '{code}' has an empty name"
            })

    return issues


def validate_records(records: list[Record]) -> list[dict[str, str]]:
    """
    Check accepted records for batch-level problems.

    Returns:
        List of dicts with 'type' and 'message'.
    """
    issues = []

    if not records:
        issues.append({
            "type": "warning",
            "message": "No valid student rows found"
        })
        return issues

    # Check for duplicates
    seen = set()
    duplicates = []
    for record in records:
        if record.student_id in seen and record.student_id not in duplicates:
            duplicates.append(record.student_id)
        seen.add(record.student_id)

    if duplicates:
        issues.append({
            "type": "warning",
            "message": f"Duplicate student IDs: {', '.join(duplicates)}"
        })

    # Check for empty IDs
    empty_count = sum(1 for r in records if not r.student_id.strip())
    if empty_count:
        issues.append({
            "type": "warning",
            "message": f"{empty_count} row(s) with an empty student ID"
        })

    return issues
