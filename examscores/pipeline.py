"""Row-to-report pipeline: validate, then aggregate."""

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence
import logging

from .aggregator import AggregationState, aggregate
from .branches import BranchClassifier
from .config_schema import get_default_config
from .models import Record, Rejection
from .validators import validate_row

logger = logging.getLogger(__name__)

HEADER_ROWS = 1


@dataclass
class ScoreBatch:
    """Everything learned from one spreadsheet."""

    records: list[Record] = field(default_factory=list)
    rejected: list[Rejection] = field(default_factory=list)
    flagged: list[Record] = field(default_factory=list)
    aggregation: AggregationState = field(default_factory=AggregationState)
    classifier: BranchClassifier = field(default_factory=BranchClassifier)


def process_rows(
    rows: Iterable[Sequence[str]],
    config: dict[str, Any] | None = None,
    classifier: BranchClassifier | None = None,
) -> ScoreBatch:
    """
    Validate every data row and aggregate the accepted records.

    The first row is a header and is always skipped. Bad rows are skipped or
    flagged; they never stop the run.

    Args:
        rows: Sheet rows as sequences of text cells
        config: Configuration dictionary (defaults if omitted)
        classifier: Branch classifier; built from ``config`` if omitted

    Returns:
        ScoreBatch with records in input order
    """
    if config is None:
        config = get_default_config()
    if classifier is None:
        classifier = BranchClassifier.from_config(config)

    tolerance = config.get("tolerance", 0.01)
    warn = config.get("warn_on_unparsed_scores", False)

    batch = ScoreBatch(classifier=classifier)
    for index, row in enumerate(rows):
        if index < HEADER_ROWS:
            continue
        outcome = validate_row(row, index + 1, classifier, tolerance, warn)
        if isinstance(outcome, Rejection):
            batch.rejected.append(outcome)
            continue
        batch.records.append(outcome)
        if not outcome.total_matches(tolerance):
            batch.flagged.append(outcome)

    batch.aggregation = aggregate(batch.records)
    logger.info(
        "Processed %d rows: %d accepted, %d rejected, %d flagged",
        len(batch.records) + len(batch.rejected),
        len(batch.records),
        len(batch.rejected),
        len(batch.flagged),
    )
    return batch
