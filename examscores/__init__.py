"""Exam score validation, ranking and branch averages."""

from .config_schema import DEFAULT_CONFIG, get_default_config, load_config, merge_config
from .models import Branch, Record, Rejection
from .branches import BranchClassifier
from .validators import parse_score, validate_config, validate_records, validate_row
from .aggregator import AggregationState, NoDataError, aggregate, fold
from .ranker import ScoreDimension, rank_all, top_n
from .pipeline import ScoreBatch, process_rows
from .reader import SpreadsheetError, read_rows
from .report import ReportData, build_report, format_report, averages_frame, rankings_frame
from .excel_generator import generate_workbook

__all__ = [
    "DEFAULT_CONFIG",
    "get_default_config",
    "load_config",
    "merge_config",
    "Branch",
    "Record",
    "Rejection",
    "BranchClassifier",
    "parse_score",
    "validate_config",
    "validate_records",
    "validate_row",
    "AggregationState",
    "NoDataError",
    "aggregate",
    "fold",
    "ScoreDimension",
    "rank_all",
    "top_n",
    "ScoreBatch",
    "process_rows",
    "SpreadsheetError",
    "read_rows",
    "ReportData",
    "build_report",
    "format_report",
    "averages_frame",
    "rankings_frame",
    "generate_workbook",
]
