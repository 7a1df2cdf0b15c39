"""Configuration schema and defaults for the score report."""

from typing import Any
import copy
import json
from pathlib import Path

DEFAULT_CONFIG: dict[str, Any] = {
    "branches": {
        # Campus IDs look like 2021A7PS0001; characters 4-6 hold the branch code.
        "key_start": 4,
        "key_end": 6,
        "min_length": 6,
        "labels": {
            "A1": "Chemical",
            "A2": "Civil",
            "A3": "EEE",
            "A4": "Mechanical",
            "A5": "Pharma",
            "A7": "CSE",
            "A8": "ENI",
            "AA": "ECE",
            "AD": "MnC",
            "B1": "MSc Biology",
            "B2": "MSc Chemistry",
            "B4": "MSc Maths",
            "B5": "MSc Physics"
        }
    },
    "tolerance": 0.01,
    "top_n": 3,
    "warn_on_unparsed_scores": False,
    "output_file": "score_report.xlsx",
    "logging": {
        "level": "INFO"
    }
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def merge_config(user_config: dict[str, Any]) -> dict[str, Any]:
    """
    Merge user configuration with defaults.

    User config values override defaults. Missing keys use default values.
    A user-supplied branch table replaces the default table entirely, so a
    cohort-prefixed scheme never mixes with the default codes.
    """
    result = get_default_config()

    if "branches" in user_config:
        branches = dict(user_config["branches"])
        if "labels" in branches:
            result["branches"]["labels"] = dict(branches.pop("labels"))
        result["branches"].update(branches)

    if "logging" in user_config:
        result["logging"].update(user_config["logging"])

    for key in ("tolerance", "top_n", "warn_on_unparsed_scores", "output_file"):
        if key in user_config:
            result[key] = user_config[key]

    return result


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load a JSON config file on top of the defaults (defaults only when no path)."""
    if config_path is None:
        return get_default_config()
    with open(config_path, "r", encoding="utf-8") as f:
        return merge_config(json.load(f))
