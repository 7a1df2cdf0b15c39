"""
Tests for examscores/branches.py.

What we test
------------
BranchClassifier.classify():
  - Known code at offsets 4-6 resolves to (code, name).
  - Unknown codes and IDs shorter than 6 characters yield None.
  - A substituted table with cohort offsets (0-6) uses only its own keys.
  - The table is read-only after construction.
"""

from __future__ import annotations

import pytest

from examscores.branches import BranchClassifier
from examscores.models import Branch


def test_known_code_resolves(classifier):
    assert classifier.classify("2021A7PS0001") == Branch("A7", "CSE")
    assert classifier.classify("2024AAPS1234") == Branch("AA", "ECE")


def test_unknown_code_is_none(classifier):
    assert classifier.classify("2021XXPS0001") is None


@pytest.mark.parametrize("raw", ["", "2021A", "A7"])
def test_short_identifier_is_none(classifier, raw):
    assert classifier.key_for(raw) is None
    assert classifier.classify(raw) is None


def test_exactly_min_length_is_classified(classifier):
    assert classifier.classify("2021A7") == Branch("A7", "CSE")


def test_cohort_table_substitution():
    cohort = BranchClassifier(
        labels={"2024A7": "CSE 2024"}, key_start=0, key_end=6, min_length=6
    )
    assert cohort.classify("2024A7PS0001") == Branch("2024A7", "CSE 2024")
    # The short-code scheme is not consulted.
    assert cohort.classify("2021A7PS0001") is None


def test_table_is_read_only(classifier):
    with pytest.raises(TypeError):
        classifier.labels["ZZ"] = "Nope"


def test_table_copied_from_source():
    source = {"A7": "CSE"}
    c = BranchClassifier(labels=source)
    source["A8"] = "ENI"
    assert c.classify("2021A8PS0001") is None


def test_label_for_falls_back_to_code(classifier):
    assert classifier.label_for("A7") == "CSE"
    assert classifier.label_for("ZZ") == "ZZ"
