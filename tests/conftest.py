"""
Shared pytest fixtures for the exam score report tests.

Provides:
  - ``make_row``: builds an 11-column score row as text cells.
  - ``make_record``: builds a ``Record`` directly.
  - ``classifier``: the default two-character branch classifier.
  - Root logger state is restored after every test.
"""

from __future__ import annotations

import logging

import pytest

from examscores.branches import BranchClassifier
from examscores.config_schema import get_default_config
from examscores.models import Branch, Record

HEADER = [
    "S.No", "Name", "EmpID", "Campus ID", "Quiz", "Mid-Sem",
    "Lab Test", "Weekly Labs", "Pre-Compre", "Compre", "Total",
]


def _fmt(value) -> str:
    return value if isinstance(value, str) else f"{value:.2f}"


def build_row(
    emp_id: str = "E001",
    campus_id: str = "2021A7PS0001",
    quiz: float | str = 20.0,
    midsem: float | str = 50.0,
    labtest: float | str = 40.0,
    weeklylabs: float | str = 10.0,
    compre: float | str = 80.0,
    total: float | str | None = None,
) -> list[str]:
    if total is None:
        total = sum(
            v for v in (quiz, midsem, labtest, weeklylabs, compre) if not isinstance(v, str)
        )
    return [
        "1", "Student", emp_id, campus_id,
        _fmt(quiz), _fmt(midsem), _fmt(labtest), _fmt(weeklylabs),
        "", _fmt(compre), _fmt(total),
    ]


def build_record(
    student_id: str = "E001",
    code: str = "A7",
    name: str = "CSE",
    quiz: float = 20.0,
    midsem: float = 50.0,
    labtest: float = 40.0,
    weeklylabs: float = 10.0,
    compre: float = 80.0,
    total: float | None = None,
    row_number: int = 2,
) -> Record:
    if total is None:
        total = quiz + midsem + labtest + weeklylabs + compre
    return Record(
        student_id=student_id,
        branch=Branch(code, name),
        quiz=quiz,
        midsem=midsem,
        labtest=labtest,
        weeklylabs=weeklylabs,
        compre=compre,
        reported_total=total,
        row_number=row_number,
    )


@pytest.fixture
def make_row():
    return build_row


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def header():
    return list(HEADER)


@pytest.fixture
def config():
    return get_default_config()


@pytest.fixture
def classifier(config) -> BranchClassifier:
    return BranchClassifier.from_config(config)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
