# tests/conftest.py

import pytest

from models.roster import Roster
from models.student_record import StudentKind, StudentRecord


@pytest.fixture
def sample_roster():
    return Roster()


@pytest.fixture
def sample_student():
    return StudentRecord(1, "Bob", 56.0, "Computer Science")


@pytest.fixture
def sample_graduate_student():
    return StudentRecord(2, "Alice", 33.0, "Physics", StudentKind.GRADUATE)


@pytest.fixture
def graded_roster():
    roster = Roster()
    grades = [11.0, 56.0, 33.0, 33.0, 11.0, 56.0]

    for i, grade in enumerate(grades, 1):
        kind = StudentKind.GRADUATE if i % 2 == 0 else StudentKind.UNDERGRADUATE
        roster.add_student(StudentRecord(i, f"Student {i}", grade, "History", kind))

    return roster
