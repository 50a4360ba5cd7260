# models/student_record.py

"""
Represents a single student held in the Roster.

Stores the identifying information (a unique integer ID and a unique name), the
student's category (undergraduate or graduate), their major, and a mutable grade.

The ID, name, and kind are fixed once the record is created; only the grade may
change afterwards. Undergraduate and graduate students share this one type, and
the `kind` tag decides the label used when the record is displayed.
"""

from __future__ import annotations

import math
from enum import Enum


class StudentKind(str, Enum):
    UNDERGRADUATE = "Undergraduate"
    GRADUATE = "Graduate"

    @classmethod
    def from_selector(cls, selector: int) -> StudentKind:
        """
        Maps a numeric menu selector to a `StudentKind`.

        Args:
            selector (int): 1 for Undergraduate, 2 for Graduate.

        Returns:
            The matching `StudentKind`.

        Raises:
            ValueError: If the selector is neither 1 nor 2.
        """
        selectors = {1: cls.UNDERGRADUATE, 2: cls.GRADUATE}

        try:
            return selectors[selector]

        except (KeyError, TypeError):
            raise ValueError(f"Invalid type '{selector}'. Type must be 1 or 2.")


class StudentRecord:

    def __init__(
        self,
        id: int,
        name: str,
        grade: float,
        major: str,
        kind: StudentKind = StudentKind.UNDERGRADUATE,
    ):
        self._id: int = StudentRecord.validate_id_input(id)
        self._name: str = StudentRecord.validate_name_input(name)
        self._grade: float = StudentRecord.validate_grade_input(grade)
        self._major: str = major
        self._kind: StudentKind = StudentKind(kind)

    # === properties ===

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> StudentKind:
        return self._kind

    @property
    def is_graduate(self) -> bool:
        return self._kind is StudentKind.GRADUATE

    @property
    def major(self) -> str:
        return self._major

    @property
    def grade(self) -> float:
        return self._grade

    @grade.setter
    def grade(self, grade: float) -> None:
        self._grade = StudentRecord.validate_grade_input(grade)

    # === serialization ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "kind": self._kind.value,
            "grade": self._grade,
            "major": self._major,
        }

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"StudentRecord({self._id}, {self._name}, {self._grade}, {self._major}, {self._kind.value})"

    def __str__(self) -> str:
        return (
            f"{self._kind.value} Student ID: {self._id}, Full Name: {self._name}, "
            f"Grade: {self._grade}, Major: {self._major}"
        )

    # === data validators ===

    @staticmethod
    def validate_name_input(name: str) -> str:
        """
        Validates a student name.

        Surrounding whitespace is removed, but the original casing is kept for display.

        Raises:
            ValueError: If the name is empty or only whitespace.
        """
        name = name.strip()
        if not name:
            raise ValueError("Invalid input. Name cannot be blank.")
        return name

    @staticmethod
    def validate_id_input(id: int) -> int:
        """
        Validates a student ID.

        Raises:
            ValueError: If the ID is not an integer. Booleans are rejected even though they subclass `int`.
        """
        if isinstance(id, bool) or not isinstance(id, int):
            raise ValueError(f"Invalid input. Student ID must be an integer, got {id!r}.")
        return id

    @staticmethod
    def validate_grade_input(grade: float) -> float:
        """
        Validates and normalizes a grade value.

        Args:
            grade: Any value convertible to `float`.

        Returns:
            The grade as a `float`.

        Raises:
            ValueError: If the grade is not a number, or is NaN or infinite.
        """
        grade = float(grade)
        if not math.isfinite(grade):
            raise ValueError("Invalid input. Grade must be a finite number.")
        return grade
