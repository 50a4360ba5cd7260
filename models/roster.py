# models/roster.py

"""
The Roster model is the central data object of the program and the single source of truth for student records.

Records are kept in an insertion-ordered dictionary keyed by student ID, alongside a secondary index keyed by
normalized (stripped, lowercased) name. Both dictionaries are updated together in `add_student()` and
`remove_student()`, so uniqueness checks on ID and name are constant time and the name index always mirrors
the records.

Provides functions for adding, removing, and finding `StudentRecord` objects, listing them in insertion order,
and computing aggregate grade statistics (average, highest, lowest). State lives only in memory.
"""

from __future__ import annotations

from typing import Callable, Iterator, ValuesView

from core.response import ErrorCode, Response
from models.student_record import StudentRecord


class Roster:

    def __init__(self):
        self._students: dict[int, StudentRecord] = {}
        self._names: dict[str, StudentRecord] = {}

    # === properties ===

    @property
    def students(self) -> ValuesView[StudentRecord]:
        return self._students.values()

    @property
    def student_ids(self) -> set[int]:
        return set(self._students)

    @property
    def student_names(self) -> set[str]:
        return set(self._names)

    @property
    def is_empty(self) -> bool:
        return not self._students

    # === data accessors ===

    def get_records(
        self,
        predicate: Callable[[StudentRecord], bool] | None = None,
    ) -> Response:
        """
        Fetches records in insertion order, optionally filtered by a predicate.

        Args:
            predicate (Callable[[StudentRecord], bool]): Optional filter function. If omitted, all records are returned.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): Always True.
                - data (dict): Payload with the following keys:
                    - "records" (list[StudentRecord]): The matching records (may be empty).
        """
        if predicate:
            records = list(filter(predicate, self._students.values()))
        else:
            records = list(self._students.values())

        return Response.succeed(
            data={
                "records": records,
            }
        )

    def find_student(
        self, name: str | None = None, student_id: int | None = None
    ) -> Response:
        """
        Finds a `StudentRecord` by name or, if no name is given, by ID.

        Args:
            name (str | None): A full name to match exactly, ignoring case and surrounding whitespace.
            student_id (int | None): The student ID to match when `name` is blank or None.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a matching record was found.
                    - False if nothing matched or no search criterion was given.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The matched record.

        Notes:
            - This method is read-only and does not raise.
            - A non-blank name takes precedence; `student_id` is ignored in that case.
            - With a blank name and no ID there is nothing to match, which is reported as not found.
        """
        normalized = self._normalize(name) if name else ""

        if normalized:
            record = self._names.get(normalized)
            criterion = f"name '{name.strip()}'"

        elif student_id is not None:
            record = self._students.get(student_id)
            criterion = f"ID {student_id}"

        else:
            return Response.fail(
                detail="Student not found. No name or ID was given.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        if record is None:
            return Response.fail(
                detail=f"Student not found with {criterion}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": record,
            },
        )

    # --- grade statistics ---

    def average_grade(self) -> Response:
        """
        Computes the arithmetic mean of every student's grade.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): Always True.
                - data (dict): Payload with the following keys:
                    - "average" (float): The mean grade, or 0.0 if the roster is empty.
        """
        if not self._students:
            average = 0.0
        else:
            grades = [student.grade for student in self._students.values()]
            average = sum(grades) / len(grades)

        return Response.succeed(
            data={
                "average": average,
            }
        )

    def top_grade_students(self) -> Response:
        """
        Finds every student whose grade equals the highest grade in the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): Always True.
                - data (dict): Payload with the following keys:
                    - "records" (list[StudentRecord]): All tied students in insertion order, or an empty list.
                    - "grade" (float | None): The highest grade, or None if the roster is empty.

        Notes:
            - Ties are detected by exact float equality against the computed maximum.
        """
        return self._grade_extremum_students(max)

    def bottom_grade_students(self) -> Response:
        """
        Finds every student whose grade equals the lowest grade in the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): Always True.
                - data (dict): Payload with the following keys:
                    - "records" (list[StudentRecord]): All tied students in insertion order, or an empty list.
                    - "grade" (float | None): The lowest grade, or None if the roster is empty.

        Notes:
            - Ties are detected by exact float equality against the computed minimum.
        """
        return self._grade_extremum_students(min)

    def _grade_extremum_students(
        self, extremum: Callable[[Iterator[float]], float]
    ) -> Response:
        if not self._students:
            return Response.succeed(
                data={
                    "records": [],
                    "grade": None,
                }
            )

        grade = extremum(student.grade for student in self._students.values())

        return Response.succeed(
            data={
                "records": [s for s in self._students.values() if s.grade == grade],
                "grade": grade,
            }
        )

    # === data manipulators ===

    def add_student(self, student: StudentRecord) -> Response:
        """
        Adds a `StudentRecord` to the end of the roster.

        Args:
            student (StudentRecord): The record to be added.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was added.
                    - False if its ID or name is already taken.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_IDENTIFIER` if the ID is not unique.
                    - `ErrorCode.DUPLICATE_NAME` if the name is not unique (case-insensitive).
                - status_code (int | None):
                    - 200 on success
                    - 409 on a uniqueness conflict
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The added record.

        Notes:
            - The ID is checked before the name.
            - On failure the roster and its name index are left untouched.
        """
        try:
            self.require_unique_student_id(student.id)

        except ValueError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.DUPLICATE_IDENTIFIER,
                status_code=409,
            )

        try:
            self.require_unique_student_name(student.name)

        except ValueError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.DUPLICATE_NAME,
                status_code=409,
            )

        self._students[student.id] = student
        self._names[self._normalize(student.name)] = student

        return Response.succeed(
            detail="Student added successfully.",
            data={
                "record": student,
            },
        )

    def remove_student(self, student_id: int) -> Response:
        """
        Removes the `StudentRecord` with the given ID, along with its name index entry.

        Args:
            student_id (int): The ID of the student to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was removed.
                    - False if no record has that ID.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no record has that ID.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The removed record.
        """
        student = self._students.pop(student_id, None)

        if student is None:
            return Response.fail(
                detail=f"Student with ID {student_id} not found.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        del self._names[self._normalize(student.name)]

        return Response.succeed(
            detail="Student removed successfully.",
            data={
                "record": student,
            },
        )

    def update_student_grade(self, student_id: int, grade: float) -> Response:
        """
        Updates the grade of the student with the given ID.

        Args:
            student_id (int): The ID of the student to update.
            grade (float): The new grade.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the grade was updated.
                    - False if the student does not exist or the grade is invalid.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no record has that ID.
                    - `ErrorCode.INVALID_FIELD_VALUE` if the grade is not a finite number.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The updated record.
        """
        student = self._students.get(student_id)

        if student is None:
            return Response.fail(
                detail=f"Student with ID {student_id} not found.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        try:
            student.grade = grade

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        return Response.succeed(
            detail="Student grade successfully updated.",
            data={
                "record": student,
            },
        )

    # === data validators ===

    def require_unique_student_id(self, student_id: int) -> None:
        """
        Validates that no existing student holds the given ID.

        Raises:
            ValueError: If the ID is already in the roster.
        """
        if student_id in self._students:
            raise ValueError(f"Student ID {student_id} already exists.")

    def require_unique_student_name(self, name: str) -> None:
        """
        Validates that no existing student shares the given name, ignoring case.

        Raises:
            ValueError: If a student with the same normalized name already exists.
        """
        if self._normalize(name) in self._names:
            raise ValueError(f'Student name "{name}" already exists.')

    # === helper methods ===

    def _normalize(self, input: str) -> str:
        return input.strip().lower()

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(self._students.values())

    def __contains__(self, student_id: object) -> bool:
        return student_id in self._students

    def __repr__(self) -> str:
        return f"Roster({len(self._students)} students)"
