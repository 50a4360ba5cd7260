# tests/test_roster.py

import pytest

from core.response import ErrorCode
from models.roster import Roster
from models.student_record import StudentKind, StudentRecord

# === data manipulators ===

# --- add student ---


def test_add_student(sample_roster, sample_student):
    response = sample_roster.add_student(sample_student)

    assert response.success
    assert response.detail == "Student added successfully."
    assert response.data["record"] is sample_student
    assert sample_student in sample_roster.students
    assert 1 in sample_roster


def test_roster_size_matches_distinct_adds(sample_roster):
    names = ["Ann", "Ben", "Cid", "Dee", "Eve"]

    for i, name in enumerate(names, 10):
        assert sample_roster.add_student(StudentRecord(i, name, 50.0, "Math")).success

    assert len(sample_roster) == len(names)
    assert sample_roster.student_ids == {10, 11, 12, 13, 14}
    assert sample_roster.student_names == {"ann", "ben", "cid", "dee", "eve"}


def test_add_duplicate_id_fails(sample_roster, sample_student):
    sample_roster.add_student(sample_student)
    duplicate = StudentRecord(1, "Someone Else", 10.0, "Art", StudentKind.GRADUATE)

    response = sample_roster.add_student(duplicate)

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_IDENTIFIER
    assert response.detail == "Student ID 1 already exists."
    assert len(sample_roster) == 1
    assert list(sample_roster.students) == [sample_student]
    assert sample_roster.student_ids == {1}
    assert sample_roster.student_names == {"bob"}


def test_add_duplicate_name_ignores_case(sample_roster, sample_student):
    sample_roster.add_student(sample_student)

    response = sample_roster.add_student(StudentRecord(2, "bob", 10.0, "Art"))

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_NAME
    assert response.status_code == 409
    assert len(sample_roster) == 1
    assert sample_roster.student_ids == {1}
    assert sample_roster.student_names == {"bob"}


def test_string_id_cannot_shadow_integer_id(sample_roster):
    sample_roster.add_student(StudentRecord(7, "Ann", 50.0, "Art"))

    with pytest.raises(ValueError):
        StudentRecord("7", "Ben", 60.0, "Art")

    assert sample_roster.student_ids == {7}


def test_add_checks_id_before_name(sample_roster, sample_student):
    sample_roster.add_student(sample_student)

    response = sample_roster.add_student(StudentRecord(1, "BOB", 10.0, "Art"))

    assert response.error is ErrorCode.DUPLICATE_IDENTIFIER


# --- remove student ---


def test_add_and_remove_student(sample_roster, sample_student, sample_graduate_student):
    roster = sample_roster
    roster.add_student(sample_student)
    roster.add_student(sample_graduate_student)

    response = roster.remove_student(1)

    assert response.success
    assert response.detail == "Student removed successfully."
    assert response.data["record"] is sample_student
    assert list(roster.students) == [sample_graduate_student]
    assert roster.student_names == {"alice"}


def test_remove_missing_student_fails(sample_roster, sample_student):
    sample_roster.add_student(sample_student)

    response = sample_roster.remove_student(99)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404
    assert response.detail == "Student with ID 99 not found."
    assert list(sample_roster.students) == [sample_student]


def test_add_then_remove_restores_roster(graded_roster):
    ids_before = graded_roster.student_ids
    names_before = graded_roster.student_names
    size_before = len(graded_roster)

    graded_roster.add_student(StudentRecord(100, "Transient", 99.0, "Music"))
    graded_roster.remove_student(100)

    assert len(graded_roster) == size_before
    assert graded_roster.student_ids == ids_before
    assert graded_roster.student_names == names_before


def test_removed_name_can_be_reused(sample_roster, sample_student):
    sample_roster.add_student(sample_student)
    sample_roster.remove_student(1)

    response = sample_roster.add_student(StudentRecord(5, "BOB", 40.0, "Law"))

    assert response.success


# --- update grade ---


def test_update_student_grade(sample_roster, sample_student):
    sample_roster.add_student(sample_student)

    response = sample_roster.update_student_grade(1, 90.0)

    assert response.success
    assert sample_student.grade == 90.0
    assert sample_roster.top_grade_students().data["grade"] == 90.0


def test_update_student_grade_failures(sample_roster, sample_student):
    sample_roster.add_student(sample_student)

    response = sample_roster.update_student_grade(2, 90.0)
    assert response.error is ErrorCode.NOT_FOUND

    response = sample_roster.update_student_grade(1, float("nan"))
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    assert sample_student.grade == 56.0


# === data accessors ===

# --- find student ---


def test_find_student_by_name_ignores_case(sample_roster, sample_student):
    sample_roster.add_student(sample_student)

    response = sample_roster.find_student("bOB")

    assert response.success
    assert response.data["record"] is sample_student


def test_find_student_name_takes_precedence(
    sample_roster, sample_student, sample_graduate_student
):
    sample_roster.add_student(sample_student)
    sample_roster.add_student(sample_graduate_student)

    response = sample_roster.find_student("alice", 1)

    assert response.data["record"] is sample_graduate_student


@pytest.mark.parametrize("name", [None, "", "   "])
def test_find_student_by_id_when_name_blank(sample_roster, sample_student, name):
    sample_roster.add_student(sample_student)

    response = sample_roster.find_student(name, 1)

    assert response.success
    assert response.data["record"] is sample_student


def test_find_student_not_found(sample_roster, sample_student):
    sample_roster.add_student(sample_student)

    assert sample_roster.find_student("Robert").error is ErrorCode.NOT_FOUND
    assert sample_roster.find_student(student_id=42).error is ErrorCode.NOT_FOUND


def test_find_student_without_criteria(sample_roster, sample_student):
    sample_roster.add_student(sample_student)

    response = sample_roster.find_student("", None)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND


# --- listing ---


def test_students_in_insertion_order(graded_roster):
    ids = [student.id for student in graded_roster.students]

    assert ids == [1, 2, 3, 4, 5, 6]
    # the view can be iterated more than once
    assert [student.id for student in graded_roster.students] == ids
    assert [student.id for student in graded_roster] == ids


def test_students_empty_roster(sample_roster):
    assert list(sample_roster.students) == []
    assert sample_roster.is_empty
    assert sample_roster.get_records().data["records"] == []


def test_get_records_with_predicate(graded_roster):
    response = graded_roster.get_records(lambda s: s.is_graduate)

    assert [s.id for s in response.data["records"]] == [2, 4, 6]


# --- grade statistics ---


def test_average_grade_empty_roster(sample_roster):
    assert sample_roster.average_grade().data["average"] == 0.0


def test_average_grade(sample_roster):
    for i, grade in enumerate([11.0, 56.0, 33.0, 33.0, 11.0], 1):
        sample_roster.add_student(StudentRecord(i, f"Student {i}", grade, "Math"))

    assert sample_roster.average_grade().data["average"] == 28.8


def test_top_grade_students_keeps_ties(graded_roster):
    response = graded_roster.top_grade_students()

    assert response.data["grade"] == 56.0
    assert [s.id for s in response.data["records"]] == [2, 6]


def test_bottom_grade_students_keeps_ties(graded_roster):
    response = graded_roster.bottom_grade_students()

    assert response.data["grade"] == 11.0
    assert [s.id for s in response.data["records"]] == [1, 5]


def test_grade_extremum_empty_roster(sample_roster):
    assert sample_roster.top_grade_students().data["records"] == []
    assert sample_roster.bottom_grade_students().data["records"] == []
    assert sample_roster.top_grade_students().data["grade"] is None


def test_single_student_is_top_and_bottom(sample_roster, sample_student):
    sample_roster.add_student(sample_student)

    assert sample_roster.top_grade_students().data["records"] == [sample_student]
    assert sample_roster.bottom_grade_students().data["records"] == [sample_student]


def test_repr(graded_roster):
    assert repr(graded_roster) == "Roster(6 students)"
    assert repr(Roster()) == "Roster(0 students)"
