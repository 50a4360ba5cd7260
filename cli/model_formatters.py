# cli/model_formatters.py

import core.formatters as formatters
from models.student_record import StudentRecord

# === student formatters ===


def format_student_oneline(student: StudentRecord) -> str:
    return str(student)


def format_student_found(student: StudentRecord) -> str:
    return f"Found Student: {format_student_oneline(student)}"


# === grade formatters ===


def format_average_grade(average: float) -> str:
    return f"Average Grade: {formatters.format_grade(average)}"


def format_extremum_heading(label: str, grade: float | None) -> str:
    return f"Students with {label} Grade ({formatters.format_grade(grade)}):"
