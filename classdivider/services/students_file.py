# classdivider/services/students_file.py
"""
Read and write CSV files with student information.

The files have a header row `first name,last name,ID` followed by one row
per student.
"""
import csv
import io
import logging
import random
from pathlib import Path
from typing import Optional

from classdivider.domain.group import Group
from classdivider.domain.models import Student

logger = logging.getLogger(__name__)

FIRST_NAME = "first name"
LAST_NAME = "last name"
ID = "ID"
HEADER = [FIRST_NAME, LAST_NAME, ID]


class StudentsFileError(ValueError):
    """Raised when a row in a students file cannot be read as a student."""
    pass


def from_csv(text: str, rng: Optional[random.Random] = None) -> Group[Student]:
    """Create a group of students from CSV data. Empty data gives an empty group."""
    students = Group(rng=rng)
    reader = csv.reader(io.StringIO(text))
    header_seen = False

    for row in reader:
        if not row:
            continue
        if not header_seen:
            header_seen = True
            continue
        if len(row) != len(HEADER):
            raise StudentsFileError(
                f"line {reader.line_num}: expected {len(HEADER)} fields "
                f"({', '.join(HEADER)}), got {len(row)}"
            )
        first_name, last_name, student_id = (value.strip() for value in row)
        if not students.add(Student(first_name=first_name, last_name=last_name, id=student_id)):
            logger.warning("Skipping duplicate student ID %s on line %d", student_id, reader.line_num)

    return students


def read_students(path, rng: Optional[random.Random] = None) -> Group[Student]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise StudentsFileError(f"{path} is not UTF-8 encoded: {e}") from e
    return from_csv(text, rng=rng)


def to_csv(students: Group[Student]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADER)
    for student in students:
        writer.writerow([student.first_name, student.last_name, student.id])
    return buffer.getvalue()


def write_students(path, students: Group[Student]) -> None:
    Path(path).write_text(to_csv(students), encoding="utf-8")
