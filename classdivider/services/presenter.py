# classdivider/services/presenter.py
from typing import Dict, List

from classdivider.domain.divider import Division
from classdivider.domain.models import Student


def display_name(student: Student, unique_first_names: Dict[str, bool]) -> str:
    """
    First name, followed by the initial of the sort name when another
    student in the class has the same first name.
    """
    name = student.first_name
    if not unique_first_names.get(student.first_name, True):
        name += " " + student.sort_name[0]
    return name


def format_division(division: Division) -> str:
    lines: List[str] = []
    for number, group in enumerate(division.groups, start=1):
        lines.append(f"Group {number}:")
        for student in group:
            lines.append("- " + display_name(student, division.unique_first_names))
        lines.append("")
    return "\n".join(lines) + ("\n" if lines else "")
