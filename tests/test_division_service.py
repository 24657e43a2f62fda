# tests/test_division_service.py
import pytest

from classdivider.config.settings import Settings
from classdivider.domain.exceptions import InfeasiblePartitionError
from classdivider.services.division_service import DivisionService

CSV = """first name,last name,ID
Mitko,Dimitrov,1234567
Sam,Smith,1234597
Emilyana,Ilieva,1232567
Krustio,Ilieaw,2309832
Sam,de Vries,3578909
"""


@pytest.fixture
def students_file(tmp_path):
    path = tmp_path / "students.csv"
    path.write_text(CSV, encoding="utf-8")
    return path


def test_load(students_file):
    students = DivisionService(Settings()).load(students_file)
    assert len(students) == 5


def test_divide_uses_default_deviation(students_file):
    service = DivisionService(Settings(DEVIATION_DEFAULT=2))
    students = service.load(students_file)
    # 5 // 3 = 1 group, the 2 left over form a second group
    division = service.divide(students, 3)
    assert sorted(len(g) for g in division.groups) == [2, 3]

    with pytest.raises(InfeasiblePartitionError):
        service.divide(students, 4, 1)


def test_run(students_file):
    service = DivisionService(Settings())
    output = service.run(students_file, 2, 1, seed=4)
    assert output.startswith("Group 1:\n")
    assert "Group 2:" in output
    assert "Group 3:" not in output
    assert "- Mitko" in output
    assert "- Sam S" in output
    assert "- Sam V" in output
    assert sum(1 for line in output.splitlines() if line.startswith("- ")) == 5


def test_run_same_seed_same_output(students_file):
    service = DivisionService(Settings())
    assert service.run(students_file, 2, 1, seed=9) == service.run(students_file, 2, 1, seed=9)


def test_settings_seed_is_used(students_file):
    service = DivisionService(Settings(RANDOM_SEED=11))
    assert service.run(students_file, 2, 1) == service.run(students_file, 2, 1)
