# tests/test_simulation.py
import pytest

from classdivider.domain.exceptions import InfeasiblePartitionError
from classdivider.simulation.simulate import make_fake_class, run_simulation


def test_make_fake_class():
    klas = make_fake_class(25, seed=1)
    assert len(klas) == 25
    assert all(student.first_name and student.last_name for student in klas)


def test_make_fake_class_is_reproducible():
    assert str(make_fake_class(10, seed=5)) == str(make_fake_class(10, seed=5))


def test_run_simulation():
    # 30 // 4 = 7 groups, the 2 left over are spread over the first groups
    output = run_simulation(size=30, group_size=4, deviation=1, seed=3)
    assert "Group 7:" in output
    assert "Group 8:" not in output
    assert sum(1 for line in output.splitlines() if line.startswith("- ")) == 30


def test_run_simulation_is_reproducible():
    assert run_simulation(size=12, group_size=5, deviation=2, seed=2) == run_simulation(size=12, group_size=5, deviation=2, seed=2)


def test_run_simulation_empty_class_is_not_replaced_by_default():
    with pytest.raises(InfeasiblePartitionError):
        run_simulation(size=0, group_size=4, deviation=1, seed=1)
