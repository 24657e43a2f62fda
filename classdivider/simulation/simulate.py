# classdivider/simulation/simulate.py
"""
Simulation script: creates a class of fake students and divides it into
groups using the configured defaults.

Uses the domain and services directly (no CSV file, no HTTP calls).
"""

import logging
import random

from faker import Faker

from classdivider.config.settings import settings
from classdivider.domain.group import Group
from classdivider.domain.models import Student
from classdivider.services.division_service import DivisionService
from classdivider.services.presenter import format_division


def make_fake_class(size: int, seed=None) -> Group[Student]:
    """A class of `size` students with Dutch names and 7-digit IDs."""
    fake = Faker("nl_NL")
    if seed is not None:
        fake.seed_instance(seed)

    klas = Group(rng=random.Random(seed))
    student_id = 1000000
    while len(klas) < size:
        student_id += 1
        klas.add(Student(first_name=fake.first_name(), last_name=fake.last_name(), id=str(student_id)))
    return klas


def run_simulation(size: int = None, group_size: int = None, deviation: int = None, seed=None) -> str:
    if size is None:
        size = settings.SIMULATION_CLASS_SIZE
    if group_size is None:
        group_size = settings.GROUP_SIZE_DEFAULT
    if seed is None:
        seed = settings.RANDOM_SEED

    klas = make_fake_class(size, seed)
    division = DivisionService().divide(klas, group_size, deviation)
    return format_division(division)


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    print(run_simulation())
