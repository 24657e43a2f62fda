import logging
import random
from typing import Optional

from classdivider.config.settings import Settings, settings as default_settings
from classdivider.domain.divider import Division, divide
from classdivider.domain.group import Group
from classdivider.domain.models import Student
from classdivider.services.presenter import format_division
from classdivider.services.students_file import read_students

logger = logging.getLogger(__name__)


class DivisionService:
    def __init__(self, settings: Settings = None):
        self.settings = settings or default_settings

    def _rng(self, seed: Optional[int]) -> random.Random:
        if seed is None:
            seed = self.settings.RANDOM_SEED
        return random.Random(seed)

    def load(self, path, seed: Optional[int] = None) -> Group[Student]:
        students = read_students(path, rng=self._rng(seed))
        logger.info("Read %d students from %s", len(students), path)
        return students

    def divide(
        self,
        students: Group[Student],
        group_size: int,
        deviation: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> Division:
        if deviation is None:
            deviation = self.settings.DEVIATION_DEFAULT
        if seed is not None:
            students.seed(seed)

        division = divide(students, group_size, deviation)
        logger.info(
            "Divided %d students into %d groups of %d+/-%d (sizes %s)",
            len(students),
            len(division.groups),
            group_size,
            deviation,
            [len(g) for g in division.groups],
        )
        return division

    def run(self, path, group_size: int, deviation: Optional[int] = None, seed: Optional[int] = None) -> str:
        students = self.load(path, seed=seed)
        return format_division(self.divide(students, group_size, deviation))
