# classdivider/domain/divider.py
"""
Pure domain logic for dividing a class into groups.

Functions included:
- check_feasibility
- is_feasible
- divide

A division first fills floor(N / S) groups of exactly S students. The
N mod S students left over (the overflow) are then either spread over the
existing groups, at most one extra student per group per round, or put in
a group of their own that is topped up with students taken back out of the
existing groups. No group ends up more than `deviation` students away from
the target size.
"""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from classdivider.domain.exceptions import (
    InfeasiblePartitionError,
    InvalidDeviationError,
    InvalidGroupSizeError,
)
from classdivider.domain.group import Group
from classdivider.domain.models import Student

logger = logging.getLogger(__name__)


@dataclass
class Division:
    groups: List[Group[Student]] = field(default_factory=list)
    unique_first_names: Dict[str, bool] = field(default_factory=dict)


@dataclass
class DrawPile:
    """
    One random permutation of the population, consumed front to back.

    Every phase of a division draws from the same pile, so a student that
    has been drawn is never handed out again.
    """
    order: List[Student]
    position: int = 0

    @classmethod
    def shuffled(cls, population: Group[Student]) -> "DrawPile":
        return cls(order=list(population))

    @property
    def remaining(self) -> int:
        return len(self.order) - self.position

    def draw(self) -> Student:
        student = self.order[self.position]
        self.position += 1
        return student


def _validate(group_size: int, deviation: int) -> None:
    if group_size <= 0:
        raise InvalidGroupSizeError("group size must be a positive integer number.")
    if deviation < 0 or deviation >= group_size:
        raise InvalidDeviationError("deviation must be a positive number smaller than group size.")


def _overflow_check(group_count: int, overflow: int, deviation: int) -> bool:
    # enough groups to absorb the overflow one extra student at a time
    if deviation == 0:
        if overflow > 0:
            raise InvalidDeviationError(
                "deviation must be positive when the class does not divide evenly."
            )
        return group_count > 0
    return group_count // deviation > overflow


def is_feasible(population_size: int, group_size: int, deviation: int) -> bool:
    """
    True if a class of `population_size` can be divided into groups of
    `group_size` +/- `deviation`. Raises for an invalid size or deviation.
    """
    _validate(group_size, deviation)

    group_count = population_size // group_size
    overflow = population_size % group_size

    overflow_check = _overflow_check(group_count, overflow, deviation)
    deviation_overflow_check = (
        group_size - deviation <= overflow and overflow <= group_size + deviation
    )
    last_check = (
        group_size - deviation <= overflow + group_count * deviation
        and overflow + group_count * deviation <= group_size + deviation
    )

    return overflow_check or deviation_overflow_check or last_check


def check_feasibility(population_size: int, group_size: int, deviation: int) -> bool:
    """
    Like is_feasible, but raises InfeasiblePartitionError instead of
    returning False.

    Example:
    >>> check_feasibility(4, 2, 1)
    True
    """
    if not is_feasible(population_size, group_size, deviation):
        raise InfeasiblePartitionError(population_size, group_size, deviation)
    return True


def _fill_groups(pile: DrawPile, group_count: int, group_size: int, rng) -> List[Group[Student]]:
    groups = []
    for _ in range(group_count):
        group = Group(rng=rng)
        for _ in range(group_size):
            group.add(pile.draw())
        groups.append(group)
    return groups


def _distribute_overflow(pile: DrawPile, groups: List[Group[Student]], overflow: int, deviation: int) -> None:
    for _ in range(deviation):
        if overflow == 0:
            break
        for group in groups:
            if overflow == 0:
                break
            group.add(pile.draw())
            overflow -= 1


def _extract_group(
    pile: DrawPile,
    groups: List[Group[Student]],
    overflow: int,
    group_size: int,
    deviation: int,
    rng,
) -> Group[Student]:
    separate = Group(rng=rng)
    for _ in range(overflow):
        separate.add(pile.draw())

    minimum = group_size - deviation
    for _ in range(deviation):
        if len(separate) >= minimum:
            break
        # one student from each group per round, last group first, so no
        # group loses more than `deviation` students
        for group in reversed(groups):
            if len(separate) >= minimum:
                break
            student = group.pick()
            separate.add(student)
            group.remove(student)
            logger.debug("Moved student %s to the separate group", student.id)

    return separate


def _unique_first_names(population: Group[Student]) -> Dict[str, bool]:
    counts = Counter(student.first_name for student in population)
    return {name: count == 1 for name, count in counts.items()}


def divide(population: Group[Student], group_size: int, deviation: int) -> Division:
    """
    Divide `population` into groups of `group_size` +/- `deviation` students.

    The population itself is left untouched; the returned groups share its
    random generator, so seeding the population makes the whole division
    reproducible.

    Example:
    >>> klas = Group([Student(first_name=n, last_name="Jansen", id=n) for n in "abcde"])
    >>> [len(g) for g in divide(klas, 2, 1).groups]
    [3, 2]
    """
    check_feasibility(len(population), group_size, deviation)

    group_count = len(population) // group_size
    overflow = len(population) % group_size
    rng = population.rng

    pile = DrawPile.shuffled(population)
    groups = _fill_groups(pile, group_count, group_size, rng)

    if _overflow_check(group_count, overflow, deviation):
        logger.debug("Spreading %d leftover students over %d groups", overflow, group_count)
        _distribute_overflow(pile, groups, overflow, deviation)
    else:
        logger.debug("Forming a separate group from %d leftover students", overflow)
        groups.append(_extract_group(pile, groups, overflow, group_size, deviation, rng))

    return Division(groups=groups, unique_first_names=_unique_first_names(population))
