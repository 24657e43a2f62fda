# classdivider/domain/group.py
"""
Group of members with set semantics.

Insertion order means nothing to a group: iterating it yields the members
in a fresh random order every time, and pick() returns a random member.
All randomness comes from the group's own random.Random instance, so a
seeded generator makes every pick and every iteration reproducible.
"""
import random
from typing import Generic, Hashable, Iterable, Iterator, List, Optional, TypeVar

from classdivider.domain.exceptions import EmptyCollectionError

T = TypeVar("T", bound=Hashable)


class Group(Generic[T]):
    def __init__(self, members: Optional[Iterable[T]] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._members: List[T] = []
        self._index = set()
        if members is not None:
            self.add_all(members)

    def seed(self, seed) -> None:
        """Reseed this group's random generator. Use for testing purposes."""
        self.rng.seed(seed)

    def size(self) -> int:
        return len(self._members)

    def __len__(self):
        return len(self._members)

    def is_empty(self) -> bool:
        return not self._members

    def contains(self, member: T) -> bool:
        return member in self._index

    def __contains__(self, member):
        return self.contains(member)

    def add(self, member: T) -> bool:
        """Add member. Returns True when member wasn't already in this group."""
        if member in self._index:
            return False
        self._members.append(member)
        self._index.add(member)
        return True

    def add_all(self, members: Iterable[T]) -> bool:
        for member in members:
            self.add(member)
        return True

    def remove(self, member: T) -> bool:
        """Remove member. Returns True if member was in this group."""
        if member not in self._index:
            return False
        self._index.discard(member)
        # list.remove compares with ==, which matches by identity key
        self._members.remove(member)
        return True

    def clear(self) -> None:
        self._members.clear()
        self._index.clear()

    def pick(self) -> T:
        """Pick a member at random without removing it."""
        if self.is_empty():
            raise EmptyCollectionError("Cannot pick a member from an empty group.")
        return self._members[self.rng.randrange(len(self._members))]

    def __iter__(self) -> Iterator[T]:
        return self._random_order()

    def _random_order(self) -> Iterator[T]:
        order = list(self._members)
        self.rng.shuffle(order)
        yield from order

    def __eq__(self, other):
        if not isinstance(other, Group):
            return NotImplemented
        return (
            len(other) == len(self)  # fast path
            and all(m in self for m in other._members)
            and all(m in other for m in self._members)
        )

    __hash__ = None

    def __str__(self):
        return "; ".join(str(m) for m in self._members)

    def __repr__(self):
        return f"Group({self._members!r})"
