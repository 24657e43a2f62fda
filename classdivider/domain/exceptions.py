"""Exceptions for classdivider."""


class ClassDividerError(Exception):
    """Base exception for class divider errors."""
    pass


class InvalidGroupSizeError(ClassDividerError):
    """Raised when the target group size is not a positive integer."""
    pass


class InvalidDeviationError(ClassDividerError):
    """Raised when the deviation is negative, not smaller than the group size,
    or zero while there are students left over."""
    pass


class InfeasiblePartitionError(ClassDividerError):
    """Raised when a class cannot be divided with the given size and deviation."""

    def __init__(self, population_size: int, group_size: int, deviation: int):
        self.population_size = population_size
        self.group_size = group_size
        self.deviation = deviation
        super().__init__(
            f"Unable to divide a class of {population_size} into groups of "
            f"{group_size}+/-{deviation} students."
        )


class EmptyCollectionError(ClassDividerError):
    """Raised when picking a member from an empty group."""
    pass
