"""classdivider CLI: divide a class of students into groups."""

import logging

import click

from classdivider.config.settings import settings
from classdivider.domain.exceptions import (
    InfeasiblePartitionError,
    InvalidDeviationError,
    InvalidGroupSizeError,
)
from classdivider.services.division_service import DivisionService
from classdivider.services.presenter import format_division
from classdivider.services.students_file import StudentsFileError


@click.command(name="classdivider")
@click.version_option("0.6", prog_name="classdivider")
@click.option("-g", "--group-size", type=int, required=True, help="Target group size.")
@click.option(
    "-d",
    "--deviation",
    type=int,
    default=settings.DEVIATION_DEFAULT,
    show_default=True,
    help="Permitted difference of number of students in a group and the target group size.",
)
@click.option("--seed", type=int, default=None, help="Seed the random generator for a reproducible division.")
@click.argument("students_file", type=click.Path(dir_okay=False))
def main(group_size: int, deviation: int, seed, students_file: str):
    """Divide a class of students into groups.

    STUDENTS_FILE is a CSV file with the columns "first name", "last name"
    and "ID". With a target group size of 10 and a deviation of 2, every
    group gets between 8 and 12 students.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    service = DivisionService()

    try:
        students = service.load(students_file, seed=seed)
    except OSError as e:
        raise click.UsageError(f"Unable to open or read students file '{students_file}': {e}.")
    except StudentsFileError as e:
        raise click.UsageError(f"Unable to read students file '{students_file}': {e}.")

    try:
        division = service.divide(students, group_size, deviation)
    except InvalidGroupSizeError:
        raise click.UsageError("group size must be a positive integer number.")
    except InvalidDeviationError:
        raise click.UsageError("deviation must be a positive number smaller than group size.")
    except InfeasiblePartitionError as e:
        raise click.UsageError(str(e))

    click.echo(format_division(division), nl=False)


if __name__ == "__main__":
    main()
