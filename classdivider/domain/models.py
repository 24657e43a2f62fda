from pydantic import BaseModel, ConfigDict


class Student(BaseModel):
    """
    A student, modelled from a Dutch perspective.

    Two students are the same student when they have the same ID, whatever
    their names say.
    """
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    id: str

    def __eq__(self, other):
        if isinstance(other, Student):
            return self.id == other.id
        return NotImplemented

    def __hash__(self):
        return hash(self.id)

    def __str__(self):
        return f"{self.first_name} {self.last_name} ({self.id})"

    @property
    def sort_name(self) -> str:
        """
        Name reformatted for sorting, Dutch style: last name, first name and
        then the optional "tussenvoegsels" like "de" or "van der".

        >>> Student(first_name="Elsa", last_name="van der Borne", id="1").sort_name
        'Borne, Elsa van der'
        >>> Student(first_name="Else", last_name="Van der Borne", id="2").sort_name
        'Van der Borne, Else'
        """
        i = 0
        while i < len(self.last_name) and not self.last_name[i].isupper():
            i += 1

        # no capital in the last name: prefix is all of it, last is empty
        prefix = self.last_name[:i].strip()
        last = self.last_name[i:]

        return f"{last}, {self.first_name}" + (f" {prefix}" if prefix else "")
