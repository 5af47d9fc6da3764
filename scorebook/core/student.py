"""Represent a student on the roster."""

import numbers
import typing

from ..exceptions import InvalidArgument


def _require_text(value, what):
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{what} must be a non-empty string, got {value!r}.")
    return value


class Student:
    """Represents a student.

    Attributes
    ----------
    pid : str
        The student's ID. Unique within a roster.
    name : str
        The student's name.
    age : int
        The student's age in years.

    All three attributes are read-only. When a :class:`Student` is printed its
    name is displayed, but equality, hashing and ordering always use the
    :code:`.pid` attribute, so two records with the same ID are the same
    student. This makes it safe to use students as keys, and allows code like:

    .. code::

        roster.remove(Student("2021001", "anyone", 0))

    Raises
    ------
    InvalidArgument
        If the ID or name are empty, or if the age is not an integer.

    """

    __slots__ = ("_pid", "_name", "_age")

    def __init__(self, pid: str, name: str, age: int):
        self._pid = _require_text(pid, "Student ID")
        self._name = _require_text(name, "Student name")

        # bool is an int subclass, but True is not an age
        if isinstance(age, bool) or not isinstance(age, numbers.Integral):
            raise InvalidArgument(f"Age must be an integer, got {age!r}.")
        self._age = int(age)

    @property
    def pid(self) -> str:
        return self._pid

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    def __repr__(self):
        return f"<{self._name}>"

    def __str__(self):
        return f"{self._name}+{self._pid}+{self._age}"

    def __hash__(self):
        return hash(self._pid)

    def __eq__(self, other):
        """Equality checks always use the pid."""
        if isinstance(other, Student):
            return other.pid == self._pid
        return NotImplemented

    def __lt__(self, other):
        """Less-than checks always use the pid."""
        if isinstance(other, Student):
            return self._pid < other.pid
        return NotImplemented


class Students(typing.Sequence[Student]):
    """A sequence of :class:`Student` instances.

    This behaves like a read-only list of :class:`Student` instances, but also
    provides a :meth:`find` method that allows you to look up a student by
    (part of) their name.

    """

    def __init__(self, students: typing.Iterable[Student] = ()):
        self._students = list(students)

    def __getitem__(self, ix):
        if isinstance(ix, slice):
            return self.__class__(self._students[ix])
        return self._students[ix]

    def __len__(self):
        return len(self._students)

    def __eq__(self, other):
        if isinstance(other, Students):
            return self._students == other._students
        if isinstance(other, list):
            return self._students == other
        return NotImplemented

    def __repr__(self):
        return f"{self.__class__.__name__}({self._students!r})"

    @property
    def pids(self) -> typing.List[str]:
        """The IDs of the students, in order."""
        return [s.pid for s in self._students]

    def find(self, pattern: str) -> Student:
        """Finds a student from a substring of their name.

        The search is case-insensitive.

        Parameters
        ----------
        pattern : str
            A pattern to search for in the student's name. All students whose
            (lowercased) names contain this pattern as a substring will be
            considered matches.

        Returns
        -------
        Student
            The matching student.

        Raises
        ------
        ValueError
            If no student matches, or if more than one student matches.

        """
        matches = [s for s in self._students if pattern.lower() in s.name.lower()]

        if len(matches) == 0:
            raise ValueError(f"No names matched {pattern}.")

        if len(matches) > 1:
            raise ValueError(f'More than one name matched "{pattern}": {matches}')

        return matches[0]
