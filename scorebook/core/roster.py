"""An in-memory store of students."""

import logging
import typing

from ..exceptions import InvalidArgument
from ..predicates import aged_between
from .student import Student, Students

logger = logging.getLogger(__name__)


class Roster:
    """An ordered collection of :class:`Student` records.

    Students are kept in the order they were added. The roster does not
    enforce unique IDs; :meth:`remove` removes the first student with a
    matching ID.

    Parameters
    ----------
    students : Iterable[Student]
        Students to start with. Default: none.

    """

    def __init__(self, students: typing.Iterable[Student] = ()):
        self._students: typing.List[Student] = []
        for student in students:
            self.add(student)

    def __len__(self):
        return len(self._students)

    def __iter__(self):
        return iter(list(self._students))

    def __contains__(self, student):
        return student in self._students

    def __repr__(self):
        return f"{self.__class__.__name__}({self._students!r})"

    def add(self, student: Student):
        """Add a student to the end of the roster.

        Raises
        ------
        InvalidArgument
            If ``student`` is not a :class:`Student`.

        """
        if not isinstance(student, Student):
            raise InvalidArgument(f"Expected a Student, got {student!r}.")
        self._students.append(student)
        logger.debug("Added student %s to the roster.", student.pid)

    def remove(self, student: Student) -> bool:
        """Remove a student. Returns whether a student was removed."""
        try:
            self._students.remove(student)
        except ValueError:
            return False
        logger.debug("Removed student %s from the roster.", student.pid)
        return True

    def get_all(self) -> Students:
        """All students, in the order they were added."""
        return Students(self._students)

    def find(self, predicate: typing.Callable[[Student], bool]) -> Students:
        """The students for which ``predicate`` returns True.

        See :mod:`scorebook.predicates` for ready-made predicates.

        Raises
        ------
        InvalidArgument
            If ``predicate`` is not callable.

        """
        if not callable(predicate):
            raise InvalidArgument(f"Predicate must be callable, got {predicate!r}.")
        return Students(s for s in self._students if predicate(s))

    def students_by_age(self, min_age: int, max_age: int) -> Students:
        """The students whose age is between ``min_age`` and ``max_age``, inclusive."""
        return self.find(aged_between(min_age, max_age))
