"""Composable predicates for searching a roster.

Predicates can be combined with ``&``, ``|`` and ``~``:

    >>> roster.find(aged_between(19, 20) & ~name_containing("li"))

"""

from typing import Callable

from .core.student import Student


StudentPredicate = Callable[[Student], bool]


class Predicate:

    def __init__(self, func: StudentPredicate):
        self.func = func

    @classmethod
    def new(cls, func):
        return cls(func)

    def __call__(self, student: Student) -> bool:
        return self.func(student)

    def __and__(self, other):
        def new_func(x):
            return self(x) and other(x)

        return self.__class__(new_func)

    def __or__(self, other):
        def new_func(x):
            return self(x) or other(x)

        return self.__class__(new_func)

    def __invert__(self):
        def new_func(x):
            return not self(x)

        return self.__class__(new_func)


def aged_between(min_age: int, max_age: int) -> Predicate:
    """Students whose age is in ``[min_age, max_age]``, both ends included."""

    @Predicate.new
    def predicate(student):
        return min_age <= student.age <= max_age

    return predicate


def name_containing(substring: str) -> Predicate:
    @Predicate.new
    def predicate(student):
        return substring.lower() in student.name.lower()

    return predicate


def pid_starting_with(prefix: str) -> Predicate:
    @Predicate.new
    def predicate(student):
        return student.pid.startswith(prefix)

    return predicate
