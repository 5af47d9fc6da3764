"""A package for keeping track of students, their scores and their grades."""

from .core import (
    Student,
    Students,
    Score,
    Roster,
    Scorebook,
    ScorebookOptions,
    RankingEntry,
)

from .scales import (
    Grade,
    DEFAULT_SCALE,
    letter_grade,
    map_averages_to_letter_grades,
)

from .exceptions import ScorebookError, InvalidArgument, MalformedFormat, IOFailure

from . import io
from . import predicates

__all__ = [
    "Student",
    "Students",
    "Score",
    "Roster",
    "Scorebook",
    "ScorebookOptions",
    "RankingEntry",
    "Grade",
    "DEFAULT_SCALE",
    "letter_grade",
    "map_averages_to_letter_grades",
    "ScorebookError",
    "InvalidArgument",
    "MalformedFormat",
    "IOFailure",
    "io",
    "predicates",
]
