from .student import Student, Students
from .score import Score
from .roster import Roster
from .scorebook import Scorebook, ScorebookOptions, RankingEntry

__all__ = [
    "Student",
    "Students",
    "Score",
    "Roster",
    "Scorebook",
    "ScorebookOptions",
    "RankingEntry",
]
