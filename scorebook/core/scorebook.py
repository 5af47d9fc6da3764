"""Recording scores and aggregating them into averages, grades and rankings."""

import collections
import dataclasses
import logging
import threading
import typing

import numpy as np
import pandas as pd

from .. import scales
from ..exceptions import InvalidArgument
from .score import Score

logger = logging.getLogger(__name__)


class RankingEntry(typing.NamedTuple):
    """A student's position in a ranking: their ID and their average."""

    pid: str
    average: float


@dataclasses.dataclass
class ScorebookOptions:
    """Configures the behavior of a :class:`Scorebook`.

    Attributes
    ----------
    scale: OrderedDict
        Maps each :class:`~scorebook.scales.Grade` to the lowest average that
        earns it. Must list every grade from A to F with strictly decreasing
        thresholds. Default: :attr:`scorebook.scales.DEFAULT_SCALE`.

    """

    scale: typing.Mapping[scales.Grade, float] = dataclasses.field(
        default_factory=lambda: scales.DEFAULT_SCALE.copy()
    )

    def __post_init__(self):
        scales.check_scale(self.scale)


class Scorebook:
    """Records scores by student ID and computes averages and rankings.

    Scores are append-only and kept in the order they were added. Scores may
    be recorded for IDs that are not on any roster; these "orphan" scores are
    kept and take part in averages and rankings like any other.

    Nothing is cached: averages and rankings are recomputed from the recorded
    scores on every call.

    Parameters
    ----------
    options : ScorebookOptions
        Configuration. Default: ``ScorebookOptions()``.

    """

    def __init__(self, options: typing.Optional[ScorebookOptions] = None):
        self.options = options if options is not None else ScorebookOptions()
        self._scores: typing.Dict[str, typing.List[Score]] = collections.OrderedDict()
        self._lock = threading.Lock()

    def __repr__(self):
        return f"<{self.__class__.__name__} with {len(self._scores)} students>"

    # recording -----------------------------------------------------------------------

    def add_score(self, pid: str, score: Score):
        """Record a score for the student with ID ``pid``.

        Raises
        ------
        InvalidArgument
            If ``pid`` is not a non-empty string, or ``score`` is not a
            :class:`Score`.

        """
        if not isinstance(pid, str) or not pid.strip():
            raise InvalidArgument(f"Student ID must be a non-empty string, got {pid!r}.")
        if not isinstance(score, Score):
            raise InvalidArgument(f"Expected a Score, got {score!r}.")

        with self._lock:
            self._scores.setdefault(pid, []).append(score)

        logger.debug("Recorded %s for student %s.", score, pid)

    # queries -------------------------------------------------------------------------

    def student_scores(self, pid: str) -> typing.List[Score]:
        """A copy of the scores recorded for ``pid``; empty if there are none."""
        return list(self._scores.get(pid, []))

    def all_scores(self) -> typing.Dict[str, typing.List[Score]]:
        """A copy of every recorded score, keyed by student ID.

        Both the mapping and the lists inside it are new objects, so changing
        them does not affect the scorebook. The scores themselves are immutable
        and are shared.

        """
        return {pid: list(scores) for pid, scores in self._scores.items()}

    def average(self, pid: str) -> float:
        """The mean of the points recorded for ``pid``.

        Returns 0.0 if no scores have been recorded for the student.

        """
        scores = self._scores.get(pid)
        if not scores:
            return 0.0
        return float(np.mean([s.points for s in scores]))

    def grade(self, average: float) -> scales.Grade:
        """The letter grade earned by ``average`` under this scorebook's scale."""
        return scales.letter_grade(average, self.options.scale)

    def averages(self) -> pd.Series:
        """The average of every student with at least one score.

        Returns
        -------
        pandas.Series
            Averages as floats, indexed by student ID in the order the students
            were first seen. Students without scores are not included.

        """
        averages = pd.Series(
            {pid: self.average(pid) for pid, scores in self._scores.items() if scores},
            dtype=float,
        )
        averages.index.name = "pid"
        averages.name = "average"
        return averages

    def letter_grades(self) -> pd.Series:
        """The letter grade of every student with at least one score."""
        return scales.map_averages_to_letter_grades(self.averages(), self.options.scale)

    def top_students(self, count: int) -> typing.List[RankingEntry]:
        """The ``count`` students with the highest averages.

        Students without any scores are not ranked: having no scores is not
        the same as having a score of zero. Students with equal averages are
        ordered by ID, ascending.

        Parameters
        ----------
        count : int
            The maximum number of entries to return. If it is larger than the
            number of ranked students, all of them are returned; if it is zero
            or negative, nothing is.

        Returns
        -------
        list[RankingEntry]
            Sorted by average, highest first.

        """
        if count <= 0:
            return []

        averages = self.averages()
        if averages.empty:
            return []

        table = averages.reset_index()
        table = table.sort_values(by=["average", "pid"], ascending=[False, True])

        return [
            RankingEntry(pid, float(average))
            for pid, average in table.head(count).itertuples(index=False)
        ]
