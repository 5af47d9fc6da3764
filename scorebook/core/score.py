import math
import numbers

from ..exceptions import InvalidArgument


class Score:
    """The points earned by a student in a single subject.

    Scores are not keyed: a student may have several scores for the same
    subject, and all of them count toward the average.

    Raises
    ------
    InvalidArgument
        If the subject is empty or the points are not a finite number.

    """

    __slots__ = ("_subject", "_points")

    def __init__(self, subject: str, points: float):
        if not isinstance(subject, str) or not subject.strip():
            raise InvalidArgument(f"Subject must be a non-empty string, got {subject!r}.")

        if isinstance(points, bool) or not isinstance(points, numbers.Real):
            raise InvalidArgument(f"Points must be a number, got {points!r}.")
        if not math.isfinite(points):
            raise InvalidArgument(f"Points must be finite, got {points}.")

        self._subject = subject
        self._points = float(points)

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def points(self) -> float:
        return self._points

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return (self.subject, self.points) == (other.subject, other.points)

    def __hash__(self):
        return hash((self._subject, self._points))

    def __repr__(self):
        return f"{self.__class__.__name__}(subject={self.subject!r}, points={self.points!r})"

    def __str__(self):
        return f"{self.subject}+{self.points}"
