"""Mapping averages to letter grades."""

import collections
import enum
import math

import pandas as pd


class Grade(enum.Enum):
    """A letter grade. The value is the lowest average that earns the grade."""

    A = 90
    B = 80
    C = 70
    D = 60
    F = 0

    def __str__(self):
        return self.name


# helper functions =====================================================================


def _check_that_scale_monotonically_decreases(scale):
    prev = float("inf")
    for threshold in scale.values():
        if threshold >= prev:
            raise ValueError("Scale is not monotonically decreasing.")
        prev = threshold


def check_scale(scale):
    """Raise ``ValueError`` unless ``scale`` is a valid grading scale.

    A valid scale maps every :class:`Grade`, in order from A to F, to a
    strictly decreasing finite threshold.

    """
    if list(scale) != list(Grade):
        raise ValueError(
            f"Scale has invalid letter grades. Must be {[g.name for g in Grade]}, in order."
        )
    if not all(math.isfinite(t) for t in scale.values()):
        raise ValueError("Scale thresholds must be finite numbers.")
    _check_that_scale_monotonically_decreases(scale)


# common scales ========================================================================

DEFAULT_SCALE = collections.OrderedDict((grade, float(grade.value)) for grade in Grade)
"""The default grading scale: A at 90, B at 80, C at 70, D at 60."""


# public functions =====================================================================


def letter_grade(average: float, scale=None) -> Grade:
    """Map a single average to a letter grade.

    An average exactly on a threshold earns the higher grade. Every real
    number has a grade: anything below the D threshold, including negative
    numbers and NaN, is an F.

    Parameters
    ----------
    average : float
        The average score, on a 0-100 scale.
    scale : OrderedDict
        An ordered dictionary mapping letter grades to their thresholds.
        Default: :attr:`DEFAULT_SCALE`.

    Returns
    -------
    Grade

    """
    if scale is None:
        scale = DEFAULT_SCALE

    if math.isnan(average):
        return Grade.F

    for grade, threshold in scale.items():
        if average >= threshold:
            return grade
    return Grade.F


def map_averages_to_letter_grades(averages, scale=None):
    """Map each average to a letter grade.

    Parameters
    ----------
    averages : pandas.Series
        A series containing averages as floats between 0 and 100.
    scale : OrderedDict
        An ordered dictionary mapping letter grades to their thresholds.
        Default: :attr:`DEFAULT_SCALE`.

    Returns
    -------
    pandas.Series
        A series containing the resulting :class:`Grade` for each entry, with
        the same index as ``averages``.

    Raises
    ------
    ValueError
        If the provided scale is invalid.

    """
    if scale is None:
        scale = DEFAULT_SCALE
    else:
        check_scale(scale)

    return pd.Series(
        [letter_grade(a, scale) for a in averages],
        index=averages.index,
        dtype=object,
        name="grade",
    )
