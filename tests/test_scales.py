import collections
import math

import pandas as pd
import pytest  # pyright: ignore

import scorebook
from scorebook import Grade


@pytest.mark.parametrize(
    "average, expected",
    [
        (95.5, Grade.A),
        (90.0, Grade.A),
        (89.999, Grade.B),
        (82.25, Grade.B),
        (80.0, Grade.B),
        (70.0, Grade.C),
        (65.0, Grade.D),
        (60.0, Grade.D),
        (59.999, Grade.F),
        (0.0, Grade.F),
        (-10.0, Grade.F),
        (150.0, Grade.A),
        (math.nan, Grade.F),
    ],
)
def test_letter_grade_follows_threshold_ladder(average, expected):
    assert scorebook.letter_grade(average) is expected


def test_grade_value_is_threshold():
    assert [g.value for g in Grade] == [90, 80, 70, 60, 0]
    assert str(Grade.B) == "B"


def test_map_averages_to_letter_grades_on_example():
    # given
    averages = pd.Series(data=[84.0, 95.0, 55.0], index=["a", "b", "c"])

    # when
    letters = scorebook.map_averages_to_letter_grades(averages)

    # then
    assert list(letters) == [Grade.B, Grade.A, Grade.F]
    assert list(letters.index) == ["a", "b", "c"]


def test_map_averages_to_letter_grades_with_custom_scale():
    # given
    averages = pd.Series(data=[84.0, 95.0])
    scale = collections.OrderedDict(
        [(Grade.A, 85.0), (Grade.B, 75.0), (Grade.C, 65.0), (Grade.D, 50.0), (Grade.F, 0.0)]
    )

    # when
    letters = scorebook.map_averages_to_letter_grades(averages, scale)

    # then
    assert list(letters) == [Grade.B, Grade.A]


def test_map_averages_to_letter_grades_raises_if_scale_is_missing_a_grade():
    # given
    averages = pd.Series(data=[84.0])
    scale = collections.OrderedDict([(Grade.A, 90.0), (Grade.F, 0.0)])

    # when/then
    with pytest.raises(ValueError):
        scorebook.map_averages_to_letter_grades(averages, scale)


def test_map_averages_to_letter_grades_raises_if_scale_does_not_decrease():
    # given
    averages = pd.Series(data=[84.0])
    scale = scorebook.DEFAULT_SCALE.copy()
    scale[Grade.D] = 75.0

    # when/then
    with pytest.raises(ValueError):
        scorebook.map_averages_to_letter_grades(averages, scale)


@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_check_scale_rejects_non_finite_thresholds(bad):
    # given
    scale = scorebook.DEFAULT_SCALE.copy()
    scale[Grade.C] = bad

    # when/then
    with pytest.raises(ValueError):
        scorebook.scales.check_scale(scale)
