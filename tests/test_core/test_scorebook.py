import pytest  # pyright: ignore

import scorebook
from scorebook import Grade, Score


def example_scorebook():
    book = scorebook.Scorebook()
    book.add_score("2021001", Score("math", 95.5))
    book.add_score("2021001", Score("english", 87.0))
    book.add_score("2021002", Score("math", 78.5))
    book.add_score("2021002", Score("english", 85.5))
    return book


# add_score / student_scores -----------------------------------------------------------


def test_add_score_keeps_duplicates_in_order():
    # given
    book = scorebook.Scorebook()

    # when
    book.add_score("2021001", Score("math", 80.0))
    book.add_score("2021001", Score("math", 90.0))

    # then
    assert book.student_scores("2021001") == [Score("math", 80.0), Score("math", 90.0)]


def test_add_score_allows_orphans():
    # given
    book = scorebook.Scorebook()

    # when
    book.add_score("not on any roster", Score("math", 50.0))

    # then
    assert book.average("not on any roster") == 50.0


@pytest.mark.parametrize("pid", ["", "   ", None, 2021001])
def test_add_score_rejects_invalid_pid(pid):
    # given
    book = scorebook.Scorebook()

    # when/then
    with pytest.raises(scorebook.InvalidArgument):
        book.add_score(pid, Score("math", 50.0))


def test_add_score_rejects_non_score():
    # given
    book = scorebook.Scorebook()

    # when/then
    with pytest.raises(scorebook.InvalidArgument):
        book.add_score("2021001", ("math", 50.0))


def test_student_scores_for_unknown_pid_is_empty():
    assert scorebook.Scorebook().student_scores("2021001") == []


def test_student_scores_returns_a_copy():
    # given
    book = example_scorebook()

    # when
    scores = book.student_scores("2021001")
    scores.append(Score("art", 0.0))

    # then
    assert len(book.student_scores("2021001")) == 2


def test_all_scores_returns_a_deep_copy():
    # given
    book = example_scorebook()

    # when
    all_scores = book.all_scores()
    all_scores["2021001"].append(Score("art", 0.0))
    all_scores["2029999"] = [Score("art", 0.0)]

    # then
    assert len(book.student_scores("2021001")) == 2
    assert set(book.all_scores()) == {"2021001", "2021002"}


# average / grade ----------------------------------------------------------------------


def test_average_of_unknown_student_is_zero():
    assert scorebook.Scorebook().average("2021001") == 0


def test_average_is_arithmetic_mean():
    # given
    book = example_scorebook()

    # then
    assert book.average("2021001") == 91.25
    assert book.average("2021002") == 82.0


def test_grades_of_example_students():
    # given
    book = example_scorebook()

    # then
    assert book.grade(book.average("2021001")) is Grade.A
    assert book.grade(book.average("2021002")) is Grade.B


def test_grade_uses_scale_from_options():
    # given
    scale = scorebook.DEFAULT_SCALE.copy()
    scale[Grade.A] = 95.0
    book = scorebook.Scorebook(scorebook.ScorebookOptions(scale=scale))

    # then
    assert book.grade(91.25) is Grade.B


def test_options_reject_invalid_scale():
    # given
    scale = scorebook.DEFAULT_SCALE.copy()
    scale[Grade.B] = 95.0

    # when/then
    with pytest.raises(ValueError):
        scorebook.ScorebookOptions(scale=scale)


def test_averages_excludes_students_without_scores():
    # given
    book = example_scorebook()

    # when
    averages = book.averages()

    # then
    assert list(averages.index) == ["2021001", "2021002"]
    assert list(averages) == [91.25, 82.0]


def test_letter_grades():
    # given
    book = example_scorebook()

    # when
    grades = book.letter_grades()

    # then
    assert grades.loc["2021001"] is Grade.A
    assert grades.loc["2021002"] is Grade.B


# top_students -------------------------------------------------------------------------


def test_top_students_on_example():
    # given
    book = example_scorebook()

    # when
    top = book.top_students(1)

    # then
    assert top == [("2021001", 91.25)]
    assert top[0].pid == "2021001"


def test_top_students_sorted_descending():
    # given
    book = example_scorebook()
    book.add_score("2021003", Score("math", 99.0))

    # when
    top = book.top_students(3)

    # then
    assert [e.pid for e in top] == ["2021003", "2021001", "2021002"]
    assert [e.average for e in top] == [99.0, 91.25, 82.0]


def test_top_students_returns_everyone_when_count_is_large():
    # given
    book = example_scorebook()

    # when
    top = book.top_students(100)

    # then
    assert len(top) == 2


@pytest.mark.parametrize("count", [0, -1])
def test_top_students_with_nonpositive_count_is_empty(count):
    assert example_scorebook().top_students(count) == []


def test_top_students_on_empty_scorebook():
    assert scorebook.Scorebook().top_students(3) == []


def test_top_students_breaks_ties_by_ascending_pid():
    # given
    book = scorebook.Scorebook()
    book.add_score("c", Score("math", 80.0))
    book.add_score("a", Score("math", 80.0))
    book.add_score("b", Score("math", 90.0))

    # when
    top = book.top_students(3)

    # then
    assert [e.pid for e in top] == ["b", "a", "c"]


def test_top_students_reflects_new_scores():
    # given
    book = example_scorebook()
    book.top_students(1)

    # when
    book.add_score("2021002", Score("art", 100.0))
    book.add_score("2021002", Score("music", 100.0))
    book.add_score("2021002", Score("history", 100.0))

    # then
    top = book.top_students(1)
    assert top[0].pid == "2021002"
    assert top[0].average == pytest.approx(92.8)


def test_top_students_recomputes_averages_after_new_scores():
    # given
    book = example_scorebook()
    book.top_students(2)

    # when
    book.add_score("2021002", Score("art", 100.0))
    book.add_score("2021002", Score("music", 100.0))

    # then
    assert book.top_students(2) == [("2021001", 91.25), ("2021002", 91.0)]


def test_zero_average_is_still_ranked():
    # given
    book = example_scorebook()
    book.add_score("2021003", Score("math", 0.0))

    # when
    top = book.top_students(10)

    # then
    assert top[-1] == ("2021003", 0.0)
