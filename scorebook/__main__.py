"""Command-line demonstration of scorebook.

Run with ``python -m scorebook``.

"""

import argparse
import logging
import sys

from .core import Roster, Score, Scorebook, Student
from .logging_config import setup_logging
from . import io

STUDENTS = [
    Student("2021001", "张三", 20),
    Student("2021002", "李四", 19),
    Student("2021003", "王五", 21),
]

SCORES = [
    ("2021001", Score("数学", 95.5)),
    ("2021001", Score("英语", 87.0)),
    ("2021002", Score("数学", 78.5)),
    ("2021002", Score("英语", 85.5)),
    ("2021003", Score("数学", 88.0)),
    ("2021003", Score("英语", 92.0)),
]


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="scorebook", description="Demonstrate recording and grading scores."
    )
    parser.add_argument(
        "--output",
        default="students.csv",
        help="where to save the roster (default: students.csv)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    roster = Roster()
    scorebook = Scorebook()

    print("=== Student scores ===\n")

    print("1. Adding students")
    for student in STUDENTS:
        roster.add(student)

    print("\n2. Adding scores")
    for pid, score in SCORES:
        scorebook.add_score(pid, score)

    print("\n3. Students aged 19 to 20:")
    for student in roster.students_by_age(19, 20):
        print(f"  {student}")

    print("\n4. Score summary:")
    for student in roster.get_all():
        scores = scorebook.student_scores(student.pid)
        print(f"\n  {student.name} ({student.pid})")
        if not scores:
            print("  no scores recorded")
            continue
        for score in scores:
            print(f"  subject: {score.subject}, points: {score.points}")
        average = scorebook.average(student.pid)
        print(f"  average: {average}, grade: {scorebook.grade(average)}")

    print("\n5. Highest average:")
    for entry in scorebook.top_students(1):
        print(f"  {entry.pid}: {entry.average}")

    print("\n6. Saving and reloading the roster:")
    saved = io.roster.write(args.output, roster.get_all())
    if not saved.ok:
        print(f"  could not save: {saved.error}")
        return 1
    print(f"  saved to {saved.path}")

    loaded = io.roster.read(saved.path)
    if not loaded.ok:
        print(f"  could not load: {loaded.error}")
        return 1
    print(f"  loaded {len(loaded.students)} students: {', '.join(loaded.students.pids)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
