"""Read and write grading scales.

A scale file is a simple CSV with no headers. The first column contains the
letter grade, and the second contains the threshold as a decimal number. Every
grade from A to F must appear, in that order:

.. code::

    A,90.0
    B,80.0
    C,70.0
    D,60.0
    F,0.0

"""

from collections import OrderedDict
import pathlib

from ..exceptions import MalformedFormat
from ..scales import Grade, check_scale


def write(path: pathlib.Path, scale):
    """Writes a scale to disk."""
    check_scale(scale)
    with pathlib.Path(path).open("w", encoding="utf-8") as fileobj:
        for grade, threshold in scale.items():
            fileobj.write(f"{grade.name},{float(threshold)}\n")


def read(path: pathlib.Path):
    """Reads a scale from the file.

    Raises
    ------
    MalformedFormat
        If a line cannot be parsed, or the grades are not A through F in
        order with decreasing thresholds.

    """
    with pathlib.Path(path).open(encoding="utf-8") as fileobj:
        numbered = enumerate(fileobj.read().splitlines(), start=1)
        lines = [(n, l) for n, l in numbered if l.strip()]

    def parse_line(number, l):
        try:
            letter, threshold = l.split(",")
            return (Grade[letter.strip()], float(threshold))
        except (KeyError, ValueError) as exc:
            raise MalformedFormat(f"Invalid scale entry {l!r}.", number) from exc

    scale = OrderedDict(parse_line(n, l) for n, l in lines)

    try:
        check_scale(scale)
    except ValueError as exc:
        raise MalformedFormat(str(exc)) from exc

    return scale
