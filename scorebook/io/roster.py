"""Read and write roster files.

A roster file is a UTF-8 text file with one header line followed by one line
per student:

.. code::

    Name,StudentId,Age
    Zhang San,2021001,20
    Li Si,2021002,19

Fields are separated by commas and are not quoted or escaped, so names and IDs
must not contain commas; a row with a comma inside a field has the wrong
number of fields and is skipped when the file is read back.

Neither function raises on a bad file. Instead they return a
:class:`SaveResult` or :class:`LoadResult` which records the error, if any.

"""

import dataclasses
import logging
import pathlib
import re
import typing

from ..core.student import Student, Students
from ..exceptions import InvalidArgument, IOFailure, MalformedFormat, ScorebookError

logger = logging.getLogger(__name__)

HEADER = "Name,StudentId,Age"
"""The exact first line of every roster file."""

ENCODING = "utf-8"

_INTEGER = re.compile(r"[+-]?[0-9]+")

# ages are stored as 32-bit signed integers
_MIN_AGE, _MAX_AGE = -(2**31), 2**31 - 1

PathLike = typing.Union[str, pathlib.Path]


# results ==============================================================================


@dataclasses.dataclass
class SaveResult:
    """The outcome of :func:`write`.

    Attributes
    ----------
    path : pathlib.Path
        The absolute path of the file.
    error : Optional[ScorebookError]
        The error that stopped the save, or `None` if it succeeded.

    """

    path: pathlib.Path
    error: typing.Optional[ScorebookError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self):
        if self.error is not None:
            raise self.error


@dataclasses.dataclass
class LoadResult:
    """The outcome of :func:`read`.

    Attributes
    ----------
    path : pathlib.Path
        The absolute path of the file.
    students : Students
        The students parsed from the file. If the load failed part way, these
        are the rows that were parsed before the failure.
    error : Optional[ScorebookError]
        The error that stopped the load, or `None` if it succeeded.

    """

    path: pathlib.Path
    students: Students = dataclasses.field(default_factory=Students)
    error: typing.Optional[ScorebookError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self):
        if self.error is not None:
            raise self.error


# helpers ==============================================================================


def _format_row(student: Student) -> str:
    return f"{student.name},{student.pid},{student.age}"


def _parse_age(text: str, line_number: int) -> int:
    if _INTEGER.fullmatch(text) is None:
        raise MalformedFormat(f"Age is not an integer: {text!r}.", line_number)
    age = int(text)
    if not _MIN_AGE <= age <= _MAX_AGE:
        raise MalformedFormat(f"Age is out of range: {text!r}.", line_number)
    return age


def _parse_row(line: str, line_number: int) -> typing.Optional[Student]:
    """Parse a line into a student. Returns None if the line should be skipped."""
    line = line.strip()
    if not line:
        return None

    parts = line.split(",")
    if len(parts) != 3:
        logger.debug(
            "Skipping line %d: expected 3 fields, found %d.", line_number, len(parts)
        )
        return None

    name, pid, age = (part.strip() for part in parts)
    age = _parse_age(age, line_number)

    try:
        return Student(pid, name, age)
    except InvalidArgument as exc:
        raise MalformedFormat(exc.message, line_number) from exc


# public functions =====================================================================


def write(path: PathLike, students: typing.Iterable[Student]) -> SaveResult:
    """Write students to a roster file, replacing anything already there.

    Parameters
    ----------
    path : str or pathlib.Path
        Where to write the file.
    students : Iterable[Student]
        The students to write, in order.

    Returns
    -------
    SaveResult
        Whether the save succeeded. On failure, the file may have been
        truncated or partially written.

    """
    path = pathlib.Path(path).absolute()

    try:
        with path.open("w", encoding=ENCODING, newline="\n") as fileobj:
            fileobj.write(HEADER + "\n")
            for student in students:
                fileobj.write(_format_row(student) + "\n")
    except OSError as exc:
        error = IOFailure(f"Could not write roster to {path}: {exc}")
        error.__cause__ = exc
        logger.error("Error while saving roster: %s", error)
        return SaveResult(path, error)

    logger.info("Roster saved to %s", path)
    return SaveResult(path)


def read(path: PathLike) -> LoadResult:
    """Read students from a roster file.

    Blank lines, and lines which do not have exactly three fields, are
    skipped. An age which is not an integer is an error, and stops the read:
    the students parsed before that line are returned along with the error.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the roster file.

    Returns
    -------
    LoadResult
        The students read, and the error that stopped the read, if any.

    """
    path = pathlib.Path(path).absolute()
    students: typing.List[Student] = []

    try:
        # a leading byte order mark is not part of the header
        with path.open("r", encoding="utf-8-sig") as fileobj:
            header = fileobj.readline().rstrip("\r\n")
            if header != HEADER:
                raise MalformedFormat(
                    f"Expected header {HEADER!r}, found {header!r}.", line_number=1
                )

            for line_number, line in enumerate(fileobj, start=2):
                student = _parse_row(line, line_number)
                if student is not None:
                    students.append(student)

    except MalformedFormat as exc:
        logger.error("Error while loading roster from %s: %s", path, exc)
        return LoadResult(path, Students(students), exc)

    except (OSError, UnicodeDecodeError) as exc:
        error = IOFailure(f"Could not read roster from {path}: {exc}")
        error.__cause__ = exc
        logger.error("Error while loading roster: %s", error)
        return LoadResult(path, Students(students), error)

    logger.info("Loaded %d students from %s", len(students), path)
    return LoadResult(path, Students(students))
