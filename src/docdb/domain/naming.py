"""Naming contract for intake files: ``Customer.DDMMYY.DDMMYY.ext``.

Pure rules only, no filesystem access. The projections (``customer_name``,
``first_day``, ``extension``) work on any dotted name and do not validate.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable

from .errors import BadDateFormat, DateOrderError, InvalidDate, MalformedName, UnsupportedExtension
from .models import DocumentName

DELIMITER = "."
FIELD_COUNT = 4
DATE_LENGTH = 6
DEFAULT_EXTENSIONS = ("xml", "csv", "json")
DEFAULT_CENTURY = 2000


def split_fields(file_name: str) -> list[str]:
    return file_name.split(DELIMITER)


def _field(file_name: str, index: int) -> str:
    fields = split_fields(file_name)
    if index >= len(fields):
        raise MalformedName(
            file_name,
            f"Error: The file name '{file_name}' must contain exactly three dots separating four parts.",
        )
    return fields[index]


def customer_name(file_name: str) -> str:
    return _field(file_name, 0)


def first_day(file_name: str) -> str:
    return _field(file_name, 1)


def extension(file_name: str) -> str:
    return _field(file_name, 3)


def derive_path(root: Path | str, first_day: str, extension: str) -> Path:
    """Return the directory a document is stored in: ``root/first_day/extension``."""
    return Path(root) / first_day / extension


def parse_day(raw: str, century: int = DEFAULT_CENTURY) -> date:
    """Parse a DDMMYY string into a date, reading the year as ``century + YY``.

    Raises ValueError when the string is not six ASCII digits or does not name
    a real calendar day.
    """
    if len(raw) != DATE_LENGTH or not (raw.isascii() and raw.isdigit()):
        raise ValueError(f"not a DDMMYY date: {raw!r}")
    day, month, year = int(raw[0:2]), int(raw[2:4]), int(raw[4:6])
    return date(century + year, month, day)


def parse_document_name(
    file_name: str,
    allowed_extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    century: int = DEFAULT_CENTURY,
) -> DocumentName:
    """Check ``file_name`` against the naming contract and return its fields.

    Rules are applied in order and the first one broken is raised: field
    count, extension, date length, calendar validity, date order. Equal first
    and last days are accepted.
    """
    fields = split_fields(file_name)
    if len(fields) != FIELD_COUNT or not fields[0]:
        raise MalformedName(
            file_name,
            f"Error: The file name '{file_name}' must contain exactly three dots separating four parts.",
        )
    customer, first_raw, last_raw, ext = fields

    allowed = tuple(allowed_extensions)
    if ext not in allowed:
        raise UnsupportedExtension(
            file_name,
            f"Error: The file '{file_name}' has an invalid extension. "
            f"Supported extensions are: {', '.join(allowed)}.",
        )

    if len(first_raw) != DATE_LENGTH or len(last_raw) != DATE_LENGTH:
        raise BadDateFormat(
            file_name,
            f"Error: The file '{file_name}' has dates that must be in the format DDMMYY "
            f"with exactly {DATE_LENGTH} characters.",
        )

    try:
        first_date = parse_day(first_raw, century)
        last_date = parse_day(last_raw, century)
    except ValueError:
        raise InvalidDate(file_name, f"Error: The file '{file_name}' contains invalid dates.") from None

    if first_date > last_date:
        raise DateOrderError(
            file_name,
            f"Error: The file '{file_name}' has a start date that is later than the end date.",
        )

    return DocumentName(
        customer=customer,
        first_day=first_raw,
        last_day=last_raw,
        extension=ext,
        first_date=first_date,
        last_date=last_date,
    )
