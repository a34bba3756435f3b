from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


ErrorCode = Literal[
    "MissingField",
    "NoClassesSelected",
    "RedundantException",
    "InvalidRange",
    "InvalidValue",
]


@dataclass(frozen=True)
class ValidationError:
    """
    Validation outcome handed back to the form layer. Validators return it
    (or None when the record is acceptable); it is never raised.
    """

    code: ErrorCode
    field: str
    message: str


class CalendarInputError(ValueError):
    """Malformed input document (missing key, bad date, unknown literal)."""
