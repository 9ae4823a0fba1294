"""Lexical parsing of `YYYY-MM-DD HH:MM:SS` strings.

Purely structural: the pattern is matched against the whole string and the
six numeric groups are returned as integers. Range checks live in
`calendar` and `clock`.
"""
from __future__ import annotations

import re
from typing import NamedTuple

DATETIME_PATTERN = r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})"
DATETIME_FORMAT = "YYYY-MM-DD HH:MM:SS"

# re.ASCII keeps \d to [0-9]; fullmatch rejects a trailing newline that `$` would allow.
_DATETIME_RE = re.compile(DATETIME_PATTERN, re.ASCII)


class ParsedFields(NamedTuple):
    """Integer fields extracted from a lexically valid datetime string."""
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @property
    def date_part(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day

    @property
    def time_part(self) -> tuple[int, int, int]:
        return self.hour, self.minute, self.second


def parse_datetime_fields(value: str) -> ParsedFields | None:
    """Match `value` against the datetime pattern.

    Returns None on any deviation: wrong separators, missing time, extra
    characters or non-ASCII digits.
    """
    if (match := _DATETIME_RE.fullmatch(value)) is None:
        return None
    return ParsedFields(*(int(group) for group in match.groups()))
