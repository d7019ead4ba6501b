"""Field predicates shared by every form. No Flask imports here."""
import re
from datetime import date
from typing import Optional

_DATE_YMD_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_NAME_RE = re.compile(r"[A-Za-z]{2,30}")
_MOBILE_RE = re.compile(r"(?:\+9665[0-9]{8}|05[0-9]{8})")
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_COURSE_CODE_RE = re.compile(r"[A-Za-z]{2,}[0-9]{2,}")
_STUDENT_ID_RE = re.compile(r"[0-9]{7}")
_DIGITS_RE = re.compile(r"[0-9]+")
_INT_PREFIX_RE = re.compile(r"\s*([+-]?[0-9]{1,9})(?![0-9])")


def parse_date_ymd(value: str) -> Optional[date]:
    """Parse a strict yyyy-mm-dd string into a calendar date.

    Returns None when the shape is wrong or the date does not exist on the
    calendar (2023-02-30, 2023-13-01, ...).
    """
    m = _DATE_YMD_RE.fullmatch(value or "")
    if not m:
        return None
    year, month, day = (int(g) for g in m.groups())
    if month < 1 or month > 12 or day < 1 or day > 31:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_valid_date_ymd(value: str) -> bool:
    return parse_date_ymd(value) is not None


def is_valid_name(value: str) -> bool:
    return bool(value and _NAME_RE.fullmatch(value))


def is_valid_mobile(value: str) -> bool:
    return bool(value and _MOBILE_RE.fullmatch(value))


def is_valid_email(value: str) -> bool:
    return bool(value and _EMAIL_RE.fullmatch(value))


def is_valid_course_code(value: str) -> bool:
    return bool(value and _COURSE_CODE_RE.fullmatch(value))


def is_valid_student_id(value: str) -> bool:
    return bool(value and _STUDENT_ID_RE.fullmatch(value))


def is_digits(value: str) -> bool:
    return bool(value and _DIGITS_RE.fullmatch(value))


def parse_int(value) -> Optional[int]:
    """Read a leading integer the way a browser number control reports it.

    "4" -> 4, " 3 members" -> 3, "" / "abc" / None -> None. Runs longer than
    nine digits are not treated as integers.
    """
    if value is None:
        return None
    m = _INT_PREFIX_RE.match(str(value))
    if not m:
        return None
    return int(m.group(1))
