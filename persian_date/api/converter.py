"""Persian (Jalali) ↔ Gregorian conversion core.

Both directions are pure integer arithmetic over epoch-day counts and do not
validate their input: an out-of-range day simply overflows into the next
month. Use :func:`validate_persian_date` / :func:`validate_gregorian_date`
before converting when strict checking is wanted.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Tuple, Union

__all__ = [
    "GregorianDate",
    "PERSIAN_MONTH_NAMES",
    "PersianDate",
    "coerce_gregorian",
    "coerce_persian",
    "convert_gregorian_string",
    "convert_persian_string",
    "format_gregorian_date",
    "format_persian_date",
    "gregorian_month_length",
    "gregorian_to_persian",
    "is_gregorian_leap",
    "is_persian_leap",
    "persian_month_length",
    "persian_to_gregorian",
    "to_gregorian",
    "to_persian",
    "validate_gregorian_date",
    "validate_persian_date",
]

PERSIAN_MONTH_NAMES = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

_GREGORIAN_MONTH_LENGTHS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
# Days before the first of each Gregorian month in a common year.
_GREGORIAN_DAYS_BEFORE_MONTH = [0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334]

_DIGIT_TABLE = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")

Triple = Tuple[int, int, int]


@dataclass(frozen=True)
class PersianDate:
    """A Persian (Jalali) calendar date.

    Construction does not check ranges; see :meth:`is_valid`.
    """

    year: int
    month: int
    day: int

    @classmethod
    def today(cls) -> "PersianDate":
        return GregorianDate.from_date(date.today()).to_persian()

    @property
    def month_name(self) -> str:
        if not (1 <= self.month <= 12):
            raise ValueError(f"month must be in 1..12 to have a name, got {self.month}")
        return PERSIAN_MONTH_NAMES[self.month - 1]

    def as_tuple(self) -> Triple:
        return self.year, self.month, self.day

    def format(self) -> str:
        return format_persian_date(self.year, self.month, self.day)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def is_valid(self) -> bool:
        return 1 <= self.month <= 12 and 1 <= self.day <= persian_month_length(self.year, self.month)

    def to_gregorian(self) -> "GregorianDate":
        return to_gregorian(self.year, self.month, self.day)


@dataclass(frozen=True)
class GregorianDate:
    """A proleptic Gregorian calendar date, kept apart from :class:`PersianDate`."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> "GregorianDate":
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> "GregorianDate":
        return cls.from_date(date.today())

    def as_tuple(self) -> Triple:
        return self.year, self.month, self.day

    def format(self) -> str:
        return format_gregorian_date(self.year, self.month, self.day)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def is_valid(self) -> bool:
        return 1 <= self.month <= 12 and 1 <= self.day <= gregorian_month_length(self.year, self.month)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_persian(self) -> PersianDate:
        return to_persian(self.year, self.month, self.day)


def format_persian_date(year: int, month: int, day: int) -> str:
    return f"{year}/{month:02d}/{day:02d}"


def format_gregorian_date(year: int, month: int, day: int) -> str:
    return f"{year}-{month:02d}-{day:02d}"


def to_gregorian(jy: int, jm: int, jd: int) -> GregorianDate:
    """Convert a Persian date to Gregorian using epoch-day arithmetic."""

    jy += 1595
    days = -355668 + 365 * jy + (jy // 33) * 8 + ((jy % 33) + 3) // 4 + jd
    if jm < 7:
        days += (jm - 1) * 31
    else:
        days += (jm - 7) * 30 + 186

    gy = 400 * (days // 146097)
    days %= 146097

    leap = True
    if days >= 36525:
        days -= 1
        gy += 100 * (days // 36524)
        days %= 36524
        if days >= 365:
            days += 1
        else:
            # first year of a century not divisible by 400
            leap = False

    gy += 4 * (days // 1461)
    days %= 1461

    if days >= 366:
        leap = False
        days -= 1
        gy += days // 365
        days %= 365

    gd = days + 1
    month_lengths = [0, 31, 29 if leap else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    gm = 0
    while gm < 12 and gd > month_lengths[gm]:
        gd -= month_lengths[gm]
        gm += 1

    return GregorianDate(gy, gm, gd)


def to_persian(gy: int, gm: int, gd: int) -> PersianDate:
    """Convert a Gregorian date to Persian using epoch-day arithmetic."""

    if gy <= 1600:
        jy = 0
        gy -= 621
    else:
        jy = 979
        gy -= 1600

    gy2 = gy + 1 if gm > 2 else gy
    days = (
        365 * gy
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        - 80
        + gd
        + _GREGORIAN_DAYS_BEFORE_MONTH[gm - 1]
    )

    jy += 33 * (days // 12053)
    days %= 12053

    jy += 4 * (days // 1461)
    days %= 1461

    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    if days < 186:
        jm = 1 + days // 31
        jd = 1 + days % 31
    else:
        jm = 7 + (days - 186) // 30
        jd = 1 + (days - 186) % 30

    return PersianDate(jy, jm, jd)


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_persian_leap(year: int) -> bool:
    start = to_gregorian(year, 1, 1).to_date()
    next_start = to_gregorian(year + 1, 1, 1).to_date()
    return (next_start - start).days == 366


def persian_month_length(year: int, month: int) -> int:
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_persian_leap(year) else 29


def gregorian_month_length(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_LENGTHS[month - 1]


def validate_persian_date(year: int, month: int, day: int) -> PersianDate:
    if not (1 <= month <= 12):
        raise ValueError("month must be in 1..12 for Persian calendar")
    max_day = persian_month_length(year, month)
    if not (1 <= day <= max_day):
        raise ValueError(f"day must be in 1..{max_day} for Persian month {month} of {year}")
    return PersianDate(year, month, day)


def validate_gregorian_date(year: int, month: int, day: int) -> GregorianDate:
    if not (1 <= month <= 12):
        raise ValueError("month must be in 1..12 for Gregorian calendar")
    max_day = gregorian_month_length(year, month)
    if not (1 <= day <= max_day):
        raise ValueError(f"day must be in 1..{max_day} for Gregorian month {month} of {year}")
    return GregorianDate(year, month, day)


def _split_date_string(value: str, calendar: str) -> Triple:
    tokens = value.strip().translate(_DIGIT_TABLE).replace("/", "-").split("-")
    if len(tokens) != 3:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}")
    try:
        year, month, day = (int(part) for part in tokens)
    except ValueError as exc:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}") from exc
    return year, month, day


def _unpack_triple(value: object, expected: str) -> Triple:
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Expected {expected}, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_gregorian(value: Union[str, date, datetime, GregorianDate, Iterable[int]]) -> Triple:
    if isinstance(value, GregorianDate):
        return value.as_tuple()
    if isinstance(value, PersianDate):
        raise TypeError("PersianDate must be converted with to_gregorian() first")
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_date_string(value, "Gregorian")
    return _unpack_triple(value, "a GregorianDate, date, string")


def coerce_persian(value: Union[str, PersianDate, Iterable[int]]) -> Triple:
    if isinstance(value, PersianDate):
        return value.as_tuple()
    if isinstance(value, (GregorianDate, date)):
        raise TypeError("Gregorian values must be converted with to_persian() first")
    if isinstance(value, str):
        return _split_date_string(value, "Persian")
    return _unpack_triple(value, "a PersianDate, string")


def persian_to_gregorian(value: Union[str, PersianDate, Iterable[int]]) -> GregorianDate:
    return to_gregorian(*coerce_persian(value))


def gregorian_to_persian(value: Union[str, date, datetime, GregorianDate, Iterable[int]]) -> PersianDate:
    return to_persian(*coerce_gregorian(value))


def convert_persian_string(value: str) -> str:
    """Render a ``Y/M/D`` Persian string as a ``YYYY-MM-DD`` Gregorian one.

    A blank input yields ``""``.
    """

    if not value or not value.strip():
        return ""
    return persian_to_gregorian(value).format()


def convert_gregorian_string(value: str) -> str:
    """Render a ``Y-M-D`` Gregorian string as a ``YYYY/MM/DD`` Persian one."""

    if not value or not value.strip():
        return ""
    return gregorian_to_persian(value).format()
