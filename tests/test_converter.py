from datetime import date, datetime, timedelta

import pytest

from persian_date.api.converter import (
    GregorianDate,
    PERSIAN_MONTH_NAMES,
    PersianDate,
    coerce_gregorian,
    coerce_persian,
    convert_gregorian_string,
    convert_persian_string,
    format_gregorian_date,
    format_persian_date,
    gregorian_month_length,
    gregorian_to_persian,
    is_gregorian_leap,
    is_persian_leap,
    persian_month_length,
    persian_to_gregorian,
    to_gregorian,
    to_persian,
    validate_gregorian_date,
    validate_persian_date,
)


@pytest.mark.parametrize(
    "persian,gregorian",
    [
        ((1366, 9, 24), (1987, 12, 15)),
        ((1403, 1, 1), (2024, 3, 20)),
        ((1402, 1, 1), (2023, 3, 21)),
        ((1395, 10, 12), (2017, 1, 1)),
        ((1378, 10, 11), (2000, 1, 1)),
    ],
)
def test_known_fixed_points(persian, gregorian):
    assert to_gregorian(*persian) == GregorianDate(*gregorian)
    assert to_persian(*gregorian) == PersianDate(*persian)


def test_gregorian_roundtrip_1800_to_2100():
    current = date(1800, 1, 1)
    end = date(2100, 12, 31)
    while current <= end:
        persian = to_persian(current.year, current.month, current.day)
        assert to_gregorian(*persian.as_tuple()).to_date() == current, current
        current += timedelta(days=1)


def test_persian_roundtrip_matching_years():
    for year in range(1179, 1479):
        for month in range(1, 13):
            for day in range(1, persian_month_length(year, month) + 1):
                gregorian = to_gregorian(year, month, day)
                assert gregorian.is_valid(), (year, month, day)
                assert to_persian(*gregorian.as_tuple()) == PersianDate(year, month, day)


def test_agrees_with_jdatetime():
    jdatetime = pytest.importorskip("jdatetime")
    current = date(1900, 1, 1)
    while current <= date(2100, 12, 31):
        reference = jdatetime.date.fromgregorian(date=current)
        persian = to_persian(current.year, current.month, current.day)
        assert persian.as_tuple() == (reference.year, reference.month, reference.day), current
        current += timedelta(days=7)


@pytest.mark.parametrize(
    "before,after",
    [
        (date(1800, 2, 28), date(1800, 3, 1)),
        (date(1900, 2, 28), date(1900, 3, 1)),
        (date(2000, 2, 28), date(2000, 2, 29)),
        (date(2000, 2, 29), date(2000, 3, 1)),
        (date(2100, 2, 28), date(2100, 3, 1)),
        (date(1899, 12, 31), date(1900, 1, 1)),
        (date(1999, 12, 31), date(2000, 1, 1)),
        (date(2099, 12, 31), date(2100, 1, 1)),
    ],
)
def test_century_boundaries_are_consecutive_days(before, after):
    first = to_persian(before.year, before.month, before.day)
    second = to_persian(after.year, after.month, after.day)
    assert to_gregorian(*first.as_tuple()).to_date() == before
    assert to_gregorian(*second.as_tuple()).to_date() == after
    if first.month == second.month:
        assert second.day == first.day + 1
    else:
        assert second.day == 1
        assert first.day == persian_month_length(first.year, first.month)


def test_leap_year_last_day_is_eve_of_nowruz():
    assert is_persian_leap(1403)
    assert to_gregorian(1403, 12, 30) == GregorianDate(2025, 3, 20)
    assert to_gregorian(1404, 1, 1) == GregorianDate(2025, 3, 21)


def test_common_year_day_thirty_overflows_into_nowruz():
    assert not is_persian_leap(1402)
    assert to_gregorian(1402, 12, 30) == to_gregorian(1403, 1, 1) == GregorianDate(2024, 3, 20)


def test_out_of_range_days_overflow_without_error():
    assert to_gregorian(1403, 7, 31) == to_gregorian(1403, 8, 1)
    assert to_gregorian(1403, 1, 32) == to_gregorian(1403, 2, 1)
    assert to_gregorian(1403, 1, 0) == GregorianDate(2024, 3, 19)
    assert to_persian(2023, 2, 30) == to_persian(2023, 3, 2)


def test_is_persian_leap_matches_known_years():
    assert is_persian_leap(1399)
    assert not is_persian_leap(1400)
    assert is_persian_leap(1403)


def test_is_gregorian_leap():
    assert is_gregorian_leap(2000)
    assert is_gregorian_leap(2024)
    assert not is_gregorian_leap(1900)
    assert not is_gregorian_leap(2100)


def test_month_lengths():
    assert [persian_month_length(1402, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [29]
    assert persian_month_length(1403, 12) == 30
    assert gregorian_month_length(2024, 2) == 29
    assert gregorian_month_length(1900, 2) == 28
    assert gregorian_month_length(2023, 12) == 31


def test_formatting_pads_month_and_day_only():
    assert format_persian_date(1403, 1, 1) == "1403/01/01"
    assert format_gregorian_date(2024, 3, 20) == "2024-03-20"
    assert format_persian_date(1366, 9, 4) == "1366/09/04"
    assert format_gregorian_date(987, 7, 5) == "987-07-05"
    assert PersianDate(1403, 1, 1).format() == "1403/01/01"
    assert GregorianDate(2024, 3, 20).format() == "2024-03-20"
    assert PersianDate(1403, 1, 1).isoformat() == "1403-01-01"


def test_calendar_variants_are_not_interchangeable():
    assert PersianDate(1403, 1, 1) != GregorianDate(1403, 1, 1)
    with pytest.raises(TypeError):
        coerce_persian(GregorianDate(2024, 3, 20))
    with pytest.raises(TypeError):
        coerce_persian(date(2024, 3, 20))
    with pytest.raises(TypeError):
        coerce_gregorian(PersianDate(1403, 1, 1))


def test_coerce_helpers_accept_various_inputs():
    assert coerce_gregorian("2024/03/20") == (2024, 3, 20)
    assert coerce_gregorian(datetime(2024, 3, 20, 12, 30)) == (2024, 3, 20)
    assert coerce_gregorian((2022, 11, 5)) == (2022, 11, 5)
    assert coerce_persian("1403/01/01") == (1403, 1, 1)
    assert coerce_persian("۱۴۰۲/۱۲/۲۹") == (1402, 12, 29)
    assert coerce_persian(PersianDate(1402, 12, 29)) == (1402, 12, 29)


def test_coerce_rejects_malformed_values():
    with pytest.raises(ValueError):
        coerce_persian("1403/01")
    with pytest.raises(ValueError):
        coerce_gregorian("2024-xx-20")
    with pytest.raises(TypeError):
        coerce_gregorian(20240320)


def test_value_based_conversions():
    assert persian_to_gregorian("1403/01/01") == GregorianDate(2024, 3, 20)
    assert gregorian_to_persian(date(2024, 3, 20)) == PersianDate(1403, 1, 1)
    assert PersianDate(1366, 9, 24).to_gregorian().to_date() == date(1987, 12, 15)
    assert GregorianDate.from_date(date(1987, 12, 15)).to_persian() == PersianDate(1366, 9, 24)


def test_string_conversions():
    assert convert_persian_string("1403/01/01") == "2024-03-20"
    assert convert_persian_string("۱۳۶۶/۰۹/۲۴") == "1987-12-15"
    assert convert_gregorian_string("2024-03-20") == "1403/01/01"
    assert convert_persian_string("") == ""
    assert convert_gregorian_string("   ") == ""


def test_strict_validation_is_opt_in():
    assert not PersianDate(1402, 12, 30).is_valid()
    assert PersianDate(1403, 12, 30).is_valid()
    assert not GregorianDate(2023, 2, 29).is_valid()
    assert validate_persian_date(1403, 12, 30) == PersianDate(1403, 12, 30)
    assert validate_gregorian_date(2024, 2, 29) == GregorianDate(2024, 2, 29)
    with pytest.raises(ValueError):
        validate_persian_date(1402, 12, 30)
    with pytest.raises(ValueError):
        validate_persian_date(1402, 13, 1)
    with pytest.raises(ValueError):
        validate_gregorian_date(1900, 2, 29)


def test_month_names():
    assert len(PERSIAN_MONTH_NAMES) == 12
    assert PersianDate(1366, 9, 24).month_name == "آذر"
    assert PersianDate(1403, 1, 1).month_name == "فروردین"


def test_today_helpers_return_valid_dates():
    assert GregorianDate.today().to_date() == date.today()
    assert PersianDate.today().is_valid()


@pytest.mark.parametrize("month", [0, -1, 13])
def test_month_name_rejects_out_of_range_month(month):
    with pytest.raises(ValueError):
        PersianDate(1403, month, 1).month_name
