from datetime import date, timedelta

import pytest
from dateutil import tz

from findpay.models.strict_date import parse_strict_date, today_in

TODAY = date(2024, 2, 29)


def test_parse_strict_date_accepts_past_and_today():
    assert parse_strict_date("2023-12-30", today=TODAY) == date(2023, 12, 30)
    assert parse_strict_date(" 2024-02-29 ", today=TODAY) == TODAY


@pytest.mark.parametrize(
    "text",
    ["2024-03-01", "2023-02-29", "2023-04-31", "2023-00-10", "23-12-30",
     "2023-12-30T00:00", "2023-12-3O", "20231230", "2023-12-30 extra"],
)
def test_parse_strict_date_rejects(text):
    with pytest.raises(ValueError):
        parse_strict_date(text, today=TODAY)


def test_today_in_zone():
    utc_today = today_in(tz.UTC)
    assert abs(utc_today - date.today()) <= timedelta(days=1)


def test_parse_strict_date_rejects_non_ascii_digits():
    with pytest.raises(ValueError):
        parse_strict_date("٢٠٢٣-١٢-٣٠", today=TODAY)
