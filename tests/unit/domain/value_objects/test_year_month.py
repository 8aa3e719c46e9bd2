from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from payment_queries.domain.exceptions import InvalidArgumentError, InvalidYearMonthError
from payment_queries.domain.value_objects import YearMonth


class TestYearMonthCreation:
    def test_of_creates_year_month(self) -> None:
        year_month = YearMonth.of(2024, 1)

        assert year_month.year == 2024
        assert year_month.month == 1

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_out_of_range_month_raises(self, month: int) -> None:
        with pytest.raises(InvalidYearMonthError, match="month must be between 1 and 12"):
            YearMonth.of(2024, month)

    def test_out_of_range_year_raises(self) -> None:
        with pytest.raises(InvalidYearMonthError, match="year must be between"):
            YearMonth.of(0, 5)

    def test_non_int_month_raises(self) -> None:
        with pytest.raises(InvalidYearMonthError, match="month must be an int"):
            YearMonth.of(2024, "01")  # type: ignore[arg-type]

    def test_bool_month_raises(self) -> None:
        with pytest.raises(InvalidYearMonthError):
            YearMonth.of(2024, True)

    def test_invalid_year_month_is_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgumentError):
            YearMonth.of(2024, 13)


class TestYearMonthFromDatetime:
    def test_from_datetime_takes_calendar_fields(self) -> None:
        value = datetime(2024, 2, 29, 23, 59, tzinfo=UTC)

        assert YearMonth.from_datetime(value) == YearMonth.of(2024, 2)

    def test_from_datetime_does_not_convert_timezone(self) -> None:
        # 2024-03-01 00:30 at +02:00 is still February in UTC
        value = datetime(2024, 3, 1, 0, 30, tzinfo=timezone(timedelta(hours=2)))

        assert YearMonth.from_datetime(value) == YearMonth.of(2024, 3)

    def test_from_date(self) -> None:
        assert YearMonth.from_datetime(date(2023, 12, 1)) == YearMonth.of(2023, 12)


class TestYearMonthParse:
    def test_parse_iso_form(self) -> None:
        assert YearMonth.parse("2024-07") == YearMonth.of(2024, 7)

    def test_parse_strips_whitespace(self) -> None:
        assert YearMonth.parse(" 2024-07 ") == YearMonth.of(2024, 7)

    @pytest.mark.parametrize("text", ["2024-7", "2024/07", "", "July 2024", "2024-07-01"])
    def test_parse_rejects_malformed_text(self, text: str) -> None:
        with pytest.raises(InvalidYearMonthError, match="expected YYYY-MM"):
            YearMonth.parse(text)

    def test_parse_rejects_out_of_range_month(self) -> None:
        with pytest.raises(InvalidYearMonthError, match="month must be between"):
            YearMonth.parse("2024-13")

    def test_str_round_trips_through_parse(self) -> None:
        year_month = YearMonth.of(987, 3)

        assert str(year_month) == "0987-03"
        assert YearMonth.parse(str(year_month)) == year_month


class TestYearMonthContains:
    def test_contains_any_moment_of_the_month(self) -> None:
        year_month = YearMonth.of(2024, 1)

        assert year_month.contains(datetime(2024, 1, 1, 0, 0, tzinfo=UTC))
        assert year_month.contains(datetime(2024, 1, 31, 23, 59, 59, tzinfo=UTC))

    def test_does_not_contain_same_month_of_other_year(self) -> None:
        assert not YearMonth.of(2024, 1).contains(datetime(2023, 1, 15, tzinfo=UTC))

    def test_does_not_contain_neighbouring_month(self) -> None:
        assert not YearMonth.of(2024, 1).contains(datetime(2024, 2, 1, tzinfo=UTC))


class TestYearMonthValueSemantics:
    def test_is_frozen(self) -> None:
        year_month = YearMonth.of(2024, 1)

        with pytest.raises(AttributeError):
            year_month.month = 2  # type: ignore[misc]

    def test_equal_values_share_hash(self) -> None:
        assert hash(YearMonth.of(2024, 1)) == hash(YearMonth.parse("2024-01"))

    def test_ordering_follows_calendar(self) -> None:
        months = [YearMonth.of(2024, 2), YearMonth.of(2023, 12), YearMonth.of(2024, 1)]

        assert sorted(months) == [
            YearMonth.of(2023, 12),
            YearMonth.of(2024, 1),
            YearMonth.of(2024, 2),
        ]
