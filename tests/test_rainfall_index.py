"""
Tests for the rainfall index and its builder.
"""

import pytest
from datetime import date

from src.smartrice.models import RainfallObservation
from src.smartrice.processing import DuplicatePolicy, RainfallIndex, RainfallIndexBuilder


def obs(day, amount):
    return RainfallObservation(date=date.fromisoformat(day), amount_mm=amount)


class TestRainfallIndexBuilder:
    """Test cases for RainfallIndexBuilder."""

    def test_empty_input(self):
        index = RainfallIndexBuilder().build([])
        assert len(index) == 0
        assert index.get("2025-06-01") == 0

    def test_lookup_by_string_and_date(self):
        index = RainfallIndexBuilder().build([obs("2025-06-03", 20.0)])

        assert index.get("2025-06-03") == 20.0
        assert index.get(date(2025, 6, 3)) == 20.0
        assert index.get("2025-06-03T18:00:00Z") == 20.0
        assert "2025-06-03" in index
        assert "2025-06-04" not in index

    def test_missing_date_uses_default(self):
        index = RainfallIndexBuilder().build([obs("2025-06-03", 20.0)])
        assert index.get("2025-06-04") == 0.0
        assert index.get("2025-06-04", default=-1.0) == -1.0

    def test_duplicate_last_wins_by_default(self):
        builder = RainfallIndexBuilder()
        index = builder.build([obs("2025-06-03", 20.0), obs("2025-06-03", 5.0)])

        assert builder.policy is DuplicatePolicy.LAST
        assert index.get("2025-06-03") == 5.0
        assert len(index) == 1

    def test_duplicate_sum_policy(self):
        index = RainfallIndexBuilder("sum").build(
            [obs("2025-06-03", 20.0), obs("2025-06-03", 5.0), obs("2025-06-04", 1.0)]
        )
        assert index.get("2025-06-03") == 25.0
        assert index.get("2025-06-04") == 1.0

    def test_duplicate_reject_policy(self):
        builder = RainfallIndexBuilder(DuplicatePolicy.REJECT)
        with pytest.raises(ValueError, match="2025-06-03"):
            builder.build([obs("2025-06-03", 20.0), obs("2025-06-03", 5.0)])

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            RainfallIndexBuilder("average")

    def test_build_from_rows(self):
        rows = [
            {"date": "2025-06-03", "rainfall_amount": 20},
            {"date": "2025-06-04T00:00:00+00:00", "rainfall_amount": None},
            {"date": "garbage", "rainfall_amount": 3},
        ]
        index = RainfallIndexBuilder().build_from_rows(rows)

        assert len(index) == 2
        assert index.get("2025-06-03") == 20.0
        assert "2025-06-04" in index
        assert index.get("2025-06-04", default=99.0) == 0.0


class TestRainfallIndex:
    """Test cases for RainfallIndex queries."""

    @pytest.fixture
    def index(self):
        return RainfallIndex({
            date(2024, 1, 15): 10.0,
            date(2024, 1, 20): 5.5,
            date(2024, 6, 1): 100.0,
            date(2025, 1, 1): 7.0,
        })

    def test_total_between_inclusive(self, index):
        assert index.total_between("2024-01-15", "2024-01-20") == 15.5
        assert index.total_between("2024-01-20", "2024-01-15") == 15.5
        assert index.total_between("2024-01-16", "2024-01-19") == 0

    def test_monthly_totals(self, index):
        totals = index.monthly_totals(2024)

        assert len(totals) == 12
        assert totals[0] == 15.5
        assert totals[5] == 100.0
        assert sum(totals) == 115.5
        assert index.monthly_totals(2023) == [0.0] * 12

    def test_monthly_records(self, index):
        records = index.monthly_records(2025)
        assert [r.month for r in records] == list(range(1, 13))
        assert records[0].amount_mm == 7.0
        assert records[0].year == 2025

    def test_dates_sorted(self, index):
        assert index.dates()[0] == date(2024, 1, 15)
        assert index.dates()[-1] == date(2025, 1, 1)

    def test_as_dict_uses_date_strings(self, index):
        assert index.as_dict()["2024-06-01"] == 100.0

    def test_contains_rejects_bad_keys(self, index):
        assert "not a date" not in index
        assert 42 not in index
