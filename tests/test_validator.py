"""
Tests for record validation.
"""

import pytest
from datetime import date
from unittest.mock import Mock

from src.smartrice.models import AgriculturalLog, LogKind
from src.smartrice.processing import RecordValidator


class TestRecordValidator:
    """Test cases for RecordValidator."""

    @pytest.fixture
    def logger(self):
        return Mock()

    @pytest.fixture
    def validator(self, logger):
        return RecordValidator(logger)

    def test_parse_rainfall_row(self, validator):
        observation = validator.parse_rainfall_row({"date": "2025-06-03", "rainfall_amount": "12.5"})

        assert observation.date == date(2025, 6, 3)
        assert observation.amount_mm == 12.5

    def test_amount_key_alias(self, validator):
        observation = validator.parse_rainfall_row({"date": "2025-06-03", "amount": 4})
        assert observation.amount_mm == 4.0

    def test_missing_amount_counts_as_zero(self, validator):
        observation = validator.parse_rainfall_row({"date": "2025-06-03", "rainfall_amount": None})
        assert observation.amount_mm == 0.0

    def test_negative_amount_clamped_with_warning(self, validator, logger):
        observation = validator.parse_rainfall_row({"date": "2025-06-03", "rainfall_amount": -4})

        assert observation.amount_mm == 0.0
        logger.warning.assert_called_once()
        assert "clamped" in logger.warning.call_args[0][0]

    def test_non_numeric_amount_skipped(self, validator, logger):
        assert validator.parse_rainfall_row({"date": "2025-06-03", "rainfall_amount": "heavy"}) is None
        logger.warning.assert_called_once()

    @pytest.mark.parametrize("amount", ["nan", "inf", "-inf", float("nan"), float("inf")])
    def test_non_finite_amount_skipped(self, validator, logger, amount):
        assert validator.parse_rainfall_row({"date": "2025-06-03", "rainfall_amount": amount}) is None
        logger.warning.assert_called_once()
        assert "non-finite" in logger.warning.call_args[0][0]

    def test_non_finite_rows_do_not_reach_the_index(self, validator):
        rows = [
            {"date": "2025-06-03", "rainfall_amount": "nan"},
            {"date": "2025-06-04", "rainfall_amount": "inf"},
            {"date": "2025-06-05", "rainfall_amount": 7},
        ]
        observations = validator.parse_rainfall_rows(rows)
        assert [(o.date.day, o.amount_mm) for o in observations] == [(5, 7.0)]

    def test_bad_date_skipped(self, validator):
        assert validator.parse_rainfall_row({"date": "06/03/2025", "rainfall_amount": 3}) is None
        assert validator.parse_rainfall_row({"rainfall_amount": 3}) is None

    def test_parse_rainfall_rows_keeps_order(self, validator):
        rows = [
            {"date": "2025-06-05", "rainfall_amount": 1},
            {"date": "bad", "rainfall_amount": 2},
            {"date": "2025-06-01", "rainfall_amount": 3},
        ]
        observations = validator.parse_rainfall_rows(rows)
        assert [o.date.day for o in observations] == [5, 1]

    def test_parse_log_rows(self, validator, logger, sample_data):
        logs = validator.parse_log_rows(sample_data["harvest_logs"], LogKind.HARVEST)

        assert len(logs) == 6
        assert logs[0].actual_date == "2025-06-10"
        assert logs[0].actual_time == "07:30"
        assert logs[0].recommended_date == "2025-06-01"
        assert logs[0].extra == {"user_id": "u1"}
        assert logs[2].recommended_date is None

    def test_parse_log_rows_skips_missing_actual_date(self, validator, logger):
        rows = [
            {"id": "a", "crop_type": "Rice", "actual_planting_date": "2025-04-20"},
            {"id": "b", "crop_type": "Rice"},
        ]
        logs = validator.parse_log_rows(rows, LogKind.PLANTING)

        assert [log.id for log in logs] == ["a"]
        logger.error.assert_called_once()

    def test_validate_log(self, validator):
        good = AgriculturalLog(crop_type="Rice", actual_date="2025-06-10", recommended_date="2025-06-01")
        is_valid, errors = validator.validate_log(good)
        assert is_valid
        assert errors == []

    def test_validate_log_reports_each_problem(self, validator):
        bad = AgriculturalLog(crop_type="", actual_date="June 10", recommended_date="2025-06-31")
        is_valid, errors = validator.validate_log(bad)

        assert not is_valid
        assert len(errors) == 3
        assert any("actual_harvest_date" in error for error in errors)
        assert any("recommended_harvest_date" in error for error in errors)
