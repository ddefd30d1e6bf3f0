"""
입력 검증 테스트

날짜 쌍 검증과 폼 레코드 검증 게이트를 확인합니다.
"""
from __future__ import annotations

import pandas as pd
import pytest

from schedule_dashboard.domain.exceptions import ValidationError
from schedule_dashboard.domain.models import StageRecord
from schedule_dashboard.domain.validation import (
    parse_calendar_date,
    validate_date_pair,
    validate_stage_record,
)


def test_validate_date_pair_end_before_start():
    """종료일이 시작일보다 빠르면 False"""
    assert validate_date_pair("2024-05-10", "2024-05-01") is False


@pytest.mark.parametrize(
    "start, end",
    [("", "2024-05-01"), ("2024-05-01", ""), ("", ""), (None, "2024-05-01")],
)
def test_validate_date_pair_missing_side_is_valid(start, end):
    """한쪽이 비어 있으면 True (해당 일정은 그리지 않음)"""
    assert validate_date_pair(start, end) is True


def test_validate_date_pair_same_day_allowed():
    """기간 0일 허용"""
    assert validate_date_pair("2024-02-15", "2024-02-15") is True
    assert validate_date_pair("2024-02-15", "2024-02-16") is True


def test_validate_date_pair_unparseable():
    assert validate_date_pair("not-a-date", "2024-02-16") is False


def test_parse_calendar_date():
    assert parse_calendar_date("2024-02-15") == pd.Timestamp("2024-02-15")
    assert parse_calendar_date(" ") is None
    assert parse_calendar_date(None) is None
    assert parse_calendar_date("2024-13-45") is None


def test_validate_stage_record_passes():
    record = StageRecord(
        project_name="Tower A",
        stage="Concept stage",
        proposed_start="2024-01-01",
        proposed_end="2024-03-01",
        actual_start="2024-01-05",
    )
    validate_stage_record(record)


@pytest.mark.parametrize("name", ["", "   "])
def test_validate_stage_record_requires_project_name(name):
    """프로젝트명 누락 - ValidationError"""
    with pytest.raises(ValidationError, match="프로젝트명"):
        validate_stage_record(StageRecord(project_name=name, stage="Concept stage"))


def test_validate_stage_record_rejects_any_bad_pair():
    """세 쌍 중 하나라도 역순이면 ValidationError"""
    record = StageRecord(
        project_name="Tower A",
        stage="Concept stage",
        proposed_start="2024-01-01",
        proposed_end="2024-03-01",
        adjusted_forecast_start="2024-04-01",
        adjusted_forecast_end="2024-03-01",
    )
    with pytest.raises(ValidationError, match="종료일"):
        validate_stage_record(record)


@pytest.mark.parametrize("value", ["3024-02-01", "2262-04-01", "1677-09-25", "0001-01-01"])
def test_parse_calendar_date_rejects_out_of_range(value):
    """Timestamp 범위 근처나 밖의 날짜는 해석할 수 없는 값과 같이 취급"""
    assert parse_calendar_date(value) is None


def test_parse_calendar_date_range_bounds_inclusive():
    assert parse_calendar_date("1677-10-22") == pd.Timestamp("1677-10-22")
    assert parse_calendar_date("2262-03-11") == pd.Timestamp("2262-03-11")


def test_out_of_range_pair_fails_validation():
    assert validate_date_pair("2300-01-01", "2300-02-01") is False
    record = StageRecord(
        project_name="Tower A",
        stage="Concept stage",
        actual_start="2024-01-01",
        actual_end="3024-01-10",
    )
    with pytest.raises(ValidationError):
        validate_stage_record(record)
