"""
입력 폼 검증 로직

레코드를 저장소에 upsert 하기 전에 실행하는 검증 게이트입니다.
저장소는 이 검증을 다시 수행하지 않으므로, 입력 경로에서 반드시 호출해야 합니다.
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from .exceptions import ValidationError
from .models import SCHEDULE_TYPES, StageRecord

logger = logging.getLogger(__name__)

# 나노초 Timestamp 범위에서 도메인 여백(1개월)을 뺀 구간만 달력 날짜로 인정
MIN_CALENDAR_DATE = pd.Timestamp("1677-10-22")
MAX_CALENDAR_DATE = pd.Timestamp("2262-03-11")


def parse_calendar_date(value: Optional[str]) -> Optional[pd.Timestamp]:
    """
    "YYYY-MM-DD" 형식의 날짜 문자열을 자정 기준 Timestamp로 변환합니다.

    비어 있거나 해석할 수 없는 값, 그리고 MIN_CALENDAR_DATE ~ MAX_CALENDAR_DATE
    범위를 벗어난 값은 None을 반환합니다.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    parsed = pd.to_datetime(text, errors="coerce")
    if pd.isna(parsed):
        return None
    ts = pd.Timestamp(parsed)
    # 시간대 정보는 버리고 달력 날짜만 사용
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    ts = ts.normalize()
    if ts < MIN_CALENDAR_DATE or ts > MAX_CALENDAR_DATE:
        logger.debug(f"Date out of supported range: {text!r}")
        return None
    return ts.as_unit("ns")


def validate_date_pair(start: Optional[str], end: Optional[str]) -> bool:
    """
    시작일/종료일 쌍이 유효한지 확인합니다.

    둘 중 하나라도 비어 있으면 유효(해당 일정은 그리지 않음)로 보고,
    둘 다 있으면 종료일이 시작일보다 빠르지 않아야 합니다.
    같은 날짜(기간 0일)는 허용합니다. 해석할 수 없는 날짜는 유효하지 않습니다.

    Examples:
        >>> validate_date_pair("2024-05-10", "2024-05-01")
        False
        >>> validate_date_pair("", "2024-05-01")
        True
    """
    if not start or not end:
        return True

    start_ts = parse_calendar_date(start)
    end_ts = parse_calendar_date(end)
    if start_ts is None or end_ts is None:
        return False
    return end_ts >= start_ts


def validate_stage_record(record: StageRecord) -> None:
    """
    폼에서 제출된 레코드를 검증합니다.

    Raises:
        ValidationError: 프로젝트명이 비어 있거나 날짜 쌍이 잘못된 경우
    """
    if not record.project_name or not record.project_name.strip():
        logger.info("Rejected record without project name")
        raise ValidationError("프로젝트명을 입력해 주세요.")

    for schedule_type in SCHEDULE_TYPES:
        start, end = record.date_pair(schedule_type)
        if not validate_date_pair(start, end):
            logger.info(
                f"Rejected {schedule_type} dates for {record.project_name}/{record.stage}: "
                f"{start} > {end}"
            )
            raise ValidationError("날짜를 확인해 주세요. 종료일이 시작일보다 빠를 수 없습니다.")
