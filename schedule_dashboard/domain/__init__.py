"""
도메인 계층 퍼블릭 API

이 모듈은 도메인 계층의 주요 클래스와 함수를 재수출하여
일관된 퍼블릭 API를 제공합니다.
"""
from __future__ import annotations

from .exceptions import (
    DataLoadError,
    DomainError,
    ExportError,
    StorageError,
    ValidationError,
)
from .models import (
    PROJECT_STAGES,
    SCHEDULE_DESCRIPTIONS,
    SCHEDULE_TYPES,
    StageRecord,
    StageRecordBuilder,
    match_stage,
    new_record_id,
)
from .repository import RecordStore, ScheduleRepository, resolve_selected_project
from .validation import parse_calendar_date, validate_date_pair, validate_stage_record

__all__ = [
    # 예외
    "DomainError",
    "ValidationError",
    "DataLoadError",
    "StorageError",
    "ExportError",
    # 모델
    "PROJECT_STAGES",
    "SCHEDULE_TYPES",
    "SCHEDULE_DESCRIPTIONS",
    "StageRecord",
    "StageRecordBuilder",
    "match_stage",
    "new_record_id",
    # 저장소
    "RecordStore",
    "ScheduleRepository",
    "resolve_selected_project",
    # 검증
    "parse_calendar_date",
    "validate_date_pair",
    "validate_stage_record",
]
