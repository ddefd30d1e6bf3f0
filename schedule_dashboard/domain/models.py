"""
도메인 모델: 공정 일정 대시보드의 핵심 데이터 구조

이 모듈은 고정된 7개 공정 단계와 단계별 일정 레코드를 정의합니다.
레코드는 불변(frozen) 데이터클래스이며, 변경은 항상 전체 교체로만 이루어집니다.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

# ============================================================
# 공정 단계 / 일정 유형
# ============================================================

# 차트의 세로 순서를 결정하는 고정 단계 목록
PROJECT_STAGES: Tuple[str, ...] = (
    "Concept stage",
    "Schematic Design",
    "Design Development",
    "Construction documents",
    "Bidding and Negotiation",
    "Shop drawing review",
    "Construction admin",
)

ScheduleType = Literal["Proposed", "AF", "Actual"]

# 한 단계 안에서 위에서 아래로 쌓이는 순서
SCHEDULE_TYPES: Tuple[ScheduleType, ...] = ("Proposed", "AF", "Actual")

SCHEDULE_DESCRIPTIONS: Dict[str, str] = {
    "Proposed": "이해관계자와 합의한 최초 기준 일정",
    "AF": "현재 진행 상황을 반영해 재산정한 조정 예측 일정 (Adjusted Forecast)",
    "Actual": "단계 완료 시 기록한 실제 일정",
}


def new_record_id() -> str:
    """충돌 가능성이 없는 레코드 식별자를 생성합니다."""
    return uuid.uuid4().hex


def match_stage(label: Optional[str]) -> str:
    """
    단계 라벨을 고정 단계 목록의 값으로 변환합니다.

    대소문자와 앞뒤 공백을 무시하고 비교하며,
    일치하는 단계가 없으면 첫 번째 단계로 대체합니다.

    Examples:
        >>> match_stage("schematic design")
        'Schematic Design'
        >>> match_stage("Permitting")
        'Concept stage'
    """
    if label:
        wanted = str(label).strip().lower()
        for stage in PROJECT_STAGES:
            if stage.lower() == wanted:
                return stage
    return PROJECT_STAGES[0]


# 저장 시 사용하는 키 이름 (필드명 → 직렬화 키)
_SERIALIZED_KEYS: Dict[str, str] = {
    "id": "id",
    "project_name": "projectName",
    "stage": "stage",
    "proposed_start": "pStart",
    "proposed_end": "pEnd",
    "adjusted_forecast_start": "afStart",
    "adjusted_forecast_end": "afEnd",
    "actual_start": "aStart",
    "actual_end": "aEnd",
}


@dataclass(frozen=True)
class StageRecord:
    """
    프로젝트 한 단계의 일정 레코드.

    세 종류의 날짜 구간(Proposed, AF, Actual)은 각각 독립적으로 비어 있을 수
    있습니다. 날짜는 시간 정보가 없는 "YYYY-MM-DD" 문자열로 보관하며,
    빈 문자열은 값이 없음을 뜻합니다.

    Attributes:
        project_name: 프로젝트명 (레코드 그룹 기준)
        stage: PROJECT_STAGES 중 하나
        proposed_start / proposed_end: 최초 기준 일정
        adjusted_forecast_start / adjusted_forecast_end: 조정 예측 일정
        actual_start / actual_end: 실제 일정
        id: 생성 시 부여되는 불변 식별자
    """

    project_name: str
    stage: str
    proposed_start: str = ""
    proposed_end: str = ""
    adjusted_forecast_start: str = ""
    adjusted_forecast_end: str = ""
    actual_start: str = ""
    actual_end: str = ""
    id: str = field(default_factory=new_record_id)

    @property
    def key(self) -> Tuple[str, str]:
        """저장소 유일성 기준 (프로젝트명, 단계)"""
        return (self.project_name, self.stage)

    def date_pair(self, schedule_type: str) -> Tuple[str, str]:
        """일정 유형별 (시작일, 종료일) 쌍을 반환합니다."""
        if schedule_type == "Proposed":
            return (self.proposed_start, self.proposed_end)
        if schedule_type == "AF":
            return (self.adjusted_forecast_start, self.adjusted_forecast_end)
        if schedule_type == "Actual":
            return (self.actual_start, self.actual_end)
        raise KeyError(f"unknown schedule type: {schedule_type}")

    def date_values(self) -> Tuple[str, ...]:
        """여섯 개 날짜 필드를 순서대로 반환합니다."""
        return (
            self.proposed_start,
            self.proposed_end,
            self.adjusted_forecast_start,
            self.adjusted_forecast_end,
            self.actual_start,
            self.actual_end,
        )

    def to_dict(self) -> Dict[str, str]:
        """저장용 딕셔너리로 변환합니다."""
        return {
            key: getattr(self, name) for name, key in _SERIALIZED_KEYS.items()
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "StageRecord":
        """
        저장된 딕셔너리에서 레코드를 복원합니다.

        Raises:
            TypeError: payload가 매핑이 아니거나 값이 문자열이 아닌 경우
            KeyError: id / projectName / stage 키가 없는 경우
        """
        if not isinstance(payload, Mapping):
            raise TypeError(f"record entry must be a mapping, got {type(payload).__name__}")

        values: Dict[str, str] = {}
        for name, key in _SERIALIZED_KEYS.items():
            if name in ("id", "project_name", "stage"):
                value = payload[key]
            else:
                value = payload.get(key) or ""
            if not isinstance(value, str):
                raise TypeError(f"field {key!r} must be a string")
            values[name] = value

        values["stage"] = match_stage(values["stage"])
        return cls(**values)


# ============================================================
# 임포트용 빌더
# ============================================================

_DATE_FIELDS = tuple(
    f.name for f in fields(StageRecord) if f.name.endswith(("_start", "_end"))
)


@dataclass
class StageRecordBuilder:
    """
    부분적으로 채워진 행에서 완전한 StageRecord를 만드는 빌더.

    CSV 임포트처럼 컬럼이 일부만 매핑되는 경우에 사용합니다.
    설정되지 않은 필드는 build() 시점에 모두 빈 문자열로 채워지고,
    단계 라벨은 match_stage()로 고정 목록 값에 맞춰집니다.
    """

    project_name: Optional[str] = None
    stage: Optional[str] = None
    proposed_start: Optional[str] = None
    proposed_end: Optional[str] = None
    adjusted_forecast_start: Optional[str] = None
    adjusted_forecast_end: Optional[str] = None
    actual_start: Optional[str] = None
    actual_end: Optional[str] = None

    def set(self, name: str, value: Optional[str]) -> "StageRecordBuilder":
        if not hasattr(self, name):
            raise AttributeError(f"StageRecordBuilder has no field {name!r}")
        setattr(self, name, value)
        return self

    def build(self) -> StageRecord:
        dates = {name: (getattr(self, name) or "").strip() for name in _DATE_FIELDS}
        return StageRecord(
            project_name=(self.project_name or "").strip(),
            stage=match_stage(self.stage),
            id=new_record_id(),
            **dates,
        )
