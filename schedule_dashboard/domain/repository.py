"""
일정 레코드 저장소 (Schedule Repository)

메모리 상의 레코드 컬렉션을 보관하고, (프로젝트명, 단계)당 하나의 레코드만
존재하도록 upsert 규칙을 적용합니다. 모든 변경 작업 직후에는 연결된 저장소에
전체 컬렉션을 명시적으로 저장합니다.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

import pandas as pd

from .exceptions import StorageError
from .models import StageRecord, new_record_id

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """레코드 컬렉션 전체를 읽고 쓰는 영속화 계층 프로토콜."""

    def load(self) -> List[StageRecord]:  # pragma: no cover - interface definition
        ...

    def save(self, records: Sequence[StageRecord]) -> None:  # pragma: no cover - interface definition
        ...


# 테이블 표시용 컬럼 (필드명 → 화면 라벨)
RECORD_COLUMNS = {
    "project_name": "Project",
    "stage": "Stage",
    "proposed_start": "Proposed Start",
    "proposed_end": "Proposed End",
    "adjusted_forecast_start": "AF Start",
    "adjusted_forecast_end": "AF End",
    "actual_start": "Actual Start",
    "actual_end": "Actual End",
}


class ScheduleRepository:
    """
    단계 레코드 컬렉션의 단일 소유자.

    Examples:
        >>> repo = ScheduleRepository()
        >>> _ = repo.upsert(StageRecord(project_name="Tower A", stage="Concept stage"))
        >>> repo.list_projects()
        ['Tower A']
    """

    def __init__(
        self,
        records: Iterable[StageRecord] = (),
        *,
        store: Optional[RecordStore] = None,
    ) -> None:
        self._records: List[StageRecord] = list(records)
        self._store = store

    @classmethod
    def from_store(cls, store: RecordStore) -> "ScheduleRepository":
        """저장소에 보관된 레코드로 초기화합니다."""
        records = store.load()
        logger.info(f"Loaded {len(records)} stage records from store")
        return cls(records, store=store)

    # ========================================
    # 조회
    # ========================================

    @property
    def records(self) -> Tuple[StageRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def list_projects(self) -> List[str]:
        """중복 없는 프로젝트명을 오름차순으로 반환합니다."""
        return sorted({record.project_name for record in self._records})

    def records_for(self, project_name: str) -> List[StageRecord]:
        """프로젝트에 속한 레코드를 반환합니다 (순서 보장 없음)."""
        return [r for r in self._records if r.project_name == project_name]

    def to_frame(self, project_name: Optional[str] = None) -> pd.DataFrame:
        """레코드를 테이블 표시용 데이터프레임으로 변환합니다."""
        records = self._records if project_name is None else self.records_for(project_name)
        frame = pd.DataFrame(
            [{col: getattr(r, col) for col in RECORD_COLUMNS} for r in records],
            columns=list(RECORD_COLUMNS),
        )
        return frame.rename(columns=RECORD_COLUMNS)

    # ========================================
    # 변경
    # ========================================

    def upsert(self, record: StageRecord) -> StageRecord:
        """
        레코드를 추가하거나, 같은 (프로젝트명, 단계)가 있으면 교체합니다.

        교체 시에는 기존 레코드의 id를 유지하고 나머지 필드만 바꿉니다.
        새로 추가할 때는 새 id를 부여합니다.

        Returns:
            저장소에 실제로 보관된 레코드
        """
        for idx, existing in enumerate(self._records):
            if existing.key == record.key:
                stored = replace(record, id=existing.id)
                self._records[idx] = stored
                logger.debug(f"Replaced stage record {stored.key}")
                break
        else:
            stored = replace(record, id=new_record_id())
            self._records.append(stored)
            logger.debug(f"Added stage record {stored.key}")

        self._persist()
        return stored

    def bulk_insert(self, records: Iterable[StageRecord]) -> int:
        """
        레코드를 중복 검사 없이 모두 추가합니다.

        임포트는 누적을 우선하므로 같은 (프로젝트명, 단계)라도 병합하지 않습니다.

        Returns:
            추가된 레코드 수
        """
        batch = list(records)
        self._records.extend(batch)
        logger.info(f"Imported {len(batch)} stage records")
        self._persist()
        return len(batch)

    def clear(self) -> None:
        """모든 레코드를 삭제합니다."""
        removed = len(self._records)
        self._records = []
        logger.info(f"Cleared {removed} stage records")
        self._persist()

    def _persist(self) -> None:
        # 저장 실패는 변경 작업의 성공 여부와 무관하다.
        if self._store is None:
            return
        try:
            self._store.save(self._records)
        except (StorageError, TypeError, ValueError) as exc:
            logger.error(f"Failed to persist stage records: {exc}")


def resolve_selected_project(projects: Sequence[str], current: Optional[str]) -> str:
    """
    현재 선택된 프로젝트가 유효한지 확인하고, 아니면 첫 번째 프로젝트를 선택합니다.

    Args:
        projects: 정렬된 프로젝트명 목록
        current: 현재 선택값 (없을 수 있음)

    Returns:
        선택할 프로젝트명. 프로젝트가 하나도 없으면 빈 문자열.
    """
    if current and current in projects:
        return current
    return projects[0] if projects else ""
