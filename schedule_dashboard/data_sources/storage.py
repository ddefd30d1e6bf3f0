"""
로컬 키-값 저장소

레코드 컬렉션 전체를 JSON 배열 하나로 직렬화해 고정 키 아래에 저장합니다.
키 하나가 디렉터리 안의 파일 하나(`<key>.json`)에 대응합니다.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.config import CONFIG, STORAGE_KEY
from ..domain.exceptions import StorageError
from ..domain.models import StageRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalRecordStore:
    """
    디렉터리 기반 키-값 저장소에 레코드 컬렉션을 보관합니다.

    Attributes:
        data_dir: 저장 파일이 위치할 디렉터리
        key: 컬렉션을 저장하는 키 (파일명)

    Examples:
        >>> store = LocalRecordStore(Path("/tmp/schedule"))
        >>> store.save([])
        >>> store.load()
        []
    """

    data_dir: Path
    key: str = STORAGE_KEY

    @classmethod
    def from_config(cls) -> "LocalRecordStore":
        return cls(CONFIG.storage.data_dir, CONFIG.storage.key)

    @property
    def path(self) -> Path:
        return Path(self.data_dir) / f"{self.key}.json"

    # ========================================
    # 원시 키-값 접근
    # ========================================

    def get_item(self) -> Optional[str]:
        """저장된 원문을 반환합니다. 저장된 값이 없으면 None."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, value: str) -> None:
        """
        원문을 저장합니다.

        Raises:
            StorageError: 디렉터리 생성 또는 파일 쓰기에 실패한 경우
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(".json.tmp")
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as exc:
            raise StorageError(f"cannot write {self.path}: {exc}") from exc

    # ========================================
    # 레코드 컬렉션
    # ========================================

    def load(self) -> List[StageRecord]:
        """
        저장된 컬렉션을 읽습니다.

        저장된 값이 없거나 해석할 수 없으면 빈 컬렉션을 반환합니다.
        일부 항목만 살리는 부분 복구는 하지 않습니다.
        """
        try:
            raw = self.get_item()
        except OSError as exc:
            logger.error(f"Failed to read {self.path}: {exc}")
            return []

        if raw is None:
            return []

        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise TypeError(f"expected a JSON array, got {type(payload).__name__}")
            return [StageRecord.from_dict(entry) for entry in payload]
        except (ValueError, TypeError, KeyError) as exc:
            logger.error(f"Stored schedule data under {self.key!r} is corrupt; starting empty: {exc}")
            return []

    def save(self, records: Sequence[StageRecord]) -> None:
        """컬렉션 전체를 JSON으로 저장합니다."""
        blob = json.dumps([record.to_dict() for record in records], ensure_ascii=False)
        self.set_item(blob)
        logger.debug(f"Saved {len(records)} stage records to {self.path}")
