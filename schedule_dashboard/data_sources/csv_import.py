"""
CSV 일정 임포트

헤더 한 줄과 단계별 데이터 행으로 이루어진 CSV 텍스트를 StageRecord 목록으로
변환합니다. 컬럼명은 정확히 일치하지 않아도 되며, 소문자로 바꾼 헤더에
특정 문자열이 포함되어 있는지로 필드를 찾습니다.

매핑되지 않은 필드는 빈 값으로 두고, 알 수 없는 단계명은 첫 번째 단계로
대체합니다. 어떤 행도 통째로 버리지 않습니다.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Callable, Dict, List, Sequence, Tuple

import pandas as pd

from ..domain.exceptions import DataLoadError
from ..domain.models import StageRecord, StageRecordBuilder

logger = logging.getLogger(__name__)

HeaderRule = Tuple[str, Callable[[str], bool]]

# (빌더 필드, 헤더 판별 함수). 하나의 헤더가 여러 규칙에 걸리면 모두 적용한다.
HEADER_RULES: Sequence[HeaderRule] = (
    ("project_name", lambda h: "project" in h),
    ("stage", lambda h: "stage" in h or "scope" in h),
    ("proposed_start", lambda h: "p_start" in h or ("proposed" in h and "start" in h)),
    ("proposed_end", lambda h: "p_end" in h or ("proposed" in h and "end" in h)),
    ("adjusted_forecast_start", lambda h: "af_start" in h or ("af" in h and "start" in h)),
    ("adjusted_forecast_end", lambda h: "af_end" in h or ("af" in h and "end" in h)),
    ("actual_start", lambda h: "a_start" in h or ("actual" in h and "start" in h)),
    ("actual_end", lambda h: "a_end" in h or ("actual" in h and "end" in h)),
)


def normalize_header(header: object) -> str:
    return str(header).strip().lower()


def map_csv_headers(headers: Sequence[object]) -> Dict[int, List[str]]:
    """
    헤더 위치별로 채울 빌더 필드 목록을 반환합니다.

    Examples:
        >>> map_csv_headers(["Project", "Scope", "AF_Start", "AF_End"])
        {0: ['project_name'], 1: ['stage'], 2: ['adjusted_forecast_start'], 3: ['adjusted_forecast_end']}
    """
    mapping: Dict[int, List[str]] = {}
    for position, header in enumerate(headers):
        name = normalize_header(header)
        targets = [field_name for field_name, rule in HEADER_RULES if rule(name)]
        if targets:
            mapping[position] = targets
        else:
            logger.debug(f"Unmapped CSV header: {header!r}")
    return mapping


def _read_frame(text: str) -> pd.DataFrame:
    header_line = next((line for line in text.splitlines() if line.strip()), "")
    # 따옴표 안의 쉼표는 구분자가 아니다
    n_columns = len(next(csv.reader([header_line]), []))
    return pd.read_csv(
        io.StringIO(text),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        index_col=False,
        engine="python",
        # 컬럼 수가 헤더보다 많은 행은 잘라서 사용한다
        on_bad_lines=lambda bad_line: bad_line[:n_columns],
    )


def parse_schedule_csv(text: str) -> List[StageRecord]:
    """
    CSV 텍스트를 StageRecord 목록으로 변환합니다.

    Args:
        text: 헤더 행을 포함한 CSV 원문

    Returns:
        데이터 행마다 하나씩 만든 StageRecord 목록.
        데이터 행이 없으면 빈 리스트.

    Raises:
        DataLoadError: 따옴표가 닫히지 않는 등 CSV 구조 자체가 깨진 경우

    Examples:
        >>> records = parse_schedule_csv(
        ...     "Project,Scope,AF_Start,AF_End\\nTower A,Concept stage,2024-01-01,2024-01-10"
        ... )
        >>> records[0].adjusted_forecast_end
        '2024-01-10'
    """
    if not text or not text.strip():
        return []

    try:
        frame = _read_frame(text)
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as exc:
        logger.error(f"CSV parse failed: {exc}")
        raise DataLoadError(f"CSV 형식을 해석할 수 없습니다: {exc}") from exc

    if frame.empty:
        return []

    mapping = map_csv_headers(list(frame.columns))
    frame = frame.fillna("")

    records: List[StageRecord] = []
    for row in frame.itertuples(index=False, name=None):
        builder = StageRecordBuilder()
        for position, targets in mapping.items():
            value = str(row[position]).strip() if position < len(row) else ""
            for target in targets:
                builder.set(target, value)
        records.append(builder.build())

    logger.info(f"Parsed {len(records)} rows from CSV ({len(mapping)} mapped columns)")
    return records


def decode_csv_bytes(payload: bytes) -> str:
    """
    업로드된 파일 내용을 텍스트로 디코딩합니다.

    Raises:
        DataLoadError: UTF-8 / CP949 어느 쪽으로도 읽을 수 없는 경우
    """
    for encoding in ("utf-8-sig", "cp949"):
        try:
            return payload.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise DataLoadError("CSV 파일을 텍스트로 읽을 수 없습니다. UTF-8 형식으로 저장해 주세요.")
