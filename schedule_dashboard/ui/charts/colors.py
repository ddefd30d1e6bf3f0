"""일정 유형별 색상 정의."""

from __future__ import annotations

from typing import Dict

SCHEDULE_COLORS: Dict[str, str] = {
    "Proposed": "#3B82F6",  # 파랑
    "AF": "#F59E0B",  # 주황
    "Actual": "#10B981",  # 초록
}
DEFAULT_COLOR = "#CBD5E1"

# 축/그리드 색상
GRID_COLOR = "#E2E8F0"
AXIS_LINE_COLOR = "#CBD5E1"
TICK_LABEL_COLOR = "#64748B"
STAGE_LABEL_COLOR = "#334155"


def schedule_color(schedule_type: str) -> str:
    """일정 유형의 막대 색상을 반환합니다. 알 수 없는 유형은 회색."""
    return SCHEDULE_COLORS.get(schedule_type, DEFAULT_COLOR)
