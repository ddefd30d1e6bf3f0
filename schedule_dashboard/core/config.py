"""Configuration and constants for the schedule dashboard.

로컬 저장소 키, 차트 여백/밴드 크기 등 전역 설정을 제공합니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# ============================================================
# 로컬 저장소 설정
# ============================================================

# 전체 레코드를 JSON 한 덩어리로 저장하는 고정 키
STORAGE_KEY = "v_gantt_dashboard_data"

# 저장 디렉터리를 바꿀 때 사용하는 환경변수
DATA_DIR_ENV = "SCHEDULE_DASHBOARD_DATA_DIR"


def _default_data_dir() -> Path:
    return Path(os.getenv(DATA_DIR_ENV, "~/.schedule_dashboard")).expanduser()


@dataclass(frozen=True)
class StorageConfig:
    """로컬 키-값 저장소 설정"""

    # 저장 파일이 위치할 디렉터리
    data_dir: Path = field(default_factory=_default_data_dir)

    # 레코드 컬렉션을 저장하는 키
    key: str = STORAGE_KEY


# ============================================================
# 타임라인 차트 설정
# ============================================================

@dataclass(frozen=True)
class ChartConfig:
    """타임라인 차트 레이아웃 관련 설정 (단위: 픽셀)"""

    margin_top: int = 60
    margin_right: int = 60
    margin_bottom: int = 60
    margin_left: int = 200

    # 단계(밴드) 하나에 할당하는 높이
    # (Proposed / AF / Actual 세 막대가 들어가도록 넉넉하게 잡음)
    stage_height: int = 100

    # 밴드 사이 패딩 비율 (안쪽/바깥쪽 공통)
    band_padding: float = 0.2

    # 같은 밴드 안의 막대 사이 간격
    bar_gap: float = 4.0

    # 막대 높이 = 밴드 높이 / 3.5 (밴드 아래쪽에 여백을 남김)
    bar_height_divisor: float = 3.5

    # 기간이 0일인 막대도 보이도록 하는 최소 폭
    min_bar_width: float = 2.0

    # 차트 최소 폭
    min_width: int = 800

    # 축 눈금 라벨 형식 (예: "Jan 2024")
    tick_format: str = "%b %Y"


@dataclass(frozen=True)
class UIConfig:
    """UI 표시 관련 설정"""

    # 차트 기본 폭 (픽셀)
    default_chart_width: int = 1200

    # 차트 폭 슬라이더 최대값
    max_chart_width: int = 2400

    # PNG 내보내기 배율
    export_scale: int = 2

    # 레코드 테이블 높이
    table_height: int = 320


@dataclass(frozen=True)
class DashboardConfig:
    """대시보드 전역 설정"""

    storage: StorageConfig = field(default_factory=StorageConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)
    ui: UIConfig = field(default_factory=UIConfig)


# ============================================================
# 전역 설정 인스턴스
# ============================================================

# 전역 설정 객체 (불변)
CONFIG = DashboardConfig()
