import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def pytest_configure(config):
    """pytest 초기화 시점에 실행되어 테스트 수집 전에 환경을 준비합니다.

    이 훅은 테스트 모듈이 import되기 전에 실행되므로,
    config.py가 로드될 때 저장 디렉터리가 이미 임시 경로로 설정되어 있습니다.
    (실제 사용자 데이터 디렉터리를 건드리지 않기 위함)
    """
    if not os.getenv("SCHEDULE_DASHBOARD_DATA_DIR"):
        os.environ["SCHEDULE_DASHBOARD_DATA_DIR"] = tempfile.mkdtemp(prefix="schedule-dashboard-")


@pytest.fixture
def tower_a_records():
    """Tower A 프로젝트 예시 레코드 (Concept: Proposed만, Schematic: 기간 0일 Actual)"""
    from schedule_dashboard.domain.models import StageRecord

    return [
        StageRecord(
            project_name="Tower A",
            stage="Concept stage",
            proposed_start="2024-01-01",
            proposed_end="2024-03-01",
        ),
        StageRecord(
            project_name="Tower A",
            stage="Schematic Design",
            actual_start="2024-02-15",
            actual_end="2024-02-15",
        ),
    ]
