"""
레코드 테이블 렌더링

선택된 프로젝트의 단계 레코드를 단계 순서대로 표로 보여줍니다.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from schedule_dashboard.core.config import CONFIG
from schedule_dashboard.domain.models import PROJECT_STAGES
from schedule_dashboard.domain.repository import ScheduleRepository


def build_records_table(repository: ScheduleRepository, project_name: str) -> pd.DataFrame:
    """
    프로젝트 레코드를 단계 순서로 정렬한 데이터프레임을 반환합니다.

    같은 단계에 레코드가 여러 개면 입력 순서를 유지합니다.
    """
    frame = repository.to_frame(project_name)
    if frame.empty:
        return frame

    frame["Stage"] = pd.Categorical(frame["Stage"], categories=list(PROJECT_STAGES), ordered=True)
    frame = frame.sort_values("Stage", kind="stable").reset_index(drop=True)
    frame["Stage"] = frame["Stage"].astype(str)
    return frame


def render_records_table(repository: ScheduleRepository, project_name: str) -> None:
    table = build_records_table(repository, project_name)
    if table.empty:
        return

    with st.expander(f"📋 {project_name} 단계별 일정 ({len(table)}건)", expanded=False):
        st.dataframe(
            table.drop(columns=["Project"]),
            use_container_width=True,
            hide_index=True,
            height=CONFIG.ui.table_height,
        )
