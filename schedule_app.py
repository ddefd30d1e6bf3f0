"""
공정 일정 대시보드 메인 엔트리 포인트

실행: streamlit run schedule_app.py

화면 구성:
- 사이드바: 단계 일정 입력, CSV 가져오기, 전체 삭제
- 본문: 프로젝트 선택, 단계별 일정 차트, 이미지 내보내기, 레코드 표, 범례
"""

from __future__ import annotations

import logging

import streamlit as st

# 로깅 설정
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from schedule_dashboard.core.config import CONFIG
from schedule_dashboard.data_sources.session import (
    SELECTED_PROJECT_KEY,
    current_project,
    ensure_repository,
)
from schedule_dashboard.domain.models import SCHEDULE_DESCRIPTIONS, SCHEDULE_TYPES
from schedule_dashboard.planning.layout import compute_timeline_layout
from schedule_dashboard.ui import (
    handle_domain_errors,
    render_export_button,
    render_gantt_chart,
    render_records_table,
    render_sidebar,
)
from schedule_dashboard.ui.charts import schedule_color

LEGEND_TITLES = {
    "Proposed": "Proposed",
    "AF": "AF (Adjusted Forecast)",
    "Actual": "Actual",
}


def _render_legend() -> None:
    """일정 유형별 색상/설명 카드"""
    columns = st.columns(len(SCHEDULE_TYPES))
    for column, schedule_type in zip(columns, SCHEDULE_TYPES):
        with column:
            st.markdown(
                f"<span style='color:{schedule_color(schedule_type)};font-size:1.2em'>●</span> "
                f"**{LEGEND_TITLES[schedule_type]}**",
                unsafe_allow_html=True,
            )
            st.caption(SCHEDULE_DESCRIPTIONS[schedule_type])


def main() -> None:
    st.set_page_config(page_title="Project Dashboard", page_icon="🏗️", layout="wide")

    # ========================================
    # 1단계: 저장소 준비 (세션당 1회 로드)
    # ========================================
    repository = ensure_repository()

    # ========================================
    # 2단계: 사이드바 (입력/가져오기/삭제)
    # ========================================
    render_sidebar(repository)

    # ========================================
    # 3단계: 프로젝트 선택
    # ========================================
    st.title("Project Dashboard")
    st.caption("Live Schedule Analysis")

    projects = repository.list_projects()
    current_project(repository)

    col_project, col_width = st.columns([2, 1])
    with col_project:
        if projects:
            selected = st.selectbox("프로젝트", projects, key=SELECTED_PROJECT_KEY)
        else:
            st.selectbox("프로젝트", ["No Projects Found"], disabled=True)
            selected = ""
    with col_width:
        chart_width = st.slider(
            "차트 너비(px)",
            min_value=CONFIG.chart.min_width,
            max_value=CONFIG.ui.max_chart_width,
            value=CONFIG.ui.default_chart_width,
            step=50,
        )

    if not selected:
        st.info("등록된 프로젝트가 없습니다. 사이드바에서 일정을 입력하거나 CSV를 가져오세요.")
        _render_legend()
        return

    # ========================================
    # 4단계: 레이아웃 계산 및 차트 렌더링
    # ========================================
    layout = compute_timeline_layout(
        repository.records_for(selected),
        viewport_width=chart_width,
    )
    logger.debug(f"Layout for {selected}: {len(layout.bars)} bars")

    fig = render_gantt_chart(layout, project_name=selected)

    # ========================================
    # 5단계: 이미지 내보내기
    # ========================================
    if fig is not None:
        with handle_domain_errors():
            render_export_button(fig, project_name=selected)

    # ========================================
    # 6단계: 레코드 표 및 범례
    # ========================================
    render_records_table(repository, selected)
    st.divider()
    _render_legend()


if __name__ == "__main__":
    main()
