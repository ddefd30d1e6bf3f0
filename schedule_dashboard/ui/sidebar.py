"""
사이드바: 단계 일정 입력 폼, CSV 임포트, 전체 삭제

모든 입력은 검증을 통과한 경우에만 저장소에 반영됩니다.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

import streamlit as st

from schedule_dashboard.common.performance import measure_time_context
from schedule_dashboard.data_sources.csv_import import decode_csv_bytes, parse_schedule_csv
from schedule_dashboard.data_sources.session import select_project
from schedule_dashboard.domain.models import PROJECT_STAGES, StageRecord
from schedule_dashboard.domain.repository import ScheduleRepository
from schedule_dashboard.domain.validation import validate_stage_record

from .adapters import handle_domain_errors

logger = logging.getLogger(__name__)

LAST_PROJECT_KEY = "_last_project_name"

CSV_HELP = (
    "헤더 예시: Project, Stage, P_Start, P_End, AF_Start, AF_End, A_Start, A_End\n"
    "컬럼명은 대소문자를 구분하지 않으며, 'scope'도 단계 컬럼으로 인식합니다."
)


def _iso(value: Optional[dt.date]) -> str:
    return value.isoformat() if value else ""


def _date_pair_inputs(label: str, key_prefix: str) -> tuple[str, str]:
    st.caption(label)
    col_start, col_end = st.columns(2)
    with col_start:
        start = st.date_input("시작", value=None, key=f"{key_prefix}_start")
    with col_end:
        end = st.date_input("종료", value=None, key=f"{key_prefix}_end")
    return _iso(start), _iso(end)


def render_entry_form(repository: ScheduleRepository) -> None:
    """
    단계 일정 입력 폼.

    같은 프로젝트/단계를 다시 입력하면 기존 레코드를 교체합니다.
    제출 후에는 날짜만 비우고 프로젝트명은 유지해 연속 입력을 돕습니다.
    """
    st.subheader("➕ 일정 입력")
    with st.form("stage_entry_form", clear_on_submit=True):
        project_name = st.text_input(
            "프로젝트명", value=st.session_state.get(LAST_PROJECT_KEY, "")
        )
        stage = st.selectbox("단계", PROJECT_STAGES)
        p_start, p_end = _date_pair_inputs("Proposed (기준 일정)", "form_p")
        af_start, af_end = _date_pair_inputs("AF (조정 예측)", "form_af")
        a_start, a_end = _date_pair_inputs("Actual (실적)", "form_a")
        submitted = st.form_submit_button("저장", use_container_width=True)

    if not submitted:
        return

    record = StageRecord(
        project_name=project_name.strip(),
        stage=stage,
        proposed_start=p_start,
        proposed_end=p_end,
        adjusted_forecast_start=af_start,
        adjusted_forecast_end=af_end,
        actual_start=a_start,
        actual_end=a_end,
    )
    st.session_state[LAST_PROJECT_KEY] = record.project_name

    with handle_domain_errors():
        validate_stage_record(record)
        stored = repository.upsert(record)
        select_project(stored.project_name)
        st.success(f"{stored.project_name} / {stored.stage} 저장 완료")


def render_csv_import(repository: ScheduleRepository) -> None:
    """CSV 파일을 읽어 레코드를 일괄 추가합니다 (병합하지 않음)."""
    st.subheader("📥 CSV 가져오기")
    file = st.file_uploader("CSV 업로드", type=["csv"], help=CSV_HELP, key="csv_upload")
    if file is None:
        return

    if not st.button("가져오기", key="csv_import_button", use_container_width=True):
        return

    with handle_domain_errors():
        with measure_time_context(f"csv import ({file.name})"):
            text = decode_csv_bytes(file.getvalue())
            records = parse_schedule_csv(text)

        if not records:
            st.warning("가져올 데이터 행이 없습니다.")
            return

        added = repository.bulk_insert(records)
        st.success(f"{added}건을 가져왔습니다.")


def render_clear_all(repository: ScheduleRepository) -> None:
    """전체 데이터 삭제 (확인 체크 후에만 실행)."""
    st.subheader("🗑️ 데이터 관리")
    st.caption(f"저장된 레코드: {len(repository)}건")
    confirmed = st.checkbox("모든 데이터를 삭제합니다", key="confirm_clear_all")
    if st.button(
        "전체 삭제",
        key="clear_all_button",
        disabled=not confirmed or len(repository) == 0,
        use_container_width=True,
    ):
        repository.clear()
        st.success("모든 데이터를 삭제했습니다.")


def render_sidebar(repository: ScheduleRepository) -> None:
    with st.sidebar:
        st.header("🏗️ Project Hub")
        st.caption("단계별 일정(Proposed / AF / Actual)을 관리합니다.")
        render_entry_form(repository)
        st.divider()
        render_csv_import(repository)
        st.divider()
        render_clear_all(repository)
