"""
세션 상태 관리

이 모듈은 Streamlit 세션 상태에 저장소(Repository) 객체와
현재 선택된 프로젝트를 보관합니다. 저장소는 세션마다 한 번만
로컬 저장소에서 불러옵니다.
"""

from __future__ import annotations

import logging
from typing import Optional

import streamlit as st

from schedule_dashboard.domain.repository import ScheduleRepository, resolve_selected_project

from .storage import LocalRecordStore

logger = logging.getLogger(__name__)

REPOSITORY_KEY = "schedule_repository"
SELECTED_PROJECT_KEY = "selected_project"


def ensure_repository(store: Optional[LocalRecordStore] = None) -> ScheduleRepository:
    """
    세션에 보관된 저장소를 반환합니다. 없으면 로컬 저장소에서 불러옵니다.

    Session State Keys:
        - schedule_repository: ScheduleRepository 인스턴스
    """
    repository: Optional[ScheduleRepository] = st.session_state.get(REPOSITORY_KEY)
    if repository is None:
        store = store or LocalRecordStore.from_config()
        repository = ScheduleRepository.from_store(store)
        st.session_state[REPOSITORY_KEY] = repository
        logger.info(f"Repository initialised from {store.path}")
    return repository


def current_project(repository: ScheduleRepository) -> str:
    """
    선택된 프로젝트를 반환합니다.

    선택값이 비었거나 더 이상 존재하지 않으면 첫 번째 프로젝트로 맞춥니다.
    """
    selected = resolve_selected_project(
        repository.list_projects(), st.session_state.get(SELECTED_PROJECT_KEY)
    )
    st.session_state[SELECTED_PROJECT_KEY] = selected
    return selected


def select_project(project_name: str) -> None:
    st.session_state[SELECTED_PROJECT_KEY] = project_name
