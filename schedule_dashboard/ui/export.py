"""
차트 이미지 내보내기

렌더링된 Plotly 차트를 PNG로 변환해 다운로드 버튼으로 제공합니다.
이미지 변환은 kaleido 엔진을 사용합니다.
"""

from __future__ import annotations

import hashlib
import logging
import re

import plotly.graph_objects as go
import streamlit as st

from schedule_dashboard.core.config import CONFIG
from schedule_dashboard.domain.exceptions import ExportError

logger = logging.getLogger(__name__)

# 파일명에 쓸 수 없는 문자
_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]+')


def export_filename(project_name: str) -> str:
    """
    내보낼 이미지 파일명을 만듭니다.

    Examples:
        >>> export_filename("Tower A")
        'Project-Dashboard-Tower A.png'
    """
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", project_name).strip()
    return f"Project-Dashboard-{safe_name}.png"


def figure_to_png(fig: go.Figure, *, scale: int = CONFIG.ui.export_scale) -> bytes:
    """
    Figure를 흰 배경의 PNG 바이트로 변환합니다.

    Raises:
        ExportError: 이미지 엔진(kaleido)을 사용할 수 없거나 변환에 실패한 경우
    """
    try:
        return fig.to_image(format="png", scale=scale)
    except (ValueError, RuntimeError) as exc:
        logger.error(f"PNG export failed: {exc}")
        raise ExportError(f"차트를 이미지로 변환하지 못했습니다: {exc}") from exc


def render_export_button(fig: go.Figure, *, project_name: str) -> None:
    """
    현재 차트를 PNG로 내려받는 버튼을 렌더링합니다.

    이미지 변환은 시간이 걸리므로 "이미지 준비" 버튼을 누른 경우에만 수행하고,
    결과는 차트 내용별로 세션에 보관합니다 (데이터가 바뀌면 다시 준비).
    """
    fingerprint = hashlib.sha1(fig.to_json().encode("utf-8")).hexdigest()[:12]
    cache_key = f"_export_png::{fingerprint}"
    if st.button("🖼️ 이미지 준비", key="prepare_chart_png", disabled=not project_name):
        st.session_state[cache_key] = figure_to_png(fig)
        logger.info(f"Prepared PNG export for {project_name}")

    png_bytes = st.session_state.get(cache_key)
    if png_bytes:
        st.download_button(
            "⬇️ 차트 이미지 내보내기",
            data=png_bytes,
            file_name=export_filename(project_name),
            mime="image/png",
            key="export_chart_png",
        )
