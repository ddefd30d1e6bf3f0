"""단계별 일정(Gantt) 차트 렌더러.

planning.layout에서 계산한 픽셀 좌표를 그대로 Plotly 좌표계로 사용합니다.
x축은 [0, width], y축은 [height, 0] (위에서 아래로)으로 고정하고,
막대는 가로 막대(base=x, 길이=width)로 그립니다.
"""

from __future__ import annotations

from typing import List, Optional

import plotly.graph_objects as go
import streamlit as st

from schedule_dashboard.domain.models import SCHEDULE_TYPES
from schedule_dashboard.planning.layout import ScheduleBar, TimelineLayout

from .colors import (
    AXIS_LINE_COLOR,
    GRID_COLOR,
    STAGE_LABEL_COLOR,
    TICK_LABEL_COLOR,
    schedule_color,
)


def bar_hover_text(bar: ScheduleBar) -> str:
    """막대 툴팁 문구 (일정 유형, 단계, 기간)"""
    return f"<b>{bar.schedule_type} Schedule</b><br>{bar.stage}<br>{bar.start} to {bar.end}"


def _bar_trace(schedule_type: str, bars: List[ScheduleBar]) -> go.Bar:
    return go.Bar(
        name=schedule_type,
        orientation="h",
        base=[bar.x for bar in bars],
        x=[bar.width for bar in bars],
        y=[bar.y + bar.height / 2 for bar in bars],
        width=[bar.height for bar in bars],
        marker_color=schedule_color(schedule_type),
        hovertext=[bar_hover_text(bar) for bar in bars],
        hoverinfo="text",
    )


def build_gantt_figure(layout: TimelineLayout, *, title: Optional[str] = None) -> go.Figure:
    """
    레이아웃을 Plotly Figure로 변환합니다.

    Args:
        layout: compute_timeline_layout() 결과
        title: 차트 제목 (선택)

    Returns:
        일정 유형별 막대 trace 3개와 월 단위 그리드를 포함한 Figure
    """
    cfg = layout.config
    plot_top = float(cfg.margin_top)
    plot_bottom = layout.height - cfg.margin_bottom

    fig = go.Figure()
    for schedule_type in SCHEDULE_TYPES:
        bars = [bar for bar in layout.bars if bar.schedule_type == schedule_type]
        fig.add_trace(_bar_trace(schedule_type, bars))

    # 월 단위 점선 그리드
    for tick in layout.ticks:
        fig.add_shape(
            type="line",
            x0=tick.x,
            x1=tick.x,
            y0=plot_top,
            y1=plot_bottom,
            line=dict(color=GRID_COLOR, width=1, dash="dot"),
            layer="below",
        )

    fig.update_layout(
        title=title,
        width=int(layout.width),
        height=int(layout.height),
        autosize=False,
        margin=dict(l=0, r=0, t=0, b=0),
        barmode="overlay",
        plot_bgcolor="#FFFFFF",
        paper_bgcolor="#FFFFFF",
        hovermode="closest",
        legend=dict(
            orientation="h",
            x=cfg.margin_left / layout.width if layout.width else 0,
            xanchor="left",
            y=1 - 20 / layout.height,
            yanchor="middle",
            font=dict(size=12, color=TICK_LABEL_COLOR),
        ),
    )
    fig.update_xaxes(
        range=[0, layout.width],
        tickmode="array",
        tickvals=[tick.x for tick in layout.ticks],
        ticktext=[tick.label for tick in layout.ticks],
        tickfont=dict(size=11, color=TICK_LABEL_COLOR),
        showgrid=False,
        zeroline=False,
        showline=True,
        linecolor=AXIS_LINE_COLOR,
        anchor="free",
        position=cfg.margin_bottom / layout.height,
        fixedrange=True,
    )
    fig.update_yaxes(
        range=[layout.height, 0],
        tickmode="array",
        tickvals=[band.center for band in layout.bands],
        ticktext=[band.stage for band in layout.bands],
        tickfont=dict(size=12, color=STAGE_LABEL_COLOR),
        showgrid=False,
        zeroline=False,
        showline=True,
        linecolor=AXIS_LINE_COLOR,
        anchor="free",
        position=cfg.margin_left / layout.width if layout.width else 0,
        fixedrange=True,
    )
    return fig


def render_gantt_chart(layout: TimelineLayout, *, project_name: str) -> Optional[go.Figure]:
    """
    선택된 프로젝트의 일정 차트를 렌더링합니다.

    날짜가 하나도 없으면 차트 대신 안내 문구를 표시하고 None을 반환합니다.
    """
    if layout.is_empty:
        st.info(f'"{project_name}" 프로젝트의 일정 데이터가 없습니다.')
        st.caption("사이드바에서 단계별 날짜를 입력해 주세요.")
        return None

    fig = build_gantt_figure(layout)
    st.plotly_chart(
        fig,
        use_container_width=False,
        config={"displaylogo": False, "displayModeBar": False},
    )
    return fig
