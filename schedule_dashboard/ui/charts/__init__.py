"""차트 렌더링 모듈."""

from .colors import DEFAULT_COLOR, SCHEDULE_COLORS, schedule_color
from .gantt import bar_hover_text, build_gantt_figure, render_gantt_chart

__all__ = [
    "SCHEDULE_COLORS",
    "DEFAULT_COLOR",
    "schedule_color",
    "bar_hover_text",
    "build_gantt_figure",
    "render_gantt_chart",
]
