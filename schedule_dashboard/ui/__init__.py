"""
UI 계층 (Streamlit / Plotly)

도메인/플래닝 계층의 결과를 화면에 렌더링합니다.
"""

from .adapters import handle_domain_errors
from .charts import build_gantt_figure, render_gantt_chart
from .export import export_filename, figure_to_png, render_export_button
from .sidebar import render_sidebar
from .tables import build_records_table, render_records_table

__all__ = [
    "handle_domain_errors",
    "build_gantt_figure",
    "render_gantt_chart",
    "export_filename",
    "figure_to_png",
    "render_export_button",
    "render_sidebar",
    "build_records_table",
    "render_records_table",
]
