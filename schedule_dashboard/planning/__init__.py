"""Timeline layout helpers for the schedule dashboard."""

from .layout import (
    AxisTick,
    BandScale,
    ScheduleBar,
    StageBand,
    TimelineLayout,
    TimeScale,
    chart_height,
    compute_domain,
    compute_timeline_layout,
)

__all__ = [
    "AxisTick",
    "BandScale",
    "ScheduleBar",
    "StageBand",
    "TimelineLayout",
    "TimeScale",
    "chart_height",
    "compute_domain",
    "compute_timeline_layout",
]
