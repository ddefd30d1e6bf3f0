"""Timeline chart layout for a single project's stage records.

Turns the stage records of one project into pixel geometry: a time scale for
the horizontal axis, one band per stage for the vertical axis, and up to three
stacked schedule bars (Proposed / AF / Actual) inside each band.

The engine keeps no state between calls; the host recomputes the layout
whenever the selection or the records change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from ..common.performance import measure_time
from ..core.config import CONFIG, ChartConfig
from ..domain.models import PROJECT_STAGES, SCHEDULE_TYPES, StageRecord
from ..domain.validation import parse_calendar_date

logger = logging.getLogger(__name__)

# 도메인 양 끝에 붙이는 여백 (막대가 차트 가장자리에서 잘리지 않도록)
DOMAIN_PAD = pd.DateOffset(months=1)


# ============================================================
# 스케일
# ============================================================

@dataclass(frozen=True)
class TimeScale:
    """Linear mapping from calendar dates to horizontal pixel positions."""

    domain_start: pd.Timestamp
    domain_end: pd.Timestamp
    range_start: float
    range_end: float

    def __call__(self, value: pd.Timestamp) -> float:
        span = self.domain_end.value - self.domain_start.value
        if span == 0:
            return float(self.range_start)
        ratio = (pd.Timestamp(value).value - self.domain_start.value) / span
        return float(self.range_start + ratio * (self.range_end - self.range_start))


@dataclass(frozen=True)
class BandScale:
    """
    Ordinal band scale: splits a pixel range into equal bands, one per stage.

    Inner and outer padding are both ``padding`` (as a fraction of the step)
    and the bands are centred inside the range.
    """

    domain: Tuple[str, ...]
    range_start: float
    range_end: float
    padding: float = 0.2

    @property
    def step(self) -> float:
        n = len(self.domain)
        extent = self.range_end - self.range_start
        return extent / max(1.0, n - self.padding + self.padding * 2)

    @property
    def bandwidth(self) -> float:
        return self.step * (1 - self.padding)

    @property
    def offset(self) -> float:
        n = len(self.domain)
        extent = self.range_end - self.range_start
        return self.range_start + (extent - self.step * (n - self.padding)) * 0.5

    def __call__(self, value: str) -> Optional[float]:
        try:
            index = self.domain.index(value)
        except ValueError:
            return None
        return self.offset + self.step * index


# ============================================================
# 레이아웃 결과 모델
# ============================================================

@dataclass(frozen=True)
class StageBand:
    stage: str
    y: float
    height: float

    @property
    def center(self) -> float:
        return self.y + self.height / 2


@dataclass(frozen=True)
class ScheduleBar:
    """One drawable schedule rectangle inside a stage band."""

    stage: str
    schedule_type: str
    start: str
    end: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class AxisTick:
    date: pd.Timestamp
    x: float
    label: str


@dataclass(frozen=True)
class TimelineLayout:
    """
    Renderable geometry for one project.

    ``domain_start``/``domain_end`` are None when the records carry no usable
    date; in that case ``bars`` and ``ticks`` are empty and the host shows an
    empty state instead of a chart.
    """

    width: float
    height: float
    plot_left: float
    plot_right: float
    bands: Tuple[StageBand, ...]
    bars: Tuple[ScheduleBar, ...] = ()
    ticks: Tuple[AxisTick, ...] = ()
    domain_start: Optional[pd.Timestamp] = None
    domain_end: Optional[pd.Timestamp] = None
    config: ChartConfig = field(default=CONFIG.chart, repr=False, compare=False)

    @property
    def is_empty(self) -> bool:
        return self.domain_start is None

    def bars_for(self, stage: str) -> List[ScheduleBar]:
        return [bar for bar in self.bars if bar.stage == stage]


# ============================================================
# 레이아웃 계산
# ============================================================

def collect_dates(records: Iterable[StageRecord]) -> List[pd.Timestamp]:
    """Every parseable, non-empty date across the six date fields."""
    dates: List[pd.Timestamp] = []
    for record in records:
        for value in record.date_values():
            parsed = parse_calendar_date(value)
            if parsed is not None:
                dates.append(parsed)
    return dates


def compute_domain(
    records: Iterable[StageRecord],
) -> Optional[Tuple[pd.Timestamp, pd.Timestamp]]:
    """Date axis bounds: data min/max padded by one calendar month each side."""
    dates = collect_dates(records)
    if not dates:
        return None
    return (min(dates) - DOMAIN_PAD, max(dates) + DOMAIN_PAD)


def chart_height(stages: Sequence[str], config: ChartConfig = CONFIG.chart) -> float:
    return len(stages) * config.stage_height + config.margin_top + config.margin_bottom


def month_ticks(scale: TimeScale, tick_format: str) -> Tuple[AxisTick, ...]:
    """One tick per calendar month start inside the scale's domain."""
    months = pd.date_range(start=scale.domain_start, end=scale.domain_end, freq="MS")
    return tuple(
        AxisTick(date=month, x=scale(month), label=month.strftime(tick_format))
        for month in months
    )


def _first_record_per_stage(
    records: Iterable[StageRecord], stages: Sequence[str]
) -> Dict[str, StageRecord]:
    # 같은 단계에 레코드가 여러 개면 첫 번째 레코드만 그린다
    first: Dict[str, StageRecord] = {}
    for record in records:
        if record.stage in stages and record.stage not in first:
            first[record.stage] = record
    return first


@measure_time
def compute_timeline_layout(
    records: Iterable[StageRecord],
    *,
    viewport_width: float,
    stages: Sequence[str] = PROJECT_STAGES,
    config: ChartConfig = CONFIG.chart,
) -> TimelineLayout:
    """
    Compute the chart geometry for one project's records.

    Args:
        records: stage records of the selected project
        viewport_width: chart width in pixels; widths below
            ``config.min_width`` are raised to it
        stages: ordered stage taxonomy; one band per entry
        config: margins, band padding and bar sizing

    Returns:
        TimelineLayout. Never raises for missing or malformed dates; those
        elements are simply left out.
    """
    records = list(records)
    stages = tuple(stages)
    width = max(float(config.min_width), float(viewport_width))
    height = float(chart_height(stages, config))
    plot_left = float(config.margin_left)
    plot_right = width - config.margin_right

    band_scale = BandScale(
        domain=stages,
        range_start=float(config.margin_top),
        range_end=height - config.margin_bottom,
        padding=config.band_padding,
    )
    bands = tuple(
        StageBand(stage=stage, y=band_scale(stage), height=band_scale.bandwidth)
        for stage in stages
    )

    domain = compute_domain(records)
    if domain is None:
        logger.debug(f"No dates in {len(records)} records; empty layout")
        return TimelineLayout(
            width=width,
            height=height,
            plot_left=plot_left,
            plot_right=plot_right,
            bands=bands,
            config=config,
        )

    scale = TimeScale(
        domain_start=domain[0],
        domain_end=domain[1],
        range_start=plot_left,
        range_end=plot_right,
    )

    bar_height = band_scale.bandwidth / config.bar_height_divisor
    offsets = {
        schedule_type: index * (bar_height + config.bar_gap)
        for index, schedule_type in enumerate(SCHEDULE_TYPES)
    }

    bars: List[ScheduleBar] = []
    by_stage = _first_record_per_stage(records, stages)
    for band in bands:
        record = by_stage.get(band.stage)
        if record is None:
            continue
        for schedule_type in SCHEDULE_TYPES:
            start, end = record.date_pair(schedule_type)
            start_ts = parse_calendar_date(start)
            end_ts = parse_calendar_date(end)
            if start_ts is None or end_ts is None:
                continue
            x = scale(start_ts)
            bars.append(
                ScheduleBar(
                    stage=band.stage,
                    schedule_type=schedule_type,
                    start=start,
                    end=end,
                    x=x,
                    y=band.y + offsets[schedule_type],
                    width=max(config.min_bar_width, scale(end_ts) - x),
                    height=bar_height,
                )
            )

    return TimelineLayout(
        width=width,
        height=height,
        plot_left=plot_left,
        plot_right=plot_right,
        bands=bands,
        bars=tuple(bars),
        ticks=month_ticks(scale, config.tick_format),
        domain_start=scale.domain_start,
        domain_end=scale.domain_end,
        config=config,
    )
