"""
타임라인 레이아웃 테스트

도메인(날짜 축) 계산, 단계 밴드 배치, 일정 막대 좌표를 검증합니다.
"""
from __future__ import annotations

import pandas as pd
import pytest

from schedule_dashboard.core.config import ChartConfig
from schedule_dashboard.data_sources.csv_import import parse_schedule_csv
from schedule_dashboard.domain.models import PROJECT_STAGES, StageRecord
from schedule_dashboard.planning.layout import (
    BandScale,
    TimeScale,
    chart_height,
    compute_domain,
    compute_timeline_layout,
)

WIDTH = 1000
CFG = ChartConfig()


def _full_record(stage: str, **overrides: str) -> StageRecord:
    values = dict(
        proposed_start="2024-01-01",
        proposed_end="2024-02-01",
        adjusted_forecast_start="2024-01-15",
        adjusted_forecast_end="2024-03-01",
        actual_start="2024-01-20",
        actual_end="2024-03-10",
    )
    values.update(overrides)
    return StageRecord(project_name="Tower A", stage=stage, **values)


# ============================================================
# 시나리오: Tower A
# ============================================================

def test_tower_a_domain_padded_by_one_month(tower_a_records):
    """도메인 - 최소/최대 날짜에서 한 달씩 확장"""
    layout = compute_timeline_layout(tower_a_records, viewport_width=WIDTH)

    assert layout.domain_start == pd.Timestamp("2023-12-01")
    assert layout.domain_end == pd.Timestamp("2024-04-01")


def test_tower_a_bars(tower_a_records):
    """Concept: Proposed 1개(폭 > 2), Schematic: Actual 1개(폭 정확히 2)"""
    layout = compute_timeline_layout(tower_a_records, viewport_width=WIDTH)

    concept = layout.bars_for("Concept stage")
    schematic = layout.bars_for("Schematic Design")

    assert [b.schedule_type for b in concept] == ["Proposed"]
    assert concept[0].width > 2
    assert (concept[0].start, concept[0].end) == ("2024-01-01", "2024-03-01")

    assert [b.schedule_type for b in schematic] == ["Actual"]
    assert schematic[0].width == 2
    assert len(layout.bars) == 2


def test_tower_a_month_ticks(tower_a_records):
    """축 눈금 - 도메인 안의 매월 1일마다 하나씩"""
    layout = compute_timeline_layout(tower_a_records, viewport_width=WIDTH)

    assert [t.label for t in layout.ticks] == [
        "Dec 2023",
        "Jan 2024",
        "Feb 2024",
        "Mar 2024",
        "Apr 2024",
    ]
    assert layout.ticks[0].x == pytest.approx(CFG.margin_left)
    assert layout.ticks[-1].x == pytest.approx(WIDTH - CFG.margin_right)
    xs = [t.x for t in layout.ticks]
    assert xs == sorted(xs)


def test_horizontal_position_proportional_to_date(tower_a_records):
    layout = compute_timeline_layout(tower_a_records, viewport_width=WIDTH)
    bar = layout.bars_for("Concept stage")[0]

    plot_width = WIDTH - CFG.margin_left - CFG.margin_right
    total_days = (pd.Timestamp("2024-04-01") - pd.Timestamp("2023-12-01")).days
    expected_x = CFG.margin_left + plot_width * 31 / total_days
    expected_width = plot_width * 60 / total_days

    assert bar.x == pytest.approx(expected_x)
    assert bar.width == pytest.approx(expected_width)


# ============================================================
# 밴드 배치
# ============================================================

def test_bands_follow_stage_order_with_equal_height(tower_a_records):
    """밴드 - 데이터 유무와 관계없이 단계 순서대로 7개, 높이 동일"""
    layout = compute_timeline_layout(tower_a_records, viewport_width=WIDTH)

    assert [band.stage for band in layout.bands] == list(PROJECT_STAGES)
    heights = {round(band.height, 9) for band in layout.bands}
    assert len(heights) == 1
    ys = [band.y for band in layout.bands]
    assert ys == sorted(ys)
    gaps = [b2.y - (b1.y + b1.height) for b1, b2 in zip(layout.bands, layout.bands[1:])]
    assert gaps[0] > 0
    assert gaps == pytest.approx([gaps[0]] * len(gaps))


def test_band_scale_geometry():
    """밴드 스케일 - 안쪽/바깥쪽 패딩 0.2, 가운데 정렬"""
    height = chart_height(PROJECT_STAGES, CFG)
    scale = BandScale(
        domain=PROJECT_STAGES,
        range_start=CFG.margin_top,
        range_end=height - CFG.margin_bottom,
        padding=0.2,
    )

    assert height == 820
    assert scale.step == pytest.approx(700 / 7.2)
    assert scale.bandwidth == pytest.approx(700 / 7.2 * 0.8)
    first = scale(PROJECT_STAGES[0])
    last = scale(PROJECT_STAGES[-1]) + scale.bandwidth
    # 위/아래 여백이 같다
    assert first - CFG.margin_top == pytest.approx(height - CFG.margin_bottom - last)
    assert scale("Unknown") is None


def test_three_sub_bars_stacked_within_band():
    """한 단계의 세 막대 - Proposed/AF/Actual 순서로 쌓임"""
    layout = compute_timeline_layout([_full_record("Design Development")], viewport_width=WIDTH)
    band = layout.bands[PROJECT_STAGES.index("Design Development")]
    bars = layout.bars_for("Design Development")

    bar_height = band.height / 3.5
    assert [b.schedule_type for b in bars] == ["Proposed", "AF", "Actual"]
    assert [b.y - band.y for b in bars] == pytest.approx(
        [0, bar_height + 4, 2 * (bar_height + 4)]
    )
    assert all(b.height == pytest.approx(bar_height) for b in bars)
    assert bars[-1].y + bars[-1].height <= band.y + band.height


# ============================================================
# 불변 조건
# ============================================================

def test_bars_width_floor_and_x_within_plot():
    """모든 막대 - 폭 >= 2, x는 플롯 영역 안"""
    records = [
        _full_record(stage, actual_start="2024-03-10", actual_end="2024-03-10")
        for stage in PROJECT_STAGES
    ]
    records.append(_full_record("Concept stage", proposed_start="2021-01-01"))

    layout = compute_timeline_layout(records, viewport_width=WIDTH)

    assert len(layout.bars) == 3 * len(PROJECT_STAGES)
    for bar in layout.bars:
        assert bar.width >= 2
        assert CFG.margin_left <= bar.x <= WIDTH - CFG.margin_right


def test_layout_is_idempotent(tower_a_records):
    first = compute_timeline_layout(tower_a_records, viewport_width=WIDTH)
    second = compute_timeline_layout(tower_a_records, viewport_width=WIDTH)
    assert first == second


def test_no_dates_yields_empty_layout():
    """날짜가 하나도 없으면 빈 레이아웃 (예외 없음)"""
    records = [StageRecord(project_name="Tower A", stage="Concept stage")]

    layout = compute_timeline_layout(records, viewport_width=WIDTH)

    assert layout.is_empty
    assert layout.bars == ()
    assert layout.ticks == ()
    assert layout.domain_start is None
    assert len(layout.bands) == len(PROJECT_STAGES)


def test_no_records_yields_empty_layout():
    layout = compute_timeline_layout([], viewport_width=WIDTH)
    assert layout.is_empty
    assert compute_domain([]) is None


def test_half_pair_is_omitted_but_counts_for_domain():
    """시작/종료 중 하나만 있으면 막대는 생략, 도메인에는 포함"""
    records = [
        StageRecord(
            project_name="Tower A",
            stage="Concept stage",
            proposed_start="2024-01-01",
            proposed_end="2024-01-31",
            actual_start="2024-06-15",
        )
    ]

    layout = compute_timeline_layout(records, viewport_width=WIDTH)

    assert [b.schedule_type for b in layout.bars] == ["Proposed"]
    assert layout.domain_end == pd.Timestamp("2024-07-15")


def test_malformed_dates_are_skipped():
    records = [
        StageRecord(
            project_name="Tower A",
            stage="Concept stage",
            proposed_start="someday",
            proposed_end="2024-01-31",
            actual_start="2024-01-01",
            actual_end="2024-01-10",
        )
    ]

    layout = compute_timeline_layout(records, viewport_width=WIDTH)

    assert [b.schedule_type for b in layout.bars] == ["Actual"]
    assert layout.domain_start == pd.Timestamp("2023-12-01")


def test_only_malformed_dates_is_empty():
    records = [StageRecord(project_name="Tower A", stage="Concept stage", proposed_start="TBD")]
    assert compute_timeline_layout(records, viewport_width=WIDTH).is_empty


@pytest.mark.parametrize(
    "start, end",
    [
        ("2024-01-01", "3024-02-01"),
        ("2262-03-01", "2262-04-01"),
        ("1677-09-25", "1677-10-01"),
    ],
)
def test_out_of_range_dates_are_treated_as_missing(start, end):
    """나노초 범위 밖(연도 오타 등)의 날짜가 섞여도 레이아웃은 예외 없이 계산된다"""
    records = parse_schedule_csv(
        f"Project,Stage,P_Start,P_End\nTower A,Concept stage,{start},{end}\n"
    )

    layout = compute_timeline_layout(records, viewport_width=WIDTH)

    assert layout.bars == ()
    for tick in layout.ticks:
        assert CFG.margin_left <= tick.x <= WIDTH - CFG.margin_right


def test_out_of_range_end_keeps_valid_start_in_domain():
    records = [_full_record("Concept stage", actual_end="3024-03-10")]

    layout = compute_timeline_layout(records, viewport_width=WIDTH)

    assert {b.schedule_type for b in layout.bars} == {"Proposed", "AF"}
    assert layout.domain_start == pd.Timestamp("2023-12-01")
    assert layout.domain_end == pd.Timestamp("2024-04-01")


def test_narrow_viewport_is_raised_to_min_width():
    """최소 폭보다 좁은 뷰포트도 플롯 영역이 비지 않도록 최소 폭으로 계산"""
    layout = compute_timeline_layout([_full_record("Concept stage")], viewport_width=100)

    assert layout.width == CFG.min_width
    assert layout.plot_left < layout.plot_right
    for bar in layout.bars:
        assert CFG.margin_left <= bar.x <= CFG.min_width - CFG.margin_right
        assert bar.x + bar.width <= CFG.min_width - CFG.margin_right + 1e-6


def test_duplicate_stage_records_first_wins():
    """같은 단계 레코드가 여러 개면 첫 번째만 그림"""
    first = StageRecord(
        project_name="Tower A",
        stage="Concept stage",
        proposed_start="2024-01-01",
        proposed_end="2024-02-01",
    )
    second = StageRecord(
        project_name="Tower A",
        stage="Concept stage",
        proposed_start="2024-05-01",
        proposed_end="2024-06-01",
    )

    layout = compute_timeline_layout([first, second], viewport_width=WIDTH)

    bars = layout.bars_for("Concept stage")
    assert len(bars) == 1
    assert bars[0].start == "2024-01-01"
    # 그려지지 않은 레코드의 날짜도 도메인에는 반영된다
    assert layout.domain_end == pd.Timestamp("2024-07-01")


def test_custom_stage_subset_and_config():
    config = ChartConfig(stage_height=60, margin_top=10, margin_bottom=10, bar_gap=2)
    stages = ("Concept stage", "Schematic Design")

    layout = compute_timeline_layout(
        [_full_record("Construction admin"), _full_record("Schematic Design")],
        viewport_width=900,
        stages=stages,
        config=config,
    )

    assert layout.height == 2 * 60 + 20
    assert [band.stage for band in layout.bands] == list(stages)
    # 단계 목록에 없는 레코드는 무시
    assert {b.stage for b in layout.bars} == {"Schematic Design"}


def test_time_scale_maps_linearly():
    scale = TimeScale(
        domain_start=pd.Timestamp("2024-01-01"),
        domain_end=pd.Timestamp("2024-01-11"),
        range_start=100.0,
        range_end=200.0,
    )
    assert scale(pd.Timestamp("2024-01-01")) == pytest.approx(100.0)
    assert scale(pd.Timestamp("2024-01-06")) == pytest.approx(150.0)
    assert scale(pd.Timestamp("2024-01-11")) == pytest.approx(200.0)
