"""
공정 일정 대시보드 패키지

건설 프로젝트의 단계별 일정(Proposed / AF / Actual)을 관리하고
프로젝트별 타임라인 차트로 시각화합니다.
주요 구성:
- domain: 단계 레코드 모델, 검증, 저장소(Repository)
- planning: 타임라인 차트 레이아웃 계산 (순수 함수)
- data_sources: CSV 임포트, 로컬 저장소, 세션 상태
- ui: Streamlit/Plotly 렌더링 계층
"""

from __future__ import annotations

__version__ = "1.0.0"
