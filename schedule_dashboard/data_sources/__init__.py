"""
데이터 소스 계층

CSV 임포트, 로컬 저장소, Streamlit 세션 상태를 다룹니다.
"""

from .csv_import import decode_csv_bytes, map_csv_headers, parse_schedule_csv
from .storage import LocalRecordStore

__all__ = [
    # 임포트
    "parse_schedule_csv",
    "map_csv_headers",
    "decode_csv_bytes",
    # 저장소
    "LocalRecordStore",
]
