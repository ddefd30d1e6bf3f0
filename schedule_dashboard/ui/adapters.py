"""
도메인 예외 → UI 에러 메시지 어댑터

이 모듈은 도메인 계층에서 발생하는 예외를 잡아서
Streamlit 사용자 친화적인 에러 메시지로 변환합니다.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

import streamlit as st

from schedule_dashboard.domain.exceptions import (
    DataLoadError,
    ExportError,
    StorageError,
    ValidationError,
)


@contextmanager
def handle_domain_errors() -> Generator[None, None, None]:
    """
    도메인 예외를 잡아서 Streamlit 에러 메시지로 변환하는 컨텍스트 매니저.

    Examples:
        >>> with handle_domain_errors():
        ...     validate_stage_record(record)

    Notes:
        - ValidationError: 입력 검증 실패 (레코드는 저장하지 않음)
        - DataLoadError: CSV 읽기 실패
        - StorageError: 로컬 저장 실패
        - ExportError: 이미지 내보내기 실패
    """
    try:
        yield

    except ValidationError as e:
        # 검증 실패: 빨간색 에러 메시지
        st.error(f"❌ {str(e)}")

    except DataLoadError as e:
        st.error(f"❌ 데이터 로드 실패: {str(e)}")

    except StorageError as e:
        st.warning(f"⚠️ 저장 실패: {str(e)}")

    except ExportError as e:
        st.warning(f"⚠️ 내보내기 실패: {str(e)}")
