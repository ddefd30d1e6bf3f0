"""
도메인 계층 예외 정의

이 모듈은 일정 대시보드 도메인 계층에서 발생할 수 있는
예외를 정의합니다. UI 계층은 이 예외들을 잡아서
사용자 친화적인 에러 메시지로 변환합니다.
"""

from __future__ import annotations


class DomainError(Exception):
    """
    도메인 계층의 기본 예외 클래스.

    모든 도메인 예외는 이 클래스를 상속합니다.
    """

    pass


class ValidationError(DomainError):
    """
    입력 검증 실패 시 발생하는 예외.

    예: 프로젝트명 누락, 종료일이 시작일보다 빠른 경우
    """

    pass


class DataLoadError(DomainError):
    """
    데이터 로드 실패 시 발생하는 예외.

    업로드한 CSV 파일을 텍스트로 읽을 수 없는 경우 등에 사용합니다.
    """

    pass


class StorageError(DomainError):
    """로컬 저장소에 쓰지 못했을 때 발생하는 예외."""

    pass


class ExportError(DomainError):
    """차트를 이미지로 내보내지 못했을 때 발생하는 예외."""

    pass
