"""
성능 모니터링 유틸리티

레이아웃 계산, CSV 임포트처럼 렌더링마다 실행되는 작업의
실행 시간을 측정해 로그로 남깁니다.
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# 화면 갱신마다 실행되므로 임계값을 짧게 잡는다
SLOW_THRESHOLD_SECONDS = 0.5
VERY_SLOW_THRESHOLD_SECONDS = 5.0


def _log_elapsed(operation_name: str, elapsed: float) -> None:
    if elapsed >= VERY_SLOW_THRESHOLD_SECONDS:
        logger.error(
            f"⚠️  SLOW: {operation_name} took {elapsed:.3f}s "
            f"(threshold: {VERY_SLOW_THRESHOLD_SECONDS:.0f}s)"
        )
    elif elapsed >= SLOW_THRESHOLD_SECONDS:
        logger.warning(
            f"⏱️  {operation_name} took {elapsed:.3f}s "
            f"(threshold: {SLOW_THRESHOLD_SECONDS}s)"
        )
    else:
        logger.debug(f"✓ {operation_name} completed in {elapsed:.3f}s")


def measure_time(func: F) -> F:
    """
    함수 실행 시간을 측정하고 로깅하는 데코레이터.

    Examples:
        >>> @measure_time
        ... def compute():
        ...     return "done"
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log_elapsed(func.__name__, time.perf_counter() - start_time)

    return wrapper  # type: ignore[return-value]


def measure_time_context(operation_name: str) -> "PerformanceContext":
    """
    컨텍스트 매니저를 사용한 코드 블록 성능 측정.

    Examples:
        >>> with measure_time_context("csv import"):
        ...     records = parse_schedule_csv(text)
    """
    return PerformanceContext(operation_name)


class PerformanceContext:
    """
    코드 블록의 실행 시간을 측정하는 컨텍스트 매니저.

    Attributes:
        operation_name: 측정할 작업의 이름
        elapsed: 경과 시간 (초)
    """

    def __init__(self, operation_name: str) -> None:
        self.operation_name = operation_name
        self.start_time: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> "PerformanceContext":
        self.start_time = time.perf_counter()
        logger.debug(f"Starting: {self.operation_name}")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.elapsed = time.perf_counter() - self.start_time
        if exc_type is not None:
            logger.error(f"❌ {self.operation_name} failed after {self.elapsed:.3f}s")
        else:
            _log_elapsed(self.operation_name, self.elapsed)
