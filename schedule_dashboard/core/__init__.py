"""전역 설정 모듈."""

from .config import CONFIG, STORAGE_KEY, ChartConfig, DashboardConfig, StorageConfig, UIConfig

__all__ = [
    "CONFIG",
    "STORAGE_KEY",
    "ChartConfig",
    "DashboardConfig",
    "StorageConfig",
    "UIConfig",
]
