"""
Core layer: 순수 헬퍼 (웹/외부 API 의존 없음).

역할:
- 프롬프트용 숫자 포맷
- 번들 대시보드 데이터셋 로드
"""

from .dashboard_data import DashboardDataError, load_dashboard_data
from .formatting import format_compact, format_count, format_percent, ratio_percent

__all__ = [
    # dashboard_data
    "DashboardDataError",
    "load_dashboard_data",
    # formatting
    "format_compact",
    "format_count",
    "format_percent",
    "ratio_percent",
]
