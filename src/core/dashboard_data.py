"""
대시보드 데이터셋 로드.

dashboard.yaml (stats + topCountries) → DashboardData.
앱 시작 시 1회 로드, 이후 읽기 전용.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.domain.schemas import DashboardData

logger = logging.getLogger(__name__)


class DashboardDataError(Exception):
    """데이터셋 파일 누락/형식 오류."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def load_dashboard_data(path: Path) -> DashboardData:
    """
    dashboard.yaml 로드 + 검증.

    Args:
        path: dashboard.yaml 경로

    Returns:
        DashboardData

    Raises:
        DashboardDataError: 파일 없음, YAML 오류, 스키마 불일치
    """
    if not path.exists():
        raise DashboardDataError(path, "file not found")

    try:
        with open(path, encoding="utf-8") as f:
            raw: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DashboardDataError(path, f"invalid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise DashboardDataError(path, "top-level mapping expected")

    try:
        data = DashboardData.model_validate(raw)
    except ValidationError as e:
        raise DashboardDataError(path, f"schema mismatch: {e}") from e

    logger.info(
        f"Loaded dashboard data from {path.name}: "
        f"{len(data.top_countries)} countries"
    )
    return data
