"""
Pytest fixtures for the dashboard tests.

- 통계 스냅샷 (camelCase payload / Stats 모델)
- Fake provider (외부 API 호출 없음)
"""

from collections.abc import AsyncIterator, Callable, Sequence
from pathlib import Path

import pytest
import yaml

from src.app.providers.base import TextGenerationProvider
from src.core.dashboard_data import load_dashboard_data
from src.domain.schemas import DashboardData, Stats

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def dashboard_data(project_root: Path) -> DashboardData:
    """번들 데이터셋 (dashboard.yaml)."""
    return load_dashboard_data(project_root / "dashboard.yaml")


# =============================================================================
# Stats Fixtures
# =============================================================================


@pytest.fixture
def stats_payload() -> dict:
    """브라우저가 보내는 camelCase stats."""
    return {
        "totalRequests": 115832282051,
        "totalDeployments": 6120247,
        "cacheHits": 78940113552,
        "aiGatewayRequests": 24118304,
        "firewallActions": {
            "total": 7512049337,
            "systemBlocks": 1398205677,
            "systemChallenges": 3214860932,
            "customWafBlocks": 328471020,
        },
        "botManagement": {
            "botsBlocked": 415683895,
            "humansVerified": 2436918504,
        },
    }


@pytest.fixture
def country_stats_payload() -> dict:
    """국가 패널이 보내는 축약 stats (필수 필드만)."""
    return {
        "totalRequests": 115832282051,
        "totalDeployments": 6120247,
        "firewallActions": {"systemBlocks": 1398205677},
        "botManagement": {"botsBlocked": 415683895},
    }


@pytest.fixture
def sample_stats(stats_payload: dict) -> Stats:
    """Stats 모델."""
    return Stats.model_validate(stats_payload)


# =============================================================================
# Provider Fixtures
# =============================================================================


class FakeProvider(TextGenerationProvider):
    """
    테스트용 provider.

    - error: generate/stream 호출 시 즉시 raise
    - stream_error: chunk를 다 보낸 뒤 raise
    """

    def __init__(
        self,
        chunks: Sequence[str] = ("Traffic ", "looks ", "healthy."),
        error: Exception | None = None,
        stream_error: Exception | None = None,
        model: str = "fake-model",
    ) -> None:
        self.chunks = list(chunks)
        self.error = error
        self.stream_error = stream_error
        self.model = model
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return "".join(self.chunks)

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self._iter()

    async def _iter(self) -> AsyncIterator[str]:
        for chunk in self.chunks:
            yield chunk
        if self.stream_error is not None:
            raise self.stream_error


@pytest.fixture
def make_provider() -> Callable[..., FakeProvider]:
    """FakeProvider 팩토리."""
    return FakeProvider
