"""
Data schemas for the dashboard.

규칙:
- 모두 요청/응답 1회 동안만 존재하는 DTO (영속화 없음)
- JSON 키는 camelCase (브라우저와 동일), Python 속성은 snake_case
- 카운터는 음수 불가
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase JSON ↔ snake_case 속성."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Stats Snapshot
# =============================================================================

class FirewallActions(CamelModel):
    """방화벽 액션 카운터."""
    total: int = Field(default=0, ge=0)
    system_blocks: int = Field(ge=0)
    system_challenges: int = Field(default=0, ge=0)
    custom_waf_blocks: int = Field(default=0, ge=0)


class BotManagement(CamelModel):
    """봇 관리 카운터."""
    bots_blocked: int = Field(ge=0)
    humans_verified: int = Field(default=0, ge=0)


class Stats(CamelModel):
    """
    트래픽 통계 스냅샷 (읽기 전용).

    필수: 모든 엔드포인트가 공통으로 쓰는 필드만
    - totalRequests, totalDeployments
    - firewallActions.systemBlocks, botManagement.botsBlocked

    나머지 카운터는 없으면 0. 알 수 없는 키는 보존 (overview 프롬프트 JSON 덤프용).
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    total_requests: int = Field(ge=0)
    total_deployments: int = Field(ge=0)
    cache_hits: int = Field(default=0, ge=0)
    ai_gateway_requests: int = Field(default=0, ge=0)
    firewall_actions: FirewallActions
    bot_management: BotManagement

    def to_json_dict(self) -> dict[str, Any]:
        """브라우저 JSON과 동일한 camelCase dict."""
        return self.model_dump(by_alias=True)


class CountryTraffic(CamelModel):
    """국가별 트래픽 (대시보드 데이터셋)."""
    code: str
    name: str
    requests: int = Field(ge=0)


# =============================================================================
# Requests
# =============================================================================

class StatsAnalysisRequest(CamelModel):
    """POST /api/analyze-stats."""
    stats: Stats


class InsightsRequest(CamelModel):
    """
    POST /api/stream-insights.

    focus 없음/알 수 없음 → overview.
    prompt 필드(useCompletion 호환)는 무시.
    """
    stats: Stats
    focus: str | None = None


class CountryAnalysisRequest(CamelModel):
    """POST /api/analyze-country (지도/테이블에서 국가 선택)."""
    country_code: str = Field(min_length=1)
    country_name: str = Field(min_length=1)
    requests: int = Field(ge=0)
    stats: Stats


class ChatMessage(CamelModel):
    """채팅 메시지 (브라우저 메모리에만 존재)."""
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(CamelModel):
    """
    POST /api/chat.

    history: 이전 대화 (선택). 서버는 저장하지 않음.
    """
    message: str
    history: list[ChatMessage] = Field(default_factory=list)

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be empty")
        return value


# =============================================================================
# Responses
# =============================================================================

class AnalysisResponse(BaseModel):
    """POST /api/analyze-stats 응답."""
    analysis: str


class DashboardData(CamelModel):
    """GET /api/dashboard 응답 = 번들 데이터셋."""
    stats: Stats
    top_countries: list[CountryTraffic] = Field(default_factory=list)
