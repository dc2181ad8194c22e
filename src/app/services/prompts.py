"""
Prompt Builders: 통계 → 프롬프트 문자열.

모든 분석/판단은 외부 모델 몫, 여기서는 숫자 보간만.
숫자: 천 단위 구분자, 비율: 분모 0이면 0.
"""

import json
from collections.abc import Sequence

from src.core.formatting import format_compact, format_count, format_percent
from src.domain.constants import FocusArea
from src.domain.schemas import (
    ChatMessage,
    CountryAnalysisRequest,
    CountryTraffic,
    Stats,
)

# 정적 지역 요약 (브라우저 지도와 동일한 순위)
TOP_REGIONS_SUMMARY = (
    "United States (40B+ requests), Germany (6B+), United Kingdom (5B+), "
    "India (4B+), Brazil (4B+), Singapore (4B+), Japan (3.6B+)"
)
TOP_REGIONS_SHORT = "US (40B+), Germany (6B+), UK (5B+), India (4B+)"


def _cache_rate(stats: Stats) -> str:
    return format_percent(stats.cache_hits, stats.total_requests, 1)


# =============================================================================
# Stats Analysis (단발)
# =============================================================================


def build_stats_analysis_prompt(stats: Stats) -> str:
    """전체 통계 분석 프롬프트 (POST /api/analyze-stats)."""
    fw = stats.firewall_actions
    bots = stats.bot_management

    return f"""You are an expert web infrastructure analyst. Analyze the following Black Friday/Cyber Monday traffic statistics from Vercel's edge network and provide actionable insights:

**Traffic Overview:**
- Total Requests: {format_count(stats.total_requests)} requests
- Total Deployments: {format_count(stats.total_deployments)} deployments
- Cache Hits: {format_count(stats.cache_hits)} ({_cache_rate(stats)}% cache rate)
- AI Gateway Requests: {format_count(stats.ai_gateway_requests)}

**Security Metrics:**
- Total Firewall Actions: {format_count(fw.total)}
- System Blocks: {format_count(fw.system_blocks)}
- System Challenges: {format_count(fw.system_challenges)}
- Custom WAF Blocks: {format_count(fw.custom_waf_blocks)}

**Bot Management:**
- Bots Blocked: {format_count(bots.bots_blocked)}
- Humans Verified: {format_count(bots.humans_verified)}

**Geographic Distribution:**
Top countries by traffic: {TOP_REGIONS_SUMMARY}

Please provide:
1. A brief assessment of the traffic scale and what it indicates
2. Key security insights (threat patterns, protection effectiveness)
3. Performance analysis (cache efficiency, optimization opportunities)
4. Any notable trends or recommendations

Keep your response concise (under 180 words), professional, and focused on insights that would matter to engineering teams."""


# =============================================================================
# Focus Insights (스트리밍, 탭별)
# =============================================================================


def _security_prompt(stats: Stats) -> str:
    fw = stats.firewall_actions
    bots = stats.bot_management
    return f"""Analyze the security posture of this Black Friday traffic:

Firewall Actions: {format_count(fw.total)} total
- Blocked: {format_count(fw.system_blocks)}
- Challenged: {format_count(fw.system_challenges)}
- WAF Blocks: {format_count(fw.custom_waf_blocks)}

Bot Management:
- Bots Blocked: {format_count(bots.bots_blocked)}
- Humans Verified: {format_count(bots.humans_verified)}

Provide insights on threat patterns, attack vectors, and security effectiveness. Keep it under 150 words."""


def _performance_prompt(stats: Stats) -> str:
    return f"""Analyze the performance metrics:

Total Requests: {format_count(stats.total_requests)}
Cache Hits: {format_count(stats.cache_hits)}
Cache Hit Rate: {_cache_rate(stats)}%
Deployments: {format_count(stats.total_deployments)}

Discuss cache efficiency, scaling patterns, and optimization opportunities. Keep it under 150 words."""


def _traffic_prompt(stats: Stats) -> str:
    return f"""Analyze the traffic patterns:

Total Requests: {format_count(stats.total_requests)}
AI Gateway: {format_count(stats.ai_gateway_requests)}
Top regions: {TOP_REGIONS_SHORT}

Discuss geographic distribution, traffic scale, and notable patterns. Keep it under 150 words."""


def _overview_prompt(stats: Stats) -> str:
    dumped = json.dumps(stats.to_json_dict(), indent=2)
    return (
        f"Provide a comprehensive analysis of these Black Friday metrics: {dumped}. "
        "Focus on overall trends and key takeaways. Keep it under 200 words."
    )


_FOCUS_BUILDERS = {
    FocusArea.SECURITY: _security_prompt,
    FocusArea.PERFORMANCE: _performance_prompt,
    FocusArea.TRAFFIC: _traffic_prompt,
    FocusArea.OVERVIEW: _overview_prompt,
}


def build_focus_prompt(stats: Stats, focus: FocusArea | str | None) -> str:
    """
    탭별 인사이트 프롬프트 (POST /api/stream-insights).

    Args:
        stats: 통계 스냅샷
        focus: security / performance / traffic / overview
               (알 수 없는 값, None → overview)

    Returns:
        프롬프트 문자열
    """
    area = focus if isinstance(focus, FocusArea) else FocusArea.parse(focus)
    return _FOCUS_BUILDERS[area](stats)


# =============================================================================
# Country Analysis (스트리밍)
# =============================================================================


def build_country_prompt(selection: CountryAnalysisRequest) -> str:
    """국가 선택 분석 프롬프트 (POST /api/analyze-country)."""
    stats = selection.stats
    share = format_percent(selection.requests, stats.total_requests, 2)

    return f"""Analyze this Black Friday traffic data for {selection.country_name} ({selection.country_code}):
    
Country Stats:
- Total Requests: {format_count(selection.requests)}
- Percentage of Global Traffic: {share}%

Global Context:
- Total Global Requests: {format_count(stats.total_requests)}
- Total Deployments: {format_count(stats.total_deployments)}
- Firewall Blocks: {format_count(stats.firewall_actions.system_blocks)}
- Bot Protection Actions: {format_count(stats.bot_management.bots_blocked)}

Provide a concise analysis (3-4 sentences) covering:
1. This country's significance in the overall traffic pattern
2. Potential reasons for this traffic volume (e-commerce trends, population, tech adoption)
3. Security or performance insights specific to this region

Keep it technical but accessible."""


# =============================================================================
# Chat Assistant (스트리밍)
# =============================================================================


def build_chat_system_context(
    stats: Stats,
    countries: Sequence[CountryTraffic],
) -> str:
    """
    채팅 어시스턴트 시스템 컨텍스트.

    번들 데이터셋 기준이라 앱 시작 시 1회 생성해 재사용 가능.
    """
    fw = stats.firewall_actions
    bots = stats.bot_management
    country_lines = "\n".join(
        f"{i}. {c.name}: {format_count(c.requests)}"
        for i, c in enumerate(countries, start=1)
    )

    return f"""You are an AI analytics assistant analyzing Black Friday/Cyber Monday 2025 traffic data for Vercel's infrastructure.

Key Metrics:
- Total Requests: {format_count(stats.total_requests)} ({format_compact(stats.total_requests)})
- Total Deployments: {format_count(stats.total_deployments)} ({format_compact(stats.total_deployments)})
- Cache Hits: {format_count(stats.cache_hits)} ({format_compact(stats.cache_hits)})
- Cache Hit Rate: {_cache_rate(stats)}%
- AI Gateway Requests: {format_count(stats.ai_gateway_requests)} ({format_compact(stats.ai_gateway_requests)})

Firewall & Security:
- Total Firewall Actions: {format_count(fw.total)} ({format_compact(fw.total)})
- Blocked Threats: {format_count(fw.system_blocks)} ({format_compact(fw.system_blocks)})
- Challenges Issued: {format_count(fw.system_challenges)} ({format_compact(fw.system_challenges)})
- WAF Blocks: {format_count(fw.custom_waf_blocks)} ({format_compact(fw.custom_waf_blocks)})
- Bots Blocked: {format_count(bots.bots_blocked)} ({format_compact(bots.bots_blocked)})
- Humans Verified: {format_count(bots.humans_verified)} ({format_compact(bots.humans_verified)})

Top Countries by Traffic:
{country_lines}

Provide concise, insightful responses about these metrics. Be technical but accessible. Keep responses under 200 words unless asked for more detail."""


def _format_history(history: Sequence[ChatMessage]) -> str:
    labels = {"user": "User", "assistant": "Assistant"}
    return "\n".join(f"{labels[m.role]}: {m.content}" for m in history)


def build_chat_prompt(
    system_context: str,
    message: str,
    history: Sequence[ChatMessage] = (),
) -> str:
    """
    채팅 프롬프트 (POST /api/chat).

    Args:
        system_context: build_chat_system_context() 결과
        message: 사용자 질문
        history: 이전 대화 (선택)

    Returns:
        프롬프트 문자열
    """
    parts = [system_context]
    if history:
        parts.append(f"Conversation so far:\n{_format_history(history)}")
    parts.append(f"User Question: {message}")
    parts.append("Provide a helpful, data-driven response:")
    return "\n\n".join(parts)
