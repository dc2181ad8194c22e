"""
test_prompts.py - 프롬프트 생성 테스트

고정 stats → 프롬프트에 기대 문자열이 들어있는지.
"""

import json

import pytest

from src.app.services.prompts import (
    build_chat_prompt,
    build_chat_system_context,
    build_country_prompt,
    build_focus_prompt,
    build_stats_analysis_prompt,
)
from src.domain.constants import FocusArea
from src.domain.schemas import (
    ChatMessage,
    CountryAnalysisRequest,
    CountryTraffic,
    Stats,
)

# =============================================================================
# analyze-stats
# =============================================================================


class TestStatsAnalysisPrompt:
    """전체 통계 분석 프롬프트."""

    def test_traffic_overview(self, sample_stats: Stats):
        prompt = build_stats_analysis_prompt(sample_stats)

        assert "expert web infrastructure analyst" in prompt
        assert "Total Requests: 115,832,282,051 requests" in prompt
        assert "Total Deployments: 6,120,247 deployments" in prompt
        assert "Cache Hits: 78,940,113,552 (68.2% cache rate)" in prompt
        assert "AI Gateway Requests: 24,118,304" in prompt

    def test_security_and_bots(self, sample_stats: Stats):
        prompt = build_stats_analysis_prompt(sample_stats)

        assert "Total Firewall Actions: 7,512,049,337" in prompt
        assert "System Blocks: 1,398,205,677" in prompt
        assert "System Challenges: 3,214,860,932" in prompt
        assert "Custom WAF Blocks: 328,471,020" in prompt
        assert "Bots Blocked: 415,683,895" in prompt
        assert "Humans Verified: 2,436,918,504" in prompt

    def test_instructions(self, sample_stats: Stats):
        prompt = build_stats_analysis_prompt(sample_stats)

        assert "Top countries by traffic: United States (40B+ requests)" in prompt
        assert "under 180 words" in prompt

    def test_zero_requests_no_division_error(self, country_stats_payload: dict):
        country_stats_payload["totalRequests"] = 0
        stats = Stats.model_validate(country_stats_payload)

        prompt = build_stats_analysis_prompt(stats)

        assert "(0.0% cache rate)" in prompt


# =============================================================================
# stream-insights
# =============================================================================


class TestFocusPrompt:
    """탭별 프롬프트."""

    def test_security(self, sample_stats: Stats):
        prompt = build_focus_prompt(sample_stats, "security")

        assert prompt.startswith("Analyze the security posture")
        assert "Firewall Actions: 7,512,049,337 total" in prompt
        assert "- Blocked: 1,398,205,677" in prompt
        assert "- Challenged: 3,214,860,932" in prompt
        assert "- WAF Blocks: 328,471,020" in prompt
        assert "under 150 words" in prompt

    def test_performance(self, sample_stats: Stats):
        prompt = build_focus_prompt(sample_stats, FocusArea.PERFORMANCE)

        assert prompt.startswith("Analyze the performance metrics")
        assert "Cache Hit Rate: 68.2%" in prompt
        assert "Deployments: 6,120,247" in prompt

    def test_traffic(self, sample_stats: Stats):
        prompt = build_focus_prompt(sample_stats, "traffic")

        assert prompt.startswith("Analyze the traffic patterns")
        assert "AI Gateway: 24,118,304" in prompt
        assert "Top regions: US (40B+)" in prompt

    def test_overview_embeds_json(self, sample_stats: Stats, stats_payload: dict):
        prompt = build_focus_prompt(sample_stats, "overview")

        assert prompt.startswith("Provide a comprehensive analysis")
        assert json.dumps(stats_payload, indent=2) in prompt
        assert "under 200 words" in prompt

    @pytest.mark.parametrize("focus", [None, "", "weather"])
    def test_unknown_focus_is_overview(self, sample_stats: Stats, focus):
        assert build_focus_prompt(sample_stats, focus) == build_focus_prompt(
            sample_stats, "overview"
        )


# =============================================================================
# analyze-country
# =============================================================================


class TestCountryPrompt:
    """국가 분석 프롬프트."""

    def test_country_prompt(self, country_stats_payload: dict):
        selection = CountryAnalysisRequest.model_validate(
            {
                "countryCode": "US",
                "countryName": "United States",
                "requests": 40312455102,
                "stats": country_stats_payload,
            }
        )

        prompt = build_country_prompt(selection)

        assert "for United States (US):" in prompt
        assert "- Total Requests: 40,312,455,102" in prompt
        assert "- Percentage of Global Traffic: 34.80%" in prompt
        assert "- Total Global Requests: 115,832,282,051" in prompt
        assert "- Firewall Blocks: 1,398,205,677" in prompt
        assert "- Bot Protection Actions: 415,683,895" in prompt
        assert "3-4 sentences" in prompt


# =============================================================================
# chat
# =============================================================================


class TestChatPrompt:
    """채팅 프롬프트."""

    @pytest.fixture
    def countries(self) -> list[CountryTraffic]:
        return [
            CountryTraffic(code="US", name="United States", requests=40312455102),
            CountryTraffic(code="DE", name="Germany", requests=6204871935),
        ]

    def test_system_context(self, sample_stats: Stats, countries):
        context = build_chat_system_context(sample_stats, countries)

        assert "AI analytics assistant" in context
        assert "- Cache Hit Rate: 68.2%" in context
        assert "- Total Requests: 115,832,282,051 (115.8B+)" in context
        assert "- Total Deployments: 6,120,247 (6.1M+)" in context
        assert "- Blocked Threats: 1,398,205,677 (1.4B+)" in context
        assert "1. United States: 40,312,455,102" in context
        assert "2. Germany: 6,204,871,935" in context

    def test_chat_prompt_layout(self):
        prompt = build_chat_prompt("CONTEXT", "What's the cache hit rate?")

        assert prompt == (
            "CONTEXT\n\n"
            "User Question: What's the cache hit rate?\n\n"
            "Provide a helpful, data-driven response:"
        )

    def test_chat_prompt_with_history(self):
        history = [
            ChatMessage(role="user", content="How much traffic?"),
            ChatMessage(role="assistant", content="115.8B requests."),
        ]

        prompt = build_chat_prompt("CONTEXT", "And security?", history)

        assert "Conversation so far:\nUser: How much traffic?\nAssistant: 115.8B requests." in prompt
        assert prompt.index("Conversation so far") < prompt.index("User Question")
