#!/usr/bin/env python
"""
Gemini API 연결 확인 스크립트.

실행:
    python scripts/check_api_connection.py
    python scripts/check_api_connection.py --model gemini-2.5-flash
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv  # noqa: E402

from src.app.providers.base import TextGenerationProvider  # noqa: E402
from src.app.providers.gemini import GeminiProvider  # noqa: E402
from src.domain.constants import API_KEY_ENV_VARS, DEFAULT_MODEL  # noqa: E402

PING_PROMPT = "Reply with exactly: Hello, API test successful!"


def find_api_key() -> str | None:
    """설정된 API 키 (placeholder는 무시)."""
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value and not value.startswith("AI..."):
            return value
    return None


async def check_single_shot(provider: TextGenerationProvider) -> bool:
    """단발 생성 확인."""
    print("\n" + "=" * 60)
    print(f"🧪 단발 생성 ({provider.model})")
    print("=" * 60)

    try:
        print("📤 테스트 요청 전송 중...")
        response = await provider.generate(PING_PROMPT)
        print(f"📥 응답: {response.strip()}")
        print("✅ 단발 생성 성공!")
        return True
    except Exception as e:
        print(f"❌ 오류: {type(e).__name__}: {e}")
        return False


async def check_streaming(provider: TextGenerationProvider) -> bool:
    """스트리밍 생성 확인 (chunk 수 출력)."""
    print("\n" + "=" * 60)
    print(f"🧪 스트리밍 생성 ({provider.model})")
    print("=" * 60)

    try:
        print("📤 스트림 요청 전송 중...")
        chunks = await provider.stream(PING_PROMPT)
        count = 0
        text = ""
        async for chunk in chunks:
            count += 1
            text += chunk
        print(f"📥 chunk {count}개: {text.strip()}")
        print("✅ 스트리밍 성공!")
        return count > 0
    except Exception as e:
        print(f"❌ 오류: {type(e).__name__}: {e}")
        return False


async def run_checks(provider: TextGenerationProvider) -> int:
    """모든 확인 실행 → 종료 코드."""
    results = {
        "single_shot": await check_single_shot(provider),
        "streaming": await check_streaming(provider),
    }

    # 결과 요약
    print("\n" + "=" * 60)
    print("📊 결과 요약")
    print("=" * 60)
    for name, passed in results.items():
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"  {name}: {status}")

    all_passed = all(results.values())
    print("=" * 60)
    if all_passed:
        print("🎉 Gemini API 연결 확인 완료!")
    else:
        print("⚠️ 일부 확인 실패. .env 파일을 확인하세요.")

    return 0 if all_passed else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Gemini API 연결 확인")
    parser.add_argument("--model", default=DEFAULT_MODEL, help="모델 ID")
    args = parser.parse_args(argv)

    load_dotenv()
    api_key = find_api_key()
    if api_key is None:
        print("❌ GOOGLE_GENERATIVE_AI_API_KEY가 설정되지 않았습니다.")
        print("   .env 파일에 실제 API 키를 입력하세요.")
        return 1

    print(f"✅ API 키 발견: {api_key[:8]}...")
    provider = GeminiProvider(model=args.model, api_key=api_key)
    return asyncio.run(run_checks(provider))


if __name__ == "__main__":
    sys.exit(main())
