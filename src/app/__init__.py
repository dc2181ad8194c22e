"""
App layer: 대시보드 서버 (FastAPI + Jinja2).

역할:
- 통계 화면 렌더링
- 프롬프트 생성 → Gemini 호출 → 텍스트 스트림 중계
- 상태 없음 (요청 간 공유 가변 상태 없음)
"""
