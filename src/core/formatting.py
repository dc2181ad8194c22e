"""
프롬프트용 숫자 포맷.

- 정수: 천 단위 구분자 (115,832,282,051)
- 비율: 분모 0이면 0으로 처리 (NaN 금지)
- 축약: 115.8B+, 6.1M+ (소수 1자리 반올림, .0 생략)
"""


def format_count(value: int) -> str:
    """천 단위 구분자."""
    return f"{value:,}"


_COMPACT_UNITS = ((10**12, "T"), (10**9, "B"), (10**6, "M"), (10**3, "K"))


def format_compact(value: int) -> str:
    """
    축약 표기 (천 미만은 그대로).

    Examples:
        115832282051 → "115.8B+"
        24118304 → "24.1M+"
        999960 → "1M+" (반올림이 단위를 넘으면 위 단위로)
    """
    if value < 1000:
        return str(value)

    for i, (size, suffix) in enumerate(_COMPACT_UNITS):
        if value < size:
            continue
        scaled = round(value / size, 1)
        if scaled >= 1000 and i > 0:
            size, suffix = _COMPACT_UNITS[i - 1]
            scaled = round(value / size, 1)
        text = f"{scaled:.1f}".removesuffix(".0")
        return f"{text}{suffix}+"

    return str(value)


def ratio_percent(part: int, whole: int) -> float:
    """part / whole * 100. whole이 0이면 0.0."""
    if whole <= 0:
        return 0.0
    return part / whole * 100


def format_percent(part: int, whole: int, digits: int = 1) -> str:
    """
    비율 문자열 (% 기호 없음).

    Args:
        part: 분자
        whole: 분모
        digits: 소수점 자리수

    Returns:
        예: format_percent(1, 3, 2) → "33.33"
    """
    return f"{ratio_percent(part, whole):.{digits}f}"
