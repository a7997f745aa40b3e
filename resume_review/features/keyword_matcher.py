from __future__ import annotations

import re

from resume_review.schemas.review import KeywordMatch

MAX_MISSING_KEYWORDS = 10


def keyword_pattern(keyword: str) -> re.Pattern[str]:
    # Look-arounds instead of \b so keywords ending in symbols ("C++") still match.
    return re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)", re.IGNORECASE)


def contains_keyword(text: str, keyword: str) -> bool:
    if not keyword:
        return False
    return bool(keyword_pattern(keyword).search(text or ""))


def match_keywords(keywords: list[str], resume_text: str) -> KeywordMatch:
    matched: list[str] = []
    missing: list[str] = []
    for keyword in keywords:
        if contains_keyword(resume_text, keyword):
            matched.append(keyword)
        else:
            missing.append(keyword)

    ranked_missing = sorted(missing, key=len, reverse=True)
    return KeywordMatch(
        extracted_count=len(keywords),
        matched=matched,
        matched_count=len(matched),
        missing=ranked_missing[:MAX_MISSING_KEYWORDS],
        missing_total=len(missing),
    )
