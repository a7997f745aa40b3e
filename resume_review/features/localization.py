from __future__ import annotations

from resume_review.features.keyword_matcher import contains_keyword
from resume_review.schemas.lexicon import LexiconSet
from resume_review.schemas.review import SpellingReport

MAX_SPELLING_EXAMPLES = 5


def check_spelling(resume_text: str, lexicon: LexiconSet) -> SpellingReport:
    error_count = 0
    examples: list[str] = []
    for source, target in lexicon.spelling_map.items():
        if not contains_keyword(resume_text, source):
            continue
        error_count += 1
        if len(examples) < MAX_SPELLING_EXAMPLES:
            examples.append(f"{source} → {target}")
    return SpellingReport(error_count=error_count, examples=examples)
