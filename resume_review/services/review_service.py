from __future__ import annotations

import logging
import math

from resume_review.features import (
    analyze_impact,
    check_formatting,
    check_spelling,
    extract_keywords,
    match_keywords,
)
from resume_review.lexicon import get_default_lexicon
from resume_review.schemas.lexicon import LexiconSet
from resume_review.schemas.review import (
    CATEGORY_ORDER,
    AnalysisResult,
    CategoryId,
    FirstWordPolicy,
    FormattingReport,
    ImpactReport,
    KeywordMatch,
    ScorePartials,
    SpellingReport,
    Suggestion,
)

logger = logging.getLogger(__name__)

KEYWORD_DENOMINATOR_CAP = 15
KEYWORD_RATIO_WEIGHT = 40
KEYWORD_PARTIAL_CAP = 30
KEYWORD_COMPLETE_BONUS = 5
IMPACT_FULL = 40
IMPACT_DENSITY_THRESHOLD = 0.3
IMPACT_QUANTIFIED_THRESHOLD = 5
LOCALIZATION_FULL = 15
LOCALIZATION_PENALTY = 3
FORMATTING_FULL = 15
FORMATTING_FALLBACK = 5
WEAK_EXCERPT_CHARS = 60
STRONG_VERB_HINTS = 5


def keyword_partial(match: KeywordMatch) -> float:
    denominator = min(match.extracted_count, KEYWORD_DENOMINATOR_CAP)
    if denominator == 0:
        return 0.0
    partial = min(KEYWORD_PARTIAL_CAP, math.ceil(match.matched_count * KEYWORD_RATIO_WEIGHT / denominator))
    if match.missing_total == 0:
        partial += KEYWORD_COMPLETE_BONUS
    return float(partial)


def impact_partial(impact: ImpactReport) -> float:
    # Discontinuous at the threshold: 30 just below, 40 just above.
    if impact.density_ratio > IMPACT_DENSITY_THRESHOLD or impact.quantified_count > IMPACT_QUANTIFIED_THRESHOLD:
        return float(IMPACT_FULL)
    return impact.quantified_count * 100 / max(1, impact.significant_count)


def localization_partial(spelling: SpellingReport) -> float:
    if spelling.error_count == 0:
        return float(LOCALIZATION_FULL)
    return float(max(0, LOCALIZATION_FULL - spelling.error_count * LOCALIZATION_PENALTY))


def formatting_partial(formatting: FormattingReport) -> float:
    if formatting.has_email and formatting.has_profile_link:
        return float(FORMATTING_FULL)
    return float(FORMATTING_FALLBACK)


def _keyword_suggestions(match: KeywordMatch) -> list[Suggestion]:
    if match.extracted_count == 0:
        return [Suggestion(category="ats_keywords", code="no_keywords_detected")]
    if match.missing:
        return [
            Suggestion(
                category="ats_keywords",
                code="missing_keywords",
                params={"keywords": list(match.missing), "missing_total": match.missing_total},
            )
        ]
    return [Suggestion(category="ats_keywords", code="keywords_aligned")]


def _impact_suggestions(impact: ImpactReport, lexicon: LexiconSet, *, bonus_reached: bool) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    if not bonus_reached:
        suggestions.append(
            Suggestion(
                category="impact",
                code="low_metric_density",
                params={
                    "quantified_count": impact.quantified_count,
                    "density_ratio": round(impact.density_ratio, 3),
                },
            )
        )
    if impact.weak_examples:
        first = impact.weak_examples[0]
        suggestions.append(
            Suggestion(
                category="impact",
                code="weak_action_verbs",
                params={
                    "example": first.text[:WEAK_EXCERPT_CHARS],
                    "phrase": first.phrase,
                    "strong_verbs": list(lexicon.strong_verbs[:STRONG_VERB_HINTS]),
                },
            )
        )
    return suggestions


def _formatting_suggestions(formatting: FormattingReport) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    if not formatting.has_email:
        suggestions.append(Suggestion(category="formatting", code="missing_email"))
    if not formatting.has_profile_link:
        suggestions.append(Suggestion(category="formatting", code="missing_profile_link"))
    return suggestions


def _localization_suggestions(spelling: SpellingReport, lexicon: LexiconSet) -> list[Suggestion]:
    if spelling.error_count == 0:
        return []
    return [
        Suggestion(
            category="localization",
            code="regional_spelling",
            params={
                "examples": list(spelling.examples),
                "error_count": spelling.error_count,
                "source_variant": lexicon.source_variant,
                "target_variant": lexicon.target_variant,
            },
        )
    ]


def aggregate(
    match: KeywordMatch,
    impact: ImpactReport,
    spelling: SpellingReport,
    formatting: FormattingReport,
    lexicon: LexiconSet,
) -> AnalysisResult:
    partials = ScorePartials(
        keywords=keyword_partial(match),
        impact=impact_partial(impact),
        localization=localization_partial(spelling),
        formatting=formatting_partial(formatting),
    )
    total = partials.keywords + partials.impact + partials.localization + partials.formatting
    score = max(0, min(100, math.ceil(total)))

    by_category: dict[CategoryId, list[Suggestion]] = {
        "ats_keywords": _keyword_suggestions(match),
        "impact": _impact_suggestions(impact, lexicon, bonus_reached=partials.impact >= IMPACT_FULL),
        "formatting": _formatting_suggestions(formatting),
        "localization": _localization_suggestions(spelling, lexicon),
    }
    suggestions = {category: by_category[category] for category in CATEGORY_ORDER if by_category[category]}

    return AnalysisResult(score=score, partials=partials, suggestions=suggestions)


class ResumeReviewer:
    """Scores a résumé against a job description with a fixed set of dictionaries.

    The reviewer holds no per-call state, so one instance can serve any
    number of reviews and always returns the same result for the same pair
    of texts.
    """

    def __init__(
        self,
        lexicon: LexiconSet | None = None,
        *,
        first_word_policy: FirstWordPolicy = "reject",
    ) -> None:
        self.lexicon = lexicon if lexicon is not None else get_default_lexicon()
        self.first_word_policy = first_word_policy

    def review(self, job_description: str, resume: str) -> AnalysisResult:
        job_description = job_description or ""
        resume = resume or ""

        keywords = extract_keywords(job_description, self.lexicon, first_word_policy=self.first_word_policy)
        match = match_keywords(keywords, resume)
        impact = analyze_impact(resume, self.lexicon)
        spelling = check_spelling(resume, self.lexicon)
        formatting = check_formatting(resume)

        result = aggregate(match, impact, spelling, formatting, self.lexicon)
        logger.info(
            "resume_review_completed score=%s keywords=%s/%s quantified=%s/%s spelling_errors=%s email=%s profile_link=%s",
            result.score,
            match.matched_count,
            match.extracted_count,
            impact.quantified_count,
            impact.significant_count,
            spelling.error_count,
            formatting.has_email,
            formatting.has_profile_link,
        )
        return result
