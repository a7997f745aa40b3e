from __future__ import annotations

import re
from typing import Callable

from resume_review.schemas.lexicon import LexiconSet
from resume_review.schemas.review import ImpactReport, MetricRuleName, SentenceUnit, WeakExample

MIN_SIGNIFICANT_CHARS = 30
MAX_WEAK_EXAMPLES = 2

_UNIT_SPLIT_RE = re.compile(r"[.!?]+(?=\s|$)|\n+")

# A range stands alone: not part of a longer dash-joined chain such as a phone number.
_RANGE_RE = re.compile(r"(?<![\w-])(?<!\d\.)(\d+)\s?(?:-|–|—|to)\s?(\d+)(?![\w-])(?!\.\d)")
_YEAR_RE = re.compile(r"^(?:19|20)\d{2}$")


def _is_year_span(low: str, high: str) -> bool:
    # "2019 - 2021" and "2019-21" are employment dates, not results.
    return bool(_YEAR_RE.match(low)) and (bool(_YEAR_RE.match(high)) or len(high) == 2)


def _has_numeric_range(unit: str) -> bool:
    return any(not _is_year_span(low, high) for low, high in _RANGE_RE.findall(unit))


# Ordered: the first rule that fires names the metric of a unit.
_METRIC_RULES: tuple[tuple[MetricRuleName, Callable[[str], object]], ...] = (
    ("percentage", re.compile(r"\d+(?:[.,]\d+)?\s?%").search),
    ("currency", re.compile(r"[$€£¥₹]\s?\d").search),
    ("magnitude", re.compile(r"\b\d+(?:[.,]\d+)?\s?(?:k|K|M|B|bn)\b").search),
    ("multiplier", re.compile(r"\b\d+(?:[.,]\d+)?\s?[xX]\b").search),
    ("range", _has_numeric_range),
    ("number_plus", re.compile(r"\b\d+\+").search),
)


def split_units(text: str) -> list[str]:
    return [part.strip() for part in _UNIT_SPLIT_RE.split(text or "") if part and part.strip()]


def is_significant(unit: str) -> bool:
    return len(unit.strip()) > MIN_SIGNIFICANT_CHARS


def find_metric_rule(unit: str) -> MetricRuleName | None:
    for name, predicate in _METRIC_RULES:
        if predicate(unit):
            return name
    return None


def find_weak_phrase(unit: str, weak_verbs: tuple[str, ...]) -> str | None:
    lowered = unit.lower()
    for phrase in weak_verbs:
        needle = r"\s+".join(re.escape(part) for part in phrase.lower().split())
        if not needle:
            continue
        if re.search(rf"(?<!\w){needle}(?!\w)", lowered):
            return phrase
    return None


def classify_unit(unit: str, lexicon: LexiconSet) -> SentenceUnit:
    metric_rule = find_metric_rule(unit)
    if metric_rule is not None:
        return SentenceUnit(text=unit, classification="quantified", metric_rule=metric_rule)

    weak_phrase = find_weak_phrase(unit, lexicon.weak_verbs)
    if weak_phrase is not None:
        return SentenceUnit(text=unit, classification="weak", weak_phrase=weak_phrase)

    return SentenceUnit(text=unit, classification="neutral")


def analyze_impact(resume_text: str, lexicon: LexiconSet) -> ImpactReport:
    """Measure how many résumé claims carry a number (the XYZ formula) and find weak verbs."""
    units = [classify_unit(unit, lexicon) for unit in split_units(resume_text) if is_significant(unit)]

    quantified_count = sum(1 for unit in units if unit.classification == "quantified")
    weak_examples = [
        WeakExample(text=unit.text, phrase=unit.weak_phrase or "")
        for unit in units
        if unit.classification == "weak"
    ][:MAX_WEAK_EXAMPLES]

    return ImpactReport(
        quantified_count=quantified_count,
        significant_count=len(units),
        weak_examples=weak_examples,
        density_ratio=quantified_count / max(1, len(units)),
        units=units,
    )
