from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

CategoryId = Literal["ats_keywords", "impact", "formatting", "localization"]
UnitClass = Literal["quantified", "weak", "neutral"]
MetricRuleName = Literal["percentage", "currency", "magnitude", "multiplier", "range", "number_plus"]
MarkupMode = Literal["html", "plain"]
FirstWordPolicy = Literal["reject", "accept"]

CATEGORY_ORDER: tuple[CategoryId, ...] = ("ats_keywords", "impact", "formatting", "localization")


class KeywordMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    extracted_count: int = Field(default=0, ge=0)
    matched: list[str] = Field(default_factory=list)
    matched_count: int = Field(default=0, ge=0)
    missing: list[str] = Field(default_factory=list, max_length=10)
    missing_total: int = Field(default=0, ge=0)


class SentenceUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    classification: UnitClass
    metric_rule: MetricRuleName | None = None
    weak_phrase: str | None = None


class WeakExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    phrase: str


class ImpactReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantified_count: int = Field(default=0, ge=0)
    significant_count: int = Field(default=0, ge=0)
    weak_examples: list[WeakExample] = Field(default_factory=list, max_length=2)
    density_ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    units: list[SentenceUnit] = Field(default_factory=list)


class SpellingReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    error_count: int = Field(default=0, ge=0)
    examples: list[str] = Field(default_factory=list, max_length=5)


class FormattingReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_email: bool = False
    has_profile_link: bool = False


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: CategoryId
    code: str
    params: dict[str, Any] = Field(default_factory=dict)


class ScorePartials(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords: float = Field(ge=0.0, le=35.0)
    impact: float = Field(ge=0.0, le=40.0)
    localization: float = Field(ge=0.0, le=15.0)
    formatting: float = Field(ge=0.0, le=15.0)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    partials: ScorePartials
    suggestions: dict[CategoryId, list[Suggestion]] = Field(default_factory=dict)


class ReviewRequest(BaseModel):
    job_description_text: str = Field(min_length=50, max_length=50000)
    resume_text: str = Field(min_length=50, max_length=50000)
    markup: MarkupMode = "html"


class ReviewResponse(BaseModel):
    score: int = Field(ge=0, le=100)
    partials: ScorePartials
    suggestions: dict[CategoryId, list[Suggestion]]
    rendered: dict[str, list[str]]
    generated_at: datetime
