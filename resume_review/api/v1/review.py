from datetime import datetime, timezone
from functools import lru_cache

from fastapi import APIRouter, Header, Request

from resume_review.core.config import settings
from resume_review.core.rate_limit import rate_limit
from resume_review.core.security import check_api_key
from resume_review.schemas.review import ReviewRequest, ReviewResponse
from resume_review.services.review_service import ResumeReviewer
from resume_review.services.suggestion_renderer import render_suggestions

router = APIRouter()


@lru_cache(maxsize=1)
def get_reviewer() -> ResumeReviewer:
    return ResumeReviewer(first_word_policy=settings.first_word_policy)


@router.post("/review", response_model=ReviewResponse)
@rate_limit()
async def review_resume(
    request: Request,
    payload: ReviewRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    reviewer = get_reviewer()
    result = reviewer.review(payload.job_description_text, payload.resume_text)
    return ReviewResponse(
        score=result.score,
        partials=result.partials,
        suggestions=result.suggestions,
        rendered=render_suggestions(
            result.suggestions,
            markup=payload.markup,
            target_variant=reviewer.lexicon.target_variant,
        ),
        generated_at=datetime.now(timezone.utc),
    )
