from fastapi import APIRouter

from resume_review.lexicon import get_default_lexicon

router = APIRouter()

@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    lexicon = get_default_lexicon()
    return {
        "status": "healthy",
        "lexicon": {
            "source_variant": lexicon.source_variant,
            "target_variant": lexicon.target_variant,
            "spelling_entries": len(lexicon.spelling_map),
        },
    }
