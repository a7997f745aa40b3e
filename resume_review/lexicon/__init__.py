from functools import lru_cache

from resume_review.core.config import settings
from resume_review.schemas.lexicon import LexiconSet

from .local_lexicon import LexiconError, load_lexicon


@lru_cache(maxsize=1)
def get_default_lexicon() -> LexiconSet:
    return load_lexicon(settings.lexicon_path)


__all__ = ["LexiconError", "LexiconSet", "get_default_lexicon", "load_lexicon"]
