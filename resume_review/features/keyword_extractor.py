from __future__ import annotations

import re
from typing import Callable, Literal

from resume_review.schemas.lexicon import LexiconSet
from resume_review.schemas.review import FirstWordPolicy

TokenShape = Literal["tech", "capitalized", "other"]

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PREFIX_RE = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
_WORD_SPLIT_RE = re.compile(r"[\s/]+")
_LEADING_STRIP = _BULLET_CHARS + "([{\"'“‘¿¡"
_TRAILING_STRIP = ".,;:!?)]}\"'”’…"

_ACRONYM_RE = re.compile(r"^(?=[A-Z0-9]*[A-Z])[A-Z0-9]{2,}$")
_MIXED_RE = re.compile(r"^[A-Za-z]+[0-9][A-Za-z0-9]*$")
_CAMEL_RE = re.compile(r"^[A-Z][a-z0-9]+(?:[A-Z][A-Za-z0-9]*)+$")
_CAPITALIZED_RE = re.compile(
    r"^[A-ZÀ-ÖØ-Þ][a-zß-öø-ÿ0-9]*(?:\.[a-zß-öø-ÿ0-9]+)*(?:\+\+|#)?$"
)
_NON_ALNUM_RE = re.compile(r"[\W_]+")


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PREFIX_RE.sub("", line).strip()


def clean_token(word: str) -> str:
    return word.lstrip(_LEADING_STRIP).rstrip(_TRAILING_STRIP)


def is_header_line(line: str) -> bool:
    """Section headers like "Requirements:" or "ABOUT US" carry structure, not skills."""
    stripped = line.strip()
    if not stripped:
        return False
    if stripped.endswith(":"):
        return True
    return stripped.isupper() and len(stripped.split()) < 4


def _is_tech_shape(token: str) -> bool:
    return bool(_ACRONYM_RE.match(token) or _MIXED_RE.match(token) or _CAMEL_RE.match(token))


def _is_capitalized(token: str) -> bool:
    return bool(_CAPITALIZED_RE.match(token))


_TOKEN_RULES: tuple[tuple[TokenShape, Callable[[str], bool]], ...] = (
    ("tech", _is_tech_shape),
    ("capitalized", _is_capitalized),
)


def classify_token(token: str) -> TokenShape:
    for shape, predicate in _TOKEN_RULES:
        if predicate(token):
            return shape
    return "other"


def is_valid_keyword(token: str, lexicon: LexiconSet) -> bool:
    core = _NON_ALNUM_RE.sub("", token)
    if len(core) < 2:
        return False
    if core.isdigit():
        return False
    return not lexicon.is_noise(token)


def accept_token(
    token: str,
    lexicon: LexiconSet,
    *,
    is_first: bool,
    first_word_policy: FirstWordPolicy = "reject",
) -> bool:
    shape = classify_token(token)
    if shape == "other":
        return False
    if not is_valid_keyword(token, lexicon):
        return False
    # Function words in any casing ("La", "OR", "US") are grammar, not skills.
    if lexicon.is_stopword(token):
        return False
    if shape == "capitalized" and is_first and first_word_policy == "reject":
        # Bullet lines tend to open with imperative verbs ("Lead", "Crear").
        return False
    return True


def extract_keywords(
    text: str,
    lexicon: LexiconSet,
    *,
    first_word_policy: FirstWordPolicy = "reject",
) -> list[str]:
    """Collect hard-skill candidates from a job description.

    Tool and technology names are recognised by shape: acronyms and
    letter-digit tokens anywhere, capitalized words anywhere but the start of
    a line. Results are deduplicated case-insensitively and keep the order in
    which each token was first accepted.
    """
    accepted: dict[str, str] = {}
    for line in (text or "").splitlines():
        stripped = line.strip()
        if not stripped or is_header_line(stripped):
            continue

        position = 0
        for raw_word in _WORD_SPLIT_RE.split(strip_bullet_prefix(stripped)):
            token = clean_token(raw_word)
            if not token:
                continue
            is_first = position == 0
            position += 1
            if accept_token(token, lexicon, is_first=is_first, first_word_policy=first_word_policy):
                accepted.setdefault(token.lower(), token)

    return list(accepted.values())
