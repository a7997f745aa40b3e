from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LexiconSet(BaseModel):
    """Read-only dictionaries driving keyword, impact and spelling checks."""

    model_config = ConfigDict(frozen=True)

    source_variant: str = "US"
    target_variant: str = "AU"
    strong_verbs: tuple[str, ...] = ()
    weak_verbs: tuple[str, ...] = ()
    spelling_map: dict[str, str] = Field(default_factory=dict)
    noise_words: frozenset[str] = frozenset()
    capitalized_stopwords: frozenset[str] = frozenset()

    @field_validator("strong_verbs", "weak_verbs")
    @classmethod
    def _strip_verbs(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(item.strip() for item in value if item and item.strip())

    @field_validator("spelling_map")
    @classmethod
    def _normalize_spelling_map(cls, value: dict[str, str]) -> dict[str, str]:
        cleaned: dict[str, str] = {}
        for source, target in value.items():
            key = str(source).strip().lower()
            if key and key not in cleaned:
                cleaned[key] = str(target).strip()
        return cleaned

    @field_validator("noise_words", "capitalized_stopwords")
    @classmethod
    def _lowercase_word_sets(cls, value: frozenset[str]) -> frozenset[str]:
        return frozenset(item.strip().lower() for item in value if item and item.strip())

    def is_noise(self, token: str) -> bool:
        return token.lower() in self.noise_words

    def is_stopword(self, token: str) -> bool:
        return token.lower() in self.capitalized_stopwords
