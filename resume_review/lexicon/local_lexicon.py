from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from resume_review.schemas.lexicon import LexiconSet

logger = logging.getLogger(__name__)

_DEFAULT_LEXICON_PATH = Path(__file__).with_name("lexicon.yaml")


class LexiconError(RuntimeError):
    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


def _read_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise LexiconError(f"Lexicon file not found at '{path}'.", path=path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LexiconError(f"Failed to read lexicon file '{path}': {exc}", path=path) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise LexiconError(f"Invalid YAML in lexicon file '{path}': {exc}", path=path) from exc

    if not isinstance(parsed, dict):
        raise LexiconError(
            f"Invalid lexicon file '{path}': expected a top-level mapping.",
            path=path,
        )
    return parsed


def load_lexicon(path: str | Path | None = None) -> LexiconSet:
    """Load a lexicon YAML file; the bundled lexicon.yaml is used when no path is given."""
    lexicon_path = Path(path) if path else _DEFAULT_LEXICON_PATH
    data = _read_mapping(lexicon_path)

    try:
        lexicon = LexiconSet.model_validate(data)
    except ValidationError as exc:
        raise LexiconError(f"Invalid lexicon file '{lexicon_path}': {exc}", path=lexicon_path) from exc

    logger.info(
        "lexicon_loaded path=%s spelling_entries=%s noise_words=%s",
        lexicon_path,
        len(lexicon.spelling_map),
        len(lexicon.noise_words),
    )
    return lexicon
