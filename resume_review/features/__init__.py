from .formatting import check_formatting
from .impact_analyzer import analyze_impact, classify_unit, split_units
from .keyword_extractor import classify_token, extract_keywords, is_header_line
from .keyword_matcher import contains_keyword, match_keywords
from .localization import check_spelling

__all__ = [
    "extract_keywords",
    "classify_token",
    "is_header_line",
    "match_keywords",
    "contains_keyword",
    "analyze_impact",
    "classify_unit",
    "split_units",
    "check_spelling",
    "check_formatting",
]
