from __future__ import annotations

import html
from typing import Any

from resume_review.schemas.review import CategoryId, MarkupMode, Suggestion

_CATEGORY_TITLES: dict[CategoryId, str] = {
    "ats_keywords": "Job Description Alignment (ATS)",
    "impact": "Impact & XYZ Formula (Manager View)",
    "formatting": "Formatting & Structure",
    "localization": "Language & Tone ({target} English)",
}


def category_title(category: CategoryId, *, target_variant: str = "AU") -> str:
    return _CATEGORY_TITLES[category].format(target=target_variant)


class _Markup:
    def __init__(self, mode: MarkupMode) -> None:
        self.mode = mode

    def text(self, value: Any) -> str:
        value = str(value)
        return html.escape(value, quote=False) if self.mode == "html" else value

    def strong(self, value: str) -> str:
        return f"<strong>{value}</strong>" if self.mode == "html" else value

    def em(self, value: str) -> str:
        return f"<em>{value}</em>" if self.mode == "html" else value

    def highlight(self, value: str) -> str:
        return f'<span class="highlight">{value}</span>' if self.mode == "html" else value


def _render_one(suggestion: Suggestion, m: _Markup) -> str:
    params = suggestion.params
    code = suggestion.code

    if code == "missing_keywords":
        terms = m.text(", ".join(params.get("keywords", [])))
        return (
            f"{m.strong('Missing Key Terms:')} Your resume is missing potential high-value keywords "
            f"found in the JD. Consider integrating: {m.highlight(terms)}."
        )
    if code == "keywords_aligned":
        return "Great job! Your resume matches the key terminology found in the Job Description."
    if code == "no_keywords_detected":
        return (
            f"{m.strong('No Key Terms Detected:')} The job description does not name specific tools "
            "or technologies, so keyword alignment could not be measured."
        )
    if code == "low_metric_density":
        formula = m.em('"Accomplished [X] as measured by [Y], by doing [Z]"')
        return (
            f"{m.strong('Lack of Quantifiable Metrics:')} Managers need ROI. You only have "
            f"{int(params.get('quantified_count', 0))} sentences with clear metrics. "
            f"Use the Google formula: {formula}."
        )
    if code == "weak_action_verbs":
        example = m.em(f'"{m.text(params.get("example", ""))}..."')
        verbs = m.highlight(m.text(", ".join(params.get("strong_verbs", []))))
        return (
            f'{m.strong("Weak Action Verbs:")} Replace passive phrases like "Helped" or "Worked on" '
            f"with strong drivers. Found in: {example}. Try: {verbs}."
        )
    if code == "missing_email":
        return f"{m.strong('Contact Info:')} Could not detect an email address."
    if code == "missing_profile_link":
        return f"{m.strong('Social Proof:')} LinkedIn URL missing. 95% of recruiters check LinkedIn."
    if code == "regional_spelling":
        source = m.text(params.get("source_variant", "US"))
        target = m.text(params.get("target_variant", "AU"))
        examples = m.highlight(m.text(", ".join(params.get("examples", []))))
        return (
            f"{m.strong(f'{source} vs {target} Spelling:')} Detected {source} spelling. "
            f"For {target} applications, switch: {examples}."
        )
    raise ValueError(f"Unknown suggestion code: {code}")


def render_suggestions(
    suggestions: dict[CategoryId, list[Suggestion]],
    *,
    markup: MarkupMode = "html",
    target_variant: str = "AU",
) -> dict[str, list[str]]:
    """Turn structured suggestions into display strings keyed by category title."""
    m = _Markup(markup)
    rendered: dict[str, list[str]] = {}
    for category, items in suggestions.items():
        if not items:
            continue
        rendered[category_title(category, target_variant=target_variant)] = [_render_one(item, m) for item in items]
    return rendered
