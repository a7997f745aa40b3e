from __future__ import annotations

import re

from resume_review.schemas.review import FormattingReport

_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_PROFILE_LINK_RE = re.compile(r"linkedin\.com", re.IGNORECASE)


def check_formatting(resume_text: str) -> FormattingReport:
    text = resume_text or ""
    return FormattingReport(
        has_email=bool(_EMAIL_RE.search(text)),
        has_profile_link=bool(_PROFILE_LINK_RE.search(text)),
    )
