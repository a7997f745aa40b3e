from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_review.lexicon import load_lexicon  # noqa: E402
from resume_review.services.review_service import ResumeReviewer  # noqa: E402
from resume_review.services.suggestion_renderer import render_suggestions  # noqa: E402


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8", errors="replace")


def main() -> None:
    parser = argparse.ArgumentParser(description="Score a plain-text resume against a job description.")
    parser.add_argument("job_description", help="Path to the job description (.txt)")
    parser.add_argument("resume", help="Path to the resume (.txt)")
    parser.add_argument("--lexicon", default=None, help="Alternate lexicon YAML file")
    parser.add_argument("--markup", choices=("html", "plain"), default="plain")
    parser.add_argument(
        "--first-word-policy",
        choices=("reject", "accept"),
        default="reject",
        help="Whether capitalized words opening a JD line count as keywords",
    )
    args = parser.parse_args()

    lexicon = load_lexicon(args.lexicon)
    reviewer = ResumeReviewer(lexicon, first_word_policy=args.first_word_policy)
    result = reviewer.review(_read_text(args.job_description), _read_text(args.resume))

    output = result.model_dump(mode="json")
    output["rendered"] = render_suggestions(
        result.suggestions,
        markup=args.markup,
        target_variant=lexicon.target_variant,
    )
    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
