import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_review.schemas.review import Suggestion  # noqa: E402
from resume_review.services.suggestion_renderer import category_title, render_suggestions  # noqa: E402


class SuggestionRendererTests(unittest.TestCase):
    def setUp(self):
        self.suggestions = {
            "ats_keywords": [
                Suggestion(
                    category="ats_keywords",
                    code="missing_keywords",
                    params={"keywords": ["Kubernetes", "<Go>"], "missing_total": 2},
                )
            ],
            "formatting": [
                Suggestion(category="formatting", code="missing_email"),
                Suggestion(category="formatting", code="missing_profile_link"),
            ],
            "localization": [
                Suggestion(
                    category="localization",
                    code="regional_spelling",
                    params={
                        "examples": ["optimize → optimise"],
                        "error_count": 1,
                        "source_variant": "US",
                        "target_variant": "AU",
                    },
                )
            ],
        }

    def test_html_markup_keeps_category_order(self):
        rendered = render_suggestions(self.suggestions, markup="html")
        self.assertEqual(
            list(rendered),
            ["Job Description Alignment (ATS)", "Formatting & Structure", "Language & Tone (AU English)"],
        )
        missing = rendered["Job Description Alignment (ATS)"][0]
        self.assertIn("<strong>Missing Key Terms:</strong>", missing)
        self.assertIn('<span class="highlight">Kubernetes, &lt;Go&gt;</span>', missing)
        self.assertEqual(len(rendered["Formatting & Structure"]), 2)
        self.assertIn("optimize → optimise", rendered["Language & Tone (AU English)"][0])

    def test_plain_markup_has_no_tags(self):
        rendered = render_suggestions(self.suggestions, markup="plain")
        for items in rendered.values():
            for item in items:
                self.assertNotIn("<strong>", item)
                self.assertNotIn("<span", item)
        self.assertIn("Kubernetes, <Go>", rendered["Job Description Alignment (ATS)"][0])

    def test_target_variant_in_title(self):
        self.assertEqual(category_title("localization", target_variant="UK"), "Language & Tone (UK English)")

    def test_empty_categories_are_skipped(self):
        self.assertEqual(render_suggestions({"impact": []}), {})

    def test_unknown_code_raises(self):
        with self.assertRaises(ValueError):
            render_suggestions({"impact": [Suggestion(category="impact", code="mystery")]})


if __name__ == "__main__":
    unittest.main()
