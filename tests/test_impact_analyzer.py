import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_review.features.impact_analyzer import (  # noqa: E402
    analyze_impact,
    classify_unit,
    find_metric_rule,
    split_units,
)
from resume_review.lexicon import load_lexicon  # noqa: E402

_PLAIN_LINES = [
    "Maintained the internal billing platform for finance",
    "Coordinated weekly releases with the QA department",
    "Documented onboarding guides for new backend engineers",
    "Reviewed pull requests across three product squads",
    "Migrated legacy cron jobs onto a managed scheduler",
    "Mentored graduates through their first production deploys",
]


class ImpactAnalyzerTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.lexicon = load_lexicon()

    def test_metric_rules_in_order(self):
        self.assertEqual(find_metric_rule("Cut cloud costs by 30% in one year"), "percentage")
        self.assertEqual(find_metric_rule("Closed deals worth $2M each quarter"), "currency")
        self.assertEqual(find_metric_rule("Grew the platform to 10k users"), "magnitude")
        self.assertEqual(find_metric_rule("Made the CI builds 5x faster"), "multiplier")
        self.assertEqual(find_metric_rule("Managed 3-5 engineers at a time"), "range")
        self.assertEqual(find_metric_rule("Served 200+ enterprise clients"), "number_plus")
        self.assertIsNone(find_metric_rule("Owned the deployment pipeline end to end"))

    def test_dates_and_phone_numbers_are_not_ranges(self):
        self.assertIsNone(find_metric_rule("Software Engineer, Acme Corp, 2019 - 2021"))
        self.assertIsNone(find_metric_rule("Data Analyst at Contoso from 2016-18 in Perth"))
        self.assertIsNone(find_metric_rule("Phone 0400-123-456 and Sydney office"))
        self.assertEqual(find_metric_rule("Handled 10 to 15 escalations a day on call"), "range")

    def test_split_keeps_decimal_amounts_together(self):
        units = split_units("Raised $1.5M in seed funding. Shipped v2!\nLed hiring")
        self.assertEqual(units, ["Raised $1.5M in seed funding", "Shipped v2", "Led hiring"])

    def test_density_above_threshold(self):
        metric_lines = [f"Improved conversion on flow {i} by 30% in a quarter" for i in range(4)]
        resume = "\n".join(metric_lines + _PLAIN_LINES)
        report = analyze_impact(resume, self.lexicon)
        self.assertEqual(report.significant_count, 10)
        self.assertEqual(report.quantified_count, 4)
        self.assertAlmostEqual(report.density_ratio, 0.4)

    def test_short_units_are_ignored(self):
        report = analyze_impact("Skills\nPython, SQL\nEmail me\nIncreased revenue 20%", self.lexicon)
        self.assertEqual(report.significant_count, 0)
        self.assertEqual(report.quantified_count, 0)
        self.assertEqual(report.density_ratio, 0.0)

    def test_weak_units_capped_and_quantified_take_precedence(self):
        resume = (
            "Helped grow regional revenue by 20% across the year.\n"
            "I was responsible for the billing system rewrite.\n"
            "Worked on the internal analytics dashboards for sales.\n"
            "Assisted senior staff with quarterly audit preparation.\n"
        )
        report = analyze_impact(resume, self.lexicon)
        self.assertEqual(report.quantified_count, 1)
        self.assertEqual(len(report.weak_examples), 2)
        self.assertEqual(report.weak_examples[0].phrase, "Responsible for")
        self.assertEqual(report.weak_examples[1].phrase, "Worked on")
        self.assertEqual(report.units[0].classification, "quantified")

    def test_classification_is_pure(self):
        unit = "Participated in   design reviews for the payments team"
        first = classify_unit(unit, self.lexicon)
        second = classify_unit(unit, self.lexicon)
        self.assertEqual(first, second)
        self.assertEqual(first.classification, "weak")
        self.assertEqual(first.weak_phrase, "Participated in")

    def test_empty_resume(self):
        report = analyze_impact("", self.lexicon)
        self.assertEqual(report.quantified_count, 0)
        self.assertEqual(report.density_ratio, 0.0)
        self.assertEqual(report.weak_examples, [])


if __name__ == "__main__":
    unittest.main()
