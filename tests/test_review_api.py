import dataclasses
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from resume_review.core import rate_limit, security  # noqa: E402
from resume_review.core.config import settings  # noqa: E402
from resume_review.main import app  # noqa: E402


class ReviewApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.payload = {
            "job_description_text": (
                "About the role\n"
                "Experience with SQL and Kubernetes required.\n"
                "You will build services in Python on AWS.\n"
            ),
            "resume_text": (
                "Jane Doe | jane@example.com\n"
                "Cut warehouse query costs by 40% using SQL and Python.\n"
                "Worked on the internal analytics dashboards for sales.\n"
            ),
        }

    def setUp(self):
        rate_limit.limiter.reset()

    def _post_with_forwarded_for(self, count: int) -> list[int]:
        status_codes = []
        for i in range(count):
            response = self.client.post(
                "/v1/review",
                json=self.payload,
                headers={"X-Forwarded-For": f"10.0.0.{i}"},
            )
            status_codes.append(response.status_code)
        return status_codes

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["lexicon"]["target_variant"], "AU")

    def test_review_contract_shape(self):
        response = self.client.post("/v1/review", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertGreaterEqual(body["score"], 0)
        self.assertLessEqual(body["score"], 100)
        self.assertEqual(set(body["partials"]), {"keywords", "impact", "localization", "formatting"})
        self.assertEqual(list(body["suggestions"]), ["ats_keywords", "impact", "formatting"])
        self.assertIn("Job Description Alignment (ATS)", body["rendered"])
        self.assertIn("<strong>", body["rendered"]["Formatting & Structure"][0])
        self.assertIn("generated_at", body)

        missing = body["suggestions"]["ats_keywords"][0]
        self.assertEqual(missing["code"], "missing_keywords")
        self.assertEqual(missing["params"]["keywords"], ["Kubernetes", "AWS"])

    def test_plain_markup(self):
        payload = dict(self.payload, markup="plain")
        response = self.client.post("/v1/review", json=payload)
        self.assertEqual(response.status_code, 200)
        rendered = response.json()["rendered"]
        self.assertNotIn("<strong>", rendered["Formatting & Structure"][0])

    def test_short_inputs_are_rejected(self):
        payload = dict(self.payload, resume_text="Too short")
        response = self.client.post("/v1/review", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_protected_mode_requires_api_key(self):
        protected = dataclasses.replace(security.settings, review_auth_mode="protected", api_key="secret-key")
        with patch.object(security, "settings", protected):
            denied = self.client.post("/v1/review", json=self.payload)
            allowed = self.client.post("/v1/review", json=self.payload, headers={"X-API-Key": "secret-key"})
        self.assertEqual(denied.status_code, 401)
        self.assertEqual(allowed.status_code, 200)

    @unittest.skipUnless(settings.rate_limit_enabled, "rate limiting disabled")
    def test_spoofed_forwarded_for_does_not_bypass_rate_limit(self):
        status_codes = self._post_with_forwarded_for(40)
        self.assertIn(429, status_codes)

    @unittest.skipUnless(settings.rate_limit_enabled, "rate limiting disabled")
    def test_forwarded_for_is_used_behind_trusted_proxy(self):
        trusted = dataclasses.replace(rate_limit.settings, trust_x_forwarded_for=True)
        with patch.object(rate_limit, "settings", trusted):
            status_codes = self._post_with_forwarded_for(40)
        self.assertEqual(set(status_codes), {200})


if __name__ == "__main__":
    unittest.main()
