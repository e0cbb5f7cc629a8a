import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Never reach a real model from the API tests.
os.environ.setdefault("PROVIDER", "mock")

from fastapi.testclient import TestClient  # noqa: E402

from resume_analyzer.ai.providers.mock_provider import MockProvider  # noqa: E402
from resume_analyzer.main import app  # noqa: E402

RESUME_TEXT = (
    "Zeynep Kaya\n"
    "Veri Analisti, 02/2021 - Halen\n"
    "SQL, Python ve Tableau ile satış panoları hazırladım; raporlama süresini %40 kısalttım.\n"
    "Boğaziçi Üniversitesi, İstatistik Lisans\n"
)


class AnalysisApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        patcher = patch(
            "resume_analyzer.services.analysis_service.get_provider",
            return_value=MockProvider(),
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_short_text_returns_400_with_turkish_detail(self):
        response = self.client.post("/v1/analyze", json={"text": "çok kısa"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Yetersiz metin. En az 50 karakter sağlayın.")

    def test_analyze_contract_shape(self):
        response = self.client.post("/v1/analyze", json={"text": RESUME_TEXT, "role": "Data Analyst"})
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["provider"], "mock")
        self.assertTrue(body["analysis"].startswith("Kısa Genel Değerlendirme"))
        self.assertIn("Hedef rol: Data Analyst.", body["parsed"]["summary"])
        for key in ("strengths", "weaknesses", "additions"):
            self.assertGreaterEqual(len(body["parsed"][key]), 6, key)
            self.assertTrue(all(item.startswith("- ") for item in body["parsed"][key]))
        self.assertEqual(body["date_check"]["future_ranges"], [])
        self.assertTrue(body["date_check"]["ranges"][0]["end"]["present"])
        self.assertIn("generated_at", body)

    def test_role_is_length_limited(self):
        response = self.client.post("/v1/analyze", json={"text": RESUME_TEXT, "role": "x" * 201})
        self.assertEqual(response.status_code, 422)

    def test_parse_endpoint(self):
        analysis = (
            "Kısa Genel Değerlendirme\nİyi.\n\n"
            "Gelişmeye Açık Alanlar\n- Sertifikalar eklenebilir\n"
        )
        response = self.client.post("/v1/parse", json={"analysis": analysis})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["summary"], "İyi.")
        self.assertEqual(body["weaknesses"], ["- Sertifikalar eklenebilir"])
        self.assertEqual(body["additions"], ["- Geliştirin: Sertifikalar ekleyin."])

    def test_extract_text_from_txt_upload(self):
        response = self.client.post(
            "/v1/extract-text",
            files={"file": ("cv.txt", RESUME_TEXT.encode("utf-8"), "text/plain")},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["source_type"], "text")
        self.assertEqual(body["text"], RESUME_TEXT)

    def test_analyze_file_upload(self):
        response = self.client.post(
            "/v1/analyze/file",
            files={"file": ("cv.txt", RESUME_TEXT.encode("utf-8"), "text/plain")},
            data={"role": "Data Analyst", "mask_pii": "true"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["provider"], "mock")

    def test_unsupported_upload_type_returns_400(self):
        response = self.client.post(
            "/v1/extract-text",
            files={"file": ("cv.docx", b"PK\x03\x04", "application/octet-stream")},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("Unsupported file type", response.json()["detail"])


if __name__ == "__main__":
    unittest.main()
