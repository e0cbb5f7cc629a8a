import sys
import unittest
from io import BytesIO
from pathlib import Path

from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.parsing import extract_text  # noqa: E402


def _blank_pdf(pages: int) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=200, height=200)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class TextExtractionTests(unittest.TestCase):
    def test_txt_is_decoded_as_utf8(self):
        content = "Ayşe Yılmaz\n- Python, SQL\n".encode("utf-8")
        extracted = extract_text("cv.txt", content)

        self.assertEqual(extracted.source_type, "text")
        self.assertEqual(extracted.text, "Ayşe Yılmaz\n- Python, SQL\n")
        self.assertEqual(extracted.chars, len(extracted.text))

    def test_non_utf8_bytes_still_decode(self):
        extracted = extract_text("CV.TXT", "Café".encode("latin-1"))
        self.assertTrue(extracted.text)

    def test_pdf_reports_progress_per_page(self):
        progress: list[tuple[int, int]] = []
        extracted = extract_text("cv.pdf", _blank_pdf(2), on_progress=lambda page, total: progress.append((page, total)))

        self.assertEqual(extracted.source_type, "pdf")
        self.assertEqual(extracted.pages, 2)
        self.assertEqual(progress, [(1, 2), (2, 2)])
        self.assertEqual(extracted.text, "")
        self.assertIn("No extractable text found in PDF.", extracted.warnings)

    def test_broken_pdf_raises_value_error(self):
        with self.assertRaises(ValueError):
            extract_text("cv.pdf", b"definitely not a pdf")

    def test_unsupported_extension(self):
        with self.assertRaises(ValueError):
            extract_text("cv.docx", b"PK\x03\x04")


if __name__ == "__main__":
    unittest.main()
