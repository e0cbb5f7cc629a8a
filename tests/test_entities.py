import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.normalize.entities import (  # noqa: E402
    clean_entities,
    decode_entities,
    normalize_entities,
)
from resume_analyzer.normalize.utils import as_bullet, fold_turkish, mask_pii, strip_bullet  # noqa: E402


class EntityNormalizerTests(unittest.TestCase):
    def test_whitespace_inside_entity_is_collapsed(self):
        self.assertEqual(normalize_entities("Ali& q u o t ;s"), "Ali&quot;s")
        self.assertEqual(normalize_entities("a &#x 27 ; b"), "a &#x27; b")

    def test_normalize_is_idempotent(self):
        once = normalize_entities("x & a m p ; y &l t; z")
        self.assertEqual(normalize_entities(once), once)

    def test_decode_named_and_numeric_entities(self):
        decoded = decode_entities("&lt;b&gt; &amp; &quot;q&quot; &apos;s&apos; &#39; &#x41;&nbsp;!")
        self.assertEqual(decoded, "<b> & \"q\" 's' ' A\u00a0!")

    def test_decode_is_noop_on_literal_text(self):
        text = "Takım çalışması & iletişim; \"net\" ifade."
        self.assertEqual(decode_entities(text), text)
        self.assertEqual(decode_entities(decode_entities(text)), decode_entities(text))

    def test_unknown_and_invalid_entities_pass_through(self):
        self.assertEqual(decode_entities("&unknown; &#0; &#x110000;"), "&unknown; &#0; &#x110000;")

    def test_clean_runs_normalize_before_decode(self):
        self.assertEqual(clean_entities("&q uot;Merhaba&quo t;"), '"Merhaba"')

    def test_none_and_empty_input(self):
        self.assertEqual(clean_entities(None), "")
        self.assertEqual(normalize_entities(""), "")


class TextUtilsTests(unittest.TestCase):
    def test_bullet_helpers_never_double_prefix(self):
        self.assertEqual(as_bullet("- - item"), "- item")
        self.assertEqual(as_bullet("• item"), "- item")
        self.assertEqual(as_bullet("* item"), "- item")
        self.assertEqual(as_bullet("   "), "")
        self.assertEqual(strip_bullet("-item"), "item")

    def test_fold_turkish(self):
        self.assertEqual(fold_turkish("İŞ DENEYİMİ Üniversite Yayın"), "is deneyimi universite yayin")

    def test_mask_pii(self):
        masked = mask_pii(
            "Ayşe Yılmaz\tayse@example.com\n+90 532 123 4567\n\n\n\nhttps://www.linkedin.com/in/ayse"
        )
        self.assertIn("[email]", masked)
        self.assertIn("[phone]", masked)
        self.assertIn("[linkedin]", masked)
        self.assertNotIn("\n\n\n", masked)
        self.assertNotIn("\t", masked)


if __name__ == "__main__":
    unittest.main()
