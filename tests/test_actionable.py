import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.analysis.actionable import (  # noqa: E402
    ACTION_VERBS,
    GENERIC_LEAD_IN,
    synthesize_additions,
    to_actionable,
)


class ActionableSynthesizerTests(unittest.TestCase):
    def test_passive_phrasing_becomes_imperative(self):
        self.assertEqual(to_actionable("- Sertifikalar eklenebilir"), "- Geliştirin: Sertifikalar ekleyin.")
        self.assertEqual(to_actionable("• Eklenebilir: GitHub linki"), "- ekleyin: GitHub linki.")

    def test_deficiency_words_are_rewritten(self):
        self.assertEqual(to_actionable("Portföy yok"), "- Geliştirin: Portföy ekleyin.")
        self.assertEqual(to_actionable("- Teknik beceriler sınırlı!"), "- Geliştirin: Teknik beceriler güncelleyin!")

    def test_yok_is_rewritten_only_as_a_whole_word(self):
        self.assertEqual(to_actionable("- Referans bilgisi yoktur"), "- Geliştirin: Referans bilgisi yoktur.")
        self.assertEqual(to_actionable("- Yok: GitHub linki"), "- ekleyin: GitHub linki.")

    def test_text_already_starting_with_action_verb_keeps_its_lead(self):
        self.assertEqual(to_actionable("- Belirtin: dil seviyesi."), "- Belirtin: dil seviyesi.")

    def test_unmatched_text_falls_through_to_generic_lead_in(self):
        result = to_actionable("- Zaman yönetimi")
        self.assertEqual(result, f"- {GENERIC_LEAD_IN}Zaman yönetimi.")

    def test_synthesize_caps_at_six_items(self):
        weaknesses = [f"- Eksik alan {i}" for i in range(1, 10)]
        additions = synthesize_additions(weaknesses)

        self.assertEqual(len(additions), 6)
        for item in additions:
            self.assertTrue(item.startswith("- "))
            self.assertFalse(item.startswith("- -"))
            self.assertIn(item[-1], ".!?")
            body = item[2:]
            self.assertTrue(any(body.lower().startswith(verb.lower()) for verb in ACTION_VERBS))

    def test_synthesize_returns_one_item_per_weakness_below_cap(self):
        self.assertEqual(len(synthesize_additions(["- A", "- B"])), 2)
        self.assertEqual(synthesize_additions([]), [])


if __name__ == "__main__":
    unittest.main()
