import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_fit.keywords import attach_evidence, classify_term, rank_candidates, tokenize  # noqa: E402


class KeywordPlanTests(unittest.TestCase):
    def test_ranking_order_and_scores(self):
        candidates = rank_candidates(tokenize("python sql roadmap python"), tokenize("python"))

        self.assertEqual([candidate.term for candidate in candidates], ["python", "sql", "roadmap"])
        self.assertAlmostEqual(candidates[0].score, 11.1)
        self.assertEqual(candidates[1].score, 7)
        self.assertEqual(candidates[2].score, 6)

        python = candidates[0]
        self.assertTrue(python.resume_present)
        self.assertEqual(python.resume_freq, 1)
        self.assertEqual(python.jd_tf, 2)
        self.assertEqual(python.where, ["skills", "bullet"])
        self.assertTrue(all(candidate.priority == "nice" for candidate in candidates))

    def test_section_index_lifts_requirements(self):
        candidates = rank_candidates(
            tokenize("python sql roadmap python"),
            [],
            jd_section_index={"roadmap": "requirements", "sql": "responsibilities"},
        )
        self.assertEqual(candidates[0].term, "roadmap")
        self.assertEqual(candidates[0].priority, "critical")
        self.assertEqual(candidates[1].term, "sql")
        self.assertEqual(candidates[1].priority, "important")

    def test_custom_classifier(self):
        candidates = rank_candidates(["widget"], [], type_classifier=lambda term: "metric")
        self.assertEqual(candidates[0].type, "metric")
        self.assertEqual(candidates[0].where, ["bullet"])

    def test_classify_term(self):
        self.assertEqual(classify_term("salesforce"), "tool")
        self.assertEqual(classify_term("experimentation"), "method")
        self.assertEqual(classify_term("fintech"), "domain")
        self.assertEqual(classify_term("churn"), "metric")
        self.assertEqual(classify_term("empathy"), "soft")

    def test_evidence_is_attached_to_copies(self):
        candidates = rank_candidates(tokenize("python sql"), tokenize("python"))
        enriched = attach_evidence(candidates, "Senior   Python developer")

        by_term = {candidate.term: candidate for candidate in enriched}
        self.assertTrue(by_term["python"].evidence.supported)
        self.assertEqual(by_term["python"].evidence.excerpt, "Senior Python developer")
        self.assertFalse(by_term["sql"].evidence.supported)
        self.assertIsNone(by_term["sql"].evidence.excerpt)
        self.assertTrue(all(candidate.evidence is None for candidate in candidates))


if __name__ == "__main__":
    unittest.main()
