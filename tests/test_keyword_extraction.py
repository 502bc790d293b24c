import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_fit.keywords.extract import KEYWORD_CAP, MISSING_CAP, extract_keywords  # noqa: E402


class KeywordExtractionTests(unittest.TestCase):
    def test_empty_inputs(self):
        result = extract_keywords("", "")
        self.assertEqual(result.resume_keywords, [])
        self.assertEqual(result.jd_keywords, [])
        self.assertEqual(result.missing_in_resume, [])

        result = extract_keywords(None, None)
        self.assertEqual(result.model_dump(), {"resume_keywords": [], "jd_keywords": [], "missing_in_resume": []})

    def test_ranked_by_frequency_with_first_seen_ties(self):
        result = extract_keywords("python python sql", "sql sql python docker kubernetes")
        self.assertEqual(result.resume_keywords, ["python", "sql"])
        self.assertEqual(result.jd_keywords, ["sql", "python", "docker", "kubernetes"])
        self.assertEqual(result.missing_in_resume, ["docker", "kubernetes"])

    def test_caps_and_missing_subset(self):
        jd_text = " ".join(f"skill{index:02d}" for index in range(60))
        resume_text = "skill03 skill07"
        result = extract_keywords(resume_text, jd_text)

        self.assertEqual(len(result.jd_keywords), KEYWORD_CAP)
        self.assertEqual(result.jd_keywords[0], "skill00")
        self.assertLessEqual(len(result.missing_in_resume), MISSING_CAP)
        self.assertEqual(len(result.missing_in_resume), MISSING_CAP)
        for keyword in result.missing_in_resume:
            self.assertIn(keyword, result.jd_keywords)
            self.assertNotIn(keyword, result.resume_keywords)
        self.assertNotIn("skill03", result.missing_in_resume)
        self.assertEqual(result.missing_in_resume[:3], ["skill00", "skill01", "skill02"])

    def test_deterministic(self):
        resume = "Led platform migration with Terraform and AWS; reduced cost 30%"
        jd = "Looking for AWS, Terraform, Kubernetes and platform experience"
        self.assertEqual(extract_keywords(resume, jd), extract_keywords(resume, jd))


if __name__ == "__main__":
    unittest.main()
