import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_fit.schemas import ResumeData  # noqa: E402
from resume_fit.scoring.calculator import (  # noqa: E402
    NEUTRAL_KEYWORD_SCORE,
    calculate_action_verbs_score,
    calculate_completeness_score,
    calculate_length_score,
    calculate_metrics_score,
    calculate_resume_score,
    keyword_universe,
    match_keywords_to_sections,
)

JD_TEXT = "Senior backend engineer: Python, Docker, Kubernetes, PostgreSQL, Kafka, Terraform, AWS."

PRESENT_KEYWORDS = [
    "python",
    "docker",
    "kubernetes",
    "postgresql",
    "kafka",
    "terraform",
    "aws",
    "grafana",
    "redis",
    "graphql",
]


def _resume(keywords: list[str] | None = None) -> ResumeData:
    terms = " ".join(keywords or ["general", "tooling"])
    return ResumeData.model_validate(
        {
            "id": "resume-1",
            "about": (
                f"Backend engineer with eight years building reliable services using {terms} "
                "for payments and logistics teams across three continents"
            ),
            "experiences": [
                {
                    "id": "exp-1",
                    "role": "Senior Engineer",
                    "company": "Acme",
                    "descriptions": [
                        {"content": f"Built event pipelines with {terms} handling 2M events per day"},
                        {"content": "Reduced p99 latency by 40% across checkout services"},
                        {"content": "Led migration of 12 services to containers"},
                        {"content": "Mentored 5 engineers through promotion cycles"},
                    ],
                },
                {
                    "id": "exp-2",
                    "role": "Engineer",
                    "company": "Globex",
                    "descriptions": [
                        {"content": "Designed billing APIs serving 300 merchants"},
                        {"content": "Automated 80% of release checks"},
                        {"content": "Improved test coverage from 45% to 90%"},
                    ],
                },
                {
                    "id": "exp-3",
                    "role": "Junior Engineer",
                    "company": "Initech",
                    "descriptions": [
                        {"content": "Shipped 20 internal dashboards"},
                        {"content": "Fixed 150 production bugs"},
                        {"content": "Monitored 30 nightly jobs"},
                    ],
                },
            ],
            "education": [{"degree": "BSc Computer Science", "school": "State University"}],
            "skills": [{"name": name} for name in (keywords or ["general", "tooling"])]
            + [{"name": "Linux"}, {"name": "Git"}],
        }
    )


class CalculatorTests(unittest.TestCase):
    def test_empty_resume_without_job(self):
        scores = calculate_resume_score(ResumeData())
        self.assertEqual(scores.keyword, NEUTRAL_KEYWORD_SCORE)
        self.assertEqual(scores.metrics, 0)
        self.assertEqual(scores.action_verbs, 0)
        self.assertEqual(scores.length, 0)
        self.assertEqual(scores.completeness, 0)
        self.assertEqual(scores.overall, 0)
        self.assertEqual(scores.keyword_matches, [])

    def test_null_list_columns_load_as_empty(self):
        resume = ResumeData.model_validate(
            {
                "about": "Engineer",
                "experiences": [{"role": "Engineer", "company": "Acme", "descriptions": None}],
                "education": None,
                "skills": None,
            }
        )
        self.assertEqual(resume.experiences[0].descriptions, [])
        self.assertEqual(resume.education, [])
        self.assertEqual(resume.skills, [])
        self.assertEqual(ResumeData.model_validate({"experiences": None}).experiences, [])

        scores = calculate_resume_score(resume, JD_TEXT, ["python"])
        self.assertEqual(scores.metrics, 0)
        self.assertEqual(scores.completeness, 45)

    def test_keyword_context_missing_falls_back_to_neutral_keyword(self):
        resume = _resume(PRESENT_KEYWORDS)
        no_keywords = calculate_resume_score(resume, JD_TEXT, None, None)
        no_job = calculate_resume_score(resume, None, PRESENT_KEYWORDS, ["python"])
        blank_job = calculate_resume_score(resume, "   ", PRESENT_KEYWORDS)
        baseline = calculate_resume_score(resume)

        for scores in (no_keywords, no_job, blank_job):
            self.assertEqual(scores.keyword, NEUTRAL_KEYWORD_SCORE)
            self.assertEqual(scores.keyword_matches, [])
            self.assertEqual(scores.overall, baseline.overall)

    def test_pure_and_does_not_mutate_input(self):
        resume = _resume(PRESENT_KEYWORDS)
        before = resume.model_dump()
        first = calculate_resume_score(resume, JD_TEXT, PRESENT_KEYWORDS, ["python", "docker"])
        second = calculate_resume_score(resume, JD_TEXT, PRESENT_KEYWORDS, ["python", "docker"])
        self.assertEqual(first, second)
        self.assertEqual(resume.model_dump(), before)

    def test_present_keywords_score_higher_than_absent(self):
        with_keywords = calculate_resume_score(_resume(PRESENT_KEYWORDS), JD_TEXT, PRESENT_KEYWORDS, ["python", "docker"])
        without_keywords = calculate_resume_score(_resume(), JD_TEXT, PRESENT_KEYWORDS, ["python", "docker"])

        self.assertEqual(with_keywords.keyword, 100)
        self.assertTrue(all(match.status == "full" for match in with_keywords.keyword_matches))
        self.assertEqual(without_keywords.keyword, 0)
        self.assertGreater(with_keywords.overall, without_keywords.overall)
        for scores in (with_keywords, without_keywords):
            self.assertGreaterEqual(scores.overall, 0)
            self.assertLessEqual(scores.overall, 100)

    def test_primary_keywords_weigh_more(self):
        resume = ResumeData.model_validate(
            {
                "about": "Python engineer",
                "experiences": [{"role": "Engineer", "company": "Acme", "descriptions": [{"content": "Built Python services"}]}],
            }
        )
        keywords = ["python", "docker", "kubernetes"]
        no_primary = calculate_resume_score(resume, JD_TEXT, keywords)
        matched_primary = calculate_resume_score(resume, JD_TEXT, keywords, ["python"])
        missing_primary = calculate_resume_score(resume, JD_TEXT, keywords, ["docker"])

        self.assertGreater(matched_primary.keyword, no_primary.keyword)
        self.assertGreater(no_primary.keyword, missing_primary.keyword)
        flags = {match.keyword: match.is_primary for match in matched_primary.keyword_matches}
        self.assertEqual(flags, {"python": True, "docker": False, "kubernetes": False})

    def test_section_matching_statuses(self):
        resume = ResumeData.model_validate(
            {
                "about": "Python engineer building data platforms for analysts",
                "experiences": [
                    {
                        "role": "Engineer",
                        "company": "Acme",
                        "descriptions": [{"content": "Built Python services handling 2M requests"}],
                    }
                ],
                "skills": [{"name": "Python"}, {"name": "SQL"}],
            }
        )
        matches = match_keywords_to_sections(resume, ["Python", "sql", "docker", "data platforms"])
        by_keyword = {match.keyword: match for match in matches}

        self.assertEqual(by_keyword["Python"].status, "full")
        self.assertEqual(by_keyword["Python"].sections, ["Summary", "Acme", "Skills"])
        self.assertEqual(by_keyword["sql"].status, "partial")
        self.assertEqual(by_keyword["sql"].score, 0.6)
        self.assertEqual(by_keyword["docker"].status, "missing")
        self.assertEqual(by_keyword["docker"].section_count, 0)
        self.assertEqual(by_keyword["data platforms"].sections, ["Summary"])

    def test_keyword_universe_appends_unlisted_primaries(self):
        self.assertEqual(
            keyword_universe(["Python", "AWS"], ["aws", "Terraform", ""]),
            ["Python", "AWS", "Terraform"],
        )
        self.assertEqual(keyword_universe(None, None), [])

    def test_bullet_dimensions(self):
        resume = ResumeData.model_validate(
            {
                "experiences": [
                    {
                        "role": "Engineer",
                        "company": "Acme",
                        "descriptions": [
                            {"content": "- Increased revenue by 20%"},
                            {"content": "Responsible for on-call rotation"},
                        ],
                    }
                ]
            }
        )
        self.assertEqual(calculate_metrics_score(resume), 90)
        self.assertEqual(calculate_action_verbs_score(resume), 64)

    def test_length_and_completeness_for_full_resume(self):
        resume = _resume(PRESENT_KEYWORDS)
        # 3 roles, 10 bullets, 12 skills; summary is longer than 100 chars.
        self.assertGreaterEqual(calculate_length_score(resume), 95)
        self.assertEqual(calculate_completeness_score(resume), 100)
        self.assertEqual(calculate_completeness_score(ResumeData(about="Hi")), 25)


if __name__ == "__main__":
    unittest.main()
