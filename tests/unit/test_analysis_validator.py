from typing import Any

import pytest

from resume_analyzer.analysis.validator import (
    build_ats_score,
    build_internship_suggestions,
    build_interview_questions,
)
from resume_analyzer.inference.exceptions import StructuralResponseError


def _ats(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "score": 62,
        "harshReality": "Not ready yet.",
        "criticalIssues": ["No metrics"],
        "missingSkills": ["Kubernetes"],
        "strengths": ["Python"],
        "atsKillers": ["Tables in header"],
        "recommendation": "Quantify impact.",
    }
    data.update(overrides)
    return data


def _internships(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "realityCheck": "Competitive.",
        "qualifiedInternships": [
            {
                "title": "Backend Intern",
                "description": "APIs",
                "requirements": "Python",
                "competitiveness": "High",
            }
        ],
        "missingForInternships": ["Cloud"],
        "timeToPrepare": "3 months",
    }
    data.update(overrides)
    return data


def _questions(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "brutalQuestions": [
            {
                "question": "Why did the migration fail?",
                "category": "Experience",
                "whyThisQuestion": "Resume claims it succeeded",
                "difficulty": "Hard",
                "redFlags": "Blaming others",
            }
        ],
        "interviewReality": "Expect depth.",
        "preparationAdvice": "Practice system design.",
    }
    data.update(overrides)
    return data


class TestBuildAtsScore:
    def test_builds_result(self) -> None:
        result = build_ats_score(_ats())
        assert result.score == 62.0
        assert result.missing_skills == ["Kubernetes"]
        assert result.ats_killers == ["Tables in header"]
        assert result.recommendation == "Quantify impact."

    def test_missing_field(self) -> None:
        data = _ats()
        del data["atsKillers"]
        with pytest.raises(StructuralResponseError, match="atsKillers"):
            build_ats_score(data)

    @pytest.mark.parametrize("score", ["80", True, None, -1, 101])
    def test_invalid_score(self, score: Any) -> None:
        with pytest.raises(StructuralResponseError, match="score"):
            build_ats_score(_ats(score=score))

    def test_list_of_non_strings(self) -> None:
        with pytest.raises(StructuralResponseError, match="strengths"):
            build_ats_score(_ats(strengths=[1, 2]))


class TestBuildInternshipSuggestions:
    def test_builds_result(self) -> None:
        result = build_internship_suggestions(_internships())
        assert result.qualified_internships[0].title == "Backend Intern"
        assert result.time_to_prepare == "3 months"

    def test_empty_internship_list_is_valid(self) -> None:
        result = build_internship_suggestions(_internships(qualifiedInternships=[]))
        assert result.qualified_internships == []

    def test_internship_missing_field(self) -> None:
        bad = [{"title": "Intern", "description": "x", "requirements": "y"}]
        with pytest.raises(StructuralResponseError, match=r"qualifiedInternships\[0\]"):
            build_internship_suggestions(_internships(qualifiedInternships=bad))

    def test_internships_not_a_list(self) -> None:
        with pytest.raises(StructuralResponseError, match="must be a list"):
            build_internship_suggestions(_internships(qualifiedInternships={}))


class TestBuildInterviewQuestions:
    def test_builds_result(self) -> None:
        result = build_interview_questions(_questions())
        assert result.brutal_questions[0].why_this_question == "Resume claims it succeeded"
        assert result.preparation_advice == "Practice system design."

    def test_blank_question_rejected(self) -> None:
        bad = _questions()["brutalQuestions"]
        bad[0]["question"] = "  "
        with pytest.raises(StructuralResponseError, match="non-empty"):
            build_interview_questions(_questions(brutalQuestions=bad))

    def test_question_not_an_object(self) -> None:
        with pytest.raises(StructuralResponseError, match="must be an object"):
            build_interview_questions(_questions(brutalQuestions=["why?"]))
