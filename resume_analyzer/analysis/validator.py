"""Validates decoded model responses and builds the analysis dataclasses."""

from typing import Any

from resume_analyzer.analysis.models import (
    AtsScore,
    Internship,
    InternshipSuggestions,
    InterviewQuestion,
    InterviewQuestions,
)
from resume_analyzer.inference.exceptions import StructuralResponseError


def build_ats_score(data: dict[str, Any]) -> AtsScore:
    """Validate an ATS score response.

    Raises:
        StructuralResponseError: on any missing or mistyped field.
    """
    _require_fields(
        data,
        ("score", "harshReality", "criticalIssues", "missingSkills",
         "strengths", "atsKillers", "recommendation"),
    )
    return AtsScore(
        score=_score(data["score"]),
        harsh_reality=_string(data["harshReality"], "harshReality"),
        critical_issues=_string_list(data["criticalIssues"], "criticalIssues"),
        missing_skills=_string_list(data["missingSkills"], "missingSkills"),
        strengths=_string_list(data["strengths"], "strengths"),
        ats_killers=_string_list(data["atsKillers"], "atsKillers"),
        recommendation=_string(data["recommendation"], "recommendation"),
    )


def build_internship_suggestions(data: dict[str, Any]) -> InternshipSuggestions:
    _require_fields(
        data,
        ("realityCheck", "qualifiedInternships", "missingForInternships", "timeToPrepare"),
    )
    raw = data["qualifiedInternships"]
    if not isinstance(raw, list):
        raise StructuralResponseError("'qualifiedInternships' must be a list")
    internships = [_build_internship(item, i) for i, item in enumerate(raw)]
    return InternshipSuggestions(
        reality_check=_string(data["realityCheck"], "realityCheck"),
        qualified_internships=internships,
        missing_for_internships=_string_list(
            data["missingForInternships"], "missingForInternships"
        ),
        time_to_prepare=_string(data["timeToPrepare"], "timeToPrepare"),
    )


def build_interview_questions(data: dict[str, Any]) -> InterviewQuestions:
    _require_fields(data, ("brutalQuestions", "interviewReality", "preparationAdvice"))
    raw = data["brutalQuestions"]
    if not isinstance(raw, list):
        raise StructuralResponseError("'brutalQuestions' must be a list")
    return InterviewQuestions(
        brutal_questions=[_build_question(item, i) for i, item in enumerate(raw)],
        interview_reality=_string(data["interviewReality"], "interviewReality"),
        preparation_advice=_string(data["preparationAdvice"], "preparationAdvice"),
    )


def _build_internship(raw: Any, index: int) -> Internship:
    prefix = f"qualifiedInternships[{index}]"
    if not isinstance(raw, dict):
        raise StructuralResponseError(f"{prefix} must be an object")
    _require_fields(raw, ("title", "description", "requirements", "competitiveness"), prefix)
    return Internship(
        title=_string(raw["title"], f"{prefix}.title"),
        description=_string(raw["description"], f"{prefix}.description"),
        requirements=_string(raw["requirements"], f"{prefix}.requirements"),
        competitiveness=_string(raw["competitiveness"], f"{prefix}.competitiveness"),
    )


def _build_question(raw: Any, index: int) -> InterviewQuestion:
    prefix = f"brutalQuestions[{index}]"
    if not isinstance(raw, dict):
        raise StructuralResponseError(f"{prefix} must be an object")
    _require_fields(
        raw, ("question", "category", "whyThisQuestion", "difficulty", "redFlags"), prefix
    )
    question = _string(raw["question"], f"{prefix}.question")
    if not question.strip():
        raise StructuralResponseError(f"'{prefix}.question' must be a non-empty string")
    return InterviewQuestion(
        question=question,
        category=_string(raw["category"], f"{prefix}.category"),
        why_this_question=_string(raw["whyThisQuestion"], f"{prefix}.whyThisQuestion"),
        difficulty=_string(raw["difficulty"], f"{prefix}.difficulty"),
        red_flags=_string(raw["redFlags"], f"{prefix}.redFlags"),
    )


def _require_fields(data: dict[str, Any], fields: tuple[str, ...], prefix: str = "") -> None:
    for field in fields:
        if field not in data:
            where = f" in {prefix}" if prefix else ""
            raise StructuralResponseError(f"Missing required field{where}: {field}")


def _score(raw: Any) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise StructuralResponseError("'score' must be a number")
    if not 0 <= raw <= 100:
        raise StructuralResponseError(f"'score' must be between 0 and 100, got {raw}")
    return float(raw)


def _string(raw: Any, name: str) -> str:
    if not isinstance(raw, str):
        raise StructuralResponseError(f"'{name}' must be a string")
    return raw


def _string_list(raw: Any, name: str) -> list[str]:
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise StructuralResponseError(f"'{name}' must be a list of strings")
    return list(raw)
