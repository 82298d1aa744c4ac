from dataclasses import dataclass, field
from enum import Enum


class ExperienceLevel(str, Enum):
    FRESHER = "fresher"
    EXPERIENCED = "experienced"


@dataclass(frozen=True)
class AtsScore:
    """ATS match score and feedback for a resume against a job description."""

    score: float
    harsh_reality: str
    critical_issues: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    ats_killers: list[str] = field(default_factory=list)
    recommendation: str = ""


@dataclass(frozen=True)
class Internship:
    title: str
    description: str
    requirements: str
    competitiveness: str


@dataclass(frozen=True)
class InternshipSuggestions:
    reality_check: str
    qualified_internships: list[Internship] = field(default_factory=list)
    missing_for_internships: list[str] = field(default_factory=list)
    time_to_prepare: str = ""


@dataclass(frozen=True)
class InterviewQuestion:
    question: str
    category: str
    why_this_question: str
    difficulty: str
    red_flags: str


@dataclass(frozen=True)
class InterviewQuestions:
    brutal_questions: list[InterviewQuestion] = field(default_factory=list)
    interview_reality: str = ""
    preparation_advice: str = ""


@dataclass(frozen=True)
class AnalysisReport:
    """Everything produced for one resume / job description pair."""

    level: ExperienceLevel
    ats: AtsScore
    internships: InternshipSuggestions
    interview: InterviewQuestions
