"""AI-powered resume analysis on top of the remote inference client."""

from pathlib import Path
from typing import ClassVar

from resume_analyzer.analysis.models import (
    AnalysisReport,
    AtsScore,
    ExperienceLevel,
    InternshipSuggestions,
    InterviewQuestions,
)
from resume_analyzer.analysis.prompt_loader import load_json_schema, load_prompt_template
from resume_analyzer.analysis.validator import (
    build_ats_score,
    build_internship_suggestions,
    build_interview_questions,
)
from resume_analyzer.inference.client import RemoteInferenceClient
from resume_analyzer.inference.models import InferenceRequest
from resume_analyzer.logging.logger import Log


class ResumeAnalyzer:
    """Scores a resume, suggests internships and drafts interview questions."""

    EXPERIENCE_CONTEXT: ClassVar[dict[str, dict[ExperienceLevel, str]]] = {
        "ats_score": {
            ExperienceLevel.FRESHER: (
                "This is a FRESHER/ENTRY-LEVEL candidate. Adjust your expectations "
                "accordingly but still be brutally honest about their readiness."
            ),
            ExperienceLevel.EXPERIENCED: (
                "This is an EXPERIENCED candidate. Hold them to higher standards "
                "and expect more from their resume."
            ),
        },
        "internship_suggestions": {
            ExperienceLevel.FRESHER: (
                "This is a FRESHER/ENTRY-LEVEL candidate. Focus on entry-level internships, "
                "basic skill requirements, and learning opportunities."
            ),
            ExperienceLevel.EXPERIENCED: (
                "This is an EXPERIENCED candidate. Focus on advanced internships, "
                "leadership roles, and specialized positions."
            ),
        },
        "interview_questions": {
            ExperienceLevel.FRESHER: (
                "This is a FRESHER/ENTRY-LEVEL candidate. Focus on basic technical skills, "
                "learning ability, problem-solving fundamentals, and potential."
            ),
            ExperienceLevel.EXPERIENCED: (
                "This is an EXPERIENCED candidate. Focus on advanced technical skills, "
                "leadership, system design, and deep domain knowledge."
            ),
        },
    }

    def __init__(
        self,
        client: RemoteInferenceClient,
        *,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._templates = {
            name: load_prompt_template(name, prompt_dir) for name in self.EXPERIENCE_CONTEXT
        }
        self._schemas = {
            name: load_json_schema(name, prompt_dir) for name in self.EXPERIENCE_CONTEXT
        }

    def score_resume(
        self,
        resume: str,
        job_description: str,
        level: ExperienceLevel,
    ) -> AtsScore:
        data = self._invoke("ats_score", level, resume=resume, job_description=job_description)
        result = build_ats_score(data)
        Log.info(f"ATS score: {result.score:g}")
        return result

    def suggest_internships(self, resume: str, level: ExperienceLevel) -> InternshipSuggestions:
        data = self._invoke("internship_suggestions", level, resume=resume)
        result = build_internship_suggestions(data)
        Log.info(f"Internship suggestions: {len(result.qualified_internships)} roles")
        return result

    def generate_interview_questions(
        self,
        resume: str,
        job_description: str,
        level: ExperienceLevel,
    ) -> InterviewQuestions:
        data = self._invoke(
            "interview_questions", level, resume=resume, job_description=job_description
        )
        result = build_interview_questions(data)
        Log.info(f"Interview questions: {len(result.brutal_questions)} generated")
        return result

    def analyze(
        self,
        resume: str,
        job_description: str,
        level: ExperienceLevel | str,
    ) -> AnalysisReport:
        """Run all three analyses for one resume / job description pair.

        Raises:
            ValueError: if the resume or job description is blank, or the
                level is unknown.
            InferenceError: if any remote call fails.
        """
        if not resume.strip():
            raise ValueError("Resume text is empty")
        if not job_description.strip():
            raise ValueError("Job description is empty")
        level = ExperienceLevel(level)

        return AnalysisReport(
            level=level,
            ats=self.score_resume(resume, job_description, level),
            internships=self.suggest_internships(resume, level),
            interview=self.generate_interview_questions(resume, job_description, level),
        )

    def _invoke(
        self,
        name: str,
        level: ExperienceLevel,
        **fields: str,
    ) -> dict[str, object]:
        prompt = self._templates[name].format(
            experience_context=self.EXPERIENCE_CONTEXT[name][level],
            **fields,
        )
        Log.debug(f"{name} prompt:\n{prompt}")
        request = InferenceRequest(
            name=name,
            prompt=prompt,
            response_schema=self._schemas[name],
        )
        return self._client.invoke(request)
