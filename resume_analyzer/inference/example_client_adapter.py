"""Example inference client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseInferenceClient and register the provider in InferenceClientFactory.
"""

import json
from typing import ClassVar

from resume_analyzer.inference.client_base import BaseInferenceClient
from resume_analyzer.inference.exceptions import StructuralResponseError
from resume_analyzer.inference.models import InferenceRequest


class ExampleClientAdapter(BaseInferenceClient):
    """Example adapter that returns a fixed valid response per request name.

    No network calls. Useful for local development and tests.
    """

    RESPONSES: ClassVar[dict[str, dict[str, object]]] = {
        "ats_score": {
            "score": 0,
            "harshReality": "Example response: no model was called.",
            "criticalIssues": [],
            "missingSkills": [],
            "strengths": [],
            "atsKillers": [],
            "recommendation": "Configure an inference provider for a real analysis.",
        },
        "internship_suggestions": {
            "realityCheck": "Example response: no model was called.",
            "qualifiedInternships": [],
            "missingForInternships": [],
            "timeToPrepare": "unknown",
        },
        "interview_questions": {
            "brutalQuestions": [],
            "interviewReality": "Example response: no model was called.",
            "preparationAdvice": "Configure an inference provider for real questions.",
        },
    }

    def generate(self, request: InferenceRequest) -> str:
        response = self.RESPONSES.get(request.name)
        if response is None:
            raise StructuralResponseError(f"No example response for '{request.name}'")
        return json.dumps(response)
