from abc import ABC, abstractmethod

from resume_analyzer.inference.models import InferenceRequest


class BaseInferenceClient(ABC):
    """Contract for provider-specific text-generation clients."""

    @abstractmethod
    def generate(self, request: InferenceRequest) -> str:
        """Return the JSON-encoded text embedded in the provider response.

        Raises:
            TransientNetworkError: on network or provider API failures.
            StructuralResponseError: if the embedded text is missing.
        """
