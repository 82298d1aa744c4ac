import httpx
import openai

from resume_analyzer.inference.client_base import BaseInferenceClient
from resume_analyzer.inference.exceptions import StructuralResponseError, TransientNetworkError
from resume_analyzer.inference.models import InferenceRequest


class OpenAIClientAdapter(BaseInferenceClient):
    """Inference client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._model = model
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate(self, request: InferenceRequest) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": request.name,
                        "strict": True,
                        "schema": request.response_schema,
                    },
                },
                messages=[{"role": "user", "content": request.prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TransientNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise TransientNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise StructuralResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise StructuralResponseError("AI returned empty response")
        return content
