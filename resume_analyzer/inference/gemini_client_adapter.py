"""Google Gemini ``generateContent`` REST adapter."""

from typing import Any

import httpx

from resume_analyzer.inference.client_base import BaseInferenceClient
from resume_analyzer.inference.exceptions import StructuralResponseError, TransientNetworkError
from resume_analyzer.inference.models import InferenceRequest

# JSON-schema keywords the Gemini response schema does not accept.
_UNSUPPORTED_SCHEMA_KEYS = frozenset({"additionalProperties", "$schema", "title"})


def to_gemini_schema(schema: Any) -> Any:
    """Convert a JSON schema into Gemini's OpenAPI-style response schema."""
    if isinstance(schema, list):
        return [to_gemini_schema(item) for item in schema]
    if not isinstance(schema, dict):
        return schema
    converted: dict[str, Any] = {}
    for key, value in schema.items():
        if key in _UNSUPPORTED_SCHEMA_KEYS:
            continue
        if key == "type" and isinstance(value, str):
            converted[key] = value.upper()
        elif key == "properties" and isinstance(value, dict):
            converted[key] = {name: to_gemini_schema(sub) for name, sub in value.items()}
        else:
            converted[key] = to_gemini_schema(value)
    return converted


def embedded_text(body: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` or raise."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise StructuralResponseError("Invalid response structure from API.") from exc
    if not isinstance(text, str) or not text:
        raise StructuralResponseError("Invalid response structure from API.")
    return text


class GeminiClientAdapter(BaseInferenceClient):
    """Calls the Gemini REST API with JSON-mode output."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str,
        timeout_seconds: int,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._http = http_client or httpx.Client(timeout=timeout_seconds)

    def generate(self, request: InferenceRequest) -> str:
        payload = {
            "contents": [{"parts": [{"text": request.prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": to_gemini_schema(request.response_schema),
            },
        }
        url = f"{self._base_url}/models/{self._model}:generateContent"
        try:
            response = self._http.post(
                url,
                json=payload,
                headers={"x-goog-api-key": self._api_key},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransientNetworkError(
                f"API Error: {exc.response.status_code} {exc.response.reason_phrase}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransientNetworkError(f"AI provider network error: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise StructuralResponseError(f"Response body is not JSON: {exc}") from exc
        return embedded_text(body)
