"""Retrying wrapper around a provider adapter that decodes its JSON payload."""

import json
import time
from collections.abc import Callable

from resume_analyzer.inference.client_base import BaseInferenceClient
from resume_analyzer.inference.exceptions import StructuralResponseError, TransientNetworkError
from resume_analyzer.inference.models import InferenceRequest
from resume_analyzer.logging.logger import Log


class RemoteInferenceClient:
    """Invokes the remote model with exponential backoff on transient errors.

    Every call either returns a decoded JSON object or raises a descriptive
    InferenceError.
    """

    def __init__(
        self,
        client: BaseInferenceClient,
        *,
        max_attempts: int = 3,
        initial_backoff_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._max_attempts = max(1, max_attempts)
        self._initial_backoff_seconds = initial_backoff_seconds
        self._sleep = sleep

    def invoke(self, request: InferenceRequest) -> dict[str, object]:
        """Send ``request`` and return the parsed response object.

        Raises:
            TransientNetworkError: the last error, once all attempts failed.
            StructuralResponseError: immediately, on a malformed response.
        """
        delay = self._initial_backoff_seconds
        attempt = 0
        while True:
            attempt += 1
            try:
                raw = self._client.generate(request)
                break
            except TransientNetworkError as exc:
                if attempt >= self._max_attempts:
                    Log.error(
                        f"Inference '{request.name}' failed after {attempt} attempts: {exc}"
                    )
                    raise
                Log.warning(
                    f"API call failed, retrying in {delay:g}s... (Attempt {attempt}): {exc}"
                )
                self._sleep(delay)
                delay *= 2

        Log.debug(f"AI raw response for '{request.name}':\n{raw}")
        return self._parse_json(raw)

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise StructuralResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise StructuralResponseError("JSON response must be an object")
        return parsed
