from resume_analyzer.config.settings import Settings
from resume_analyzer.inference.client import RemoteInferenceClient
from resume_analyzer.inference.client_base import BaseInferenceClient
from resume_analyzer.inference.example_client_adapter import ExampleClientAdapter
from resume_analyzer.inference.exceptions import InferenceConfigurationError
from resume_analyzer.inference.gemini_client_adapter import GeminiClientAdapter
from resume_analyzer.inference.openai_client_adapter import OpenAIClientAdapter


class InferenceClientFactory:
    """Creates the configured remote inference client."""

    PROVIDERS = ("gemini", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> RemoteInferenceClient:
        """Create a retrying client for the configured provider.

        Raises:
            InferenceConfigurationError: on an unknown provider or a missing
                API key, before any network call is attempted.
        """
        return RemoteInferenceClient(
            cls._create_adapter(settings),
            max_attempts=settings.inference_max_attempts,
            initial_backoff_seconds=settings.inference_initial_backoff_seconds,
        )

    @classmethod
    def _create_adapter(cls, settings: Settings) -> BaseInferenceClient:
        provider = settings.inference_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            return GeminiClientAdapter(
                api_key=cls._require_key(settings.gemini_api_key, "GEMINI_API_KEY"),
                model=settings.gemini_model_name,
                base_url=settings.gemini_base_url,
                timeout_seconds=settings.gemini_timeout_seconds,
            )
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=cls._require_key(settings.openai_api_key, "OPENAI_API_KEY"),
                model=settings.openai_model_name,
                timeout_seconds=settings.openai_timeout_seconds,
            )
        raise InferenceConfigurationError(
            f"Unknown inference provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

    @staticmethod
    def _require_key(value: str, env_name: str) -> str:
        key = value.strip()
        if not key:
            raise InferenceConfigurationError(
                f"API key not configured. Please add {env_name} to your environment or .env file."
            )
        return key
