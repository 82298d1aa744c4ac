from dataclasses import dataclass, field


@dataclass(frozen=True)
class InferenceRequest:
    """A prompt plus the JSON schema the response must follow."""

    name: str
    prompt: str
    response_schema: dict[str, object] = field(default_factory=dict)
