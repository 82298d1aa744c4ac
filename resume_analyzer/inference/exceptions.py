class InferenceError(Exception):
    """Base exception for remote inference failures."""


class TransientNetworkError(InferenceError):
    """Raised when the provider call fails for network/infrastructure reasons.

    Retried by RemoteInferenceClient.
    """


class StructuralResponseError(InferenceError):
    """Raised when the provider response does not have the expected shape.

    Never retried: the same request would yield the same mismatch.
    """


class InferenceConfigurationError(InferenceError):
    """Raised when the client cannot be built (e.g. missing API key)."""
