from resume_analyzer.inference.client import RemoteInferenceClient
from resume_analyzer.inference.client_base import BaseInferenceClient
from resume_analyzer.inference.factory import InferenceClientFactory

__all__ = ["BaseInferenceClient", "InferenceClientFactory", "RemoteInferenceClient"]
