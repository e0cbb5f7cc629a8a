from resume_analyzer.ai.types import AnalysisProvider
from resume_analyzer.core.config import settings

from resume_analyzer.ai.providers import gemini_provider, openai_provider
from resume_analyzer.ai.providers.mock_provider import MockProvider


def get_provider(name: str | None = None) -> AnalysisProvider:
    provider = (name or settings.provider).strip().lower()

    if provider == "openai":
        return openai_provider.from_env()

    if provider == "gemini":
        return gemini_provider.from_env()

    if provider == "mock":
        return MockProvider()

    raise ValueError(f"Unsupported PROVIDER='{provider}'")
