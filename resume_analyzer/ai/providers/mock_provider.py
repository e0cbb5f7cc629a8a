from __future__ import annotations

from datetime import date

from resume_analyzer.ai.types import ProviderResult
from resume_analyzer.analysis.heuristics import mock_analyze
from resume_analyzer.schemas.analysis import DateCheck


class MockProvider:
    """Deterministic fallback used when no model API key is configured."""

    name = "mock"

    async def generate(
        self, text: str, role: str | None, *, today: date, date_check: DateCheck | None = None
    ) -> ProviderResult:
        # Callers pass the date check of the unmasked text.
        analysis = mock_analyze(text, role, today, date_check=date_check)
        return ProviderResult(analysis=analysis, provider=self.name)
