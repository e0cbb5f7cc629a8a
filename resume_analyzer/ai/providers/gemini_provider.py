from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from google import genai
from google.genai import errors, types

from resume_analyzer.ai.prompt import build_system_prompt, build_user_prompt
from resume_analyzer.ai.types import ProviderError, ProviderResult
from resume_analyzer.schemas.analysis import DateCheck
from resume_analyzer.core.config import settings

logger = logging.getLogger(__name__)

# Model ids the account may not have access to; try the next candidate instead of failing.
_SKIPPABLE_STATUS = {400, 403, 404}


class GeminiProvider:
    name = "gemini"

    def __init__(
        self,
        model: str,
        fallback_models: Sequence[str] = (),
        api_key: Optional[str] = None,
        temperature: float = 0.2,
    ):
        key = (api_key or settings.gemini_api_key or "").strip()
        if not key:
            raise RuntimeError("GEMINI_API_KEY is missing")
        self._models = [model, *[m for m in fallback_models if m and m != model]]
        self._temperature = temperature
        self._client = genai.Client(api_key=key)

    @property
    def models(self) -> list[str]:
        return list(self._models)

    async def generate(
        self, text: str, role: str | None, *, today: date, date_check: DateCheck | None = None
    ) -> ProviderResult:
        config = types.GenerateContentConfig(
            system_instruction=build_system_prompt(today),
            temperature=self._temperature,
        )
        prompt = build_user_prompt(text, role)
        last_error: errors.APIError | None = None
        for model_id in self._models:
            try:
                response = await self._client.aio.models.generate_content(
                    model=model_id,
                    contents=prompt,
                    config=config,
                )
            except errors.APIError as exc:
                last_error = exc
                if exc.code in _SKIPPABLE_STATUS:
                    logger.warning("gemini_model_skipped model=%s code=%s", model_id, exc.code)
                    continue
                raise ProviderError(f"Gemini request failed: {exc}", status_code=exc.code or 500) from exc
            return ProviderResult(analysis=response.text or "", provider=self.name, model=model_id)

        status_code = last_error.code if last_error is not None and last_error.code else 500
        raise ProviderError("Gemini isteği başarısız.", status_code=status_code) from last_error


def from_env() -> GeminiProvider:
    return GeminiProvider(
        model=settings.gemini_model,
        fallback_models=settings.gemini_fallback_models,
        api_key=settings.gemini_api_key,
    )
