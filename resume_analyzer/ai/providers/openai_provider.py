from __future__ import annotations

from datetime import date
from typing import Optional

from openai import APIStatusError, AsyncOpenAI, OpenAIError

from resume_analyzer.ai.prompt import build_analysis_messages
from resume_analyzer.ai.types import ProviderError, ProviderResult
from resume_analyzer.schemas.analysis import DateCheck
from resume_analyzer.core.config import settings


class OpenAIProvider:
    name = "openai"

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 2,
        temperature: float = 0.2,
    ):
        self._model = model
        self._temperature = temperature
        key = (api_key or settings.openai_api_key or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or settings.openai_base_url or None),
            timeout=timeout_s,
            max_retries=max_retries,
        )

    @property
    def model(self) -> str:
        return self._model

    async def generate(
        self, text: str, role: str | None, *, today: date, date_check: DateCheck | None = None
    ) -> ProviderResult:
        messages = build_analysis_messages(text, role, today)
        payload = [{"role": m.role, "content": m.content} for m in messages]
        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=payload,
                temperature=self._temperature,
            )
        except APIStatusError as exc:
            raise ProviderError(f"OpenAI request failed: {exc}", status_code=exc.status_code) from exc
        except OpenAIError as exc:
            raise ProviderError(f"OpenAI request failed: {exc}") from exc

        content = ""
        if completion.choices:
            content = completion.choices[0].message.content or ""
        return ProviderResult(analysis=content, provider=self.name, model=self._model)


def from_env() -> OpenAIProvider:
    return OpenAIProvider(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout_s=settings.openai_timeout_s,
        max_retries=settings.openai_max_retries,
    )
