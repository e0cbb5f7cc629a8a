from __future__ import annotations

import logging
import time
from datetime import date, datetime, timezone

from resume_analyzer.ai.factory import get_provider
from resume_analyzer.ai.types import AnalysisProvider, ProviderError
from resume_analyzer.analysis.dates import analyze_dates
from resume_analyzer.analysis.sections import parse_analysis
from resume_analyzer.core.config import settings
from resume_analyzer.normalize.entities import clean_entities
from resume_analyzer.normalize.utils import mask_pii
from resume_analyzer.schemas.analysis import AnalysisRequest, AnalysisResponse

logger = logging.getLogger("resume_analyzer.analysis")

INSUFFICIENT_TEXT_MESSAGE = "Yetersiz metin. En az {min_chars} karakter sağlayın."
ANALYSIS_FAILED_MESSAGE = "Analiz sırasında bir hata oluştu."


class AnalysisInputError(ValueError):
    def __init__(self, message: str, *, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class AnalysisProviderError(RuntimeError):
    def __init__(self, message: str = ANALYSIS_FAILED_MESSAGE, *, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


def validate_text(text: str | None, min_chars: int | None = None) -> str:
    required = settings.min_text_chars if min_chars is None else min_chars
    trimmed = (text or "").strip()
    if len(trimmed) < required:
        raise AnalysisInputError(INSUFFICIENT_TEXT_MESSAGE.format(min_chars=required))
    return trimmed


def _resolve_provider(provider: AnalysisProvider | None) -> AnalysisProvider:
    if provider is not None:
        return provider
    try:
        return get_provider()
    except (RuntimeError, ValueError) as exc:
        logger.error("analysis_provider_unavailable provider=%s: %s", settings.provider, exc)
        raise AnalysisProviderError() from exc


async def run_analysis(
    request: AnalysisRequest,
    *,
    provider: AnalysisProvider | None = None,
    today: date | None = None,
) -> AnalysisResponse:
    text = validate_text(request.text)
    today = today or date.today()
    started_at = time.perf_counter()

    date_check = analyze_dates(text, today)
    outbound = mask_pii(text) if request.mask_pii else text
    active = _resolve_provider(provider)

    try:
        result = await active.generate(outbound, request.role, today=today, date_check=date_check)
    except ProviderError as exc:
        logger.exception(
            "analysis_failed provider=%s status=%s", getattr(active, "name", "unknown"), exc.status_code
        )
        raise AnalysisProviderError(status_code=exc.status_code) from exc

    analysis = clean_entities(result.analysis)
    parsed = parse_analysis(analysis)
    logger.info(
        "analysis_completed provider=%s model=%s chars=%s future_ranges=%s latency_ms=%s",
        result.provider,
        result.model,
        len(text),
        len(date_check.future_ranges),
        int((time.perf_counter() - started_at) * 1000),
    )
    return AnalysisResponse(
        analysis=analysis,
        provider=result.provider,
        model=result.model,
        parsed=parsed,
        date_check=date_check,
        generated_at=datetime.now(timezone.utc).isoformat(),
    )
