import logging

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from resume_analyzer.analysis.sections import parse_analysis
from resume_analyzer.core.config import settings
from resume_analyzer.parsing import ALLOWED_EXTENSIONS, extract_text, file_extension
from resume_analyzer.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    ExtractTextResponse,
    ParsedAnalysis,
    ParseRequest,
)
from resume_analyzer.services.analysis_service import (
    AnalysisInputError,
    AnalysisProviderError,
    run_analysis,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _raise_analysis_http_error(exc: Exception) -> None:
    if isinstance(exc, (AnalysisInputError, AnalysisProviderError)):
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    raise exc


async def _read_upload(file: UploadFile) -> tuple[str, bytes]:
    filename = file.filename or "uploaded-file"
    ext = file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type '.{ext}'. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}.",
        )

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return filename, b"".join(chunks)


def _extract(filename: str, content: bytes) -> ExtractTextResponse:
    def on_progress(page: int, total: int) -> None:
        logger.debug("pdf_page_extracted file=%s page=%s/%s", filename, page, total)

    try:
        return extract_text(filename, content, on_progress=on_progress)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(payload: AnalysisRequest):
    try:
        return await run_analysis(payload)
    except (AnalysisInputError, AnalysisProviderError) as exc:
        _raise_analysis_http_error(exc)


@router.post("/analyze/file", response_model=AnalysisResponse)
async def analyze_file(
    file: UploadFile = File(...),
    role: str | None = Form(default=None),
    mask_pii: bool = Form(default=False),
):
    filename, content = await _read_upload(file)
    extracted = _extract(filename, content)
    payload = AnalysisRequest(text=extracted.text, role=role, mask_pii=mask_pii)
    try:
        return await run_analysis(payload)
    except (AnalysisInputError, AnalysisProviderError) as exc:
        _raise_analysis_http_error(exc)


@router.post("/extract-text", response_model=ExtractTextResponse)
async def extract_resume_text(file: UploadFile = File(...)):
    filename, content = await _read_upload(file)
    return _extract(filename, content)


@router.post("/parse", response_model=ParsedAnalysis)
async def parse(payload: ParseRequest):
    return parse_analysis(payload.analysis)
