from .analysis import (
    AnalysisRequest,
    AnalysisResponse,
    DateCheck,
    DateRange,
    DateToken,
    ExtractTextResponse,
    ParsedAnalysis,
    ParseRequest,
    PresentMarker,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "DateCheck",
    "DateRange",
    "DateToken",
    "ExtractTextResponse",
    "ParsedAnalysis",
    "ParseRequest",
    "PresentMarker",
]
