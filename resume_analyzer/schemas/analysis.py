from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class AnalysisRequest(BaseModel):
    model_config = {"frozen": True}

    text: str = ""
    role: str | None = Field(default=None, max_length=200)
    mask_pii: bool = False


class ParseRequest(BaseModel):
    analysis: str = ""


class ParsedAnalysis(BaseModel):
    summary: str = ""
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    additions: list[str] = Field(default_factory=list)
    raw: str = ""

    def is_empty(self) -> bool:
        return not (self.summary or self.strengths or self.weaknesses or self.additions)


class DateToken(BaseModel):
    raw: str
    year: int
    month: int = Field(ge=1, le=12)

    @property
    def year_month(self) -> int:
        return self.year * 100 + self.month


class PresentMarker(BaseModel):
    present: Literal[True] = True


class DateRange(BaseModel):
    raw: str
    start: DateToken
    end: DateToken | PresentMarker

    @property
    def is_ongoing(self) -> bool:
        return isinstance(self.end, PresentMarker)


class DateCheck(BaseModel):
    tokens: list[DateToken] = Field(default_factory=list)
    ranges: list[DateRange] = Field(default_factory=list)
    future_ranges: list[str] = Field(default_factory=list)
    malformed: list[str] = Field(default_factory=list)
    summary: str = ""


class AnalysisResponse(BaseModel):
    analysis: str
    provider: str
    model: str | None = None
    parsed: ParsedAnalysis
    date_check: DateCheck
    generated_at: str


class ExtractTextResponse(BaseModel):
    text: str
    source_type: Literal["pdf", "text"]
    pages: int | None = None
    chars: int
    warnings: list[str] = Field(default_factory=list)
