from dataclasses import dataclass
from datetime import date
from typing import Literal, Protocol

from resume_analyzer.schemas.analysis import DateCheck


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


@dataclass(frozen=True)
class ProviderResult:
    analysis: str
    provider: str
    model: str | None = None


class AnalysisProvider(Protocol):
    name: str

    async def generate(
        self, text: str, role: str | None, *, today: date, date_check: DateCheck | None = None
    ) -> ProviderResult: ...


class ProviderError(RuntimeError):
    def __init__(self, message: str, *, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code
