from __future__ import annotations

import re
from datetime import date
from types import MappingProxyType

from resume_analyzer.normalize.utils import fold_turkish
from resume_analyzer.schemas.analysis import DateCheck, DateRange, DateToken, PresentMarker

MONTHS = MappingProxyType(
    {
        "ocak": 1, "oca": 1,
        "subat": 2, "sub": 2,
        "mart": 3,
        "nisan": 4, "nis": 4,
        "mayis": 5,
        "haziran": 6, "haz": 6,
        "temmuz": 7, "tem": 7,
        "agustos": 8, "agu": 8,
        "eylul": 9, "eyl": 9,
        "ekim": 10, "eki": 10,
        "kasim": 11, "kas": 11,
        "aralik": 12, "ara": 12,
        "jan": 1, "january": 1,
        "feb": 2, "february": 2,
        "mar": 3, "march": 3,
        "apr": 4, "april": 4,
        "may": 5,
        "jun": 6, "june": 6,
        "jul": 7, "july": 7,
        "aug": 8, "august": 8,
        "sep": 9, "sept": 9, "september": 9,
        "oct": 10, "october": 10,
        "nov": 11, "november": 11,
        "dec": 12, "december": 12,
    }
)

# A hyphen between month and year never has spaces around it, otherwise
# "2023 - 12/2025" would be read as December 2023.
_MONTH_YEAR_RE = re.compile(r"\b(0?[1-9]|1[0-2])(?:\s*[/.]\s*|-)(\d{4})\b")
_YEAR_MONTH_RE = re.compile(r"\b(\d{4})(?:\s*[/.]\s*|-)(0?[1-9]|1[0-2])\b")
_NAMED_MONTH_RE = re.compile(r"\b([^\W\d_]+)\.?\s+(\d{4})\b")
_SPACED_SEPARATOR_RE = re.compile(r"\s+[-–—]\s+|[–—]")
_RANGE_SEPARATOR_RE = re.compile(r"-")
_PRESENT_RE = re.compile(
    r"\b(?:present|current|ongoing|devam|halen|hala|hâlâ|güncel|guncel|günümüz|gunumuz|şu\s*an|su\s*an)",
    re.IGNORECASE,
)


def resolve_month(name: str) -> int | None:
    return MONTHS.get(fold_turkish(name).rstrip("."))


def is_present(fragment: str) -> bool:
    return bool(_PRESENT_RE.search(fragment or ""))


def scan_tokens(line: str) -> tuple[list[DateToken], list[str]]:
    """Find date tokens on one line; returns (tokens, unresolved month-name candidates)."""
    tokens: list[DateToken] = []
    unresolved: list[str] = []
    for match in _MONTH_YEAR_RE.finditer(line):
        tokens.append(DateToken(raw=match.group(0), year=int(match.group(2)), month=int(match.group(1))))
    for match in _YEAR_MONTH_RE.finditer(line):
        tokens.append(DateToken(raw=match.group(0), year=int(match.group(1)), month=int(match.group(2))))
    for match in _NAMED_MONTH_RE.finditer(line):
        month = resolve_month(match.group(1))
        if month is None:
            unresolved.append(match.group(0))
        else:
            tokens.append(DateToken(raw=match.group(0), year=int(match.group(2)), month=month))
    return tokens, unresolved


def split_range(line: str) -> tuple[str, str] | None:
    """Split a line at its range separator, preferring a spaced or long dash over a bare hyphen."""
    match = _SPACED_SEPARATOR_RE.search(line) or _RANGE_SEPARATOR_RE.search(line)
    if match is None:
        return None
    return line[: match.start()], line[match.end():]


def find_last_token(fragment: str, tokens: list[DateToken]) -> DateToken | None:
    """Last token (in scan order) whose raw text occurs in the fragment."""
    best: DateToken | None = None
    for token in tokens:
        if token.raw in fragment:
            best = token
    return best


def is_future(date_range: DateRange, evaluation_date: date) -> bool:
    if isinstance(date_range.end, PresentMarker):
        return False
    return date_range.end.year_month > evaluation_date.year * 100 + evaluation_date.month


def analyze_dates(text: str | None, evaluation_date: date | None = None) -> DateCheck:
    evaluation_date = evaluation_date or date.today()
    source = text or ""
    lines = [line for line in source.splitlines() if line.strip()]

    tokens: list[DateToken] = []
    unresolved_by_line: list[list[str]] = []
    for line in lines:
        line_tokens, unresolved = scan_tokens(line)
        tokens.extend(line_tokens)
        unresolved_by_line.append(unresolved)

    ranges: list[DateRange] = []
    malformed: list[str] = []
    for line, unresolved in zip(lines, unresolved_by_line):
        parts = split_range(line)
        if parts is None:
            continue
        left, right = parts
        start = find_last_token(left, tokens)
        end: DateToken | PresentMarker | None
        if is_present(right):
            end = PresentMarker()
        else:
            end = find_last_token(right, tokens)

        if start is None and end is None:
            continue
        # One side parsed as a date, so a month-name-like word on the other side is a broken date.
        for fragment, resolved in ((left, start), (right, end)):
            if resolved is not None:
                continue
            for raw in unresolved:
                if raw in fragment and raw not in malformed:
                    malformed.append(raw)

        if start is not None and end is not None:
            ranges.append(DateRange(raw=f"{left.strip()} - {right.strip()}", start=start, end=end))

    future_ranges = [item.raw for item in ranges if is_future(item, evaluation_date)]
    if future_ranges:
        summary = f"Gelecek tarih aralığı saptandı ({len(future_ranges)})."
    else:
        summary = "Gelecek tarih aralığı saptanmadı."
    return DateCheck(
        tokens=tokens,
        ranges=ranges,
        future_ranges=future_ranges,
        malformed=malformed,
        summary=summary,
    )
