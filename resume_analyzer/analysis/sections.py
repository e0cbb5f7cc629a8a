from __future__ import annotations

import re
from enum import Enum

from resume_analyzer.analysis.actionable import synthesize_additions
from resume_analyzer.core.config.analysis import get_analysis_value
from resume_analyzer.normalize.entities import clean_entities
from resume_analyzer.normalize.utils import as_bullet, fold_turkish, strip_bullet, strip_heading_noise
from resume_analyzer.schemas.analysis import ParsedAnalysis


class Section(str, Enum):
    SUMMARY = "summary"
    STRENGTHS = "strengths"
    WEAKNESSES = "weaknesses"
    ADDITIONS = "additions"


# Canonical headings in ASCII-folded form; each letter below also accepts its
# Turkish counterpart (and dotted/dotless I) when compiled.
HEADINGS: tuple[tuple[str, Section], ...] = (
    ("kisa genel degerlendirme", Section.SUMMARY),
    ("genel degerlendirme", Section.SUMMARY),
    ("guclu yonler", Section.STRENGTHS),
    ("gelismeye acik alanlar", Section.WEAKNESSES),
    ("zayif yonler", Section.WEAKNESSES),
    ("eklenebilecek yonler", Section.ADDITIONS),
)

_LETTER_VARIANTS = {
    "i": "iıİI",
    "s": "sşŞS",
    "g": "gğĞG",
    "u": "uüÜU",
    "o": "oöÖO",
    "c": "cçÇC",
}


def _heading_pattern(folded: str) -> re.Pattern[str]:
    parts: list[str] = []
    for char in folded:
        if char == " ":
            parts.append(r"\s+")
        elif char in _LETTER_VARIANTS:
            parts.append(f"[{_LETTER_VARIANTS[char]}]")
        else:
            parts.append(re.escape(char))
    # The phrase must start the line and must not run into a longer word.
    return re.compile("".join(parts) + r"(?![^\W\d_])", re.IGNORECASE)


_HEADING_PATTERNS: tuple[tuple[re.Pattern[str], Section], ...] = tuple(
    (_heading_pattern(folded), section) for folded, section in HEADINGS
)
_HEADING_REST_RE = re.compile(r"^[\s:：*#\-–—]+")

# Personal details and hobbies never belong in the critique lists.
# Matched against Turkish-folded text.
_PERSONAL_INFO_RE = re.compile(
    r"(ilgi alanlari|hobi|kisisel bilgiler|medeni durum|dogum tarihi|adres|fotograf)"
)


def is_personal_info(item: str) -> bool:
    return bool(_PERSONAL_INFO_RE.search(fold_turkish(item)))


def _drop_personal_info(items: list[str]) -> list[str]:
    return [item for item in items if not is_personal_info(item)]


def match_heading(line: str) -> tuple[Section, str] | None:
    """Return the section a line opens and any trailing text after the heading phrase."""
    for pattern, section in _HEADING_PATTERNS:
        match = pattern.match(line)
        if match:
            rest = _HEADING_REST_RE.sub("", line[match.end():]).strip()
            return section, rest
    return None


class SectionStateMachine:
    """Cursor over the four analysis sections; only headings move it."""

    def __init__(self, max_summary_lines: int = 4):
        self.state = Section.SUMMARY
        self.headings_seen = 0
        self._max_summary_lines = max_summary_lines
        self._summary: list[str] = []
        self._lists: dict[Section, list[str]] = {
            Section.STRENGTHS: [],
            Section.WEAKNESSES: [],
            Section.ADDITIONS: [],
        }

    def transition(self, section: Section) -> None:
        self.state = section
        self.headings_seen += 1

    def emit(self, fragment: str) -> None:
        if self.state is Section.SUMMARY:
            text = strip_bullet(fragment)
            if text and len(self._summary) < self._max_summary_lines:
                self._summary.append(text)
            return
        item = as_bullet(fragment)
        if item:
            self._lists[self.state].append(item)

    def feed(self, line: str) -> None:
        cleaned = strip_heading_noise(line)
        heading = match_heading(cleaned)
        if heading is None:
            self.emit(cleaned)
            return
        section, rest = heading
        self.transition(section)
        if rest:
            self.emit(rest)

    @property
    def summary(self) -> str:
        return "\n".join(self._summary)

    def items(self, section: Section) -> list[str]:
        return list(self._lists[section])


def parse_analysis(text: str | None) -> ParsedAnalysis:
    cleaned_text = clean_entities(text)
    lines = [line.strip() for line in cleaned_text.splitlines()]

    machine = SectionStateMachine(
        max_summary_lines=int(get_analysis_value("parser.max_summary_lines", 4)),
    )
    for line in lines:
        if line:
            machine.feed(line)

    parsed = ParsedAnalysis(
        summary=machine.summary,
        strengths=machine.items(Section.STRENGTHS),
        weaknesses=machine.items(Section.WEAKNESSES),
        additions=machine.items(Section.ADDITIONS),
    )
    if machine.headings_seen == 0 or parsed.is_empty():
        return ParsedAnalysis(raw=cleaned_text.strip())

    parsed.strengths = _drop_personal_info(parsed.strengths)
    parsed.weaknesses = _drop_personal_info(parsed.weaknesses)
    parsed.additions = _drop_personal_info(parsed.additions)
    if not parsed.additions and parsed.weaknesses:
        limit = int(get_analysis_value("parser.max_synthesized_additions", 6))
        parsed.additions = synthesize_additions(parsed.weaknesses, limit=limit)
    return parsed
