from __future__ import annotations

import re

_BULLET_PREFIX_RE = re.compile(r"^(?:[-•*]\s*)+")
_HEADING_NOISE_RE = re.compile(r"^[#>*\s]+")
_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_PHONE_RE = re.compile(r"(?:\+?\d{1,3}[\s.-]?)?(?:\(?\d{3}\)?[\s.-]?)?\d{3}[\s.-]?\d{2,4}")
_LINKEDIN_RE = re.compile(r"https?://(?:www\.)?linkedin\.com/[A-Za-z0-9_\-./]+", re.IGNORECASE)
_INLINE_WS_RE = re.compile(r"[\t ]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")

# Turkish letters folded to their ASCII look-alikes; applied before lower().
_TURKISH_FOLD = str.maketrans(
    {
        "İ": "i",
        "I": "i",
        "ı": "i",
        "Ş": "s",
        "ş": "s",
        "Ğ": "g",
        "ğ": "g",
        "Ü": "u",
        "ü": "u",
        "Ö": "o",
        "ö": "o",
        "Ç": "c",
        "ç": "c",
    }
)

BULLET = "- "


def strip_bullet(line: str) -> str:
    return _BULLET_PREFIX_RE.sub("", line or "").strip()


def as_bullet(line: str) -> str:
    """Return `line` with exactly one leading "- " marker, or "" if nothing remains."""
    item = strip_bullet(line)
    return f"{BULLET}{item}" if item else ""


def strip_heading_noise(line: str) -> str:
    return _HEADING_NOISE_RE.sub("", line or "")


def fold_turkish(text: str) -> str:
    return (text or "").translate(_TURKISH_FOLD).lower()


def _mask_phone(match: re.Match[str]) -> str:
    value = match.group(0)
    return "[phone]" if len(value) >= 7 else value


def mask_pii(text: str | None) -> str:
    out = text or ""
    out = _EMAIL_RE.sub("[email]", out)
    out = _LINKEDIN_RE.sub("[linkedin]", out)
    out = _PHONE_RE.sub(_mask_phone, out)
    out = _INLINE_WS_RE.sub(" ", out)
    out = _BLANK_RUN_RE.sub("\n\n", out)
    return out.strip()
