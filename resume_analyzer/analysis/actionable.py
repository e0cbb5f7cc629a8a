from __future__ import annotations

import re
from typing import Sequence

from resume_analyzer.normalize.utils import as_bullet, strip_bullet

# Applied in order; earlier rewrites must not be undone by later ones.
_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"eklenebilir", re.IGNORECASE), "ekleyin"),
    (re.compile(r"netleştirilebilir", re.IGNORECASE), "netleştirin"),
    (re.compile(r"örneklendirilebilir", re.IGNORECASE), "örneklendirin"),
    (re.compile(r"belirtilebilir", re.IGNORECASE), "belirtin"),
    (re.compile(r"gösterilebilir", re.IGNORECASE), "gösterin"),
    (re.compile(r"iyileştirilebilir", re.IGNORECASE), "iyileştirin"),
    (re.compile(r"artt?ırılabilir", re.IGNORECASE), "arttırın"),
    (re.compile(r"sınırlı", re.IGNORECASE), "güncelleyin"),
    (re.compile(r"\byok\b", re.IGNORECASE), "ekleyin"),
)

ACTION_VERBS: tuple[str, ...] = (
    "Ekleyin",
    "Netleştirin",
    "Örneklendirin",
    "Belirtin",
    "Gösterin",
    "İyileştirin",
    "Arttırın",
    "Güncelleyin",
    "Geliştirin",
)
GENERIC_LEAD_IN = "Geliştirin: "

_ACTION_START_RE = re.compile(rf"^(?:{'|'.join(ACTION_VERBS)})", re.IGNORECASE)
_TERMINAL_RE = re.compile(r"[.!?]$")


def to_actionable(item: str) -> str:
    """Rewrite a weakness bullet into an imperative suggestion bullet."""
    text = strip_bullet(item)
    for pattern, replacement in _REWRITES:
        text = pattern.sub(replacement, text)
    if not _TERMINAL_RE.search(text):
        text += "."
    if not _ACTION_START_RE.match(text):
        text = GENERIC_LEAD_IN + text
    return as_bullet(text)


def synthesize_additions(weaknesses: Sequence[str], limit: int = 6) -> list[str]:
    return [to_actionable(item) for item in list(weaknesses)[:limit]]
