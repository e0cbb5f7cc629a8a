from __future__ import annotations

import re

_ENTITY_BODY_RE = re.compile(r"&([^;&]{1,30});")
_ENTITY_RE = re.compile(r"&(?:([A-Za-z][A-Za-z0-9]*)|#(\d+)|#[xX]([0-9A-Fa-f]+));")
_WS_RE = re.compile(r"\s+")

_NAMED_ENTITIES: dict[str, str] = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
    "nbsp": "\u00a0",
    "NonBreakingSpace": "\u00a0",
}


def normalize_entities(text: str | None) -> str:
    """Remove whitespace that providers sometimes inject inside entities (`& q u o t ;`)."""
    return _ENTITY_BODY_RE.sub(lambda m: f"&{_WS_RE.sub('', m.group(1))};", text or "")


def _code_point(value: int, original: str) -> str:
    if value <= 0 or value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        return original
    return chr(value)


def _decode_match(match: re.Match[str]) -> str:
    name, decimal, hexadecimal = match.groups()
    if name is not None:
        return _NAMED_ENTITIES.get(name, match.group(0))
    if decimal is not None:
        return _code_point(int(decimal), match.group(0))
    return _code_point(int(hexadecimal, 16), match.group(0))


def decode_entities(text: str | None) -> str:
    return _ENTITY_RE.sub(_decode_match, text or "")


def clean_entities(text: str | None) -> str:
    return decode_entities(normalize_entities(text))
