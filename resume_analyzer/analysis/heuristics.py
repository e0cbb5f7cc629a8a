"""Rule-based resume review used when no language model provider is configured.

The output follows the same four-heading plain text layout that the model
providers are asked for, so it goes through the same section parser.
"""
from __future__ import annotations

import re
from datetime import date
from types import MappingProxyType
from typing import Sequence

from pydantic import BaseModel

from resume_analyzer.analysis.dates import analyze_dates
from resume_analyzer.core.config.analysis import get_analysis_value
from resume_analyzer.normalize.utils import fold_turkish
from resume_analyzer.schemas.analysis import DateCheck

DOMAIN_KEYWORDS = MappingProxyType(
    {
        "software": (
            "javascript", "typescript", "react", "java", "python", "node", "c#", "dotnet", "php",
            "go", "docker", "kubernetes", "aws", "azure", "gcp", "sql", "nosql",
        ),
        "data": (
            "data", "sql", "excel", "tableau", "power bi", "pandas", "numpy", "statistics",
            "analytics", "model", "ml", "ai", "spark", "hadoop", "python", "r",
        ),
        "product": (
            "product", "roadmap", "backlog", "discovery", "requirements", "stakeholder", "mvp",
            "kpi", "prio", "go to market",
        ),
        "design": ("ux", "ui", "figma", "sketch", "wireframe", "prototype", "usability", "a/b", "visual", "design system"),
        "marketing": (
            "seo", "sem", "google ads", "meta ads", "campaign", "crm", "hubspot", "mailchimp",
            "content", "brand", "roi", "kpi", "cac", "ltv", "ga4",
        ),
        "sales": (
            "sales", "pipeline", "crm", "leads", "quota", "negotiation", "closing", "prospecting",
            "b2b", "b2c", "salesforce",
        ),
        "hr": ("recruit", "talent", "onboarding", "payroll", "benefits", "people ops", "interview", "hris"),
        "finance": (
            "finance", "accounting", "budget", "forecast", "p&l", "cash flow", "gaap", "ifrs",
            "audit", "tax", "sap", "oracle",
        ),
        "operations": ("operations", "supply", "logistics", "inventory", "warehouse", "lean", "six sigma", "process", "sla"),
        "education": (
            "teacher", "instructor", "curriculum", "lesson", "student", "pedagogy", "assessment",
            "research", "publication",
        ),
        "healthcare": (
            "clinic", "patient", "hospital", "nurse", "physician", "medical", "emr", "ehr", "hipaa",
            "treatment", "care",
        ),
        "legal": ("law", "legal", "contract", "compliance", "case", "litigation", "ip", "gdpr", "privacy"),
        "customer": ("support", "customer success", "ticket", "sla", "csat", "nps", "zendesk", "intercom"),
        "project": (
            "project manager", "program", "pmo", "timeline", "scope", "budget", "risk", "gantt",
            "agile", "waterfall",
        ),
    }
)

# Detectors run on Turkish-folded lower case text, so patterns are ASCII only.
SIGNAL_PATTERNS = MappingProxyType(
    {
        "has_metrics": re.compile(
            r"(%\s?\d+|\b\d+(?:[.,]\d+)?\s?%|\b\d+\s*(?:ay|yil|year|month)s?\b"
            r"|\b\d+\s*(?:k|m|mn|milyon|million)\b|\b(?:gelir|revenue|cost|maliyet)\b)"
        ),
        "has_projects": re.compile(r"(project|proje|case study|vaka|portfolio|portfoy)"),
        "has_leadership": re.compile(r"(lead|lider|managed|manager|mentored|directed|y[oe]net|koordine)"),
        "has_awards": re.compile(r"(award|odul|basari|recognition|publication|yayin)"),
        "has_education": re.compile(r"(lisans|yuksek lisans|bsc|msc|phd|universite|degree|master|bachelor)"),
        "has_certs": re.compile(r"(certificate|certification|pmp|cfa|cpa|scrum|psm|aws certified|ga4|ielts|toefl)"),
        "has_languages": re.compile(r"(english|ingilizce|turkish|turkce|german|almanca|french|spanish|italian|arabic)"),
    }
)

STRENGTHS_POOL: tuple[str, ...] = (
    "Net, kısa ve sonuç odaklı anlatım.",
    "İlgili araç ve yöntemlere aşinalık.",
    "Takım çalışması ve iletişim vurgusu.",
    "Sorumluluk almaya ve öğrenmeye açıklık.",
    "Proaktif problem çözme yaklaşımı.",
    "Temiz ve tutarlı biçimlendirme.",
)
WEAKNESSES_POOL: tuple[str, ...] = (
    "Ölçülebilir sonuçları rakamlarla vurgulayın.",
    "Rol ve kapsamı her projede netleştirin.",
    "Kullanılan araç/süreçleri sürüm ve kapsamla detaylandırın.",
    "Link ve referansları (portföy, GitHub, yayın) ekleyin.",
    "Eğitim/sertifika/ruhsat bilgilerini düzenleyin.",
    "Yazım ve biçim tutarlılığını gözden geçirin.",
)
ADDITIONS_POOL: tuple[str, ...] = (
    "Öne çıkan 2-3 projeyi kısa vaka şeklinde ekleyin.",
    "Başarıları yüzde/süre/adet/gelir-maliyet ile nicelleştirin.",
    "Anahtar kelimeleri hedef role uygun olacak şekilde güncelleyin.",
    "Yetkinlikleri güncel versiyon/araç isimleriyle netleştirin.",
    "Sertifika/ödül/ yayın gibi ayırt edicileri ekleyin.",
    "ATS uyumlu, sade ve taranabilir bir düzen kullanın.",
)


class EvidenceSignals(BaseModel):
    model_config = {"frozen": True}

    has_metrics: bool = False
    has_projects: bool = False
    has_leadership: bool = False
    has_awards: bool = False
    has_education: bool = False
    has_certs: bool = False
    has_languages: bool = False


def domain_scores(text: str) -> dict[str, int]:
    lowered = (text or "").lower()
    scores: dict[str, int] = {}
    for domain, keywords in DOMAIN_KEYWORDS.items():
        scores[domain] = sum(1 for keyword in keywords if keyword in lowered)
    return scores


def top_domains(scores: dict[str, int], limit: int = 2) -> list[str]:
    # sorted() is stable, so equal scores keep their declaration order.
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [domain for domain, score in ranked if score > 0][:limit]


def detect_signals(text: str) -> EvidenceSignals:
    folded = fold_turkish(text)
    return EvidenceSignals(**{name: bool(pattern.search(folded)) for name, pattern in SIGNAL_PATTERNS.items()})


def pad_to(items: Sequence[str], pool: Sequence[str], minimum: int) -> list[str]:
    """Return a copy of `items` topped up from `pool` (in order) until it has `minimum` entries."""
    padded = list(items)
    for candidate in pool:
        if len(padded) >= minimum:
            break
        if candidate not in padded:
            padded.append(candidate)
    return padded


def _strengths(domains: list[str], signals: EvidenceSignals) -> list[str]:
    items: list[str] = []
    if domains:
        items.append(f"Domain sinyalleri: {', '.join(domains)} alan(lar)ına dair anahtar kelimeler mevcut.")
    if signals.has_metrics:
        items.append("Nicel etki/sonuç ifadeleri bulunuyor (%, süre, adet, gelir/maliyet).")
    if signals.has_projects:
        items.append("Proje/portföy veya vaka çalışması izleri var.")
    if signals.has_leadership:
        items.append("Liderlik/koordinasyon veya mentorluk deneyimi sinyali var.")
    if signals.has_awards:
        items.append("Ödül/başarı/ yayın gibi ayırt edici unsurlar mevcut.")
    if signals.has_education:
        items.append("Eğitim geçmişi veya dereceler belirtilmiş.")
    if signals.has_certs:
        items.append("İlgili sertifikalar/ruhsatlar yer alıyor.")
    if signals.has_languages:
        items.append("Yabancı dil bilgisi belirtilmiş.")
    return items


def _weaknesses(domains: list[str], signals: EvidenceSignals, date_check: DateCheck, max_listed: int) -> list[str]:
    items: list[str] = []
    if not domains:
        items.append("Rol/alan odağı net değil; anahtar kelimeler zayıf.")
    if not signals.has_metrics:
        items.append("Ölçülebilir sonuçlar zayıf; yüzde/süre/adet/gelir-maliyet ile güçlendirin.")
    if not signals.has_projects:
        items.append("Somut proje/çalışma örnekleri veya portföy bağlantıları eksik.")
    if not signals.has_leadership:
        items.append("Liderlik/koordinasyon veya ekip katkısı örnekleri sınırlı.")
    if not signals.has_awards:
        items.append("Ödül/başarı/ yayın gibi ayırt ediciler yer almıyor.")
    if not signals.has_education:
        items.append("Eğitim/sertifika/ruhsat bilgilerinin kapsamı net değil.")
    if not signals.has_certs:
        items.append("İlgili sertifikalar/ruhsatlar belirtilmemiş.")
    if not signals.has_languages:
        items.append("Yabancı dil yeterliliği belirtilmemiş.")
    if date_check.future_ranges:
        listed = " | ".join(date_check.future_ranges[:max_listed])
        items.append(f"Gelecekte görünen tarih aralıkları: {listed}. Geçmişte tamamlandıysa güncelleyiniz.")
    if date_check.malformed:
        listed = " | ".join(date_check.malformed[:max_listed])
        items.append(
            f"Anlaşılamayan/bozuk tarih ifadeleri: {listed}. Biçimi netleştiriniz (örn. 07/2023-08/2023)."
        )
    return items


def _additions(signals: EvidenceSignals) -> list[str]:
    items: list[str] = []
    if not signals.has_metrics:
        items.append("Başarıları nicelleştirin: % değişim, süre, adet, gelir/maliyet.")
    if not signals.has_projects:
        items.append("Portföy/case study bağlantıları ekleyin; kapsam-rol-teknik/araç ve etkiyi 1-2 satırda özetleyin.")
    if not signals.has_certs:
        items.append("Alanla ilgili sertifika/ruhsatları belirtin (ör. PMP/CPA/CFA/GA4 vb.).")
    if not signals.has_leadership:
        items.append("Liderlik/mentorluk ve ekip içi işbirliği örnekleri ekleyin.")
    if not signals.has_languages:
        items.append("Yabancı dil düzeyini (CEFR/puan) ve kullanım bağlamını ekleyin.")
    items.append("ATS uyumu için sade biçim, net başlıklar ve uygun anahtar kelimeler kullanın.")
    return items


def _summary(role: str | None, domains: list[str]) -> str:
    role_line = f"Hedef rol: {role.strip()}. " if role and role.strip() else ""
    domain_line = f"Olası alan(lar): {', '.join(domains)}. " if domains else ""
    return (
        f"{role_line}{domain_line}Metin, rol/spesifik yetkinlikler, nicel etki ve genel yetkinlikler "
        "açısından kurallı olarak tarandı. Aşağıdaki maddeler yaklaşık değerlendirmedir."
    )


def mock_analyze(
    text: str,
    role: str | None = None,
    evaluation_date: date | None = None,
    *,
    date_check: DateCheck | None = None,
) -> str:
    minimum = int(get_analysis_value("heuristics.min_items", 6))
    domain_limit = int(get_analysis_value("heuristics.top_domains", 2))
    max_listed = int(get_analysis_value("heuristics.max_listed_date_issues", 3))

    domains = top_domains(domain_scores(text), limit=domain_limit)
    signals = detect_signals(text)
    if date_check is None:
        date_check = analyze_dates(text, evaluation_date or date.today())

    strengths = pad_to(_strengths(domains, signals), STRENGTHS_POOL, minimum)
    weaknesses = pad_to(_weaknesses(domains, signals, date_check, max_listed), WEAKNESSES_POOL, minimum)
    additions = pad_to(_additions(signals), ADDITIONS_POOL, minimum)

    lines = ["Kısa Genel Değerlendirme", _summary(role, domains), ""]
    lines.append("Güçlü Yönler")
    lines.extend(f"- {item}" for item in strengths)
    lines.append("")
    lines.append("Gelişmeye Açık Alanlar")
    lines.extend(f"- {item}" for item in weaknesses)
    lines.append("")
    lines.append("Eklenebilecek Yönler")
    lines.extend(f"- {item}" for item in additions)
    return "\n".join(lines)
