from .actionable import synthesize_additions, to_actionable
from .dates import analyze_dates
from .heuristics import EvidenceSignals, detect_signals, domain_scores, mock_analyze, pad_to, top_domains
from .sections import Section, SectionStateMachine, match_heading, parse_analysis

__all__ = [
    "analyze_dates",
    "Section",
    "SectionStateMachine",
    "match_heading",
    "parse_analysis",
    "synthesize_additions",
    "to_actionable",
    "EvidenceSignals",
    "detect_signals",
    "domain_scores",
    "top_domains",
    "pad_to",
    "mock_analyze",
]
