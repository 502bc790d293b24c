from .evidence import attach_evidence
from .extract import KEYWORD_CAP, MISSING_CAP, extract_keywords, rank_by_frequency
from .rank import CandidateEvidence, KeywordCandidate, classify_term, rank_candidates
from .tiers import (
    LegacyKeywordPayload,
    TieredKeywordPayload,
    decode_keyword_payload,
    parse_keywords_flat,
    parse_tiered_keywords,
    serialize_tiered_keywords,
)
from .tokenize import SCORING_STOP_WORDS, STOP_WORDS, tokenize
from .validation import (
    KeywordMatchDebug,
    KeywordValidationResult,
    categorize_keyword,
    debug_keyword_match,
    get_suggestion_for_keyword,
    is_keyword_present,
    validate_extracted_keywords,
)

__all__ = [
    "STOP_WORDS",
    "SCORING_STOP_WORDS",
    "tokenize",
    "KEYWORD_CAP",
    "MISSING_CAP",
    "rank_by_frequency",
    "extract_keywords",
    "LegacyKeywordPayload",
    "TieredKeywordPayload",
    "decode_keyword_payload",
    "parse_tiered_keywords",
    "parse_keywords_flat",
    "serialize_tiered_keywords",
    "KeywordValidationResult",
    "validate_extracted_keywords",
    "KeywordMatchDebug",
    "debug_keyword_match",
    "is_keyword_present",
    "categorize_keyword",
    "get_suggestion_for_keyword",
    "CandidateEvidence",
    "KeywordCandidate",
    "classify_term",
    "rank_candidates",
    "attach_evidence",
]
