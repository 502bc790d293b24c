"""Decode the persisted ``extracted_keywords`` column.

Two payload shapes exist in stored jobs:

* legacy: ``["kw1", "kw2", ...]``
* tiered: ``{"keywords": ["kw1", ...], "primary": ["kw1", "kw2"]}``

Both are decoded in one place (``decode_keyword_payload``) into a tagged
variant before any consumer looks at them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Union

from resume_fit.schemas import TieredKeywords

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LegacyKeywordPayload:
    keywords: list[str]
    kind: Literal["legacy"] = "legacy"


@dataclass(frozen=True, slots=True)
class TieredKeywordPayload:
    keywords: list[str]
    primary: list[str] = field(default_factory=list)
    kind: Literal["tiered"] = "tiered"


KeywordPayload = Union[LegacyKeywordPayload, TieredKeywordPayload]


def is_legacy_shape(value: Any) -> bool:
    return isinstance(value, list)


def is_tiered_shape(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("keywords"), list)


def _strings(values: list[Any]) -> list[str]:
    return [value for value in values if isinstance(value, str)]


def decode_keyword_payload(raw: str | None) -> KeywordPayload | None:
    if not raw:
        return None

    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("keyword_payload_unparseable error=%s", exc)
        return None

    if is_legacy_shape(parsed):
        return LegacyKeywordPayload(keywords=_strings(parsed))

    if is_tiered_shape(parsed):
        raw_primary = parsed.get("primary")
        primary = _strings(raw_primary) if isinstance(raw_primary, list) else []
        return TieredKeywordPayload(keywords=_strings(parsed["keywords"]), primary=primary)

    logger.debug("keyword_payload_unknown_shape type=%s", type(parsed).__name__)
    return None


def parse_tiered_keywords(raw: str | None) -> TieredKeywords | None:
    """Parse stored keywords into all/primary/secondary tiers.

    Legacy arrays have no primary tier. Primary entries that are not in the
    keyword list are dropped.
    """
    payload = decode_keyword_payload(raw)
    if payload is None or not payload.keywords:
        return None

    all_keywords = payload.keywords
    if isinstance(payload, LegacyKeywordPayload):
        return TieredKeywords(all=all_keywords, primary=[], secondary=list(all_keywords))

    known = set(all_keywords)
    primary = [keyword for keyword in payload.primary if keyword in known]
    primary_set = set(primary)
    secondary = [keyword for keyword in all_keywords if keyword not in primary_set]
    return TieredKeywords(all=all_keywords, primary=primary, secondary=secondary)


def parse_keywords_flat(raw: str | None) -> list[str] | None:
    payload = decode_keyword_payload(raw)
    if payload is None or not payload.keywords:
        return None
    return payload.keywords


def serialize_tiered_keywords(keywords: list[str], primary: list[str] | None = None) -> str | None:
    """Build the column payload for freshly extracted keywords; None when there is nothing to store."""
    clean = [keyword for keyword in keywords if isinstance(keyword, str) and keyword.strip()]
    if not clean:
        return None
    known = set(clean)
    clean_primary = [keyword for keyword in (primary or []) if keyword in known]
    return json.dumps({"keywords": clean, "primary": clean_primary}, ensure_ascii=False)
