"""Accept-Language negotiation.

Parses an HTTP Accept-Language header into an ordered list of candidate
locale tags ranked by quality value.

See: http://www.w3.org/Protocols/rfc2616/rfc2616-sec14.html#sec14.4
"""

import math
from typing import List, Optional, Tuple, Union

import structlog
from infrastructure.i18n.models import LanguageTags

logger = structlog.get_logger().bind(component="i18n.negotiator")

DEFAULT_QVALUE = 1.0
DEFAULT_SUBTAG_WEIGHT = 0.1


def primary_subtag(tag: str) -> str:
    """Return the language part of a tag ("en-gb" -> "en").

    A tag without a separator is its own primary subtag.
    """
    return tag.split("-", 1)[0].rstrip()


def parse_qvalue(parameters: List[str]) -> float:
    """Extract the quality value from the parameters of a header entry.

    The first ``q`` parameter holding a finite decimal number wins. Other
    values (``inf``, ``nan``, ``1_0``) are ignored, so an entry without a
    usable ``q`` gets the default of 1.

    Args:
        parameters: Raw ``key=value`` segments following the tag.

    Returns:
        The quality value.
    """
    for parameter in parameters:
        key, _, value = parameter.partition("=")
        if key.strip().lower() != "q":
            continue
        raw = value.strip()
        try:
            qvalue = float(raw)
        except ValueError:
            logger.debug("malformed_qvalue_ignored", qvalue=value)
            continue
        if "_" in raw or not math.isfinite(qvalue):
            logger.debug("malformed_qvalue_ignored", qvalue=value)
            continue
        return qvalue
    return DEFAULT_QVALUE


def parse_entry(entry: str) -> Tuple[str, float]:
    """Split one header entry ("en-GB;q=0.8") into ("en-gb", 0.8)."""
    parts = entry.split(";")
    tag = parts[0].strip().lower()
    return tag, parse_qvalue(parts[1:])


class LanguageNegotiator:
    """Ranks the language tags of an Accept-Language header.

    Exact tags come first, ordered by descending quality value and by
    position in the header when values tie. When subtag promotion is
    enabled, the primary subtag of every entry is appended afterwards as one
    contiguous run weighted at ``subtag_weight``. Nothing is deduplicated,
    so a tag can appear both as an exact entry and as a promoted subtag.
    """

    @staticmethod
    def rank(
        header_value: Optional[str],
        subtag_weight: Union[float, bool, None] = DEFAULT_SUBTAG_WEIGHT,
    ) -> List[str]:
        """Rank the tags of an Accept-Language header value.

        Args:
            header_value: Raw Accept-Language value (e.g.,
                "fr-FR;q=0.9,en;q=0.5").
            subtag_weight: Weight of promoted primary subtags. ``0``,
                ``False`` or ``None`` disables promotion.

        Returns:
            Candidate tags, most preferred first. Empty for an empty header.

        Example:
            >>> LanguageNegotiator.rank("fr-fr;q=0.9,en;q=0.5", 0.1)
            ['fr-fr', 'en', 'fr', 'en']
        """
        if not header_value:
            return []

        tags = LanguageTags()
        subtags = LanguageTags()

        for entry in header_value.split(","):
            tag, qvalue = parse_entry(entry)
            tags.add_tag(tag, qvalue)
            if subtag_weight:
                subtags.add_tag(primary_subtag(tag), qvalue)

        ranked = tags.get_tags()

        if subtag_weight:
            promoted = LanguageTags()
            promoted.add_tags(subtags.get_tags(), float(subtag_weight))
            ranked.extend(promoted.get_tags())

        return ranked
