"""Data models for the lingua i18n system.

Defines resource bundles, request locale signals and the ranked tag bucket
set used during Accept-Language negotiation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional


@dataclass(frozen=True)
class ResourceBundle:
    """Localized content stored under one locale key.

    Frozen so bundles can be shared between concurrent requests.

    Attributes:
        locale: Locale key, taken verbatim from the bundle file name
            (e.g., "en", "de-de"). Never case-normalized.
        content: Opaque content tree parsed from the bundle file.
    """

    locale: str
    content: Any

    def __str__(self) -> str:
        return self.locale


@dataclass
class LanguageTags:
    """Language tags grouped by quality value.

    Tags sharing a qvalue keep their insertion order. Adding to an existing
    qvalue appends to its bucket, never replaces it. Duplicates are kept.

    Attributes:
        buckets: Mapping of qvalue to the tags registered with it.
    """

    buckets: Dict[float, List[str]] = field(default_factory=dict)

    def add_tag(self, tag: str, qvalue: float) -> None:
        """Append a tag to the bucket for qvalue.

        Args:
            tag: Language tag (e.g., "en-gb").
            qvalue: Quality value the tag was requested with.
        """
        self.buckets.setdefault(qvalue, []).append(tag)

    def add_tags(self, tags: Iterable[str], qvalue: float) -> None:
        """Append several tags, in order, to the bucket for qvalue.

        Args:
            tags: Language tags to add.
            qvalue: Quality value shared by all tags.
        """
        self.buckets.setdefault(qvalue, []).extend(tags)

    def get_tags(self) -> List[str]:
        """Flatten the buckets into one ordered list.

        Returns:
            Tags ordered by descending qvalue, insertion order within a
            qvalue.
        """
        result: List[str] = []
        for qvalue in sorted(self.buckets, reverse=True):
            result.extend(self.buckets[qvalue])
        return result

    def __len__(self) -> int:
        return sum(len(tags) for tags in self.buckets.values())


@dataclass(frozen=True)
class LocaleSignals:
    """Locale signals extracted from one request.

    Attributes:
        query_override: Locale passed as a query parameter, if any.
        cookie_override: Locale persisted in the override cookie, if any.
        accept_language: Raw Accept-Language header value, if any.
    """

    query_override: Optional[str] = None
    cookie_override: Optional[str] = None
    accept_language: Optional[str] = None

    @property
    def override(self) -> Optional[str]:
        """Explicit locale selection; the query parameter beats the cookie."""
        return self.query_override or self.cookie_override or None
