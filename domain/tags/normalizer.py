"""Tag normalization: blank removal, trimming, case folding, slugs and dedupe."""

import re
import unicodedata
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.tags.config import TagConfig

_SLUG_DISALLOWED = re.compile(r"[^a-z0-9\-_]+", re.IGNORECASE)


def parameterize(value: str, separator: str = "-") -> str:
    """
    Turn a tag into a URL-safe slug.

    Examples:
        >>> parameterize("Donald E. Knuth")
        'donald-e-knuth'
        >>> parameterize("  Crème brûlée ")
        'creme-brulee'

    Args:
        value: Raw tag text
        separator: Replacement for runs of disallowed characters

    Returns:
        Lowercase ASCII slug (may be empty if nothing survives)
    """
    ascii_only = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    slug = _SLUG_DISALLOWED.sub(separator, ascii_only)
    if separator:
        slug = re.sub(f"{re.escape(separator)}{{2,}}", separator, slug)
        slug = slug.strip(separator)
    return slug.lower()


def is_blank(value: object) -> bool:
    if value is None:
        return True
    return not str(value).strip()


def clean(names: Iterable[object], config: "TagConfig") -> list[str]:
    """
    Normalize raw tag names.

    Steps run strictly in order: drop blanks, strip, lowercase (if enabled),
    parameterize (if enabled), dedupe keeping the first occurrence. Values that a
    transform empties (e.g. a slug of pure punctuation) are dropped as well.
    """
    tags = [str(name).strip() for name in names if not is_blank(name)]

    if config.force_lowercase:
        tags = [tag.lower() for tag in tags]
    if config.force_parameterize:
        tags = [config.parameterizer(tag) for tag in tags]

    return list(dict.fromkeys(tag for tag in tags if tag))
