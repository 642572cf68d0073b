"""
Viewer embed references.

Artifacts are displayed through an externally hosted SuperSplat viewer.
Administrators paste either the viewer link or the full ``<iframe>``
embed snippet; both normalize to the viewer URL, which must point at
the SuperSplat host before it is stored.
"""

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

ALLOWED_VIEWER_HOST = "superspl.at"

_IFRAME_SRC_RE = re.compile(
    r"<iframe[^>]*src=[\"']([^\"']*" + re.escape(ALLOWED_VIEWER_HOST) + r"[^\"']*)[\"'][^>]*>",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class EmbedResolution:
    """Outcome of normalizing a pasted viewer reference."""

    url: str
    valid: bool


def extract_reference(text: str) -> str:
    """
    Pull the viewer URL out of a pasted link or iframe snippet.

    Input that already starts with ``http`` is returned unchanged. Otherwise
    the ``src`` of the first iframe pointing at the viewer host is returned.
    Anything else comes back as-is; callers reject it with
    :func:`is_valid_reference`.
    """
    if text.startswith("http"):
        return text

    match = _IFRAME_SRC_RE.search(text)
    if match and match.group(1):
        return match.group(1)

    return text


def is_valid_reference(url: str) -> bool:
    """Return True if ``url`` is an absolute URL on the viewer host."""
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError:
        return False

    if not parts.scheme or not parts.netloc:
        return False

    return hostname == ALLOWED_VIEWER_HOST


def resolve_reference(text: str) -> EmbedResolution:
    """Extract the viewer URL from ``text`` and report whether it is usable."""
    url = extract_reference(text)
    return EmbedResolution(url=url, valid=is_valid_reference(url))
